from __future__ import annotations
import itertools
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Literal, Protocol
from coinswap.calculator import compute, validate_investment, validate_pair
from coinswap.catalog import CoinCatalog
from coinswap.models import Coin, PriceQuote, Selection, SwapOutcome
from coinswap.utils.engine import Engine, EngineState
from coinswap.utils.errors import InvalidInput, MarketDataError
from coinswap.utils.log import get_logger

log = get_logger(__name__)

Side = Literal["buy", "sell"]
SIDES: tuple[Side, ...] = ("buy", "sell")

LOAD_FAILED = "Failed to load coin list. Please refresh."
FETCHING = "Fetching live prices..."
PRICE_MISSING = "Could not fetch price data. Try again later."
FETCH_FAILED = "Error fetching data: {error}"

class MarketData(Protocol):
    def fetch_coin_page(self, page: int) -> list[Coin]: ...
    def fetch_spot_price(self, coin_id: str) -> float | None: ...

@dataclass
class SideState:
    search: str = ""
    options: list[Coin] = field(default_factory=list)
    selected: str | None = None

    def repopulate(self, coins: list[Coin]):
        # a re-filled dropdown lands on its first entry
        self.options = coins
        self.selected = coins[0].id if coins else None

    @property
    def option_ids(self) -> list[str]:
        return [c.id for c in self.options]

class SwapSession:
    """
    One browser session: owns the catalog, both selectors, the amount and
    whatever the result area currently shows.

    Handlers (``on_*``) are what the page wires to widget callbacks.
    """

    def __init__(self, client: MarketData, catalog: CoinCatalog | None = None):
        self.client = client
        self.catalog = catalog if catalog is not None else CoinCatalog(client)
        self.engine = Engine()
        self.sides: dict[Side, SideState] = {s: SideState() for s in SIDES}
        self.amount_raw = None
        self.message: str | None = None
        self.outcome: SwapOutcome | None = None
        self.started = False
        self._tickets = itertools.count(1)
        self._latest = 0

    # ---------- catalog ----------
    def start(self) -> bool:
        if self.started:
            return len(self.catalog) > 0
        self.started = True
        return self.reload()

    def reload(self) -> bool:
        self.engine.enter(EngineState.LOADING)
        try:
            with self.engine.action("Load coin list", "catalog.load", pages=self.catalog.pages):
                self.catalog.load()
        except MarketDataError as e:
            log.warning("catalog load failed: %s", e)
            self.message = LOAD_FAILED
            return False
        for side in SIDES:
            self.on_search_changed(side, self.sides[side].search)
        if self.message == LOAD_FAILED:
            self.message = None
        return True

    # ---------- input events ----------
    def on_search_changed(self, side: Side, term: str | None):
        state = self.sides[side]
        state.search = term or ""
        state.repopulate(self.catalog.filter(state.search))

    def on_coin_selected(self, side: Side, coin_id: str | None):
        self.sides[side].selected = coin_id or None

    def on_amount_changed(self, value):
        self.amount_raw = value

    def validated_selection(self) -> Selection:
        investment = validate_investment(self.amount_raw)
        buy_id, sell_id = validate_pair(self.sides["buy"].selected, self.sides["sell"].selected)
        return Selection(buy_coin_id=buy_id, sell_coin_id=sell_id, investment_amount=investment)

    # ---------- calculate ----------
    def _show(self, ticket: int, message: str | None = None, outcome: SwapOutcome | None = None) -> bool:
        if ticket != self._latest:
            log.info("dropping stale calculation #%s (latest #%s)", ticket, self._latest)
            return False
        self.message, self.outcome = message, outcome
        return True

    def _fetch_pair(self, buy_id: str, sell_id: str) -> tuple[PriceQuote, PriceQuote]:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="price") as pool:
            buy_f = pool.submit(self.client.fetch_spot_price, buy_id)
            sell_f = pool.submit(self.client.fetch_spot_price, sell_id)
            return (PriceQuote(coin_id=buy_id, usd_price=buy_f.result()),
                    PriceQuote(coin_id=sell_id, usd_price=sell_f.result()))

    def on_calculate(self) -> SwapOutcome | None:
        ticket = self._latest = next(self._tickets)
        engine = self.engine
        buy_id, sell_id = self.sides["buy"].selected, self.sides["sell"].selected
        try:
            with engine.action("Calculate return", "swap.calculate", ticket=ticket, buy=buy_id, sell=sell_id):
                engine.enter(EngineState.VALIDATING)
                try:
                    sel = self.validated_selection()
                except InvalidInput as e:
                    engine.reject(str(e))
                    self._show(ticket, str(e))
                    return None

                engine.enter(EngineState.FETCHING)
                self._show(ticket, FETCHING)
                buy, sell = self._fetch_pair(sel.buy_coin_id, sel.sell_coin_id)
                if buy.missing or sell.missing:
                    log.info("no price for %s", [q.coin_id for q in (buy, sell) if q.missing])
                    engine.reject(PRICE_MISSING)
                    self._show(ticket, PRICE_MISSING)
                    return None

                engine.enter(EngineState.COMPUTING)
                outcome = SwapOutcome(investment=sel.investment_amount, buy=buy, sell=sell,
                                      result=compute(sel.investment_amount, buy.usd_price, sell.usd_price))
        except MarketDataError as e:
            self._show(ticket, FETCH_FAILED.format(error=e))
            return None
        return outcome if self._show(ticket, outcome=outcome) else None
