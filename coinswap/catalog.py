from __future__ import annotations
from typing import Iterable, Iterator, Protocol
import pandas as pd
from coinswap.models import Coin
from coinswap.utils.log import get_logger
from coinswap.utils.settings import settings

log = get_logger(__name__)

class CoinSource(Protocol):
    def fetch_coin_page(self, page: int) -> list[Coin]: ...

def filter_coins(coins: Iterable[Coin], term: str) -> list[Coin]:
    """Case-insensitive substring match on name or symbol, order preserved."""
    needle = (term or "").lower()
    return [c for c in coins if needle in c.name.lower() or needle in c.symbol.lower()]

def coins_frame(coins: Iterable[Coin], ranks: dict[str, int] | None = None) -> pd.DataFrame:
    ranks = ranks or {}
    rows = [{"rank": ranks.get(c.id), "name": c.name, "symbol": c.symbol.upper(), "id": c.id} for c in coins]
    return pd.DataFrame(rows, columns=["rank", "name", "symbol", "id"])

class CoinCatalog:
    def __init__(self, source: CoinSource, pages: int | None = None, max_coins: int | None = None):
        self.source = source
        self.pages = pages or settings.catalog_pages
        self.max_coins = max_coins or settings.max_coins
        self._coins: tuple[Coin, ...] = ()
        self._by_id: dict[str, Coin] = {}
        self._rank: dict[str, int] = {}

    @property
    def coins(self) -> tuple[Coin, ...]:
        return self._coins

    def __len__(self) -> int:
        return len(self._coins)

    def __iter__(self) -> Iterator[Coin]:
        return iter(self._coins)

    def load(self) -> tuple[Coin, ...]:
        merged: list[Coin] = []
        for page in range(1, self.pages + 1):
            merged.extend(self.source.fetch_coin_page(page))

        # rankings can shift between page requests; keep the first sighting
        seen: dict[str, Coin] = {}
        for coin in merged:
            seen.setdefault(coin.id, coin)
        coins = tuple(seen.values())[: self.max_coins]

        # swap only once every page came back
        self._coins = coins
        self._by_id = {c.id: c for c in coins}
        self._rank = {c.id: i for i, c in enumerate(coins, start=1)}
        log.info("catalog loaded: %s coins (%s fetched)", len(coins), len(merged))
        return coins

    def filter(self, term: str) -> list[Coin]:
        return filter_coins(self._coins, term)

    def get(self, coin_id: str | None) -> Coin | None:
        return self._by_id.get(coin_id) if coin_id else None

    def label(self, coin_id: str | None) -> str:
        coin = self.get(coin_id)
        return coin.label if coin else (coin_id or "")

    def to_frame(self, coins: Iterable[Coin] | None = None) -> pd.DataFrame:
        return coins_frame(self._coins if coins is None else coins, self._rank)
