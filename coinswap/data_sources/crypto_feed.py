from numbers import Real
from pydantic import ValidationError
from coinswap.models import Coin
from coinswap.utils.http import fetch_json
from coinswap.utils.errors import ParseError
from coinswap.utils.log import get_logger
from coinswap.utils.settings import settings

log = get_logger(__name__)

class CoinGeckoClient:
    """Thin CoinGecko wrapper: one request per call, no retries, no cache."""

    def __init__(self, base: str | None = None, vs: str | None = None,
                 per_page: int | None = None, timeout: float | None = None):
        self.base = (base or settings.coingecko_base).rstrip("/")
        self.vs = vs or settings.vs_currency
        self.per_page = per_page or settings.per_page
        self.timeout = timeout or settings.http_timeout

    def _get(self, path: str, params: dict):
        return fetch_json(f"{self.base}{path}", params=params, timeout=self.timeout)

    def fetch_coin_page(self, page: int) -> list[Coin]:
        data = self._get("/coins/markets", {
            "vs_currency": self.vs, "order": "market_cap_desc",
            "per_page": self.per_page, "page": page,
        })
        if not isinstance(data, list):
            raise ParseError(f"coins/markets page {page}: expected a list, got {type(data).__name__}")
        try:
            coins = [Coin.model_validate(row) for row in data]
        except ValidationError as e:
            raise ParseError(f"coins/markets page {page}: {e.error_count()} bad rows") from e
        log.debug("coins page %s -> %s rows", page, len(coins))
        return coins

    def fetch_spot_price(self, coin_id: str) -> float | None:
        data = self._get("/simple/price", {"ids": coin_id, "vs_currencies": self.vs})
        if not isinstance(data, dict):
            raise ParseError(f"simple/price: expected an object, got {type(data).__name__}")
        entry = data.get(coin_id)
        if not isinstance(entry, dict):
            return None
        price = entry.get(self.vs)
        if price is None:
            return None
        if isinstance(price, bool) or not isinstance(price, Real):
            raise ParseError(f"simple/price: non-numeric {self.vs} price for {coin_id!r}")
        return float(price)
