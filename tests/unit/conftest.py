"""Shared fixtures: sample coins and an in-memory market-data client."""

import pytest

from coinswap.models import Coin
from coinswap.utils.errors import NetworkError


def make_coins(n: int, start: int = 1) -> list[Coin]:
    return [Coin(id=f"coin-{i}", name=f"Coin {i}", symbol=f"c{i}") for i in range(start, start + n)]


class FakeMarket:
    """Stands in for CoinGeckoClient; records every call it gets."""

    def __init__(self, pages=None, prices=None, fail_pages=(), fail_prices=(), on_price=None):
        self.pages = pages or {}
        self.prices = prices or {}
        self.fail_pages = set(fail_pages)
        self.fail_prices = set(fail_prices)
        self.on_price = on_price
        self.page_calls: list[int] = []
        self.price_calls: list[str] = []

    def fetch_coin_page(self, page: int) -> list[Coin]:
        self.page_calls.append(page)
        if page in self.fail_pages:
            raise NetworkError(f"HTTP 500: page {page}")
        return list(self.pages.get(page, []))

    def fetch_spot_price(self, coin_id: str):
        self.price_calls.append(coin_id)
        if self.on_price:
            self.on_price(coin_id)
        if coin_id in self.fail_prices:
            raise NetworkError("HTTP 503: upstream down")
        return self.prices.get(coin_id)

    @property
    def calls(self) -> int:
        return len(self.page_calls) + len(self.price_calls)


@pytest.fixture
def majors() -> list[Coin]:
    return [
        Coin(id="bitcoin", name="Bitcoin", symbol="btc"),
        Coin(id="ethereum", name="Ethereum", symbol="eth"),
        Coin(id="tether", name="Tether", symbol="usdt"),
        Coin(id="wrapped-bitcoin", name="Wrapped Bitcoin", symbol="wbtc"),
        Coin(id="solana", name="Solana", symbol="sol"),
    ]


@pytest.fixture
def market(majors) -> FakeMarket:
    return FakeMarket(
        pages={1: majors[:3], 2: majors[3:]},
        prices={"bitcoin": 50000.0, "ethereum": 2000.0, "solana": 150.0, "tether": 1.0},
    )
