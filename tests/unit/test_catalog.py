"""Tests for CoinCatalog: paged load, truncation, de-duplication and search."""

import pytest

from coinswap.catalog import CoinCatalog, coins_frame, filter_coins
from coinswap.models import Coin
from coinswap.utils.errors import NetworkError, ParseError

from .conftest import FakeMarket, make_coins


class TestFilter:
    def test_empty_term_returns_everything_in_order(self, majors):
        assert filter_coins(majors, "") == majors

    def test_matches_name_case_insensitively(self, majors):
        assert [c.id for c in filter_coins(majors, "BITCOIN")] == ["bitcoin", "wrapped-bitcoin"]

    def test_matches_symbol_substring(self, majors):
        assert [c.id for c in filter_coins(majors, "bt")] == ["bitcoin", "wrapped-bitcoin"]
        assert [c.id for c in filter_coins(majors, "usd")] == ["tether"]

    def test_substring_not_fuzzy(self, majors):
        assert filter_coins(majors, "btcn") == []
        assert filter_coins(majors, "sln") == []

    def test_every_hit_contains_term_and_order_kept(self, majors):
        for term in ["e", "T", "oin", "so", "zzz"]:
            hits = filter_coins(majors, term)
            assert all(term.lower() in c.name.lower() or term.lower() in c.symbol.lower() for c in hits)
            assert hits == [c for c in majors if c in hits]

    def test_returns_new_list(self, market):
        catalog = CoinCatalog(market)
        catalog.load()
        hits = catalog.filter("")
        hits.clear()
        assert len(catalog) == 5


class TestLoad:
    def test_merges_pages_in_order(self, market, majors):
        catalog = CoinCatalog(market)
        assert catalog.load() == tuple(majors)
        assert market.page_calls == [1, 2]

    def test_truncates_to_max_coins(self):
        market = FakeMarket(pages={1: make_coins(250), 2: make_coins(250, start=251)})
        catalog = CoinCatalog(market, pages=2, max_coins=400)
        coins = catalog.load()
        assert len(coins) == 400
        assert coins[0].id == "coin-1"
        assert coins[-1].id == "coin-400"

    def test_drops_duplicate_ids_keeping_first(self):
        page1 = make_coins(3)
        shifted = Coin(id="coin-3", name="Coin 3 (moved)", symbol="c3")
        market = FakeMarket(pages={1: page1, 2: [shifted, *make_coins(2, start=4)]})
        catalog = CoinCatalog(market, pages=2, max_coins=10)
        coins = catalog.load()
        assert [c.id for c in coins] == ["coin-1", "coin-2", "coin-3", "coin-4", "coin-5"]
        assert catalog.get("coin-3").name == "Coin 3"

    def test_second_page_failure_keeps_previous_catalog(self, market, majors):
        catalog = CoinCatalog(market)
        catalog.load()
        market.fail_pages.add(2)
        with pytest.raises(NetworkError):
            catalog.load()
        assert catalog.coins == tuple(majors)

    def test_first_load_failure_leaves_catalog_empty(self):
        market = FakeMarket(pages={1: make_coins(3)}, fail_pages={2})
        catalog = CoinCatalog(market)
        with pytest.raises(NetworkError):
            catalog.load()
        assert len(catalog) == 0
        assert catalog.filter("") == []

    def test_parse_errors_propagate(self):
        class Broken(FakeMarket):
            def fetch_coin_page(self, page):
                raise ParseError("not a list")

        with pytest.raises(ParseError):
            CoinCatalog(Broken()).load()


class TestLookup:
    def test_get_and_label(self, market):
        catalog = CoinCatalog(market)
        catalog.load()
        assert catalog.get("solana").symbol == "sol"
        assert catalog.label("solana") == "Solana (SOL)"
        assert catalog.get("nope") is None
        assert catalog.get(None) is None
        assert catalog.label("nope") == "nope"

    def test_frame_keeps_catalog_rank(self, market):
        catalog = CoinCatalog(market)
        catalog.load()
        df = catalog.to_frame(catalog.filter("bitcoin"))
        assert list(df.columns) == ["rank", "name", "symbol", "id"]
        assert df["rank"].tolist() == [1, 4]
        assert df["symbol"].tolist() == ["BTC", "WBTC"]

    def test_empty_frame(self):
        df = coins_frame([])
        assert df.empty
        assert list(df.columns) == ["rank", "name", "symbol", "id"]
