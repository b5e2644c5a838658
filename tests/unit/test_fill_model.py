"""Tests for the greedy book walk.

Tests that walk_book:
- Takes min(remaining, size) level by level, best first
- Stops once the order is filled or levels run out
- Stops limit orders at the first non-marketable level
- Leaves the levels it reads untouched
"""

from datetime import datetime, timezone

import pytest

from depthsim.analytics.simulation import BookWalk, consumed_levels, is_marketable, walk_book
from depthsim.core.models import BookSnapshot, OrderRequest, PriceLevel, Side, build_levels


def make_levels(
    prices: tuple[float, ...] = (100.0, 101.0, 102.0),
    sizes: tuple[float, ...] = (1.0, 2.0, 3.0),
) -> tuple[PriceLevel, ...]:
    """Helper to create price levels for testing."""
    return build_levels(prices, sizes)


def make_order(
    quantity: float,
    side: str = "buy",
    order_type: str = "market",
    limit_price: float | None = None,
) -> OrderRequest:
    """Helper to create an OrderRequest for testing."""
    return OrderRequest(
        side=side,
        order_type=order_type,
        quantity=quantity,
        limit_price=limit_price,
    )


class TestWalkBasics:
    """Basic walk behaviour."""

    def test_single_level_fill(self) -> None:
        walk = walk_book(make_levels(), make_order(quantity=0.5))

        assert walk.filled_quantity == 0.5
        assert walk.total_cost == pytest.approx(50.0)
        assert walk.levels_consumed == 1
        assert walk.best_price == 100.0
        assert walk.average_price == 100.0

    def test_fill_across_levels(self) -> None:
        walk = walk_book(make_levels(), make_order(quantity=2.5))

        # 1 @ 100 + 1.5 @ 101
        assert walk.filled_quantity == pytest.approx(2.5)
        assert walk.total_cost == pytest.approx(100.0 + 151.5)
        assert walk.levels_consumed == 2
        assert walk.average_price == pytest.approx(251.5 / 2.5)

    def test_exhausts_levels(self) -> None:
        walk = walk_book(make_levels(), make_order(quantity=100.0))

        assert walk.filled_quantity == pytest.approx(6.0)
        assert walk.remaining_quantity == pytest.approx(94.0)
        assert walk.levels_consumed == 3

    def test_stops_when_filled(self) -> None:
        """Exact fill of the first level consumes only that level."""
        walk = walk_book(make_levels(), make_order(quantity=1.0))

        assert walk.levels_consumed == 1
        assert walk.remaining_quantity == 0.0

    def test_empty_levels(self) -> None:
        walk = walk_book((), make_order(quantity=1.0))

        assert walk == BookWalk(
            requested_quantity=1.0,
            filled_quantity=0.0,
            total_cost=0.0,
            levels_consumed=0,
            best_price=0.0,
        )
        assert walk.average_price == 0.0

    def test_levels_are_not_modified(self) -> None:
        levels = make_levels()

        walk_book(levels, make_order(quantity=2.5))

        assert levels == make_levels()


class TestLimitWalk:
    """Marketability predicate and early exit."""

    def test_buy_stops_above_limit(self) -> None:
        walk = walk_book(
            make_levels(),
            make_order(quantity=6.0, order_type="limit", limit_price=101.0),
        )

        assert walk.filled_quantity == pytest.approx(3.0)
        assert walk.levels_consumed == 2

    def test_sell_stops_below_limit(self) -> None:
        bids = make_levels(prices=(99.0, 98.0, 97.0))
        walk = walk_book(
            bids,
            make_order(quantity=6.0, side="sell", order_type="limit", limit_price=98.0),
        )

        assert walk.filled_quantity == pytest.approx(3.0)
        assert walk.total_cost == pytest.approx(99.0 + 196.0)

    def test_never_skips_a_failing_level(self) -> None:
        """A later level that would pass is not reached past a failing one."""
        levels = (
            PriceLevel(price=100.0, size=1.0, cumulative_size=1.0),
            PriceLevel(price=105.0, size=1.0, cumulative_size=2.0),
            PriceLevel(price=101.0, size=1.0, cumulative_size=3.0),
        )
        walk = walk_book(
            levels,
            make_order(quantity=3.0, order_type="limit", limit_price=102.0),
        )

        assert walk.filled_quantity == 1.0
        assert walk.levels_consumed == 1


class TestIsMarketable:
    """Tests for the marketability predicate."""

    def test_market_accepts_any_price(self) -> None:
        assert is_marketable(1e9, make_order(quantity=1.0))

    @pytest.mark.parametrize(
        "price,expected",
        [(99.0, True), (100.0, True), (100.01, False)],
    )
    def test_buy_limit(self, price: float, expected: bool) -> None:
        order = make_order(quantity=1.0, order_type="limit", limit_price=100.0)
        assert is_marketable(price, order) is expected

    @pytest.mark.parametrize(
        "price,expected",
        [(101.0, True), (100.0, True), (99.99, False)],
    )
    def test_sell_limit(self, price: float, expected: bool) -> None:
        order = make_order(quantity=1.0, side="sell", order_type="limit", limit_price=100.0)
        assert is_marketable(price, order) is expected

    def test_limit_without_price_is_never_marketable(self) -> None:
        order = make_order(quantity=1.0, order_type="limit")
        assert is_marketable(100.0, order) is False


class TestConsumedLevels:
    """Side selection."""

    def test_buy_uses_asks_sell_uses_bids(self) -> None:
        book = BookSnapshot.from_arrays(
            bid_prices=[99.0],
            bid_sizes=[1.0],
            ask_prices=[100.0],
            ask_sizes=[1.0],
            timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

        assert consumed_levels(book, Side.BUY) == book.asks
        assert consumed_levels(book, Side.SELL) == book.bids
        assert consumed_levels(book, "buy") == book.asks

    def test_unknown_side_rejected(self) -> None:
        book = BookSnapshot(timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc))

        with pytest.raises(ValueError):
            consumed_levels(book, "hold")
