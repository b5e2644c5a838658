"""Unit tests for book view helpers."""

from datetime import datetime, timezone

import pandas as pd
import pytest

from depthsim.analytics.book import (
    DEPTH_CHART_COLUMNS,
    depth_chart_data,
    max_cumulative_size,
    top_of_book,
)
from depthsim.core.models import BookSnapshot


@pytest.fixture
def book() -> BookSnapshot:
    """Three bids, two asks."""
    return BookSnapshot.from_arrays(
        bid_prices=[99.0, 98.0, 97.0],
        bid_sizes=[1.0, 2.0, 3.0],
        ask_prices=[101.0, 102.0],
        ask_sizes=[0.5, 4.0],
        timestamp=datetime(2024, 1, 15, tzinfo=timezone.utc),
    )


class TestDepthChartData:
    """Tests for depth_chart_data."""

    def test_columns_and_length(self, book):
        df = depth_chart_data(book)

        assert list(df.columns) == DEPTH_CHART_COLUMNS
        assert len(df) == 5

    def test_sorted_by_price(self, book):
        df = depth_chart_data(book)

        assert df["price"].tolist() == [97.0, 98.0, 99.0, 101.0, 102.0]
        assert df["side"].tolist() == ["bid", "bid", "bid", "ask", "ask"]

    def test_depths_are_cumulative(self, book):
        df = depth_chart_data(book)

        assert df["bid_depth"].tolist() == [6.0, 3.0, 1.0, 0.0, 0.0]
        assert df["ask_depth"].tolist() == [0.0, 0.0, 0.0, 0.5, 4.5]

    def test_one_sided_book_is_empty(self):
        one_sided = BookSnapshot.from_arrays(
            bid_prices=[99.0],
            bid_sizes=[1.0],
            ask_prices=[],
            ask_sizes=[],
            timestamp=datetime(2024, 1, 15, tzinfo=timezone.utc),
        )

        df = depth_chart_data(one_sided)

        assert isinstance(df, pd.DataFrame)
        assert df.empty
        assert list(df.columns) == DEPTH_CHART_COLUMNS


class TestTopOfBook:
    """Tests for top_of_book and max_cumulative_size."""

    def test_truncates_each_side(self, book):
        bids, asks = top_of_book(book, depth=2)

        assert [lvl.price for lvl in bids] == [99.0, 98.0]
        assert [lvl.price for lvl in asks] == [101.0, 102.0]

    def test_depth_zero(self, book):
        assert top_of_book(book, depth=0) == ((), ())

    def test_negative_depth(self, book):
        with pytest.raises(ValueError, match="non-negative"):
            top_of_book(book, depth=-1)

    def test_max_cumulative_size(self, book):
        assert max_cumulative_size(book) == 6.0
        assert max_cumulative_size(book, depth=1) == 1.0

    def test_max_cumulative_size_empty(self):
        empty = BookSnapshot(timestamp=datetime(2024, 1, 15, tzinfo=timezone.utc))

        assert max_cumulative_size(empty) == 0.0
