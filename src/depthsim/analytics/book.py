"""View-ready data derived from a book snapshot.

Functions here feed the ladder and depth-chart views: top-of-book rows, the
scale for depth bars, and a price-sorted depth series.
"""

from typing import Tuple

import pandas as pd

from depthsim.core.models import BookSnapshot, PriceLevel

DEPTH_CHART_COLUMNS = ["price", "bid_depth", "ask_depth", "side"]


def top_of_book(
    book: BookSnapshot,
    depth: int = 15,
) -> Tuple[Tuple[PriceLevel, ...], Tuple[PriceLevel, ...]]:
    """Best ``depth`` levels on each side as (bids, asks).

    Raises:
        ValueError: If depth is negative
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    return book.bids[:depth], book.asks[:depth]


def max_cumulative_size(book: BookSnapshot, depth: int = 15) -> float:
    """Largest cumulative size among the top ``depth`` levels of either side.

    Used to scale depth bars. Returns 0.0 for an empty book.
    """
    bids, asks = top_of_book(book, depth)
    totals = [level.cumulative_size for level in bids + asks]
    return max(totals) if totals else 0.0


def depth_chart_data(book: BookSnapshot) -> pd.DataFrame:
    """
    Cumulative depth series for a depth chart.

    Each bid level contributes a row with its cumulative size as bid_depth
    and zero ask_depth; ask levels the other way round. Rows are sorted by
    ascending price, so bids run from the deepest level up to the best bid,
    followed by asks from the best ask outward.

    Args:
        book: Snapshot to chart

    Returns:
        DataFrame with columns: price, bid_depth, ask_depth, side ('bid' or
        'ask'). Empty (with those columns) unless both sides have levels.
    """
    if not book.is_usable:
        return pd.DataFrame(columns=DEPTH_CHART_COLUMNS)

    rows = [
        {
            "price": level.price,
            "bid_depth": level.cumulative_size,
            "ask_depth": 0.0,
            "side": "bid",
        }
        for level in book.bids
    ]
    rows.extend(
        {
            "price": level.price,
            "bid_depth": 0.0,
            "ask_depth": level.cumulative_size,
            "side": "ask",
        }
        for level in book.asks
    )

    df = pd.DataFrame(rows, columns=DEPTH_CHART_COLUMNS)
    return df.sort_values("price").reset_index(drop=True)
