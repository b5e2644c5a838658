"""Greedy walk of one side of the book.

A buy consumes the ask ladder from the lowest ask upward; a sell consumes
the bid ladder from the highest bid downward. The walk takes
``min(remaining, level.size)`` at each level in the order given and stops
as soon as the order is filled or the levels run out. Limit orders stop
earlier, at the first level whose price fails the limit:

    buy:  level.price <= limit_price
    sell: level.price >= limit_price

Levels past that point are never touched, even when quantity remains.
The walk reads the snapshot and never modifies it.

Example:
    >>> from datetime import datetime, timezone
    >>> from depthsim.core.models import BookSnapshot, OrderRequest
    >>> book = BookSnapshot.from_arrays(
    ...     bid_prices=[99.0], bid_sizes=[1.0],
    ...     ask_prices=[100.0, 101.0], ask_sizes=[2.0, 3.0],
    ...     timestamp=datetime.now(timezone.utc),
    ... )
    >>> order = OrderRequest(side="buy", order_type="market", quantity=4)
    >>> walk = walk_book(consumed_levels(book, order.side), order)
    >>> walk.total_cost, walk.average_price
    (402.0, 100.5)
"""

from __future__ import annotations

from typing import Sequence, Tuple

from depthsim.analytics.simulation.results import BookWalk
from depthsim.core.models import BookSnapshot, OrderRequest, OrderType, PriceLevel, Side


def consumed_levels(book: BookSnapshot, side: Side) -> Tuple[PriceLevel, ...]:
    """Levels an order on ``side`` would take liquidity from.

    Raises:
        ValueError: If side is not a known Side
    """
    side = Side(side)
    if side == Side.BUY:
        return book.asks
    if side == Side.SELL:
        return book.bids
    raise ValueError(f"Unsupported side: {side!r}")


def is_marketable(price: float, order: OrderRequest) -> bool:
    """Whether a resting level at ``price`` satisfies the order's price constraint.

    Market orders accept any price.

    Raises:
        ValueError: If the order type or side is not recognised
    """
    order_type = OrderType(order.order_type)
    if order_type == OrderType.MARKET:
        return True
    if order_type == OrderType.LIMIT:
        if order.limit_price is None:
            return False
        side = Side(order.side)
        if side == Side.BUY:
            return price <= order.limit_price
        if side == Side.SELL:
            return price >= order.limit_price
        raise ValueError(f"Unsupported side: {order.side!r}")
    raise ValueError(f"Unsupported order type: {order.order_type!r}")


def walk_book(levels: Sequence[PriceLevel], order: OrderRequest) -> BookWalk:
    """Fill ``order`` greedily against ``levels`` (best first).

    Args:
        levels: Consumed side of the book, best price first
        order: Hypothetical order

    Returns:
        BookWalk with filled quantity, cost and levels consumed.
        best_price is 0.0 when ``levels`` is empty.
    """
    best_price = levels[0].price if levels else 0.0

    remaining = order.quantity
    total_cost = 0.0
    total_filled = 0.0
    levels_consumed = 0

    for level in levels:
        if remaining <= 0:
            break
        if not is_marketable(level.price, order):
            break

        fill_size = min(remaining, level.size)
        total_cost += fill_size * level.price
        total_filled += fill_size
        remaining -= fill_size
        levels_consumed += 1

    return BookWalk(
        requested_quantity=order.quantity,
        filled_quantity=total_filled,
        total_cost=total_cost,
        levels_consumed=levels_consumed,
        best_price=best_price,
    )
