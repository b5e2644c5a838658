"""Execution preview of a hypothetical order against a book snapshot.

This module provides the ExecutionSimulator class and the ``simulate``
convenience function. Given a snapshot and an order they estimate how much
would fill, at what average price, with what slippage versus the best
quote, plus a market-impact proxy and a fill-latency heuristic.

The simulator holds no state between calls and does no I/O. Call it again
on every new snapshot or every change to the hypothetical order.

Outcomes:
    - ExecutionMetrics: the book had liquidity on the consumed side
    - None: no snapshot yet, or the consumed side is empty
    - InvalidOrderError: the order itself cannot be simulated

Example:
    >>> from datetime import datetime, timezone
    >>> from depthsim.core.models import BookSnapshot, OrderRequest
    >>> book = BookSnapshot.from_arrays(
    ...     bid_prices=[99.0, 98.0], bid_sizes=[1.0, 1.0],
    ...     ask_prices=[100.0, 102.0, 105.0], ask_sizes=[1.0, 1.0, 1.0],
    ...     timestamp=datetime.now(timezone.utc),
    ... )
    >>> order = OrderRequest(
    ...     side="buy", order_type="limit", limit_price=102.0, quantity=3
    ... )
    >>> metrics = simulate(book, order)
    >>> print(f"Filled {metrics.fill_percentage:.2f}% at {metrics.average_fill_price}")
    Filled 66.67% at 101.0
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from depthsim.analytics.impact import estimate_market_impact
from depthsim.analytics.latency import LatencyModel
from depthsim.analytics.simulation.fill_model import consumed_levels, walk_book
from depthsim.analytics.simulation.results import ExecutionMetrics
from depthsim.analytics.slippage import calculate_slippage_pct
from depthsim.core.config import SimulatorConfig
from depthsim.core.exceptions import InvalidOrderError
from depthsim.core.models import BookSnapshot, OrderRequest, OrderType

logger = logging.getLogger(__name__)


def validate_order(order: OrderRequest) -> None:
    """Check the rules an order must meet before it can be simulated.

    Rules:
        - quantity is finite and positive
        - limit orders carry a finite, positive limit_price
        - market orders carry no limit_price

    Raises:
        InvalidOrderError: Listing every rule the order breaks
    """
    problems: List[str] = []

    if not math.isfinite(order.quantity) or order.quantity <= 0:
        problems.append(f"quantity must be greater than 0, got {order.quantity}")

    order_type = OrderType(order.order_type)
    if order_type == OrderType.LIMIT:
        if order.limit_price is None:
            problems.append("limit orders require a limit_price")
        elif not math.isfinite(order.limit_price) or order.limit_price <= 0:
            problems.append(
                f"limit_price must be greater than 0 for limit orders, got {order.limit_price}"
            )
    elif order_type == OrderType.MARKET:
        if order.limit_price is not None:
            problems.append("market orders must not carry a limit_price")
    else:
        raise ValueError(f"Unsupported order type: {order.order_type!r}")

    if problems:
        raise InvalidOrderError(problems)


class ExecutionSimulator:
    """Read-only execution preview against order book snapshots.

    Attributes:
        config: Policy constants (impact rate, latency baselines)
        latency_model: Fill latency heuristic
    """

    def __init__(
        self,
        config: Optional[SimulatorConfig] = None,
        latency_model: Optional[LatencyModel] = None,
    ):
        """Initialize the simulator.

        Args:
            config: Policy constants. If None, loads SimulatorConfig defaults
                (with any DEPTHSIM_SIM_* environment overrides).
            latency_model: Latency heuristic. If None, builds a deterministic
                LatencyModel from ``config``.
        """
        self.config = config or SimulatorConfig()
        self.latency_model = latency_model or LatencyModel.from_config(self.config)

    def simulate(
        self,
        book: Optional[BookSnapshot],
        order: OrderRequest,
    ) -> Optional[ExecutionMetrics]:
        """Preview ``order`` against ``book``.

        Args:
            book: Latest snapshot, or None before the first one arrives
            order: Hypothetical order

        Returns:
            ExecutionMetrics, or None when there is no snapshot or the
            consumed side of the book is empty

        Raises:
            InvalidOrderError: If the order breaks a rule in validate_order
        """
        validate_order(order)

        if book is None:
            logger.debug("No book snapshot yet, nothing to simulate")
            return None

        levels = consumed_levels(book, order.side)
        if not levels:
            logger.debug(
                f"Consumed side is empty for {order.side.value} order on "
                f"{book.symbol or 'book'}, nothing to simulate"
            )
            return None

        walk = walk_book(levels, order)

        if walk.filled_quantity == 0:
            average_fill_price = 0.0
            slippage_percent = 0.0
        else:
            average_fill_price = walk.average_price
            slippage_percent = calculate_slippage_pct(average_fill_price, walk.best_price)

        fill_percentage = walk.filled_quantity / order.quantity * 100

        metrics = ExecutionMetrics(
            side=order.side,
            order_type=order.order_type,
            requested_quantity=order.quantity,
            filled_quantity=walk.filled_quantity,
            fill_percentage=fill_percentage,
            average_fill_price=average_fill_price,
            total_cost=walk.total_cost,
            slippage_percent=slippage_percent,
            market_impact_estimate=estimate_market_impact(
                walk.total_cost, self.config.market_impact_rate
            ),
            estimated_fill_seconds=self.latency_model.estimate(
                order.order_type, order.timing
            ),
            best_price=walk.best_price,
            levels_consumed=walk.levels_consumed,
        )

        logger.debug(
            f"Simulated {order.order_type.value} {order.side.value} {order.quantity}: "
            f"filled {metrics.filled_quantity} ({metrics.fill_percentage:.2f}%) "
            f"over {metrics.levels_consumed} levels, avg {metrics.average_fill_price:.4f}"
        )
        return metrics


def simulate(
    book: Optional[BookSnapshot],
    order: OrderRequest,
    config: Optional[SimulatorConfig] = None,
) -> Optional[ExecutionMetrics]:
    """
    Preview ``order`` against ``book`` with a deterministic latency model.

    Convenience wrapper around ExecutionSimulator for one-off calls.

    Args:
        book: Latest snapshot, or None before the first one arrives
        order: Hypothetical order
        config: Policy constants (default: SimulatorConfig())

    Returns:
        ExecutionMetrics, or None when there is nothing to simulate

    Raises:
        InvalidOrderError: If the order cannot be simulated
    """
    return ExecutionSimulator(config=config).simulate(book, order)
