"""Execution preview of hypothetical orders against book snapshots.

Core Components:
    ExecutionSimulator: Stateless preview of one order against one snapshot
    ExecutionMetrics: Fill, slippage, impact and latency estimates
    walk_book: Greedy fill walk over one side of the book
    SimulationSession: Keeps a preview current as snapshots arrive

Example:
    >>> from datetime import datetime, timezone
    >>> from depthsim.core.models import BookSnapshot, OrderRequest
    >>> from depthsim.analytics.simulation import simulate
    >>>
    >>> book = BookSnapshot.from_arrays(
    ...     bid_prices=(44990.0, 44985.0),
    ...     bid_sizes=(1.5, 2.0),
    ...     ask_prices=(45010.0, 45015.0),
    ...     ask_sizes=(0.8, 3.2),
    ...     timestamp=datetime.now(timezone.utc),
    ... )
    >>> order = OrderRequest(side="buy", order_type="market", quantity=2.0)
    >>> metrics = simulate(book, order)
    >>> print(f"Slippage: {metrics.slippage_percent:.4f}%")
"""

from depthsim.analytics.simulation.fill_model import (
    consumed_levels,
    is_marketable,
    walk_book,
)
from depthsim.analytics.simulation.results import BookWalk, ExecutionMetrics
from depthsim.analytics.simulation.simulator import (
    ExecutionSimulator,
    simulate,
    validate_order,
)
from depthsim.analytics.simulation.session import SimulationSession

__all__ = [
    "BookWalk",
    "ExecutionMetrics",
    "ExecutionSimulator",
    "SimulationSession",
    "consumed_levels",
    "is_marketable",
    "simulate",
    "validate_order",
    "walk_book",
]
