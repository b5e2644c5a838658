"""Analytics over order book snapshots and hypothetical orders."""

from depthsim.analytics.book import (
    depth_chart_data,
    max_cumulative_size,
    top_of_book,
)
from depthsim.analytics.slippage import calculate_slippage_pct
from depthsim.analytics.impact import DEFAULT_IMPACT_RATE, estimate_market_impact
from depthsim.analytics.latency import LatencyModel
from depthsim.analytics.simulation import (
    ExecutionMetrics,
    ExecutionSimulator,
    SimulationSession,
    simulate,
)
from depthsim.analytics import simulation

__all__ = [
    # Book views
    "depth_chart_data",
    "max_cumulative_size",
    "top_of_book",
    # Slippage & Impact
    "calculate_slippage_pct",
    "DEFAULT_IMPACT_RATE",
    "estimate_market_impact",
    # Latency
    "LatencyModel",
    # Execution preview
    "ExecutionMetrics",
    "ExecutionSimulator",
    "SimulationSession",
    "simulate",
    # Simulation module
    "simulation",
]
