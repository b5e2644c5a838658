"""Result containers for execution previews.

Both containers are frozen dataclasses. Two previews computed from the same
snapshot and order compare equal field by field.
"""

from dataclasses import dataclass

from depthsim.core.models import OrderType, Side


@dataclass(frozen=True)
class BookWalk:
    """Raw outcome of walking one side of the book.

    Attributes:
        requested_quantity: Size the walk tried to fill
        filled_quantity: Size actually taken from the book
        total_cost: Sum of price * taken size over consumed levels
        levels_consumed: Number of levels that contributed a fill
        best_price: Price of the first level on the consumed side
    """

    requested_quantity: float
    filled_quantity: float
    total_cost: float
    levels_consumed: int
    best_price: float

    @property
    def remaining_quantity(self) -> float:
        return max(0.0, self.requested_quantity - self.filled_quantity)

    @property
    def average_price(self) -> float:
        """Quantity-weighted average fill price, 0 when nothing filled."""
        if self.filled_quantity <= 0:
            return 0.0
        return self.total_cost / self.filled_quantity


@dataclass(frozen=True)
class ExecutionMetrics:
    """Preview of how a hypothetical order would execute.

    Attributes:
        side: Order side
        order_type: Market or limit
        requested_quantity: Original order quantity
        filled_quantity: Quantity the book could absorb
        fill_percentage: filled_quantity / requested_quantity * 100 (0-100)
        average_fill_price: Quantity-weighted average price (0 if no fill)
        total_cost: Sum of price * filled size over consumed levels
        slippage_percent: abs(avg - best) / best * 100 (0 if no fill)
        market_impact_estimate: Flat fraction of total_cost (proxy only)
        estimated_fill_seconds: Latency heuristic
        best_price: Best price on the consumed side at walk time
        levels_consumed: Number of levels that contributed a fill

    Note:
        fill_percentage below 100 is the normal outcome of thin liquidity
        or a limit price that cuts the walk short, not an error.
    """

    side: Side
    order_type: OrderType
    requested_quantity: float
    filled_quantity: float
    fill_percentage: float
    average_fill_price: float
    total_cost: float
    slippage_percent: float
    market_impact_estimate: float
    estimated_fill_seconds: float
    best_price: float
    levels_consumed: int

    @property
    def unfilled_quantity(self) -> float:
        """Quantity the book could not absorb."""
        return max(0.0, self.requested_quantity - self.filled_quantity)

    @property
    def fully_filled(self) -> bool:
        return self.filled_quantity >= self.requested_quantity
