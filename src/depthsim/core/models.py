"""Core data models for order book snapshots and hypothetical orders."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Sequence, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)


class Side(str, Enum):
    """Order side."""

    BUY = "buy"
    SELL = "sell"


class OrderType(str, Enum):
    """Supported hypothetical order types."""

    MARKET = "market"
    LIMIT = "limit"


class TimingHint(str, Enum):
    """Advisory execution horizon chosen by the user.

    Only scales the latency estimate; never changes the fill walk.
    """

    IMMEDIATE = "immediate"
    FIVE_SECONDS = "5s"
    TEN_SECONDS = "10s"
    THIRTY_SECONDS = "30s"

    @property
    def multiplier(self) -> int:
        """Scalar applied to the base latency."""
        return _TIMING_MULTIPLIERS[self]


_TIMING_MULTIPLIERS = {
    TimingHint.IMMEDIATE: 1,
    TimingHint.FIVE_SECONDS: 5,
    TimingHint.TEN_SECONDS: 10,
    TimingHint.THIRTY_SECONDS: 30,
}


class Venue(str, Enum):
    """Supported venues."""

    OKX = "okx"
    BYBIT = "bybit"
    DERIBIT = "deribit"

    @property
    def display_name(self) -> str:
        return _VENUE_NAMES[self]


_VENUE_NAMES = {
    Venue.OKX: "OKX",
    Venue.BYBIT: "Bybit",
    Venue.DERIBIT: "Deribit",
}


class FeedStatus(str, Enum):
    """Connection lifecycle of a book feed."""

    CONNECTING = "connecting"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    ERROR = "error"


POPULAR_SYMBOLS = (
    "BTC-USDT",
    "ETH-USDT",
    "BTC-USD",
    "ETH-USD",
    "SOL-USDT",
    "ADA-USDT",
    "DOT-USDT",
    "LINK-USDT",
)


class PriceLevel(BaseModel):
    """One rung of the book.

    cumulative_size is the size at this level plus every better-priced
    level on the same side.
    """

    model_config = ConfigDict(frozen=True)

    price: float = Field(gt=0)
    size: float = Field(gt=0)
    cumulative_size: float = Field(gt=0)

    @model_validator(mode="after")
    def _check_cumulative(self) -> "PriceLevel":
        # Tolerate float noise from summing rounded sizes
        if self.cumulative_size < self.size - 1e-9:
            raise ValueError(
                f"cumulative_size {self.cumulative_size} is smaller than size {self.size}"
            )
        return self


class BookSnapshot(BaseModel):
    """Point-in-time order book snapshot.

    Bids are ordered by strictly decreasing price and asks by strictly
    increasing price, best level first on both sides. A snapshot with an
    empty side is valid but unusable for simulation. Naive timestamps are
    taken to be UTC.
    """

    model_config = ConfigDict(frozen=True)

    bids: Tuple[PriceLevel, ...] = ()
    asks: Tuple[PriceLevel, ...] = ()
    timestamp: datetime
    venue: Optional[Venue] = None
    symbol: str = ""

    @field_validator("timestamp")
    @classmethod
    def _timestamp_as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode="after")
    def _check_ladders(self) -> "BookSnapshot":
        _check_ladder(self.bids, "bids", descending=True)
        _check_ladder(self.asks, "asks", descending=False)
        return self

    @classmethod
    def from_arrays(
        cls,
        bid_prices: Sequence[float],
        bid_sizes: Sequence[float],
        ask_prices: Sequence[float],
        ask_sizes: Sequence[float],
        timestamp: datetime,
        venue: Optional[Venue] = None,
        symbol: str = "",
    ) -> "BookSnapshot":
        """Build a snapshot from parallel price/size arrays (best level first).

        Cumulative sizes are computed from the top of each side.
        """
        return cls(
            bids=build_levels(bid_prices, bid_sizes),
            asks=build_levels(ask_prices, ask_sizes),
            timestamp=timestamp,
            venue=venue,
            symbol=symbol,
        )

    @computed_field
    @property
    def is_usable(self) -> bool:
        """True if both sides have at least one level."""
        return bool(self.bids) and bool(self.asks)

    @computed_field
    @property
    def best_bid(self) -> float:
        """Highest bid price, NaN if there are no bids."""
        return self.bids[0].price if self.bids else float("nan")

    @computed_field
    @property
    def best_ask(self) -> float:
        """Lowest ask price, NaN if there are no asks."""
        return self.asks[0].price if self.asks else float("nan")

    @computed_field
    @property
    def mid_price(self) -> float:
        """Mid price between best bid and ask."""
        return (self.best_bid + self.best_ask) / 2

    @computed_field
    @property
    def spread(self) -> float:
        """Spread between best ask and bid."""
        return self.best_ask - self.best_bid

    @computed_field
    @property
    def spread_pct(self) -> float:
        """Spread as a percentage of mid price. NaN if the book is one-sided."""
        if not self.is_usable:
            return float("nan")
        return self.spread / self.mid_price * 100

    @computed_field
    @property
    def total_bid_volume(self) -> float:
        """Total volume on bid side."""
        return sum(level.size for level in self.bids)

    @computed_field
    @property
    def total_ask_volume(self) -> float:
        """Total volume on ask side."""
        return sum(level.size for level in self.asks)


class OrderRequest(BaseModel):
    """Hypothetical order to preview against a snapshot.

    Only field types are checked here. Quantity and limit price rules are
    enforced by the simulator so that an invalid request is reported
    separately from a missing book.
    """

    model_config = ConfigDict(frozen=True)

    side: Side
    order_type: OrderType
    quantity: float
    limit_price: Optional[float] = None
    timing: TimingHint = TimingHint.IMMEDIATE
    venue: Optional[Venue] = None
    symbol: str = ""


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; aware ones are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def build_levels(
    prices: Sequence[float],
    sizes: Sequence[float],
) -> Tuple[PriceLevel, ...]:
    """Build price levels with running cumulative size.

    Args:
        prices: Prices ordered best first
        sizes: Size at each price

    Returns:
        Tuple of PriceLevel

    Raises:
        ValueError: If prices and sizes differ in length
    """
    if len(prices) != len(sizes):
        raise ValueError(
            f"prices and sizes must have the same length, got {len(prices)} and {len(sizes)}"
        )

    levels = []
    cumulative = 0.0
    for price, size in zip(prices, sizes):
        cumulative += float(size)
        levels.append(
            PriceLevel(price=float(price), size=float(size), cumulative_size=cumulative)
        )
    return tuple(levels)


def _check_ladder(
    levels: Tuple[PriceLevel, ...],
    name: str,
    descending: bool,
) -> None:
    for previous, current in zip(levels, levels[1:]):
        if descending and current.price >= previous.price:
            raise ValueError(
                f"{name} must be strictly decreasing in price: "
                f"{previous.price} followed by {current.price}"
            )
        if not descending and current.price <= previous.price:
            raise ValueError(
                f"{name} must be strictly increasing in price: "
                f"{previous.price} followed by {current.price}"
            )
        if current.cumulative_size < previous.cumulative_size:
            raise ValueError(
                f"{name} cumulative size must not decrease away from the best price"
            )
