"""Synthetic random-walk book feed.

Stands in for a live venue connection. Every snapshot is generated from
scratch around a mid price drawn near a per-symbol base price:

    spread      = base * spread_fraction
    mid         = base + (U(0, 1) - 0.5) * base * mid_jitter_fraction
    offset_i    = offset_{i-1} + (spread / 2) * U(0.75, 1.25)
    ask_i       = mid + offset_i,  bid_i = mid - offset_i
    size_i      = min_size + U(0, 1) * size_range

Prices are rounded to 2 decimals and sizes to 4. Offsets accumulate so each
ladder stays strictly ordered. Timestamps advance by a drawn gap of
U(min_interval_s, max_interval_s) seconds per snapshot.

With a seed in FeedConfig the sequence is reproducible, and reconnecting
replays it from the start.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

import numpy as np

from depthsim.core.config import FeedConfig
from depthsim.core.models import BookSnapshot, Venue
from depthsim.feeds.base import BookFeed

logger = logging.getLogger(__name__)

BASE_PRICES = (
    ("BTC", 45000.0),
    ("ETH", 2500.0),
    ("SOL", 100.0),
)
DEFAULT_BASE_PRICE = 1000.0


def base_price_for(symbol: str) -> float:
    """Reference price used to centre synthetic books for ``symbol``."""
    symbol = symbol.upper()
    for prefix, price in BASE_PRICES:
        if symbol.startswith(prefix):
            return price
    return DEFAULT_BASE_PRICE


class SyntheticBookFeed(BookFeed):
    """Seeded generator of random order book snapshots.

    Attributes:
        config: Book shape and cadence
        base_price: Reference price for the symbol
        start_time: Timestamp of the first snapshot after each connect.
            None means the wall clock at connect time.
    """

    def __init__(
        self,
        symbol: str = "BTC-USDT",
        venue: Venue = Venue.OKX,
        config: Optional[FeedConfig] = None,
        start_time: Optional[datetime] = None,
    ):
        super().__init__(venue=venue, symbol=symbol)
        self.config = config or FeedConfig()
        self.base_price = base_price_for(symbol)
        self.start_time = start_time
        self.rng = np.random.default_rng(self.config.seed)
        self._clock: Optional[datetime] = None
        self._next_gap = 0.0

    def _on_connect(self) -> None:
        self.rng = np.random.default_rng(self.config.seed)
        self._clock = self.start_time or datetime.now(timezone.utc)
        self._next_gap = 0.0
        logger.debug(
            f"Synthetic feed for {self.symbol} centred at {self.base_price} "
            f"(seed={self.config.seed})"
        )

    def next_interval(self) -> float:
        """Gap drawn for the snapshot after the most recent one."""
        return self._next_gap

    def _next_snapshot(self) -> BookSnapshot:
        cfg = self.config
        spread = self.base_price * cfg.spread_fraction
        mid = self.base_price + (self.rng.random() - 0.5) * self.base_price * cfg.mid_jitter_fraction

        bid_prices, bid_sizes = self._generate_side(mid, spread, is_ask=False)
        ask_prices, ask_sizes = self._generate_side(mid, spread, is_ask=True)

        book = BookSnapshot.from_arrays(
            bid_prices=bid_prices,
            bid_sizes=bid_sizes,
            ask_prices=ask_prices,
            ask_sizes=ask_sizes,
            timestamp=self._clock,
            venue=self.venue,
            symbol=self.symbol,
        )

        self._next_gap = float(self.rng.uniform(cfg.min_interval_s, cfg.max_interval_s))
        self._clock = self._clock + timedelta(seconds=self._next_gap)
        return book

    def _generate_side(
        self,
        mid: float,
        spread: float,
        is_ask: bool,
    ) -> Tuple[List[float], List[float]]:
        cfg = self.config
        prices: List[float] = []
        sizes: List[float] = []
        offset = 0.0

        for _ in range(cfg.levels):
            offset += (spread / 2) * (self.rng.random() * 0.5 + 0.75)
            size = round(float(self.rng.random() * cfg.size_range + cfg.min_size), 4)
            price = round(float(mid + offset if is_ask else mid - offset), 2)

            if price <= 0:
                break
            # Rounding can collapse adjacent levels when the spread is tiny
            if prices and price == prices[-1]:
                continue

            prices.append(price)
            sizes.append(size)

        return prices, sizes
