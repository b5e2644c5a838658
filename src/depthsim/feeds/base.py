"""Abstract book feed.

A feed produces a lazy, unbounded sequence of complete BookSnapshot values,
each replacing the previous one. Connection lifecycle belongs to the feed;
consumers only see snapshots. Any source (synthetic generator, venue
WebSocket, REST poller) can stand behind this interface without the
simulator changing.

Example:
    feed = SyntheticBookFeed(symbol="ETH-USDT")
    feed.connect()
    for book in feed.snapshots(limit=3):
        print(book.timestamp, book.best_bid, book.best_ask)
    feed.disconnect()
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import AsyncIterator, Iterator, Optional

from depthsim.core.exceptions import FeedError
from depthsim.core.models import BookSnapshot, FeedStatus, Venue

logger = logging.getLogger(__name__)


class BookFeed(ABC):
    """Restartable source of order book snapshots for one venue and symbol.

    Subclasses implement ``_next_snapshot`` and may override the
    ``_on_connect`` / ``_on_disconnect`` hooks and ``next_interval``.
    """

    def __init__(self, venue: Venue, symbol: str):
        self.venue = Venue(venue)
        self.symbol = symbol
        self._status = FeedStatus.DISCONNECTED

    @property
    def status(self) -> FeedStatus:
        return self._status

    @property
    def is_connected(self) -> bool:
        """Check if feed is connected."""
        return self._status == FeedStatus.CONNECTED

    def connect(self) -> None:
        """Open the feed. Reconnecting restarts the sequence."""
        self._status = FeedStatus.CONNECTING
        logger.info(f"Connecting {self.venue.value} feed for {self.symbol}")
        try:
            self._on_connect()
        except Exception as e:
            self._status = FeedStatus.ERROR
            logger.error(f"Failed to connect {self.venue.value} feed for {self.symbol}: {e}")
            raise FeedError(f"Failed to connect feed: {e}", venue=self.venue.value) from e
        self._status = FeedStatus.CONNECTED
        logger.info(f"Connected {self.venue.value} feed for {self.symbol}")

    def disconnect(self) -> None:
        """Close the feed. Safe to call more than once."""
        if self._status == FeedStatus.DISCONNECTED:
            return
        try:
            self._on_disconnect()
        finally:
            self._status = FeedStatus.DISCONNECTED
            logger.info(f"Disconnected {self.venue.value} feed for {self.symbol}")

    def reconnect(self) -> None:
        self.disconnect()
        self.connect()

    def snapshots(self, limit: Optional[int] = None) -> Iterator[BookSnapshot]:
        """Yield snapshots as fast as they can be produced.

        Args:
            limit: Stop after this many snapshots. None means unbounded.

        Raises:
            FeedError: If the feed is not connected, or producing a
                snapshot fails (status moves to ERROR)
        """
        self._require_connected()
        produced = 0
        while limit is None or produced < limit:
            if not self.is_connected:
                return
            yield self._produce()
            produced += 1

    async def stream(self, limit: Optional[int] = None) -> AsyncIterator[BookSnapshot]:
        """Yield snapshots, waiting ``next_interval()`` seconds between them.

        Args:
            limit: Stop after this many snapshots. None means unbounded.

        Raises:
            FeedError: As for ``snapshots``
        """
        self._require_connected()
        produced = 0
        while limit is None or produced < limit:
            if not self.is_connected:
                return
            yield self._produce()
            produced += 1
            if limit is not None and produced >= limit:
                return
            await asyncio.sleep(self.next_interval())

    def next_interval(self) -> float:
        """Seconds to wait before the next snapshot."""
        return 0.0

    def _require_connected(self) -> None:
        if not self.is_connected:
            raise FeedError(
                f"{self.venue.value} feed for {self.symbol} is {self._status.value}, "
                "call connect() first",
                venue=self.venue.value,
            )

    def _produce(self) -> BookSnapshot:
        try:
            return self._next_snapshot()
        except Exception as e:
            self._status = FeedStatus.ERROR
            logger.error(f"Failed to produce snapshot for {self.symbol}: {e}")
            raise FeedError(f"Failed to produce snapshot: {e}", venue=self.venue.value) from e

    def _on_connect(self) -> None:
        """Hook run while the feed is connecting."""

    def _on_disconnect(self) -> None:
        """Hook run while the feed is disconnecting."""

    @abstractmethod
    def _next_snapshot(self) -> BookSnapshot:
        """Produce the next complete snapshot."""
        ...
