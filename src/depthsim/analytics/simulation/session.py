"""Caller-side glue that keeps a preview current as snapshots arrive.

The simulator itself is stateless. A SimulationSession remembers the latest
snapshot and the hypothetical order currently on screen and re-runs the
simulator whenever either changes. Clearing the order discards the last
preview.

Staleness is a caller policy: a session built with ``max_staleness``
reports no preview for snapshots older than that, and snapshots older than
the one already held are ignored.

Example:
    >>> session = SimulationSession()
    >>> session.simulate_order(order)   # no book yet -> None
    >>> session.update_book(book)       # returns fresh ExecutionMetrics
    >>> session.clear()
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from depthsim.analytics.simulation.results import ExecutionMetrics
from depthsim.analytics.simulation.simulator import ExecutionSimulator
from depthsim.core.models import BookSnapshot, OrderRequest, ensure_utc

logger = logging.getLogger(__name__)


class SimulationSession:
    """Latest book plus current hypothetical order, re-simulated on change.

    Attributes:
        simulator: ExecutionSimulator used for every recomputation
        max_staleness: Snapshots older than this (relative to ``now``)
            yield no preview. None disables the check. A naive
            ``now`` is taken to be UTC, as are naive snapshot timestamps.
    """

    def __init__(
        self,
        simulator: Optional[ExecutionSimulator] = None,
        max_staleness: Optional[timedelta] = None,
    ):
        self.simulator = simulator or ExecutionSimulator()
        self.max_staleness = max_staleness
        self._book: Optional[BookSnapshot] = None
        self._order: Optional[OrderRequest] = None
        self._metrics: Optional[ExecutionMetrics] = None

    @property
    def book(self) -> Optional[BookSnapshot]:
        return self._book

    @property
    def order(self) -> Optional[OrderRequest]:
        return self._order

    @property
    def metrics(self) -> Optional[ExecutionMetrics]:
        """Preview for the current order and book, if any."""
        return self._metrics

    def simulate_order(
        self,
        order: OrderRequest,
        now: Optional[datetime] = None,
    ) -> Optional[ExecutionMetrics]:
        """Set the hypothetical order and preview it against the held book.

        Raises:
            InvalidOrderError: If the order cannot be simulated. The
                previous order and preview are kept in that case.
        """
        metrics = self._run(self._book, order, now)
        self._order = order
        self._metrics = metrics
        return metrics

    def clear(self) -> None:
        """Drop the hypothetical order and its preview. The book is kept."""
        self._order = None
        self._metrics = None

    def update_book(
        self,
        book: BookSnapshot,
        now: Optional[datetime] = None,
    ) -> Optional[ExecutionMetrics]:
        """Replace the held snapshot and refresh the preview.

        Snapshots older than the one already held are ignored and the
        current preview is returned unchanged.
        """
        if self._book is not None and book.timestamp < self._book.timestamp:
            logger.warning(
                f"Ignoring out-of-order snapshot at {book.timestamp.isoformat()} "
                f"(holding {self._book.timestamp.isoformat()})"
            )
            return self._metrics

        self._book = book
        if self._order is None:
            return None

        self._metrics = self._run(book, self._order, now)
        return self._metrics

    def _run(
        self,
        book: Optional[BookSnapshot],
        order: OrderRequest,
        now: Optional[datetime],
    ) -> Optional[ExecutionMetrics]:
        if book is not None and self._is_stale(book, now):
            # Still validate so an invalid order is reported regardless of the book
            return self.simulator.simulate(None, order)
        return self.simulator.simulate(book, order)

    def _is_stale(self, book: BookSnapshot, now: Optional[datetime]) -> bool:
        if self.max_staleness is None:
            return False

        now = ensure_utc(now) if now is not None else datetime.now(timezone.utc)
        age = now - book.timestamp
        if age > self.max_staleness:
            logger.warning(
                f"Snapshot is {age.total_seconds():.3f}s old "
                f"(limit {self.max_staleness.total_seconds():.3f}s), skipping preview"
            )
            return True
        return False
