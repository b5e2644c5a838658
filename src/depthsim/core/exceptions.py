"""Exception types raised by depthsim."""

from typing import List, Optional


class DepthsimError(Exception):
    """Base class for all depthsim errors."""


class InvalidOrderError(DepthsimError, ValueError):
    """Hypothetical order cannot be simulated.

    Distinct from the "no data yet" outcome, which is signalled by the
    simulator returning None.

    Attributes:
        problems: Human-readable reasons, one per failed rule
    """

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class FeedError(DepthsimError):
    """Book feed failed or was used outside its connection lifecycle."""

    def __init__(self, message: str, venue: Optional[str] = None):
        self.venue = venue
        super().__init__(message)
