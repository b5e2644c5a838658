"""Order book snapshot sources."""

from depthsim.feeds.base import BookFeed
from depthsim.feeds.synthetic import SyntheticBookFeed, base_price_for

__all__ = [
    "BookFeed",
    "SyntheticBookFeed",
    "base_price_for",
]
