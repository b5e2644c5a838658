"""Fill latency heuristic for hypothetical orders.

The estimate is a base latency chosen by order type, scaled by the user's
timing hint:

    estimated_fill_seconds = base_latency(order_type) * timing.multiplier

Market orders use a near-zero base. Limit orders use a small positive base
because they may rest before filling. This is a UI-facing heuristic, not a
queueing model.

By default the model is a pure function of its inputs. A caller who wants
the limit-order base to vary can inject a ``numpy.random.Generator``; the
base is then drawn uniformly from the configured range on every call, and
reproducibility is the caller's business through the generator's seed.

Example:
    >>> import numpy as np
    >>> from depthsim.core.models import OrderType, TimingHint
    >>> model = LatencyModel()
    >>> model.estimate(OrderType.MARKET, TimingHint.FIVE_SECONDS)
    0.5
    >>> seeded = LatencyModel(rng=np.random.default_rng(7))
    >>> seeded.estimate(OrderType.LIMIT, TimingHint.IMMEDIATE)  # doctest: +SKIP
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from depthsim.core.config import SimulatorConfig
from depthsim.core.models import OrderType, TimingHint


class LatencyModel:
    """Base latency by order type, scaled by timing hint.

    Attributes:
        market_base_s: Base latency for market orders
        limit_base_s: Deterministic base latency for limit orders
        limit_min_s: Lower bound of the limit base when an RNG is injected
        limit_max_s: Upper bound of the limit base when an RNG is injected
        rng: Optional caller-owned generator
    """

    def __init__(
        self,
        market_base_s: float = 0.1,
        limit_base_s: float = 3.5,
        limit_min_s: float = 1.0,
        limit_max_s: float = 6.0,
        rng: Optional[np.random.Generator] = None,
    ):
        if limit_max_s < limit_min_s:
            raise ValueError(
                f"limit_max_s ({limit_max_s}) must be >= limit_min_s ({limit_min_s})"
            )
        self.market_base_s = market_base_s
        self.limit_base_s = limit_base_s
        self.limit_min_s = limit_min_s
        self.limit_max_s = limit_max_s
        self.rng = rng

    @classmethod
    def from_config(
        cls,
        config: SimulatorConfig,
        rng: Optional[np.random.Generator] = None,
    ) -> LatencyModel:
        """Build a model from simulator policy constants."""
        return cls(
            market_base_s=config.market_base_latency_s,
            limit_base_s=config.limit_base_latency_s,
            limit_min_s=config.limit_latency_min_s,
            limit_max_s=config.limit_latency_max_s,
            rng=rng,
        )

    @property
    def is_deterministic(self) -> bool:
        """True if no randomness source is injected."""
        return self.rng is None

    def base_latency(self, order_type: OrderType) -> float:
        """Base latency in seconds before the timing multiplier.

        Raises:
            ValueError: If order_type is not a known OrderType
        """
        if order_type == OrderType.MARKET:
            return self.market_base_s
        if order_type == OrderType.LIMIT:
            if self.rng is None:
                return self.limit_base_s
            return float(self.rng.uniform(self.limit_min_s, self.limit_max_s))
        raise ValueError(f"Unsupported order type: {order_type!r}")

    def estimate(self, order_type: OrderType, timing: TimingHint) -> float:
        """Estimated seconds until the order fills."""
        return self.base_latency(order_type) * TimingHint(timing).multiplier
