"""Unit tests for the market impact proxy."""

import pytest

from depthsim.analytics.impact import DEFAULT_IMPACT_RATE, estimate_market_impact


class TestEstimateMarketImpact:
    """Tests for estimate_market_impact."""

    def test_default_rate(self):
        assert DEFAULT_IMPACT_RATE == 0.001
        assert estimate_market_impact(402.0) == pytest.approx(0.402)

    def test_custom_rate(self):
        assert estimate_market_impact(10_000.0, impact_rate=0.0025) == pytest.approx(25.0)

    def test_zero_cost(self):
        assert estimate_market_impact(0.0) == 0.0

    def test_proportional_to_cost(self):
        small = estimate_market_impact(1_000.0)
        large = estimate_market_impact(3_000.0)

        assert large == pytest.approx(3 * small)

    def test_negative_rate_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            estimate_market_impact(100.0, impact_rate=-0.1)
