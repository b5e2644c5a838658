"""Market impact proxy for hypothetical orders.

WARNING: This is a flat fraction of notional, not a calibrated impact model.
It carries no dependence on book depth, volatility or participation and
should be read as an order-of-magnitude hint for the UI, never as a
forecast. The default rate of 0.1% is a placeholder with no derivation.
"""

DEFAULT_IMPACT_RATE = 0.001


def estimate_market_impact(
    total_cost: float,
    impact_rate: float = DEFAULT_IMPACT_RATE,
) -> float:
    """
    Estimate market impact as a fixed fraction of the filled notional.

    Formula:
        impact = total_cost * impact_rate

    Args:
        total_cost: Sum of price * filled size over consumed levels
        impact_rate: Fraction of notional (default 0.001 = 0.1%)

    Returns:
        Impact estimate in quote currency

    Raises:
        ValueError: If impact_rate is negative

    Examples:
        >>> estimate_market_impact(402.0)
        0.402
    """
    if impact_rate < 0:
        raise ValueError(f"impact_rate must be non-negative, got {impact_rate}")

    return total_cost * impact_rate
