"""Slippage of an average fill price against the best quote.

Slippage here is the unsigned relative deviation of the achieved average
price from the best price on the side the order consumed, in percent.
"""

import math


def calculate_slippage_pct(
    execution_price: float,
    reference_price: float,
) -> float:
    """
    Calculate unsigned slippage in percent.

    Args:
        execution_price: Average fill price achieved by the walk
        reference_price: Best price on the consumed side of the book

    Returns:
        abs(execution_price - reference_price) / reference_price * 100.
        Returns 0.0 when the reference price is zero or not finite, or when
        nothing was filled (execution_price == 0).

    Examples:
        >>> # Bought at an average of 100.5 with the best ask at 100
        >>> calculate_slippage_pct(100.5, 100)
        0.5

        >>> # Sold at an average of 98 with the best bid at 100
        >>> calculate_slippage_pct(98, 100)
        2.0
    """
    if reference_price == 0 or not math.isfinite(reference_price):
        return 0.0

    if execution_price == 0:
        return 0.0

    return abs(execution_price - reference_price) / reference_price * 100
