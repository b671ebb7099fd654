"""Numeric helpers shared by the analyzers."""

import math


def round_half_up(value: float, digits: int = 2) -> float:
    """
    Round to `digits` decimals, with halves going towards +infinity.

    Built-in round() uses banker's rounding; reported values follow the
    half-up convention instead, for negative skews too.

    Example:
        >>> round_half_up(0.125, 2)
        0.13
        >>> round_half_up(-0.0625, 3)
        -0.062
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0.0 when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return numerator / denominator
