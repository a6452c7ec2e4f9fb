"""Round-half-away-from-zero helpers.

Python's built-in ``round`` and numpy's ``np.round`` both round half to even;
displayed fitness metrics round halves away from zero instead.
"""

from __future__ import annotations

import math


def round_half_away(value: float, decimals: int = 0) -> float:
    """Round *value* to *decimals* places, halves away from zero.

    Never returns negative zero.

    Args:
        value: Number to round.
        decimals: Number of decimal places (>= 0).

    Returns:
        The rounded float.
    """
    scale = 10.0 ** decimals
    rounded = math.copysign(math.floor(abs(value) * scale + 0.5) / scale, value)
    return rounded or 0.0


def round_to_int(value: float) -> int:
    """Round *value* to the nearest integer, halves away from zero."""
    return int(round_half_away(value, 0))
