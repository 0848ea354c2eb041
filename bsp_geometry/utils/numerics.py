"""Floating point constants and angle arithmetic shared by the geometries."""

from __future__ import annotations

import numpy as np

TWO_PI = 2.0 * np.pi

# Smallest positive normal double, 2**-1022
SAFE_MIN = float(np.finfo(np.float64).tiny)


def normalize_angle(a: float, center: float) -> float:
    """
    Normalize an angle into a 2π wide interval around a center value.

    Args:
        a: Angle to normalize
        center: Center of the desired interval

    Returns:
        Angle ``a - 2kπ`` with integer k, lying in ``[center - π, center + π)``

    Examples:
        >>> normalize_angle(-0.5, np.pi)  # in [0, 2π)
        5.783185307179586
    """
    return float(a - TWO_PI * np.floor((a + np.pi - center) / TWO_PI))
