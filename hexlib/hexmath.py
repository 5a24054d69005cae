"""Tolerance comparisons and small 2D vector helpers.

The grid engine does not use these itself; they exist for callers that
compare or post-process the float geometry it produces.
"""

from __future__ import annotations

from math import cos, radians, sin

import numpy as np

Vector2 = tuple[float, float]

RELATIVE_TOLERANCE = 1e-6
# Eight times the smallest positive single precision subnormal.
ABSOLUTE_TOLERANCE = float(np.finfo(np.float32).smallest_subnormal) * 8.0


def similar_to(a: float, b: float) -> bool:
    """Compare two floats with a combined relative and absolute tolerance."""

    threshold = max(RELATIVE_TOLERANCE * max(abs(a), abs(b)), ABSOLUTE_TOLERANCE)
    return abs(b - a) < threshold


def vectors_similar(a: Vector2, b: Vector2) -> bool:
    return similar_to(a[0], b[0]) and similar_to(a[1], b[1])


def rotate(vector: Vector2, degrees: float) -> Vector2:
    """Rotate ``vector`` by ``degrees`` and mirror the result's x axis.

    Components are rounded to six decimals to drop trigonometric noise.  The
    mirrored x makes positive angles turn clockwise in a y-down frame.
    """

    angle = radians(degrees)
    s, c = sin(angle), cos(angle)
    x = round(c * vector[0] - s * vector[1], 6)
    y = round(s * vector[0] + c * vector[1], 6)
    return -x, y


def normalize(vector: Vector2) -> Vector2:
    """Scale ``vector`` to unit length.

    A zero vector yields ``(nan, nan)``.
    """

    arr = np.asarray(vector, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        unit = arr / np.hypot(arr[0], arr[1])
    return float(unit[0]), float(unit[1])
