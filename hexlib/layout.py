from __future__ import annotations

from dataclasses import dataclass
from math import cos, radians, sin, sqrt

from .coords import GridType
from .errors import UnknownGridTypeError

SQRT3 = sqrt(3.0)

Point2 = tuple[float, float]


# Projection matrices between axial (q, r) and the plane, in units of the
# described radius.
@dataclass(frozen=True)
class Orientation:
    f0: float; f1: float; f2: float; f3: float  # axial(q,r) -> point
    b0: float; b1: float; b2: float; b3: float  # point -> axial
    start_angle: float                           # first corner, degrees


ORIENTATION_POINTY = Orientation(
    f0 = SQRT3,       f1 = SQRT3 / 2.0,
    f2 = 0.0,         f3 = 3.0 / 2.0,
    b0 = SQRT3 / 3.0, b1 = -1.0 / 3.0,
    b2 = 0.0,         b3 = 2.0 / 3.0,
    start_angle = -30.0,
)
ORIENTATION_FLAT = Orientation(
    f0 = 3.0 / 2.0,   f1 = 0.0,
    f2 = SQRT3 / 2.0, f3 = SQRT3,
    b0 = 2.0 / 3.0,   b1 = 0.0,
    b2 = -1.0 / 3.0,  b3 = SQRT3 / 3.0,
    start_angle = 0.0,
)


def orientation_for(grid_type: GridType) -> Orientation:
    if grid_type in (GridType.POINTY_ODD, GridType.POINTY_EVEN):
        return ORIENTATION_POINTY
    if grid_type in (GridType.FLAT_ODD, GridType.FLAT_EVEN):
        return ORIENTATION_FLAT
    raise UnknownGridTypeError(
        "orientation_for failed with unexpected grid_type",
        operation="orientation_for",
        grid_type=grid_type,
    )


def hex_to_point(orientation: Orientation, side: float, q: float, r: float) -> Point2:
    M = orientation
    x = side * (M.f0 * q + M.f1 * r)
    y = side * (M.f2 * q + M.f3 * r)
    return x, y


def point_to_hex_fractional(orientation: Orientation, side: float, x: float, y: float) -> tuple[float, float, float]:
    """Return fractional cube coordinates ``(x, y, z)`` of a plane point."""

    M = orientation
    q = (M.b0 * x + M.b1 * y) / side
    r = (M.b2 * x + M.b3 * y) / side
    return q, -q - r, r


def corner_offset(orientation: Orientation, radius: float, edge: int) -> Point2:
    """Offset from a cell centre to corner ``edge`` (already normalised)."""

    angle = radians(60.0 * edge + orientation.start_angle)
    return radius * cos(angle), radius * sin(angle)
