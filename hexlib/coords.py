"""Coordinate value types for hexagonal grids.

Three coordinate systems describe the same cell:

* :class:`Cubic` -- three integers with ``x + y + z == 0``.  Layout
  independent; all distance and adjacency maths is done here.
* :class:`Axial` -- ``(q, r)``, the cubic coordinate with the redundant
  ``y`` axis dropped.
* :class:`Offset` -- ``(x, y)`` column/row indices.  Only meaningful together
  with a :class:`GridType`, because the half-cell shift of alternate rows (or
  columns) depends on the layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar


class GridType(Enum):
    """Orientation and parity rule of a hexagonal grid.

    ``POINTY_*`` grids have pointy-topped cells laid out in shifted rows,
    ``FLAT_*`` grids have flat-topped cells in shifted columns.  ``ODD`` and
    ``EVEN`` name the rows (or columns) that receive the half-cell shift.
    """

    POINTY_ODD = "pointy_odd"
    POINTY_EVEN = "pointy_even"
    FLAT_ODD = "flat_odd"
    FLAT_EVEN = "flat_even"

    @property
    def is_pointy(self) -> bool:
        return self in (GridType.POINTY_ODD, GridType.POINTY_EVEN)

    @property
    def is_flat(self) -> bool:
        return self in (GridType.FLAT_ODD, GridType.FLAT_EVEN)


class Direction(IntEnum):
    """Canonical neighbour indices, clockwise from the first neighbour."""

    EAST = 0
    SOUTH_EAST = 1
    SOUTH_WEST = 2
    WEST = 3
    NORTH_WEST = 4
    NORTH_EAST = 5


@dataclass(frozen=True, slots=True)
class Axial:
    q: int
    r: int

    ZERO: ClassVar[Axial]

    def __add__(self, other: Axial | int) -> Axial:
        if isinstance(other, Axial):
            return Axial(self.q + other.q, self.r + other.r)
        if isinstance(other, int):
            return Axial(self.q + other, self.r + other)
        return NotImplemented

    def __sub__(self, other: Axial | int) -> Axial:
        if isinstance(other, Axial):
            return Axial(self.q - other.q, self.r - other.r)
        if isinstance(other, int):
            return Axial(self.q - other, self.r - other)
        return NotImplemented

    def __mul__(self, factor: int) -> Axial:
        if isinstance(factor, int):
            return Axial(self.q * factor, self.r * factor)
        return NotImplemented

    __rmul__ = __mul__

    def astuple(self) -> tuple[int, int]:
        return (self.q, self.r)

    def __str__(self) -> str:
        return f"A-[{self.q}:{self.r}]"


@dataclass(frozen=True, slots=True)
class Cubic:
    """Cube coordinate.

    Integer construction trusts the caller: nothing checks the zero-sum
    invariant, use :meth:`is_valid` when the input is suspect.  Use
    :meth:`round` to build a coordinate from floating point candidates.
    """

    x: int
    y: int
    z: int

    ZERO: ClassVar[Cubic]

    @classmethod
    def round(cls, x: float, y: float, z: float) -> Cubic:
        """Round fractional cube coordinates to the nearest valid cell.

        The axis with the largest rounding error is recomputed from the other
        two so the result always satisfies ``x + y + z == 0``.
        """

        rx, ry, rz = round(x), round(y), round(z)
        dx, dy, dz = abs(rx - x), abs(ry - y), abs(rz - z)
        if dx > dy and dx > dz:
            rx = -ry - rz
        elif dy > dz:
            ry = -rx - rz
        else:
            rz = -rx - ry
        return cls(rx, ry, rz)

    def is_valid(self) -> bool:
        return self.x + self.y + self.z == 0

    def rotate_right(self, times: int = 1) -> Cubic:
        """Rotate 60 degrees clockwise around the origin ``times`` times."""

        current = self
        for _ in range(times % 6):
            current = Cubic(-current.y, -current.z, -current.x)
        return current

    def __add__(self, other: Cubic | int) -> Cubic:
        if isinstance(other, Cubic):
            return Cubic(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, int):
            return Cubic(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other: Cubic | int) -> Cubic:
        if isinstance(other, Cubic):
            return Cubic(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, int):
            return Cubic(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, factor: int | float) -> Cubic:
        if isinstance(factor, int):
            return Cubic(self.x * factor, self.y * factor, self.z * factor)
        if isinstance(factor, float):
            return Cubic.round(self.x * factor, self.y * factor, self.z * factor)
        return NotImplemented

    __rmul__ = __mul__

    def astuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        if not self.is_valid():
            return "C-[Invalid]"
        return f"C-[{self.x}:{self.y}:{self.z}]"


@dataclass(frozen=True, slots=True)
class Offset:
    x: int  # column
    y: int  # row

    ZERO: ClassVar[Offset]

    @property
    def col(self) -> int:
        return self.x

    @property
    def row(self) -> int:
        return self.y

    def shifted(self, dx: int, dy: int) -> Offset:
        return Offset(self.x + dx, self.y + dy)

    @staticmethod
    def clamp(coord: Offset, lo: Offset, hi: Offset) -> Offset:
        """Clamp each component of ``coord`` into ``[lo, hi]``."""

        return Offset(min(max(coord.x, lo.x), hi.x), min(max(coord.y, lo.y), hi.y))

    def __add__(self, other: Offset | int) -> Offset:
        if isinstance(other, Offset):
            return Offset(self.x + other.x, self.y + other.y)
        if isinstance(other, int):
            return Offset(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other: Offset | int) -> Offset:
        if isinstance(other, Offset):
            return Offset(self.x - other.x, self.y - other.y)
        if isinstance(other, int):
            return Offset(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, factor: int) -> Offset:
        if isinstance(factor, int):
            return Offset(self.x * factor, self.y * factor)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, divisor: int) -> Offset:
        """Divide componentwise, truncating toward zero."""

        if isinstance(divisor, int):
            return Offset(_div_toward_zero(self.x, divisor), _div_toward_zero(self.y, divisor))
        return NotImplemented

    def __floordiv__(self, divisor: int) -> Offset:
        if isinstance(divisor, int):
            return Offset(self.x // divisor, self.y // divisor)
        return NotImplemented

    def astuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"O-[{self.x}:{self.y}]"


def _div_toward_zero(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value < 0) == (divisor < 0) else -quotient


Axial.ZERO = Axial(0, 0)
Cubic.ZERO = Cubic(0, 0, 0)
Offset.ZERO = Offset(0, 0)
