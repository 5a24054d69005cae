"""Neighbour direction tables.

Index ``i`` of every table points the same way: offset table entry ``i``
lands on the same cell as cubic direction ``i``.
"""

from __future__ import annotations

from typing import Iterator

from .coords import Axial, Cubic, GridType, Offset
from .errors import UnknownGridTypeError

EDGES_COUNT = 6

CUBIC_DIRECTIONS = (
    Cubic(+1, -1, 0),
    Cubic(+1, 0, -1),
    Cubic(0, +1, -1),
    Cubic(-1, +1, 0),
    Cubic(-1, 0, +1),
    Cubic(0, -1, +1),
)

AXIAL_DIRECTIONS = (
    Axial(+1, 0),
    Axial(+1, -1),
    Axial(0, -1),
    Axial(-1, 0),
    Axial(-1, +1),
    Axial(0, +1),
)

# Rows (pointy) or columns (flat) that carry the half-cell shift use the
# *_ODD table, the others the *_EVEN table, whichever parity the grid
# shifts.
POINTY_ODD_DIRECTIONS = (
    Offset(+1, 0),
    Offset(+1, -1),
    Offset(0, -1),
    Offset(-1, 0),
    Offset(0, +1),
    Offset(+1, +1),
)

POINTY_EVEN_DIRECTIONS = (
    Offset(+1, 0),
    Offset(0, -1),
    Offset(-1, -1),
    Offset(-1, 0),
    Offset(-1, +1),
    Offset(0, +1),
)

FLAT_ODD_DIRECTIONS = (
    Offset(+1, +1),
    Offset(+1, 0),
    Offset(0, -1),
    Offset(-1, 0),
    Offset(-1, +1),
    Offset(0, +1),
)

FLAT_EVEN_DIRECTIONS = (
    Offset(+1, 0),
    Offset(+1, -1),
    Offset(0, -1),
    Offset(-1, -1),
    Offset(-1, 0),
    Offset(0, +1),
)


def normalize_index(index: int) -> int:
    """Map any integer onto the direction range ``[0, 6)``."""

    return ((index % EDGES_COUNT) + EDGES_COUNT) % EDGES_COUNT


def offset_directions(o: Offset, grid_type: GridType) -> tuple[Offset, ...]:
    """Return the direction table for ``o``.

    The grid type picks the axis that decides the shift (row for pointy,
    column for flat) and which parity on that axis is shifted; the parity
    of ``o`` itself then picks the table.
    """

    if grid_type == GridType.POINTY_ODD:
        axis_value, shifted_parity = o.y, 1
        shifted, unshifted = POINTY_ODD_DIRECTIONS, POINTY_EVEN_DIRECTIONS
    elif grid_type == GridType.POINTY_EVEN:
        axis_value, shifted_parity = o.y, 0
        shifted, unshifted = POINTY_ODD_DIRECTIONS, POINTY_EVEN_DIRECTIONS
    elif grid_type == GridType.FLAT_ODD:
        axis_value, shifted_parity = o.x, 1
        shifted, unshifted = FLAT_ODD_DIRECTIONS, FLAT_EVEN_DIRECTIONS
    elif grid_type == GridType.FLAT_EVEN:
        axis_value, shifted_parity = o.x, 0
        shifted, unshifted = FLAT_ODD_DIRECTIONS, FLAT_EVEN_DIRECTIONS
    else:
        raise UnknownGridTypeError(
            "offset_directions failed with unexpected grid_type",
            operation="offset_directions",
            grid_type=grid_type,
            coord=o,
        )
    return shifted if (axis_value & 1) == shifted_parity else unshifted


def neighbor_axial(a: Axial, index: int) -> Axial:
    return a + AXIAL_DIRECTIONS[normalize_index(index)]


def neighbor_cubic(c: Cubic, index: int) -> Cubic:
    return c + CUBIC_DIRECTIONS[normalize_index(index)]


def neighbor_offset(o: Offset, index: int, grid_type: GridType) -> Offset:
    return o + offset_directions(o, grid_type)[normalize_index(index)]


def neighbors_axial(a: Axial) -> Iterator[Axial]:
    return (a + d for d in AXIAL_DIRECTIONS)


def neighbors_cubic(c: Cubic) -> Iterator[Cubic]:
    return (c + d for d in CUBIC_DIRECTIONS)


def neighbors_offset(o: Offset, grid_type: GridType) -> Iterator[Offset]:
    # Resolved eagerly: an unknown grid type raises here, not on first ``next``.
    directions = offset_directions(o, grid_type)
    return (o + d for d in directions)
