from __future__ import annotations

from .coords import Axial, Cubic, GridType, Offset
from .errors import UnknownGridTypeError


def axial_to_cubic(a: Axial) -> Cubic:
    x = a.q
    z = a.r
    y = -x - z
    return Cubic(x, y, z)


def cubic_to_axial(c: Cubic) -> Axial:
    return Axial(c.x, c.z)


def cubic_to_offset(c: Cubic, grid_type: GridType) -> Offset:
    # ``v - (v & 1)`` and ``v + (v & 1)`` are always even, so ``// 2`` is exact
    # for negative indices too.
    if grid_type == GridType.POINTY_ODD:
        col = c.x + (c.z - (c.z & 1)) // 2
        row = c.z
    elif grid_type == GridType.POINTY_EVEN:
        col = c.x + (c.z + (c.z & 1)) // 2
        row = c.z
    elif grid_type == GridType.FLAT_ODD:
        col = c.x
        row = c.z + (c.x - (c.x & 1)) // 2
    elif grid_type == GridType.FLAT_EVEN:
        col = c.x
        row = c.z + (c.x + (c.x & 1)) // 2
    else:
        raise UnknownGridTypeError(
            "cubic_to_offset failed with unexpected grid_type",
            operation="cubic_to_offset",
            grid_type=grid_type,
            coord=c,
        )
    return Offset(col, row)


def offset_to_cubic(o: Offset, grid_type: GridType) -> Cubic:
    col, row = o.x, o.y
    if grid_type == GridType.POINTY_ODD:
        x = col - (row - (row & 1)) // 2
        z = row
    elif grid_type == GridType.POINTY_EVEN:
        x = col - (row + (row & 1)) // 2
        z = row
    elif grid_type == GridType.FLAT_ODD:
        x = col
        z = row - (col - (col & 1)) // 2
    elif grid_type == GridType.FLAT_EVEN:
        x = col
        z = row - (col + (col & 1)) // 2
    else:
        raise UnknownGridTypeError(
            "offset_to_cubic failed with unexpected grid_type",
            operation="offset_to_cubic",
            grid_type=grid_type,
            coord=o,
        )
    return Cubic(x, -x - z, z)


def axial_to_offset(a: Axial, grid_type: GridType) -> Offset:
    return cubic_to_offset(axial_to_cubic(a), grid_type)


def offset_to_axial(o: Offset, grid_type: GridType) -> Axial:
    return cubic_to_axial(offset_to_cubic(o, grid_type))
