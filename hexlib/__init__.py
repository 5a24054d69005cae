"""Coordinate geometry for hexagonal grids."""

from .config import GridConfig
from .conversions import axial_to_cubic, axial_to_offset, cubic_to_axial, cubic_to_offset, offset_to_axial, offset_to_cubic
from .coords import Axial, Cubic, Direction, GridType, Offset
from .errors import HexagonalError, NeighborNotFoundError, NotNeighborsError, UnknownGridTypeError
from .grid import HexagonalGrid, cube_distance
from .neighbors import normalize_index

__version__ = "0.1.0"

Grid = HexagonalGrid

__all__ = [
    "Axial",
    "Cubic",
    "Direction",
    "Grid",
    "GridConfig",
    "GridType",
    "HexagonalError",
    "HexagonalGrid",
    "NeighborNotFoundError",
    "NotNeighborsError",
    "Offset",
    "UnknownGridTypeError",
    "axial_to_cubic",
    "axial_to_offset",
    "cube_distance",
    "cubic_to_axial",
    "cubic_to_offset",
    "normalize_index",
    "offset_to_axial",
    "offset_to_cubic",
]
