"""Hexagonal grid engine.

:class:`HexagonalGrid` is an immutable calculator parameterised by a
:class:`~hexlib.coords.GridType` and the inscribed radius of its cells.  It
converts between the three coordinate systems and the plane, and answers
neighbourhood queries for any of the coordinate types.

Usage::

    grid = HexagonalGrid(GridType.POINTY_ODD, 1.0)
    grid.to_offset(Cubic(1, -1, 0))           # Offset(x=1, y=0)
    list(grid.get_neighbors_ring(Axial(0, 0), 2))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import cos, pi
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, NamedTuple, TypeVar

from . import neighbors, topology
from .conversions import axial_to_cubic, cubic_to_axial, cubic_to_offset, offset_to_cubic
from .coords import Axial, Cubic, Direction, GridType, Offset
from .errors import HexagonalError, NeighborNotFoundError, NotNeighborsError, UnknownGridTypeError
from .layout import SQRT3, Orientation, Point2, corner_offset, hex_to_point, orientation_for, point_to_hex_fractional
from .neighbors import EDGES_COUNT, normalize_index

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import GridConfig

logger = logging.getLogger(__name__)

Coordinate = Offset | Axial | Cubic
C = TypeVar("C", Offset, Axial, Cubic)


class _CoordinateOps(NamedTuple):
    get_neighbor: Callable[[Any, int], Any]
    get_neighbors: Callable[[Any], Iterable[Any]]


@dataclass(frozen=True)
class HexagonalGrid:
    """Geometry and topology of a hexagonal grid.

    ``inscribed_radius`` is the distance from a cell centre to the middle of
    an edge and must be positive; it is not validated here (see
    :class:`~hexlib.config.GridConfig` for a validating entry point).
    ``described_radius`` (centre to corner) is derived from it.
    """

    EDGES_COUNT = EDGES_COUNT
    SQRT3 = SQRT3

    grid_type: GridType
    inscribed_radius: float
    described_radius: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "described_radius", self.inscribed_radius / cos(pi / EDGES_COUNT))
        logger.debug(
            "Created %s grid (inscribed_radius=%s, described_radius=%s)",
            self.grid_type,
            self.inscribed_radius,
            self.described_radius,
        )

    @classmethod
    def from_config(cls, config: GridConfig) -> HexagonalGrid:
        return cls(config.grid_type, config.inscribed_radius)

    def to_config(self) -> GridConfig:
        from .config import GridConfig

        return GridConfig(grid_type=self.grid_type, inscribed_radius=self.inscribed_radius)

    # ------------------------------------------------------------------
    # Scalar metrics

    @property
    def side(self) -> float:
        return self.described_radius

    @property
    def inscribed_diameter(self) -> float:
        return self.inscribed_radius * 2.0

    @property
    def described_diameter(self) -> float:
        return self.described_radius * 2.0

    @property
    def orientation(self) -> Orientation:
        return self._layout_call("orientation", orientation_for, self.grid_type)

    @property
    def horizontal_offset(self) -> float:
        """Horizontal distance between the centres of adjacent columns."""

        if self.grid_type in (GridType.POINTY_ODD, GridType.POINTY_EVEN):
            return self.inscribed_radius * 2.0
        elif self.grid_type in (GridType.FLAT_ODD, GridType.FLAT_EVEN):
            return self.described_radius * 1.5
        else:
            raise self._error(UnknownGridTypeError, "Can't get horizontal_offset with unexpected grid_type", "horizontal_offset")

    @property
    def vertical_offset(self) -> float:
        """Vertical distance between the centres of adjacent rows."""

        if self.grid_type in (GridType.POINTY_ODD, GridType.POINTY_EVEN):
            return self.described_radius * 1.5
        elif self.grid_type in (GridType.FLAT_ODD, GridType.FLAT_EVEN):
            return self.inscribed_radius * 2.0
        else:
            raise self._error(UnknownGridTypeError, "Can't get vertical_offset with unexpected grid_type", "vertical_offset")

    @property
    def angle_to_first_neighbor(self) -> float:
        """Angle in degrees from a cell centre to the centre of neighbour 0."""

        if self.grid_type in (GridType.POINTY_ODD, GridType.POINTY_EVEN):
            return 0.0
        elif self.grid_type in (GridType.FLAT_ODD, GridType.FLAT_EVEN):
            return 30.0
        else:
            raise self._error(
                UnknownGridTypeError, "Can't get angle_to_first_neighbor with unexpected grid_type", "angle_to_first_neighbor"
            )

    # ------------------------------------------------------------------
    # Conversions

    def to_cubic(self, coord: Coordinate | Point2 | float, y: float | None = None) -> Cubic:
        """Convert an offset or axial coordinate, or a plane point, to cubic.

        Points are given either as an ``(x, y)`` tuple or as two numbers and
        are snapped to the cell containing them.
        """

        if y is not None:
            return self._point_to_cubic(coord, y)
        if isinstance(coord, Cubic):
            return coord
        if isinstance(coord, Axial):
            return axial_to_cubic(coord)
        if isinstance(coord, Offset):
            return self._layout_call("to_cubic", offset_to_cubic, coord, self.grid_type, coord=coord)
        if isinstance(coord, tuple):
            px, py = coord
            return self._point_to_cubic(px, py)
        raise TypeError(f"to_cubic does not accept {type(coord).__name__}")

    def to_axial(self, coord: Coordinate | Point2 | float, y: float | None = None) -> Axial:
        if isinstance(coord, Axial) and y is None:
            return coord
        return cubic_to_axial(self.to_cubic(coord, y))

    def to_offset(self, coord: Coordinate | Point2 | float, y: float | None = None) -> Offset:
        if isinstance(coord, Offset) and y is None:
            return coord
        cubic = self.to_cubic(coord, y)
        return self._layout_call("to_offset", cubic_to_offset, cubic, self.grid_type, coord=cubic)

    def to_point2(self, coord: Coordinate) -> Point2:
        """Centre of a cell in the plane.

        Every coordinate type goes through the axial projection.
        """

        if isinstance(coord, Axial):
            return hex_to_point(self.orientation, self.side, coord.q, coord.r)
        if isinstance(coord, (Offset, Cubic)):
            return self.to_point2(self.to_axial(coord))
        raise TypeError(f"to_point2 does not accept {type(coord).__name__}")

    def _point_to_cubic(self, x: float, y: float) -> Cubic:
        orientation = self._layout_call("to_cubic", orientation_for, self.grid_type, x=x, y=y)
        return Cubic.round(*point_to_hex_fractional(orientation, self.side, float(x), float(y)))

    # ------------------------------------------------------------------
    # Corners

    def get_corner_point(self, coord: Coordinate, edge: int) -> Point2:
        """Corner ``edge`` of the cell; indices wrap modulo six."""

        orientation = self._layout_call("get_corner_point", orientation_for, self.grid_type, coord=coord, edge=edge)
        axial = self.to_axial(coord)
        cx, cy = hex_to_point(orientation, self.side, axial.q, axial.r)
        dx, dy = corner_offset(orientation, self.described_radius, normalize_index(edge))
        return cx + dx, cy + dy

    def get_corner_points(self, coord: Coordinate) -> list[Point2]:
        return [self.get_corner_point(coord, edge) for edge in range(EDGES_COUNT)]

    # ------------------------------------------------------------------
    # Neighbourhood

    def get_neighbor(self, coord: C, index: int) -> C:
        return self._ops(coord).get_neighbor(coord, index)

    def get_neighbors(self, coord: C) -> Iterator[C]:
        """Lazily yield the six neighbours of ``coord`` in direction order."""

        return iter(self._ops(coord).get_neighbors(coord))

    def is_neighbors(self, coord1: C, coord2: C) -> bool:
        ops = self._ops_for_pair(coord1, coord2)
        return topology.is_neighbor(coord1, coord2, ops.get_neighbor)

    def get_neighbor_index(self, center: C, neighbor: C) -> Direction:
        ops = self._ops_for_pair(center, neighbor)
        index = topology.neighbor_index(center, neighbor, ops.get_neighbors)
        if index is None:
            raise self._error(
                NeighborNotFoundError, "Can't find neighbor index", "get_neighbor_index", center=center, neighbor=neighbor
            )
        return Direction(index)

    def get_neighbors_ring(self, center: C, radius: int) -> Iterator[C]:
        """Yield the ring of cells at exactly ``radius`` steps, clockwise."""

        ops = self._ops(center)
        return topology.ring(center, radius, ops.get_neighbor)

    def get_neighbors_around(self, center: C, radius: int) -> Iterator[C]:
        """Yield rings ``0 .. radius - 1`` around ``center``.

        ``radius`` counts rings, so ``radius=1`` yields the centre alone and
        ``radius <= 0`` yields nothing.
        """

        ops = self._ops(center)

        def get_ring(cell: C, ring_radius: int) -> Iterator[C]:
            return topology.ring(cell, ring_radius, ops.get_neighbor)

        return topology.spiral(center, radius, get_ring)

    def cube_distance(self, coord1: C, coord2: C) -> int:
        self._ops_for_pair(coord1, coord2)
        return cube_distance(self.to_cubic(coord1), self.to_cubic(coord2))

    def get_point_between_two_neighbours(self, coord1: C, coord2: C) -> Point2:
        """Midpoint of the centres of two adjacent cells."""

        ops = self._ops_for_pair(coord1, coord2)
        if not topology.is_neighbor(coord1, coord2, ops.get_neighbor):
            raise self._error(
                NotNeighborsError,
                "Can't calculate point between not neighbors",
                "get_point_between_two_neighbours",
                coord1=coord1,
                coord2=coord2,
            )
        return topology.midpoint(coord1, coord2, self.to_point2)

    normalize_index = staticmethod(normalize_index)

    # ------------------------------------------------------------------
    # Per-type strategies

    def _offset_neighbor(self, coord: Offset, index: int) -> Offset:
        return self._layout_call(
            "get_neighbor", neighbors.neighbor_offset, coord, index, self.grid_type, coord=coord, index=index
        )

    def _offset_neighbors(self, coord: Offset) -> Iterator[Offset]:
        return self._layout_call("get_neighbors", neighbors.neighbors_offset, coord, self.grid_type, coord=coord)

    def _ops(self, coord: Coordinate) -> _CoordinateOps:
        if isinstance(coord, Cubic):
            return _CoordinateOps(neighbors.neighbor_cubic, neighbors.neighbors_cubic)
        if isinstance(coord, Axial):
            return _CoordinateOps(neighbors.neighbor_axial, neighbors.neighbors_axial)
        if isinstance(coord, Offset):
            return _CoordinateOps(self._offset_neighbor, self._offset_neighbors)
        raise TypeError(f"expected Offset, Axial or Cubic, got {type(coord).__name__}")

    def _ops_for_pair(self, coord1: Coordinate, coord2: Coordinate) -> _CoordinateOps:
        if type(coord1) is not type(coord2):
            raise TypeError(
                f"coordinates must share a type, got {type(coord1).__name__} and {type(coord2).__name__}"
            )
        return self._ops(coord1)

    # ------------------------------------------------------------------
    # Diagnostics

    def _error(self, error_type: type[HexagonalError], message: str, operation: str, **fields: Any) -> HexagonalError:
        error = error_type(message, self, operation=operation, **fields)
        logger.debug("%s: %s", operation, error)
        return error

    def _layout_call(self, operation: str, func: Callable[..., Any], *args: Any, **fields: Any) -> Any:
        try:
            return func(*args)
        except UnknownGridTypeError as exc:
            raise self._error(
                UnknownGridTypeError, f"{operation} failed with unexpected grid_type", operation, **fields
            ) from exc


def cube_distance(a: Cubic, b: Cubic) -> int:
    """Number of steps between two cells."""

    return (abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)) // 2
