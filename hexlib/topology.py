"""Coordinate-agnostic neighbourhood algorithms.

Each function works for any coordinate type: the caller supplies the
neighbour step (and, where needed, the projection to the plane) as plain
callables.  The grid engine binds these to Offset, Axial or Cubic.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, TypeVar

from .neighbors import EDGES_COUNT

T = TypeVar("T")

Point2 = tuple[float, float]

# Direction taken from the centre to reach the first cell of a ring.
RING_START_DIRECTION = 4


def is_neighbor(a: T, b: T, get_neighbor: Callable[[T, int], T]) -> bool:
    return any(get_neighbor(a, index) == b for index in range(EDGES_COUNT))


def ring(center: T, radius: int, get_neighbor: Callable[[T, int], T]) -> Iterator[T]:
    """Yield the ``6 * radius`` cells at distance ``radius``, clockwise.

    Radius 0 yields the centre alone.
    """

    if radius == 0:
        yield center
        return

    current = center
    for _ in range(radius):
        current = get_neighbor(current, RING_START_DIRECTION)

    for direction in range(EDGES_COUNT):
        for _ in range(radius):
            yield current
            current = get_neighbor(current, direction)


def spiral(center: T, radius: int, get_ring: Callable[[T, int], Iterable[T]]) -> Iterator[T]:
    """Yield rings ``0 .. radius - 1`` in order of increasing distance."""

    for index in range(radius):
        yield from get_ring(center, index)


def neighbor_index(center: T, neighbor: T, get_neighbors: Callable[[T], Iterable[T]]) -> int | None:
    """Position of ``neighbor`` in the neighbours of ``center``, or ``None``."""

    for index, current in enumerate(get_neighbors(center)):
        if current == neighbor:
            return index
    return None


def midpoint(a: T, b: T, to_point: Callable[[T], Point2]) -> Point2:
    ax, ay = to_point(a)
    bx, by = to_point(b)
    return (ax + bx) / 2.0, (ay + by) / 2.0
