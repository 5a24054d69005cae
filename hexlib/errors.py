"""Exceptions raised by the hexagonal grid engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .grid import HexagonalGrid


class HexagonalError(ValueError):
    """Contract violation carrying a dump of the grid and offending arguments.

    The rendered message is the description on its own line followed by
    ``name=value; `` pairs: the grid's type and radii first (when a grid is
    given), then every named field in the order it was passed.
    """

    def __init__(
        self,
        message: str,
        grid: HexagonalGrid | None = None,
        *,
        operation: str | None = None,
        **fields: Any,
    ) -> None:
        self.message = message
        self.grid = grid
        self.operation = operation
        self.fields: dict[str, Any] = dict(fields)
        super().__init__(self._render())

    def _render(self) -> str:
        lines = [self.message]
        pairs: list[tuple[str, Any]] = []
        if self.grid is not None:
            pairs.append(("grid_type", self.grid.grid_type))
            pairs.append(("inscribed_radius", self.grid.inscribed_radius))
            pairs.append(("described_radius", self.grid.described_radius))
        pairs.extend(self.fields.items())
        if pairs:
            lines.append("".join(f"{name}={value}; " for name, value in pairs))
        return "\n".join(lines)


class UnknownGridTypeError(HexagonalError):
    """Raised when a layout dispatch meets a value outside :class:`GridType`."""


class NotNeighborsError(HexagonalError):
    """Raised when an operation needs two adjacent cells and gets others."""


class NeighborNotFoundError(HexagonalError):
    """Raised when a cell is not among the six neighbours of a centre."""


__all__ = [
    "HexagonalError",
    "NeighborNotFoundError",
    "NotNeighborsError",
    "UnknownGridTypeError",
]
