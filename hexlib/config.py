"""Validated configuration for building grids."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coords import GridType

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .grid import HexagonalGrid


class GridConfig(BaseModel):
    """Layout and cell size of a grid."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    grid_type: GridType = Field(default=GridType.POINTY_ODD)
    inscribed_radius: float = Field(default=1.0, gt=0.0)

    @field_validator("grid_type", mode="before")
    @classmethod
    def _coerce_grid_type(cls, value: object) -> object:
        # Accept enum values ("pointy_odd") as well as member names in any
        # case or spelling ("POINTY_ODD", "PointyOdd").
        if isinstance(value, str):
            key = value.replace("_", "").replace("-", "").lower()
            for member in GridType:
                if key == member.name.replace("_", "").lower():
                    return member
        return value

    def build(self) -> HexagonalGrid:
        """Instantiate a :class:`~hexlib.grid.HexagonalGrid`."""

        from .grid import HexagonalGrid

        return HexagonalGrid.from_config(self)


__all__ = ["GridConfig"]
