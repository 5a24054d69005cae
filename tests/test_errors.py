import logging

import pytest

from hexlib import Axial, Cubic, GridType, HexagonalError, HexagonalGrid, Offset, UnknownGridTypeError
from hexlib import cubic_to_offset, offset_to_cubic
from hexlib.layout import orientation_for
from hexlib.neighbors import offset_directions


@pytest.fixture
def broken_grid() -> HexagonalGrid:
    return HexagonalGrid("hexagonal_prism", 1.0)  # type: ignore[arg-type]


def test_error_message_lists_grid_and_fields():
    grid = HexagonalGrid(GridType.FLAT_EVEN, 1.0)
    error = HexagonalError("Something failed", grid, operation="lookup", coord=Axial(1, 2), index=7)
    lines = str(error).splitlines()
    assert lines[0] == "Something failed"
    assert lines[1].startswith("grid_type=GridType.FLAT_EVEN; inscribed_radius=1.0; described_radius=")
    assert lines[1].endswith("coord=A-[1:2]; index=7; ")
    assert error.operation == "lookup"
    assert error.fields == {"coord": Axial(1, 2), "index": 7}
    assert error.grid is grid


def test_error_without_context_is_plain_message():
    assert str(HexagonalError("plain")) == "plain"


def test_errors_are_value_errors():
    assert issubclass(UnknownGridTypeError, ValueError)


@pytest.mark.parametrize("prop", ["horizontal_offset", "vertical_offset", "angle_to_first_neighbor", "orientation"])
def test_unknown_grid_type_metrics(broken_grid: HexagonalGrid, prop: str):
    with pytest.raises(UnknownGridTypeError) as excinfo:
        getattr(broken_grid, prop)
    assert "grid_type=hexagonal_prism" in str(excinfo.value)


def test_unknown_grid_type_conversions(broken_grid: HexagonalGrid):
    with pytest.raises(UnknownGridTypeError) as excinfo:
        broken_grid.to_offset(Cubic(1, -1, 0))
    assert excinfo.value.operation == "to_offset"
    assert "coord=C-[1:-1:0]" in str(excinfo.value)
    with pytest.raises(UnknownGridTypeError):
        broken_grid.to_cubic(Offset(0, 0))
    with pytest.raises(UnknownGridTypeError):
        broken_grid.to_cubic(1.0, 2.0)
    with pytest.raises(UnknownGridTypeError):
        broken_grid.to_point2(Axial(0, 0))
    with pytest.raises(UnknownGridTypeError):
        broken_grid.get_neighbor(Offset(0, 0), 0)
    with pytest.raises(UnknownGridTypeError):
        broken_grid.get_neighbors(Offset(0, 0))


def test_layout_independent_queries_still_work(broken_grid: HexagonalGrid):
    assert broken_grid.to_cubic(Axial(1, 2)) == Cubic(1, -3, 2)
    assert broken_grid.get_neighbor(Cubic(0, 0, 0), 0) == Cubic(1, -1, 0)
    assert broken_grid.cube_distance(Axial(0, 0), Axial(3, -3)) == 3


def test_free_functions_reject_unknown_grid_type():
    with pytest.raises(UnknownGridTypeError):
        cubic_to_offset(Cubic(0, 0, 0), "odd")  # type: ignore[arg-type]
    with pytest.raises(UnknownGridTypeError):
        offset_to_cubic(Offset(0, 0), "odd")  # type: ignore[arg-type]
    with pytest.raises(UnknownGridTypeError):
        offset_directions(Offset(0, 0), "odd")  # type: ignore[arg-type]
    with pytest.raises(UnknownGridTypeError):
        orientation_for("odd")  # type: ignore[arg-type]


def test_errors_are_logged(caplog: pytest.LogCaptureFixture):
    grid = HexagonalGrid(GridType.POINTY_ODD, 1.0)
    with caplog.at_level(logging.DEBUG, logger="hexlib.grid"):
        with pytest.raises(HexagonalError):
            grid.get_neighbor_index(Axial(0, 0), Axial(5, 5))
    assert any("get_neighbor_index" in record.getMessage() for record in caplog.records)


def test_construction_is_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="hexlib.grid"):
        HexagonalGrid(GridType.FLAT_ODD, 4.0)
    assert any("inscribed_radius=4.0" in record.getMessage() for record in caplog.records)


def test_unknown_grid_type_corner_point_names_operation(broken_grid: HexagonalGrid):
    with pytest.raises(UnknownGridTypeError) as excinfo:
        broken_grid.get_corner_point(Axial(1, 2), 3)
    assert excinfo.value.operation == "get_corner_point"
    assert excinfo.value.fields == {"coord": Axial(1, 2), "edge": 3}
    assert "coord=A-[1:2]; edge=3; " in str(excinfo.value)


def test_unknown_grid_type_offset_neighbor_names_operation(broken_grid: HexagonalGrid):
    with pytest.raises(UnknownGridTypeError) as excinfo:
        broken_grid.get_neighbor(Offset(2, 2), 1)
    assert excinfo.value.operation == "get_neighbor"
    with pytest.raises(UnknownGridTypeError) as excinfo:
        broken_grid.get_neighbors(Offset(2, 2))
    assert excinfo.value.operation == "get_neighbors"
