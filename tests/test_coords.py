import pytest

from hexlib import Axial, Cubic, Direction, GridType, Offset


def test_cubic_invariant():
    c = Cubic(1, -2, 1)
    assert c.x + c.y + c.z == 0
    assert c.is_valid()


def test_integer_construction_does_not_validate():
    c = Cubic(1, 1, 1)
    assert not c.is_valid()
    assert str(c) == "C-[Invalid]"


@pytest.mark.parametrize(
    ("candidates", "expected"),
    [
        ((0.0, 0.0, 0.0), Cubic(0, 0, 0)),
        ((1.6, -0.7, -0.9), Cubic(2, -1, -1)),
        ((0.6, 0.6, -1.2), Cubic(1, 0, -1)),
        ((-0.2, 1.45, -1.25), Cubic(0, 1, -1)),
        ((2.49, -3.02, 0.53), Cubic(2, -3, 1)),
    ],
)
def test_round_restores_zero_sum(candidates, expected):
    rounded = Cubic.round(*candidates)
    assert rounded == expected
    assert rounded.is_valid()


def test_cubic_arithmetic():
    a = Cubic(1, -1, 0)
    b = Cubic(0, 2, -2)
    assert a + b == Cubic(1, 1, -2)
    assert a - b == Cubic(1, -3, 2)
    assert a * 3 == Cubic(3, -3, 0)
    assert 3 * a == Cubic(3, -3, 0)
    assert a + 1 == Cubic(2, 0, 1)
    assert not (a + 1).is_valid()
    assert a - 1 == Cubic(0, -2, -1)


def test_cubic_float_scaling_rounds_to_valid_cell():
    scaled = Cubic(1, -1, 0) * 2.5
    assert scaled == Cubic(2, -2, 0)
    assert scaled.is_valid()


def test_cubic_rotate_right():
    east = Cubic(1, -1, 0)
    assert east.rotate_right() == Cubic(1, 0, -1)
    assert east.rotate_right(6) == east
    assert east.rotate_right(0) == east
    assert east.rotate_right(-1) == east.rotate_right(5)
    assert east.rotate_right(3) == Cubic(-1, 1, 0)


def test_axial_arithmetic():
    a = Axial(3, -2)
    assert a + Axial(1, 1) == Axial(4, -1)
    assert a - Axial(1, 1) == Axial(2, -3)
    assert a + 2 == Axial(5, 0)
    assert a - 2 == Axial(1, -4)
    assert a * -1 == Axial(-3, 2)


def test_offset_arithmetic():
    o = Offset(5, -3)
    assert o + Offset(1, 2) == Offset(6, -1)
    assert o - Offset(1, 2) == Offset(4, -5)
    assert o * 2 == Offset(10, -6)
    assert o // 2 == Offset(2, -2)
    assert o / 2 == Offset(2, -1)
    assert o.shifted(-5, 3) == Offset.ZERO
    assert (o.col, o.row) == (5, -3)


def test_offset_clamp():
    lo, hi = Offset(0, 0), Offset(5, 5)
    assert Offset.clamp(Offset(-3, 9), lo, hi) == Offset(0, 5)
    assert Offset.clamp(Offset(2, 3), lo, hi) == Offset(2, 3)


def test_debug_strings():
    assert str(Offset(1, -2)) == "O-[1:-2]"
    assert str(Axial(0, 7)) == "A-[0:7]"
    assert str(Cubic(2, -3, 1)) == "C-[2:-3:1]"


def test_coordinates_are_hashable_and_immutable():
    cells = {Axial(0, 0), Axial(0, 0), Axial(1, 0)}
    assert len(cells) == 2
    with pytest.raises(AttributeError):
        Axial(0, 0).q = 1  # type: ignore[misc]


def test_zero_constants():
    assert Axial.ZERO == Axial(0, 0)
    assert Cubic.ZERO == Cubic(0, 0, 0)
    assert Offset.ZERO == Offset(0, 0)


def test_grid_type_orientation_flags():
    assert GridType.POINTY_ODD.is_pointy and not GridType.POINTY_ODD.is_flat
    assert GridType.FLAT_EVEN.is_flat and not GridType.FLAT_EVEN.is_pointy


def test_direction_order():
    assert [d.value for d in Direction] == [0, 1, 2, 3, 4, 5]
    assert Direction.NORTH_WEST == 4


@pytest.mark.parametrize(
    ("offset", "divisor", "expected"),
    [
        (Offset(-3, -5), 2, Offset(-1, -2)),
        (Offset(3, 5), 2, Offset(1, 2)),
        (Offset(-3, 5), -2, Offset(1, -2)),
        (Offset(0, -1), 3, Offset(0, 0)),
    ],
)
def test_offset_division_truncates_toward_zero(offset, divisor, expected):
    assert offset / divisor == expected


def test_offset_floor_division_rounds_down():
    assert Offset(-3, -5) // 2 == Offset(-2, -3)
