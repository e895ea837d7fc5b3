import pytest

from chartmath.convert import (
    grid_shape, make_accessor, matrix_to_cells, safe_convert, safe_convert_matrix,
    safe_float, to_points, to_polar_points,
)
from chartmath.types import Point, PolarPoint


class FakeScalar:
    """Stands in for a numpy scalar: exposes item()."""

    def __init__(self, value):
        self.value = value

    def item(self):
        return self.value


def test_safe_float_unwraps_item_and_booleans():
    assert safe_float(FakeScalar(2.5)) == 2.5
    assert safe_float(FakeScalar(True)) == 1.0
    assert safe_float(False) == 0.0
    assert safe_float("3") == 3.0
    with pytest.raises(ValueError):
        safe_float("abc")
    with pytest.raises(ValueError):
        safe_float(None)


def test_safe_convert():
    assert safe_convert([1, FakeScalar(2), 3.5]) == [1.0, 2.0, 3.5]


def test_matrix_must_be_rectangular():
    assert safe_convert_matrix([[1, 2], [3, 4]]) == [[1.0, 2.0], [3.0, 4.0]]
    with pytest.raises(ValueError, match="rectangular"):
        safe_convert_matrix([[1, 2], [3]])


def test_to_points():
    assert to_points([0, 1], [5, 6]) == [Point(0, 5), Point(1, 6)]
    assert to_points([7, 8, 9]) == [Point(0, 7), Point(1, 8), Point(2, 9)]
    with pytest.raises(ValueError):
        to_points([0, 1], [5])


def test_to_polar_points():
    assert to_polar_points([0, 90], [1, 2]) == [PolarPoint(0, 1), PolarPoint(90, 2)]
    with pytest.raises(ValueError):
        to_polar_points([0], [1, 2])


def test_matrix_to_cells_with_annotations():
    cells = matrix_to_cells([[1, 2, 3], [4, 5, 6]], annotations=[['a', 'b', 'c'], ['d', 'e', 'f']])
    assert len(cells) == 6
    assert (cells[4].x, cells[4].y, cells[4].value, cells[4].text) == (1, 1, 5.0, 'e')
    assert grid_shape(cells) == (3, 2)
    assert grid_shape([]) == (0, 0)
    with pytest.raises(ValueError):
        matrix_to_cells([[1, 2]], annotations=[['a']])


def test_make_accessor():
    assert make_accessor('y')(Point(1, 2)) == 2
    assert make_accessor(lambda p: p.x + p.y)(Point(1, 2)) == 3
