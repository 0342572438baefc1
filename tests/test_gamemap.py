import pytest

from tinyraycaster.gamemap import GameMap, default_map


def test_default_map_size():
    m = default_map()
    assert (m.width, m.height) == (16, 16)
    assert len(m.cells) == 256


def test_default_map_cells():
    m = default_map()
    assert m.cell(0, 0) == 0
    assert m.cell(4, 0) == 2
    assert m.cell(15, 1) == 5
    assert not m.is_empty(0, 0)
    assert m.is_empty(1, 1)


def test_border_is_solid():
    m = default_map()
    for k in range(16):
        assert not m.is_empty(k, 0)
        assert not m.is_empty(k, 15)
        assert not m.is_empty(0, k)
        assert not m.is_empty(15, k)


def test_float_coordinates_truncate():
    m = GameMap(3, 1, "1 2")
    assert m.is_empty(1.99, 0.5)
    assert m.cell(2.4, 0.0) == 2


def test_length_mismatch():
    with pytest.raises(ValueError):
        GameMap(2, 2, "123")


@pytest.mark.parametrize("i,j", [(16, 0), (0, 16), (-1, 3), (3, -2)])
def test_out_of_range(i, j):
    m = default_map()
    with pytest.raises(IndexError):
        m.cell(i, j)
    with pytest.raises(IndexError):
        m.is_empty(i, j)