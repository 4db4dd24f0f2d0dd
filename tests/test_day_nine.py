import pytest

from adventofcode.day_nine import TileFloor
from adventofcode.geometry import Coords

TILES = "7,1\n11,1\n11,7\n9,7\n9,5\n2,5\n2,3\n7,3"


def test_parses_tiles_in_order():
    floor = TileFloor(TILES)
    assert floor.tiles[0] == Coords(7, 1)
    assert floor.tiles[-1] == Coords(7, 3)
    assert len(floor.tiles) == 8


def test_edges_split_into_horizontal_and_vertical():
    floor = TileFloor(TILES)
    assert len(floor.horizontal) + len(floor.vertical) == len(floor.tiles)
    assert all(edge.start.y == edge.end.y for edge in floor.horizontal)
    assert all(edge.start.x == edge.end.x for edge in floor.vertical)


def test_edges_are_sorted():
    floor = TileFloor(TILES)
    ys = [edge.start.y for edge in floor.horizontal]
    xs = [edge.start.x for edge in floor.vertical]
    assert ys == sorted(ys)
    assert xs == sorted(xs)


def test_largest_rectangle_example():
    assert TileFloor(TILES).largest_rectangle() == 50


def test_largest_inside_rectangle_example():
    assert TileFloor(TILES).largest_inside_rectangle() == 24


def test_inside_never_exceeds_unconstrained():
    floor = TileFloor(TILES)
    assert floor.largest_inside_rectangle() <= floor.largest_rectangle()


def test_rectangle_polygon_fully_inside():
    floor = TileFloor("0,0\n4,0\n4,2\n0,2")
    assert floor.largest_rectangle() == floor.largest_inside_rectangle()
    assert floor.largest_rectangle() == Coords(0, 0).area_with(Coords(4, 2))


def test_empty_input_has_no_rectangle():
    floor = TileFloor("")
    assert floor.largest_rectangle() == 0
    assert floor.largest_inside_rectangle() == 0


@pytest.mark.parametrize("text", ["1", "a,2", "1,-2"])
def test_malformed_tile_raises(text):
    with pytest.raises(ValueError):
        TileFloor(text)