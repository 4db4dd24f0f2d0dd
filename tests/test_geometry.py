import pytest

from adventofcode.geometry import Coords, Edge, Rectangle

TILES = "7,1\n11,1\n11,7\n9,7\n9,5\n2,5\n2,3\n7,3"


def _points():
    return [Coords(*map(int, line.split(","))) for line in TILES.splitlines()]


def _edges():
    points = _points()
    horizontal, vertical = [], []
    for a, b in zip(points, points[1:] + points[:1]):
        edge = Edge(a, b)
        (horizontal if a.y == b.y else vertical).append(edge)
    horizontal.sort(key=lambda e: e.start.y)
    vertical.sort(key=lambda e: e.start.x)
    return horizontal, vertical


def test_area_of_example_rectangle():
    assert Coords(2, 5).area_with(Coords(11, 1)) == 50


def test_area_of_single_tile():
    assert Coords(3, 4).area_with(Coords(3, 4)) == 1


def test_area_is_symmetric():
    a, b = Coords(7, 1), Coords(2, 5)
    assert a.area_with(b) == b.area_with(a)


def test_coords_order_by_x_then_y():
    assert sorted([Coords(2, 1), Coords(1, 5), Coords(1, 2)]) == [
        Coords(1, 2),
        Coords(1, 5),
        Coords(2, 1),
    ]


def test_edge_normalises_endpoints():
    a, b = Coords(11, 7), Coords(11, 1)
    edge = Edge(a, b)
    assert edge.start == b
    assert edge.end == a
    assert Edge(b, a) == edge


def test_vertical_crosses_horizontal():
    vertical = Edge(Coords(5, 0), Coords(5, 10))
    horizontal = Edge(Coords(0, 5), Coords(10, 5))
    assert vertical.crosses_horizontal(horizontal) is True
    assert horizontal.crosses_vertical(vertical) is True


def test_touching_edges_do_not_cross():
    vertical = Edge(Coords(5, 0), Coords(5, 5))
    horizontal = Edge(Coords(0, 5), Coords(10, 5))
    assert vertical.crosses_horizontal(horizontal) is False
    assert horizontal.crosses_vertical(vertical) is False


def test_polygon_vertices_are_inside():
    horizontal, vertical = _edges()
    assert all(point.is_inside(horizontal, vertical) for point in _points())


@pytest.mark.parametrize(
    "point, inside",
    [
        (Coords(8, 2), True),
        (Coords(3, 4), True),
        (Coords(10, 6), True),
        (Coords(9, 3), True),
        (Coords(3, 2), False),
        (Coords(0, 0), False),
        (Coords(13, 13), False),
        (Coords(4, 6), False),
    ],
)
def test_is_inside(point, inside):
    horizontal, vertical = _edges()
    assert point.is_inside(horizontal, vertical) is inside


def test_rectangle_from_corners_normalises():
    rect = Rectangle.from_corners(Coords(9, 5), Coords(2, 3))
    assert rect == Rectangle.from_corners(Coords(2, 3), Coords(9, 5))
    assert rect.corners() == (Coords(2, 3), Coords(9, 3), Coords(2, 5), Coords(9, 5))


def test_contains_any_point_is_strict():
    rect = Rectangle.from_corners(Coords(2, 3), Coords(9, 5))
    assert rect.contains_any_point(_points()) is False
    assert rect.contains_any_point([Coords(5, 4)]) is True


def test_contains_point_strictly_inside_polygon_rectangle():
    rect = Rectangle.from_corners(Coords(7, 1), Coords(11, 7))
    assert rect.contains_any_point(_points()) is True


def test_all_corners_inside():
    horizontal, vertical = _edges()
    good = Rectangle.from_corners(Coords(2, 3), Coords(9, 5))
    bad = Rectangle.from_corners(Coords(2, 5), Coords(9, 7))
    assert good.all_corners_inside(horizontal, vertical) is True
    assert bad.all_corners_inside(horizontal, vertical) is False


def test_edges_cross():
    horizontal, vertical = _edges()
    clean = Rectangle.from_corners(Coords(2, 3), Coords(9, 5))
    crossing = Rectangle.from_corners(Coords(7, 1), Coords(9, 7))
    assert clean.edges_cross(horizontal, vertical) is False
    assert crossing.edges_cross(horizontal, vertical) is True