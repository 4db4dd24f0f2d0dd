"""Movie theater tiles: the largest rectangles between red tiles."""

from __future__ import annotations

from itertools import combinations

from adventofcode.geometry import Coords, Edge, Rectangle


def _parse_tile(line: str) -> Coords:
    parts = line.split(",")
    if len(parts) < 2:
        raise ValueError(f"Expected two comma separated values in {line!r}")
    x, y = int(parts[0].strip()), int(parts[1].strip())
    if x < 0 or y < 0:
        raise ValueError(f"Negative coordinate in {line!r}")
    return Coords(x, y)


class TileFloor:
    """Red tiles in order, forming a closed axis-aligned polygon."""

    def __init__(self, text: str) -> None:
        self.tiles = [_parse_tile(line) for line in text.splitlines()]

        horizontal: list[Edge] = []
        vertical: list[Edge] = []
        count = len(self.tiles)
        for index, first in enumerate(self.tiles):
            second = self.tiles[(index + 1) % count]
            edge = Edge(first, second)
            if first.y == second.y:
                horizontal.append(edge)
            else:
                vertical.append(edge)

        self.horizontal = sorted(horizontal, key=lambda edge: edge.start.y)
        self.vertical = sorted(vertical, key=lambda edge: edge.start.x)

    def largest_rectangle(self) -> int:
        """Largest area of a rectangle with two red tiles as opposite corners."""
        return max(
            (a.area_with(b) for a, b in combinations(self.tiles, 2)),
            default=0,
        )

    def _is_valid(self, rect: Rectangle) -> bool:
        if rect.contains_any_point(self.tiles):
            return False
        if not rect.all_corners_inside(self.horizontal, self.vertical):
            return False
        return not rect.edges_cross(self.horizontal, self.vertical)

    def largest_inside_rectangle(self) -> int:
        """Largest such rectangle lying wholly inside the polygon."""
        best = 0
        for a in self.tiles:
            for b in self.tiles:
                area = a.area_with(b)
                if area > best and self._is_valid(Rectangle.from_corners(a, b)):
                    best = area
        return best