"""Axis-aligned geometry on a grid of tiles: points, edges and rectangles."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Coords:
    """A tile position; ordered by ``x`` then ``y``."""

    x: int
    y: int

    def area_with(self, other: Coords) -> int:
        """Number of tiles in the rectangle with corners ``self`` and ``other``."""
        return (abs(self.x - other.x) + 1) * (abs(self.y - other.y) + 1)

    def _on_horizontal_edge(self, horizontal: Sequence[Edge]) -> bool:
        index = bisect_left(horizontal, self.y, key=lambda edge: edge.start.y)
        for edge in horizontal[index:]:
            if edge.start.y != self.y:
                break
            if edge.start.x <= self.x <= edge.end.x:
                return True
        return False

    def _on_vertical_edge(self, vertical: Sequence[Edge]) -> bool:
        index = bisect_left(vertical, self.x, key=lambda edge: edge.start.x)
        for edge in vertical[index:]:
            if edge.start.x != self.x:
                break
            if edge.start.y <= self.y <= edge.end.y:
                return True
        return False

    def _crossed_edges(self, edges: Iterable[Edge]) -> int:
        left = right = crossed = 0
        for edge in edges:
            if not edge.start.x <= self.x <= edge.end.x:
                continue
            if self.x in (edge.start.x, edge.end.x):
                if edge.end.x > self.x:
                    right += 1
                else:
                    left += 1
                if right == left:
                    crossed += 1
            else:
                crossed += 1
        return crossed

    def is_inside(self, horizontal: Sequence[Edge], vertical: Sequence[Edge]) -> bool:
        """True if this point lies inside or on the polygon.

        ``horizontal`` must be sorted by the ``y`` of each edge's start and
        ``vertical`` by the ``x`` of each edge's start.
        """
        if self._on_horizontal_edge(horizontal) or self._on_vertical_edge(vertical):
            return True
        start_index = bisect_left(horizontal, self.y, key=lambda edge: edge.start.y)
        if start_index == len(horizontal):
            return False
        return self._crossed_edges(horizontal[start_index:]) % 2 == 1


class Edge:
    """A straight segment between two points, stored with ``start <= end``."""

    __slots__ = ("start", "end")

    def __init__(self, a: Coords, b: Coords) -> None:
        self.start, self.end = (a, b) if a < b else (b, a)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.start, self.end) == (other.start, other.end)

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    def __repr__(self) -> str:
        return f"Edge({self.start!r}, {self.end!r})"

    def crosses_horizontal(self, other: Edge) -> bool:
        """True if this vertical edge strictly crosses the horizontal ``other``."""
        return (
            other.start.x < self.start.x < other.end.x
            and self.start.y < other.start.y < self.end.y
        )

    def crosses_vertical(self, other: Edge) -> bool:
        """True if this horizontal edge strictly crosses the vertical ``other``."""
        return (
            self.start.x < other.start.x < self.end.x
            and other.start.y < self.start.y < other.end.y
        )


@dataclass(frozen=True)
class Rectangle:
    """Inclusive bounds of an axis-aligned rectangle."""

    left: int
    right: int
    top: int
    bottom: int

    @staticmethod
    def from_corners(a: Coords, b: Coords) -> Rectangle:
        """The rectangle with opposite corners ``a`` and ``b``."""
        return Rectangle(
            left=min(a.x, b.x),
            right=max(a.x, b.x),
            top=min(a.y, b.y),
            bottom=max(a.y, b.y),
        )

    def corners(self) -> tuple[Coords, Coords, Coords, Coords]:
        """Top-left, top-right, bottom-left and bottom-right corners."""
        return (
            Coords(self.left, self.top),
            Coords(self.right, self.top),
            Coords(self.left, self.bottom),
            Coords(self.right, self.bottom),
        )

    def contains_any_point(self, points: Iterable[Coords]) -> bool:
        """True if any point lies strictly inside the rectangle."""
        return any(
            self.left < point.x < self.right and self.top < point.y < self.bottom
            for point in points
        )

    def all_corners_inside(self, horizontal: Sequence[Edge], vertical: Sequence[Edge]) -> bool:
        """True if every corner lies inside or on the polygon."""
        return all(corner.is_inside(horizontal, vertical) for corner in self.corners())

    def edges_cross(self, horizontal: Iterable[Edge], vertical: Iterable[Edge]) -> bool:
        """True if any side of the rectangle strictly crosses a polygon edge."""
        top_left, top_right, bottom_left, bottom_right = self.corners()
        top = Edge(top_left, top_right)
        bottom = Edge(bottom_left, bottom_right)
        left = Edge(top_left, bottom_left)
        right = Edge(top_right, bottom_right)

        if any(v.crosses_horizontal(top) or v.crosses_horizontal(bottom) for v in vertical):
            return True
        return any(h.crosses_vertical(left) or h.crosses_vertical(right) for h in horizontal)