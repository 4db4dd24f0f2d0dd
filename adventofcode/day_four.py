"""Paper roll grid: find and remove rolls that forklifts can reach."""

from __future__ import annotations

from collections.abc import Iterable

_NEIGHBOURS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]
_CROWDED = 4


class PaperGrid:
    """A grid where ``@`` marks a roll of paper."""

    def __init__(self, text: str) -> None:
        self._grid = [[char == "@" for char in line] for line in text.splitlines()]

    def _marked_neighbours(self, row: int, col: int, width: int) -> int:
        height = len(self._grid)
        return sum(
            1
            for dr, dc in _NEIGHBOURS
            if 0 <= row + dr < height
            and 0 <= col + dc < width
            and self._grid[row + dr][col + dc]
        )

    def accessible(self) -> list[tuple[int, int]]:
        """Positions of rolls with fewer than four neighbouring rolls."""
        return [
            (row, col)
            for row, cells in enumerate(self._grid)
            for col, marked in enumerate(cells)
            if marked and self._marked_neighbours(row, col, len(cells)) < _CROWDED
        ]

    def remove(self, positions: Iterable[tuple[int, int]]) -> None:
        """Clear the rolls at the given positions."""
        for row, col in positions:
            self._grid[row][col] = False

    def remove_until_stable(self) -> int:
        """Keep removing accessible rolls until none are left; return how many went."""
        total = 0
        while positions := self.accessible():
            self.remove(positions)
            total += len(positions)
        return total