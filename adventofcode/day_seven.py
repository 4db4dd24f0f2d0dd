"""Tachyon manifold: draw beams through splitters and build the split tree."""

from __future__ import annotations

from dataclasses import dataclass

from adventofcode.utils import render_tree


@dataclass
class TreeNode:
    """A splitter (or a leaf at the bottom row) in the beam tree."""

    x: int
    y: int
    left: TreeNode | None = None
    right: TreeNode | None = None

    def label(self) -> str:
        """Text shown for this node when the tree is rendered."""
        return f"({self.x}, {self.y})"


class BeamManifold:
    """A grid of ``S`` (start), ``^`` (splitter), ``.`` and ``|`` (beam)."""

    def __init__(self, text: str) -> None:
        self.grid = [list(line) for line in text.splitlines()]
        self.splits = 0
        self._root: TreeNode | None = None

    def _above(self, row_index: int, col_index: int) -> str | None:
        if row_index <= 0:
            return None
        above = self.grid[row_index - 1]
        return above[col_index] if col_index < len(above) else None

    def draw_beams(self) -> None:
        """Send the beam down from ``S``, splitting it at every splitter hit."""
        height = len(self.grid)
        for row_index, row in enumerate(self.grid):
            for col_index, char in enumerate(row):
                if char == "S":
                    if row_index + 1 < height and col_index < len(self.grid[row_index + 1]):
                        self.grid[row_index + 1][col_index] = "|"
                elif char == "^":
                    if self._above(row_index, col_index) != "|":
                        continue
                    if self._root is None:
                        self._root = TreeNode(col_index, row_index)
                    has_split = False
                    if col_index > 0 and row[col_index - 1] == ".":
                        row[col_index - 1] = "|"
                        has_split = True
                    if col_index + 1 < len(row) and row[col_index + 1] == ".":
                        row[col_index + 1] = "|"
                        has_split = True
                    if has_split:
                        self.splits += 1
                elif char == ".":
                    if self._above(row_index, col_index) == "|":
                        row[col_index] = "|"
                elif char != "|":
                    raise ValueError(
                        f"Unexpected character in grid at ({row_index}, {col_index}): {char!r}"
                    )

    def render(self) -> str:
        """The grid as text, one line per row."""
        return "\n".join("".join(row) for row in self.grid)

    def _find_splitter(self, col: int, row_index: int) -> TreeNode | None:
        if col < 0:
            return None
        start = row_index + 1
        for y, row in enumerate(self.grid[start:], start=start):
            if col < len(row) and row[col] == "^":
                return TreeNode(col, y)
        return None

    def build_tree(self) -> TreeNode:
        """Build the binary tree of splitters below the first one hit."""
        if self._root is None:
            self.draw_beams()
        if self._root is None:
            raise ValueError("No splitter is reached by a beam")

        bottom = len(self.grid) - 1
        root = TreeNode(self._root.x, self._root.y)
        stack = [root]
        while stack:
            node = stack.pop()
            node.left = self._find_splitter(node.x - 1, node.y)
            node.right = self._find_splitter(node.x + 1, node.y)
            left_leaf = node.left is None
            right_leaf = node.right is None
            if left_leaf:
                node.left = TreeNode(node.x, bottom)
            if right_leaf:
                node.right = TreeNode(node.x, bottom)
            if not left_leaf:
                stack.append(node.left)
            if not right_leaf:
                stack.append(node.right)

        self._root = root
        return root

    def all_paths(self, root: TreeNode) -> list[list[tuple[int, int]]]:
        """Every root-to-leaf path, left branches first."""
        paths: list[list[tuple[int, int]]] = []
        trail: list[tuple[int, int]] = []

        def walk(node: TreeNode) -> None:
            trail.append((node.x, node.y))
            if node.left is None and node.right is None:
                paths.append(list(trail))
            else:
                for child in (node.left, node.right):
                    if child is not None:
                        walk(child)
            trail.pop()

        walk(root)
        return paths

    def display_tree(self) -> str | None:
        """The current tree rendered as text, or ``None`` if there is none."""
        return render_tree(self._root) if self._root is not None else None