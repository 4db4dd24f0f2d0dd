"""Shared helpers: input loading, tree rendering and timing."""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any


def read_input(path: str | Path) -> str:
    """Return the whole text of the file at ``path``."""
    return Path(path).read_text(encoding="utf-8")


def render_tree(node: Any) -> str:
    """Render a binary tree as indented text.

    ``node`` must have ``left`` and ``right`` attributes (a child node or
    ``None``) and a ``label()`` method returning the text shown for it.
    """
    lines: list[str] = []
    _render(node, "", "", True, lines)
    return "".join(lines)


def _render(node: Any, prefix: str, child_prefix: str, is_root: bool, out: list[str]) -> None:
    out.append(f"{'' if is_root else prefix}{node.label()}\n")
    has_right = node.right is not None

    if node.left is not None:
        is_last = not has_right
        connector = "└── L: " if is_last else "├── L: "
        extension = "    " if is_last else "│   "
        _render(node.left, child_prefix + connector, child_prefix + extension, False, out)

    if node.right is not None:
        _render(node.right, child_prefix + "└── R: ", child_prefix + "    ", False, out)


def _format_duration(nanoseconds: int) -> str:
    if nanoseconds >= 1_000_000_000:
        return f"{nanoseconds / 1_000_000_000:.2f}s"
    if nanoseconds >= 1_000_000:
        return f"{nanoseconds / 1_000_000:.2f}ms"
    if nanoseconds >= 1_000:
        return f"{nanoseconds / 1_000:.2f}µs"
    return f"{nanoseconds:.2f}ns"


@contextmanager
def timed(task_name: str) -> Iterator[None]:
    """Time the enclosed block and print how long it took."""
    start = time.perf_counter_ns()
    yield
    elapsed = time.perf_counter_ns() - start
    print(f"{task_name} completed in: {_format_duration(elapsed)}")