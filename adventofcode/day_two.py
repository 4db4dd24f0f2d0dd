"""Product id ranges: find ids made of a repeated digit pattern."""

from __future__ import annotations

from collections.abc import Iterable


def parse_ranges(text: str) -> list[tuple[int, int]]:
    """Parse comma separated ``first-last`` ranges, over any number of lines."""
    ranges = []
    for line in text.splitlines():
        for pair in line.split(","):
            parts = pair.split("-")
            if len(parts) < 2:
                raise ValueError(f"Malformed range {pair!r}")
            ranges.append((int(parts[0]), int(parts[1])))
    return ranges


def is_repeated_pattern(id_text: str) -> bool:
    """True if ``id_text`` is a shorter prefix repeated two or more times."""
    length = len(id_text)
    for size in range(1, length):
        if length % size == 0 and id_text[:size] * (length // size) == id_text:
            return True
    return False


def find_wrong_ids(ranges: Iterable[tuple[int, int]]) -> list[int]:
    """Every id within the inclusive ranges that is a repeated pattern."""
    return [
        product_id
        for first, last in ranges
        for product_id in range(first, last + 1)
        if is_repeated_pattern(str(product_id))
    ]


def sum_wrong_ids(ranges: Iterable[tuple[int, int]]) -> int:
    """Sum of all wrong ids within the ranges."""
    return sum(find_wrong_ids(ranges))