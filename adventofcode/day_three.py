"""Battery banks: pick digits in order to form the largest number."""

from __future__ import annotations

import string


def largest_digit(line: str) -> tuple[int, int]:
    """Return ``(index, digit)`` of the first largest digit in ``line``."""
    best_index, best_digit = 0, 0
    for index, char in enumerate(line):
        if char not in string.digits:
            raise ValueError(f"Invalid character {char!r} in line {line!r}")
        digit = int(char)
        if digit > best_digit:
            best_index, best_digit = index, digit
    return best_index, best_digit


def max_joltage(line: str, count: int) -> int:
    """Largest number formed by ``count`` digits of ``line`` kept in order."""
    if count <= 0 or count > len(line):
        raise ValueError(f"Cannot pick {count} digits from {line!r}")
    digits = []
    start = 0
    end = len(line) - count
    for _ in range(count):
        index, digit = largest_digit(line[start : end + 1])
        digits.append(str(digit))
        start += index + 1
        end += 1
    return int("".join(digits))


def total_joltage(text: str, count: int) -> int:
    """Sum of ``max_joltage`` over every line of ``text``."""
    return sum(max_joltage(line, count) for line in text.splitlines())