"""Dial rotations: count how often the dial passes zero."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

WRAP_AT = 100
START_POSITION = 50


class Direction(enum.Enum):
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Instruction:
    direction: Direction
    distance: int


def _parse_line(line: str) -> Instruction:
    head, tail = line[:1], line[1:]
    try:
        direction = Direction(head)
    except ValueError:
        raise ValueError(f"Invalid direction in {line!r}") from None
    distance = int(tail)
    if distance < 0:
        raise ValueError(f"Negative distance in {line!r}")
    return Instruction(direction, distance)


def parse_instructions(text: str) -> list[Instruction]:
    """Parse one ``L<n>`` or ``R<n>`` instruction per line."""
    return [_parse_line(line) for line in text.splitlines()]


def count_zero_passes(instructions: Iterable[Instruction], start: int = START_POSITION) -> int:
    """Apply the rotations and count the times the dial passes zero."""
    position = start
    zeroes = 0
    for instruction in instructions:
        distance = instruction.distance
        zeroes += (position + distance) // WRAP_AT
        if instruction.direction is Direction.LEFT:
            if position < distance:
                position = WRAP_AT + position - distance % WRAP_AT
            else:
                position -= distance
            position %= WRAP_AT
        else:
            position = (position + distance) % WRAP_AT
    return zeroes