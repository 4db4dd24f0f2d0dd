"""Ingredient database: fresh id ranges and available ingredient ids."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Inventory:
    """Inclusive fresh id ranges and the ingredient ids on hand."""

    ranges: list[tuple[int, int]] = field(default_factory=list)
    values: list[int] = field(default_factory=list)

    def is_fresh(self, value: int) -> bool:
        """True if ``value`` lies in any of the fresh ranges."""
        return any(start <= value <= end for start, end in self.ranges)

    def fresh_count(self) -> int:
        """How many of the available ids are fresh."""
        return sum(1 for value in self.values if self.is_fresh(value))

    def covered_count(self) -> int:
        """How many distinct ids the fresh ranges cover together."""
        if not self.ranges:
            return 0
        ordered = sorted(self.ranges, key=lambda span: span[0])
        total = 0
        current_start, current_end = ordered[0]
        for start, end in ordered[1:]:
            if start <= current_end + 1:
                current_end = max(current_end, end)
            else:
                total += current_end - current_start + 1
                current_start, current_end = start, end
        return total + current_end - current_start + 1


def parse_inventory(text: str) -> Inventory:
    """Parse ranges, a blank line, then one available id per line."""
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("Expected a range section and a value section")
    ranges_part, values_part = sections[0], sections[1]

    ranges = []
    for line in ranges_part.splitlines():
        parts = line.split("-")
        if len(parts) < 2:
            raise ValueError(f"Malformed range {line!r}")
        ranges.append((int(parts[0]), int(parts[1])))

    values = [int(line) for line in values_part.splitlines()]
    return Inventory(ranges, values)