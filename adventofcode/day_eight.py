"""Junction boxes: join the closest boxes into circuits until one remains."""

from __future__ import annotations

import math
from dataclasses import dataclass

_UNASSIGNED = 0


@dataclass(frozen=True)
class Coordinate:
    """A junction box position in space."""

    x: int
    y: int
    z: int

    def distance(self, other: Coordinate) -> float:
        """Euclidean distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)


def _parse_coordinate(line: str) -> Coordinate:
    parts = line.split(",")
    if len(parts) < 3:
        raise ValueError(f"Expected three comma separated values in {line!r}")
    values = [int(part.strip()) for part in parts[:3]]
    if any(value < 0 for value in values):
        raise ValueError(f"Negative coordinate in {line!r}")
    return Coordinate(*values)


class Playground:
    """Junction boxes and the circuits they have been joined into."""

    def __init__(self, text: str) -> None:
        self._circuit_of: dict[Coordinate, int] = {
            _parse_coordinate(line): _UNASSIGNED for line in text.splitlines()
        }
        self._circuits: dict[int, list[Coordinate]] = {}
        self._last_id = 0
        self.handled_pairs: list[tuple[Coordinate, Coordinate]] = []

    def closest_pair(self) -> tuple[Coordinate, Coordinate]:
        """The two closest boxes that are not already in the same circuit."""
        items = list(self._circuit_of.items())
        best: tuple[Coordinate, Coordinate] | None = None
        best_distance = math.inf
        for index, (box_a, id_a) in enumerate(items):
            for box_b, id_b in items[index + 1 :]:
                if id_a == id_b and id_a != _UNASSIGNED:
                    continue
                distance = box_a.distance(box_b)
                if distance < best_distance:
                    best_distance = distance
                    best = (box_a, box_b)
        if best is None:
            raise ValueError("No closest pair found")
        return best

    def _connect(self, box_a: Coordinate, box_b: Coordinate) -> None:
        id_a = self._circuit_of[box_a]
        id_b = self._circuit_of[box_b]

        if id_a == _UNASSIGNED and id_b == _UNASSIGNED:
            self._last_id += 1
            new_id = self._last_id
            self._circuit_of[box_a] = new_id
            self._circuit_of[box_b] = new_id
            self._circuits[new_id] = [box_a, box_b]
        elif id_a == id_b:
            return
        elif id_a == _UNASSIGNED:
            self._circuit_of[box_a] = id_b
            self._circuits[id_b].append(box_a)
        elif id_b == _UNASSIGNED:
            self._circuit_of[box_b] = id_a
            self._circuits[id_a].append(box_b)
        else:
            keep_id, merge_id = sorted((id_a, id_b))
            merged = self._circuits.pop(merge_id)
            for box in merged:
                self._circuit_of[box] = keep_id
            self._circuits[keep_id].extend(merged)

    def connect_all(self) -> list[tuple[Coordinate, Coordinate]]:
        """Join closest pairs until every box shares one circuit.

        Returns the pairs joined during this call, in order.
        """
        joined: list[tuple[Coordinate, Coordinate]] = []
        while True:
            try:
                box_a, box_b = self.closest_pair()
            except ValueError:
                break
            self.handled_pairs.append((box_a, box_b))
            joined.append((box_a, box_b))
            self._connect(box_a, box_b)
        return joined

    def circuits_by_size(self) -> list[tuple[int, list[Coordinate]]]:
        """Circuits as ``(id, boxes)``, largest first."""
        return sorted(
            ((circuit_id, list(boxes)) for circuit_id, boxes in self._circuits.items()),
            key=lambda item: len(item[1]),
            reverse=True,
        )

    def unassigned(self) -> list[Coordinate]:
        """Boxes that are not part of any circuit yet."""
        return [box for box, circuit_id in self._circuit_of.items() if circuit_id == _UNASSIGNED]