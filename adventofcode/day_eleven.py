"""Device graph: count paths to ``out``, optionally through ``dac`` and ``fft``."""

from __future__ import annotations

OUT = "out"
DAC = "dac"
FFT = "fft"


class DeviceGraph:
    """Devices and the devices their outputs lead to."""

    def __init__(self, text: str, require_both: bool = False) -> None:
        self.edges: dict[str, list[str]] = {}
        for line in text.splitlines():
            parts = line.split(":")
            node = parts[0].strip()
            self.edges[node] = parts[1].split() if len(parts) > 1 else []
        self.require_both = require_both
        self._cache: dict[tuple[str, bool, bool], int] = {}

    def count_paths(self, start: str = "you") -> int:
        """Number of paths from ``start`` to ``out``.

        With ``require_both`` only paths visiting both ``dac`` and ``fft``
        are counted.
        """
        return self._count(start, False, False)

    def _count(self, key: str, seen_dac: bool, seen_fft: bool) -> int:
        if self.require_both:
            if key == DAC:
                seen_dac = True
            elif key == FFT:
                seen_fft = True
            elif key == OUT:
                return 1 if seen_dac and seen_fft else 0
        elif key == OUT:
            return 1

        cache_key = (key, seen_dac, seen_fft)
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            children = self.edges[key]
        except KeyError:
            raise KeyError(f"Unknown device {key!r}") from None

        total = sum(self._count(child, seen_dac, seen_fft) for child in children)
        self._cache[cache_key] = total
        return total