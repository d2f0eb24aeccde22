"""Quantize scale: equal-width buckets over [min, max] mapped to a palette."""

from __future__ import annotations

import math
from collections.abc import Sequence


class ColorScale:
    """Split the domain into len(palette) buckets.

    Buckets are half-open [lo, hi) except the last, which also holds max.
    Values outside the domain fall into the first or last bucket.
    """

    def __init__(self, domain: Sequence[float], palette: Sequence[str]) -> None:
        if not palette:
            raise ValueError("palette must contain at least one color")
        self.lo = float(domain[0])
        self.hi = float(domain[-1])
        if self.hi == self.lo:
            raise ValueError(f"degenerate domain [{self.lo}, {self.hi}]")
        self.palette = tuple(palette)
        self._k = len(self.palette) / (self.hi - self.lo)

    def bucket(self, value: float) -> int:
        last = len(self.palette) - 1
        scaled = self._k * (value - self.lo)
        if math.isnan(scaled) or scaled < 0:
            return 0
        if scaled >= last:
            return last
        return math.floor(scaled)

    def quantize(self, value: float) -> str:
        return self.palette[self.bucket(value)]

    def __call__(self, value: float) -> str:
        return self.quantize(value)
