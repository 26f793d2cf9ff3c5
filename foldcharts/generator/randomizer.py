"""Seeded amplitude generator.

Each instance owns its own numpy ``Generator`` (PCG64), so the length and
angle streams of one chart never share state and replay identically for the
same seed on every platform.
"""

from __future__ import annotations

import numpy as np


class RandomGenerator:
    def __init__(self, seed: int, amplitude: float) -> None:
        self.seed = seed
        self.amplitude = amplitude
        self._rng = np.random.default_rng(seed)

    def generate(self) -> float:
        """Next draw in [0, amplitude)."""
        return float(self._rng.random()) * self.amplitude

    def __repr__(self) -> str:
        return f"RandomGenerator(seed={self.seed}, amplitude={self.amplitude})"
