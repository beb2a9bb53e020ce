"""Deterministic 1D noise source.

The composer only needs `noise(x) -> [0, 1]`, continuous in x and stable per
input; anything satisfying NoiseSource can be injected.
"""

from __future__ import annotations

import math
from typing import Protocol

import numpy as np

# Lattice size; lattice indices wrap at this period.
_PERIOD = 4096


class NoiseSource(Protocol):
    def __call__(self, x: float) -> float: ...


def _scaled_cosine(t: float) -> float:
    return 0.5 * (1.0 - math.cos(t * math.pi))


class PerlinNoise:
    """Seeded octave value noise on a 1D lattice, in the manner of p5's noise().

    Every lattice point holds a random value in [0, 1); between points the
    values are blended with a cosine ease. Each octave doubles the frequency
    and scales the amplitude by `falloff`, starting at 0.5, so the sum stays
    below 1. Negative inputs mirror positive ones.
    """

    def __init__(self, seed: int = 0, octaves: int = 4, falloff: float = 0.5) -> None:
        if octaves < 1:
            raise ValueError("octaves must be >= 1")
        if not 0.0 < falloff <= 1.0:
            raise ValueError("falloff must lie in (0, 1]")
        rng = np.random.default_rng(seed)
        self._lattice = rng.random(_PERIOD)
        self.seed = seed
        self.octaves = octaves
        self.falloff = falloff

    def _value(self, i: int) -> float:
        return float(self._lattice[i % _PERIOD])

    def __call__(self, x: float) -> float:
        x = abs(x)
        xi = math.floor(x)
        xf = x - xi

        total = 0.0
        amplitude = 0.5
        for _ in range(self.octaves):
            v0 = self._value(xi)
            v1 = self._value(xi + 1)
            total += (v0 + _scaled_cosine(xf) * (v1 - v0)) * amplitude
            amplitude *= self.falloff
            xi <<= 1
            xf *= 2
            if xf >= 1.0:
                xi += 1
                xf -= 1.0
        return max(0.0, min(1.0, total))


class ConstantNoise:
    """Returns the same value everywhere. Handy for tests and flat layouts."""

    def __init__(self, value: float = 0.5) -> None:
        if not 0.0 <= value <= 1.0:
            raise ValueError("noise value must lie in [0, 1]")
        self.value = value

    def __call__(self, x: float) -> float:
        return self.value
