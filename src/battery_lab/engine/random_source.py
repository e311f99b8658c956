"""Standard-normal random source.

Box-Muller over the uniform stream of a ``numpy.random.Generator``:

  z = √(−2 ln u) × cos(2π v),   u, v ~ U(0, 1)

``Generator.random()`` samples ``[0, 1)``, so u = 0 is possible and would
send ln u to −∞.  Both uniforms are redrawn until strictly positive.

Every simulation run owns its own ``RandomSource``.  Independent child
sources come from :meth:`RandomSource.spawn`, which splits the underlying
``numpy.random.SeedSequence``; two sources never share generator state.
"""

from __future__ import annotations

import math

import numpy as np


class RandomSource:
    """Seedable generator of N(0, 1) deviates.

    Usage::

        root = RandomSource(seed=42)
        white_src, colored_src = root.spawn(2)
        z = white_src.next_standard_normal()

    Parameters
    ----------
    seed : int | numpy.random.SeedSequence | None
        Seed or seed sequence.  ``None`` draws fresh OS entropy.
    """

    def __init__(self, seed: int | np.random.SeedSequence | None = None) -> None:
        if isinstance(seed, np.random.SeedSequence):
            self._seed_seq = seed
        else:
            self._seed_seq = np.random.SeedSequence(seed)
        self._rng = np.random.default_rng(self._seed_seq)

    def _positive_uniform(self) -> float:
        u = 0.0
        while u == 0.0:
            u = float(self._rng.random())
        return u

    def next_standard_normal(self) -> float:
        """One N(0, 1) sample.  Advances the generator."""
        u = self._positive_uniform()
        v = self._positive_uniform()
        return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)

    def spawn(self, n: int) -> list[RandomSource]:
        """``n`` independent child sources (no shared state with the parent)."""
        return [RandomSource(child) for child in self._seed_seq.spawn(n)]
