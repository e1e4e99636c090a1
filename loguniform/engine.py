"""
MersenneTwister: A fully pinned 32-bit MT19937 engine.

Reproducing a sample sequence across implementations requires agreeing on
both the generator and the mapping from raw outputs to floats. This module
fixes both:

- Seeding uses Knuth's init_genrand (the same procedure as
  ``std::mt19937::seed``), not NumPy's SeedSequence.
- Floats in [0, 1) are built from two consecutive 32-bit outputs as
  ``(r1 + r2 * 2**32) / 2**64``, clamped below 1.0.

The generator itself is ``numpy.random.MT19937``; only its state is set here.
"""

from __future__ import annotations

import numpy as np

MT_STATE_SIZE = 624
DEFAULT_SEED = 5489

_TWO_32 = 4294967296.0
_TWO_64 = 18446744073709551616.0
_BELOW_ONE = np.nextafter(1.0, 0.0)


def init_genrand(seed: int) -> np.ndarray:
    """
    Compute the initial MT19937 state key for *seed*.

    Args:
        seed: Integer seed (reduced modulo 2**32).

    Returns:
        A uint32 array of length 624.
    """
    key = np.empty(MT_STATE_SIZE, dtype=np.uint32)
    x = seed & 0xFFFFFFFF
    key[0] = x
    for i in range(1, MT_STATE_SIZE):
        x = (1812433253 * (x ^ (x >> 30)) + i) & 0xFFFFFFFF
        key[i] = x
    return key


class MersenneTwister:
    """
    Seeded MT19937 engine with a specified float conversion.

    Example:
        engine = MersenneTwister(42)
        values = engine.uniform(1.5, 20.06, 100)
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._seed = seed
        self._bit_generator = np.random.MT19937()
        self._bit_generator.state = {
            "bit_generator": "MT19937",
            "state": {"key": init_genrand(seed), "pos": MT_STATE_SIZE},
        }

    @property
    def seed(self) -> int:
        """The seed this engine was created with."""
        return self._seed

    def raw(self, n: int) -> np.ndarray:
        """Return the next *n* raw 32-bit outputs (as uint64)."""
        return self._bit_generator.random_raw(n)

    def canonical(self, n: int) -> np.ndarray:
        """
        Return *n* doubles in [0, 1), two raw outputs per value.

        Args:
            n: Number of values.

        Returns:
            A float64 array of length n.
        """
        raw = self.raw(2 * n).astype(np.float64)
        low, high = raw[0::2], raw[1::2]
        u = (low + high * _TWO_32) / _TWO_64
        return np.minimum(u, _BELOW_ONE)

    def uniform(self, low: float, high: float, n: int) -> np.ndarray:
        """Return *n* doubles uniformly distributed over [low, high)."""
        return self.canonical(n) * (high - low) + low

    def __repr__(self) -> str:
        return f"MersenneTwister(seed={self._seed})"
