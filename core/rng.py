"""Randomness sources for the random() factory methods.

Use set_seed(n) at test start for reproducibility.
Default (no seed) uses os.urandom for cryptographic randomness.
"""

import os
import random as _random


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, uses os.urandom."""

    def __init__(self, seed=None):
        self._seed = seed
        if seed is not None:
            self._rng = _random.Random(seed)
        else:
            self._rng = None  # Use os-level randomness

    @property
    def seed(self):
        return self._seed

    def getrandbits(self, k: int) -> int:
        """Uniform integer in [0, 2^k)."""
        if k <= 0:
            return 0
        if self._rng is not None:
            return self._rng.getrandbits(k)
        nbytes = (k + 7) // 8
        return int.from_bytes(os.urandom(nbytes), 'big') >> (8 * nbytes - k)


# Global instance
_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Set global seed for reproducibility. None = cryptographic randomness."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def get_source() -> DeterministicRNG:
    return _global_rng


def getrandbits(k: int) -> int:
    return _global_rng.getrandbits(k)



def coin(source) -> bool:
    """One fair bit from any source offering getrandbits()."""
    return source.getrandbits(1) == 1
