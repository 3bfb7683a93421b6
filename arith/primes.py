"""Shared, lazily extended lists of probable primes.

Each PrimeRange has one process-wide table, seeded on first use with known
primes (2^e - x for the offsets tabulated by Knuth, vol. 2, p. 390, or
Mersenne primes) in increasing order. get(i) past the end appends
successive probable primes after the current tail. Tables only grow, and
growth happens under a lock so concurrent readers never see a torn list.
"""

import logging
import threading
from enum import Enum

from sympy import isprime, nextprime

from core.constants import DEFAULT_PRIME_RANGE
from structure.power import positive_power
from arith.integer import Integer

logger = logging.getLogger(__name__)


class PrimeRange(Enum):
    SMALL = "small"
    LOW = "low"
    MEDIUM = "medium"
    LARGE = "large"
    MERSENNE = "mersenne"


_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)

# exponent e -> offsets x such that 2^e - x is prime
_OFFSETS = {
    PrimeRange.LOW: (
        (15, (19, 49, 51, 55, 61, 75, 81, 115, 121, 135)),
        (16, (15, 17, 39, 57, 87, 89, 99, 113, 117, 123)),
    ),
    PrimeRange.MEDIUM: (
        (28, (57, 89, 95, 119, 125, 143, 165, 183, 213, 273)),
        (29, (3, 33, 43, 63, 73, 75, 93, 99, 121, 133)),
        (32, (5, 17, 65, 99, 107, 135, 153, 185, 209, 267)),
    ),
    PrimeRange.LARGE: (
        (59, (55, 99, 225, 427, 517, 607, 649, 687, 861, 871)),
        (60, (93, 107, 173, 179, 257, 279, 369, 395, 399, 453)),
        (63, (25, 165, 259, 301, 375, 387, 391, 409, 457, 471)),
    ),
}

_MERSENNE_EXPONENTS = (2, 3, 5, 7, 13, 17, 19, 31, 61, 89, 107, 127, 521, 607,
                       1279, 2203, 2281, 3217, 4253, 4423, 9689, 9941, 11213, 19937)

_tables: dict[PrimeRange, list[int]] = {}
_lock = threading.Lock()


def is_probable_prime(n: int) -> bool:
    return bool(isprime(int(n)))


def long_prime(e: int, x: int) -> int:
    """2^e - x."""
    return (1 << e) - x


def mersenne_prime(e: int) -> int:
    """2^e - 1."""
    return positive_power(Integer(2), e).value - 1


def _seed(prime_range: PrimeRange) -> list[int]:
    if prime_range is PrimeRange.SMALL:
        seeds = list(_SMALL_PRIMES)
    elif prime_range is PrimeRange.MERSENNE:
        seeds = [mersenne_prime(e) for e in _MERSENNE_EXPONENTS]
    else:
        seeds = [long_prime(e, x) for e, offsets in _OFFSETS[prime_range] for x in offsets]
    seeds.sort()
    return seeds


def _table(prime_range: PrimeRange) -> list[int]:
    table = _tables.get(prime_range)
    if table is None:
        with _lock:
            table = _tables.get(prime_range)
            if table is None:
                table = _seed(prime_range)
                _tables[prime_range] = table
                logger.debug("seeded %s prime table with %d entries", prime_range.value, len(table))
    return table


class PrimeList:
    """View on the shared prime table of one range.

    Iterating yields a fresh unbounded cursor starting at index 0.
    """

    def __init__(self, prime_range: PrimeRange | str | None = None):
        if prime_range is None:
            prime_range = DEFAULT_PRIME_RANGE
        self.range = PrimeRange(prime_range)
        self._val = _table(self.range)

    def __repr__(self):
        return f"PrimeList({self.range.value}, size={len(self)})"

    def __len__(self):
        return len(self._val)

    def last(self) -> int:
        return self._val[-1]

    def get(self, i: int) -> int:
        if i < 0:
            raise IndexError(f"negative prime index {i}")
        val = self._val
        if i < len(val):
            return val[i]
        with _lock:
            start = len(val)
            while len(val) <= i:
                val.append(int(nextprime(val[-1])))
            if len(val) > start:
                logger.debug("extended %s prime table to %d entries, last %d",
                             self.range.value, len(val), val[-1])
        return val[i]

    def __getitem__(self, i: int) -> int:
        return self.get(i)

    def __iter__(self):
        i = 0
        while True:
            yield self.get(i)
            i += 1


def primes(prime_range: PrimeRange | str | None = None):
    """Fresh infinite iterator over the primes of a range."""
    return iter(PrimeList(prime_range))
