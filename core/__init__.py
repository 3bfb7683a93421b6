"""Core support: constants, errors, deterministic RNG, logger setup."""

from core.constants import MAX_WORD_MODULUS, WORD_BITS, DEFAULT_PRIME_RANGE
from core.errors import NotInvertibleError, RationalParseError, ModulusTooLargeError
from core import rng
