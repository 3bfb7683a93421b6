"""Library-wide constants."""

# Native word width assumed by the bounded modular ring.
WORD_BITS = 64

# Largest modulus for ModWordRing. Two reduced residues multiply to less
# than 2^62, so products stay inside a signed 64 bit word.
MAX_WORD_MODULUS = (1 << (WORD_BITS // 2 - 1)) - 1

# Seed table used by PrimeList() when no range is given.
DEFAULT_PRIME_RANGE = "medium"
