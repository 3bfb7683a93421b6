"""Residue rings Z/mZ for moduli that fit a machine word.

The modulus is capped at MAX_WORD_MODULUS (2^31 - 1), so the product of
two reduced residues is below 2^62 and every intermediate of multiply and
of the extended Euclidean loops below stays inside a signed 64 bit word.
gcd, egcd and inverse use the word routines in this module and never the
arbitrary-precision modular inverse. Arbitrary-precision values only enter
through from_integer() and random().
"""

import logging

from core import rng
from core.constants import MAX_WORD_MODULUS
from core.errors import ModulusTooLargeError, NotInvertibleError
from structure.elem import Modular, RingElem
from structure.factory import ModularRingFactory
from arith.integer import Integer
from arith.primes import is_probable_prime

logger = logging.getLogger(__name__)


def _gcd(a: int, b: int) -> int:
    if b == 0:
        return a
    if a == 0:
        return b
    while b != 0:
        a, b = b, a % b
    return a


def _hegcd(a: int, m: int) -> tuple[int, int]:
    """Half extended gcd: (g, x) with x*a == g (mod m) and 0 <= x."""
    if m == 0:
        return a, 1
    if a == 0:
        return m, 0
    r0, r1 = a, m
    x0, x1 = 1, 0
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        x0, x1 = x1, x0 - q * x1
    if x0 < 0:
        x0 += m
    return r0, x0


def _mod_inverse(a: int, m: int) -> int:
    if a == 0:
        raise ZeroDivisionError("zero is not invertible")
    g, x = _hegcd(a, m)
    if g != 1:
        raise ValueError(f"gcd({a}, {m}) = {g}")
    if x == 0:
        # m divides a, only possible for m == 1
        raise ValueError(f"{a} is divisible by {m}")
    return x


class ModWord(RingElem, Modular):
    """Element of Z/mZ with m <= 2^31 - 1."""

    __slots__ = ('ring', 'value')

    def __init__(self, ring: 'ModWordRing', value: int):
        self.ring = ring
        self.value = int(value) % ring.modulus

    def factory(self) -> 'ModWordRing':
        return self.ring

    def _accepts(self, other) -> bool:
        return isinstance(other, (int, ModWord))

    def _operand(self, other) -> 'ModWord':
        if isinstance(other, int):
            return ModWord(self.ring, other)
        if not isinstance(other, ModWord):
            raise TypeError(f"expected ModWord, got {type(other).__name__}")
        if other.ring.modulus != self.ring.modulus:
            raise TypeError(
                f"incompatible moduli {self.ring.modulus} and {other.ring.modulus}")
        return other

    def validate(self) -> None:
        if not 0 <= self.value < self.ring.modulus:
            raise AssertionError(f"{self.value} not reduced mod {self.ring.modulus}")
        if self.ring.modulus > MAX_WORD_MODULUS:
            raise AssertionError(f"modulus {self.ring.modulus} exceeds word bound")

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == other
        if isinstance(other, ModWord):
            return self.ring.modulus == other.ring.modulus and self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __int__(self):
        return self.value

    def __repr__(self):
        return f"ModWord({self.value} mod {self.ring.modulus})"

    def __str__(self):
        return str(self.value)

    def symmetric_integer(self) -> Integer:
        v = self.value
        if v + v > self.ring.modulus:
            v -= self.ring.modulus
        return Integer(v)

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def is_unit(self) -> bool:
        if self.is_zero():
            return False
        if self.ring.is_field():
            return True
        return _gcd(self.ring.modulus, self.value) == 1

    def signum(self) -> int:
        return 1 if self.value > 0 else 0

    def compare_to(self, other) -> int:
        other = self._operand(other)
        return (self.value > other.value) - (self.value < other.value)

    def abs(self) -> 'ModWord':
        return self

    def negate(self) -> 'ModWord':
        return ModWord(self.ring, -self.value)

    def sum(self, other) -> 'ModWord':
        return ModWord(self.ring, self.value + self._operand(other).value)

    def subtract(self, other) -> 'ModWord':
        return ModWord(self.ring, self.value - self._operand(other).value)

    def multiply(self, other) -> 'ModWord':
        return ModWord(self.ring, self.value * self._operand(other).value)

    def inverse(self) -> 'ModWord':
        try:
            return ModWord(self.ring, _mod_inverse(self.value, self.ring.modulus))
        except (ValueError, ZeroDivisionError) as e:
            raise NotInvertibleError(self, str(e)) from e

    def divide(self, other) -> 'ModWord':
        """self * other^-1, or the exact integer quotient if other is not a unit."""
        other = self._operand(other)
        try:
            return self.multiply(other.inverse())
        except NotInvertibleError:
            if other.value != 0 and self.value % other.value == 0:
                return ModWord(self.ring, self.value // other.value)
            raise

    def remainder(self, other) -> 'ModWord':
        other = self._operand(other)
        if other.is_zero():
            raise ZeroDivisionError("remainder by zero")
        if other.is_one() or other.is_unit():
            return self.ring.zero()
        return ModWord(self.ring, self.value % other.value)

    def gcd(self, other) -> 'ModWord':
        other = self._operand(other)
        if other.is_zero():
            return self
        if self.is_zero():
            return other
        if self.is_unit() or other.is_unit():
            return self.ring.one()
        return ModWord(self.ring, _gcd(self.value, other.value))

    def egcd(self, other) -> tuple['ModWord', 'ModWord', 'ModWord']:
        """(g, a, b) with a*self + b*other == g, computed on the residues."""
        other = self._operand(other)
        one, zero = self.ring.one(), self.ring.zero()
        if other.is_zero():
            return self, one, zero
        if self.is_zero():
            return other, zero, one
        self_unit, other_unit = self.is_unit(), other.is_unit()
        if self_unit and other_unit:
            return one, one, one.subtract(self).divide(other)
        if self_unit:
            return one, self.inverse(), zero
        if other_unit:
            return one, zero, other.inverse()
        # residues and cofactors stay below the modulus in magnitude
        q, r = self.value, other.value
        c1, d1 = 1, 0
        c2, d2 = 0, 1
        while r != 0:
            quot, rem = q // r, q % r
            c1, d1 = d1, c1 - quot * d1
            c2, d2 = d2, c2 - quot * d2
            q, r = r, rem
        m = self.ring.modulus
        if c1 < 0:
            c1 += m
        if c2 < 0:
            c2 += m
        return ModWord(self.ring, q), ModWord(self.ring, c1), ModWord(self.ring, c2)


class ModWordRing(ModularRingFactory):
    """Factory for Z/mZ with 0 < m <= 2^31 - 1."""

    def __init__(self, modulus: int, is_field: bool | None = None):
        modulus = int(modulus)
        if modulus > MAX_WORD_MODULUS:
            logger.warning("rejecting word modulus of %d bits, bound is %d", modulus.bit_length(), MAX_WORD_MODULUS)
            raise ModulusTooLargeError(modulus, MAX_WORD_MODULUS)
        if modulus <= 0:
            raise ValueError(f"modulus must be positive, got {modulus}")
        self.modulus = modulus
        self._is_field = is_field

    def __repr__(self):
        return f"ModWordRing({self.modulus})"

    def __str__(self):
        return f"mod({self.modulus})"

    def __eq__(self, other):
        if not isinstance(other, ModWordRing):
            return NotImplemented
        return self.modulus == other.modulus

    def __hash__(self):
        return hash(self.modulus)

    def zero(self) -> ModWord:
        return ModWord(self, 0)

    def one(self) -> ModWord:
        return ModWord(self, 1)

    def is_finite(self) -> bool:
        return True

    def is_field(self) -> bool:
        if self._is_field is None:
            self._is_field = is_probable_prime(self.modulus)
            logger.debug("word modulus %d is_field=%s", self.modulus, self._is_field)
        return self._is_field

    def characteristic(self) -> int:
        return self.modulus

    def integer_modulus(self) -> Integer:
        return Integer(self.modulus)

    def from_integer(self, a) -> ModWord:
        return ModWord(self, int(a))

    def random(self, bit_length: int, source=None) -> ModWord:
        source = source if source is not None else rng.get_source()
        return ModWord(self, source.getrandbits(bit_length))

    def chinese_remainder(self, c: ModWord, ci: ModWord, a: ModWord) -> ModWord:
        b = a.ring.from_integer(c.value)
        d = a.subtract(b)
        if d.is_zero():
            return ModWord(self, c.value)
        b = d.multiply(ci)
        return ModWord(self, c.ring.modulus * b.value + c.value)
