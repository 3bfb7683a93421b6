"""Residue rings Z/mZ over arbitrary-precision integers.

ModIntegerRing is the factory and owns the modulus and a memoized field
flag; ModInteger values are always reduced into [0, m). Inversion uses the
host modular inverse, pow(v, -1, m).
"""

import logging
import math

from core import rng
from core.digits import int_to_digits
from core.errors import NotInvertibleError
from structure.elem import Modular, RingElem
from structure.factory import ModularRingFactory
from arith.integer import Integer
from arith.primes import is_probable_prime

logger = logging.getLogger(__name__)


class ModInteger(RingElem, Modular):
    """Element of Z/mZ with an arbitrary-precision modulus."""

    __slots__ = ('ring', 'value')

    def __init__(self, ring: 'ModIntegerRing', value: int):
        self.ring = ring
        self.value = int(value) % ring.modulus

    def factory(self) -> 'ModIntegerRing':
        return self.ring

    def _accepts(self, other) -> bool:
        return isinstance(other, (int, ModInteger))

    def _operand(self, other) -> 'ModInteger':
        if isinstance(other, int):
            return ModInteger(self.ring, other)
        if not isinstance(other, ModInteger):
            raise TypeError(f"expected ModInteger, got {type(other).__name__}")
        if other.ring.modulus != self.ring.modulus:
            raise TypeError(
                f"incompatible moduli {int_to_digits(self.ring.modulus)} and {int_to_digits(other.ring.modulus)}")
        return other

    def validate(self) -> None:
        if not 0 <= self.value < self.ring.modulus:
            raise AssertionError(f"{int_to_digits(self.value)} not reduced mod {int_to_digits(self.ring.modulus)}")

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == other
        if isinstance(other, ModInteger):
            return self.ring.modulus == other.ring.modulus and self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __int__(self):
        return self.value

    def __repr__(self):
        return f"ModInteger({int_to_digits(self.value)} mod {int_to_digits(self.ring.modulus)})"

    def __str__(self):
        return int_to_digits(self.value)

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
        return math.gcd(self.ring.modulus, self.value) == 1

    def signum(self) -> int:
        return 1 if self.value > 0 else 0

    def compare_to(self, other) -> int:
        other = self._operand(other)
        return (self.value > other.value) - (self.value < other.value)

    def abs(self) -> 'ModInteger':
        return self

    def negate(self) -> 'ModInteger':
        return ModInteger(self.ring, -self.value)

    def sum(self, other) -> 'ModInteger':
        return ModInteger(self.ring, self.value + self._operand(other).value)

    def subtract(self, other) -> 'ModInteger':
        return ModInteger(self.ring, self.value - self._operand(other).value)

    def multiply(self, other) -> 'ModInteger':
        return ModInteger(self.ring, self.value * self._operand(other).value)

    def inverse(self) -> 'ModInteger':
        if self.is_zero():
            raise NotInvertibleError(self, "zero has no inverse")
        try:
            return ModInteger(self.ring, pow(self.value, -1, self.ring.modulus))
        except ValueError as e:
            g = math.gcd(self.value, self.ring.modulus)
            raise NotInvertibleError(self, f"gcd with modulus is {int_to_digits(g)}") from e

    def divide(self, other) -> 'ModInteger':
        """self * other^-1, or the exact integer quotient if other is not a unit."""
        other = self._operand(other)
        try:
            return self.multiply(other.inverse())
        except NotInvertibleError:
            if other.value != 0 and self.value % other.value == 0:
                return ModInteger(self.ring, self.value // other.value)
            raise

    def remainder(self, other) -> 'ModInteger':
        other = self._operand(other)
        if other.is_zero():
            raise ZeroDivisionError("remainder by zero")
        if other.is_one() or other.is_unit():
            return self.ring.zero()
        return ModInteger(self.ring, self.value % other.value)

    def gcd(self, other) -> 'ModInteger':
        other = self._operand(other)
        if other.is_zero():
            return self
        if self.is_zero():
            return other
        if self.is_unit() or other.is_unit():
            return self.ring.one()
        return ModInteger(self.ring, math.gcd(self.value, other.value))

    def egcd(self, other) -> tuple['ModInteger', 'ModInteger', 'ModInteger']:
        """(g, a, b) with a*self + b*other == g, computed on the residues."""
        other = self._operand(other)
        one, zero = self.ring.one(), self.ring.zero()
        if other.is_zero():
            return self, one, zero
        if self.is_zero():
            return other, zero, one
        self_unit, other_unit = self.is_unit(), other.is_unit()
        if self_unit and other_unit:
            # 1*self + ((1 - self)/other)*other == 1
            return one, one, one.subtract(self).divide(other)
        if self_unit:
            return one, self.inverse(), zero
        if other_unit:
            return one, zero, other.inverse()
        q, r = self.value, other.value
        c1, d1 = 1, 0
        c2, d2 = 0, 1
        while r != 0:
            quot, rem = divmod(q, r)
            c1, d1 = d1, c1 - quot * d1
            c2, d2 = d2, c2 - quot * d2
            q, r = r, rem
        return (ModInteger(self.ring, q), ModInteger(self.ring, c1),
                ModInteger(self.ring, c2))


class ModIntegerRing(ModularRingFactory):
    """Factory for Z/mZ.

    is_field may be passed when the caller already knows whether the
    modulus is prime; otherwise it is decided on first use and memoized.
    """

    def __init__(self, modulus: int, is_field: bool | None = None):
        modulus = int(modulus)
        if modulus <= 0:
            raise ValueError(f"modulus must be positive, got {int_to_digits(modulus)}")
        self.modulus = modulus
        self._is_field = is_field

    def __repr__(self):
        return f"ModIntegerRing({int_to_digits(self.modulus)})"

    def __str__(self):
        return f"mod({int_to_digits(self.modulus)})"

    def __eq__(self, other):
        if not isinstance(other, ModIntegerRing):
            return NotImplemented
        return self.modulus == other.modulus

    def __hash__(self):
        return hash(self.modulus)

    def zero(self) -> ModInteger:
        return ModInteger(self, 0)

    def one(self) -> ModInteger:
        return ModInteger(self, 1)

    def is_finite(self) -> bool:
        return True

    def is_field(self) -> bool:
        # Racing callers compute the same answer, so a plain store is enough.
        if self._is_field is None:
            self._is_field = is_probable_prime(self.modulus)
            logger.debug("modulus of %d bits is_field=%s", self.modulus.bit_length(), self._is_field)
        return self._is_field

    def characteristic(self) -> int:
        return self.modulus

    def integer_modulus(self) -> Integer:
        return Integer(self.modulus)

    def from_integer(self, a) -> ModInteger:
        return ModInteger(self, int(a))

    def random(self, bit_length: int, source=None) -> ModInteger:
        source = source if source is not None else rng.get_source()
        return ModInteger(self, source.getrandbits(bit_length))

    def chinese_remainder(self, c: ModInteger, ci: ModInteger, a: ModInteger) -> ModInteger:
        b = a.ring.from_integer(c.value)
        d = a.subtract(b)
        if d.is_zero():
            return ModInteger(self, c.value)
        b = d.multiply(ci)
        return ModInteger(self, c.ring.modulus * b.value + c.value)
