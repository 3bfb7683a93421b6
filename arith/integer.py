"""Arbitrary-precision integers as ring elements.

Thin wrapper over the host int so integers can flow through the generic
algorithms (power, mod_power, product_of) next to the other ring types.
"""

import math

from core import rng
from core.digits import int_to_digits
from core.errors import NotInvertibleError
from structure.elem import RingElem
from structure.factory import RingFactory


class Integer(RingElem):
    """Element of the ring of integers."""

    __slots__ = ('value',)

    def __init__(self, value: int):
        self.value = int(value)

    def factory(self) -> 'IntegerRing':
        return ZZ

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == other
        if isinstance(other, Integer):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __repr__(self):
        return f"Integer({int_to_digits(self.value)})"

    def __str__(self):
        return int_to_digits(self.value)

    def __floordiv__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self.divide(other)

    def validate(self) -> None:
        if not isinstance(self.value, int):
            raise AssertionError(f"integer value has type {type(self.value).__name__}")

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def is_unit(self) -> bool:
        return self.value in (1, -1)

    def signum(self) -> int:
        return (self.value > 0) - (self.value < 0)

    def compare_to(self, other) -> int:
        other = self._operand(other)
        return (self.value > other.value) - (self.value < other.value)

    def abs(self) -> 'Integer':
        return self if self.value >= 0 else Integer(-self.value)

    def negate(self) -> 'Integer':
        return Integer(-self.value)

    def sum(self, other) -> 'Integer':
        return Integer(self.value + self._operand(other).value)

    def subtract(self, other) -> 'Integer':
        return Integer(self.value - self._operand(other).value)

    def multiply(self, other) -> 'Integer':
        return Integer(self.value * self._operand(other).value)

    def quotient_remainder(self, other) -> tuple['Integer', 'Integer']:
        """Floor quotient and remainder, self == q*other + r."""
        other = self._operand(other)
        if other.value == 0:
            raise ZeroDivisionError("integer division by zero")
        q, r = divmod(self.value, other.value)
        return Integer(q), Integer(r)

    def divide(self, other) -> 'Integer':
        return self.quotient_remainder(other)[0]

    def remainder(self, other) -> 'Integer':
        return self.quotient_remainder(other)[1]

    def inverse(self) -> 'Integer':
        if self.is_unit():
            return self
        raise NotInvertibleError(self, "only 1 and -1 are integer units")

    def gcd(self, other) -> 'Integer':
        return Integer(math.gcd(self.value, self._operand(other).value))

    def egcd(self, other) -> tuple['Integer', 'Integer', 'Integer']:
        other = self._operand(other)
        if other.is_zero():
            if self.value < 0:
                return self.negate(), Integer(-1), Integer(0)
            return self, Integer(1), Integer(0)
        if self.is_zero():
            if other.value < 0:
                return other.negate(), Integer(0), Integer(-1)
            return other, Integer(0), Integer(1)
        q, r = self.value, other.value
        c1, d1 = 1, 0
        c2, d2 = 0, 1
        while r != 0:
            quot, rem = divmod(q, r)
            c1, d1 = d1, c1 - quot * d1
            c2, d2 = d2, c2 - quot * d2
            q, r = r, rem
        if q < 0:
            q, c1, c2 = -q, -c1, -c2
        return Integer(q), Integer(c1), Integer(c2)


class IntegerRing(RingFactory):
    """The ring of integers."""

    def __repr__(self):
        return "ZZ"

    def __eq__(self, other):
        return isinstance(other, IntegerRing)

    def __hash__(self):
        return hash(IntegerRing)

    def zero(self) -> Integer:
        return Integer(0)

    def one(self) -> Integer:
        return Integer(1)

    def is_finite(self) -> bool:
        return False

    def is_field(self) -> bool:
        return False

    def characteristic(self) -> int:
        return 0

    def from_integer(self, a) -> Integer:
        return Integer(int(a))

    def random(self, bit_length: int, source=None) -> Integer:
        """Uniform magnitude below 2^bit_length with a random sign."""
        source = source if source is not None else rng.get_source()
        v = source.getrandbits(bit_length)
        if rng.coin(source):
            v = -v
        return Integer(v)


ZZ = IntegerRing()
