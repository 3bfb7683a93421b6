"""Exact rational numbers over arbitrary-precision integers.

Every Rational is kept in lowest terms with a positive denominator, and
zero is always 0/1. The arithmetic follows the classic scheme of keeping
intermediate products small: operands with denominator 1 take a short path,
and the general case divides out partial gcds of the denominators before
multiplying, so the result needs no full gcd reduction afterwards.
"""

import math
import re

from core import rng
from core.digits import int_from_digits, int_to_digits
from core.errors import NotInvertibleError, RationalParseError
from structure.elem import RingElem
from structure.factory import RingFactory
from structure.power import positive_power

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')
_FRACTION_RE = re.compile(r'([+-]?[0-9]+)/([+-]?[0-9]+)')
_DECIMAL_RE = re.compile(r'([+-]?)([0-9]+)\.([0-9]+)')


def _reduce_pair(n: int, d: int) -> tuple[int, int]:
    if d == 0:
        raise ZeroDivisionError("rational with zero denominator")
    if n == 0:
        return 0, 1
    c = math.gcd(n, d)
    n //= c
    d //= c
    if d < 0:
        n, d = -n, -d
    return n, d


def _canonical(n: int, d: int) -> 'Rational':
    # (n, d) must already be in lowest terms with d > 0.
    r = object.__new__(Rational)
    r.numerator = n
    r.denominator = d
    return r


class Rational(RingElem):
    """Fraction numerator/denominator in canonical form."""

    __slots__ = ('numerator', 'denominator')

    def __init__(self, numerator: int = 0, denominator: int = 1):
        self.numerator, self.denominator = _reduce_pair(int(numerator), int(denominator))

    @staticmethod
    def reduce(n: int, d: int) -> 'Rational':
        """Canonical fraction equal to n/d."""
        return _canonical(*_reduce_pair(n, d))

    @staticmethod
    def unit(d: int) -> 'Rational':
        """The rational 1/d."""
        return Rational.reduce(1, d)

    @staticmethod
    def parse(s: str) -> 'Rational':
        """Parse "n", "n/d" or a signed decimal such as "-0.125"."""
        if not isinstance(s, str):
            raise RationalParseError(s, "expected a string")
        text = s.strip()
        if _INTEGER_RE.fullmatch(text):
            return _canonical(int_from_digits(text), 1)
        m = _FRACTION_RE.fullmatch(text)
        if m:
            d = int_from_digits(m.group(2))
            if d == 0:
                raise RationalParseError(s, "zero denominator")
            return Rational.reduce(int_from_digits(m.group(1)), d)
        m = _DECIMAL_RE.fullmatch(text)
        if m:
            sign, whole, digits = m.groups()
            r = _canonical(int_from_digits(whole), 1)
            z = positive_power(Rational.unit(10), len(digits))
            r = r.sum(_canonical(int_from_digits(digits), 1).multiply(z))
            if sign == '-':
                r = r.negate()
            return r
        raise RationalParseError(s)

    def factory(self) -> 'RationalField':
        return QQ

    def validate(self) -> None:
        if self.denominator <= 0:
            raise AssertionError(f"non-positive denominator in {self!r}")
        if math.gcd(self.numerator, self.denominator) != 1:
            raise AssertionError(f"{self!r} is not in lowest terms")

    def __eq__(self, other):
        if isinstance(other, int):
            return self.denominator == 1 and self.numerator == other
        if isinstance(other, Rational):
            return self.numerator == other.numerator and self.denominator == other.denominator
        return NotImplemented

    def __hash__(self):
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __repr__(self):
        return f"Rational({int_to_digits(self.numerator)}, {int_to_digits(self.denominator)})"

    def __str__(self):
        if self.denominator == 1:
            return int_to_digits(self.numerator)
        return f"{int_to_digits(self.numerator)}/{int_to_digits(self.denominator)}"

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_one(self) -> bool:
        return self.numerator == self.denominator

    def is_unit(self) -> bool:
        return not self.is_zero()

    def signum(self) -> int:
        return (self.numerator > 0) - (self.numerator < 0)

    def abs(self) -> 'Rational':
        if self.signum() >= 0:
            return self
        return self.negate()

    def negate(self) -> 'Rational':
        return _canonical(-self.numerator, self.denominator)

    def compare_to(self, other) -> int:
        other = self._operand(other)
        if self.is_zero():
            return -other.signum()
        if other.is_zero():
            return self.signum()
        rs, ss = self.signum(), other.signum()
        if rs != ss:
            return 1 if rs > ss else -1
        left = self.numerator * other.denominator
        right = self.denominator * other.numerator
        return (left > right) - (left < right)

    def sum(self, other) -> 'Rational':
        other = self._operand(other)
        if self.is_zero():
            return other
        if other.is_zero():
            return self
        r1, r2 = self.numerator, self.denominator
        s1, s2 = other.numerator, other.denominator
        if r2 == 1 and s2 == 1:
            return _canonical(r1 + s1, 1)
        if r2 == 1:
            return _canonical(r1 * s2 + s1, s2)
        if s2 == 1:
            return _canonical(r2 * s1 + r1, r2)
        d = math.gcd(r2, s2)
        rb2 = r2 // d
        sb2 = s2 // d
        t1 = r1 * sb2 + rb2 * s1
        if t1 == 0:
            return _canonical(0, 1)
        if d != 1:
            e = math.gcd(t1, d)
            if e != 1:
                t1 //= e
                r2 //= e
        return _canonical(t1, r2 * sb2)

    def subtract(self, other) -> 'Rational':
        return self.sum(self._operand(other).negate())

    def multiply(self, other) -> 'Rational':
        other = self._operand(other)
        if self.is_zero() or other.is_zero():
            return _canonical(0, 1)
        r1, r2 = self.numerator, self.denominator
        s1, s2 = other.numerator, other.denominator
        if r2 == 1 and s2 == 1:
            return _canonical(r1 * s1, 1)
        if r2 == 1:
            d1 = math.gcd(r1, s2)
            return _canonical((r1 // d1) * s1, s2 // d1)
        if s2 == 1:
            d2 = math.gcd(s1, r2)
            return _canonical((s1 // d2) * r1, r2 // d2)
        d1 = math.gcd(r1, s2)
        d2 = math.gcd(s1, r2)
        return _canonical((r1 // d1) * (s1 // d2), (r2 // d2) * (s2 // d1))

    def inverse(self) -> 'Rational':
        if self.is_zero():
            raise NotInvertibleError(self, "zero has no inverse")
        if self.numerator > 0:
            return _canonical(self.denominator, self.numerator)
        return _canonical(-self.denominator, -self.numerator)

    def divide(self, other) -> 'Rational':
        return self.multiply(self._operand(other).inverse())

    def remainder(self, other) -> 'Rational':
        """Always zero: every nonzero rational divides exactly."""
        if self._operand(other).is_zero():
            raise ZeroDivisionError("rational remainder by zero")
        return _canonical(0, 1)

    def gcd(self, other) -> 'Rational':
        other = self._operand(other)
        if other.is_zero():
            return self
        if self.is_zero():
            return other
        return _canonical(1, 1)

    def egcd(self, other) -> tuple['Rational', 'Rational', 'Rational']:
        """(1, 1/(2*self), 1/(2*other)) for two nonzero operands.

        Any pair of nonzero field elements generates the whole field, so the
        halves are one valid witness among many.
        """
        other = self._operand(other)
        one, zero = _canonical(1, 1), _canonical(0, 1)
        if other.is_zero():
            return self, one, zero
        if self.is_zero():
            return other, zero, one
        half = Rational.unit(2)
        return one, self.inverse().multiply(half), other.inverse().multiply(half)


class RationalField(RingFactory):
    """The field of rational numbers."""

    def __repr__(self):
        return "QQ"

    def __eq__(self, other):
        return isinstance(other, RationalField)

    def __hash__(self):
        return hash(RationalField)

    def zero(self) -> Rational:
        return _canonical(0, 1)

    def one(self) -> Rational:
        return _canonical(1, 1)

    def is_finite(self) -> bool:
        return False

    def is_field(self) -> bool:
        return True

    def characteristic(self) -> int:
        return 0

    def from_integer(self, a) -> Rational:
        return _canonical(int(a), 1)

    def parse(self, s: str) -> Rational:
        return Rational.parse(s)

    def random(self, bit_length: int, source=None) -> Rational:
        """Random fraction +-A/(B+1) with A, B uniform below 2^bit_length."""
        source = source if source is not None else rng.get_source()
        a = source.getrandbits(bit_length)
        if rng.coin(source):
            a = -a
        b = source.getrandbits(bit_length) + 1
        return Rational.reduce(a, b)


QQ = RationalField()
