"""Element capability interfaces.

AbelianGroupElem covers the additive structure, MonoidElem the
multiplicative one, RingElem joins both and adds gcd/egcd. The operator
protocol is derived here from the named methods, so concrete types only
implement sum/multiply/... and __eq__/__hash__.
"""

from abc import ABC, abstractmethod


class AbelianGroupElem(ABC):
    """Element of an additive abelian group with a total order."""

    __slots__ = ()

    @abstractmethod
    def factory(self):
        """Factory that owns this element."""

    @abstractmethod
    def is_zero(self) -> bool: ...

    @abstractmethod
    def signum(self) -> int: ...

    @abstractmethod
    def sum(self, other): ...

    @abstractmethod
    def subtract(self, other): ...

    @abstractmethod
    def negate(self): ...

    @abstractmethod
    def abs(self): ...

    @abstractmethod
    def compare_to(self, other) -> int:
        """Negative, zero or positive as self is less, equal or greater."""

    def _accepts(self, other) -> bool:
        return isinstance(other, int) or type(other) is type(self)

    def _operand(self, other):
        """Coerce a binary operand into this element's ring."""
        if isinstance(other, int):
            return self.factory().from_integer(other)
        if type(other) is not type(self):
            raise TypeError(f"expected {type(self).__name__}, got {type(other).__name__}")
        return other

    def __add__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self.sum(other)

    def __radd__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self._operand(other).sum(self)

    def __sub__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self._operand(other).subtract(self)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    def __bool__(self):
        return not self.is_zero()

    def __lt__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self.compare_to(other) >= 0


class MonoidElem(ABC):
    """Element of a multiplicative monoid."""

    __slots__ = ()

    @abstractmethod
    def is_one(self) -> bool: ...

    @abstractmethod
    def is_unit(self) -> bool: ...

    @abstractmethod
    def multiply(self, other): ...

    @abstractmethod
    def divide(self, other): ...

    @abstractmethod
    def remainder(self, other): ...

    @abstractmethod
    def inverse(self):
        """Multiplicative inverse; raises NotInvertibleError if none exists."""

    def __mul__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self._operand(other).multiply(self)

    def __truediv__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self._operand(other).divide(self)

    def __mod__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self.remainder(other)

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        from structure.power import power
        return power(self.factory(), self, exponent)


class RingElem(AbelianGroupElem, MonoidElem):
    """Ring element: both group and monoid operations, plus gcd."""

    __slots__ = ()

    @abstractmethod
    def gcd(self, other): ...

    @abstractmethod
    def egcd(self, other) -> tuple:
        """(g, a, b) with a*self + b*other == g."""

    @abstractmethod
    def validate(self) -> None:
        """Raise AssertionError if the representation invariant is broken."""


class Modular(ABC):
    """Residue class that can be lifted to a symmetric integer."""

    __slots__ = ()

    @abstractmethod
    def symmetric_integer(self):
        """Representative in (-m/2, m/2] as an Integer element."""
