"""Factory capability interfaces."""

from abc import ABC, abstractmethod


class ElemFactory(ABC):
    """Knows how to build elements of one structure."""

    @abstractmethod
    def is_finite(self) -> bool: ...

    @abstractmethod
    def from_integer(self, a):
        """Element for an int (or an Integer element)."""

    @abstractmethod
    def random(self, bit_length: int, source=None):
        """Random element drawn from bit_length random bits.

        source needs getrandbits(); None uses the global core.rng source.
        """


class AbelianGroupFactory(ElemFactory):

    @abstractmethod
    def zero(self): ...


class MonoidFactory(ElemFactory):

    @abstractmethod
    def one(self): ...


class RingFactory(AbelianGroupFactory, MonoidFactory):
    """Ring factory: identities, field test and characteristic."""

    @abstractmethod
    def is_field(self) -> bool:
        """True if the ring is known to be a field."""

    @abstractmethod
    def characteristic(self) -> int: ...


class ModularRingFactory(RingFactory):
    """Ring of residues modulo an integer."""

    @abstractmethod
    def integer_modulus(self):
        """Modulus as an Integer element."""

    @abstractmethod
    def chinese_remainder(self, c, ci, a):
        """Combine c (mod m1) and a (mod m2) into an element of this ring.

        ci is the inverse of m1 in the ring of a, and this ring's modulus
        is m1 * m2.
        """
