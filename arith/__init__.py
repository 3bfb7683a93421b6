"""Ring element types: integers, rationals, modular integers, prime tables."""

from arith.integer import Integer, IntegerRing, ZZ
from arith.rational import Rational, RationalField, QQ
from arith.primes import PrimeList, PrimeRange, primes, is_probable_prime
from arith.modinteger import ModInteger, ModIntegerRing
from arith.modword import ModWord, ModWordRing
