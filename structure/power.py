"""Square-and-multiply exponentiation over any monoid element.

Only the capability interface is used: multiply, inverse, remainder,
is_zero, is_one, and one() from a factory.
"""

from collections.abc import Iterable


def positive_power(a, n: int):
    """a^n for n > 0. No identity element is needed."""
    if n <= 0:
        raise ValueError(f"only positive exponents allowed, got {n}")
    if a.is_zero() or a.is_one():
        return a
    b = a
    p = b
    i = n - 1
    while i > 0:
        if i & 1:
            p = p.multiply(b)
        i >>= 1
        if i > 0:
            b = b.multiply(b)
    return p


def power(factory, a, n: int):
    """a^n; a^0 is factory.one() and a^-n is (1/a)^n."""
    if n == 0:
        if factory is None:
            raise ValueError("factory required for a^0")
        return factory.one()
    if a.is_one():
        return a
    b = a
    if n < 0:
        b = a.inverse()
        n = -n
    if n == 1:
        return b
    if factory is None:
        return positive_power(b, n)
    p = factory.one()
    i = n
    while i > 0:
        if i & 1:
            p = p.multiply(b)
        i >>= 1
        if i > 0:
            b = b.multiply(b)
    return p


def mod_power(factory, a, n: int, m):
    """a^n with every partial product reduced by remainder(m)."""
    if n == 0:
        if factory is None:
            raise ValueError("factory required for a^0")
        return factory.one()
    if a.is_one():
        return a
    if n < 0:
        b = a.inverse().remainder(m)
        n = -n
    else:
        b = a.remainder(m)
    if n == 1:
        return b
    p = None
    i = n
    while i > 0:
        if i & 1:
            p = b if p is None else p.multiply(b).remainder(m)
        i >>= 1
        if i > 0:
            b = b.multiply(b).remainder(m)
    return p


def product_of(factory, elements: Iterable):
    """Product of elements, starting from factory.one().

    Without a factory the fold starts at the first element, so only an
    empty sequence fails.
    """
    it = iter(elements)
    if factory is None:
        res = next(it, None)
        if res is None:
            raise ValueError("factory required for an empty product")
    else:
        res = factory.one()
    for a in it:
        res = res.multiply(a)
    return res


class Power:
    """Exponentiation bound to one factory."""

    def __init__(self, factory):
        self.factory = factory

    def power(self, a, n: int):
        return power(self.factory, a, n)

    def positive_power(self, a, n: int):
        return positive_power(a, n)

    def mod_power(self, a, n: int, m):
        return mod_power(self.factory, a, n, m)

    def product(self, elements: Iterable):
        return product_of(self.factory, elements)
