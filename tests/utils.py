"""Test utilities: seeded sources, reference oracles, assertion helpers."""

import math
import random

from structure.power import product_of


def seeded_source(seed=42):
    return random.Random(seed)


def sample(factory, count=20, bits=40, seed=42):
    """Reproducible list of random elements from a factory."""
    src = seeded_source(seed)
    return [factory.random(bits, src) for _ in range(count)]


def repeated_product(factory, a, n):
    """Reference oracle for a^n, n >= 0: n-fold multiply."""
    return product_of(factory, [a] * n)


def assert_canonical(r):
    assert r.denominator > 0, f"{r!r} has non-positive denominator"
    assert math.gcd(abs(r.numerator), r.denominator) == 1, f"{r!r} not reduced"
    if r.numerator == 0:
        assert r.denominator == 1
    r.validate()


def assert_bezout(a, b):
    """egcd(a, b) returns (g, x, y) with x*a + y*b == g."""
    g, x, y = a.egcd(b)
    assert g == x.multiply(a).sum(y.multiply(b)), \
        f"egcd({a}, {b}) = ({g}, {x}, {y}) violates x*a + y*b == g"
    return g, x, y


def assert_total_order(elems):
    for a in elems:
        for b in elems:
            ab, ba = a.compare_to(b), b.compare_to(a)
            assert (ab > 0) - (ab < 0) == -((ba > 0) - (ba < 0))
            assert (ab == 0) == (a == b)
            for c in elems:
                if ab <= 0 and b.compare_to(c) <= 0:
                    assert a.compare_to(c) <= 0
