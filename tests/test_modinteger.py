"""Tests for arbitrary-precision modular arithmetic."""

import pytest

from arith.modinteger import ModInteger, ModIntegerRing
from arith.integer import Integer
from core.errors import NotInvertibleError
from tests.utils import sample, assert_bezout, assert_total_order

PRIME = (1 << 127) - 1  # 2^127 - 1


@pytest.fixture
def field():
    return ModIntegerRing(PRIME)


@pytest.fixture
def z7():
    return ModIntegerRing(7)


@pytest.fixture
def z12():
    return ModIntegerRing(12)


def test_add(field):
    assert field.from_integer(3) + field.from_integer(4) == field.from_integer(7)


def test_add_wrap(field):
    assert field.from_integer(PRIME - 1) + field.from_integer(2) == 1


def test_sub_wrap(field):
    assert field.zero() - field.one() == field.from_integer(PRIME - 1)


def test_mul(field):
    assert field.from_integer(5) * field.from_integer(7) == 35


def test_div(field):
    a, b = field.from_integer(5), field.from_integer(7)
    assert (a / b) * b == a


def test_inverse(field):
    a = field.from_integer(42)
    assert a * a.inverse() == field.one()


def test_inverse_small(z7):
    assert z7.from_integer(3).inverse() == 5


def test_inverse_zero(z7):
    with pytest.raises(NotInvertibleError):
        z7.zero().inverse()


def test_inverse_non_unit(z12):
    with pytest.raises(NotInvertibleError):
        z12.from_integer(4).inverse()


def test_neg(field):
    a = field.from_integer(5)
    assert a + (-a) == field.zero()


def test_pow(field):
    assert field.from_integer(2) ** 10 == 1024
    assert field.from_integer(2) ** -1 == field.from_integer(2).inverse()


def test_reduction_on_construction(z7):
    assert ModInteger(z7, -1).value == 6
    assert ModInteger(z7, 10 ** 30).value == 10 ** 30 % 7
    for a in sample(z7, count=20, bits=64):
        assert 0 <= a.value < 7
        a.validate()


def test_eq_int(z7):
    assert z7.from_integer(10) == 3
    assert z7.from_integer(3) != 4
    # only the canonical residue equals an int
    assert z7.from_integer(3) != 10
    assert z7.from_integer(6) != -1


def test_hash_consistent_with_eq(z7):
    a = z7.from_integer(10)
    assert a == 3 and hash(a) == hash(3)
    assert 3 in {a}
    assert 10 not in {a}
    assert {a: "x"}[z7.from_integer(3)] == "x"


def test_is_unit(z12):
    assert z12.from_integer(5).is_unit()
    assert not z12.from_integer(4).is_unit()
    assert not z12.zero().is_unit()


def test_divide_exact_fallback(z12):
    # 4 is not a unit mod 12, but 8 = 2 * 4
    assert z12.from_integer(8) / z12.from_integer(4) == 2


def test_divide_not_invertible(z12):
    with pytest.raises(NotInvertibleError):
        z12.from_integer(9) / z12.from_integer(4)


def test_divide_by_zero(z12):
    with pytest.raises(ZeroDivisionError):
        z12.from_integer(9) / z12.zero()


def test_remainder(z12):
    assert (z12.from_integer(9) % z12.from_integer(5)).is_zero()
    assert z12.from_integer(9) % z12.from_integer(4) == 1
    with pytest.raises(ZeroDivisionError):
        z12.from_integer(9) % z12.zero()


def test_gcd(z12):
    assert z12.from_integer(8).gcd(z12.from_integer(6)) == 2
    assert z12.from_integer(8).gcd(z12.from_integer(5)).is_one()
    assert z12.from_integer(8).gcd(z12.zero()) == 8


def test_egcd_non_units(z12):
    g, x, y = assert_bezout(z12.from_integer(8), z12.from_integer(6))
    assert g == 2


def test_egcd_units(z12):
    assert_bezout(z12.from_integer(5), z12.from_integer(7))
    assert_bezout(z12.from_integer(5), z12.from_integer(4))
    assert_bezout(z12.from_integer(4), z12.from_integer(5))


def test_egcd_zero(z12):
    assert_bezout(z12.from_integer(4), z12.zero())
    assert_bezout(z12.zero(), z12.from_integer(4))


def test_egcd_random():
    ring = ModIntegerRing(2 * 3 * 5 * 7 * 11 * 13)
    elems = sample(ring, count=20, bits=32)
    for a, b in zip(elems, elems[1:]):
        assert_bezout(a, b)


def test_egcd_random_field(field):
    elems = sample(field, count=10, bits=200)
    for a, b in zip(elems, elems[1:]):
        assert_bezout(a, b)


def test_field_detection_memoized():
    ring = ModIntegerRing(PRIME)
    assert ring._is_field is None
    assert ring.is_field()
    assert ring._is_field is True
    assert ModIntegerRing(PRIME * 3).is_field() is False


def test_field_flag_preset():
    ring = ModIntegerRing(15, is_field=False)
    assert ring._is_field is False
    assert not ring.is_field()


def test_field_flag_shared_by_elements(z7):
    a = z7.from_integer(3)
    assert a.is_unit()
    assert z7._is_field is True


def test_cross_ring_rejected(z7, z12):
    with pytest.raises(TypeError):
        z7.one() + z12.one()
    with pytest.raises(TypeError):
        z7.one().compare_to(z12.one())
    assert z7.one() != z12.one()


def test_same_modulus_different_instances(z7):
    other = ModIntegerRing(7)
    assert other == z7
    assert z7.from_integer(3) + other.from_integer(5) == 1


def test_order(z7):
    assert_total_order([z7.from_integer(i) for i in range(7)])
    assert z7.from_integer(2) < z7.from_integer(5)


def test_symmetric_integer(z7):
    assert z7.from_integer(3).symmetric_integer() == Integer(3)
    assert z7.from_integer(4).symmetric_integer() == Integer(-3)


def test_chinese_remainder():
    r5, r7, r35 = ModIntegerRing(5), ModIntegerRing(7), ModIntegerRing(35)
    c, a = r5.from_integer(3), r7.from_integer(4)
    ci = r7.from_integer(5).inverse()
    s = r35.chinese_remainder(c, ci, a)
    assert s.value % 5 == 3
    assert s.value % 7 == 4


def test_factory(z12):
    assert z12.is_finite()
    assert z12.characteristic() == 12
    assert z12.integer_modulus() == Integer(12)
    assert z12.from_integer(Integer(25)) == 1
    assert str(z12.from_integer(-1)) == "11"
    assert z12.from_integer(5).factory() is z12


def test_bad_modulus():
    with pytest.raises(ValueError):
        ModIntegerRing(0)


def test_str_with_huge_modulus():
    m = 10 ** 5000 + 1
    ring = ModIntegerRing(m, is_field=False)
    assert str(ring.from_integer(-1)) == "1" + "0" * 5000
    assert str(ring) == "mod(1" + "0" * 4999 + "1)"
    assert repr(ring.one()).startswith("ModInteger(1 mod 1000")
