"""Algebraic capability interfaces and generic algorithms over them."""

from structure.elem import AbelianGroupElem, MonoidElem, RingElem, Modular
from structure.factory import (
    ElemFactory, AbelianGroupFactory, MonoidFactory, RingFactory, ModularRingFactory,
)
from structure.power import Power, power, positive_power, mod_power, product_of
