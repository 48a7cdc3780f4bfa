import pytest
from hypothesis import given, strategies as st

from pastaposeidon.field import (
    MODULUS,
    ONE,
    ROOT_OF_UNITY,
    S,
    T,
    ZERO,
    Fp,
    sqrt_tonelli_shanks,
)

integers = st.integers(min_value=0, max_value=MODULUS - 1)
nonzero_integers = st.integers(min_value=1, max_value=MODULUS - 1)
elements = integers.map(Fp)


def _non_residue():
    n = 2
    while Fp(n).pow((MODULUS - 1) // 2) == ONE:
        n += 1
    return Fp(n)


def test_modulus_decomposition():
    assert (T << S) + 1 == MODULUS
    assert T % 2 == 1
    assert Fp(MODULUS).is_zero()
    assert Fp(5).pow(MODULUS - 1) == ONE


def test_from_raw_matches_integer():
    value = Fp.from_raw([0x0000_0000_0000_0002, 0, 0, 0])
    assert value == Fp(2)


def test_from_raw_reduces_modulus():
    limbs = [(MODULUS >> (64 * i)) & ((1 << 64) - 1) for i in range(4)]
    assert Fp.from_raw(limbs).is_zero()


def test_from_raw_rejects_bad_limbs():
    with pytest.raises(ValueError):
        Fp.from_raw([0, 0, 0])
    with pytest.raises(ValueError):
        Fp.from_raw([1 << 64, 0, 0, 0])


def test_to_repr_of_one_is_little_endian():
    assert ONE.to_repr() == b"\x01" + b"\x00" * 31


@given(elements)
def test_repr_round_trip(x):
    assert Fp.from_repr(x.to_repr()) == x


def test_from_repr_rejects_non_canonical():
    with pytest.raises(ValueError):
        Fp.from_repr(MODULUS.to_bytes(32, "little"))
    with pytest.raises(ValueError):
        Fp.from_repr(b"\x00" * 31)


@given(nonzero_integers)
def test_invert(n):
    x = Fp(n)
    assert x * Fp.invert(x) == ONE


def test_invert_zero_raises():
    with pytest.raises(ZeroDivisionError):
        ZERO.invert()


@given(integers)
def test_square_matches_pow(n):
    x = Fp(n)
    assert Fp.square(x) == Fp.pow(x, 2) == x * x
    assert int(Fp.square(x)) == (n * n) % MODULUS


def test_pow_negative_raises():
    with pytest.raises(ValueError):
        ONE.pow(-1)


@given(integers, integers)
def test_add_sub_neg(m, n):
    a, b = Fp(m), Fp(n)
    assert (a + b) - b == a
    assert a + (-a) == ZERO
    assert int(a + b) == (m + n) % MODULUS


def test_root_of_unity_is_primitive():
    assert ROOT_OF_UNITY.pow(1 << S) == ONE
    assert ROOT_OF_UNITY.pow(1 << (S - 1)) == -ONE


@given(integers)
def test_sqrt_of_square(n):
    x = Fp(n)
    root = Fp.sqrt(Fp.square(x))
    assert root.square() == x.square()
    assert root in (x, -x)


@given(elements)
def test_sqrt_tonelli_shanks_accepts_limbs(x):
    exponent = (T - 1) // 2
    limbs = [(exponent >> (64 * i)) & ((1 << 64) - 1) for i in range(4)]
    square = x.square()
    assert sqrt_tonelli_shanks(square, limbs) == sqrt_tonelli_shanks(square, exponent)


def test_sqrt_of_non_residue_raises():
    with pytest.raises(ValueError):
        _non_residue().sqrt()


def test_ordering_follows_integer_value():
    assert sorted([Fp(3), Fp(1), Fp(2)]) == [Fp(1), Fp(2), Fp(3)]