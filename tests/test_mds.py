from itertools import count

import pytest
from hypothesis import given, settings, strategies as st

from pastaposeidon.field import MODULUS, ONE, ZERO, Fp
from pastaposeidon.mds import generate_mds


def _identity_check(mds, mds_inv):
    width = len(mds)
    for i in range(width):
        for j in range(width):
            total = ZERO
            for k in range(width):
                total = total + mds[i][k] * mds_inv[k][j]
            assert total == (ONE if i == j else ZERO)


def _naturals():
    return (Fp(i) for i in count(1))


def test_mds_times_inverse_is_identity():
    mds, mds_inv = generate_mds(_naturals(), 3, 0)
    assert len(mds) == 3 and all(len(row) == 3 for row in mds)
    _identity_check(mds, mds_inv)


@settings(max_examples=20)
@given(st.lists(st.integers(min_value=0, max_value=MODULUS - 1), min_size=6, max_size=6, unique=True))
def test_random_cauchy_inverse(values):
    xs, ys = values[:3], values[3:]
    if any((x + y) % MODULUS == 0 for x in xs for y in ys):
        with pytest.raises(ValueError):
            generate_mds((Fp(v) for v in values), 3, 0)
    else:
        mds, mds_inv = generate_mds((Fp(v) for v in values), 3, 0)
        _identity_check(mds, mds_inv)


def test_entries_are_cauchy():
    values = [Fp(i) for i in range(1, 9)]
    mds, _ = generate_mds(values, 4, 0)
    xs, ys = values[:4], values[4:]
    for i, x in enumerate(xs):
        for j, y in enumerate(ys):
            assert mds[i][j] * (x + y) == ONE


def test_select_skips_batches():
    skipped = generate_mds(_naturals(), 3, 1)
    direct = generate_mds((Fp(i) for i in count(7)), 3, 0)
    assert skipped == direct


def test_duplicate_batches_are_discarded():
    duplicated = [Fp(1), Fp(1), Fp(2), Fp(3)] + [Fp(i) for i in range(10, 14)]
    assert generate_mds(duplicated, 2, 0) == generate_mds([Fp(i) for i in range(10, 14)], 2, 0)


def test_exhausted_source_raises():
    with pytest.raises(ValueError):
        generate_mds([Fp(1), Fp(2), Fp(3)], 2, 0)


def test_zero_denominator_raises():
    with pytest.raises(ValueError):
        generate_mds([Fp(1), -Fp(1)], 1, 0)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        generate_mds(_naturals(), 0, 0)
    with pytest.raises(ValueError):
        generate_mds(_naturals(), 3, -1)