import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pastaposeidon.field import MODULUS, ONE, ZERO, Fp
from pastaposeidon.pallas_constants import mds, mds_inv, round_constants
from pastaposeidon.spec import P128Pow5T3, P128Pow5T3Compact, mat_mul

elements = st.integers(min_value=0, max_value=MODULUS - 1).map(Fp)


def _permute(spec, state, matrix, rcs):
    state = list(state)
    half = spec.full_rounds() // 2
    rounds = list(rcs)

    def full(rc):
        nonlocal state
        state = list(mat_mul(matrix, [spec.sbox(s + c) for s, c in zip(state, rc)]))

    def partial(rc):
        nonlocal state
        added = [s + c for s, c in zip(state, rc)]
        added[0] = spec.sbox(added[0])
        state = list(mat_mul(matrix, added))

    for rc in rounds[:half]:
        full(rc)
    for rc in rounds[half : half + spec.partial_rounds()]:
        partial(rc)
    for rc in rounds[half + spec.partial_rounds() :]:
        full(rc)
    return state


def test_round_counts():
    spec = P128Pow5T3()
    assert spec.full_rounds() == 8
    assert spec.partial_rounds() == 56
    assert len(spec.constants()[0]) == spec.full_rounds() + spec.partial_rounds()


@given(elements)
@settings(max_examples=30)
def test_sbox_is_fifth_power(x):
    assert P128Pow5T3().sbox(x) == x * x * x * x * x


def test_constants_are_the_pallas_tables():
    rcs, matrix, inverse = P128Pow5T3().constants()
    assert rcs == round_constants()
    assert matrix == mds()
    assert inverse == mds_inv()


def test_mds_times_inverse_is_identity():
    _, matrix, inverse = P128Pow5T3().constants()
    for i in range(3):
        column = [inverse[k][i] for k in range(3)]
        product = mat_mul(matrix, column)
        assert product == tuple(ONE if j == i else ZERO for j in range(3))


def test_against_reference():
    spec = P128Pow5T3()
    rcs, matrix, _ = spec.constants()
    state = [
        Fp.from_raw([0, 0, 0, 0]),
        Fp.from_raw([1, 0, 0, 0]),
        Fp.from_raw([2, 0, 0, 0]),
    ]
    expected = [
        Fp.from_raw([0xAEB1BC024AECA456, 0xF7E69A71D0B642A0, 0x94EFB364F966240F, 0x2A526ACD0B64B453]),
        Fp.from_raw([0x012A3E9628E5B82A, 0xDCD42E7FBED9DAFE, 0x76FF7DAE343D5512, 0x13C5D1568B4AA430]),
        Fp.from_raw([0x359029A1D34E9DDD, 0xF7CFDFE1BDA42C7B, 0x256FCD597984561A, 0x0A49C868C6976544]),
    ]
    assert _permute(spec, state, matrix, rcs) == expected


def test_permute_vector():
    spec = P128Pow5T3()
    rcs, matrix, _ = spec.constants()
    initial = [
        "5c7a8f73adfc70fb3f139449ac6b57074c4d6e66b164939daffa2ef6ee692108",
        "1add86b3f2e1bda62a5d2e0e982b77e6b0ef9ca3f24988c7b3534201cfb1cd0d",
        "bd69b82532b6940ff2590f679ba9c7271fe01f7e9c8e36d6a5e29d4e30a73514",
    ]
    final = [
        "d06e2f8338928a7ee7380c77928087cda2fd2961a15269037a22d6d120aedd21",
        "2955a45f416f10d6bc79ac94d0c069c949e5f4bd09481e1f368cb9b8ee51140d",
        "0d8376bbe9d65d2b1e136fb7d982ab87c51c403044be5c799d56bb68acf95b10",
    ]
    state = [Fp.from_repr(bytes.fromhex(h)) for h in initial]
    result = _permute(spec, state, matrix, rcs)
    assert [s.to_repr().hex() for s in result] == final


def test_compact_constants_shape():
    full = P128Pow5T3().constants()[0]
    compact, matrix, inverse = P128Pow5T3Compact().constants()
    assert len(compact) == len(full)
    assert compact[:4] == full[:4]
    assert compact[61:] == full[61:]
    for row in compact[4:60]:
        assert row[1] == ZERO and row[2] == ZERO
    assert compact[4][0] == full[4][0]
    assert matrix == mds()
    assert inverse == mds_inv()


@given(st.lists(elements, min_size=3, max_size=3))
@settings(max_examples=3, deadline=None)
def test_compact_permutation_matches_standard(state):
    standard = P128Pow5T3()
    compact = P128Pow5T3Compact()
    rcs, matrix, _ = standard.constants()
    crcs, cmatrix, _ = compact.constants()
    assert _permute(compact, state, cmatrix, crcs) == _permute(standard, state, matrix, rcs)


@given(st.lists(elements, min_size=3, max_size=3))
def test_mat_mul_identity(vector):
    identity = [[ONE if i == j else ZERO for j in range(3)] for i in range(3)]
    assert mat_mul(identity, vector) == tuple(vector)


@given(
    st.lists(st.lists(elements, min_size=3, max_size=3), min_size=3, max_size=3),
    st.lists(elements, min_size=3, max_size=3),
    st.lists(elements, min_size=3, max_size=3),
)
def test_mat_mul_is_linear(matrix, a, b):
    summed = mat_mul(matrix, [x + y for x, y in zip(a, b)])
    separate = [x + y for x, y in zip(mat_mul(matrix, a), mat_mul(matrix, b))]
    assert list(summed) == separate


def test_mat_mul_rejects_mismatched_sizes():
    with pytest.raises(ValueError):
        mat_mul([[ONE, ZERO], [ZERO, ONE]], [ONE, ONE, ONE])