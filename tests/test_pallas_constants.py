import pytest

from pastaposeidon.field import MODULUS, ONE, ZERO, Fp
from pastaposeidon.pallas_constants import mds, mds_inv, round_constants
from pastaposeidon.pallas_early_rounds import early_round_constants


def test_round_constant_shape():
    rc = round_constants()
    assert len(rc) == 64
    assert all(len(row) == 3 for row in rc)


def test_first_rounds_match_early_constants():
    assert round_constants()[:32] == early_round_constants()


def test_first_late_round_value():
    expected = Fp.from_raw(
        [0xE46F_6D42_9874_0107, 0x8AD7_1EA7_15BE_0573, 0x63DF_7A76_E858_A4AA, 0x23E4_AB37_183A_CBA4]
    )
    assert round_constants()[32][0] == expected


def test_last_round_value():
    expected = Fp.from_raw(
        [0x1211_B9E2_190D_6852, 0xA004_ABE8_E015_28C4, 0x5C1E_3E9E_27A5_71C3, 0x3A8A_6282_9512_1D5C]
    )
    assert round_constants()[63][2] == expected


def test_mds_first_entry():
    expected = Fp.from_raw(
        [0x323F_2486_D7E1_1B63, 0x97D7_A0AB_2385_0B56, 0xB3D5_9FBD_C8C9_EAD4, 0x0AB5_E5B8_74A6_8DE7]
    )
    assert mds()[0][0] == expected


def test_round_constants_are_distinct_and_canonical():
    flat = [c for row in round_constants() for c in row]
    assert len(set(flat)) == len(flat)
    for c in flat:
        assert int(c) < MODULUS
        assert Fp.from_repr(c.to_repr()) == c


@pytest.mark.parametrize("i", range(3))
@pytest.mark.parametrize("j", range(3))
def test_mds_times_inverse_is_identity(i, j):
    m, m_inv = mds(), mds_inv()
    total = ZERO
    for k in range(3):
        total = total + m[i][k] * m_inv[k][j]
    assert total == (ONE if i == j else ZERO)


@pytest.mark.parametrize("i", range(3))
@pytest.mark.parametrize("j", range(3))
def test_inverse_times_mds_is_identity(i, j):
    m, m_inv = mds(), mds_inv()
    total = ZERO
    for k in range(3):
        total = total + m_inv[i][k] * m[k][j]
    assert total == (ONE if i == j else ZERO)


def test_mds_is_cauchy():
    # Entries are 1/(x_i + y_j), so the reciprocals satisfy r00 + r11 == r01 + r10.
    m = mds()
    r = [[entry.invert() for entry in row] for row in m]
    assert r[0][0] + r[1][1] == r[0][1] + r[1][0]
    assert r[1][1] + r[2][2] == r[1][2] + r[2][1]


def test_constants_are_cached():
    assert round_constants() is round_constants()
    assert mds() is mds()
    assert mds_inv() is mds_inv()
    assert mds_inv()[0][0] == Fp.from_raw(
        [0xC6DE_463C_D140_4E6B, 0x4543_705F_35E9_8AB5, 0xCC59_FFD0_0DE8_6443, 0x2CC0_57F3_FA14_687A]
    )