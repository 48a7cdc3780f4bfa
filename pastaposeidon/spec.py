"""Poseidon-128 specifications with the x^5 S-box and a width of three."""

from __future__ import annotations

from collections.abc import Sequence

from .field import ZERO, Fp
from .mds import Matrix
from .pallas_constants import mds, mds_inv, round_constants

RoundConstants = tuple[tuple[Fp, ...], ...]
Constants = tuple[RoundConstants, Matrix, Matrix]


def mat_mul(matrix: Sequence[Sequence[Fp]], vector: Sequence[Fp]) -> tuple[Fp, ...]:
    """Multiply a square matrix by a column vector."""
    width = len(vector)
    if len(matrix) != width or any(len(row) != width for row in matrix):
        raise ValueError("matrix and vector dimensions do not match")
    return tuple(
        sum((entry * value for entry, value in zip(row, vector)), ZERO) for row in matrix
    )


class P128Pow5T3:
    """Poseidon-128 over the Pallas base field: width 3, rate 2, R_F = 8, R_P = 56.

    The partial round count is even, which keeps circuits built from it simple.
    """

    width = 3
    rate = 2

    def full_rounds(self) -> int:
        return 8

    def partial_rounds(self) -> int:
        return 56

    def sbox(self, value: Fp) -> Fp:
        """Apply the x^5 S-box."""
        return value.pow(5)

    def constants(self) -> Constants:
        """Return the round constants, the MDS matrix and its inverse."""
        return round_constants(), mds(), mds_inv()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class P128Pow5T3Compact(P128Pow5T3):
    """The same permutation with partial-round constants folded forward.

    In every partial round only the first constant stays in place; the others,
    which never pass through the S-box, are carried through the MDS matrix into
    the next round. The permutation computed is unchanged.
    """

    def constants(self) -> Constants:
        base, matrix, inverse = super().constants()
        rounds = [list(row) for row in base]

        first_partial = self.full_rounds() // 2
        after_partials = first_partial + self.partial_rounds()

        for index in range(first_partial, after_partials):
            current = rounds[index]
            tail = [ZERO] + current[1:]
            current[1:] = [ZERO] * (len(current) - 1)
            carry = mat_mul(matrix, tail)
            rounds[index + 1] = [a + b for a, b in zip(rounds[index + 1], carry)]

        return tuple(tuple(row) for row in rounds), matrix, inverse


__all__ = ["P128Pow5T3", "P128Pow5T3Compact", "mat_mul"]