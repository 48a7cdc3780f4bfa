"""Generation of Cauchy MDS matrices and their inverses."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .field import ONE, ZERO, Fp

Matrix = tuple[tuple[Fp, ...], ...]


def _draw_unique(source, width: int) -> tuple[list[Fp], list[Fp]]:
    """Draw 2*width elements until all of them are distinct."""
    while True:
        try:
            values = [next(source) for _ in range(2 * width)]
        except StopIteration:
            raise ValueError("ran out of field elements while sampling the MDS") from None
        if len(set(values)) == len(values):
            return values[:width], values[width:]


def _lagrange(points: Sequence[Fp], j: int, x: Fp) -> Fp:
    """Evaluate the j-th Lagrange basis polynomial for ``points`` at ``x``."""
    x_j = points[j]
    acc = ONE
    for m, x_m in enumerate(points):
        if m != j:
            acc = acc * (x - x_m) * (x_j - x_m).invert()
    return acc


def generate_mds(elements: Iterable[Fp], width: int, select: int) -> tuple[Matrix, Matrix]:
    """Build a width x width Cauchy MDS matrix and its inverse.

    Field elements are drawn from ``elements`` in batches of 2*width; batches with
    repeated elements are discarded, and the first ``select`` valid batches are
    skipped before one is used.
    """
    if width < 1:
        raise ValueError("width must be at least 1")
    if select < 0:
        raise ValueError("select must be non-negative")

    source = iter(elements)
    while True:
        xs, ys = _draw_unique(source, width)
        if select:
            select -= 1
            continue
        break

    rows = []
    for x in xs:
        row = []
        for y in ys:
            total = x + y
            if total.is_zero():
                raise ValueError("Cauchy matrix entry has a zero denominator")
            row.append(total.invert())
        rows.append(tuple(row))
    mds: Matrix = tuple(rows)

    neg_ys = [-y for y in ys]
    mds_inv: Matrix = tuple(
        tuple(
            (x_j - neg_y) * _lagrange(xs, j, neg_y) * _lagrange(neg_ys, i, x_j)
            for j, x_j in enumerate(xs)
        )
        for i, neg_y in enumerate(neg_ys)
    )
    return mds, mds_inv


__all__ = ["generate_mds", "Matrix", "ZERO"]