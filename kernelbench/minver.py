"""Matrix inversion by Gauss-Jordan elimination with partial pivoting."""

from __future__ import annotations

import math
from collections.abc import Sequence

MAX_ORDER = 500
DEFAULT_EPS = 1.0e-6

Matrix = list[list[float]]

A_REF: tuple[tuple[float, ...], ...] = (
    (3.0, -6.0, 7.0),
    (9.0, 0.0, -5.0),
    (5.0, -8.0, 6.0),
)

B_REF: tuple[tuple[float, ...], ...] = (
    (-3.0, 0.0, 2.0),
    (3.0, -2.0, 0.0),
    (0.0, 2.0, -3.0),
)

EXPECTED_PRODUCT: tuple[tuple[float, ...], ...] = (
    (-27.0, 26.0, -15.0),
    (-27.0, -10.0, 33.0),
    (-39.0, 28.0, -8.0),
)

EXPECTED_INVERSE: tuple[tuple[float, ...], ...] = (
    (0.133333325, -0.199999958, 0.2666665910),
    (-0.519999862, 0.113333330, 0.5266665220),
    (0.479999840, -0.359999895, 0.0399999917),
)

EXPECTED_DET = -16.6666718

_REL_TOL = 1e-6
_ABS_TOL = 1e-6


class SingularMatrixError(ArithmeticError):
    """Raised when a pivot is not larger than eps in magnitude."""

    def __init__(self, det: float) -> None:
        super().__init__("matrix is singular to within the given tolerance")
        self.det = det


def mmul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the product a @ b."""
    row_a = len(a)
    row_b = len(b)
    col_a = len(a[0]) if row_a else 0
    col_b = len(b[0]) if row_b else 0
    if row_a < 1 or row_b < 1 or col_b < 1 or col_a != row_b:
        raise ValueError("matrix dimensions do not allow multiplication")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def minver(
    matrix: Sequence[Sequence[float]], eps: float = DEFAULT_EPS
) -> tuple[Matrix, float]:
    """Invert a square matrix in place of a copy; return (result, det).

    The determinant bookkeeping and the final column unscrambling follow the
    reference kernel exactly, so matrices that need row exchanges yield that
    kernel's values rather than the textbook inverse and determinant.
    """
    a = [[float(v) for v in row] for row in matrix]
    order = len(a)
    if order < 2 or order > MAX_ORDER or eps <= 0.0:
        raise ValueError("order must be in [2, 500] and eps positive")
    if any(len(row) != order for row in a):
        raise ValueError("matrix must be square")

    work = list(range(order))
    det = 1.0
    r = 0
    w = 0.0
    for k in range(order):
        wmax = 0.0
        for i in range(k, order):
            w = abs(a[i][k])
            if w > wmax:
                wmax = w
                r = i
        pivot = a[r][k]
        if abs(pivot) <= eps:
            raise SingularMatrixError(det)
        det *= pivot
        if r != k:
            # The kernel takes the last magnitude scanned, not the running product.
            det = -w
            work[k], work[r] = work[r], work[k]
            a[k], a[r] = a[r], a[k]
        a[k] = [v / pivot for v in a[k]]
        pivot_row = a[k]
        for i, current in enumerate(a):
            if i == k:
                continue
            w = current[k]
            if w != 0.0:
                for j in range(order):
                    if j != k:
                        current[j] -= w * pivot_row[j]
                current[k] = -w / pivot
        pivot_row[k] = 1.0 / pivot

    for i in range(order):
        while (k := work[i]) != i:
            work[k], work[i] = work[i], work[k]
            # The kernel exchanges this pair once per row, so only the parity counts.
            if order % 2:
                a[k][i], a[k][k] = a[k][k], a[k][i]

    return a, det


def benchmark(rpt: int) -> tuple[Matrix, Matrix, float]:
    """Invert and multiply the reference matrices rpt times.

    Returns (product, inverse, determinant) of the last run.
    """
    product: Matrix = []
    inverse: Matrix = []
    det = 0.0
    for _ in range(rpt):
        inverse, det = minver(A_REF, DEFAULT_EPS)
        product = mmul(A_REF, B_REF)
    return product, inverse, det


def _close(x: float, y: float) -> bool:
    return math.isclose(x, y, rel_tol=_REL_TOL, abs_tol=_ABS_TOL)


def verify(result: tuple[Sequence[Sequence[float]], Sequence[Sequence[float]], float]) -> bool:
    """Compare product, inverse and determinant with known-good values."""
    product, inverse, det = result
    for got, expected in ((product, EXPECTED_PRODUCT), (inverse, EXPECTED_INVERSE)):
        if len(got) != len(expected):
            return False
        for got_row, exp_row in zip(got, expected):
            if len(got_row) != len(exp_row):
                return False
            if not all(_close(g, e) for g, e in zip(got_row, exp_row)):
                return False
    return _close(det, EXPECTED_DET)