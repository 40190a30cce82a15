"""Real roots of cubic polynomials by the trigonometric / Cardano method."""

from __future__ import annotations

import math
from collections.abc import Sequence

PI = 4 * math.atan(1)

# Tolerance used when comparing computed roots with known values.
ROOT_TOLERANCE = 1e-9

EXPECTED_THREE_ROOTS = (2.0, 6.0, 2.5)
EXPECTED_ONE_ROOT = 2.5


def _acos(value: float) -> float:
    """Arc cosine that yields NaN outside [-1, 1] instead of raising."""
    if -1.0 <= value <= 1.0:
        return math.acos(value)
    return math.nan


def solve_cubic(a: float, b: float, c: float, d: float) -> list[float]:
    """Return the real roots of a*x**3 + b*x**2 + c*x + d.

    Three roots are returned when the discriminant allows it, otherwise one.
    The order of three roots follows the trigonometric formula, not size.
    """
    if a == 0:
        raise ValueError("leading coefficient must be non-zero")
    a1 = b / a
    a2 = c / a
    a3 = d / a
    q = (a1 * a1 - 3.0 * a2) / 9.0
    r = (2.0 * a1 * a1 * a1 - 9.0 * a1 * a2 + 27.0 * a3) / 54.0
    r2_q3 = r * r - q * q * q

    if r2_q3 <= 0:
        root_q3 = math.sqrt(q * q * q)
        theta = _acos(r / root_q3 if root_q3 else math.nan)
        scale = -2.0 * math.sqrt(q)
        shift = a1 / 3.0
        return [
            scale * math.cos((theta + offset) / 3.0) - shift
            for offset in (0.0, 2.0 * PI, 4.0 * PI)
        ]

    x = (math.sqrt(r2_q3) + abs(r)) ** (1 / 3.0)
    x += q / x
    x *= 1 if r < 0.0 else -1
    x -= a1 / 3.0
    return [x]


def benchmark(rpt: int) -> tuple[list[float], list[float]]:
    """Solve the fixed set of cubics rpt times.

    Returns the roots of the first two equations of the last run.
    """
    first: list[float] = []
    second: list[float] = []
    for _ in range(rpt):
        # Three roots: 2, 6 and 2.5.
        first = solve_cubic(1.0, -10.5, 32.0, -30.0)
        # One root: 2.5.
        second = solve_cubic(1.0, -4.5, 17.0, -30.0)
        solve_cubic(1.0, -3.5, 22.0, -31.0)
        solve_cubic(1.0, -13.7, 1.0, -35.0)
        for a1 in (1.0, 2.0):
            for b1 in (10.0, 9.0):
                for c1 in (5.0, 5.5):
                    for d1 in (-1.0, -2.0):
                        solve_cubic(a1, b1, c1, d1)
    return first, second


def _close(expected: float, actual: float) -> bool:
    return abs(expected - actual) < ROOT_TOLERANCE


def verify(results: tuple[Sequence[float], Sequence[float]]) -> bool:
    """Check the roots returned by benchmark against the known solutions."""
    first, second = results
    if len(first) != 3 or len(second) != 1:
        return False
    return all(
        _close(exp, got) for exp, got in zip(EXPECTED_THREE_ROOTS, first)
    ) and _close(EXPECTED_ONE_ROOT, second[0])