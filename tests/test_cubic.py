import math

import pytest

from kernelbench.cubic import benchmark, solve_cubic, verify


def _residual(a, b, c, d, x):
    return a * x**3 + b * x**2 + c * x + d


def test_three_roots_in_formula_order():
    roots = solve_cubic(1.0, -10.5, 32.0, -30.0)
    assert roots == pytest.approx([2.0, 6.0, 2.5], abs=1e-9)


def test_single_root():
    roots = solve_cubic(1.0, -4.5, 17.0, -30.0)
    assert roots == pytest.approx([2.5], abs=1e-9)


def test_scaling_coefficients_keeps_roots():
    base = solve_cubic(1.0, -10.5, 32.0, -30.0)
    scaled = solve_cubic(2.0, -21.0, 64.0, -60.0)
    assert scaled == pytest.approx(base, abs=1e-9)


@pytest.mark.parametrize(
    "coeffs",
    [
        (1.0, -3.5, 22.0, -31.0),
        (1.0, -13.7, 1.0, -35.0),
        (1.0, 10.0, 5.0, -1.0),
        (2.0, 9.0, 5.5, -2.0),
        (1.0, 9.0, 5.5, -1.0),
        (2.0, 10.0, 5.0, -2.0),
    ],
)
def test_roots_satisfy_polynomial(coeffs):
    roots = solve_cubic(*coeffs)
    assert len(roots) in (1, 3)
    for x in roots:
        scale = max(1.0, abs(x) ** 3)
        assert abs(_residual(*coeffs, x)) < 1e-8 * scale


def test_triple_root_gives_nan():
    roots = solve_cubic(1.0, 0.0, 0.0, 0.0)
    assert len(roots) == 3
    assert all(math.isnan(x) for x in roots)


def test_zero_leading_coefficient_raises():
    with pytest.raises(ValueError):
        solve_cubic(0.0, 1.0, 2.0, 3.0)


def test_benchmark_verifies():
    results = benchmark(1)
    assert verify(results)
    first, second = results
    assert first == pytest.approx([2.0, 6.0, 2.5], abs=1e-9)
    assert second == pytest.approx([2.5], abs=1e-9)


def test_benchmark_repeated_is_stable():
    assert benchmark(3) == benchmark(1)


def test_verify_rejects_wrong_results():
    first, _ = benchmark(1)
    assert not verify((first, [3.0]))
    assert not verify((first[:2], [2.5]))


def test_verify_rejects_empty_run():
    assert not verify(benchmark(0))