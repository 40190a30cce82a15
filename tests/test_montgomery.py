import pytest

from kernelbench import montgomery as mg

M = mg.IN_M
A = mg.IN_A
B = mg.IN_B


@pytest.mark.parametrize(
    "u, v",
    [(0, 0), (1, mg.MASK64), (mg.MASK64, mg.MASK64), (A, B), (0x123456789, 0xFFFF0000FFFF)],
)
def test_mulul64_matches_full_product(u, v):
    hi, lo = mg.mulul64(u, v)
    assert (hi << 64) | lo == u * v
    assert 0 <= lo <= mg.MASK64


@pytest.mark.parametrize("x, y", [(0, 0), (A, 0), (B, 12345), (M - 1, mg.MASK64), (5, 7)])
def test_modul64_is_128_bit_remainder(x, y):
    assert mg.modul64(x, y, M) == ((x << 64) | y) % M


def test_xbin_gcd_identity():
    u, v = mg.xbin_gcd(mg.HALF_R, M)
    assert u * (1 << 64) - v * M == 1


def test_xbin_gcd_small_power():
    u, v = mg.xbin_gcd(4, 7)
    assert u * 8 - v * 7 == 1


def test_montmul_is_montgomery_product():
    _, mprime = mg.xbin_gcd(mg.HALF_R, M)
    rinv = pow(1 << 64, -1, M)
    x, y = A % M, B % M
    assert mg.montmul(x, y, M, mprime) == x * y * rinv % M


def test_fourth_power_direct():
    assert mg.fourth_power_direct(A, B, M) == pow(A * B, 4, M)


def test_montgomery_agrees_with_direct():
    assert mg.fourth_power_montgomery(A, B, M) == mg.fourth_power_direct(A, B, M)


@pytest.mark.parametrize("a, b, m", [(3, 5, 101), (2, 9, 0xFFFFFFFFFFFFFFC5), (10, 20, 1000003)])
def test_montgomery_other_moduli(a, b, m):
    assert mg.fourth_power_montgomery(a, b, m) == pow(a * b, 4, m)


def test_benchmark_has_no_errors():
    result = mg.benchmark(2)
    assert result == 0
    assert mg.verify(result) is True


def test_verify_rejects_errors():
    assert mg.verify(1) is False