"""Modular exponentiation with 64-bit words, directly and by Montgomery multiplication.

The working values are unsigned 64-bit integers. Every result is reduced
modulo 2**64 in the same way fixed-width machine arithmetic would be.
"""

from __future__ import annotations

MASK64 = (1 << 64) - 1
HALF_R = 1 << 63

IN_M = 0xFAE849273928F89F  # must be odd
IN_B = 0x14736DEFB9330573  # must be smaller than m
IN_A = 0x0549372187237FEF  # must be smaller than m


def mulul64(u: int, v: int) -> tuple[int, int]:
    """Multiply two 64-bit words and return the 128-bit product as (high, low)."""
    product = (u & MASK64) * (v & MASK64)
    return product >> 64, product & MASK64


def modul64(x: int, y: int, z: int) -> int:
    """Return the remainder of the 128-bit value (x || y) divided by z.

    The caller must ensure x < z so that the quotient fits in 64 bits.
    """
    x &= MASK64
    y &= MASK64
    for _ in range(64):
        top = MASK64 if x >> 63 else 0
        x = ((x << 1) | (y >> 63)) & MASK64
        y = (y << 1) & MASK64
        if (x | top) >= z:
            x = (x - z) & MASK64
            y = (y + 1) & MASK64
    return x


def montmul(abar: int, bbar: int, m: int, mprime: int) -> int:
    """Montgomery product abar * bbar * 2**-64 (mod m), with r fixed at 2**64."""
    t = (abar & MASK64) * (bbar & MASK64)
    tm = ((t & MASK64) * mprime) & MASK64
    u = t + tm * m
    overflow = u >> 128
    result = (u >> 64) & MASK64
    if overflow or result >= m:
        result = (result - m) & MASK64
    return result


def xbin_gcd(a: int, b: int) -> tuple[int, int]:
    """Return (u, v) such that u*(2a) - v*b == 1, for a a power of two and b odd.

    A value of 0 for a is treated as 2**64.
    """
    u, v = 1, 0
    alpha, beta = a & MASK64, b & MASK64
    while a > 0:
        a >>= 1
        if u & 1 == 0:
            u >>= 1
            v >>= 1
        else:
            # (u + beta) >> 1 without overflow.
            u = (((u ^ beta) >> 1) + (u & beta)) & MASK64
            v = ((v >> 1) + alpha) & MASK64
    return u, v


def fourth_power_direct(a: int, b: int, m: int) -> int:
    """Compute (a*b)**4 mod m by repeated 128-bit multiply and reduce."""
    p = modul64(*mulul64(a, b), m)
    p = modul64(*mulul64(p, p), m)
    return modul64(*mulul64(p, p), m)


def _montgomery_constants(m: int) -> tuple[int, int]:
    return xbin_gcd(HALF_R, m)


def fourth_power_montgomery(a: int, b: int, m: int) -> int:
    """Compute (a*b)**4 mod m using Montgomery multiplication."""
    rinv, mprime = _montgomery_constants(m)
    abar = modul64(a, 0, m)
    bbar = modul64(b, 0, m)
    p = montmul(abar, bbar, m, mprime)
    p = montmul(p, p, m, mprime)
    p = montmul(p, p, m, mprime)
    return modul64(*mulul64(p, rinv), m)


def benchmark(rpt: int) -> int:
    """Run the kernel rpt times and return the error flag of the last run."""
    errors = 0
    for _ in range(rpt):
        errors = 0
        m, b, a = IN_M, IN_B, IN_A
        direct = fourth_power_direct(a, b, m)
        rinv, mprime = _montgomery_constants(m)
        if (2 * HALF_R * rinv - m * mprime) & MASK64 != 1:
            errors = 1
        if fourth_power_montgomery(a, b, m) != direct:
            errors = 1
    return errors


def verify(errors: int) -> bool:
    """A run is correct when it reported no errors."""
    return errors == 0