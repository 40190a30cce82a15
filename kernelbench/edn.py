"""Fixed-point DSP kernels: vector multiply, dot product, FIR, IIR, lattice, DCT.

Values stored into 16-bit arrays are truncated to signed 16-bit integers the
way narrowing assignments on fixed-width hardware behave; right shifts of
negative values are arithmetic.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass

N = 100
ORDER = 50
SIZE = 200


def _short(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _int32(value: int) -> int:
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


_A_PATTERN = (0x0000, 0x07FF, 0x0C00, 0x0800, 0x0200, 0xF800, 0xF300, 0x0400)
_B_PATTERN = (0x0C60, 0x0C40, 0x0C20, 0x0C00, 0xF600, 0xF400, 0xF200, 0xF000)

IN_A: tuple[int, ...] = tuple(_short(v) for v in _A_PATTERN * (SIZE // 8))
IN_B: tuple[int, ...] = tuple(_short(v) for v in _B_PATTERN * (SIZE // 8))

EXPECTED_OUTPUT: tuple[int, ...] = (
    3760, 4269, 3126, 1030, 2453, -4601, 1981, -1056, 2621, 4269,
    3058, 1030, 2378, -4601, 1902, -1056, 2548, 4269, 2988, 1030,
    2300, -4601, 1822, -1056, 2474, 4269, 2917, 1030, 2220, -4601,
    1738, -1056, 2398, 4269, 2844, 1030, 2140, -4601, 1655, -1056,
    2321, 4269, 2770, 1030, 2058, -4601, 1569, -1056, 2242, 4269,
    2152, 1030, 1683, -4601, 1627, -1056, 2030, 4269, 2080, 1030,
    1611, -4601, 1555, -1056, 1958, 4269, 2008, 1030, 1539, -4601,
    1483, -1056, 1886, 4269, 1935, 1030, 1466, -4601, 1410, -1056,
    1813, 4269, 1862, 1030, 1393, -4601, 1337, -1056, 1740, 4269,
    1789, 1030, 1320, -4601, 1264, -1056, 1667, 4269, 1716, 1030,
    1968,
) + (0,) * 99
EXPECTED_C = 10243
EXPECTED_D = -441886230
EXPECTED_E = -441886230


@dataclass(frozen=True)
class EdnResult:
    """State left behind by one run of the kernel sequence."""

    output: tuple[int, ...]
    c: int
    d: int
    e: int


def vec_mpy1(y: MutableSequence[int], x: Sequence[int], scaler: int) -> None:
    """Add (scaler * x) >> 15 to the first 150 elements of y, in place."""
    y[:150] = [_short(yv + ((scaler * xv) >> 15)) for yv, xv in zip(y[:150], x)]


def mac(a: Sequence[int], b: Sequence[int], sqr: int, total: int) -> tuple[int, int]:
    """Dot product over 150 elements.

    Returns (sqr + sum(b*b), total + sum(a*b)).
    """
    for av, bv in zip(a[:150], b[:150]):
        total += bv * av
        sqr += bv * bv
    return sqr, total


def fir(array1: Sequence[int], coeff: Sequence[int], output: MutableSequence[int]) -> None:
    """50-tap FIR filter producing 50 outputs into output, in place."""
    taps = coeff[:ORDER]
    for i in range(N - ORDER):
        acc = sum(s * h for s, h in zip(array1[i:i + ORDER], taps))
        output[i] = acc >> 15


def fir_no_red_ld(x: Sequence[int], h: Sequence[int], y: MutableSequence[int]) -> None:
    """32-tap FIR filter computing two outputs per pass, 100 outputs into y."""
    for j in range(0, 100, 2):
        sum0 = sum1 = 0
        x0 = x[j]
        for i in range(0, 32, 2):
            x1 = x[j + i + 1]
            h0 = h[i]
            sum0 += x0 * h0
            sum1 += x1 * h0
            x0 = x[j + i + 2]
            h1 = h[i + 1]
            sum0 += x1 * h1
            sum1 += x0 * h1
        y[j] = sum0 >> 15
        y[j + 1] = sum1 >> 15


def latsynth(b: MutableSequence[int], k: Sequence[int], n: int, f: int) -> int:
    """Lattice synthesis over n stages; updates b in place and returns f."""
    f -= b[n - 1] * k[n - 1]
    for i in range(n - 2, -1, -1):
        f -= b[i] * k[i]
        b[i + 1] = _short(b[i] + ((k[i] * (f >> 16)) >> 16))
    b[0] = _short(f >> 16)
    return f


def iir1(
    coefs: Sequence[int],
    inp: Sequence[int],
    output: MutableSequence[int],
    out_index: int,
    state: MutableSequence[int],
) -> int:
    """Cascade of 50 biquad sections.

    Each section uses four coefficients and two state words. The final value
    is stored at output[out_index] and returned.
    """
    x = inp[0]
    for n in range(50):
        c0, c1, c2, c3 = coefs[4 * n:4 * n + 4]
        s0, s1 = state[2 * n], state[2 * n + 1]
        t = x + ((c2 * s0 + c3 * s1) >> 15)
        x = t + ((c0 * s0 + c1 * s1) >> 15)
        state[2 * n + 1] = s0
        state[2 * n] = t
    output[out_index] = x
    return x


def codebook(
    mask: int,
    bitchanged: int,
    numbasis: int,
    codeword: int,
    g: int,
    d: Sequence[int],
    ddim: int,
    theta: int,
) -> int:
    """Vocoder codebook search with its update step removed; returns g."""
    for _ in range(bitchanged + 1, numbasis + 1):
        pass
    return g


def jpegdct(d: MutableSequence[int], r: Sequence[int]) -> None:
    """Two-pass 8x8 integer DCT over the first 64 elements of d, in place."""
    for k, m, n, p in ((1, 0, 13, 8), (8, 3, 16, 1)):
        for i in range(8):
            base = i * p
            t = [0] * 12
            for j in range(4):
                lo = d[base + k * j]
                hi = d[base + k * (7 - j)]
                t[j] = lo + hi
                t[7 - j] = lo - hi
            t[8] = t[0] + t[3]
            t[9] = t[0] - t[3]
            t[10] = t[1] + t[2]
            t[11] = t[1] - t[2]
            d[base] = _short((t[8] + t[10]) >> m)
            d[base + 4 * k] = _short((t[8] - t[10]) >> m)
            t[8] = _short(t[11] + t[9]) * r[10]
            d[base + 2 * k] = _short(t[8] + _short((t[9] * r[9]) >> n))
            d[base + 6 * k] = _short(t[8] + _short((t[11] * r[11]) >> n))
            t[0] = _short(t[4] + t[7]) * r[2]
            t[1] = _short(t[5] + t[6]) * r[0]
            t[2] = t[4] + t[6]
            t[3] = t[5] + t[7]
            t[8] = _short(t[2] + t[3]) * r[8]
            t[2] = _short(t[2]) * r[1] + t[8]
            t[3] = _short(t[3]) * r[3] + t[8]
            d[base + 7 * k] = _short(_short(t[4] * r[4] + t[0] + t[2]) >> n)
            d[base + 5 * k] = _short(_short(t[5] * r[6] + t[1] + t[3]) >> n)
            d[base + 3 * k] = _short(_short(t[6] * r[5] + t[1] + t[2]) >> n)
            d[base + 1 * k] = _short(_short(t[7] * r[7] + t[0] + t[3]) >> n)


def benchmark(rpt: int) -> EdnResult:
    """Run the kernel sequence rpt times and return the resulting state."""
    output = [0] * SIZE
    c = d = e = 0
    for _ in range(rpt):
        a = list(IN_A)
        b = list(IN_B)
        c = 0x3
        d = 0xAAAA
        e = 0xEEEE

        vec_mpy1(a, b, c)
        sqr, output[0] = mac(a, b, c, output[0])
        c = _short(sqr)
        fir(a, b, output)
        fir_no_red_ld(a, b, output)
        d = latsynth(a, b, N, d)
        iir1(a, b, output, 100, output)
        e = _int32(codebook(d, 1, 17, e, d, a, c, 1))
        jpegdct(a, b)
    return EdnResult(tuple(output), c, d, e)


def verify(result: EdnResult) -> bool:
    """Compare a run's state with the known-good values."""
    return (
        tuple(result.output) == EXPECTED_OUTPUT
        and result.c == EXPECTED_C
        and result.d == EXPECTED_D
        and result.e == EXPECTED_E
    )