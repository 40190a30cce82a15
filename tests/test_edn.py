import dataclasses

from kernelbench.edn import (
    EdnResult,
    benchmark,
    codebook,
    fir,
    fir_no_red_ld,
    iir1,
    jpegdct,
    latsynth,
    mac,
    vec_mpy1,
    verify,
)


def test_benchmark_matches_known_state():
    result = benchmark(1)
    assert verify(result)
    assert result.c == 10243
    assert result.d == -441886230
    assert result.e == -441886230
    assert result.output[100] == 1968
    assert result.output[101:] == (0,) * 99


def test_benchmark_repeats_identically():
    assert benchmark(2) == benchmark(1)


def test_verify_rejects_changed_result():
    result = benchmark(1)
    assert not verify(dataclasses.replace(result, c=result.c + 1))
    changed = list(result.output)
    changed[0] += 1
    assert not verify(dataclasses.replace(result, output=tuple(changed)))


def test_verify_rejects_empty_run():
    result = benchmark(0)
    assert isinstance(result, EdnResult)
    assert result.output == (0,) * 200
    assert not verify(result)


def test_vec_mpy1_shifts_arithmetically():
    y = [10] * 200
    x = [1000] * 100 + [-1000] * 100
    vec_mpy1(y, x, 3)
    assert y[:100] == [10] * 100
    assert y[100:150] == [9] * 50
    assert y[150:] == [10] * 50


def test_vec_mpy1_zero_scaler_is_identity():
    y = list(range(-100, 100))
    before = list(y)
    vec_mpy1(y, list(range(200)), 0)
    assert y == before


def test_mac_offsets_pass_through():
    a = list(range(150))
    b = [(i % 7) - 3 for i in range(150)]
    sqr0, total0 = mac(a, b, 0, 0)
    sqr1, total1 = mac(a, b, 10, 20)
    assert sqr1 - sqr0 == 10
    assert total1 - total0 == 20


def test_mac_square_sum_ignores_a():
    b = [(i % 5) - 2 for i in range(150)]
    sqr_a, _ = mac([1] * 150, b, 0, 0)
    sqr_b, _ = mac(list(range(150)), b, 0, 0)
    assert sqr_a == sqr_b


def test_fir_identity_filter():
    data = list(range(-40, 60))
    coeff = [1 << 15] + [0] * 49
    output = [0] * 60
    fir(data, coeff, output)
    assert output[:50] == data[:50]
    assert output[50:] == [0] * 10


def test_fir_no_red_ld_identity_filter():
    x = [2 * i for i in range(131)]
    h = [1 << 14] + [0] * 31
    y = [0] * 100
    fir_no_red_ld(x, h, y)
    assert y == list(range(100))


def test_latsynth_zero_coefficients_shift():
    b = list(range(1, 11))
    f = 5 << 16
    assert latsynth(b, [0] * 10, 10, f) == f
    assert b == [5] + list(range(1, 10))


def test_iir1_zero_coefficients_pass_input():
    coefs = [0] * 200
    state = list(range(100))
    output = [0] * 101
    assert iir1(coefs, [7, 1, 2], output, 100, state) == 7
    assert output[100] == 7
    assert state[0::2] == [7] * 50
    assert state[1::2] == list(range(0, 100, 2))


def test_codebook_returns_g():
    assert codebook(1, 1, 17, 99, 123, [0] * 10, 3, 1) == 123


def test_jpegdct_zero_block_stays_zero():
    block = [0] * 64
    jpegdct(block, list(range(1, 13)))
    assert block == [0] * 64


def test_jpegdct_values_fit_in_short():
    block = [((i * 37) % 200) - 100 for i in range(64)]
    r = [((i * 53) % 4000) - 2000 for i in range(12)]
    jpegdct(block, r)
    assert all(-32768 <= v <= 32767 for v in block)
    assert len(block) == 64