import math

import pytest

from kernelbench.nbody import (
    EXPECTED_TOTAL_ENERGY,
    SOLAR_MASS,
    Body,
    benchmark,
    bodies_energy,
    offset_momentum,
    solar_bodies,
    verify,
)


def _momentum(bodies):
    return [sum(b.v[k] * b.mass for b in bodies) for k in range(3)]


def test_solar_bodies_initial_state():
    bodies = solar_bodies()
    assert len(bodies) == 5
    assert bodies[0].mass == SOLAR_MASS
    assert bodies[0].v == [0.0, 0.0, 0.0]
    assert bodies[1].x[0] == 4.84143144246472090e00


def test_solar_bodies_returns_fresh_copies():
    first = solar_bodies()
    first[1].x[0] = 99.0
    first[0].v[0] = 5.0
    second = solar_bodies()
    assert second[1].x[0] == 4.84143144246472090e00
    assert second[0].v[0] == 0.0


def test_offset_momentum_zeroes_total_momentum():
    bodies = solar_bodies()
    offset_momentum(bodies)
    for component in _momentum(bodies):
        assert abs(component) < 1e-15


def test_offset_momentum_is_idempotent_and_keeps_positions():
    bodies = solar_bodies()
    offset_momentum(bodies)
    once = [list(b.v) for b in bodies]
    offset_momentum(bodies)
    assert [b.v for b in bodies] == once
    assert [b.x for b in bodies] == [b.x for b in solar_bodies()]


def test_offset_momentum_matches_source_sun_velocity():
    bodies = solar_bodies()
    offset_momentum(bodies)
    assert bodies[0].v[0] == pytest.approx(-0.000387663407198742665776131088862, rel=1e-12)


def test_offset_momentum_empty_list_is_noop():
    bodies = []
    offset_momentum(bodies)
    assert bodies == []


def test_energy_of_single_body_is_kinetic():
    body = Body(x=[1.0, 2.0, 3.0], v=[3.0, 0.0, 0.0], mass=2.0)
    assert bodies_energy([body]) == 9.0


def test_energy_is_translation_invariant():
    bodies = solar_bodies()
    shifted = solar_bodies()
    for b in shifted:
        b.x = [c + 10.0 for c in b.x]
    assert bodies_energy(shifted) == pytest.approx(bodies_energy(bodies), rel=1e-12)


def test_energy_of_bodies_at_rest_is_negative():
    bodies = solar_bodies()
    for b in bodies:
        b.v = [0.0, 0.0, 0.0]
    assert bodies_energy(bodies) < 0.0


def test_benchmark_total_energy_matches_source():
    bodies, total = benchmark(1)
    assert total == pytest.approx(EXPECTED_TOTAL_ENERGY, rel=1e-9)
    assert verify(bodies, total)


def test_benchmark_repeated_runs_agree():
    bodies_one, total_one = benchmark(1)
    bodies_three, total_three = benchmark(3)
    assert total_three == total_one
    assert [b.v for b in bodies_three] == [b.v for b in bodies_one]


def test_benchmark_zero_runs_fails_verification():
    bodies, total = benchmark(0)
    assert total == 0.0
    assert not verify(bodies, total)


def test_verify_rejects_perturbed_body():
    bodies, total = benchmark(1)
    bodies[2].v[1] += 1e-3
    assert not verify(bodies, total)


def test_verify_rejects_wrong_energy():
    bodies, total = benchmark(1)
    assert not verify(bodies, total * 1.01)


def test_verify_rejects_missing_body():
    bodies, total = benchmark(1)
    assert not verify(bodies[:-1], total)


def test_energy_sum_equals_hundred_samples():
    bodies, total = benchmark(1)
    assert math.isclose(total, 100 * bodies_energy(bodies), rel_tol=1e-12)