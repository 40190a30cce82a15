"""Total energy of the Sun and the four outer planets.

Positions are in astronomical units, velocities in AU per year and masses in
units where the Sun's mass is 4*pi**2.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

PI = 3.141592653589793
SOLAR_MASS = 4 * PI * PI
DAYS_PER_YEAR = 365.24

ENERGY_SAMPLES = 100
EXPECTED_TOTAL_ENERGY = -16.907516382852478

_REL_TOL = 1e-9
_ABS_TOL = 1e-12


@dataclass
class Body:
    """A point mass with position x, velocity v and mass."""

    x: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    v: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    mass: float = 0.0


_EXPECTED: tuple[Body, ...] = (
    Body(
        x=[0.0, 0.0, 0.0],
        v=[
            -0.000387663407198742665776131088862,
            -0.0032753590371765706722173572274,
            2.39357340800030020670947916717e-05,
        ],
        mass=39.4784176043574319692197605036,
    ),
    Body(
        x=[
            4.84143144246472090230781759601,
            -1.16032004402742838777840006514,
            -0.103622044471123109232735259866,
        ],
        v=[
            0.606326392995832019749968821998,
            2.81198684491626016423992950877,
            -0.0252183616598876288172892401462,
        ],
        mass=0.0376936748703894930478952574049,
    ),
    Body(
        x=[
            8.34336671824457987156620220048,
            4.1247985641243047894022311084,
            -0.403523417114321381049535375496,
        ],
        v=[
            -1.01077434617879236000703713216,
            1.82566237123041186229954746523,
            0.00841576137658415351916474378413,
        ],
        mass=0.0112863261319687668143840753032,
    ),
    Body(
        x=[
            12.8943695621391309913406075793,
            -15.1111514016986312469725817209,
            -0.223307578892655733682204299839,
        ],
        v=[
            1.08279100644153536414648897335,
            0.868713018169608219842814378353,
            -0.0108326374013636358983880825235,
        ],
        mass=0.0017237240570597111687795033319,
    ),
    Body(
        x=[
            15.3796971148509165061568637611,
            -25.9193146099879641042207367718,
            0.179258772950371181309492385481,
        ],
        v=[
            0.979090732243897976516677772452,
            0.594698998647676169149178804219,
            -0.0347559555040781037460462243871,
        ],
        mass=0.00203368686992463042206846779436,
    ),
)


def solar_bodies() -> list[Body]:
    """Return fresh copies of the Sun, Jupiter, Saturn, Uranus and Neptune."""
    return [
        # Sun
        Body(x=[0.0, 0.0, 0.0], v=[0.0, 0.0, 0.0], mass=SOLAR_MASS),
        # Jupiter
        Body(
            x=[
                4.84143144246472090e00,
                -1.16032004402742839e00,
                -1.03622044471123109e-01,
            ],
            v=[
                1.66007664274403694e-03 * DAYS_PER_YEAR,
                7.69901118419740425e-03 * DAYS_PER_YEAR,
                -6.90460016972063023e-05 * DAYS_PER_YEAR,
            ],
            mass=9.54791938424326609e-04 * SOLAR_MASS,
        ),
        # Saturn
        Body(
            x=[
                8.34336671824457987e00,
                4.12479856412430479e00,
                -4.03523417114321381e-01,
            ],
            v=[
                -2.76742510726862411e-03 * DAYS_PER_YEAR,
                4.99852801234917238e-03 * DAYS_PER_YEAR,
                2.30417297573763929e-05 * DAYS_PER_YEAR,
            ],
            mass=2.85885980666130812e-04 * SOLAR_MASS,
        ),
        # Uranus
        Body(
            x=[
                1.28943695621391310e01,
                -1.51111514016986312e01,
                -2.23307578892655734e-01,
            ],
            v=[
                2.96460137564761618e-03 * DAYS_PER_YEAR,
                2.37847173959480950e-03 * DAYS_PER_YEAR,
                -2.96589568540237556e-05 * DAYS_PER_YEAR,
            ],
            mass=4.36624404335156298e-05 * SOLAR_MASS,
        ),
        # Neptune
        Body(
            x=[
                1.53796971148509165e01,
                -2.59193146099879641e01,
                1.79258772950371181e-01,
            ],
            v=[
                2.68067772490389322e-03 * DAYS_PER_YEAR,
                1.62824170038242295e-03 * DAYS_PER_YEAR,
                -9.51592254519715870e-05 * DAYS_PER_YEAR,
            ],
            mass=5.15138902046611451e-05 * SOLAR_MASS,
        ),
    ]


def offset_momentum(bodies: Sequence[Body]) -> None:
    """Adjust the first body's velocity, in place, so total momentum is zero."""
    if not bodies:
        return
    first = bodies[0]
    for body in bodies:
        for k in range(3):
            first.v[k] -= body.v[k] * body.mass / SOLAR_MASS


def bodies_energy(bodies: Sequence[Body]) -> float:
    """Return kinetic plus gravitational potential energy of the system."""
    e = 0.0
    for i, body in enumerate(bodies):
        vx, vy, vz = body.v
        e += body.mass * (vx * vx + vy * vy + vz * vz) / 2.0
        for other in bodies[i + 1:]:
            dx = [p - q for p, q in zip(body.x, other.x)]
            distance = math.sqrt(dx[0] * dx[0] + dx[1] * dx[1] + dx[2] * dx[2])
            e -= (body.mass * other.mass) / distance
    return e


def benchmark(rpt: int) -> tuple[list[Body], float]:
    """Offset momentum and sum the energy 100 times, rpt times over.

    Returns the bodies and the summed energy of the last run.
    """
    bodies = solar_bodies()
    total = 0.0
    for _ in range(rpt):
        offset_momentum(bodies)
        total = 0.0
        for _ in range(ENERGY_SAMPLES):
            total += bodies_energy(bodies)
    return bodies, total


def _close(x: float, y: float) -> bool:
    return math.isclose(x, y, rel_tol=_REL_TOL, abs_tol=_ABS_TOL)


def verify(bodies: Sequence[Body], total_energy: float) -> bool:
    """Check the summed energy and the state of every body against known values."""
    if not _close(total_energy, EXPECTED_TOTAL_ENERGY):
        return False
    if len(bodies) != len(_EXPECTED):
        return False
    for got, expected in zip(bodies, _EXPECTED):
        if not all(_close(g, e) for g, e in zip(got.x, expected.x)):
            return False
        if not all(_close(g, e) for g, e in zip(got.v, expected.v)):
            return False
        if not _close(got.mass, expected.mass):
            return False
    return True