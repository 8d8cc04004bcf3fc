"""Tests for orbit geometry and propagation from Keplerian elements."""

from __future__ import annotations

import math

import numpy as np
import pytest

from helio_ephem.constants import COBL_J2000, K, SOBL_J2000
from helio_ephem.orbit.elements import Elements, Orbit, new_orbit
from helio_ephem.orbit.kepler import solve_kepler

# Comet Encke, Meeus example 33.a.
ENCKE = Elements.from_degrees(
    axis=2.2091404,
    ecc=0.8502196,
    inc_deg=11.94524,
    arg_peri_deg=186.23352,
    node_deg=334.75006,
    time_peri=2448192.5 + 0.54502,
)


def _circular(axis: float = 1.0) -> Elements:
    return Elements(axis=axis, ecc=0.0, inc=0.0, arg_peri=0.0, node=0.0, time_peri=0.0)


def test_circular_orbit_at_perihelion() -> None:
    """Unit circular orbit in the ecliptic starts on the x axis."""
    x, y, z, r = new_orbit(_circular()).position(0.0)

    assert (x, y, z) == pytest.approx((1.0, 0.0, 0.0), abs=1e-9)
    assert r == pytest.approx(1.0, abs=1e-12)


def test_circular_orbit_quarter_period() -> None:
    """A quarter period later the body is 90 degrees along the ecliptic, tilted by the obliquity."""
    orbit = Orbit(_circular())

    x, y, z, r = orbit.position(orbit.period / 4)

    assert (x, y, z) == pytest.approx((0.0, COBL_J2000, SOBL_J2000), abs=1e-9)
    assert r == pytest.approx(1.0)


def test_mean_motion() -> None:
    assert Orbit(_circular()).mean_motion == K
    assert Orbit(_circular(4.0)).mean_motion == pytest.approx(K / 8.0)
    assert Orbit(_circular()).period == pytest.approx(2 * math.pi / K)


def test_derived_geometry_is_pure() -> None:
    """Orbits built from equal elements have identical derived values."""
    a = Orbit(ENCKE)
    b = Orbit(Elements(**vars(ENCKE)))

    assert a.mean_motion == b.mean_motion
    assert a.axis_pairs() == b.axis_pairs()
    assert a.elements is ENCKE


@pytest.mark.parametrize('jde', [2448170.5, 2448192.5, 2448500.0, 2449000.25])
def test_position_norm_is_radius(jde: float) -> None:
    """The equatorial axes are orthonormal, so |(x, y, z)| equals r."""
    x, y, z, r = Orbit(ENCKE).position(jde)

    assert math.sqrt(x * x + y * y + z * z) == pytest.approx(r, rel=1e-9)


def test_radius_at_perihelion() -> None:
    _, _, _, r = Orbit(ENCKE).position(ENCKE.time_peri)
    assert r == pytest.approx(ENCKE.axis * (1 - ENCKE.ecc), rel=1e-12)


def test_encke_radius_before_perihelion() -> None:
    """Encke on 1990 October 6.0 TD, 22.5 days before perihelion."""
    orbit = Orbit(ENCKE)
    m = orbit.mean_motion * (2448170.5 - ENCKE.time_peri)
    ea = solve_kepler(ENCKE.ecc, m)

    _, _, _, r = orbit.position(2448170.5)

    assert m == pytest.approx(math.radians(-6.767), abs=1e-4)
    assert r == ENCKE.axis * (1 - ENCKE.ecc * math.cos(ea))
    assert r == pytest.approx(0.6523, abs=2e-3)


def test_position_repeats_after_one_period() -> None:
    orbit = Orbit(ENCKE)
    jde = 2448300.0

    p0 = orbit.position(jde)
    p1 = orbit.position(jde + orbit.period)

    assert p1 == pytest.approx(p0, abs=1e-9)


def test_positions_array() -> None:
    orbit = Orbit(ENCKE)
    jdes = np.linspace(2448170.5, 2448180.5, 5)

    out = orbit.positions(jdes)

    assert out.shape == (5, 4)
    assert tuple(out[2]) == orbit.position(float(jdes[2]))


def test_elements_from_degrees() -> None:
    e = Elements.from_degrees(1.5, 0.1, 90.0, 180.0, 45.0, 2451545.0)
    assert e.inc == pytest.approx(math.pi / 2)
    assert e.arg_peri == pytest.approx(math.pi)
    assert e.node == pytest.approx(math.pi / 4)
    assert e.time_peri == 2451545.0


def test_elements_are_immutable() -> None:
    with pytest.raises(AttributeError):
        ENCKE.axis = 3.0  # type: ignore[misc]
