"""Rectangular coordinates from VSOP87 positions (Meeus chapter 26, equinox J2000)."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from helio_ephem.vsop87.model import PlanetaryModel


def spherical_to_rectangular(L: float, B: float, R: float) -> tuple[float, float, float]:
    """Convert heliocentric (L, B, R) to rectangular coordinates, reversed through the origin.

    Longitude is advanced by pi and latitude negated, so for the Earth model
    the result is the geocentric position of the Sun. (26.2) p. 172.
    """
    s = L + math.pi
    beta = -B
    ss, cs = math.sin(s), math.cos(s)
    sb, cb = math.sin(beta), math.cos(beta)
    x = R * cb * cs
    y = R * cb * ss
    z = R * sb
    return (x, y, z)


def ecliptic_to_equatorial(x: float, y: float, z: float) -> tuple[float, float, float]:
    """Rotate rectangular coordinates from the VSOP87 dynamical ecliptic to the FK5 equator J2000.

    (26.3) p. 174. The coefficients combine the J2000 obliquity rotation with
    the small offset between the VSOP87 and FK5 frames:

        x' =  1              x + 0.00000044036  y - 0.000000190919 z
        y' = -0.000000479966 x + 0.917482137087 y - 0.397776982902 z
        z' =  0              x + 0.397776982902 y + 0.917482137087 z
    """
    return (
        x + 0.00000044036 * y - 0.000000190919 * z,
        -0.000000479966 * x + 0.917482137087 * y - 0.397776982902 * z,
        0.397776982902 * y + 0.917482137087 * z,
    )


def to_equatorial_rectangular(
    L: float, B: float, R: float
) -> tuple[float, float, float, float]:
    """Return equatorial J2000 (x, y, z, r) from VSOP87 (L, B, R); r is R unchanged."""
    x, y, z = spherical_to_rectangular(L, B, R)
    x, y, z = ecliptic_to_equatorial(x, y, z)
    return (x, y, z, R)


def solar_position_j2000(model: PlanetaryModel, jde: float) -> tuple[float, float, float, float]:
    """Rectangular coordinates referenced to equinox J2000.

    With the Earth model this is the geocentric position of the Sun
    (Meeus chapter 26); with another planet, the position of the Sun as seen
    from that planet.

    Parameters:
        model: Loaded VSOP87B planetary model.
        jde: Julian ephemeris date.

    Returns:
        (x, y, z, r) in AU.
    """
    return to_equatorial_rectangular(*model.position_2000(jde))


def positions_j2000(model: PlanetaryModel, jdes: Iterable[float]) -> np.ndarray:
    """Evaluate solar_position_j2000 at each date; returns an (n, 4) array of x, y, z, r."""
    rows = [solar_position_j2000(model, float(jde)) for jde in jdes]
    return np.array(rows, dtype=np.float64).reshape(len(rows), 4)
