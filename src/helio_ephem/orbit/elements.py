"""Keplerian orbital elements propagated to equatorial rectangular coordinates (Meeus chapter 33)."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from helio_ephem.constants import COBL_J2000, K, SOBL_J2000
from helio_ephem.orbit.kepler import radius, solve_kepler, true_anomaly


@dataclass(frozen=True)
class Elements:
    """Heliocentric elliptic orbital elements, equinox J2000.

    Eccentricity is expected in [0, 1) and axis > 0; other values are not
    checked and give non-physical results.
    """

    axis: float  # semimajor axis a, AU
    ecc: float  # eccentricity e
    inc: float  # inclination i, radians
    arg_peri: float  # argument of perihelion, radians
    node: float  # longitude of ascending node, radians
    time_peri: float  # time of perihelion T, JDE

    @classmethod
    def from_degrees(
        cls,
        axis: float,
        ecc: float,
        inc_deg: float,
        arg_peri_deg: float,
        node_deg: float,
        time_peri: float,
    ) -> Elements:
        """Build Elements from angles given in degrees."""
        return cls(
            axis=axis,
            ecc=ecc,
            inc=math.radians(inc_deg),
            arg_peri=math.radians(arg_peri_deg),
            node=math.radians(node_deg),
            time_peri=time_peri,
        )


class Orbit:
    """Orbit geometry derived once from Elements; positions by Orbit.position.

    The three (angle, magnitude) pairs carry motion in the orbital plane
    straight to the equatorial x, y and z axes, (33.7)-(33.9) pp. 228-229.
    """

    def __init__(self, elements: Elements) -> None:
        self._elements = elements
        self._n = K / elements.axis / math.sqrt(elements.axis)  # radians/day
        se = SOBL_J2000
        ce = COBL_J2000
        s_node, c_node = math.sin(elements.node), math.cos(elements.node)
        si, ci = math.sin(elements.inc), math.cos(elements.inc)
        # (33.7) p. 228
        f = c_node
        g = s_node * ce
        h = s_node * se
        p = -s_node * ci
        q = c_node * ci * ce - si * se
        r = c_node * ci * se + si * ce
        # (33.8) p. 229
        self._angle_a = math.atan2(f, p)
        self._angle_b = math.atan2(g, q)
        self._angle_c = math.atan2(h, r)
        self._mag_a = math.hypot(f, p)
        self._mag_b = math.hypot(g, q)
        self._mag_c = math.hypot(h, r)

    @property
    def elements(self) -> Elements:
        return self._elements

    @property
    def mean_motion(self) -> float:
        """Mean daily motion n, radians per day."""
        return self._n

    @property
    def period(self) -> float:
        """Orbital period in days."""
        return 2.0 * math.pi / self._n

    def axis_pairs(self) -> tuple[tuple[float, float], tuple[float, float], tuple[float, float]]:
        """Return ((A, a), (B, b), (C, c)): angles in radians and magnitudes."""
        return (
            (self._angle_a, self._mag_a),
            (self._angle_b, self._mag_b),
            (self._angle_c, self._mag_c),
        )

    def position(self, jde: float) -> tuple[float, float, float, float]:
        """Heliocentric equatorial J2000 rectangular position at jde.

        Returns:
            (x, y, z, r) in AU.
        """
        k = self._elements
        m = self._n * (jde - k.time_peri)
        ea = solve_kepler(k.ecc, m)
        r = radius(ea, k.ecc, k.axis)
        nu = true_anomaly(ea, k.ecc)
        # (33.9) p. 229
        x = r * self._mag_a * math.sin(self._angle_a + k.arg_peri + nu)
        y = r * self._mag_b * math.sin(self._angle_b + k.arg_peri + nu)
        z = r * self._mag_c * math.sin(self._angle_c + k.arg_peri + nu)
        return (x, y, z, r)

    def positions(self, jdes: Iterable[float]) -> np.ndarray:
        """Evaluate position at each date; returns an (n, 4) array of x, y, z, r."""
        rows = [self.position(float(jde)) for jde in jdes]
        return np.array(rows, dtype=np.float64).reshape(len(rows), 4)


def new_orbit(elements: Elements) -> Orbit:
    """Return the Orbit for elements."""
    return Orbit(elements)
