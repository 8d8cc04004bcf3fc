"""VSOP87 planetary model and series evaluation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from helio_ephem.numeric import horner, pmod
from helio_ephem.time_utils import j2000_century

TWOPI = 2.0 * math.pi


@dataclass(frozen=True)
class Term:
    """One periodic term A*cos(B + C*tau)."""

    amplitude: float
    phase: float
    frequency: float


PowerSeries = tuple[Term, ...]
# Indexed by power of tau; length is the number of populated power slots.
CoefficientTable = tuple[PowerSeries, ...]


def sum_series(terms: PowerSeries, tau: float) -> float:
    """Sum A*cos(B + C*tau) over terms, last term first.

    The smallest terms sit at the end of each VSOP87 block, so adding them
    first keeps rounding error down. Results depend on this order.
    """
    s = 0.0
    for term in reversed(terms):
        s += term.amplitude * math.cos(term.phase + term.frequency * tau)
    return s


def sum_table(table: CoefficientTable, tau: float) -> float:
    """Evaluate a coefficient table at tau: per-power sums combined by Horner's method.

    Raises:
        ValueError: If the table has no power slots.
    """
    return horner(tau, *(sum_series(terms, tau) for terms in table))


@dataclass(frozen=True)
class PlanetaryModel:
    """VSOP87 coefficients for computing one planet's position in spherical coordinates.

    Built by helio_ephem.vsop87.loader; read-only afterwards.
    """

    body: int
    longitude: CoefficientTable
    latitude: CoefficientTable
    radius: CoefficientTable

    def term_count(self) -> int:
        """Total number of periodic terms over all three tables."""
        return sum(
            len(terms)
            for table in (self.longitude, self.latitude, self.radius)
            for terms in table
        )

    def position_2000(self, jde: float) -> tuple[float, float, float]:
        """Heliocentric ecliptic position by the full VSOP87B theory.

        Results are for the dynamical equinox and ecliptic J2000.

        Parameters:
            jde: Julian ephemeris date.

        Returns:
            (L, B, R): longitude in radians reduced to [0, 2pi), latitude in
            radians, and range in AU.
        """
        tau = j2000_century(jde) * 0.1
        L = pmod(sum_table(self.longitude, tau), TWOPI)
        B = sum_table(self.latitude, tau)
        R = sum_table(self.radius, tau)
        return (L, B, R)


def evaluate_series(model: PlanetaryModel, jde: float) -> tuple[float, float, float]:
    """Return (longitude, latitude, radius) of model at jde; see PlanetaryModel.position_2000."""
    return model.position_2000(jde)
