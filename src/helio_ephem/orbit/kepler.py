"""Kepler's equation M = E - e sin E, solved for the eccentric anomaly E.

Two methods (Meeus chapter 30): a damped fixed-point iteration that is fast
for ordinary eccentricities, and a 53-step bisection that always converges
and takes over when the iteration runs out of budget.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from helio_ephem.errors import ConvergenceFailure
from helio_ephem.numeric import iterate_decimal_places, pmod

logger = logging.getLogger(__name__)

TWOPI = 2.0 * math.pi
DEFAULT_PLACES = 15
BISECTION_STEPS = 53  # one per bit of a double mantissa
MAX_STEP = 0.5


@dataclass(frozen=True)
class Converged:
    """Iteration reached the requested precision; value is E in radians."""

    value: float


@dataclass(frozen=True)
class NotConverged:
    """Iteration exhausted its budget; last_value is the final estimate (not trusted)."""

    iterations: int
    last_value: float


KeplerResult = Converged | NotConverged


def kepler_iterate(e: float, m: float, places: int = DEFAULT_PLACES) -> KeplerResult:
    """Solve Kepler's equation by iteration.

    Each step adds (M + e sin E - E) / (1 - e cos E), limited to +/-0.5 rad
    so that it cannot diverge at high eccentricity (method of Steele, Meeus
    p. 205). Starts from E = M and allows at most `places` steps.

    Parameters:
        e: Eccentricity.
        m: Mean anomaly in radians.
        places: Desired number of decimal places in the result.

    Returns:
        Converged(E) or NotConverged when the step budget is used up.
    """

    def better(e0: float) -> float:
        d = (m + e * math.sin(e0) - e0) / (1.0 - e * math.cos(e0))
        if d > MAX_STEP:
            d = MAX_STEP
        elif d < -MAX_STEP:
            d = -MAX_STEP
        return e0 + d

    try:
        return Converged(iterate_decimal_places(better, m, places, places))
    except ConvergenceFailure as err:
        return NotConverged(err.iterations, err.last_value)


def kepler_bisect(e: float, m: float) -> float:
    """Solve Kepler's equation by binary search (adapted from BASIC, Meeus p. 206).

    Parameters:
        e: Eccentricity, 0 <= e < 1.
        m: Mean anomaly in radians, any value.

    Returns:
        E in radians, in [-pi, pi].
    """
    mr = pmod(m, TWOPI)
    sign = 1.0
    if mr > math.pi:
        sign = -1.0
        mr = TWOPI - mr
    e0 = math.pi * 0.5
    d = math.pi * 0.25
    for _ in range(BISECTION_STEPS):
        m1 = e0 - e * math.sin(e0)
        if mr - m1 < 0:
            e0 -= d
        else:
            e0 += d
        d *= 0.5
    return sign * e0


def solve_kepler(e: float, m: float, places: int = DEFAULT_PLACES) -> float:
    """Return the eccentric anomaly E for eccentricity e and mean anomaly m.

    Tries kepler_iterate and falls back to kepler_bisect when it does not
    converge, so this never fails for finite input. e = 0 returns m exactly.
    """
    result = kepler_iterate(e, m, places)
    if isinstance(result, Converged):
        return result.value
    logger.debug(
        'Kepler iteration did not converge (e=%r, M=%r, %d iterations); using bisection',
        e,
        m,
        result.iterations,
    )
    return kepler_bisect(e, m)


def true_anomaly(ea: float, e: float) -> float:
    """Return true anomaly for eccentric anomaly ea and eccentricity e. (30.1) p. 195."""
    return 2.0 * math.atan(math.sqrt((1.0 + e) / (1.0 - e)) * math.tan(ea * 0.5))


def radius(ea: float, e: float, a: float) -> float:
    """Return radius vector for eccentric anomaly ea, in the unit of semimajor axis a.

    (30.2) p. 195.
    """
    return a * (1.0 - e * math.cos(ea))
