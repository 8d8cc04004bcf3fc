"""Keplerian orbits: elements, propagation, and Kepler's equation."""

from helio_ephem.orbit.elements import Elements, Orbit, new_orbit
from helio_ephem.orbit.kepler import (
    Converged,
    KeplerResult,
    NotConverged,
    kepler_bisect,
    kepler_iterate,
    radius,
    solve_kepler,
    true_anomaly,
)
from helio_ephem.orbit.state import aei_hv, h_mag

__all__ = [
    'Converged',
    'Elements',
    'KeplerResult',
    'NotConverged',
    'Orbit',
    'aei_hv',
    'h_mag',
    'kepler_bisect',
    'kepler_iterate',
    'new_orbit',
    'radius',
    'solve_kepler',
    'true_anomaly',
]
