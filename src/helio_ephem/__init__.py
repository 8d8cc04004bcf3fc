"""Heliocentric positions of solar-system bodies.

This package provides two independent ways to get equatorial J2000
rectangular coordinates in AU:
- VSOP87B periodic series, loaded from the published fixed-column data files
- Keplerian orbital elements, propagated by solving Kepler's equation

Calendar conversions use rms-julian; vectors and tables use numpy.
"""

from helio_ephem.errors import ConvergenceFailure, FormatError, HelioEphemError
from helio_ephem.orbit import Elements, Orbit, new_orbit, solve_kepler
from helio_ephem.vsop87 import (
    PlanetaryModel,
    evaluate_series,
    load_planet,
    load_planet_file,
    load_planet_path,
    solar_position_j2000,
    to_equatorial_rectangular,
)

__all__: list[str] = [
    'ConvergenceFailure',
    'Elements',
    'FormatError',
    'HelioEphemError',
    'Orbit',
    'PlanetaryModel',
    'evaluate_series',
    'load_planet',
    'load_planet_file',
    'load_planet_path',
    'new_orbit',
    'solar_position_j2000',
    'solve_kepler',
    'to_equatorial_rectangular',
]
