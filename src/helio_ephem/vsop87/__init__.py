"""VSOP87B periodic-series planetary theory: file loader, evaluator, rectangular coordinates."""

from helio_ephem.vsop87.loader import (
    load_planet,
    load_planet_file,
    load_planet_path,
    vsop87_file_name,
)
from helio_ephem.vsop87.model import (
    CoefficientTable,
    PlanetaryModel,
    PowerSeries,
    Term,
    evaluate_series,
)
from helio_ephem.vsop87.solarpos import (
    ecliptic_to_equatorial,
    positions_j2000,
    solar_position_j2000,
    spherical_to_rectangular,
    to_equatorial_rectangular,
)

__all__ = [
    'CoefficientTable',
    'PlanetaryModel',
    'PowerSeries',
    'Term',
    'ecliptic_to_equatorial',
    'evaluate_series',
    'load_planet',
    'load_planet_file',
    'load_planet_path',
    'positions_j2000',
    'solar_position_j2000',
    'spherical_to_rectangular',
    'to_equatorial_rectangular',
    'vsop87_file_name',
]
