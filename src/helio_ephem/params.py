"""Ephemeris table parameters and command-line value parsing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from helio_ephem.angle_utils import parse_angle
from helio_ephem.orbit.elements import Elements

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 1.0
DEFAULT_TIME_UNIT = 'day'
MAX_STEPS = 100000

# Table column IDs.
COL_JDE = 1
COL_UTC = 2
COL_XYZ = 3
COL_RANGE = 4
COL_RADEC = 5
COL_RADEG = 6

DEFAULT_COLUMNS = [COL_JDE, COL_XYZ, COL_RANGE]

COL_NAME_TO_ID: dict[str, int] = {
    'jde': COL_JDE,
    'utc': COL_UTC,
    'xyz': COL_XYZ,
    'range': COL_RANGE,
    'radec': COL_RADEC,
    'radeg': COL_RADEG,
}


@dataclass
class EphemerisParams:
    """Time grid and column selection for an ephemeris table."""

    start_time: str
    stop_time: str
    interval: float = DEFAULT_INTERVAL
    time_unit: str = DEFAULT_TIME_UNIT
    columns: list[int] = field(default_factory=lambda: list(DEFAULT_COLUMNS))
    title: str = ''


def parse_column_spec(tokens: list[str]) -> list[int]:
    """Convert column tokens to column IDs.

    Parameters:
        tokens: Decimal IDs or case-insensitive names (e.g. jde, xyz, radec).

    Returns:
        List of column IDs; invalid tokens are skipped (logged).
    """
    out: list[int] = []
    for s in tokens:
        s = s.strip()
        if not s:
            continue
        try:
            col = int(s)
        except ValueError:
            col = COL_NAME_TO_ID.get(s.lower(), 0)
        if col in COL_NAME_TO_ID.values():
            out.append(col)
        else:
            logger.warning('Unknown column %r; use an ID (1-6) or a name: %s', s, ', '.join(COL_NAME_TO_ID))
    return out


def parse_degrees(value: str) -> float:
    """Parse an angle in degrees ("11.94524" or "11 56 42.9") for argparse.

    Raises:
        ValueError: If the string is not an angle.
    """
    angle = parse_angle(value)
    if angle is None:
        raise ValueError(f'Invalid angle {value!r}')
    return angle


def elements_from_args(
    axis: float,
    ecc: float,
    inc_deg: float,
    arg_peri_deg: float,
    node_deg: float,
    time_peri: float,
) -> Elements:
    """Build Elements from command-line values (angles in degrees).

    Raises:
        ValueError: If axis is not positive or ecc is outside [0, 1).
    """
    if axis <= 0.0:
        raise ValueError(f'semimajor axis must be positive, got {axis}')
    if not 0.0 <= ecc < 1.0:
        raise ValueError(f'eccentricity must be in [0, 1), got {ecc}')
    return Elements.from_degrees(axis, ecc, inc_deg, arg_peri_deg, node_deg, time_peri)
