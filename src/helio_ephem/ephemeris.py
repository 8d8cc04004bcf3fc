"""Ephemeris table generator: positions from a VSOP87 model or an orbit over a time grid."""

from __future__ import annotations

import logging
import math
from typing import Callable, TextIO

import numpy as np

from helio_ephem.angle_utils import dms_string, hms_string, ra_dec
from helio_ephem.params import (
    COL_JDE,
    COL_RADEC,
    COL_RADEG,
    COL_RANGE,
    COL_UTC,
    COL_XYZ,
    MAX_STEPS,
    EphemerisParams,
)
from helio_ephem.time_utils import format_jde, interval_days, jde_from_string

logger = logging.getLogger(__name__)

# jde -> (x, y, z, r); solar_position_j2000 bound to a model, or Orbit.position.
PositionSource = Callable[[float], tuple[float, float, float, float]]


def time_grid(start: float, stop: float, step: float) -> np.ndarray:
    """Return JDEs start, start + step, ... up to and including stop.

    Raises:
        ValueError: If stop precedes start or the grid exceeds MAX_STEPS.
    """
    if stop < start:
        raise ValueError('Stop time precedes start time')
    # Allow stop to be reached despite rounding in the division.
    ntimes = int(math.floor((stop - start) / step + 1e-9)) + 1
    if ntimes > MAX_STEPS:
        raise ValueError(f'Number of time steps exceeds limit of {MAX_STEPS}')
    return start + step * np.arange(ntimes, dtype=np.float64)


def _header_fields(columns: list[int]) -> list[str]:
    fields: list[str] = []
    for col in columns:
        if col == COL_JDE:
            fields.append(f'{"jde":>14s}')
        elif col == COL_UTC:
            fields.append(f'{"utc":<19s}')
        elif col == COL_XYZ:
            fields.append(f'{"x":>13s} {"y":>13s} {"z":>13s}')
        elif col == COL_RANGE:
            fields.append(f'{"r":>12s}')
        elif col == COL_RADEC:
            fields.append(f'{"ra (hms)":>14s} {"dec (dms)":>14s}')
        elif col == COL_RADEG:
            fields.append(f'{"ra (deg)":>10s} {"dec (deg)":>10s}')
    return fields


def _row_fields(columns: list[int], jde: float, pos: tuple[float, float, float, float]) -> list[str]:
    x, y, z, r = pos
    fields: list[str] = []
    for col in columns:
        if col == COL_JDE:
            fields.append(f'{jde:14.5f}')
        elif col == COL_UTC:
            fields.append(format_jde(jde))
        elif col == COL_XYZ:
            fields.append(f'{x:13.9f} {y:13.9f} {z:13.9f}')
        elif col == COL_RANGE:
            fields.append(f'{r:12.9f}')
        elif col == COL_RADEC:
            ra, dec = ra_dec(x, y, z)
            fields.append(f'{hms_string(ra, 2)} {dms_string(math.degrees(dec), "dms", 1)}')
        elif col == COL_RADEG:
            ra, dec = ra_dec(x, y, z)
            fields.append(f'{math.degrees(ra):10.5f} {math.degrees(dec):10.5f}')
    return fields


def write_table(
    source: PositionSource,
    jdes: np.ndarray,
    columns: list[int],
    stream: TextIO,
) -> int:
    """Write one header line and one row per date; returns the number of rows."""
    stream.write(' '.join(_header_fields(columns)).rstrip() + '\n')
    for jde in jdes:
        jde_f = float(jde)
        stream.write(' '.join(_row_fields(columns, jde_f, source(jde_f))).rstrip() + '\n')
    return len(jdes)


def generate_ephemeris(params: EphemerisParams, source: PositionSource, stream: TextIO) -> None:
    """Generate an ephemeris table and write it to stream.

    Parameters:
        params: Start/stop times (JD numbers or UTC strings), interval, columns.
        source: Position function of JDE returning (x, y, z, r) in AU.
        stream: Output text stream.

    Raises:
        ValueError: On invalid times, interval, or an empty column list.
    """
    if not params.columns:
        raise ValueError('No columns selected')
    start = jde_from_string(params.start_time)
    stop = jde_from_string(params.stop_time)
    step = interval_days(params.interval, params.time_unit)
    jdes = time_grid(start, stop, step)
    logger.info('Ephemeris: %d steps from JDE %.5f to %.5f', len(jdes), start, stop)
    if params.title:
        stream.write(params.title.rstrip() + '\n')
    write_table(source, jdes, params.columns, stream)
