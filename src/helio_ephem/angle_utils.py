"""Angle parsing and sexagesimal formatting for command-line input and tables."""

from __future__ import annotations

import math
import re

from helio_ephem.numeric import pmod

TWOPI = 2.0 * math.pi


def parse_angle(string: str) -> float | None:
    """Parse degrees (or hours), optionally followed by minutes and seconds.

    "12.5", "12 30" and "-12 30 0" are all accepted; colons may separate the
    fields. Minutes and seconds must be non-negative; a leading minus applies
    to the whole angle.

    Returns:
        Angle in the unit of the first field, or None on parse failure.
    """
    s = string.strip()
    if not s:
        return None
    parts = [p for p in re.split(r'[\s:]+', s) if p]
    if not 1 <= len(parts) <= 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values[1:]):
        return None
    angle = 0.0
    for scale, v in zip((1.0, 60.0, 3600.0), values):
        angle += abs(v) / scale
    if s.startswith('-'):
        angle = -angle
    return angle


def dms_string(value: float, separator: str = 'dms', ndecimal: int = 3) -> str:
    """Format an angle in degrees (or hours) as sexagesimal fields.

    Parameters:
        value: Angle in degrees or hours.
        separator: 3-character string of field suffixes (e.g. 'hms' or 'dms').
        ndecimal: Decimal places of seconds.

    Returns:
        Formatted string, e.g. " 12d 30m 45.123s".
    """
    if len(separator) < 3:
        separator = '   '
    negative = value < 0
    ntens = 10**ndecimal
    units = round(abs(value) * 3600.0 * ntens)
    isec, frac = divmod(units, ntens)
    imin, isec = divmod(isec, 60)
    ideg, imin = divmod(imin, 60)
    sign = '-' if negative and units else ' '
    head = f'{sign}{ideg}'.rjust(3)
    tail = f'.{frac:0{ndecimal}d}' if ndecimal > 0 else ''
    return f'{head}{separator[0]} {imin:02d}{separator[1]} {isec:02d}{tail}{separator[2]}'


def hms_string(radians: float, ndecimal: int = 3) -> str:
    """Format an angle in radians as hours, minutes, seconds in [0h, 24h)."""
    hours = math.degrees(pmod(radians, TWOPI)) / 15.0
    ntens = 10**ndecimal
    # Values just below 24h would round up to 24h 00m 00s.
    if round(hours * 3600.0 * ntens) >= 24 * 3600 * ntens:
        hours = 0.0
    return dms_string(hours, 'hms', ndecimal)


def ra_dec(x: float, y: float, z: float) -> tuple[float, float]:
    """Right ascension in [0, 2pi) and declination of an equatorial rectangular vector (radians)."""
    ra = pmod(math.atan2(y, x), TWOPI)
    dec = math.atan2(z, math.hypot(x, y))
    return (ra, dec)
