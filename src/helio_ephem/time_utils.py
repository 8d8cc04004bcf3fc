"""Julian dates: centuries since J2000, calendar conversion, rms-julian string parsing."""

from __future__ import annotations

import datetime as _dt
import logging
import re

import julian

from helio_ephem.config import get_leapsecs_path
from helio_ephem.constants import J2000, JMOD, JULIAN_CENTURY

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400.0
MINUTES_PER_DAY = 1440.0
HOURS_PER_DAY = 24.0

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def j2000_century(jde: float) -> float:
    """Return the number of Julian centuries since J2000 (the T of many time series)."""
    return (jde - J2000) / JULIAN_CENTURY


def jd_from_mjd(mjd: float) -> float:
    """Convert Modified Julian Date to Julian Date."""
    return mjd + JMOD


def mjd_from_jd(jd: float) -> float:
    """Convert Julian Date to Modified Julian Date."""
    return jd - JMOD


def calendar_gregorian_to_jd(year: int, month: int, day: float) -> float:
    """Convert a Gregorian calendar date to Julian Date (Meeus 7.1, p. 61).

    Negative years are valid, back to JD 0. The result is not valid for dates
    before JD 0.

    Parameters:
        year: Gregorian year (astronomical numbering).
        month: Month 1-12.
        day: Day of month, with fraction.

    Returns:
        Julian Date.
    """
    if month in (1, 2):
        year -= 1
        month += 12
    a = year // 100
    b = 2 - a + a // 4
    return float(36525 * (year + 4716) // 100) + float(306 * (month + 1) // 10 + b) + day - 1524.5


def datetime_to_jd(t: _dt.datetime) -> float:
    """Return the Julian Date of a datetime.

    Aware datetimes are converted to UTC; naive ones are taken as UTC.
    """
    if t.tzinfo is not None:
        t = t.astimezone(_dt.timezone.utc).replace(tzinfo=None)
    midnight = _dt.datetime(t.year, t.month, t.day)
    frac = (t - midnight).total_seconds() / SECONDS_PER_DAY
    return calendar_gregorian_to_jd(t.year, t.month, t.day + frac)


def _ensure_leapsecs() -> None:
    """Load leap seconds kernel if not already loaded.

    Uses the file named by JULIAN_LEAPSECS when set and readable, otherwise
    rms-julian's bundled LSK.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info(
                'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
                path,
                e,
            )
    julian.load_lsk()
    _leapsecs_loaded = True


def parse_datetime(string: str) -> tuple[int, float] | None:
    """Parse a UTC date/time string to (day, sec).

    Parameters:
        string: Date/time string (format accepted by rms-julian); a trailing
            ISO 'Z' is accepted.

    Returns:
        (day, sec) where day is days since J2000, sec is seconds within that
        day; None on parse failure.
    """
    _ensure_leapsecs()
    candidates = [string]
    stripped = string.strip()
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not parse the ISO UTC suffix.
        candidates.append(stripped[:-1])
    for candidate in candidates:
        try:
            result = julian.day_sec_from_string(candidate)
            return (int(result[0]), float(result[1]))
        except (ValueError, TypeError, LookupError, OSError):
            continue
    return None


def jde_from_day_sec(day: int, sec: float) -> float:
    """Convert UTC (day, sec) to Julian ephemeris date (TDB)."""
    _ensure_leapsecs()
    tai = julian.tai_from_day_sec(day, sec)
    tdb = float(julian.tdb_from_tai(tai))
    return J2000 + tdb / SECONDS_PER_DAY


_JD_NUMBER = re.compile(r'^\s*(JDE?|MJD)?\s*([-+]?\d+(\.\d*)?([eE][-+]?\d+)?)\s*$', re.IGNORECASE)


def jde_from_string(string: str) -> float:
    """Parse a time argument: a Julian date number or a UTC date/time string.

    Accepts ``2448908.5``, ``JD 2448908.5``, ``MJD 56891.9`` (taken as already
    on the ephemeris time scale) or any UTC string rms-julian parses, which is
    converted to TDB.

    Raises:
        ValueError: If the string cannot be parsed.
    """
    m = _JD_NUMBER.match(string)
    if m is not None:
        value = float(m.group(2))
        if (m.group(1) or '').upper() == 'MJD':
            return jd_from_mjd(value)
        return value
    parsed = parse_datetime(string)
    if parsed is None:
        raise ValueError(f'Invalid date/time {string!r}')
    return jde_from_day_sec(*parsed)


def format_jde(jde: float) -> str:
    """Format a Julian ephemeris date as a UTC string 'YYYY-MM-DD HH:MM:SS'."""
    _ensure_leapsecs()
    tdb = (jde - J2000) * SECONDS_PER_DAY
    tai = julian.tai_from_tdb(tdb)
    day, sec = julian.day_sec_from_tai(tai)
    y, mo, d = julian.ymd_from_day(int(day))
    h, mi, s = julian.hms_from_sec(float(sec))
    return f'{int(y):04d}-{int(mo):02d}-{int(d):02d} {int(h):02d}:{int(mi):02d}:{int(s):02d}'


def interval_days(interval: float, time_unit: str) -> float:
    """Convert interval and time_unit to days.

    Parameters:
        interval: Numeric interval value (sign ignored).
        time_unit: One of 'sec', 'min', 'hour', 'day' (case-insensitive, first 4 chars).

    Returns:
        Interval in days.

    Raises:
        ValueError: If time_unit is unknown or the interval is zero.
    """
    u = time_unit.strip().lower()[:4]
    if u in ('sec', 'seco'):
        days = abs(interval) / SECONDS_PER_DAY
    elif u in ('min', 'minu'):
        days = abs(interval) / MINUTES_PER_DAY
    elif u == 'hour':
        days = abs(interval) / HOURS_PER_DAY
    elif u == 'day':
        days = abs(interval)
    else:
        raise ValueError(f'Invalid time_unit {time_unit!r}; expected one of sec, min, hour, day')
    if days == 0.0:
        raise ValueError('interval must be non-zero')
    return days
