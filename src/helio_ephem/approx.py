"""Low-precision approximations: local sidereal time and the USNO solar ephemeris."""

from __future__ import annotations

import math

import numpy as np


def lst(mjd: float, longitude: float) -> float:
    """Compute approximate local sidereal time.

    Parameters:
        mjd: Modified Julian Date (UT).
        longitude: East longitude in circles (1.0 = 360 degrees).

    Returns:
        Local sidereal time in radians, where one day is 2pi.
    """
    t = (mjd - 15019.5) / 36525.0
    th = (6.6460656 + (2400.051262 + 0.00002581 * t) * t) / 24.0
    ut = math.modf(mjd)[0]
    if ut < 0:
        ut += 1.0
    s = math.modf(th + ut + longitude)[0]
    if s < 0:
        s += 1.0
    return s * 2.0 * math.pi


def se2000(mjd: float) -> tuple[np.ndarray, float, float]:
    """Approximate solar coordinates, J2000 (USNO "Approximate Solar Coordinates").

    Good to about 0.01 degree within a couple of centuries of 2000.

    Parameters:
        mjd: Modified Julian Date.

    Returns:
        (sun_earth, soe, coe): the sun-earth vector in equatorial coordinates
        (AU), and the sine and cosine of the obliquity of the ecliptic.
    """
    # The USNO algorithm is in degrees; stay in degrees until the trig calls.
    d = mjd - 51544.5
    g = 357.529 + 0.98560028 * d  # mean anomaly of sun
    q = 280.459 + 0.98564736 * d  # mean longitude of sun
    g_rad = math.radians(g)
    sg, cg = math.sin(g_rad), math.cos(g_rad)
    sg2, cg2 = math.sin(2.0 * g_rad), math.cos(2.0 * g_rad)

    lon = q + 1.915 * sg + 0.020 * sg2  # ecliptic longitude
    r = 1.00014 - 0.01671 * cg - 0.00014 * cg2  # AU

    eps = math.radians(23.439 - 0.00000036 * d)
    soe, coe = math.sin(eps), math.cos(eps)

    lon_rad = math.radians(lon)
    sl, cl = math.sin(lon_rad), math.cos(lon_rad)
    rsl = r * sl
    sun_earth = np.array([r * cl, rsl * coe, rsl * soe], dtype=np.float64)
    return (sun_earth, soe, coe)
