"""Orbit quantities from heliocentric state vectors, and absolute magnitude."""

from __future__ import annotations

import math

import numpy as np

MAX_AXIS = 100.0  # AU
MAX_ECC = 0.99


def aei_hv(
    p: np.ndarray | list[float],
    v: np.ndarray | list[float],
    d: float | None = None,
) -> tuple[float, float, float, np.ndarray] | None:
    """Solve semimajor axis, eccentricity and inclination from state vectors.

    The solution becomes unstable for near-parabolic orbits and orbits with
    large semimajor axes, so None is returned when a would exceed 100 AU or
    e would exceed 0.99.

    Parameters:
        p: Sun-object position vector, AU.
        v: Object velocity vector, scaled by the gravitational constant.
        d: Sun-object distance; computed from p when omitted.

    Returns:
        (a, e, i, hv): a in AU, e, i in degrees, and the angular momentum
        vector; None when the elements are outside the stable range.
    """
    pv = np.asarray(p, dtype=np.float64)
    vv = np.asarray(v, dtype=np.float64)
    if d is None:
        d = float(np.linalg.norm(pv))
    hv = np.cross(pv, vv)
    hsq = float(np.dot(hv, hv))
    hm = math.sqrt(hsq)

    vsq = float(np.dot(vv, vv))
    temp = 2.0 - d * vsq
    # a < 100 AU; also rejects unbound orbits (temp <= 0).
    if d > temp * MAX_AXIS:
        return None
    a = d / temp
    inva = temp / d

    # Rounding can leave 1 - h^2/a slightly negative for circular orbits.
    e = math.sqrt(max(0.0, 1.0 - hsq * inva))
    if e > MAX_ECC:
        return None

    # hv.z >= |hv| catches i = 0 despite rounding in hm.
    i = 0.0
    if hv[2] < hm:
        i = math.degrees(math.acos(hv[2] / hm))
    return (a, e, i, hv)


def h_mag(
    oov: np.ndarray | list[float],
    sov: np.ndarray | list[float],
    vmag: float,
    ood: float,
    sod: float,
) -> float:
    """Compute absolute magnitude H from visual magnitude V.

    Parameters:
        oov: Observer-object vector, AU.
        sov: Sun-object vector, AU.
        vmag: Observed V magnitude.
        ood: Observer-object distance, AU.
        sod: Sun-object distance, AU.

    Returns:
        H magnitude (HG system with G = 0.15).
    """
    rdelta = ood * sod
    cospsi = float(np.dot(np.asarray(oov, dtype=np.float64), np.asarray(sov, dtype=np.float64)))
    cospsi /= rdelta
    if cospsi < -0.9999:
        # Object straight into the sun.
        return 30.0
    tanhalf = math.sqrt(1.0 - cospsi * cospsi) / (1.0 + cospsi)
    phi1 = math.exp(-3.33 * tanhalf**0.63)
    phi2 = math.exp(-1.87 * tanhalf**1.22)
    return vmag - 5.0 * math.log10(rdelta) + 2.5 * math.log10(0.85 * phi1 + 0.15 * phi2)
