"""Tests for low-precision sidereal time and solar coordinates."""

from __future__ import annotations

import math

import pytest

from helio_ephem.approx import lst, se2000


def _hours(radians: float) -> float:
    return radians * 12.0 / math.pi


def test_lst_greenwich() -> None:
    """MJD 46895.0 (1987 April 10, 0h UT): 13h10m46s."""
    assert _hours(lst(46895.0, 0.0)) == pytest.approx(13 + 10 / 60 + 46 / 3600, abs=1 / 3600)


def test_lst_east_longitude() -> None:
    assert _hours(lst(46895.0, 0.01)) == pytest.approx(13 + 25 / 60 + 10 / 3600, abs=1 / 3600)


def test_lst_range() -> None:
    for mjd in (-100.25, 0.0, 51544.5, 60000.999):
        s = lst(mjd, -0.3)
        assert 0.0 <= s < 2 * math.pi


def test_se2000() -> None:
    sun_earth, soe, coe = se2000(56891.9)

    assert sun_earth.shape == (3,)
    assert tuple(sun_earth) == pytest.approx((-0.873, 0.468, 0.203), abs=5e-4)
    assert math.degrees(math.atan2(soe, coe)) == pytest.approx(23.4, abs=0.05)
    assert soe * soe + coe * coe == pytest.approx(1.0)
