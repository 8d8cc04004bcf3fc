"""Tests for angle parsing and sexagesimal formatting."""

from __future__ import annotations

import math

import pytest

from helio_ephem.angle_utils import dms_string, hms_string, parse_angle, ra_dec


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('12.5', 12.5),
        ('12 30', 12.5),
        ('12 30 36', 12.51),
        ('-12 30', -12.5),
        ('-0 30', -0.5),
        ('11:56:42.864', 11.94524),
    ],
)
def test_parse_angle(text: str, expected: float) -> None:
    assert parse_angle(text) == pytest.approx(expected)


@pytest.mark.parametrize('text', ['', '   ', 'abc', '1 2 3 4', '12 -30'])
def test_parse_angle_rejects(text: str) -> None:
    assert parse_angle(text) is None


def test_dms_string() -> None:
    assert dms_string(12.51, 'dms') == ' 12d 30m 36.000s'
    assert dms_string(-0.5, 'dms', 1) == ' -0d 30m 00.0s'
    assert dms_string(0.0, 'dms', 0) == '  0d 00m 00s'


def test_hms_string_wraps_to_one_day() -> None:
    assert hms_string(math.pi) == ' 12h 00m 00.000s'
    assert hms_string(-math.pi / 2, 1) == ' 18h 00m 00.0s'


def test_hms_string_just_below_24h_wraps_to_zero() -> None:
    assert hms_string(2 * math.pi - 1e-9, 2) == '  0h 00m 00.00s'
    assert hms_string(2 * math.pi - 1e-4, 2) == ' 23h 59m 58.62s'


def test_ra_dec() -> None:
    ra, dec = ra_dec(0.0, -1.0, 1.0)
    assert ra == pytest.approx(1.5 * math.pi)
    assert dec == pytest.approx(math.pi / 4)
