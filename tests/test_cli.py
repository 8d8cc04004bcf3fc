"""Tests for the helio-ephem command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from helio_ephem.cli.main import main
from helio_ephem.constants import EARTH
from helio_ephem.vsop87.loader import load_planet_path
from helio_ephem.vsop87.solarpos import solar_position_j2000


def test_kepler_circular(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(['kepler', '--ecc', '0', '--mean-anomaly', '30', '--places', '6']) == 0
    assert capsys.readouterr().out == 'E: 30.000000 deg (iteration)\n'


def test_kepler_meeus_example(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(['kepler', '--ecc', '0.1', '--mean-anomaly', '5']) == 0
    fields = capsys.readouterr().out.split()
    assert fields[0] == 'E:'
    assert float(fields[1]) == pytest.approx(5.554589, abs=1e-6)
    assert fields[2:] == ['deg', '(iteration)']


def test_kepler_reports_bisection(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(['kepler', '--ecc', '0.9', '--mean-anomaly', '57.29578', '--places', '1']) == 0
    assert capsys.readouterr().out.rstrip().endswith('(bisection)')


def test_orbit_single_date(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ['orbit', '--axis', '1', '--ecc', '0', '--time-peri', '0', '--date', '0']
    assert main(argv) == 0
    assert capsys.readouterr().out == (
        'jde: 0.00000\n'
        'x, y, z, r: 1.000000 0.000000 0.000000 1.000000\n'
    )


def test_orbit_rejects_hyperbolic(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ['orbit', '--axis', '1', '--ecc', '1.2', '--time-peri', '0', '--date', '0']
    assert main(argv) == 1
    assert 'eccentricity' in capsys.readouterr().err


def test_orbit_table_to_file(tmp_path: Path) -> None:
    out = tmp_path / 'table.txt'
    argv = [
        'orbit', '--axis', '1', '--ecc', '0', '--time-peri', '0',
        '--start', '0', '--stop', '3', '--columns', 'jde', 'range',
        '-o', str(out),
    ]  # fmt: skip

    assert main(argv) == 0

    lines = out.read_text().splitlines()
    assert lines[0].startswith('Orbit a=1.0 e=0.0')
    assert lines[1].split() == ['jde', 'r']
    assert [line.split() for line in lines[2:]] == [
        ['0.00000', '1.000000000'],
        ['1.00000', '1.000000000'],
        ['2.00000', '1.000000000'],
        ['3.00000', '1.000000000'],
    ]


def test_table_needs_both_ends(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ['orbit', '--axis', '1', '--ecc', '0', '--time-peri', '0', '--start', '0']
    assert main(argv) == 1
    assert 'together' in capsys.readouterr().err


def test_position_needs_a_date(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(['orbit', '--axis', '1', '--ecc', '0', '--time-peri', '0']) == 1
    assert '--date' in capsys.readouterr().err


def test_planet_from_data_dir(vsop_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    argv = ['planet', 'earth', '--data-dir', str(vsop_dir), '--date', '2448908.5', '--spherical']

    assert main(argv) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith('L, B, R: ')
    assert lines[1] == 'jde: 2448908.50000'
    x, y, z, r = solar_position_j2000(load_planet_path(EARTH, vsop_dir), 2448908.5)
    assert lines[2] == f'x, y, z, r: {x:.6f} {y:.6f} {z:.6f} {r:.6f}'


def test_planet_data_dir_from_env(
    vsop_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv('VSOP87', str(vsop_dir))
    assert main(['planet', '2', '--date', '2451545']) == 0
    assert capsys.readouterr().out.startswith('jde: 2451545.00000\n')


def test_planet_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(['planet', 'mars', '--data-dir', str(tmp_path), '--date', '0']) == 1
    assert 'VSOP87B.mar' in capsys.readouterr().err


def test_planet_bad_name() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(['planet', 'pluto', '--date', '0'])
    assert exc_info.value.code == 2
