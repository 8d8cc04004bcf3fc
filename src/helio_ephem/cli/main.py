"""CLI entry point: helio-ephem planet|orbit|kepler subcommands."""

from __future__ import annotations

import argparse
import logging
import math
import os
import sys
from typing import NoReturn, TextIO

from helio_ephem.config import get_vsop87_path
from helio_ephem.constants import PLANET_NAMES, parse_planet
from helio_ephem.ephemeris import PositionSource, generate_ephemeris
from helio_ephem.errors import FormatError
from helio_ephem.orbit.elements import Orbit
from helio_ephem.orbit.kepler import Converged, kepler_iterate, solve_kepler
from helio_ephem.params import (
    DEFAULT_INTERVAL,
    DEFAULT_TIME_UNIT,
    EphemerisParams,
    elements_from_args,
    parse_column_spec,
    parse_degrees,
)
from helio_ephem.time_utils import jde_from_string
from helio_ephem.vsop87.loader import load_planet_path
from helio_ephem.vsop87.model import PlanetaryModel
from helio_ephem.vsop87.solarpos import solar_position_j2000

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or HELIO_EPHEM_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('HELIO_EPHEM_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _time_arg(value: str) -> float:
    """argparse type: JD number or UTC date/time string -> JDE."""
    try:
        return jde_from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _degrees_arg(value: str) -> float:
    """argparse type: angle in degrees."""
    try:
        return parse_degrees(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _planet_arg(value: str) -> int:
    """argparse type: planet number or name."""
    try:
        return parse_planet(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _write_position(out: TextIO, jde: float, pos: tuple[float, float, float, float]) -> None:
    x, y, z, r = pos
    out.write(f'jde: {jde:.5f}\n')
    out.write(f'x, y, z, r: {x:.6f} {y:.6f} {z:.6f} {r:.6f}\n')


def _run_positions(args: argparse.Namespace, source: PositionSource, title: str) -> int:
    """Print one position (--date) or a table (--start/--stop)."""
    if args.start is not None or args.stop is not None:
        if args.start is None or args.stop is None:
            print('Error: --start and --stop must be given together', file=sys.stderr)
            return 1
        columns = parse_column_spec(args.columns) if args.columns else None
        params = EphemerisParams(
            start_time=args.start,
            stop_time=args.stop,
            interval=args.interval,
            time_unit=args.time_unit,
            title=title,
        )
        if columns:
            params.columns = columns
        if args.output is not None:
            with open(args.output, 'w') as f:
                generate_ephemeris(params, source, f)
        else:
            generate_ephemeris(params, source, sys.stdout)
        return 0
    if args.date is None:
        print('Error: give --date, or --start and --stop', file=sys.stderr)
        return 1
    _write_position(sys.stdout, args.date, source(args.date))
    return 0


def _planet_cmd(args: argparse.Namespace) -> int:
    """Run the planet subcommand (VSOP87B series)."""
    data_dir = args.data_dir or get_vsop87_path()
    try:
        model: PlanetaryModel = load_planet_path(args.body, data_dir)
    except (OSError, FormatError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    if args.spherical and args.date is not None:
        L, B, R = model.position_2000(args.date)
        print(f'L, B, R: {L:.9f} {B:.9f} {R:.9f}')

    def source(jde: float) -> tuple[float, float, float, float]:
        return solar_position_j2000(model, jde)

    title = f'VSOP87B {PLANET_NAMES[args.body]}: Sun from planet, equatorial J2000 (AU)'
    return _run_positions(args, source, title)


def _orbit_cmd(args: argparse.Namespace) -> int:
    """Run the orbit subcommand (Keplerian elements)."""
    try:
        elements = elements_from_args(
            args.axis, args.ecc, args.inc, args.arg_peri, args.node, args.time_peri
        )
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    orbit = Orbit(elements)
    title = f'Orbit a={elements.axis} e={elements.ecc}: heliocentric equatorial J2000 (AU)'
    return _run_positions(args, orbit.position, title)


def _kepler_cmd(args: argparse.Namespace) -> int:
    """Run the kepler subcommand."""
    m = math.radians(args.mean_anomaly)
    method = 'iteration' if isinstance(kepler_iterate(args.ecc, m, args.places), Converged) else 'bisection'
    ea = solve_kepler(args.ecc, m, args.places)
    print(f'E: {math.degrees(ea):.{args.places}f} deg ({method})')
    return 0


def _add_time_args(p: argparse.ArgumentParser) -> None:
    p.add_argument('--date', type=_time_arg, default=None, help='JD or UTC date/time of one position')
    p.add_argument('--start', type=str, default=None, help='Table start: JD or UTC date/time')
    p.add_argument('--stop', type=str, default=None, help='Table stop: JD or UTC date/time')
    p.add_argument('--interval', type=float, default=DEFAULT_INTERVAL, help='Table time step')
    p.add_argument(
        '--time-unit',
        type=str,
        default=DEFAULT_TIME_UNIT,
        choices=['sec', 'min', 'hour', 'day'],
    )
    p.add_argument(
        '--columns',
        type=str,
        nargs='*',
        default=None,
        help='Column IDs or names (jde utc xyz range radec radeg)',
    )
    p.add_argument('-o', '--output', type=str, default=None, help='Table output file')
    p.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')


def main(argv: list[str] | None = None) -> int:
    """Entry point for helio-ephem CLI (planet | orbit | kepler).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='helio-ephem',
        description='Heliocentric positions from VSOP87B series or Keplerian elements.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    planet_parser = subparsers.add_parser('planet', help='Position from VSOP87B series')
    planet_parser.add_argument('body', type=_planet_arg, help='Planet number (0-7) or name')
    planet_parser.add_argument(
        '--data-dir', type=str, default=None, help='Directory of VSOP87B.* files; env: VSOP87'
    )
    planet_parser.add_argument(
        '--spherical', action='store_true', help='Also print ecliptic L, B, R for --date'
    )
    _add_time_args(planet_parser)
    planet_parser.set_defaults(func=_planet_cmd)

    orbit_parser = subparsers.add_parser('orbit', help='Position from Keplerian elements')
    orbit_parser.add_argument('--axis', type=float, required=True, help='Semimajor axis (AU)')
    orbit_parser.add_argument('--ecc', type=float, required=True, help='Eccentricity')
    orbit_parser.add_argument('--inc', type=_degrees_arg, default=0.0, help='Inclination (deg)')
    orbit_parser.add_argument(
        '--arg-peri', type=_degrees_arg, default=0.0, help='Argument of perihelion (deg)'
    )
    orbit_parser.add_argument(
        '--node', type=_degrees_arg, default=0.0, help='Longitude of ascending node (deg)'
    )
    orbit_parser.add_argument(
        '--time-peri', type=_time_arg, required=True, help='Time of perihelion: JD or UTC'
    )
    _add_time_args(orbit_parser)
    orbit_parser.set_defaults(func=_orbit_cmd)

    kepler_parser = subparsers.add_parser('kepler', help="Solve Kepler's equation")
    kepler_parser.add_argument('--ecc', type=float, required=True, help='Eccentricity')
    kepler_parser.add_argument(
        '--mean-anomaly', type=_degrees_arg, required=True, help='Mean anomaly (deg)'
    )
    kepler_parser.add_argument('--places', type=int, default=15, help='Decimal places')
    kepler_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    kepler_parser.set_defaults(func=_kepler_cmd)

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return int(args.func(args))
    except (ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
