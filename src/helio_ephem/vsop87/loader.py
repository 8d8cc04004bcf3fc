"""VSOP87B data file parsing (fixed-column text, one record per line).

Header lines open a block of terms for one (quantity, power of time) pair;
the data lines that follow hold one periodic term each. Column offsets are
0-based:

    17        file version ('2' for VSOP87B)
    22-28     body name, space padded to 7 characters
    41        series index: '1' longitude, '2' latitude, '3' radius
    59        power of time (0-5)
    60-66     number of terms N in the block
    79-96     amplitude A  (data lines)
    98-110    phase B      (data lines)
    111-130   frequency C  (data lines)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from pathlib import Path

from helio_ephem.constants import (
    N_PLANETS,
    PLANET_NAMES,
    VSOP87_BODY_NAMES,
    VSOP87_EXTENSIONS,
    VSOP87_FILE_VERSION,
)
from helio_ephem.errors import FormatError
from helio_ephem.vsop87.model import CoefficientTable, PlanetaryModel, PowerSeries, Term

logger = logging.getLogger(__name__)

MIN_HEADER_LENGTH = 132
MAX_POWER = 5
POWER_DIGITS = '012345'

COL_VERSION = 17
COL_BODY = slice(22, 29)
COL_SERIES = 41
COL_POWER = 59
COL_COUNT = slice(60, 67)
COL_AMPLITUDE = slice(79, 97)
COL_PHASE = slice(98, 111)
COL_FREQUENCY = slice(111, 131)
MIN_DATA_LENGTH = COL_FREQUENCY.stop

SERIES_LONGITUDE = '1'
SERIES_LATITUDE = '2'
SERIES_RADIUS = '3'
SERIES_NAMES = {
    SERIES_LONGITUDE: 'longitude',
    SERIES_LATITUDE: 'latitude',
    SERIES_RADIUS: 'radius',
}


def vsop87_file_name(body: int) -> str:
    """Return the VSOP87B file name for a planet number (e.g. ``VSOP87B.ear``)."""
    _check_body(body)
    return f'VSOP87B.{VSOP87_EXTENSIONS[body]}'


def _check_body(body: int) -> None:
    if not 0 <= body < N_PLANETS:
        raise ValueError(f'Invalid planet number {body!r}; expected 0-{N_PLANETS - 1}')


def _parse_float(field: str, line_no: int, what: str) -> float:
    """Parse one numeric data field; raise FormatError (1-based line_no) on failure."""
    try:
        value = float(field.strip())
    except ValueError:
        raise FormatError(line_no, f'invalid {what} {field.strip()!r}') from None
    if not math.isfinite(value):
        raise FormatError(line_no, f'non-finite {what} {field.strip()!r}')
    return value


def _parse_block_header(line: str, line_no: int, body: int) -> tuple[int, int]:
    """Validate a header line and return (power, term count)."""
    version = line[COL_VERSION]
    if version != VSOP87_FILE_VERSION:
        raise FormatError(
            line_no, f'expected version {VSOP87_FILE_VERSION}, found {version}'
        )
    name = line[COL_BODY]
    if name != VSOP87_BODY_NAMES[body]:
        raise FormatError(
            line_no, f'expected body {VSOP87_BODY_NAMES[body]!r}, found {name!r}'
        )
    power_char = line[COL_POWER]
    if power_char not in POWER_DIGITS:
        raise FormatError(line_no, f'invalid power of time {power_char!r}')
    count_field = line[COL_COUNT].strip()
    try:
        count = int(count_field)
    except ValueError:
        raise FormatError(line_no, f'invalid term count {count_field!r}') from None
    if count < 0:
        raise FormatError(line_no, f'invalid term count {count_field!r}')
    return int(power_char), count


def _parse_term(line: str, line_no: int) -> Term:
    if len(line) < MIN_DATA_LENGTH:
        raise FormatError(
            line_no, f'data line has {len(line)} columns, expected at least {MIN_DATA_LENGTH}'
        )
    return Term(
        amplitude=_parse_float(line[COL_AMPLITUDE], line_no, 'amplitude'),
        phase=_parse_float(line[COL_PHASE], line_no, 'phase'),
        frequency=_parse_float(line[COL_FREQUENCY], line_no, 'frequency'),
    )


def _parse_series(
    series: str,
    body: int,
    lines: Sequence[str],
    n: int,
) -> tuple[CoefficientTable, int]:
    """Parse every block of one quantity starting at line index n.

    Parameters:
        series: Series index character ('1', '2' or '3').
        body: Planet number the file must describe.
        lines: All lines of the file, newline characters removed.
        n: 0-based index of the first line to examine.

    Returns:
        (table, n) where n is the index of the first line after the section.

    Raises:
        FormatError: On the first structural or numeric violation.
    """
    slots: list[PowerSeries | None] = [None] * (MAX_POWER + 1)
    while n < len(lines):
        line = lines[n]
        if len(line) < MIN_HEADER_LENGTH or line[COL_SERIES] != series:
            break
        power, count = _parse_block_header(line, n + 1, body)
        if count > len(lines) - (n + 1):
            raise FormatError(
                n + 1,
                f'unexpected end of input: {count} terms declared, '
                f'{len(lines) - (n + 1)} lines remain',
            )
        n += 1
        terms: list[Term] = []
        for line_no, data_line in enumerate(lines[n : n + count], start=n + 1):
            terms.append(_parse_term(data_line, line_no))
        slots[power] = tuple(terms)
        logger.debug(
            '%s %s T**%d: %d terms',
            PLANET_NAMES[body],
            SERIES_NAMES[series],
            power,
            count,
        )
        n += count
    populated = [i for i, s in enumerate(slots) if s is not None]
    if not populated:
        return (), n
    return tuple(s if s is not None else () for s in slots[: populated[-1] + 1]), n


def load_planet(body: int, lines: Iterable[str]) -> PlanetaryModel:
    """Construct a PlanetaryModel from the lines of a VSOP87B file.

    Parameters:
        body: Planet number (constants.MERCURY .. constants.NEPTUNE).
        lines: Lines of the file; trailing newline characters are ignored.

    Returns:
        Immutable model holding the longitude, latitude and radius tables.

    Raises:
        ValueError: If body is not a valid planet number.
        FormatError: If the data do not follow the VSOP87B layout.
    """
    _check_body(body)
    text = [line.rstrip('\r\n') for line in lines]
    n = 0
    tables: list[CoefficientTable] = []
    for series in (SERIES_LONGITUDE, SERIES_LATITUDE, SERIES_RADIUS):
        table, n = _parse_series(series, body, text, n)
        if not table:
            logger.warning(
                'No %s series found for %s at line %d',
                SERIES_NAMES[series],
                PLANET_NAMES[body],
                n + 1,
            )
        tables.append(table)
    model = PlanetaryModel(
        body=body,
        longitude=tables[0],
        latitude=tables[1],
        radius=tables[2],
    )
    logger.info(
        'Loaded VSOP87B %s: %d terms in %d lines',
        PLANET_NAMES[body],
        model.term_count(),
        n,
    )
    return model


def load_planet_file(body: int, path: str | Path) -> PlanetaryModel:
    """Construct a PlanetaryModel from a VSOP87B file path.

    Raises:
        OSError: If the file cannot be read.
        FormatError: If the file holds a non-ASCII byte or does not follow
            the VSOP87B layout.
    """
    p = Path(path)
    logger.debug('Reading %s', p)
    data = p.read_bytes()
    try:
        text = data.decode('ascii')
    except UnicodeDecodeError as e:
        raise FormatError(
            data.count(b'\n', 0, e.start) + 1, f'non-ASCII byte 0x{data[e.start]:02x}'
        ) from None
    return load_planet(body, text.split('\n'))


def load_planet_path(body: int, directory: str | Path) -> PlanetaryModel:
    """Construct a PlanetaryModel from the VSOP87B file for body in directory.

    Parameters:
        body: Planet number.
        directory: Directory containing the VSOP87B.* files.
    """
    return load_planet_file(body, Path(directory) / vsop87_file_name(body))
