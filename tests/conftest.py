"""Shared fixtures: synthetic VSOP87B files in the published fixed-column layout."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

LINE_WIDTH = 132

# (amplitude, phase, frequency) per (series index, power); a small Earth-like model.
EARTH_BLOCKS: dict[int, dict[int, list[tuple[float, float, float]]]] = {
    1: {
        0: [
            (1.75347045673, 0.0, 0.0),
            (0.03341656456, 4.66925680417, 6283.07584999140),
            (0.00034894275, 4.62610241759, 12566.15169998280),
        ],
        1: [
            (6283.31966747491, 0.0, 0.0),
            (0.00206058863, 2.67823455584, 6283.07584999140),
        ],
        2: [(0.00052918870, 0.0, 0.0)],
    },
    2: {
        0: [(0.00000279620, 3.19870156017, 84334.66158130829)],
        1: [(0.00000009030, 3.89729061890, 5507.55323866740)],
    },
    3: {
        0: [
            (1.00013988784, 0.0, 0.0),
            (0.01670699632, 3.09846350258, 6283.07584999140),
            (0.00013956024, 3.05524609456, 12566.15169998280),
        ],
        1: [(0.00103018607, 1.10748968172, 6283.07584999140)],
        2: [(0.00004359385, 5.78455133808, 6283.07584999140)],
    },
}


def _place(fields: dict[int, str], width: int = LINE_WIDTH) -> str:
    buf = [' '] * width
    for start, text in fields.items():
        buf[start : start + len(text)] = list(text)
    return ''.join(buf)


def header_line(
    series: int,
    power: int,
    count: int,
    body: str = 'EARTH  ',
    version: str = '2',
) -> str:
    """Return a VSOP87B block header line."""
    return _place(
        {
            1: 'VSOP87 VERSION B',
            17: version,
            22: body,
            32: 'VARIABLE',
            41: str(series),
            43: '(LBR)',
            55: '*T**',
            59: str(power),
            60: f'{count:7d}',
            68: 'TERMS',
        }
    )


def term_line(amplitude: float, phase: float, frequency: float) -> str:
    """Return a VSOP87B data line holding one term."""
    return _place(
        {
            1: '1311',
            79: f'{amplitude:18.11f}',
            98: f'{phase:13.11f}',
            111: f'{frequency:20.11f}',
        }
    )


def vsop_lines(
    blocks: dict[int, dict[int, list[tuple[float, float, float]]]] = EARTH_BLOCKS,
    body: str = 'EARTH  ',
) -> list[str]:
    """Return the lines of a VSOP87B file for blocks, in series then power order."""
    lines: list[str] = []
    for series in sorted(blocks):
        for power in sorted(blocks[series]):
            terms = blocks[series][power]
            lines.append(header_line(series, power, len(terms), body=body))
            lines.extend(term_line(*t) for t in terms)
    return lines


@pytest.fixture
def earth_lines() -> list[str]:
    """Lines of a small synthetic VSOP87B.ear file."""
    return vsop_lines()


@pytest.fixture
def make_header() -> Callable[..., str]:
    return header_line


@pytest.fixture
def make_term() -> Callable[[float, float, float], str]:
    return term_line


@pytest.fixture
def make_vsop_lines() -> Callable[..., list[str]]:
    return vsop_lines


@pytest.fixture
def vsop_dir(tmp_path: Path, earth_lines: list[str]) -> Path:
    """Directory holding a synthetic VSOP87B.ear."""
    d = tmp_path / 'vsop87'
    d.mkdir()
    (d / 'VSOP87B.ear').write_text('\n'.join(earth_lines) + '\n', encoding='ascii')
    return d
