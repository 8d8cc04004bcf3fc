"""Configuration: VSOP87 data directory and leap seconds kernel from environment.

Only the command-line layer reads these; library functions take explicit paths.
"""

import os

DEFAULT_VSOP87_PATH = '/usr/local/share/vsop87/'


def get_vsop87_path() -> str:
    """Return the directory holding the VSOP87B.* files (VSOP87 env var or default).

    Returns:
        Path string.
    """
    path = os.environ.get('VSOP87', '').strip()
    return path or DEFAULT_VSOP87_PATH


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian, if configured.

    Returns:
        JULIAN_LEAPSECS env var, or None to use the LSK bundled with rms-julian.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    return path or None
