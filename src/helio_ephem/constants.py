"""Fixed constants: astronomical constants, J2000 obliquity, planet numbering."""

K = 0.01720209895  # Gaussian gravitational constant

# Sine and cosine of the obliquity of the ecliptic at J2000.
SOBL_J2000 = 0.397777156
COBL_J2000 = 0.917482062

J2000 = 2451545.0  # JD of 2000 January 1.5
JULIAN_CENTURY = 36525.0  # days
JMOD = 2400000.5  # JD - MJD

# Planet numbers (first argument of the VSOP87 loader).
MERCURY = 0
VENUS = 1
EARTH = 2
MARS = 3
JUPITER = 4
SATURN = 5
URANUS = 6
NEPTUNE = 7
N_PLANETS = 8

# Parallel tuples indexed by planet number.
PLANET_NAMES = (
    'Mercury',
    'Venus',
    'Earth',
    'Mars',
    'Jupiter',
    'Saturn',
    'Uranus',
    'Neptune',
)

# Body names as they appear in columns 22-28 of VSOP87B header lines.
VSOP87_BODY_NAMES = (
    'MERCURY',
    'VENUS  ',
    'EARTH  ',
    'MARS   ',
    'JUPITER',
    'SATURN ',
    'URANUS ',
    'NEPTUNE',
)

# VSOP87B file extensions.
VSOP87_EXTENSIONS = ('mer', 'ven', 'ear', 'mar', 'jup', 'sat', 'ura', 'nep')

# Only version 2 (VSOP87B) files have been validated.
VSOP87_FILE_VERSION = '2'

PLANET_NAME_TO_NUM: dict[str, int] = {name.lower(): i for i, name in enumerate(PLANET_NAMES)}


def parse_planet(value: str) -> int:
    """Parse planet specifier: integer 0-7 or name (mercury..neptune).

    Parameters:
        value: Planet number string, name, or three-letter file extension
            (case-insensitive).

    Returns:
        Planet number (0-7).

    Raises:
        ValueError: If value is not a valid planet.
    """
    v = value.strip()
    try:
        num = int(v)
    except ValueError:
        pass
    else:
        if 0 <= num < N_PLANETS:
            return num
        raise ValueError(f'planet number must be 0-{N_PLANETS - 1}, got {num}')
    key = v.lower()
    if key in PLANET_NAME_TO_NUM:
        return PLANET_NAME_TO_NUM[key]
    if key in VSOP87_EXTENSIONS:
        return VSOP87_EXTENSIONS.index(key)
    raise ValueError(
        f'Unknown planet {value!r}; use 0-{N_PLANETS - 1} or a name: '
        + ', '.join(PLANET_NAME_TO_NUM)
    )
