"""Numeric helpers: polynomial evaluation, positive modulo, fixed-precision iteration."""

from __future__ import annotations

import math
from typing import Callable

from helio_ephem.errors import ConvergenceFailure


def horner(x: float, *c: float) -> float:
    """Evaluate a polynomial with coefficients c at x by Horner's method.

    Parameters:
        x: Argument.
        c: Coefficients, constant term first.

    Returns:
        c[0] + c[1]*x + c[2]*x**2 + ...

    Raises:
        ValueError: If no coefficients are given.
    """
    if not c:
        raise ValueError('horner() requires at least one coefficient')
    i = len(c) - 1
    y = c[i]
    while i > 0:
        i -= 1
        y = y * x + c[i]
    return y


def pmod(x: float, y: float) -> float:
    """Return x mod y in [0, y) for positive y.

    Not useful for negative y.
    """
    r = math.fmod(x, y)
    if r < 0:
        r += y
    # A tiny negative r can round up to y itself.
    if r >= y:
        r = 0.0
    return r


def iterate_decimal_places(
    better: Callable[[float], float],
    start: float,
    places: int,
    max_iterations: int,
) -> float:
    """Iterate an improvement function until successive values agree to `places` decimals.

    Parameters:
        better: Improvement function returning a new estimate from the previous one.
        start: Starting estimate.
        places: Number of decimal places desired in the result.
        max_iterations: Iteration limit.

    Returns:
        The first estimate that differs from its predecessor by less than 10**-places.

    Raises:
        ConvergenceFailure: If max_iterations improvements do not reach the tolerance.
    """
    d = 10.0 ** (-places)
    for _ in range(max_iterations):
        n = better(start)
        if abs(n - start) < d:
            return n
        start = n
    raise ConvergenceFailure(max_iterations, start)
