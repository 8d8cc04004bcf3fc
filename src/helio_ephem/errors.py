"""Exception types raised by helio_ephem."""

from __future__ import annotations


class HelioEphemError(Exception):
    """Base error."""


class FormatError(HelioEphemError):
    """VSOP87 data file violates the fixed-column layout or its contents.

    Attributes:
        line: 1-based line number of the offending line.
        cause: Description of the violation.
    """

    def __init__(self, line: int, cause: str) -> None:
        super().__init__(f'Line {line}: {cause}')
        self.line = line
        self.cause = cause


class ConvergenceFailure(HelioEphemError):
    """An iteration used its whole budget without reaching the requested precision.

    Internal to the Kepler solver, which answers it with the bisection method.
    """

    def __init__(self, iterations: int, last_value: float) -> None:
        super().__init__(f'Maximum iterations reached ({iterations})')
        self.iterations = iterations
        self.last_value = last_value
