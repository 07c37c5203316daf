"""Exceptions raised by the binary tower field engine."""


class TowerFieldError(Exception):
    """Base class for tower field errors."""


class NoInverseError(TowerFieldError, ZeroDivisionError):
    """Raised when inverting or dividing by the zero element of a field.

    Subclasses ZeroDivisionError so callers that already guard divisions keep
    working.
    """


class HeightError(TowerFieldError, ValueError):
    """Raised when an operation receives an element or height it cannot accept."""
