"""
hoover.errors

Errors raised when input data cannot be turned into a Hoover curve.
"""


class HooverError(Exception):
    pass


class InvalidInputError(HooverError, ValueError):
    """Insufficient or unusable data to draw a curve."""


class ShapeMismatchError(HooverError, ValueError):
    """Output and population vectors cannot be paired position by position."""


__all__ = ["HooverError", "InvalidInputError", "ShapeMismatchError"]
