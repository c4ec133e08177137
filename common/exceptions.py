class CoordinateError(Exception):
    """Base exception for coordinate construction and conversion failures."""


class InvalidCoordinate(CoordinateError, ValueError):
    """Raised when a coordinate component is NaN, infinite, non-numeric or
    out of its normalized range at construction time."""


class InvalidReferenceRadius(CoordinateError, ValueError):
    """Raised when a reference radius is not a finite, non-negative length."""


class DegenerateConversion(UserWarning):
    """Emitted when a Cartesian point at the globe centre is converted.

    The origin has no latitude or longitude; the engine returns the
    conventional (0°, 0°, -R) instead of failing.
    """
