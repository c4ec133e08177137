"""
Unit Handling for Reference Radii and Lengths.

The engine computes on bare floats: altitude and Cartesian components
share whatever length unit the reference radius is given in. Callers that
carry physical units use `pint` quantities, which are resolved to a bare
magnitude in the package length unit (kilometres unless told otherwise)
at the boundary of every conversion call.

Example Usage
-------------
>>> from common.units import Q_, to_magnitude
>>> to_magnitude(Q_(6371000, 'm'), 'km')
6371.0
"""

from typing import Union

import numpy as np
import pint

from common.constants import DEFAULT_LENGTH_UNIT
from common.exceptions import InvalidReferenceRadius

# Create the global unit registry
ureg = pint.UnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

LengthLike = Union[float, int, pint.Quantity]


def to_magnitude(value: LengthLike, unit: str = DEFAULT_LENGTH_UNIT) -> float:
    """Resolve a length to a bare float in ``unit``.

    Bare numbers are taken to be in ``unit`` already and pass through
    untouched; quantities are converted.

    Raises
    ------
    InvalidReferenceRadius
        If a quantity does not have the dimensionality of a length.
    """
    if isinstance(value, pint.Quantity):
        try:
            return float(value.to(unit).magnitude)
        except pint.DimensionalityError as e:
            raise InvalidReferenceRadius(
                f"Expected a length compatible with '{unit}', got {value.units}"
            ) from e
    return float(value)


def resolve_radius(value: LengthLike, unit: str = DEFAULT_LENGTH_UNIT) -> float:
    """Resolve and validate a reference radius.

    Parameters
    ----------
    value : float or pint.Quantity
        Reference radius. A bare number is used as-is.
    unit : str
        Length unit the radius is expressed in when it is a quantity.

    Returns
    -------
    float
        The radius magnitude.

    Raises
    ------
    InvalidReferenceRadius
        If the radius is non-numeric, non-finite or negative.
    """
    try:
        radius = to_magnitude(value, unit)
    except InvalidReferenceRadius:
        raise
    except (TypeError, ValueError) as e:
        raise InvalidReferenceRadius(f"Reference radius {value!r} is not a number") from e

    if not np.isfinite(radius):
        raise InvalidReferenceRadius(f"Reference radius must be finite, got {radius}")
    if radius < 0:
        raise InvalidReferenceRadius(f"Reference radius must be non-negative, got {radius}")
    return radius
