"""
Distances Between Geographic Coordinates on a Sphere.

The globe is a sphere, so the shortest surface path between two points is
a great-circle arc. The central angle is computed with the haversine form,
which stays accurate for nearby points where the spherical law of cosines
loses precision.

Altitude is ignored by the surface distances; `chord_distance` measures
the straight line between the two full 3-D positions.
"""

import numpy as np

from common.constants import DEFAULT_LENGTH_UNIT
from common.types import GeographicCoordinate
from common.units import LengthLike, resolve_radius
from geospatial.coordinate_models import to_cartesian


def central_angle(a: GeographicCoordinate, b: GeographicCoordinate) -> float:
    """Angle subtended at the globe centre by two surface points.

    Parameters
    ----------
    a, b : GeographicCoordinate
        The two positions.

    Returns
    -------
    float
        Central angle in RADIANS, within [0, π].
    """
    lat1 = a.latitude_rad
    lat2 = b.latitude_rad
    dlat = lat2 - lat1
    dlon = np.radians(b.longitude - a.longitude)

    s = (
        np.sin(dlat / 2.0) ** 2
        + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2.0) ** 2
    )
    return float(2.0 * np.arcsin(np.sqrt(np.clip(s, 0.0, 1.0))))


def great_circle_distance(
    a: GeographicCoordinate,
    b: GeographicCoordinate,
    reference_radius: LengthLike,
    unit: str = DEFAULT_LENGTH_UNIT
) -> float:
    """Length of the great-circle arc between two points on the reference sphere.

    Examples
    --------
    >>> from common.types import geographic
    >>> round(great_circle_distance(geographic(0, 0), geographic(0, 90), 1.0), 6)
    1.570796
    """
    return resolve_radius(reference_radius, unit) * central_angle(a, b)


def chord_distance(
    a: GeographicCoordinate,
    b: GeographicCoordinate,
    reference_radius: LengthLike,
    unit: str = DEFAULT_LENGTH_UNIT
) -> float:
    """Straight-line distance between two positions, altitudes included."""
    return to_cartesian(a, reference_radius, unit).distance(to_cartesian(b, reference_radius, unit))
