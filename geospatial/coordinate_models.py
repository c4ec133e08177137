"""
Conversion Between Geographic and Cartesian Coordinates.

The globe is modeled as a sphere of a caller-supplied reference radius R.
A geographic coordinate (φ, λ, a) sits at distance r = R + a from the
centre of a right-handed frame whose

- x-axis points through latitude 0°, longitude 0°
- y-axis points through latitude 0°, longitude 90°
- z-axis points through the north pole

Forward:  x = r cosφ cosλ,  y = r cosφ sinλ,  z = r sinφ
Inverse:  r = |p|,  a = r - R,  φ = asin(z / r),  λ = atan2(y, x)

The inverse evaluates the latitude as atan2(z, sqrt(x² + y²)), which is
the same angle as asin(z / r) but keeps full precision next to the poles.
Its output goes back through the normalization pipeline so that floating
rounding can never leave a latitude or longitude outside its range.

Singular Points
---------------
- The origin (r = 0) has no direction. It converts to (0°, 0°, -R) and a
  `DegenerateConversion` warning is emitted.
- On the polar axis (x = y = 0) longitude is undefined and set to 0°.

Units
-----
Angles are in DEGREES. The reference radius, altitudes and Cartesian
components share one length unit. A pint quantity passed as the radius is
expressed in ``unit`` (kilometres by default) before use.

References
----------
- Hofmann-Wellenhof, B. et al. (2008). GNSS. Section 5.6 (spherical case).
"""

import warnings
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from common.angles import normalize_lat_lon
from common.constants import DEFAULT_LENGTH_UNIT
from common.exceptions import DegenerateConversion, InvalidCoordinate
from common.logging_config import get_logger
from common.types import CartesianCoordinate, GeographicCoordinate
from common.units import LengthLike, resolve_radius

logger = get_logger(__name__)

# sin and cos of 0°, 90°, 180° and 270°
_QUADRANT_SIN = np.array([0.0, 1.0, 0.0, -1.0])
_QUADRANT_COS = np.array([1.0, 0.0, -1.0, 0.0])


def _precise_sin_cos(angle_deg):
    """Sine and cosine of an angle in degrees, exact at multiples of 90°.

    np.cos(np.radians(90)) is 6.1e-17, not 0; the poles and the cardinal
    meridians would otherwise pick up spurious components.
    """
    angle = np.asarray(angle_deg, dtype=np.float64)
    rad = np.radians(angle)
    sin = np.sin(rad)
    cos = np.cos(rad)

    exact = np.mod(angle, 90.0) == 0
    quadrant = np.mod(np.floor_divide(angle, 90.0), 4).astype(np.int64)
    sin = np.where(exact, _QUADRANT_SIN[quadrant], sin)
    cos = np.where(exact, _QUADRANT_COS[quadrant], cos)
    return sin[()], cos[()]


def to_cartesian(
    coord: GeographicCoordinate,
    reference_radius: LengthLike,
    unit: str = DEFAULT_LENGTH_UNIT
) -> CartesianCoordinate:
    """Convert a geographic coordinate to the globe-centred Cartesian frame.

    Parameters
    ----------
    coord : GeographicCoordinate
        The position to convert.
    reference_radius : float or pint.Quantity
        Radius R of the reference sphere.
    unit : str
        Length unit a quantity radius is expressed in.

    Returns
    -------
    CartesianCoordinate
        Point at distance R + altitude from the centre.

    Raises
    ------
    InvalidReferenceRadius
        If the radius is not a finite, non-negative length.

    Examples
    --------
    >>> to_cartesian(GeographicCoordinate(0.0, 0.0, 0.0), 6371.0).to_tuple()
    (6371.0, 0.0, 0.0)
    """
    radius = resolve_radius(reference_radius, unit)
    r = radius + coord.altitude

    sin_lat, cos_lat = _precise_sin_cos(coord.latitude)
    sin_lon, cos_lon = _precise_sin_cos(coord.longitude)

    return CartesianCoordinate(
        x=float(r * cos_lat * cos_lon),
        y=float(r * cos_lat * sin_lon),
        z=float(r * sin_lat),
    )


def to_geographic(
    point: CartesianCoordinate,
    reference_radius: LengthLike,
    unit: str = DEFAULT_LENGTH_UNIT
) -> GeographicCoordinate:
    """Convert a Cartesian point to latitude, longitude and altitude.

    Parameters
    ----------
    point : CartesianCoordinate
        Point in the globe-centred frame.
    reference_radius : float or pint.Quantity
        Radius R of the reference sphere.
    unit : str
        Length unit a quantity radius is expressed in.

    Returns
    -------
    GeographicCoordinate
        Normalized coordinate with altitude |p| - R.

    Raises
    ------
    InvalidCoordinate
        If |p| itself is beyond the largest float (about 1.8e308), which
        only happens when the components are all close to that limit.

    Warns
    -----
    DegenerateConversion
        When ``point`` is the origin. The result is then (0°, 0°, -R).

    Examples
    --------
    >>> to_geographic(CartesianCoordinate(0.0, 0.0, 6371.0), 6371.0).to_tuple()
    (90.0, 0.0, 0.0)
    """
    radius = resolve_radius(reference_radius, unit)
    x, y, z = point.x, point.y, point.z

    # Dividing out the largest component keeps hypot clear of overflow
    scale = max(abs(x), abs(y), abs(z))

    if scale == 0:
        logger.debug(f"Origin converted with reference radius {radius}; using (0, 0, {-radius})")
        warnings.warn(
            "The origin has no latitude or longitude; returning (0°, 0°, -R)",
            DegenerateConversion,
            stacklevel=2
        )
        return GeographicCoordinate(latitude=0.0, longitude=0.0, altitude=-radius)

    horizontal = float(np.hypot(x / scale, y / scale))
    r = scale * float(np.hypot(horizontal, z / scale))
    if not np.isfinite(r):
        raise InvalidCoordinate(
            f"Magnitude of {point.to_tuple()} exceeds the float range"
        )

    latitude = np.degrees(np.arctan2(z / scale, horizontal))
    longitude = 0.0 if x == 0 and y == 0 else np.degrees(np.arctan2(y, x))

    return GeographicCoordinate.from_raw(latitude, longitude, r - radius)


def _check_finite(name: str, values: NDArray[np.float64]) -> None:
    if not np.all(np.isfinite(values)):
        raise InvalidCoordinate(f"{name} contains NaN or infinite values")


# Vectorized versions for batch processing
def to_cartesian_batch(
    latitudes: NDArray[np.float64],
    longitudes: NDArray[np.float64],
    altitudes: NDArray[np.float64],
    reference_radius: LengthLike,
    unit: str = DEFAULT_LENGTH_UNIT
) -> Tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Vectorized geographic to Cartesian conversion.

    Raw latitudes and longitudes are normalized (pole crossings included)
    before conversion, exactly as `geographic()` would.

    Parameters
    ----------
    latitudes : ndarray
        Array of latitudes in degrees.
    longitudes : ndarray
        Array of longitudes in degrees.
    altitudes : ndarray
        Array of altitudes.
    reference_radius : float or pint.Quantity
        Radius of the reference sphere.
    unit : str
        Length unit a quantity radius is expressed in.

    Returns
    -------
    Tuple[ndarray, ndarray, ndarray]
        (x, y, z) arrays.

    Raises
    ------
    InvalidCoordinate
        If any input contains NaN or infinite values.
    """
    latitudes, longitudes, altitudes = np.broadcast_arrays(
        np.asarray(latitudes, dtype=np.float64),
        np.asarray(longitudes, dtype=np.float64),
        np.asarray(altitudes, dtype=np.float64),
    )
    _check_finite("latitudes", latitudes)
    _check_finite("longitudes", longitudes)
    _check_finite("altitudes", altitudes)

    radius = resolve_radius(reference_radius, unit)
    latitudes, longitudes = normalize_lat_lon(latitudes, longitudes)

    sin_lat, cos_lat = _precise_sin_cos(latitudes)
    sin_lon, cos_lon = _precise_sin_cos(longitudes)
    r = radius + altitudes

    return r * cos_lat * cos_lon, r * cos_lat * sin_lon, r * sin_lat


def to_geographic_batch(
    x: NDArray[np.float64],
    y: NDArray[np.float64],
    z: NDArray[np.float64],
    reference_radius: LengthLike,
    unit: str = DEFAULT_LENGTH_UNIT
) -> Tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Vectorized Cartesian to geographic conversion.

    Points at the origin convert to (0°, 0°, -R); a single
    `DegenerateConversion` warning is emitted for the whole batch.

    Returns
    -------
    Tuple[ndarray, ndarray, ndarray]
        (latitudes, longitudes, altitudes); angles in degrees.
    """
    x, y, z = np.broadcast_arrays(
        np.asarray(x, dtype=np.float64),
        np.asarray(y, dtype=np.float64),
        np.asarray(z, dtype=np.float64),
    )
    _check_finite("x", x)
    _check_finite("y", y)
    _check_finite("z", z)

    radius = resolve_radius(reference_radius, unit)
    scale = np.maximum(np.maximum(np.abs(x), np.abs(y)), np.abs(z))
    degenerate = scale == 0
    safe_scale = np.where(degenerate, 1.0, scale)

    horizontal = np.hypot(x / safe_scale, y / safe_scale)
    with np.errstate(over="ignore"):
        r = safe_scale * np.hypot(horizontal, z / safe_scale)
    r = np.where(degenerate, 0.0, r)
    _check_finite("magnitudes", r)

    if np.any(degenerate):
        count = int(np.count_nonzero(degenerate))
        logger.debug(f"{count} origin point(s) converted; using (0, 0, {-radius})")
        warnings.warn(
            f"{count} point(s) at the origin have no latitude or longitude; "
            f"returning (0°, 0°, -R) for them",
            DegenerateConversion,
            stacklevel=2
        )

    # arctan2(0, 0) is 0, which is already the convention for both angles
    latitudes = np.degrees(np.arctan2(z / safe_scale, horizontal))
    longitudes = np.where((x == 0) & (y == 0), 0.0, np.degrees(np.arctan2(y, x)))
    latitudes, longitudes = normalize_lat_lon(latitudes, longitudes)

    return latitudes, longitudes, r - radius
