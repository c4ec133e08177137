"""
Coordinate Value Types.

This module defines the two representations of a position on (or around)
a globe, plus the delta type used for geographic arithmetic. All of them
are frozen dataclasses: every operation returns a new instance, so values
can be shared freely between threads and callers.

Design Rationale
----------------
A `GeographicCoordinate` is only ever built from components that already
satisfy the range invariants. Raw values (results of arithmetic, user
input, conversion output) go through `geographic()` /
`GeographicCoordinate.from_raw`, which runs the latitude → longitude
normalization pipeline. Handing out-of-range components straight to the
dataclass constructor is rejected rather than silently corrected.

Units
-----
- Latitude and longitude in DEGREES.
- Altitude, x, y and z in the length unit of the reference radius they are
  used with (kilometres by convention).
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from common.angles import fold_angle, normalize_lat_lon
from common.constants import DEFAULT_EPSILON, LATITUDE_LIMIT, LONGITUDE_LIMIT
from common.exceptions import InvalidCoordinate


def _finite(name: str, value) -> float:
    """Coerce a component to float, rejecting NaN, infinities and non-numbers."""
    # float() would parse "12.5"; components must already be numbers
    if isinstance(value, (bool, np.bool_, str, bytes)):
        raise InvalidCoordinate(f"{name} must be a real number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidCoordinate(f"{name} must be a real number, got {value!r}") from e
    if not np.isfinite(number):
        raise InvalidCoordinate(f"{name} must be finite, got {number}")
    return number


@dataclass(frozen=True)
class GeographicCoordinate:
    """A position given by latitude, longitude and altitude.

    Attributes
    ----------
    latitude : float
        Latitude in DEGREES. Range: [-90, 90]; ±90 are the poles.
    longitude : float
        Longitude in DEGREES. Range: (-180, 180]. Still stored at the poles,
        where it carries no positional meaning.
    altitude : float
        Signed distance from the reference surface along the local vertical.

    Notes
    -----
    Build instances with `geographic()` or `from_raw`, which normalize.
    The plain constructor only validates.

    Examples
    --------
    >>> c = geographic(100.0, 10.0, 0.0)
    >>> c.latitude, c.longitude
    (80.0, -170.0)
    """
    latitude: float  # degrees
    longitude: float  # degrees
    altitude: float = 0.0

    def __post_init__(self):
        """Validate components and ranges."""
        latitude = _finite("latitude", self.latitude)
        longitude = _finite("longitude", self.longitude)
        altitude = _finite("altitude", self.altitude)

        if not -LATITUDE_LIMIT <= latitude <= LATITUDE_LIMIT:
            raise InvalidCoordinate(
                f"Latitude {latitude} out of range [-90, 90]. "
                f"Use geographic() to normalize raw values."
            )
        if not -LONGITUDE_LIMIT < longitude <= LONGITUDE_LIMIT:
            raise InvalidCoordinate(
                f"Longitude {longitude} out of range (-180, 180]. "
                f"Use geographic() to normalize raw values."
            )

        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", longitude)
        object.__setattr__(self, "altitude", altitude)

    @classmethod
    def from_raw(cls, latitude, longitude, altitude=0.0) -> 'GeographicCoordinate':
        """Normalize raw components and build a coordinate.

        Latitude is folded first; a pole crossing rotates the longitude by
        180° before it is folded in turn. Altitude passes through.

        Raises
        ------
        InvalidCoordinate
            If any component is NaN, infinite or not a number.
        """
        latitude = _finite("latitude", latitude)
        longitude = _finite("longitude", longitude)
        altitude = _finite("altitude", altitude)

        latitude, longitude = normalize_lat_lon(latitude, longitude)
        return cls(latitude=float(latitude), longitude=float(longitude), altitude=altitude)

    @classmethod
    def from_radians(cls, lat_rad: float, lon_rad: float, altitude: float = 0.0) -> 'GeographicCoordinate':
        """Create coordinate from radians (convenience constructor)."""
        lat_rad = _finite("latitude", lat_rad)
        lon_rad = _finite("longitude", lon_rad)
        return cls.from_raw(np.degrees(lat_rad), np.degrees(lon_rad), altitude)

    @property
    def latitude_rad(self) -> float:
        return float(np.radians(self.latitude))

    @property
    def longitude_rad(self) -> float:
        return float(np.radians(self.longitude))

    @property
    def latitude_normal(self) -> float:
        """Latitude scaled to [-1, 1]; ±1 are the poles."""
        return self.latitude / LATITUDE_LIMIT

    @property
    def longitude_normal(self) -> float:
        """Longitude scaled to (-1, 1]."""
        return self.longitude / LONGITUDE_LIMIT

    @property
    def is_pole(self) -> bool:
        return abs(self.latitude) == LATITUDE_LIMIT

    def to_tuple(self) -> Tuple[float, float, float]:
        return self.latitude, self.longitude, self.altitude

    def isclose(self, other: 'GeographicCoordinate', abs_tol: float = DEFAULT_EPSILON) -> bool:
        """Compare two coordinates component-wise within ``abs_tol``.

        Longitudes are compared on the circle, so 180 and -179.9999999 are
        neighbours. At the poles longitude is ignored.
        """
        if abs(self.latitude - other.latitude) > abs_tol:
            return False
        if abs(self.altitude - other.altitude) > abs_tol:
            return False
        if LATITUDE_LIMIT - abs(self.latitude) <= abs_tol:
            return True
        return abs(float(fold_angle(self.longitude - other.longitude))) <= abs_tol


@dataclass(frozen=True)
class GeographicDelta:
    """A displacement in geographic components.

    Deltas are raw: they are not normalized, so a delta of 360° latitude
    means one full meridian turn. Normalization happens when the delta is
    added to a coordinate.

    Attributes
    ----------
    latitude : float
        Latitude change in DEGREES.
    longitude : float
        Longitude change in DEGREES.
    altitude : float
        Altitude change.
    """
    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "latitude", _finite("latitude delta", self.latitude))
        object.__setattr__(self, "longitude", _finite("longitude delta", self.longitude))
        object.__setattr__(self, "altitude", _finite("altitude delta", self.altitude))

    @classmethod
    def coerce(cls, value: Union['GeographicDelta', Sequence[float]]) -> 'GeographicDelta':
        """Accept a delta or any (Δlat, Δlon, Δalt) sequence."""
        if isinstance(value, cls):
            return value
        try:
            d_lat, d_lon, d_alt = value
        except (TypeError, ValueError) as e:
            raise InvalidCoordinate(
                f"Delta must have three components (lat, lon, alt), got {value!r}"
            ) from e
        return cls(d_lat, d_lon, d_alt)

    @classmethod
    def from_bearing(cls, bearing_deg: float) -> 'GeographicDelta':
        """Unit angular step along a compass bearing.

        The bearing is measured clockwise from north. Multiply the result
        by an angular distance in degrees to move that far along the
        bearing, e.g. ``add(c, GeographicDelta.from_bearing(45) * 2.5)``.
        """
        bearing = np.radians(_finite("bearing", bearing_deg))
        return cls(latitude=float(np.cos(bearing)), longitude=float(np.sin(bearing)))

    def __mul__(self, factor: float) -> 'GeographicDelta':
        factor = _finite("scale factor", factor)
        return GeographicDelta(
            self.latitude * factor,
            self.longitude * factor,
            self.altitude * factor,
        )

    __rmul__ = __mul__

    def __neg__(self) -> 'GeographicDelta':
        return GeographicDelta(-self.latitude, -self.longitude, -self.altitude)

    def __add__(self, other: 'GeographicDelta') -> 'GeographicDelta':
        if not isinstance(other, GeographicDelta):
            return NotImplemented
        return GeographicDelta(
            self.latitude + other.latitude,
            self.longitude + other.longitude,
            self.altitude + other.altitude,
        )

    def to_tuple(self) -> Tuple[float, float, float]:
        return self.latitude, self.longitude, self.altitude


@dataclass(frozen=True)
class CartesianCoordinate:
    """A position in the right-handed frame centred on the globe.

    Attributes
    ----------
    x : float
        Towards latitude 0°, longitude 0°.
    y : float
        Towards latitude 0°, longitude 90°.
    z : float
        Towards the north pole.

    Notes
    -----
    There is no range restriction; only finiteness is enforced. The
    distance from the origin equals the reference radius plus the altitude
    of the matching geographic coordinate.
    """
    x: float
    y: float
    z: float

    def __post_init__(self):
        object.__setattr__(self, "x", _finite("x", self.x))
        object.__setattr__(self, "y", _finite("y", self.y))
        object.__setattr__(self, "z", _finite("z", self.z))

    @classmethod
    def from_array(cls, values: NDArray[np.float64]) -> 'CartesianCoordinate':
        x, y, z = np.asarray(values, dtype=np.float64).reshape(3)
        return cls(x, y, z)

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    @property
    def magnitude(self) -> float:
        """Euclidean distance from the globe centre."""
        return float(np.linalg.norm(self.as_array()))

    def unit(self) -> 'CartesianCoordinate':
        """Same direction, magnitude 1.

        Raises
        ------
        InvalidCoordinate
            For the origin, which has no direction.
        """
        magnitude = self.magnitude
        if magnitude == 0:
            raise InvalidCoordinate("The origin has no direction to normalize")
        return CartesianCoordinate.from_array(self.as_array() / magnitude)

    def distance(self, other: 'CartesianCoordinate') -> float:
        """Straight-line distance to another point."""
        return float(np.linalg.norm(self.as_array() - other.as_array()))

    def dot(self, other: 'CartesianCoordinate') -> float:
        return float(np.dot(self.as_array(), other.as_array()))

    def cross(self, other: 'CartesianCoordinate') -> 'CartesianCoordinate':
        return CartesianCoordinate.from_array(np.cross(self.as_array(), other.as_array()))

    def transform(self, transformation) -> 'CartesianCoordinate':
        """Apply a transform from `geospatial.transforms`."""
        return transformation.forward(self)

    def isclose(self, other: 'CartesianCoordinate', abs_tol: float = DEFAULT_EPSILON) -> bool:
        return bool(np.all(np.abs(self.as_array() - other.as_array()) <= abs_tol))

    def __add__(self, other: 'CartesianCoordinate') -> 'CartesianCoordinate':
        if not isinstance(other, CartesianCoordinate):
            return NotImplemented
        return CartesianCoordinate(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'CartesianCoordinate') -> 'CartesianCoordinate':
        if not isinstance(other, CartesianCoordinate):
            return NotImplemented
        return CartesianCoordinate(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> 'CartesianCoordinate':
        return CartesianCoordinate(-self.x, -self.y, -self.z)


def geographic(latitude, longitude, altitude=0.0) -> GeographicCoordinate:
    """Build a normalized `GeographicCoordinate` from raw components."""
    return GeographicCoordinate.from_raw(latitude, longitude, altitude)


def cartesian(x, y, z) -> CartesianCoordinate:
    """Build a `CartesianCoordinate`; components must be finite."""
    return CartesianCoordinate(x, y, z)
