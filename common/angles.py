"""
Angle Normalization and the Latitude/Longitude Pole Coupler.

Latitude and longitude are normalized in two explicit stages:

1. `normalize_latitude` folds a raw latitude into [-90, 90] and reports
   whether the fold carried it over a pole.
2. `normalize_longitude` folds a raw longitude into (-180, 180], first
   rotating it by 180° when the latitude stage crossed a pole.

The stages must run in that order. Crossing a pole puts the point on the
opposite meridian, so a latitude of 100° at longitude 10° is the same
place as latitude 80° at longitude -170°.

All functions accept scalars or numpy arrays. Scalar input yields numpy
scalars (which are `float` subclasses); array input yields arrays.

Angles are in DEGREES throughout.
"""

from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import NDArray

from common.constants import FULL_TURN, LATITUDE_LIMIT, LONGITUDE_LIMIT
from common.logging_config import get_logger

logger = get_logger(__name__)

AngleLike = Union[float, NDArray[np.float64]]


@dataclass(frozen=True)
class LatitudeFold:
    """Result of the latitude stage.

    Attributes
    ----------
    latitude : float or ndarray
        Latitude in degrees, within [-90, 90].
    crossed_pole : bool or ndarray of bool
        True where the raw value went over a pole and the paired longitude
        must be rotated by 180°.
    """
    latitude: AngleLike
    crossed_pole: Union[bool, NDArray[np.bool_]]


def _unwrap(value):
    # 0-d arrays become numpy scalars, n-d arrays are returned unchanged
    return value[()]


def fold_angle(angle: AngleLike) -> AngleLike:
    """Reduce an arbitrary angle into (-180, 180].

    Parameters
    ----------
    angle : float or ndarray
        Angle in degrees, any magnitude or sign.

    Returns
    -------
    float or ndarray
        The equivalent angle in (-180, 180].

    Examples
    --------
    >>> float(fold_angle(190.0))
    -170.0
    >>> float(fold_angle(-180.0))
    180.0
    >>> float(fold_angle(3 * 360.0 + 45.0))
    45.0
    """
    angle = np.asarray(angle, dtype=np.float64)
    folded = np.mod(angle + LONGITUDE_LIMIT, FULL_TURN) - LONGITUDE_LIMIT
    # -180 is outside the half-open range; it is the same meridian as +180
    folded = np.where(folded <= -LONGITUDE_LIMIT, LONGITUDE_LIMIT, folded)
    return _unwrap(folded)


def normalize_latitude(value: AngleLike) -> LatitudeFold:
    """Fold a raw latitude into [-90, 90] and detect pole crossings.

    The value is first folded into (-180, 180]. Anything still beyond ±90
    has gone over a pole and is reflected back with ``sign(v) * 180 - v``.
    The exact poles are fixed points and never count as a crossing.

    Parameters
    ----------
    value : float or ndarray
        Raw latitude in degrees (e.g. the result of repeated additions).

    Returns
    -------
    LatitudeFold
        The normalized latitude and the longitude-flip signal.

    Examples
    --------
    >>> fold = normalize_latitude(100.0)
    >>> float(fold.latitude), bool(fold.crossed_pole)
    (80.0, True)
    >>> fold = normalize_latitude(-100.0)
    >>> float(fold.latitude), bool(fold.crossed_pole)
    (-80.0, True)
    """
    folded = np.asarray(fold_angle(value), dtype=np.float64)
    crossed = np.abs(folded) > LATITUDE_LIMIT
    latitude = np.where(crossed, np.sign(folded) * 2 * LATITUDE_LIMIT - folded, folded)

    if np.any(crossed) and folded.ndim == 0:
        logger.debug(f"Latitude {float(value):.6f} crossed a pole, folded to {float(latitude):.6f}")

    return LatitudeFold(latitude=_unwrap(latitude), crossed_pole=_unwrap(crossed))


def normalize_longitude(
    value: AngleLike,
    crossed_pole: Union[bool, NDArray[np.bool_]] = False
) -> AngleLike:
    """Fold a raw longitude into (-180, 180], honouring a pole crossing.

    Parameters
    ----------
    value : float or ndarray
        Raw longitude in degrees.
    crossed_pole : bool or ndarray of bool
        The flip signal produced by `normalize_latitude` for the paired
        latitude. When set the longitude is rotated by 180° before folding.

    Returns
    -------
    float or ndarray
        Longitude in (-180, 180].

    Examples
    --------
    >>> float(normalize_longitude(10.0, crossed_pole=True))
    -170.0
    """
    value = np.asarray(value, dtype=np.float64)
    shifted = np.where(crossed_pole, value + LONGITUDE_LIMIT, value)
    return fold_angle(shifted)


def normalize_lat_lon(latitude: AngleLike, longitude: AngleLike):
    """Run both stages in order.

    Returns
    -------
    Tuple
        (latitude, longitude) normalized to [-90, 90] and (-180, 180].
    """
    fold = normalize_latitude(latitude)
    return fold.latitude, normalize_longitude(longitude, fold.crossed_pole)
