"""
Geographic Coordinate Arithmetic.

Adding a delta to a coordinate sums the components and then runs the
full normalization pipeline (latitude, then longitude with the pole flip,
then altitude passthrough). The result is always a new, normalized
coordinate, however large the delta.
"""

from typing import Iterable, Sequence, Union

from common.logging_config import get_logger
from common.types import GeographicCoordinate, GeographicDelta, geographic

logger = get_logger(__name__)

DeltaLike = Union[GeographicDelta, Sequence[float]]


def add(
    base: GeographicCoordinate,
    delta: DeltaLike,
    scale: float = 1.0
) -> GeographicCoordinate:
    """Move a coordinate by a geographic delta.

    Parameters
    ----------
    base : GeographicCoordinate
        Starting position.
    delta : GeographicDelta or sequence of 3 floats
        (Δlatitude, Δlongitude, Δaltitude); angles in degrees.
    scale : float
        Factor applied to the delta before adding it.

    Returns
    -------
    GeographicCoordinate
        Normalized sum.

    Raises
    ------
    InvalidCoordinate
        If the delta or the scale is not finite.

    Examples
    --------
    >>> add(geographic(80.0, 10.0), (20.0, 0.0, 0.0)).to_tuple()
    (80.0, -170.0, 0.0)
    """
    step = GeographicDelta.coerce(delta)
    if scale != 1.0:
        step = step * scale

    return geographic(
        base.latitude + step.latitude,
        base.longitude + step.longitude,
        base.altitude + step.altitude,
    )


def subtract(
    base: GeographicCoordinate,
    delta: DeltaLike,
    scale: float = 1.0
) -> GeographicCoordinate:
    """Move a coordinate by the opposite of a delta."""
    return add(base, -GeographicDelta.coerce(delta), scale)


def accumulate(base: GeographicCoordinate, deltas: Iterable[DeltaLike]) -> GeographicCoordinate:
    """Apply a sequence of deltas one after another.

    Each intermediate position is normalized, so the result equals
    repeated `add` calls.
    """
    position = base
    steps = 0
    for delta in deltas:
        position = add(position, delta)
        steps += 1
    logger.debug(f"Accumulated {steps} deltas onto {base.to_tuple()} -> {position.to_tuple()}")
    return position


def move_along_bearing(
    base: GeographicCoordinate,
    bearing_deg: float,
    angular_distance_deg: float
) -> GeographicCoordinate:
    """Step a coordinate along a compass bearing.

    This is a delta-space step: the latitude changes by
    ``d * cos(bearing)`` and the longitude by ``d * sin(bearing)``. It is
    exact for pure north/south and east/west moves and a first-order
    approximation otherwise.
    """
    return add(base, GeographicDelta.from_bearing(bearing_deg), scale=angular_distance_deg)
