"""
Common building blocks for the globe coordinate engine.

This package provides foundational components used by `geospatial`:
- Angle normalization and the latitude/longitude pole coupler
- Immutable coordinate value types
- Reference radii and tolerances
- Unit handling (pint) and engine configuration
- Logging infrastructure and the error taxonomy
"""

from common.angles import (
    LatitudeFold,
    fold_angle,
    normalize_latitude,
    normalize_longitude,
    normalize_lat_lon,
)
from common.config import GlobeConfig
from common.constants import Constant, ReferenceRadii, DEFAULT_EPSILON
from common.exceptions import (
    CoordinateError,
    InvalidCoordinate,
    InvalidReferenceRadius,
    DegenerateConversion,
)
from common.logging_config import get_logger, set_level
from common.types import (
    CartesianCoordinate,
    GeographicCoordinate,
    GeographicDelta,
    cartesian,
    geographic,
)
from common.units import Q_, ureg

__all__ = [
    "LatitudeFold",
    "fold_angle",
    "normalize_latitude",
    "normalize_longitude",
    "normalize_lat_lon",
    "GlobeConfig",
    "Constant",
    "ReferenceRadii",
    "DEFAULT_EPSILON",
    "CoordinateError",
    "InvalidCoordinate",
    "InvalidReferenceRadius",
    "DegenerateConversion",
    "get_logger",
    "set_level",
    "CartesianCoordinate",
    "GeographicCoordinate",
    "GeographicDelta",
    "cartesian",
    "geographic",
    "Q_",
    "ureg",
]
