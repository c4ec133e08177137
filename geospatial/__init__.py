"""
Geospatial Module for the Globe Coordinate Engine.

All conversions between geographic and Cartesian positions, and all
arithmetic on geographic positions, go through this module. The
presentation layer treats its outputs as opaque position sources and
never builds coordinates around the normalization pipeline.

This module provides:
- The public coordinate constructors and accessors
- Geographic <-> Cartesian conversion with an explicit reference radius
- Geographic delta arithmetic with pole-crossing normalization
- Great-circle distances
- Reversible Cartesian transforms
"""

from common.types import (
    CartesianCoordinate,
    GeographicCoordinate,
    GeographicDelta,
    cartesian,
    geographic,
)

from geospatial.coordinate_models import (
    to_cartesian,
    to_geographic,
    to_cartesian_batch,
    to_geographic_batch,
)

from geospatial.arithmetic import (
    add,
    subtract,
    accumulate,
    move_along_bearing,
)

from geospatial.distance_calculations import (
    central_angle,
    great_circle_distance,
    chord_distance,
)

from geospatial.transforms import (
    Transform,
    Rotation,
    Scaling,
    Translation,
    Composite,
    compose,
)

__all__ = [
    # Value types
    "CartesianCoordinate",
    "GeographicCoordinate",
    "GeographicDelta",
    "cartesian",
    "geographic",
    # Conversion
    "to_cartesian",
    "to_geographic",
    "to_cartesian_batch",
    "to_geographic_batch",
    # Arithmetic
    "add",
    "subtract",
    "accumulate",
    "move_along_bearing",
    # Distances
    "central_angle",
    "great_circle_distance",
    "chord_distance",
    # Transforms
    "Transform",
    "Rotation",
    "Scaling",
    "Translation",
    "Composite",
    "compose",
]
