"""
Reference Constants for Globe Coordinates.

Reference radii of the bodies the engine is commonly used with, together
with the numeric tolerances used by the conversion engine. Radii are
expressed in kilometres, the package length unit.

References
----------
- IUGG mean Earth radius: Moritz, H. (2000). Geodetic Reference System 1980.
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Lunar and Martian radii: IAU WGCCRE report (Archinal et al., 2018)
"""

from dataclasses import dataclass
from typing import Dict, Final


@dataclass(frozen=True)
class Constant:
    """A reference constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The unit of the constant (pint-parsable).
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class ReferenceRadii:
    """Registry of reference radii for the bodies a globe may model.

    The conversion engine never reads these implicitly: a radius is always
    passed to `to_cartesian` / `to_geographic` by the caller. The registry
    only saves callers from retyping the numbers.
    """

    EARTH_MEAN: Final[Constant] = Constant(
        value=6_371.0088,
        uncertainty=0.0001,
        unit="km",
        source="IUGG mean radius",
        description="Mean radius of Earth, R1 = (2a + b) / 3"
    )

    EARTH_EQUATORIAL: Final[Constant] = Constant(
        value=6_378.137,
        uncertainty=0.0,  # Defined exactly
        unit="km",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    MOON_MEAN: Final[Constant] = Constant(
        value=1_737.4,
        uncertainty=0.1,
        unit="km",
        source="IAU WGCCRE 2015",
        description="Mean radius of the Moon"
    )

    MARS_MEAN: Final[Constant] = Constant(
        value=3_389.5,
        uncertainty=0.2,
        unit="km",
        source="IAU WGCCRE 2015",
        description="Mean radius of Mars"
    )

    @classmethod
    def by_body(cls) -> Dict[str, Constant]:
        """Reference radius of every registered body, keyed by lower-case name."""
        return {
            "earth": cls.EARTH_MEAN,
            "earth_equatorial": cls.EARTH_EQUATORIAL,
            "moon": cls.MOON_MEAN,
            "mars": cls.MARS_MEAN,
        }

    @classmethod
    def get(cls, body: str) -> Constant:
        """Look up the mean radius of a body by name.

        Raises
        ------
        KeyError
            If the body is not registered.
        """
        radii = cls.by_body()
        key = body.strip().lower()
        if key not in radii:
            raise KeyError(
                f"No reference radius for body '{body}'. "
                f"Known bodies: {sorted(radii)}"
            )
        return radii[key]


# Round-trip tolerance, in the unit of the compared components
DEFAULT_EPSILON: Final[float] = 1e-6

# Package length unit for radii, altitudes and Cartesian components
DEFAULT_LENGTH_UNIT: Final[str] = "km"

LATITUDE_LIMIT: Final[float] = 90.0
LONGITUDE_LIMIT: Final[float] = 180.0
FULL_TURN: Final[float] = 360.0
