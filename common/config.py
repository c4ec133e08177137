"""
Engine Configuration.

`GlobeConfig` bundles the numbers a caller needs to run conversions
against one globe: its reference radius, the length unit that radius and
every altitude / Cartesian component are expressed in, and the round-trip
tolerance. The engine functions never read a config implicitly; callers
pass ``config.reference_radius`` explicitly.
"""

import hashlib
import json
from dataclasses import asdict, dataclass
from typing import Any, Dict

import pint

from common.constants import DEFAULT_EPSILON, DEFAULT_LENGTH_UNIT, ReferenceRadii
from common.units import Q_, resolve_radius, to_magnitude


@dataclass(frozen=True)
class GlobeConfig:
    """Configuration for one modeled globe.

    Attributes
    ----------
    reference_radius : float
        Radius of the reference sphere, in ``length_unit``.
    length_unit : str
        Unit of the radius, altitudes and Cartesian components.
    epsilon : float
        Tolerance for round-trip comparisons, in ``length_unit`` for lengths
        and degrees for angles.
    """
    reference_radius: float = ReferenceRadii.EARTH_MEAN.value
    length_unit: str = DEFAULT_LENGTH_UNIT
    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self):
        # Fails with pint.UndefinedUnitError for unknown units
        Q_(1.0, self.length_unit).to("m")
        object.__setattr__(
            self, "reference_radius", resolve_radius(self.reference_radius, self.length_unit)
        )
        if not self.epsilon > 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")

    @classmethod
    def for_body(cls, body: str, length_unit: str = DEFAULT_LENGTH_UNIT, **kwargs) -> 'GlobeConfig':
        """Build a config from the reference radius of a registered body.

        Examples
        --------
        >>> round(GlobeConfig.for_body("earth", length_unit="m").reference_radius, 1)
        6371008.8
        """
        constant = ReferenceRadii.get(body)
        radius = to_magnitude(Q_(constant.value, constant.unit), length_unit)
        return cls(reference_radius=radius, length_unit=length_unit, **kwargs)

    @property
    def radius_quantity(self) -> pint.Quantity:
        """Reference radius with its unit attached."""
        return Q_(self.reference_radius, self.length_unit)

    def isclose(self, a, b) -> bool:
        """Compare two coordinates of the same kind within ``epsilon``.

        Works for pairs of `GeographicCoordinate` or `CartesianCoordinate`.
        """
        return a.isclose(b, abs_tol=self.epsilon)

    def round_trip_holds(self, coord) -> bool:
        """True if ``coord`` survives geographic -> Cartesian -> geographic.

        Uses this config's radius, length unit and ``epsilon``.
        """
        # Local import: geospatial depends on common
        from geospatial.coordinate_models import to_cartesian, to_geographic

        point = to_cartesian(coord, self.reference_radius)
        return self.isclose(to_geographic(point, self.reference_radius), coord)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'GlobeConfig':
        """Create from dictionary."""
        return cls(**d)

    def config_hash(self) -> str:
        """Deterministic short hash of the configuration.

        Returns
        -------
        str
            First 16 hex characters of the SHA-256 of the sorted JSON form.
        """
        config_str = json.dumps(self.to_dict(), sort_keys=True, default=str)
        return hashlib.sha256(config_str.encode()).hexdigest()[:16]
