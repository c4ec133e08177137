"""
Reversible Transforms of Cartesian Points.

Rotations, uniform scalings and translations of points in the
globe-centred frame. Every transform is reversible: ``inverse`` undoes
``forward`` up to floating rounding. Transforms are immutable; negating or
composing them produces new instances.

Angles are in DEGREES.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from common.exceptions import InvalidCoordinate
from common.types import CartesianCoordinate


class Transform(ABC):
    """Abstract base class for reversible point transforms."""

    @abstractmethod
    def forward(self, point: CartesianCoordinate) -> CartesianCoordinate:
        """Apply forward transform."""
        pass

    @abstractmethod
    def inverse(self, point: CartesianCoordinate) -> CartesianCoordinate:
        """Apply inverse transform."""
        pass

    def __call__(self, point: CartesianCoordinate) -> CartesianCoordinate:
        return self.forward(point)


@dataclass(frozen=True)
class Rotation(Transform):
    """Rotation by ``theta`` degrees about an axis through the origin.

    The axis is normalized on construction. Positive angles rotate
    counter-clockwise when looking down the axis towards the origin.

    Attributes
    ----------
    axis : CartesianCoordinate
        Rotation axis; any non-zero vector.
    theta : float
        Rotation angle in DEGREES.
    """
    axis: CartesianCoordinate
    theta: float

    def __post_init__(self):
        object.__setattr__(self, "axis", self.axis.unit())
        if not np.isfinite(self.theta):
            raise InvalidCoordinate(f"Rotation angle must be finite, got {self.theta}")
        object.__setattr__(self, "theta", float(self.theta))

    @property
    def matrix(self) -> NDArray[np.float64]:
        """Rodrigues rotation matrix."""
        return self._matrix(np.radians(self.theta))

    def _matrix(self, theta_rad: float) -> NDArray[np.float64]:
        x, y, z = self.axis.to_tuple()
        sin_t = np.sin(theta_rad)
        cos_t = np.cos(theta_rad)
        one_minus_cos = 1.0 - cos_t

        return np.array([
            [cos_t + x * x * one_minus_cos, x * y * one_minus_cos - z * sin_t, x * z * one_minus_cos + y * sin_t],
            [y * x * one_minus_cos + z * sin_t, cos_t + y * y * one_minus_cos, y * z * one_minus_cos - x * sin_t],
            [z * x * one_minus_cos - y * sin_t, z * y * one_minus_cos + x * sin_t, cos_t + z * z * one_minus_cos],
        ])

    def forward(self, point: CartesianCoordinate) -> CartesianCoordinate:
        return CartesianCoordinate.from_array(self.matrix @ point.as_array())

    def inverse(self, point: CartesianCoordinate) -> CartesianCoordinate:
        # Rotation matrices are orthogonal
        return CartesianCoordinate.from_array(self.matrix.T @ point.as_array())

    def __neg__(self) -> 'Rotation':
        return Rotation(axis=self.axis, theta=-self.theta)


@dataclass(frozen=True)
class Scaling(Transform):
    """Uniform scaling about the origin."""
    factor: float

    def __post_init__(self):
        if not np.isfinite(self.factor):
            raise InvalidCoordinate(f"Scaling factor must be finite, got {self.factor}")
        if self.factor == 0:
            raise InvalidCoordinate("Scaling factor must be non-zero to be reversible")
        object.__setattr__(self, "factor", float(self.factor))

    def forward(self, point: CartesianCoordinate) -> CartesianCoordinate:
        return CartesianCoordinate.from_array(point.as_array() * self.factor)

    def inverse(self, point: CartesianCoordinate) -> CartesianCoordinate:
        return CartesianCoordinate.from_array(point.as_array() / self.factor)


@dataclass(frozen=True)
class Translation(Transform):
    """Shift by a fixed vector."""
    vector: CartesianCoordinate

    def forward(self, point: CartesianCoordinate) -> CartesianCoordinate:
        return point + self.vector

    def inverse(self, point: CartesianCoordinate) -> CartesianCoordinate:
        return point - self.vector

    def __neg__(self) -> 'Translation':
        return Translation(vector=-self.vector)

    def __add__(self, other: 'Translation') -> 'Translation':
        if not isinstance(other, Translation):
            return NotImplemented
        return Translation(vector=self.vector + other.vector)


@dataclass(frozen=True)
class Composite(Transform):
    """Several transforms applied in order."""
    steps: Tuple[Transform, ...]

    def forward(self, point: CartesianCoordinate) -> CartesianCoordinate:
        for step in self.steps:
            point = step.forward(point)
        return point

    def inverse(self, point: CartesianCoordinate) -> CartesianCoordinate:
        for step in reversed(self.steps):
            point = step.inverse(point)
        return point


def compose(*transforms: Transform) -> Composite:
    """Chain transforms; the first argument is applied first."""
    return Composite(steps=tuple(transforms))
