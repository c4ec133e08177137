import numpy as np
import pytest

from common.exceptions import InvalidCoordinate
from common.types import cartesian, geographic
from geospatial.coordinate_models import to_cartesian, to_geographic
from geospatial.transforms import Composite, Rotation, Scaling, Translation, compose


Z_AXIS = cartesian(0.0, 0.0, 1.0)


@pytest.mark.parametrize(
    ("axis", "theta", "point", "expected"),
    [
        ((0.0, 0.0, 1.0), 90.0, (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
        ((0.0, 0.0, 1.0), 180.0, (1.0, 0.0, 0.0), (-1.0, 0.0, 0.0)),
        ((1.0, 0.0, 0.0), 90.0, (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
        ((0.0, 1.0, 0.0), 90.0, (0.0, 0.0, 1.0), (1.0, 0.0, 0.0)),
        ((0.0, 0.0, 5.0), 90.0, (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
    ],
)
def test_rotation(axis, theta, point, expected) -> None:
    rotation = Rotation(axis=cartesian(*axis), theta=theta)
    assert rotation.forward(cartesian(*point)).isclose(cartesian(*expected), abs_tol=1e-12)


def test_rotation_about_polar_axis_shifts_longitude() -> None:
    point = to_cartesian(geographic(30.0, 10.0, 0.0), 1.0)
    rotated = point.transform(Rotation(axis=Z_AXIS, theta=45.0))
    assert to_geographic(rotated, 1.0).isclose(geographic(30.0, 55.0, 0.0))


def test_rotation_inverse_and_negation() -> None:
    rotation = Rotation(axis=cartesian(1.0, 2.0, 3.0), theta=33.0)
    point = cartesian(4.0, -5.0, 6.0)
    assert rotation.inverse(rotation.forward(point)).isclose(point)
    assert (-rotation).forward(rotation.forward(point)).isclose(point)


def test_rotation_preserves_magnitude() -> None:
    rotation = Rotation(axis=cartesian(-1.0, 0.5, 2.0), theta=-71.0)
    point = cartesian(3.0, 4.0, 12.0)
    assert rotation(point).magnitude == pytest.approx(13.0)


def test_rotation_rejects_zero_axis() -> None:
    with pytest.raises(InvalidCoordinate):
        Rotation(axis=cartesian(0.0, 0.0, 0.0), theta=10.0)


def test_scaling() -> None:
    scaling = Scaling(factor=2.5)
    point = cartesian(1.0, -2.0, 4.0)
    assert scaling.forward(point).to_tuple() == (2.5, -5.0, 10.0)
    assert scaling.inverse(scaling.forward(point)).isclose(point)


def test_scaling_rejects_zero_factor() -> None:
    with pytest.raises(InvalidCoordinate):
        Scaling(factor=0.0)


def test_translation() -> None:
    shift = Translation(vector=cartesian(1.0, 2.0, 3.0))
    point = cartesian(-1.0, 0.0, 1.0)
    assert shift.forward(point).to_tuple() == (0.0, 2.0, 4.0)
    assert shift.inverse(shift.forward(point)) == point
    assert (-shift).forward(point).to_tuple() == (-2.0, -2.0, -2.0)
    assert (shift + shift).vector.to_tuple() == (2.0, 4.0, 6.0)


def test_compose_applies_in_order_and_inverts() -> None:
    chain = compose(
        Scaling(factor=2.0),
        Translation(vector=cartesian(1.0, 0.0, 0.0)),
        Rotation(axis=Z_AXIS, theta=90.0),
    )
    assert isinstance(chain, Composite)

    point = cartesian(1.0, 0.0, 0.0)
    moved = chain.forward(point)
    assert moved.isclose(cartesian(0.0, 3.0, 0.0))
    assert chain.inverse(moved).isclose(point)


def test_rotation_matrix_is_orthogonal() -> None:
    matrix = Rotation(axis=cartesian(0.3, -0.2, 0.9), theta=123.0).matrix
    np.testing.assert_allclose(matrix @ matrix.T, np.eye(3), atol=1e-12)
