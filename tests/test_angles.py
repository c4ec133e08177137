import numpy as np
import pytest
from hypothesis import given

from common.angles import fold_angle, normalize_lat_lon, normalize_latitude, normalize_longitude
from strategies import any_finite


@pytest.mark.parametrize(
    ("angle", "expected"),
    [
        (0.0, 0.0),
        (45.0, 45.0),
        (-45.0, -45.0),
        (180.0, 180.0),
        (-180.0, 180.0),
        (190.0, -170.0),
        (-190.0, 170.0),
        (360.0, 0.0),
        (540.0, 180.0),
        (3 * 360.0 + 45.0, 45.0),
        (-5 * 360.0 - 45.0, -45.0),
    ],
)
def test_fold_angle_reduces_into_half_open_range(angle: float, expected: float) -> None:
    assert float(fold_angle(angle)) == pytest.approx(expected, abs=1e-9)


@given(any_finite)
def test_fold_angle_is_always_in_range(angle: float) -> None:
    folded = float(fold_angle(angle))
    assert -180.0 < folded <= 180.0


def test_fold_angle_accepts_arrays() -> None:
    folded = fold_angle(np.array([-180.0, 190.0, 720.0]))
    np.testing.assert_allclose(folded, [180.0, -170.0, 0.0])


@pytest.mark.parametrize(
    ("raw", "latitude", "crossed"),
    [
        (0.0, 0.0, False),
        (45.0, 45.0, False),
        (90.0, 90.0, False),
        (-90.0, -90.0, False),
        (100.0, 80.0, True),
        (-100.0, -80.0, True),
        (180.0, 0.0, True),
        (270.0, -90.0, False),
        (360.0, 0.0, False),
        (450.0, 90.0, False),
    ],
)
def test_normalize_latitude(raw: float, latitude: float, crossed: bool) -> None:
    fold = normalize_latitude(raw)
    assert float(fold.latitude) == pytest.approx(latitude, abs=1e-9)
    assert bool(fold.crossed_pole) is crossed


@given(any_finite)
def test_normalize_latitude_is_always_in_range(raw: float) -> None:
    assert -90.0 <= float(normalize_latitude(raw).latitude) <= 90.0


@given(any_finite)
def test_normalize_longitude_is_always_in_range(raw: float) -> None:
    assert -180.0 < float(normalize_longitude(raw)) <= 180.0
    assert -180.0 < float(normalize_longitude(raw, crossed_pole=True)) <= 180.0


def test_longitude_flips_after_pole_crossing() -> None:
    assert float(normalize_longitude(10.0, crossed_pole=True)) == pytest.approx(-170.0)
    assert float(normalize_longitude(10.0, crossed_pole=False)) == pytest.approx(10.0)


def test_poles_never_flip_longitude() -> None:
    for pole in (90.0, -90.0):
        assert not bool(normalize_latitude(pole).crossed_pole)


def test_normalize_lat_lon_couples_stages() -> None:
    latitude, longitude = normalize_lat_lon(100.0, 10.0)
    assert float(latitude) == pytest.approx(80.0)
    assert float(longitude) == pytest.approx(-170.0)


def test_normalize_lat_lon_vectorized() -> None:
    latitudes, longitudes = normalize_lat_lon(
        np.array([100.0, -100.0, 45.0]),
        np.array([10.0, -10.0, 10.0]),
    )
    np.testing.assert_allclose(latitudes, [80.0, -80.0, 45.0])
    np.testing.assert_allclose(longitudes, [-170.0, 170.0, 10.0])
