import logging

import pint
import pytest

from common.config import GlobeConfig
from common.constants import DEFAULT_EPSILON, ReferenceRadii
from common.exceptions import InvalidReferenceRadius
from common.logging_config import get_logger, set_level
from common.types import cartesian, geographic
from common.units import Q_, resolve_radius, to_magnitude
from geospatial.coordinate_models import to_cartesian


def test_default_config_is_earth_in_km() -> None:
    config = GlobeConfig()
    assert config.reference_radius == ReferenceRadii.EARTH_MEAN.value
    assert config.length_unit == "km"
    assert config.epsilon == DEFAULT_EPSILON


def test_config_for_body_converts_units() -> None:
    config = GlobeConfig.for_body("Moon", length_unit="m")
    assert config.reference_radius == pytest.approx(1_737_400.0)
    assert config.radius_quantity.to("km").magnitude == pytest.approx(1737.4)


def test_unknown_body_is_rejected() -> None:
    with pytest.raises(KeyError):
        GlobeConfig.for_body("pluto")


def test_config_round_trips_through_dict() -> None:
    config = GlobeConfig(reference_radius=100.0, length_unit="m", epsilon=1e-9)
    assert GlobeConfig.from_dict(config.to_dict()) == config


def test_config_hash_is_deterministic() -> None:
    a = GlobeConfig(reference_radius=100.0)
    b = GlobeConfig(reference_radius=100.0)
    c = GlobeConfig(reference_radius=101.0)
    assert a.config_hash() == b.config_hash()
    assert a.config_hash() != c.config_hash()
    assert len(a.config_hash()) == 16


def test_config_accepts_quantity_radius() -> None:
    config = GlobeConfig(reference_radius=Q_(2.0, "km"), length_unit="m")
    assert config.reference_radius == pytest.approx(2000.0)


@pytest.mark.parametrize("kwargs", [{"reference_radius": -1.0}, {"reference_radius": float("nan")}])
def test_config_rejects_bad_radius(kwargs) -> None:
    with pytest.raises(InvalidReferenceRadius):
        GlobeConfig(**kwargs)


def test_config_rejects_bad_epsilon_and_unit() -> None:
    with pytest.raises(ValueError):
        GlobeConfig(epsilon=0.0)
    with pytest.raises(pint.UndefinedUnitError):
        GlobeConfig(length_unit="furlongz")


def test_config_drives_conversion() -> None:
    config = GlobeConfig.for_body("mars")
    point = to_cartesian(geographic(0.0, 0.0), config.reference_radius)
    assert point.x == pytest.approx(3389.5)


def test_to_magnitude() -> None:
    assert to_magnitude(Q_(1500.0, "m"), "km") == pytest.approx(1.5)
    assert to_magnitude(7.0, "km") == 7.0


def test_resolve_radius_allows_zero() -> None:
    assert resolve_radius(0.0) == 0.0


def test_equatorial_earth_is_registered() -> None:
    config = GlobeConfig.for_body("earth_equatorial")
    assert config.reference_radius == ReferenceRadii.EARTH_EQUATORIAL.value
    assert config.reference_radius > GlobeConfig.for_body("earth").reference_radius


def test_config_isclose_uses_epsilon() -> None:
    loose = GlobeConfig(epsilon=1e-3)
    strict = GlobeConfig(epsilon=1e-9)
    a = geographic(10.0, 20.0, 0.0)
    b = geographic(10.0001, 20.0, 0.0)
    assert loose.isclose(a, b)
    assert not strict.isclose(a, b)
    assert loose.isclose(cartesian(1.0, 0.0, 0.0), cartesian(1.0005, 0.0, 0.0))


@pytest.mark.parametrize("body", ["earth", "earth_equatorial", "moon", "mars"])
def test_round_trip_holds_for_registered_bodies(body: str) -> None:
    config = GlobeConfig.for_body(body)
    for coord in (geographic(45.0, -120.0, 3.0), geographic(90.0, 10.0), geographic(0.0, 180.0, -1.0)):
        assert config.round_trip_holds(coord)


def test_get_logger_configures_once_and_set_level() -> None:
    logger = get_logger("tests.logging_once")
    same = get_logger("tests.logging_once")
    assert logger is same
    assert len(logger.handlers) == 1

    set_level(logging.DEBUG, names=["tests.logging_once"])
    assert logger.level == logging.DEBUG
    set_level(logging.INFO)
    assert logger.level == logging.INFO


def test_get_logger_keeps_level_set_later() -> None:
    logger = get_logger("tests.logging_sticky")
    set_level(logging.DEBUG, names=["tests.logging_sticky"])

    again = get_logger("tests.logging_sticky")
    assert again is logger
    assert again.level == logging.DEBUG
