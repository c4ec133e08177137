import warnings

import pytest

from common.types import GeographicCoordinate, geographic


@pytest.fixture
def equator_origin() -> GeographicCoordinate:
    return geographic(0.0, 0.0, 0.0)


@pytest.fixture
def no_warnings():
    """Fail the test if any warning is emitted inside the block."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        yield
