"""
Test suite for the exception hierarchy
"""

import pytest

from roofline.errors import (
    DeviceQueryError,
    NoDevicesFoundError,
    RooflineError,
    ZeroBandwidthError,
)


@pytest.mark.parametrize("error", [
    RooflineError,
    DeviceQueryError,
    NoDevicesFoundError,
    ZeroBandwidthError,
])
def test_errors_share_base_and_are_documented(error):
    assert issubclass(error, RooflineError)
    assert error.__doc__ and error.__doc__.strip()


def test_zero_bandwidth_is_zero_division():
    assert issubclass(ZeroBandwidthError, ZeroDivisionError)
