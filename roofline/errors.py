"""Exceptions raised while querying devices and building roofline estimates."""


class RooflineError(Exception):
    """Base class for roofline-report errors."""


class DeviceQueryError(RooflineError):
    """Device count or property query reported a failure."""


class NoDevicesFoundError(RooflineError):
    """Enumeration succeeded but returned zero devices."""


class ZeroBandwidthError(RooflineError, ZeroDivisionError):
    """Ridge point requested for a device with no memory bandwidth."""
