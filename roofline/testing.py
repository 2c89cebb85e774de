"""Fake device-management API for tests."""

from roofline.errors import DeviceQueryError


class FakeDeviceAPI:
    """Stands in for CudaDeviceAPI; entries may be DeviceProperties or exceptions."""

    def __init__(self, devices=(), count_error=None):
        self.devices = list(devices)
        self.count_error = count_error
        self.queried = []

    def device_count(self):
        if self.count_error is not None:
            raise DeviceQueryError(str(self.count_error)) from self.count_error
        return len(self.devices)

    def get_device_properties(self, index):
        self.queried.append(index)
        entry = self.devices[index]
        if isinstance(entry, Exception):
            raise DeviceQueryError(f"cannot read properties of device {index}: {entry}") from entry
        return entry
