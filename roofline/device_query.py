"""
Device Query Module
Enumerates CUDA devices and reads their static hardware properties.

Name, compute capability, SM count and memory sizes come from torch.
Clock rates and memory bus width come from the Triton driver, which
reports them straight from the CUDA device attributes (kHz / bits).
"""

from dataclasses import dataclass

import torch
from triton.runtime import driver

from roofline.errors import DeviceQueryError, NoDevicesFoundError


@dataclass(frozen=True)
class DeviceProperties:
    index: int
    name: str
    major: int
    minor: int
    multi_processor_count: int
    clock_rate_mhz: float
    memory_clock_rate_mhz: float
    memory_bus_width: int       # bits
    total_memory: int           # bytes
    shared_memory_per_block: int  # bytes

    @property
    def compute_capability(self):
        return (self.major, self.minor)


class CudaDeviceAPI:
    """Device-management API backed by torch.cuda and the Triton driver."""

    def device_count(self) -> int:
        try:
            if not torch.cuda.is_available():
                # CPU-only build: no devices, not a failure
                if torch.version.cuda is None:
                    return 0
                # is_available() swallows driver errors; init() raises them
                torch.cuda.init()
            return torch.cuda.device_count()
        except Exception as e:
            raise DeviceQueryError(f"cannot count CUDA devices: {e}") from e

    def get_device_properties(self, index: int) -> DeviceProperties:
        try:
            props = torch.cuda.get_device_properties(index)
            attrs = driver.active.utils.get_device_properties(index)

            return DeviceProperties(
                index=index,
                name=props.name,
                major=props.major,
                minor=props.minor,
                multi_processor_count=props.multi_processor_count,
                # kHz -> MHz
                clock_rate_mhz=attrs["sm_clock_rate"] / 1000,
                memory_clock_rate_mhz=attrs["mem_clock_rate"] / 1000,
                memory_bus_width=attrs["mem_bus_width"],
                total_memory=props.total_memory,
                shared_memory_per_block=props.shared_memory_per_block,
            )
        except Exception as e:
            raise DeviceQueryError(
                f"cannot read properties of device {index}: {e}") from e


def query_devices(api):
    """
    Yield DeviceProperties for every device in ascending index order

    Properties are fetched lazily, so a failing device only surfaces
    after the devices before it have been consumed.

    Raises:
        NoDevicesFoundError: the device count is zero
        DeviceQueryError: the count or a property query failed
    """
    count = api.device_count()
    if count == 0:
        raise NoDevicesFoundError("No CUDA devices found.")

    for index in range(count):
        yield api.get_device_properties(index)
