import pytest

from roofline.device_query import DeviceProperties


@pytest.fixture
def a100():
    return DeviceProperties(
        index=0,
        name="NVIDIA A100-SXM4-40GB",
        major=8,
        minor=0,
        multi_processor_count=108,
        clock_rate_mhz=1410.0,
        memory_clock_rate_mhz=1215.0,
        memory_bus_width=5120,
        total_memory=40 * 1024**3,
        shared_memory_per_block=48 * 1024,
    )


@pytest.fixture
def rtx_4070_ti_super():
    return DeviceProperties(
        index=1,
        name="NVIDIA GeForce RTX 4070 Ti SUPER",
        major=8,
        minor=9,
        multi_processor_count=66,
        clock_rate_mhz=2610.0,
        memory_clock_rate_mhz=10501.0,
        memory_bus_width=256,
        total_memory=16 * 1024**3,
        shared_memory_per_block=48 * 1024,
    )
