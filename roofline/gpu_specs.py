"""
GPU Specifications and Roofline Estimators
Theoretical peak FP32 throughput, peak memory bandwidth and ridge point

Sources:
- NVIDIA CUDA C++ Programming Guide, Compute Capabilities table
- CUDA samples helper_cuda.h (_ConvertSMVer2Cores)
"""

from dataclasses import dataclass

import numpy as np

from roofline.errors import ZeroBandwidthError

# FP32 cores per SM, exact (major, minor) entries
CORES_PER_SM = {
    (2, 0): 32,     # Fermi GF100
    (2, 1): 48,     # Fermi GF10x
    (6, 0): 64,     # Pascal GP100
    (6, 1): 128,
    (6, 2): 128,
    (8, 0): 64,     # Ampere A100
}

# Per-generation entries, used when (major, minor) has no exact entry
CORES_PER_SM_BY_GENERATION = {
    2: 32,
    3: 192,         # Kepler
    5: 128,         # Maxwell
    6: 128,
    7: 64,          # Volta / Turing
    8: 128,         # Ampere GA10x / Ada Lovelace
    9: 128,         # Hopper
}

DEFAULT_CORES_PER_SM = 64

FMA_OPS_PER_CYCLE = 2
DDR_TRANSFERS_PER_CYCLE = 2


@dataclass(frozen=True)
class RooflineEstimate:
    cores_per_sm: int
    peak_tflops: float
    peak_bandwidth_gb_s: float
    ridge_point: float

    @property
    def peak_flops(self) -> float:
        return self.peak_tflops * 1e12

    @property
    def peak_bytes_per_s(self) -> float:
        return self.peak_bandwidth_gb_s * 1e9


def get_cores_per_sm(major: int, minor: int) -> int:
    """
    Estimate FP32 cores per SM from compute capability

    Unrecognized architectures fall back to DEFAULT_CORES_PER_SM.

    Returns:
        int: cores per streaming multiprocessor
    """
    if (major, minor) in CORES_PER_SM:
        return CORES_PER_SM[(major, minor)]
    return CORES_PER_SM_BY_GENERATION.get(major, DEFAULT_CORES_PER_SM)


def peak_throughput(sm_count, cores_per_sm, clock_rate):
    """
    Theoretical peak arithmetic throughput

    Args:
        sm_count: number of streaming multiprocessors
        cores_per_sm: FP32 cores per SM
        clock_rate: core clock in MHz

    Returns:
        float: peak throughput in TFLOP/s
    """
    return sm_count * cores_per_sm * clock_rate * FMA_OPS_PER_CYCLE / 1e6


def peak_bandwidth(memory_clock_rate, memory_bus_width):
    """
    Theoretical peak memory bandwidth

    bandwidth = 2 (DDR) x memory_clock x bus_width (bytes)

    Args:
        memory_clock_rate: memory clock in MHz
        memory_bus_width: bus width in bits

    Returns:
        float: peak bandwidth in GB/s
    """
    return memory_clock_rate * DDR_TRANSFERS_PER_CYCLE * memory_bus_width / (8 * 1000)


def ridge_point(throughput, bandwidth):
    """Arithmetic intensity where the compute roof meets the memory roof."""
    if bandwidth <= 0:
        raise ZeroBandwidthError(
            f"cannot compute ridge point with bandwidth {bandwidth}")
    return throughput / bandwidth


def estimate_roofline(props) -> RooflineEstimate:
    """
    Build the roofline estimate for one device

    Args:
        props: DeviceProperties with clocks in MHz

    Returns:
        RooflineEstimate: peaks in TFLOP/s and GB/s, ridge point in FLOP/byte
    """
    cores = get_cores_per_sm(props.major, props.minor)
    tflops = peak_throughput(props.multi_processor_count, cores, props.clock_rate_mhz)
    gb_s = peak_bandwidth(props.memory_clock_rate_mhz, props.memory_bus_width)

    # FLOP/s over B/s so the ridge lands in FLOP/byte
    ridge = ridge_point(tflops * 1e12, gb_s * 1e9)

    return RooflineEstimate(
        cores_per_sm=cores,
        peak_tflops=tflops,
        peak_bandwidth_gb_s=gb_s,
        ridge_point=ridge,
    )


def attainable_tflops(intensity, estimate: RooflineEstimate):
    """
    Roofline bound at a given arithmetic intensity

    Works on scalars and numpy arrays.

    Returns:
        attainable TFLOP/s = min(peak, bandwidth x intensity)
    """
    memory_roof = estimate.peak_bandwidth_gb_s * np.asarray(intensity) / 1000
    return np.minimum(memory_roof, estimate.peak_tflops)
