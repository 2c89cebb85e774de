"""
Roofline Report
Formats one device's hardware properties and roofline estimate as text.
"""

from collections import namedtuple

from roofline.gpu_specs import attainable_tflops

REPORT_WIDTH = 80
SEPARATOR = "=" * REPORT_WIDTH
RULE = "-" * REPORT_WIDTH

MEMORY_BOUND = "memory-bound"
COMPUTE_BOUND = "compute-bound"

ReferenceWorkload = namedtuple("ReferenceWorkload", ["name", "intensity_label", "intensity"])

# Illustrative FP32 intensities (FLOP/byte), not measured
REFERENCE_WORKLOADS = (
    ReferenceWorkload("Vector addition", "~0.33", 0.33),
    ReferenceWorkload("Matrix-vector product", "~2", 2.0),
    ReferenceWorkload("Small dense matrix product", "~8", 8.0),
    ReferenceWorkload("Large dense matrix product", "~40+", 40.0),
    ReferenceWorkload("Large-kernel convolution", "~20-100", 50.0),
)

OPTIMIZATION_GUIDANCE = {
    MEMORY_BOUND: (
        "Coalesce global memory accesses so each warp touches contiguous addresses",
        "Fuse elementwise kernels to avoid round trips through global memory",
        "Stage reused data in shared memory or registers (tiling)",
        "Use vectorized loads and narrower data types (FP16/BF16/INT8)",
    ),
    COMPUTE_BOUND: (
        "Use tensor cores via mixed precision (FP16/BF16/TF32)",
        "Keep enough warps resident to hide instruction latency (occupancy)",
        "Prefer fused multiply-add and cheap intrinsics over expensive math",
        "Reduce warp divergence in inner loops",
    ),
}


def classify(intensity, ridge):
    """Label a workload memory-bound below the ridge point, compute-bound at or above it."""
    if intensity < ridge:
        return MEMORY_BOUND
    return COMPUTE_BOUND


def format_device_report(props, estimate) -> str:
    """
    Build the text report for one device

    Args:
        props: DeviceProperties
        estimate: RooflineEstimate computed from props

    Returns:
        str: multi-line report, no trailing newline
    """
    lines = [
        f"Device {props.index}: {props.name}",
        RULE,
        "Hardware",
        f"  Compute Capability:      {props.major}.{props.minor}",
        f"  SM Count:                {props.multi_processor_count}",
        f"  FP32 Cores / SM (est.):  {estimate.cores_per_sm}",
        f"  Core Clock:              {props.clock_rate_mhz:.0f} MHz",
        f"  Memory Clock:            {props.memory_clock_rate_mhz:.0f} MHz",
        f"  Memory Bus Width:        {props.memory_bus_width} bits",
        f"  Global Memory:           {props.total_memory / (1024**3):.2f} GB",
        f"  Shared Memory / Block:   {props.shared_memory_per_block / 1024:.0f} KB",
        "",
        "Theoretical Peaks",
        f"  Peak FP32 Throughput:    {estimate.peak_tflops:.2f} TFLOP/s",
        f"  Peak Memory Bandwidth:   {estimate.peak_bandwidth_gb_s:.2f} GB/s",
        f"  Ridge Point:             {estimate.ridge_point:.2f} FLOP/byte",
        "",
        "Reference Workloads",
        f"  {'Workload':<28} {'FLOP/byte':>10} {'Attainable':>16}  Bound",
    ]

    for workload in REFERENCE_WORKLOADS:
        bound = classify(workload.intensity, estimate.ridge_point)
        attainable = attainable_tflops(workload.intensity, estimate)
        lines.append(
            f"  {workload.name:<28} {workload.intensity_label:>10} "
            f"{attainable:>9.2f} TFLOP/s  {bound}"
        )

    lines += ["", "Optimization Guidance"]
    for bound in (MEMORY_BOUND, COMPUTE_BOUND):
        lines.append(f"  {bound} kernels:")
        lines += [f"    - {tip}" for tip in OPTIMIZATION_GUIDANCE[bound]]

    lines += [
        "",
        "Roofline Plot",
        f"  Compute roof:  y = {estimate.peak_tflops:.2f} TFLOP/s",
        f"  Memory roof:   y = {estimate.peak_bandwidth_gb_s:.2f} GB/s x AI / 1000 TFLOP/s",
        f"  Ridge point:   ({estimate.ridge_point:.2f} FLOP/byte, {estimate.peak_tflops:.2f} TFLOP/s)",
    ]

    return "\n".join(lines)
