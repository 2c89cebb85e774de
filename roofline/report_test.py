"""
Test suite for workload classification and the text report
"""

import math

import pytest

from roofline.gpu_specs import estimate_roofline
from roofline.report import (
    COMPUTE_BOUND,
    MEMORY_BOUND,
    OPTIMIZATION_GUIDANCE,
    REFERENCE_WORKLOADS,
    SEPARATOR,
    classify,
    format_device_report,
)


def test_classify_below_ridge_is_memory_bound():
    assert classify(0.33, 12.5) == MEMORY_BOUND
    assert classify(math.nextafter(12.5, 0), 12.5) == MEMORY_BOUND


def test_classify_at_ridge_is_compute_bound():
    assert classify(12.5, 12.5) == COMPUTE_BOUND


def test_classify_above_ridge_is_compute_bound():
    assert classify(math.nextafter(12.5, math.inf), 12.5) == COMPUTE_BOUND
    assert classify(40.0, 12.5) == COMPUTE_BOUND


@pytest.mark.parametrize("ridge", [0.1, 1.0, 5.0, 12.53, 65.6, 200.0])
def test_classify_monotonic(ridge):
    labels = [classify(w.intensity, ridge) for w in
              sorted(REFERENCE_WORKLOADS, key=lambda w: w.intensity)]

    # once compute-bound, never memory-bound again
    first_compute = labels.index(COMPUTE_BOUND) if COMPUTE_BOUND in labels else len(labels)
    assert all(label == MEMORY_BOUND for label in labels[:first_compute])
    assert all(label == COMPUTE_BOUND for label in labels[first_compute:])


def test_reference_workloads():
    intensities = {w.name: w.intensity for w in REFERENCE_WORKLOADS}
    assert intensities == {
        "Vector addition": 0.33,
        "Matrix-vector product": 2.0,
        "Small dense matrix product": 8.0,
        "Large dense matrix product": 40.0,
        "Large-kernel convolution": 50.0,
    }


def _workload_line(report, name):
    return next(line for line in report.splitlines() if line.strip().startswith(name))


def test_report_a100(a100):
    estimate = estimate_roofline(a100)
    report = format_device_report(a100, estimate)

    assert "Device 0: NVIDIA A100-SXM4-40GB" in report
    assert "Compute Capability:      8.0" in report
    assert "SM Count:                108" in report
    assert "FP32 Cores / SM (est.):  64" in report
    assert "Core Clock:              1410 MHz" in report
    assert "Memory Clock:            1215 MHz" in report
    assert "Memory Bus Width:        5120 bits" in report
    assert "Global Memory:           40.00 GB" in report
    assert "Shared Memory / Block:   48 KB" in report

    assert "Peak FP32 Throughput:    19.49 TFLOP/s" in report
    assert "Peak Memory Bandwidth:   1555.20 GB/s" in report
    assert "Ridge Point:             12.53 FLOP/byte" in report

    assert _workload_line(report, "Vector addition").endswith(MEMORY_BOUND)
    assert _workload_line(report, "Matrix-vector product").endswith(MEMORY_BOUND)
    assert _workload_line(report, "Small dense matrix product").endswith(MEMORY_BOUND)
    assert _workload_line(report, "Large dense matrix product").endswith(COMPUTE_BOUND)
    assert _workload_line(report, "Large-kernel convolution").endswith(COMPUTE_BOUND)

    # 1555.2 GB/s x 0.33 FLOP/B
    assert "0.51 TFLOP/s" in _workload_line(report, "Vector addition")
    assert "19.49 TFLOP/s" in _workload_line(report, "Large dense matrix product")

    assert "Compute roof:  y = 19.49 TFLOP/s" in report
    assert "Memory roof:   y = 1555.20 GB/s x AI / 1000 TFLOP/s" in report
    assert "Ridge point:   (12.53 FLOP/byte, 19.49 TFLOP/s)" in report


def test_report_high_ridge_device_is_all_memory_bound(rtx_4070_ti_super):
    estimate = estimate_roofline(rtx_4070_ti_super)
    report = format_device_report(rtx_4070_ti_super, estimate)

    assert estimate.ridge_point > 50.0
    for workload in REFERENCE_WORKLOADS:
        assert _workload_line(report, workload.name).endswith(MEMORY_BOUND)


def test_report_contains_guidance(a100):
    report = format_device_report(a100, estimate_roofline(a100))

    for bound, tips in OPTIMIZATION_GUIDANCE.items():
        assert f"{bound} kernels:" in report
        for tip in tips:
            assert tip in report


def test_report_is_deterministic_and_has_no_separator(a100):
    estimate = estimate_roofline(a100)
    first = format_device_report(a100, estimate)

    assert first == format_device_report(a100, estimate)
    assert SEPARATOR not in first.splitlines()
    assert not first.endswith("\n")
