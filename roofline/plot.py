"""
Roofline Plotting
Draws the theoretical roofline chart for a device and tabulates estimates.
"""

import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from roofline.device_query import query_devices
from roofline.gpu_specs import attainable_tflops, estimate_roofline
from roofline.report import REFERENCE_WORKLOADS, classify, MEMORY_BOUND

# Arithmetic intensity range (FLOP/byte)
AI_MIN_EXP = -2
AI_MAX_EXP = 3
AI_POINTS = 1000


def roofline_curve(estimate, intensities):
    """Attainable TFLOP/s along the roofline for each intensity."""
    return attainable_tflops(np.asarray(intensities, dtype=float), estimate)


def plot_device_roofline(props, estimate, output_path):
    """
    Save a log-log roofline chart with the reference workloads marked

    Args:
        props: DeviceProperties
        estimate: RooflineEstimate for props
        output_path: PNG path

    Returns:
        str: output_path
    """
    ai = np.logspace(AI_MIN_EXP, AI_MAX_EXP, AI_POINTS)
    memory_roof = estimate.peak_bandwidth_gb_s * ai / 1000
    compute_roof = np.full_like(ai, estimate.peak_tflops)

    fig, ax = plt.subplots(figsize=(10, 7))

    ax.loglog(ai, memory_roof, '--', label='Memory Roof', color='darkorange', linewidth=1.5)
    ax.loglog(ai, compute_roof, '-', label='Compute Roof', color='royalblue', linewidth=1.5)
    ax.loglog(ai, roofline_curve(estimate, ai), '-', label='Roofline', color='black', linewidth=2.5)

    ax.axvline(estimate.ridge_point, color='gray', linestyle=':', linewidth=1)
    ax.annotate(f'Ridge {estimate.ridge_point:.2f} FLOP/B',
                xy=(estimate.ridge_point, estimate.peak_tflops),
                xytext=(5, -20), textcoords='offset points', fontsize=10)

    for workload in REFERENCE_WORKLOADS:
        y = attainable_tflops(workload.intensity, estimate)
        bound = classify(workload.intensity, estimate.ridge_point)
        color = '#ff7f0e' if bound == MEMORY_BOUND else '#1f77b4'
        ax.scatter([workload.intensity], [y], color=color, edgecolors='black', s=60, zorder=3)
        ax.annotate(workload.name, xy=(workload.intensity, y),
                    xytext=(5, 5), textcoords='offset points', fontsize=9)

    ax.set_xlabel('Arithmetic Intensity (FLOP / Byte)', fontsize=12)
    ax.set_ylabel('Attainable Performance (TFLOP/s)', fontsize=12)
    ax.set_title(f'{props.name} Theoretical Roofline', fontsize=14, fontweight='bold')
    ax.legend(fontsize=11)
    ax.grid(True, which='both', linestyle='--', alpha=0.3)

    plt.tight_layout()
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return output_path


def estimates_dataframe(rows):
    """
    Tabulate estimates, one row per device

    Args:
        rows: iterable of (DeviceProperties, RooflineEstimate)

    Returns:
        pd.DataFrame
    """
    records = []
    for props, estimate in rows:
        records.append({
            'index': props.index,
            'name': props.name,
            'compute_capability': f'{props.major}.{props.minor}',
            'sm_count': props.multi_processor_count,
            'cores_per_sm': estimate.cores_per_sm,
            'peak_tflops': estimate.peak_tflops,
            'peak_bandwidth_gb_s': estimate.peak_bandwidth_gb_s,
            'ridge_point': estimate.ridge_point,
        })
    return pd.DataFrame.from_records(records, columns=[
        'index', 'name', 'compute_capability', 'sm_count', 'cores_per_sm',
        'peak_tflops', 'peak_bandwidth_gb_s', 'ridge_point',
    ])


def write_roofline_plots(output_dir, api):
    """
    Write roofline_<index>.png per device and roofline_estimates.csv

    Every device is queried and estimated before anything is written,
    so a failing device leaves output_dir untouched.

    Raises:
        NoDevicesFoundError, DeviceQueryError, ZeroBandwidthError

    Returns:
        list[str]: paths written
    """
    rows = [(props, estimate_roofline(props)) for props in query_devices(api)]

    os.makedirs(output_dir, exist_ok=True)

    written = []
    for props, estimate in rows:
        png_path = os.path.join(output_dir, f'roofline_{props.index}.png')
        written.append(plot_device_roofline(props, estimate, png_path))

    csv_path = os.path.join(output_dir, 'roofline_estimates.csv')
    estimates_dataframe(rows).to_csv(csv_path, index=False)
    written.append(csv_path)
    return written
