"""
GPU Roofline Reporter
Theoretical peak throughput, peak bandwidth and ridge point per CUDA device.
"""

from roofline.errors import (
    DeviceQueryError,
    NoDevicesFoundError,
    RooflineError,
    ZeroBandwidthError,
)
from roofline.gpu_specs import (
    RooflineEstimate,
    estimate_roofline,
    get_cores_per_sm,
    peak_bandwidth,
    peak_throughput,
    ridge_point,
)

__version__ = "0.1.0"
