#!/usr/bin/env python3
"""
Roofline Plotting Script
Generate theoretical roofline charts and an estimates CSV for every CUDA device
"""

import os
import sys

from roofline.device_query import CudaDeviceAPI
from roofline.errors import DeviceQueryError, NoDevicesFoundError, ZeroBandwidthError
from roofline.plot import write_roofline_plots

script_dir = os.path.dirname(os.path.abspath(__file__))
project_dir = os.path.dirname(script_dir)
output_dir = os.environ.get("ROOFLINE_PLOT_DIR", os.path.join(project_dir, 'profiling_results'))


def main() -> int:
    try:
        written = write_roofline_plots(output_dir, CudaDeviceAPI())
    except NoDevicesFoundError as e:
        print(e)
        return 1
    except (DeviceQueryError, ZeroBandwidthError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for path in written:
        print(f"✓ Saved: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
