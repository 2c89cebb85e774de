"""
Roofline Reporter CLI
Prints a theoretical roofline report for every CUDA device.

Usage:
  roofline-report
  python -m roofline
"""

import sys

from roofline.device_query import CudaDeviceAPI, query_devices
from roofline.errors import DeviceQueryError, NoDevicesFoundError, ZeroBandwidthError
from roofline.gpu_specs import estimate_roofline
from roofline.report import SEPARATOR, format_device_report


def main(api=None) -> int:
    if api is None:
        api = CudaDeviceAPI()

    try:
        for i, props in enumerate(query_devices(api)):
            estimate = estimate_roofline(props)
            if i > 0:
                print(SEPARATOR)
            print(format_device_report(props, estimate))

    except NoDevicesFoundError as e:
        print(e)
        return 1
    except DeviceQueryError as e:
        print(f"ERROR: device query failed: {e}", file=sys.stderr)
        return 1
    except ZeroBandwidthError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
