"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the attendance logic lives in the services.
Usage: API_BASE_URL=... WORK_CONTROL_TOKEN=... python examples/example_usage.py <user_id>
"""

import importlib
import os
import sys

from work_control.config import get_settings_module
from work_control.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    services = container.services_for(os.environ["WORK_CONTROL_TOKEN"])

    try:
        report = services.attendance_service.user_history(sys.argv[1])
    finally:
        services.close()
    print(report["user"]["full_name"], report["stats"])


if __name__ == "__main__":
    main()
