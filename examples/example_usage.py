"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the use cases live in the services.
"""

import importlib

from roster_tracker.config import get_settings_module
from roster_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, access_code=settings.ACCESS_CODE)
    print(container.insights_service.dashboard_stats().to_dict())
    for row in container.insights_service.top_attenders(limit=5):
        print(row.name, row.attendance_count)


if __name__ == "__main__":
    main()
