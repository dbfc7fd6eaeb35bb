"""Back up the member roster as CSV.

Writes ``backups/members_<timestamp>.csv`` in the same format the dashboard
exports, so the file can be re-imported as-is.
"""

from __future__ import annotations

import importlib
from datetime import datetime
from pathlib import Path

from roster_tracker.config import get_settings_module
from roster_tracker.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, access_code=settings.ACCESS_CODE)

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"members_{ts}.csv"
    out_file.write_text(container.member_service.export_csv(), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
