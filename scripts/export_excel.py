from __future__ import annotations

import argparse
import importlib
import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.factory_dashboard.factory_dashboard.common.datetime_utils import parse_iso_date
from src.factory_dashboard.factory_dashboard.export.rows import MANPOWER_COLUMNS, MASTER_PLAN_COLUMNS, PROJECT_COLUMNS
from src.factory_dashboard.factory_dashboard.filtering.query import ListQuery
from src.factory_dashboard.factory_dashboard.main import create_app


def main() -> None:
    parser = argparse.ArgumentParser(description="Export dashboard tables to .xlsx")
    parser.add_argument("--username", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--start", default=date.today().replace(day=1).isoformat())
    parser.add_argument("--end", default=date.today().isoformat())
    parser.add_argument("--search", default="")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    container = create_app()
    if not container.auth_service.login(args.username, args.password):
        raise SystemExit("Invalid username or password")

    query = ListQuery(start=parse_iso_date(args.start), end=parse_iso_date(args.end), search=args.search)
    export_dir = getattr(settings, "EXPORT_DIR", "exports")

    exporter = container.exporter
    outputs = [
        exporter.write(container.manpower_service.export_rows(query), filename="Manpower_Tracking", directory=export_dir, columns=MANPOWER_COLUMNS),
        exporter.write(container.project_service.export_rows(query), filename="Project_Tracking", directory=export_dir, columns=PROJECT_COLUMNS),
        exporter.write(
            container.master_plan_service.export_rows(ListQuery(search=args.search)),
            filename="Master_Plan",
            directory=export_dir,
            columns=MASTER_PLAN_COLUMNS,
        ),
    ]

    for path in outputs:
        print(f"OK: {path}")


if __name__ == "__main__":
    main()
