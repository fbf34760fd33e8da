"""Example: use the service layer directly (no UI).

Logs in as a non-admin, lists the manpower tasks of February 2026 sorted by
duration, then prints the weekly chart buckets.
"""

from datetime import date

from src.factory_dashboard.factory_dashboard.filtering.query import ListQuery
from src.factory_dashboard.factory_dashboard.main import create_app
from src.factory_dashboard.factory_dashboard.sorting.engine import SortState


def main():
    container = create_app()
    if not container.auth_service.login("somchai", "password"):
        raise SystemExit("login failed")

    query = ListQuery(
        start=date(2026, 2, 1),
        end=date(2026, 2, 28),
        sort=SortState.toggle(None, "duration"),
    )
    for row in container.manpower_service.export_rows(query):
        print(row)

    for chart in container.manpower_service.charts(query):
        print(chart.user_name, chart.buckets)


if __name__ == "__main__":
    main()
