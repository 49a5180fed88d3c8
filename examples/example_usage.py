"""Example: drive the service layer directly (no Flask).

Prints the grid of the current month for the first business of a user.
"""

import importlib
import sys

from config import get_settings_module

from src.pontaj_system.pontaj_system.common.datetime_utils import now_local
from src.pontaj_system.pontaj_system.container import build_container


def main(user_id: str):
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, hours_model=settings.HOURS_MODEL)

    business = container.business_service.list_businesses(user_id=user_id)[0]
    today = now_local()
    plan = container.plan_service.get_or_create(
        user_id=user_id,
        business_id=business.business_id,
        month=today.month,
        year=today.year,
    )
    grid = container.plan_service.build_grid(user_id=user_id, plan_id=plan.plan_id)

    print(f"{grid.title} - {grid.location_name}")
    for row in grid.rows:
        codes = " ".join((row.cells[d.day].code if d.day in row.cells else ".").rjust(2) for d in grid.days)
        print(f"{row.full_name:<24} {codes} | {row.total_hours}h")
    for note in grid.leave_footnotes + grid.resignation_footnotes:
        print(note.label)


if __name__ == "__main__":
    main(sys.argv[1])
