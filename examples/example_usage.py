"""Example: call the report service directly (no Flask).

Controllers are a thin layer; the report logic lives in services and the
ledger engine. Run ``scripts/seed_db.py`` first for the demo tenant.
"""

import importlib
import json
from datetime import date

from config import get_settings_module

from timeclock_reports.container import build_container

DEMO_TENANT = "00000000-0000-0000-0000-000000000001"


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    report = container.report_service.get_payroll_report(
        tenant_id=DEMO_TENANT,
        start=date(2026, 1, 5),
        end=date(2026, 1, 11),
        tz_offset=-300,
    )
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
