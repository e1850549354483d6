from __future__ import annotations

from dataclasses import dataclass

from .core.constants import MAX_AUDIT_LIMIT
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .punches.mysql_punch_repository import MySQLPunchRepository
from .reports.service import ReportService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .tips.mysql_tip_repository import MySQLTipRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    punches_repo: MySQLPunchRepository
    employees_repo: MySQLEmployeeRepository
    settings_repo: MySQLSettingsRepository
    tips_repo: MySQLTipRepository

    report_service: ReportService


def build_container(*, db_config: dict, audit_max_limit: int = MAX_AUDIT_LIMIT) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    punches_repo = MySQLPunchRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    settings_repo = MySQLSettingsRepository(conn)
    tips_repo = MySQLTipRepository(conn)

    report_service = ReportService(
        punches_repo,
        employees_repo,
        settings_repo,
        tips_repo,
        max_audit_limit=audit_max_limit,
    )

    return Container(
        conn=conn,
        punches_repo=punches_repo,
        employees_repo=employees_repo,
        settings_repo=settings_repo,
        tips_repo=tips_repo,
        report_service=report_service,
    )
