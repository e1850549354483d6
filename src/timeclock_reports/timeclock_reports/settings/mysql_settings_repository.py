from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import TenantSettings
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_tenant(self, tenant_id: str) -> Optional[TenantSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT timezone, rounding_minutes, reports_enabled
                FROM tenant_settings
                WHERE tenant_id=%s
                """,
                (tenant_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return TenantSettings(
                timezone=r["timezone"],
                rounding_minutes=int(r["rounding_minutes"]),
                reports_enabled=bool(r["reports_enabled"]),
            )
