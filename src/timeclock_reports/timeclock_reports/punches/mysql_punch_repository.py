from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional, Sequence

from ..core.enums import PunchType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, from_db_datetime, in_clause, to_db_datetime
from ..employees.model import EmployeeFilter
from .model import AuditPunchRow, PunchEvent
from .repository import PunchRepository


def _to_punch(r: dict) -> PunchEvent:
    return PunchEvent(
        punch_id=str(r["punch_id"]),
        employee_id=str(r["employee_id"]),
        type=PunchType(r["type"]),
        occurred_at=from_db_datetime(r["occurred_at"]),
        notes=r.get("notes"),
    )


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_in_range(
        self,
        *,
        tenant_id: str,
        employee_ids: Sequence[str],
        start: datetime,
        end: datetime,
    ) -> Sequence[PunchEvent]:
        if not employee_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT punch_id, employee_id, type, occurred_at, notes
                FROM employee_punches
                WHERE tenant_id=%s
                  AND employee_id IN ({in_clause(employee_ids)})
                  AND occurred_at BETWEEN %s AND %s
                ORDER BY occurred_at ASC, seq ASC
                """,
                (tenant_id, *employee_ids, to_db_datetime(start), to_db_datetime(end)),
            )
            return [_to_punch(r) for r in fetchall(cur)]

    def last_before(
        self,
        *,
        tenant_id: str,
        employee_ids: Sequence[str],
        start: datetime,
    ) -> Mapping[str, PunchEvent]:
        if not employee_ids:
            return {}
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT punch_id, employee_id, type, occurred_at, notes
                FROM (
                    SELECT p.*,
                           ROW_NUMBER() OVER (PARTITION BY p.employee_id ORDER BY p.occurred_at DESC, p.seq DESC) AS rn
                    FROM employee_punches p
                    WHERE p.tenant_id=%s
                      AND p.employee_id IN ({in_clause(employee_ids)})
                      AND p.occurred_at < %s
                ) latest
                WHERE rn = 1
                """,
                (tenant_id, *employee_ids, to_db_datetime(start)),
            )
            return {p.employee_id: p for p in (_to_punch(r) for r in fetchall(cur))}

    def list_for_audit(
        self,
        *,
        tenant_id: str,
        start: datetime,
        end: datetime,
        filters: EmployeeFilter,
        punch_type: Optional[PunchType] = None,
        limit: int = 200,
    ) -> Sequence[AuditPunchRow]:
        clauses = ["p.tenant_id=%s", "p.occurred_at BETWEEN %s AND %s"]
        params: list[object] = [tenant_id, to_db_datetime(start), to_db_datetime(end)]

        if filters.employee_id:
            clauses.append("p.employee_id=%s")
            params.append(filters.employee_id)
        if filters.office_id:
            clauses.append("(e.office_id=%s OR e.office_id IS NULL)")
            params.append(filters.office_id)
        if filters.group_id:
            clauses.append("e.group_id=%s")
            params.append(filters.group_id)
        if punch_type is not None:
            clauses.append("p.type=%s")
            params.append(punch_type.value)

        where = " AND ".join(clauses)
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    p.punch_id, p.employee_id, p.type, p.occurred_at, p.notes,
                    COALESCE(NULLIF(e.display_name, ''), e.full_name) AS employee_name,
                    o.name AS office_name,
                    g.name AS group_name
                FROM employee_punches p
                JOIN employees e ON e.employee_id = p.employee_id
                LEFT JOIN offices o ON o.office_id = e.office_id
                LEFT JOIN employee_groups g ON g.group_id = e.group_id
                WHERE {where}
                ORDER BY p.occurred_at DESC, p.seq DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [
                AuditPunchRow(
                    punch_id=str(r["punch_id"]),
                    employee_id=str(r["employee_id"]),
                    employee_name=r["employee_name"],
                    office_name=r.get("office_name"),
                    group_name=r.get("group_name"),
                    type=PunchType(r["type"]),
                    occurred_at=from_db_datetime(r["occurred_at"]),
                    notes=r.get("notes"),
                )
                for r in fetchall(cur)
            ]
