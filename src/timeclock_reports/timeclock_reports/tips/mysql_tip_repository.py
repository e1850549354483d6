from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause
from .model import EmployeeTip
from .repository import TipRepository


class MySQLTipRepository(TipRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_in_range(
        self,
        *,
        tenant_id: str,
        employee_ids: Sequence[str],
        start: date,
        end: date,
    ) -> Sequence[EmployeeTip]:
        if not employee_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, work_date, cash_tips, credit_card_tips
                FROM employee_tips
                WHERE tenant_id=%s
                  AND employee_id IN ({in_clause(employee_ids)})
                  AND work_date BETWEEN %s AND %s
                ORDER BY employee_id ASC, work_date ASC
                """,
                (tenant_id, *employee_ids, start, end),
            )
            return [
                EmployeeTip(
                    employee_id=str(r["employee_id"]),
                    work_date=r["work_date"],
                    cash_tips=float(r["cash_tips"] or 0),
                    credit_card_tips=float(r["credit_card_tips"] or 0),
                )
                for r in fetchall(cur)
            ]
