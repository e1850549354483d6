from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee, EmployeeFilter
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_employees(self, *, tenant_id: str, filters: EmployeeFilter) -> Sequence[Employee]:
        clauses = ["tenant_id=%s"]
        params: list[object] = [tenant_id]

        if filters.employee_id:
            clauses.append("employee_id=%s")
            params.append(filters.employee_id)
        if filters.office_id:
            clauses.append("(office_id=%s OR office_id IS NULL)")
            params.append(filters.office_id)
        if filters.group_id:
            clauses.append("group_id=%s")
            params.append(filters.group_id)
        if filters.servers_only:
            clauses.append("is_server=1")

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, full_name, display_name, hourly_rate, office_id, group_id, is_server
                FROM employees
                WHERE {where}
                ORDER BY full_name ASC
                """,
                tuple(params),
            )
            return [
                Employee(
                    employee_id=str(r["employee_id"]),
                    full_name=r["full_name"],
                    display_name=r.get("display_name"),
                    hourly_rate=float(r["hourly_rate"]) if r.get("hourly_rate") is not None else None,
                    office_id=r.get("office_id"),
                    group_id=r.get("group_id"),
                    is_server=bool(r.get("is_server")),
                )
                for r in fetchall(cur)
            ]
