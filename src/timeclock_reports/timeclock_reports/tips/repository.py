from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import EmployeeTip


class TipRepository(Protocol):
    def list_in_range(
        self,
        *,
        tenant_id: str,
        employee_ids: Sequence[str],
        start: date,
        end: date,
    ) -> Sequence[EmployeeTip]:
        """Tips with ``start <= work_date <= end``, by employee then date."""

        raise NotImplementedError
