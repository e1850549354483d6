from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class EmployeeTip:
    """Tips declared by a server for one work date."""

    employee_id: str
    work_date: date
    cash_tips: float
    credit_card_tips: float
