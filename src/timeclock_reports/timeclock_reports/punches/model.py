from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PunchType


@dataclass(frozen=True)
class PunchEvent:
    """Domain entity: one clock event. Never mutated by the reports engine."""

    employee_id: str
    type: PunchType
    occurred_at: datetime
    notes: Optional[str] = None
    punch_id: Optional[str] = None


@dataclass(frozen=True)
class AuditPunchRow:
    """Read-model for the audit view (punch joined with employee display data)."""

    punch_id: str
    employee_id: str
    employee_name: str
    office_name: Optional[str]
    group_name: Optional[str]
    type: PunchType
    occurred_at: datetime
    notes: Optional[str] = None
