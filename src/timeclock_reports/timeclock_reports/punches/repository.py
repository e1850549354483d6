from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional, Protocol, Sequence

from ..core.enums import PunchType
from ..employees.model import EmployeeFilter
from .model import AuditPunchRow, PunchEvent


class PunchRepository(Protocol):
    """Read side of the punch store.

    The report service depends on this interface, not on a concrete DB.
    """

    def list_in_range(
        self,
        *,
        tenant_id: str,
        employee_ids: Sequence[str],
        start: datetime,
        end: datetime,
    ) -> Sequence[PunchEvent]:
        """Punches with ``start <= occurred_at <= end``, ascending by time."""

        raise NotImplementedError

    def last_before(
        self,
        *,
        tenant_id: str,
        employee_ids: Sequence[str],
        start: datetime,
    ) -> Mapping[str, PunchEvent]:
        """Latest punch strictly before ``start``, keyed by employee id."""

        raise NotImplementedError

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
        """Raw punches in the window, most recent first."""

        raise NotImplementedError
