from __future__ import annotations

from abc import ABC, abstractmethod

from ...ledger.model import WeekPayBucket


class PayCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    multiplier: float

    @abstractmethod
    def week_pay(self, *, week_start: str, minutes: float, hourly_rate: float) -> WeekPayBucket:
        raise NotImplementedError
