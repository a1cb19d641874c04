from __future__ import annotations

from ..model import AttendanceRecord
from .base import DayCountingStrategy


class ExclusiveCountingStrategy(DayCountingStrategy):
    """Every day is either present or absent, never both."""

    def is_absent(self, record: AttendanceRecord) -> bool:
        return not self.is_present(record)
