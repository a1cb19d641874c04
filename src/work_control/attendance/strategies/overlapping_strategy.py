from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import DayCountingStrategy


class OverlappingCountingStrategy(DayCountingStrategy):
    """A day without logs is absent even when its status says present.

    Such a day is counted on both sides, so present + absent may exceed
    the total number of days.
    """

    def is_absent(self, record: AttendanceRecord) -> bool:
        return record.status == AttendanceStatus.ABSENT.value or len(record.logs) == 0
