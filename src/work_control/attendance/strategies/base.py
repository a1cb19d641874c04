from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord


class DayCountingStrategy(ABC):
    """Strategy Pattern: decide whether a history day counts as present/absent."""

    def is_present(self, record: AttendanceRecord) -> bool:
        return record.status == AttendanceStatus.PRESENT.value or record.has_checkin

    @abstractmethod
    def is_absent(self, record: AttendanceRecord) -> bool:
        raise NotImplementedError
