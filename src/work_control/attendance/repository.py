from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def history_for_user(self, user_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
