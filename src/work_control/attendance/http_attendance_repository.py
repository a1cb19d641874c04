from __future__ import annotations

from typing import Sequence

from ..api.connection import ApiClient
from .model import AttendanceRecord
from .repository import AttendanceRepository


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def history_for_user(self, user_id: str) -> Sequence[AttendanceRecord]:
        payload = self._client.get(f"/api/user/attandance/{user_id}")
        return [AttendanceRecord.from_api(r) for r in payload.get("attendanceHistory") or []]
