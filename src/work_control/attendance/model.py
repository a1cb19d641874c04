from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import parse_iso_datetime


@dataclass(frozen=True)
class AttendanceLog:
    """One check-in/check-out pair inside a day."""

    work_date: Optional[date]
    checkin: Optional[bool]
    checkout: Optional[bool]
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    comment: Optional[str] = None

    @classmethod
    def from_api(cls, raw: dict) -> "AttendanceLog":
        log_date = parse_iso_datetime(raw.get("date"))
        return cls(
            work_date=log_date.date() if log_date else None,
            checkin=raw.get("checkin"),
            checkout=raw.get("checkout"),
            check_in_time=parse_iso_datetime(raw.get("checkInTime")),
            check_out_time=parse_iso_datetime(raw.get("checkOutTime")),
            comment=raw.get("comment"),
        )


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one day of a user's attendance history."""

    work_date: Optional[date]
    status: Optional[str]
    hours_worked: float = 0.0
    logs: tuple[AttendanceLog, ...] = field(default_factory=tuple)

    @property
    def has_checkin(self) -> bool:
        return any(log.checkin for log in self.logs)

    @classmethod
    def from_api(cls, raw: dict) -> "AttendanceRecord":
        rec_date = parse_iso_datetime(raw.get("date"))
        return cls(
            work_date=rec_date.date() if rec_date else None,
            status=raw.get("status"),
            hours_worked=float(raw.get("hoursWorked") or 0),
            logs=tuple(AttendanceLog.from_api(x) for x in (raw.get("logs") or [])),
        )
