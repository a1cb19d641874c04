"""Attendance status derivation shared by every attendance view.

Everything here is pure: no HTTP, no Flask.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_LATE_THRESHOLD_MINUTES
from ..core.enums import AttendanceStatus, LogState

STATUS_LABELS = {
    AttendanceStatus.PRESENT: "Ishda",
    AttendanceStatus.OUT: "Tashqarida",
    AttendanceStatus.ABSENT: "Kelmadi",
}

LOG_STATE_LABELS = {
    LogState.PRESENT: "Ishda",
    LogState.OUT: "Tashqarida",
    LogState.UNKNOWN: "Noma'lum",
}


def classify_status(raw: Optional[str]) -> AttendanceStatus:
    """Map a backend status string to a status; anything unknown is absent."""
    try:
        return AttendanceStatus(raw)
    except ValueError:
        return AttendanceStatus.ABSENT


def classify_log(checkin: Optional[bool], checkout: Optional[bool]) -> LogState:
    if checkin is True and checkout is None:
        return LogState.PRESENT
    if checkout is True:
        return LogState.OUT
    return LogState.UNKNOWN


def status_label(raw: Optional[str]) -> str:
    return STATUS_LABELS[classify_status(raw)]


def late_minutes(
    first_check_in: Optional[datetime],
    actual_check_in: Optional[datetime],
    *,
    threshold_minutes: int = DEFAULT_LATE_THRESHOLD_MINUTES,
) -> int:
    """Whole minutes late, or 0 when on time or either time is unknown.

    Late means the actual check-in is strictly more than ``threshold_minutes``
    after the day's reference first check-in.
    """
    if not first_check_in or not actual_check_in:
        return 0
    diff = (actual_check_in - first_check_in).total_seconds() / 60
    if diff <= threshold_minutes:
        return 0
    return int(math.floor(diff))


def is_late(
    first_check_in: Optional[datetime],
    actual_check_in: Optional[datetime],
    *,
    threshold_minutes: int = DEFAULT_LATE_THRESHOLD_MINUTES,
) -> bool:
    return late_minutes(first_check_in, actual_check_in, threshold_minutes=threshold_minutes) > 0
