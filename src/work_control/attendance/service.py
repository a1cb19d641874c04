from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_time, format_uz_date
from ..common.filters import count_where, matches_search, rank_sort_key
from ..core.constants import (
    ALL,
    DEFAULT_LATE_THRESHOLD_MINUTES,
    DEFAULT_TRAILING_WINDOW_DAYS,
    EMPTY_VALUE,
    NO_DEPARTMENT_ID,
    NO_DEPARTMENT_NAME,
    NO_LOGS_COMMENT,
)
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..users.department_repository import DepartmentRepository
from ..users.model import User
from ..users.repository import UserRepository
from ..users.service import is_unassigned, matches_department
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .stats import calculate_stats
from .status import LOG_STATE_LABELS, STATUS_LABELS, classify_log, classify_status, late_minutes
from .strategies.base import DayCountingStrategy
from .strategies.overlapping_strategy import OverlappingCountingStrategy

logger = logging.getLogger(__name__)


STATUS_TABS = frozenset(s.value for s in AttendanceStatus)


def matches_status(user: User, status: Optional[str]) -> bool:
    """``all`` matches everyone; unknown user statuses were already folded into absent."""
    if not status or status == ALL:
        return True
    if status not in STATUS_TABS:
        raise ValidationError(f"Noma'lum holat: {status}")
    return user.attendance_status == AttendanceStatus(status)


def status_totals(users: list[User]) -> dict:
    return {
        "total": len(users),
        "present": count_where(users, lambda u: u.attendance_status == AttendanceStatus.PRESENT),
        "absent": count_where(users, lambda u: u.attendance_status == AttendanceStatus.ABSENT),
        "out": count_where(users, lambda u: u.attendance_status == AttendanceStatus.OUT),
    }


class AttendanceService:
    """Read-only attendance views built from users, departments and history."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        departments: DepartmentRepository,
        *,
        counting: DayCountingStrategy | None = None,
        late_threshold_minutes: int = DEFAULT_LATE_THRESHOLD_MINUTES,
        window_days: int = DEFAULT_TRAILING_WINDOW_DAYS,
    ):
        self._attendance = attendance
        self._users = users
        self._departments = departments
        self._counting = counting or OverlappingCountingStrategy()
        self._late_threshold = int(late_threshold_minutes)
        self._window_days = int(window_days)

    def department_board(self, *, search: str = "", status: str = ALL) -> dict:
        """Users grouped by department, filtered by search and status tab.

        Departments left without users after filtering are dropped.
        """
        departments = self._departments.list_all()
        users = self._users.list_all()

        buckets = [(d.department_id, d.name, [u for u in users if u.department_id == d.department_id]) for d in departments]
        known_ids = {d.department_id for d in departments}
        unassigned = [u for u in users if is_unassigned(u, known_ids)]
        if unassigned:
            buckets.append((NO_DEPARTMENT_ID, NO_DEPARTMENT_NAME, unassigned))

        groups = []
        for dept_id, name, members in buckets:
            visible = [
                u
                for u in members
                if matches_search(search, u.full_name, u.position, u.username) and matches_status(u, status)
            ]
            if visible:
                groups.append({"id": dept_id, "name": name, "users": [self._board_row(u) for u in visible]})

        return {"departments": groups, "totals": status_totals(users)}

    def staff_board(self, *, search: str = "", department_id: str = ALL, status: str = ALL) -> dict:
        """Flat staff list with entry/exit times and lateness, sorted by rank."""
        users = sorted(self._users.list_all(), key=lambda u: rank_sort_key(u.lavel))
        departments = self._departments.list_all()
        known_ids = {d.department_id for d in departments}

        rows = [
            self._staff_row(u)
            for u in users
            if matches_search(search, u.full_name, u.position, u.username, u.hodim_id)
            and matches_department(u, department_id, known_ids)
            and matches_status(u, status)
        ]

        late = count_where(
            users,
            lambda u: u.attendance_status in (AttendanceStatus.PRESENT, AttendanceStatus.OUT) and self._late_minutes(u) > 0,
        )
        return {
            "users": rows,
            "departments": [{"id": d.department_id, "name": d.name} for d in departments],
            "totals": {**status_totals(users), "late": late},
        }

    def user_history(self, user_id: str, *, today: Optional[date] = None) -> dict:
        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("Xodim topilmadi")

        history = list(self._attendance.history_for_user(user_id))
        stats = calculate_stats(history, today=today, counting=self._counting, window_days=self._window_days)
        logger.debug("history user=%s days=%d", user_id, len(history))

        return {
            "user": {
                "id": user.user_id,
                "full_name": user.full_name,
                "position": user.position or EMPTY_VALUE,
                "department": user.department.name if user.department else EMPTY_VALUE,
                "phone": user.phone or EMPTY_VALUE,
                "photo": user.photo,
                "attendance_status": user.attendance_status.value,
                "status_label": STATUS_LABELS[user.attendance_status],
            },
            "history": history_rows(history),
            "stats": stats.to_dict(),
        }

    def _late_minutes(self, user: User) -> int:
        return late_minutes(user.first_check_in_time, user.last_check_in_time, threshold_minutes=self._late_threshold)

    def _board_row(self, user: User) -> dict:
        return {
            "id": user.user_id,
            "full_name": user.full_name,
            "position": user.position,
            "photo": user.photo,
            "attendance_status": user.attendance_status.value,
            "status_label": STATUS_LABELS[user.attendance_status],
        }

    def _staff_row(self, user: User) -> dict:
        minutes = self._late_minutes(user)
        return {
            **self._board_row(user),
            "hodim_id": user.hodim_id,
            "lavel": user.lavel,
            "department": user.department.name if user.department else None,
            "entry_time": format_time(user.last_check_in_time, empty="-"),
            "exit_time": format_time(user.last_check_out_time, empty="-"),
            "comment": user.last_comment or "-",
            "is_late": minutes > 0,
            "late_minutes": minutes,
        }


def history_rows(history: list[AttendanceRecord]) -> list[dict]:
    """One row per log; a day without logs becomes a single placeholder row."""
    rows: list[dict] = []
    for record in history:
        if not record.logs:
            status = classify_status(record.status)
            rows.append(
                {
                    "date": format_uz_date(record.work_date),
                    "status": status.value,
                    "status_label": STATUS_LABELS[status],
                    "check_in": None,
                    "check_out": None,
                    "comment": NO_LOGS_COMMENT,
                }
            )
            continue
        for log in record.logs:
            state = classify_log(log.checkin, log.checkout)
            rows.append(
                {
                    "date": format_uz_date(log.work_date or record.work_date),
                    "status": state.value,
                    "status_label": LOG_STATE_LABELS[state],
                    "check_in": format_time(log.check_in_time),
                    "check_out": format_time(log.check_out_time),
                    "comment": log.comment or EMPTY_VALUE,
                }
            )
    return rows
