from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Optional, Sequence

from ..core.constants import DEFAULT_TRAILING_WINDOW_DAYS
from .model import AttendanceRecord
from .strategies.base import DayCountingStrategy
from .strategies.overlapping_strategy import OverlappingCountingStrategy


@dataclass(frozen=True)
class AttendanceStats:
    total_days: int = 0
    present_days: int = 0
    absent_days: int = 0
    average_hours: float = 0.0
    last_month_present: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_stats(
    history: Sequence[AttendanceRecord],
    *,
    today: Optional[date] = None,
    counting: Optional[DayCountingStrategy] = None,
    window_days: int = DEFAULT_TRAILING_WINDOW_DAYS,
) -> AttendanceStats:
    """Aggregate a user's attendance history.

    ``average_hours`` is total hours over present days, rounded to one
    decimal, and 0 when there are no present days. ``last_month_present``
    counts present days dated within the trailing ``window_days``.
    """
    counting = counting or OverlappingCountingStrategy()
    today = today or date.today()
    since = today - timedelta(days=window_days)

    present = [r for r in history if counting.is_present(r)]
    absent_days = sum(1 for r in history if counting.is_absent(r))
    total_hours = sum(r.hours_worked or 0 for r in history)

    average = round(total_hours / len(present), 1) if present else 0.0
    recent = sum(1 for r in present if r.work_date is not None and since <= r.work_date <= today)

    return AttendanceStats(
        total_days=len(history),
        present_days=len(present),
        absent_days=absent_days,
        average_hours=average,
        last_month_present=recent,
    )
