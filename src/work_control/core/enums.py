from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for permissions on the backend."""

    VIEWER = "viewer"
    ADMIN = "admin"
    POST = "post"


class AttendanceStatus(str, Enum):
    """Daily presence status as stored by the backend."""

    PRESENT = "ishda"
    ABSENT = "kelmagan"
    OUT = "tashqarida"


class LogState(str, Enum):
    """State of a single check-in/check-out log entry."""

    PRESENT = "ishda"
    OUT = "tashqarida"
    UNKNOWN = "unknown"


class DayCountingMode(str, Enum):
    """How a day without logs is counted in attendance statistics."""

    OVERLAPPING = "overlapping"
    EXCLUSIVE = "exclusive"


class UserViewCapability(str, Enum):
    """Capability set of the user management view."""

    BASIC = "basic"
    EXTENDED = "extended"
