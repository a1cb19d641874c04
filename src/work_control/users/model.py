from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..attendance.status import classify_status
from ..common.datetime_utils import parse_iso_datetime
from ..core.enums import AttendanceStatus, Role
from .department_model import DepartmentRef


def _role(value: Optional[str]) -> Role:
    try:
        return Role(value or Role.VIEWER.value)
    except ValueError:
        return Role.VIEWER


def _lavel(value) -> Optional[int]:
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class User:
    """Domain entity: an employee as returned by the backend.

    Note: the password is write-only and never part of this object.
    """

    user_id: str
    full_name: str
    username: str
    position: str = ""
    department: Optional[DepartmentRef] = None
    hodim_id: Optional[str] = None
    lavel: Optional[int] = None
    role: Role = Role.VIEWER
    birthday: Optional[date] = None
    phone_personal: Optional[str] = None
    phone_work: Optional[str] = None
    phone: Optional[str] = None
    photo: Optional[str] = None
    attendance_status: AttendanceStatus = AttendanceStatus.ABSENT
    first_check_in_time: Optional[datetime] = None
    last_check_in_time: Optional[datetime] = None
    last_check_out_time: Optional[datetime] = None
    last_comment: Optional[str] = None
    is_edit: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def department_id(self) -> Optional[str]:
        return self.department.department_id if self.department else None

    @classmethod
    def from_api(cls, raw: dict) -> "User":
        birthday = parse_iso_datetime(raw.get("birthday"))
        return cls(
            user_id=str(raw.get("_id", "")),
            full_name=raw.get("fullName") or "",
            username=raw.get("username") or "",
            position=raw.get("position") or "",
            department=DepartmentRef.from_api(raw.get("department")),
            hodim_id=raw.get("hodimID") or None,
            lavel=_lavel(raw.get("lavel")),
            role=_role(raw.get("role")),
            birthday=birthday.date() if birthday else None,
            phone_personal=raw.get("phone_personal"),
            phone_work=raw.get("phone_work"),
            phone=raw.get("phone"),
            photo=raw.get("photo"),
            attendance_status=classify_status(raw.get("attendanceStatus")),
            first_check_in_time=parse_iso_datetime(raw.get("firstCheckInTime")),
            last_check_in_time=parse_iso_datetime(raw.get("lastCheckInTime")),
            last_check_out_time=parse_iso_datetime(raw.get("lastCheckOutTime")),
            last_comment=raw.get("lastComment"),
            is_edit=bool(raw.get("isEdit", True)),
            created_at=parse_iso_datetime(raw.get("createdAt")),
            updated_at=parse_iso_datetime(raw.get("updatedAt")),
        )


@dataclass
class UserForm:
    """Profile fields submitted on create/update.

    Empty ``password``/``department`` and an unset ``is_edit`` are left out
    of the request so the backend keeps the stored values.
    """

    full_name: str
    username: str
    position: str = ""
    department_id: Optional[str] = None
    password: Optional[str] = None
    hodim_id: str = ""
    lavel: Optional[int] = None
    role: Role = Role.VIEWER
    birthday: str = ""
    phone_personal: str = ""
    phone_work: str = ""
    is_edit: Optional[bool] = True
    image: Optional[bytes] = None
    image_filename: str = "photo.jpg"

    def to_form_fields(self) -> dict:
        fields = {
            "fullName": self.full_name,
            "position": self.position,
            "username": self.username,
            "hodimID": self.hodim_id,
            "role": self.role.value,
            "lavel": "" if self.lavel is None else str(self.lavel),
            "birthday": self.birthday,
            "phone_personal": self.phone_personal,
            "phone_work": self.phone_work,
        }
        if self.is_edit is not None:
            fields["isEdit"] = "true" if self.is_edit else "false"
        if self.password:
            fields["password"] = self.password
        if self.department_id:
            fields["department"] = self.department_id
        return fields
