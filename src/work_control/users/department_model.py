from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_datetime


@dataclass(frozen=True)
class DepartmentRef:
    """Department as embedded in a user payload."""

    department_id: str
    name: str

    @classmethod
    def from_api(cls, raw: Any) -> Optional["DepartmentRef"]:
        if not raw:
            return None
        if isinstance(raw, str):
            return cls(department_id=raw, name="")
        return cls(department_id=str(raw.get("_id", "")), name=raw.get("name") or "")


@dataclass(frozen=True)
class DepartmentHead:
    user_id: str
    full_name: str
    position: Optional[str] = None
    phone: Optional[str] = None
    hodim_id: Optional[str] = None

    @classmethod
    def from_api(cls, raw: Any) -> Optional["DepartmentHead"]:
        if not raw:
            return None
        if isinstance(raw, str):
            return cls(user_id=raw, full_name="")
        return cls(
            user_id=str(raw.get("_id", "")),
            full_name=raw.get("fullName") or "",
            position=raw.get("position"),
            phone=raw.get("phone") or raw.get("phone_work"),
            hodim_id=raw.get("hodimID"),
        )


@dataclass(frozen=True)
class Department:
    department_id: str
    name: str
    description: Optional[str] = None
    head: Optional[DepartmentHead] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, raw: dict) -> "Department":
        return cls(
            department_id=str(raw.get("_id", "")),
            name=raw.get("name") or "",
            description=raw.get("description"),
            head=DepartmentHead.from_api(raw.get("head")),
            created_at=parse_iso_datetime(raw.get("createdAt")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.department_id,
            "name": self.name,
            "description": self.description,
            "head": (
                {
                    "id": self.head.user_id,
                    "full_name": self.head.full_name,
                    "position": self.head.position,
                    "phone": self.head.phone,
                    "hodim_id": self.head.hodim_id,
                }
                if self.head
                else None
            ),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
