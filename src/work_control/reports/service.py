from __future__ import annotations

import io
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

import pandas as pd

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..attendance.service import history_rows
from ..attendance.status import status_label
from ..common.datetime_utils import format_uz_day
from ..users.department_model import Department
from ..users.department_repository import DepartmentRepository
from ..users.model import User
from ..users.repository import UserRepository
from ..users.service import sort_by_rank

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class ExportFile:
    content: io.BytesIO
    filename: str
    mimetype: str = XLSX_MIMETYPE


def users_frame(users: Sequence[User]) -> pd.DataFrame:
    rows = [
        {
            "№": i,
            "F.I.Sh": u.full_name,
            "Lavozim": u.position,
            "Boʻlim": u.department.name if u.department else "Bo'limsiz",
            "Hodim ID": u.hodim_id or "Mavjud emas",
            "Foydalanuvchi nomi": u.username,
            "Roli": u.role.value,
            "Tugʻilgan sana": format_uz_day(u.birthday),
            "Shaxsiy telefon": u.phone_personal or "Mavjud emas",
            "Ish telefon": u.phone_work or "Mavjud emas",
            "Holati": status_label(u.attendance_status),
            "Tartib raqam": u.lavel if u.lavel is not None else "",
            "Yaratilgan sana": format_uz_day(u.created_at, empty=""),
            "Oxirgi tahrir": format_uz_day(u.updated_at),
        }
        for i, u in enumerate(users, start=1)
    ]
    return pd.DataFrame(rows)


def departments_frame(departments: Sequence[Department]) -> pd.DataFrame:
    rows = []
    for i, d in enumerate(departments, start=1):
        head = d.head
        rows.append(
            {
                "№": i,
                "Bo'lim nomi": d.name,
                "Tavsifi": d.description or "Mavjud emas",
                "Boshlig'i": head.full_name if head else "Tayinlanmagan",
                "Lavozimi": (head.position or "") if head else "Tayinlanmagan",
                "Telefon": (head.phone or "") if head else "Mavjud emas",
                "HODIMID": (head.hodim_id or "") if head else "Mavjud emas",
                "Yaratilgan sana": format_uz_day(d.created_at, empty=""),
            }
        )
    return pd.DataFrame(rows)


def history_frame(history: Sequence[AttendanceRecord]) -> pd.DataFrame:
    rows = [
        {
            "Sana": r["date"],
            "Holati": r["status_label"],
            "Kelish": r["check_in"] or "--:--",
            "Ketish": r["check_out"] or "--:--",
            "Izoh": r["comment"],
        }
        for r in history_rows(list(history))
    ]
    return pd.DataFrame(rows, columns=["Sana", "Holati", "Kelish", "Ketish", "Izoh"])


def write_xlsx(frame: pd.DataFrame, *, sheet_name: str) -> io.BytesIO:
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        frame.to_excel(writer, index=False, sheet_name=sheet_name)
    out.seek(0)
    return out


class ExportService:
    """Spreadsheet exports built from the same data the views show."""

    def __init__(self, users: UserRepository, departments: DepartmentRepository, attendance: AttendanceRepository):
        self._users = users
        self._departments = departments
        self._attendance = attendance

    def export_users(self, *, today: Optional[date] = None) -> ExportFile:
        today = today or date.today()
        frame = users_frame(sort_by_rank(self._users.list_all()))
        return ExportFile(write_xlsx(frame, sheet_name="Xodimlar"), f"xodimlar_{today.isoformat()}.xlsx")

    def export_departments(self, *, today: Optional[date] = None) -> ExportFile:
        today = today or date.today()
        frame = departments_frame(self._departments.list_all())
        return ExportFile(write_xlsx(frame, sheet_name="Bo'limlar"), f"barcha_bolimlar_{today.isoformat()}.xlsx")

    def export_history(self, user_id: str) -> ExportFile:
        user = self._users.get_by_id(user_id)
        name = user.full_name if user else user_id
        frame = history_frame(self._attendance.history_for_user(user_id))
        return ExportFile(write_xlsx(frame, sheet_name="Davomat tarixi"), f"{name}_davomat.xlsx")
