from __future__ import annotations

from datetime import date

import pandas as pd

from fakes import InMemoryAttendance, InMemoryDepartments, InMemoryUsers
from work_control.reports.service import ExportService, departments_frame, history_frame, users_frame


def test_users_frame_columns(users):
    frame = users_frame(users)

    assert list(frame["F.I.Sh"]) == [u.full_name for u in users]
    assert frame.loc[3, "Boʻlim"] == "Bo'limsiz"
    assert frame.loc[0, "Holati"] == "Ishda"
    assert frame.loc[1, "Hodim ID"] == "Mavjud emas"


def test_departments_frame_without_head(departments):
    frame = departments_frame(departments)

    assert frame.loc[0, "Boshlig'i"] == "Ali Valiyev"
    assert frame.loc[1, "Boshlig'i"] == "Tayinlanmagan"
    assert frame.loc[1, "Tavsifi"] == "Mavjud emas"


def test_history_frame_empty_history_keeps_columns():
    frame = history_frame([])

    assert frame.empty
    assert list(frame.columns) == ["Sana", "Holati", "Kelish", "Ketish", "Izoh"]


def test_export_users_writes_xlsx(users, departments):
    service = ExportService(InMemoryUsers(users), InMemoryDepartments(departments), InMemoryAttendance({}))

    export = service.export_users(today=date(2025, 3, 20))

    assert export.filename == "xodimlar_2025-03-20.xlsx"
    frame = pd.read_excel(export.content, sheet_name="Xodimlar", engine="openpyxl")
    assert list(frame["F.I.Sh"]) == ["Dilnoza Karimova", "Ali Valiyev", "Bekzod Usmonov", "Sardor Rahimov"]


def test_export_history_filename_uses_user_name(users, departments, history):
    service = ExportService(InMemoryUsers(users), InMemoryDepartments(departments), InMemoryAttendance({"u1": history}))

    export = service.export_history("u1")

    assert export.filename == "Ali Valiyev_davomat.xlsx"
    assert export.content.getvalue()[:2] == b"PK"
