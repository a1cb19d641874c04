from __future__ import annotations

from datetime import date

import pytest

from work_control.attendance.model import AttendanceRecord
from work_control.users.department_model import Department
from work_control.users.model import User


@pytest.fixture
def fixed_today() -> date:
    return date(2025, 3, 20)


@pytest.fixture
def departments() -> list[Department]:
    return [
        Department.from_api(
            {
                "_id": "d1",
                "name": "IT",
                "description": "Axborot texnologiyalari",
                "head": {"_id": "u1", "fullName": "Ali Valiyev", "position": "Rahbar", "phone": "+998901112233"},
                "createdAt": "2025-01-10T08:00:00",
            }
        ),
        Department.from_api({"_id": "d2", "name": "Buxgalteriya", "description": None, "head": None}),
    ]


@pytest.fixture
def users() -> list[User]:
    raw = [
        {
            "_id": "u1",
            "fullName": "Ali Valiyev",
            "username": "ali",
            "position": "Rahbar",
            "department": {"_id": "d1", "name": "IT"},
            "hodimID": "H-001",
            "lavel": 2,
            "role": "admin",
            "attendanceStatus": "ishda",
            "firstCheckInTime": "2025-03-20T09:00:00",
            "lastCheckInTime": "2025-03-20T09:12:30",
            "lastComment": "Yo'lda tirbandlik",
        },
        {
            "_id": "u2",
            "fullName": "Dilnoza Karimova",
            "username": "dilnoza",
            "position": "Dasturchi",
            "department": {"_id": "d1", "name": "IT"},
            "lavel": 1,
            "attendanceStatus": "tashqarida",
            "firstCheckInTime": "2025-03-20T09:00:00",
            "lastCheckInTime": "2025-03-20T09:03:00",
            "lastCheckOutTime": "2025-03-20T13:00:00",
        },
        {
            "_id": "u3",
            "fullName": "Sardor Rahimov",
            "username": "sardor",
            "position": "Hisobchi",
            "department": {"_id": "d2", "name": "Buxgalteriya"},
            "attendanceStatus": "nomalum",
        },
        {
            "_id": "u4",
            "fullName": "Bekzod Usmonov",
            "username": "bekzod",
            "position": "Haydovchi",
            "department": None,
            "lavel": 3,
        },
    ]
    return [User.from_api(r) for r in raw]


@pytest.fixture
def history() -> list[AttendanceRecord]:
    raw = [
        {
            "date": "2025-03-19",
            "status": "ishda",
            "hoursWorked": 8,
            "logs": [
                {
                    "checkin": True,
                    "checkout": True,
                    "checkInTime": "2025-03-19T09:00:00",
                    "checkOutTime": "2025-03-19T17:00:00",
                    "comment": "",
                }
            ],
        },
        {"date": "2025-03-18", "status": "kelmagan", "hoursWorked": 0, "logs": []},
        {
            "date": "2025-01-05",
            "status": "tashqarida",
            "hoursWorked": 7,
            "logs": [{"checkin": True, "checkInTime": "2025-01-05T09:30:00"}],
        },
    ]
    return [AttendanceRecord.from_api(r) for r in raw]
