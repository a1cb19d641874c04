from __future__ import annotations

import io

import pytest

from fakes import InMemoryAttendance, InMemoryDepartments, InMemoryUsers
from work_control.attendance.service import AttendanceService
from work_control.container import Services
from work_control.core.exceptions import ApiError
from work_control.main import create_app
from work_control.reports.service import ExportService
from work_control.users.department_service import DepartmentService
from work_control.users.service import UserService

AUTH = {"Authorization": "Bearer test-token"}


class RecordingClient:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class FakeContainer:
    def __init__(self, users_repo, departments_repo, attendance_repo):
        self.clients: list[RecordingClient] = []
        self.users_repo = users_repo
        self.departments_repo = departments_repo
        self.attendance_repo = attendance_repo
        self.tokens: list[str] = []

    def services_for(self, token: str) -> Services:
        self.tokens.append(token)
        self.clients.append(RecordingClient())
        return Services(
            user_service=UserService(self.users_repo, self.departments_repo),
            department_service=DepartmentService(self.departments_repo),
            attendance_service=AttendanceService(self.attendance_repo, self.users_repo, self.departments_repo),
            export_service=ExportService(self.users_repo, self.departments_repo, self.attendance_repo),
            client=self.clients[-1],
        )


class FailingDepartments(InMemoryDepartments):
    def list_all(self):
        raise ApiError("Server xatosi", status_code=500)


@pytest.fixture
def container(users, departments, history):
    return FakeContainer(InMemoryUsers(users, lavel=7), InMemoryDepartments(departments), InMemoryAttendance({"u1": history}))


@pytest.fixture
def client(container):
    app = create_app(settings_module="work_control.config.testing", container=container)
    return app.test_client()


def test_missing_token_is_401(client):
    resp = client.get("/dashboard/departments")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_token_threaded_into_services(client, container):
    client.get("/dashboard/departments", headers=AUTH)

    assert container.tokens == ["test-token"]


def test_list_departments_with_search(client):
    resp = client.get("/dashboard/departments?search=buxgal", headers=AUTH)

    body = resp.get_json()
    assert body["success"] is True
    assert [d["id"] for d in body["departments"]] == ["d2"]


def test_create_department_validation_error(client, container):
    resp = client.post("/dashboard/departments", json={"name": ""}, headers=AUTH)

    assert resp.status_code == 400
    assert container.departments_repo.calls == []


def test_update_department(client, container):
    resp = client.put("/dashboard/departments/d1", json={"name": "IT bo'limi", "head": "u2"}, headers=AUTH)

    assert resp.status_code == 200
    assert container.departments_repo.calls == [("update", "d1", "IT bo'limi", "", "u2")]


def test_backend_failure_reported_as_message(users, history):
    container = FakeContainer(InMemoryUsers(users), FailingDepartments([]), InMemoryAttendance({}))
    client = create_app(settings_module="work_control.config.testing", container=container).test_client()

    resp = client.get("/dashboard/attendance/departments", headers=AUTH)

    assert resp.status_code == 502
    assert resp.get_json() == {"success": False, "message": "Server xatosi"}


def test_basic_and_extended_user_lists(client):
    basic = client.get("/dashboard/users?department=no-department", headers=AUTH).get_json()
    extended = client.get("/dashboard/admin/users", headers=AUTH).get_json()

    assert [u["id"] for u in basic["users"]] == ["u4"]
    assert "username" not in basic["users"][0]
    assert extended["users"][0]["username"] == "dilnoza"


def test_grouped_users(client):
    body = client.get("/dashboard/users/grouped", headers=AUTH).get_json()

    assert [g["department_id"] for g in body["groups"]] == ["d1", "d2", "no-department"]


def test_next_lavel(client):
    assert client.get("/dashboard/admin/users/next-lavel", headers=AUTH).get_json()["lavel"] == 7


def test_create_user_without_password_is_rejected(client, container):
    resp = client.post(
        "/dashboard/admin/users",
        data={"fullName": "Yangi", "username": "yangi"},
        headers=AUTH,
    )

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Parolni kiriting!"
    assert container.users_repo.created == []


def test_create_user_with_bad_role(client):
    resp = client.post(
        "/dashboard/admin/users",
        data={"fullName": "Yangi", "username": "yangi", "password": "parol1234", "role": "root"},
        headers=AUTH,
    )

    assert resp.status_code == 400


def test_update_user_multipart(client, container):
    resp = client.put(
        "/dashboard/admin/users/u1",
        data={"fullName": "Ali V.", "username": "ali", "lavel": "2", "department": "d2", "role": "admin"},
        headers=AUTH,
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    user_id, form = container.users_repo.updated[0]
    assert user_id == "u1"
    assert form.lavel == 2
    assert form.department_id == "d2"
    assert form.password is None


def test_oversized_image_upload_rejected(client, container):
    data = {
        "fullName": "Yangi",
        "username": "yangi",
        "password": "parol1234",
        "image": (io.BytesIO(b"x" * (2 * 1024 * 1024 + 1)), "big.png"),
    }

    resp = client.post("/dashboard/admin/users", data=data, headers=AUTH, content_type="multipart/form-data")

    assert resp.status_code == 400
    assert container.users_repo.created == []


def test_unknown_user(client):
    resp = client.get("/dashboard/admin/users/nope", headers=AUTH)

    assert resp.status_code == 400


def test_staff_board(client):
    body = client.get("/dashboard/attendance/staff?status=ishda", headers=AUTH).get_json()

    assert [u["id"] for u in body["users"]] == ["u1"]
    assert body["totals"]["late"] == 1


def test_attendance_history(client):
    body = client.get("/dashboard/attendance/users/u1", headers=AUTH).get_json()

    assert body["success"] is True
    assert body["stats"]["total_days"] == 3


def test_empty_data_renders_empty_board():
    container = FakeContainer(InMemoryUsers([]), InMemoryDepartments([]), InMemoryAttendance({}))
    client = create_app(settings_module="work_control.config.testing", container=container).test_client()

    body = client.get("/dashboard/attendance/departments", headers=AUTH).get_json()

    assert body["success"] is True
    assert body["departments"] == []


def test_export_users(client):
    resp = client.get("/dashboard/admin/users/export", headers=AUTH)

    assert resp.status_code == 200
    assert resp.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert resp.data[:2] == b"PK"


def test_client_closed_after_each_request(client, container):
    client.get("/dashboard/departments", headers=AUTH)
    client.get("/dashboard/attendance/staff?status=foo", headers=AUTH)

    assert len(container.clients) == 2
    assert all(c.closed for c in container.clients)


def test_unknown_status_tab_is_400(client):
    resp = client.get("/dashboard/attendance/departments?status=foo", headers=AUTH)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_update_without_is_edit_leaves_flag_out(client, container):
    resp = client.put(
        "/dashboard/admin/users/u1",
        data={"fullName": "Ali V.", "username": "ali"},
        headers=AUTH,
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    _, form = container.users_repo.updated[0]
    assert form.is_edit is None
    assert "isEdit" not in form.to_form_fields()


def test_create_without_is_edit_defaults_to_editable(client, container):
    resp = client.post(
        "/dashboard/admin/users",
        data={"fullName": "Yangi", "username": "yangi", "password": "parol1234"},
        headers=AUTH,
    )

    assert resp.status_code == 201
    assert container.users_repo.created[0].is_edit is True


def test_export_departments(client):
    resp = client.get("/dashboard/departments/export", headers=AUTH)

    assert resp.status_code == 200
    assert resp.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert "barcha_bolimlar_" in resp.headers["Content-Disposition"]
    assert resp.data[:2] == b"PK"


def test_export_attendance_history(client):
    resp = client.get("/dashboard/attendance/users/u1/export", headers=AUTH)

    assert resp.status_code == 200
    assert "_davomat.xlsx" in resp.headers["Content-Disposition"]
    assert resp.data[:2] == b"PK"
