from __future__ import annotations

from flask import Flask, send_file

from ..common.web import arg, ok, services_required
from ..core.constants import ALL
from ..container import Container


def register(app: Flask, container: Container) -> None:
    token_required = services_required(container)

    @app.route("/dashboard/attendance/departments", methods=["GET"], endpoint="attendance_departments")
    @token_required
    def attendance_departments(services):
        board = services.attendance_service.department_board(search=arg("search"), status=arg("status", ALL))
        return ok(**board)

    @app.route("/dashboard/attendance/staff", methods=["GET"], endpoint="attendance_staff")
    @token_required
    def attendance_staff(services):
        board = services.attendance_service.staff_board(
            search=arg("search"),
            department_id=arg("department", ALL),
            status=arg("status", ALL),
        )
        return ok(**board)

    @app.route("/dashboard/attendance/users/<user_id>", methods=["GET"], endpoint="attendance_history")
    @token_required
    def attendance_history(user_id: str, services):
        return ok(**services.attendance_service.user_history(user_id))

    @app.route("/dashboard/attendance/users/<user_id>/export", methods=["GET"], endpoint="export_attendance")
    @token_required
    def export_attendance(user_id: str, services):
        export = services.export_service.export_history(user_id)
        return send_file(export.content, mimetype=export.mimetype, as_attachment=True, download_name=export.filename)
