from __future__ import annotations

from flask import Flask, request, send_file

from ..common.web import arg, ok, services_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    token_required = services_required(container)

    @app.route("/dashboard/departments", methods=["GET"], endpoint="departments")
    @token_required
    def departments(services):
        items = services.department_service.list_departments(search=arg("search"))
        return ok(departments=[d.to_dict() for d in items])

    @app.route("/dashboard/departments", methods=["POST"], endpoint="create_department")
    @token_required
    def create_department(services):
        data = request.get_json(silent=True) or {}
        services.department_service.save_department(
            name=data.get("name", ""),
            description=data.get("description", ""),
            head_id=data.get("head"),
        )
        return ok(message="Bo'lim muvaffaqiyatli qo'shildi!"), 201

    @app.route("/dashboard/departments/<department_id>", methods=["PUT"], endpoint="update_department")
    @token_required
    def update_department(department_id: str, services):
        data = request.get_json(silent=True) or {}
        services.department_service.save_department(
            department_id=department_id,
            name=data.get("name", ""),
            description=data.get("description", ""),
            head_id=data.get("head"),
        )
        return ok(message="Bo'lim muvaffaqiyatli yangilandi!")

    @app.route("/dashboard/departments/export", methods=["GET"], endpoint="export_departments")
    @token_required
    def export_departments(services):
        export = services.export_service.export_departments()
        return send_file(export.content, mimetype=export.mimetype, as_attachment=True, download_name=export.filename)
