from __future__ import annotations

from dataclasses import asdict

from flask import Flask, request, send_file

from ..common.web import arg, ok, services_required
from ..core.constants import ALL
from ..core.enums import Role, UserViewCapability
from ..core.exceptions import ValidationError
from ..container import Container
from .model import UserForm


def _form_from_request(*, creating: bool) -> UserForm:
    f = request.form
    role_s = f.get("role") or Role.VIEWER.value
    try:
        role = Role(role_s)
    except ValueError:
        raise ValidationError("Rol noto'g'ri")

    lavel_s = (f.get("lavel") or "").strip()
    try:
        lavel = int(lavel_s) if lavel_s else None
    except ValueError:
        raise ValidationError("Tartib raqam noto'g'ri")

    image = request.files.get("image")
    image_bytes = image.read() if image and image.filename else None

    return UserForm(
        full_name=f.get("fullName", ""),
        username=f.get("username", ""),
        position=f.get("position", ""),
        department_id=f.get("department") or None,
        password=f.get("password") or None,
        hodim_id=f.get("hodimID", ""),
        lavel=lavel,
        role=role,
        birthday=f.get("birthday", ""),
        phone_personal=f.get("phone_personal", ""),
        phone_work=f.get("phone_work", ""),
        is_edit=_is_edit(f.get("isEdit"), creating),
        image=image_bytes,
        image_filename=image.filename if image_bytes else "photo.jpg",
    )


def _is_edit(raw, creating: bool):
    # a PUT without isEdit leaves the stored flag alone
    if raw is None:
        return True if creating else None
    return raw.lower() in {"1", "true", "on"}


def register(app: Flask, container: Container) -> None:
    token_required = services_required(container)

    @app.route("/dashboard/users", methods=["GET"], endpoint="users")
    @token_required
    def users(services):
        rows = services.user_service.list_users(
            capability=UserViewCapability.BASIC,
            search=arg("search"),
            department_id=arg("department", ALL),
        )
        return ok(users=rows)

    @app.route("/dashboard/users/grouped", methods=["GET"], endpoint="users_grouped")
    @token_required
    def users_grouped(services):
        groups = services.user_service.list_grouped(search=arg("search"))
        return ok(groups=[asdict(g) for g in groups])

    @app.route("/dashboard/admin/users", methods=["GET"], endpoint="admin_users")
    @token_required
    def admin_users(services):
        rows = services.user_service.list_users(
            capability=UserViewCapability.EXTENDED,
            search=arg("search"),
            department_id=arg("department", ALL),
        )
        return ok(users=rows)

    @app.route("/dashboard/admin/users/next-lavel", methods=["GET"], endpoint="next_lavel")
    @token_required
    def next_lavel(services):
        return ok(lavel=services.user_service.next_lavel())

    @app.route("/dashboard/admin/users/<user_id>", methods=["GET"], endpoint="admin_user")
    @token_required
    def admin_user(user_id: str, services):
        user = services.user_service.get_user(user_id)
        return ok(user=services.user_service.to_view(user, UserViewCapability.EXTENDED))

    @app.route("/dashboard/admin/users", methods=["POST"], endpoint="create_user")
    @token_required
    def create_user(services):
        services.user_service.save_user(_form_from_request(creating=True), capability=UserViewCapability.EXTENDED)
        return ok(message="Yangi xodim qoʻshildi!"), 201

    @app.route("/dashboard/admin/users/<user_id>", methods=["PUT"], endpoint="update_user")
    @token_required
    def update_user(user_id: str, services):
        services.user_service.save_user(
            _form_from_request(creating=False),
            capability=UserViewCapability.EXTENDED,
            user_id=user_id,
        )
        return ok(message="Xodim maʼlumotlari yangilandi!")

    @app.route("/dashboard/admin/users/export", methods=["GET"], endpoint="export_users")
    @token_required
    def export_users(services):
        export = services.export_service.export_users()
        return send_file(export.content, mimetype=export.mimetype, as_attachment=True, download_name=export.filename)
