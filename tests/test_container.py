from __future__ import annotations

import importlib
from types import SimpleNamespace

from fakes import FakeResponse, FakeSession
from work_control.attendance.strategies.exclusive_strategy import ExclusiveCountingStrategy
from work_control.attendance.strategies.overlapping_strategy import OverlappingCountingStrategy
from work_control.config import get_settings_module
from work_control.container import build_container
from work_control.main import create_app

TESTING = "work_control.config.testing"


def _settings(**overrides):
    base = importlib.import_module(TESTING)
    values = {k: getattr(base, k) for k in dir(base) if k.isupper()}
    return SimpleNamespace(**{**values, **overrides})


def test_services_send_the_caller_token():
    session = FakeSession(
        {("GET", "http://backend.test/api/user/getAll"): FakeResponse(200, {"success": True, "users": []})}
    )
    container = build_container(settings=importlib.import_module(TESTING), session_factory=lambda: session)

    services = container.services_for("secret-token")
    assert services.user_service.list_users() == []
    services.close()

    call = session.calls[0]
    assert call["headers"]["Authorization"] == "Bearer secret-token"
    assert call["timeout"] == 5.0
    assert session.closed is True


def test_counting_mode_from_settings():
    overlapping = build_container(settings=_settings())
    exclusive = build_container(settings=_settings(DAY_COUNTING_MODE="exclusive"))

    assert isinstance(overlapping.counting_strategy(), OverlappingCountingStrategy)
    assert isinstance(exclusive.counting_strategy(), ExclusiveCountingStrategy)


def test_settings_module_from_app_env(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "work_control.config.development"

    monkeypatch.setenv("APP_ENV", "prod")
    assert get_settings_module() == "work_control.config.production"

    monkeypatch.setenv("APP_ENV", "TEST")
    assert get_settings_module() == TESTING


def test_create_app_uses_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    app = create_app()

    assert app.config["TESTING"] is True
    assert app.test_client().get("/dashboard/users").status_code == 401
