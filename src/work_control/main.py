from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .users.controller import register as register_users
from .users.department_controller import register as register_departments


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.info("[work-control] settings=%s backend=%s", settings_module, getattr(settings, "API_BASE_URL"))

    container = container or build_container(settings=settings)

    register_departments(app, container)
    register_users(app, container)
    register_attendance(app, container)

    return app


def run() -> None:
    app = create_app()
    app.run(debug=bool(app.config.get("DEBUG", False)))


if __name__ == "__main__":
    run()
