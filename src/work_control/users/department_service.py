from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.filters import matches_search
from ..common.validators import require_non_empty
from .department_model import Department
from .department_repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    """Use case: list, search and edit departments."""

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_departments(self, *, search: str = "") -> Sequence[Department]:
        return [
            d
            for d in self._departments.list_all()
            if matches_search(search, d.name, d.description, d.head.full_name if d.head else None)
        ]

    def save_department(
        self,
        *,
        name: str,
        description: str = "",
        head_id: Optional[str] = None,
        department_id: Optional[str] = None,
    ) -> None:
        name = require_non_empty(name, "Bo'lim nomi")
        description = (description or "").strip()
        head_id = head_id or None

        if department_id:
            self._departments.update_department(department_id, name=name, description=description, head_id=head_id)
            logger.info("updated department id=%s", department_id)
        else:
            self._departments.create_department(name=name, description=description, head_id=head_id)
            logger.info("created department name=%s", name)
