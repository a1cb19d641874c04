from __future__ import annotations

from typing import Optional, Sequence

from ..api.connection import ApiClient
from .department_model import Department
from .department_repository import DepartmentRepository


class HttpDepartmentRepository(DepartmentRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[Department]:
        payload = self._client.get("/api/departament/getAll")
        return [Department.from_api(r) for r in payload.get("departments") or []]

    def create_department(self, *, name: str, description: str, head_id: Optional[str]) -> None:
        self._client.post(
            "/api/departament/createdepartament",
            json={"name": name, "description": description, "head": head_id},
        )

    def update_department(self, department_id: str, *, name: str, description: str, head_id: Optional[str]) -> None:
        self._client.put(
            f"/api/departament/update/{department_id}",
            json={"name": name, "description": description, "head": head_id},
        )
