from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .department_model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def create_department(self, *, name: str, description: str, head_id: Optional[str]) -> None:
        raise NotImplementedError

    def update_department(self, department_id: str, *, name: str, description: str, head_id: Optional[str]) -> None:
        raise NotImplementedError
