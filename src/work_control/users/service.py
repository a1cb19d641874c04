from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Collection, Optional, Sequence

from ..attendance.status import status_label
from ..common.datetime_utils import format_uz_day
from ..common.filters import matches_search, rank_sort_key
from ..common.validators import require_image, require_min_length, require_non_empty
from ..core.constants import ALL, DEFAULT_MAX_PHOTO_BYTES, NO_DEPARTMENT_ID, NO_DEPARTMENT_NAME
from ..core.enums import UserViewCapability
from ..core.exceptions import AuthorizationError, ValidationError
from .department_repository import DepartmentRepository
from .model import User, UserForm
from .repository import UserRepository

logger = logging.getLogger(__name__)


def is_unassigned(user: User, known_ids: Optional[Collection[str]] = None) -> bool:
    """No department, or one that is not among ``known_ids`` (deleted since)."""
    if user.department_id is None:
        return True
    return known_ids is not None and user.department_id not in known_ids


def matches_department(
    user: User,
    department_id: Optional[str],
    known_ids: Optional[Collection[str]] = None,
) -> bool:
    """``all`` matches everyone, ``no-department`` matches unassigned users."""
    if not department_id or department_id == ALL:
        return True
    if department_id == NO_DEPARTMENT_ID:
        return is_unassigned(user, known_ids)
    return user.department_id == department_id


def sort_by_rank(users: Sequence[User]) -> list[User]:
    return sorted(users, key=lambda u: rank_sort_key(u.lavel))


@dataclass(frozen=True)
class UserGroup:
    department_id: str
    name: str
    users: list[dict]


class UserService:
    """Use case: the user management view.

    One view serves both the read-only staff directory (``BASIC``) and the
    admin editor (``EXTENDED``); the capability decides which fields are
    exposed and whether saving is allowed.
    """

    def __init__(
        self,
        users: UserRepository,
        departments: DepartmentRepository,
        *,
        max_photo_bytes: int = DEFAULT_MAX_PHOTO_BYTES,
    ):
        self._users = users
        self._departments = departments
        self._max_photo_bytes = int(max_photo_bytes)

    def list_users(
        self,
        *,
        capability: UserViewCapability = UserViewCapability.BASIC,
        search: str = "",
        department_id: str = ALL,
    ) -> list[dict]:
        users = sort_by_rank(self._users.list_all())
        known_ids = None
        if department_id == NO_DEPARTMENT_ID:
            known_ids = {d.department_id for d in self._departments.list_all()}
        return [
            self.to_view(u, capability)
            for u in users
            if matches_department(u, department_id, known_ids) and matches_search(search, u.full_name, u.position, u.username)
        ]

    def list_grouped(self, *, search: str = "") -> list[UserGroup]:
        """Directory grouped by department, unassigned users last."""
        departments = self._departments.list_all()
        users = [u for u in sort_by_rank(self._users.list_all()) if matches_search(search, u.full_name, u.position, u.username)]

        groups = [
            UserGroup(
                department_id=d.department_id,
                name=d.name,
                users=[self.to_view(u, UserViewCapability.BASIC) for u in users if u.department_id == d.department_id],
            )
            for d in departments
        ]
        known_ids = {d.department_id for d in departments}
        unassigned = [self.to_view(u, UserViewCapability.BASIC) for u in users if is_unassigned(u, known_ids)]
        if unassigned:
            groups.append(UserGroup(department_id=NO_DEPARTMENT_ID, name=NO_DEPARTMENT_NAME, users=unassigned))
        return groups

    def get_user(self, user_id: str) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("Xodim topilmadi")
        return user

    def next_lavel(self) -> int:
        return self._users.next_lavel()

    def save_user(
        self,
        form: UserForm,
        *,
        capability: UserViewCapability,
        user_id: Optional[str] = None,
    ) -> None:
        if capability != UserViewCapability.EXTENDED:
            raise AuthorizationError("Sizda xodimlarni tahrirlash huquqi yo'q")

        form.full_name = require_non_empty(form.full_name, "F.I.Sh")
        form.username = require_non_empty(form.username, "Foydalanuvchi nomi")
        if user_id is None:
            if not form.password:
                raise ValidationError("Parolni kiriting!")
            require_min_length(form.password, "Parol", 8)
        elif form.password:
            require_min_length(form.password, "Parol", 8)
        if form.image:
            require_image(form.image, max_bytes=self._max_photo_bytes)

        if user_id is None:
            self._users.create_user(form)
            logger.info("created user username=%s", form.username)
        else:
            self._users.update_user(user_id, form)
            logger.info("updated user id=%s", user_id)

    @staticmethod
    def to_view(user: User, capability: UserViewCapability) -> dict:
        row = {
            "id": user.user_id,
            "full_name": user.full_name,
            "position": user.position,
            "department": (
                {"id": user.department.department_id, "name": user.department.name} if user.department else None
            ),
            "photo": user.photo,
            "attendance_status": user.attendance_status.value,
            "status_label": status_label(user.attendance_status),
        }
        if capability == UserViewCapability.EXTENDED:
            row.update(
                {
                    "username": user.username,
                    "hodim_id": user.hodim_id,
                    "lavel": user.lavel,
                    "role": user.role.value,
                    "birthday": user.birthday.isoformat() if user.birthday else None,
                    "phone_personal": user.phone_personal,
                    "phone_work": user.phone_work,
                    "is_edit": user.is_edit,
                    "created_at": format_uz_day(user.created_at, empty=""),
                    "updated_at": format_uz_day(user.updated_at),
                }
            )
        return row
