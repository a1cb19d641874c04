from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User, UserForm


class UserRepository(Protocol):
    """Repository interface for users.

    Note: the service layer depends on this interface, not on the HTTP backend.
    """

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def next_lavel(self) -> int:
        raise NotImplementedError

    def create_user(self, form: UserForm) -> None:
        raise NotImplementedError

    def update_user(self, user_id: str, form: UserForm) -> None:
        raise NotImplementedError
