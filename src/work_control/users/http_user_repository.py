from __future__ import annotations

from typing import Optional, Sequence

from ..api.connection import ApiClient
from ..core.constants import DEFAULT_LAVEL
from .model import User, UserForm
from .repository import UserRepository


class HttpUserRepository(UserRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[User]:
        payload = self._client.get("/api/user/getAll")
        return [User.from_api(r) for r in payload.get("users") or []]

    def get_by_id(self, user_id: str) -> Optional[User]:
        payload = self._client.get(f"/api/user/getById/{user_id}")
        raw = payload.get("user")
        if not raw:
            return None
        return User.from_api(raw)

    def next_lavel(self) -> int:
        payload = self._client.get("/api/user/getLavel")
        try:
            return int(payload.get("lavel") or DEFAULT_LAVEL)
        except (TypeError, ValueError):
            return DEFAULT_LAVEL

    def create_user(self, form: UserForm) -> None:
        self._client.post("/api/user/register", files=self._multipart(form))

    def update_user(self, user_id: str, form: UserForm) -> None:
        self._client.put(f"/api/user/update/{user_id}", files=self._multipart(form))

    @staticmethod
    def _multipart(form: UserForm) -> dict:
        # (None, value) parts keep requests on multipart/form-data even without an image.
        parts = {k: (None, v) for k, v in form.to_form_fields().items()}
        if form.image:
            parts["image"] = (form.image_filename, form.image)
        return parts
