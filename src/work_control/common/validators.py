from __future__ import annotations

from io import BytesIO
from typing import Optional

from PIL import Image, UnidentifiedImageError

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} kiritilishi shart")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} kamida {min_len} belgi bo'lishi kerak")
    return value


def require_image(data: bytes, *, max_bytes: int) -> bytes:
    """Reject uploads above ``max_bytes`` or that do not decode as an image."""
    if len(data) > max_bytes:
        raise ValidationError(f"Rasm hajmi {max_bytes // (1024 * 1024)}MB dan kichik boʻlishi kerak")
    try:
        with Image.open(BytesIO(data)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
        raise ValidationError("Rasm fayli yaroqsiz")
    return data
