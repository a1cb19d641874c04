from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Union

from ..core.constants import EMPTY_TIME

UZBEK_WEEKDAYS = ["Dush", "Sesh", "Chor", "Pay", "Jum", "Shan", "Yak"]
UZBEK_MONTHS = ["Yan", "Fev", "Mar", "Apr", "May", "Iyun", "Iyul", "Avg", "Sen", "Okt", "Noy", "Dek"]

logger = logging.getLogger(__name__)


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp from the backend.

    Accepts the trailing ``Z`` the backend emits and returns a naive local
    datetime so times from different payloads compare directly. Empty values and the
    ``-`` placeholder map to None, and so does anything that is not ISO-8601.
    """
    if not value or value == "-":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.warning("ignoring malformed timestamp %r", value)
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def format_time(value: Optional[datetime], *, empty: str = EMPTY_TIME) -> str:
    if value is None:
        return empty
    return value.strftime("%H:%M")


def format_uz_date(value: Union[date, datetime, None]) -> str:
    """Short Uzbek label, e.g. ``5 Mar, Chor``."""
    if value is None:
        return ""
    return f"{value.day} {UZBEK_MONTHS[value.month - 1]}, {UZBEK_WEEKDAYS[value.weekday()]}"


def format_uz_day(value: Union[date, datetime, None], *, empty: str = "Mavjud emas") -> str:
    if value is None:
        return empty
    return value.strftime("%d.%m.%Y")
