from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from work_control.common.datetime_utils import format_time, format_uz_date, parse_iso_datetime


def test_trailing_z_is_utc():
    expected = datetime(2025, 3, 20, 4, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)

    assert parse_iso_datetime("2025-03-20T04:00:00.000Z") == expected


def test_offset_converted_to_naive_local():
    tashkent = timezone(timedelta(hours=5))
    expected = datetime(2025, 3, 20, 9, 0, tzinfo=tashkent).astimezone().replace(tzinfo=None)

    parsed = parse_iso_datetime("2025-03-20T09:00:00+05:00")

    assert parsed == expected
    assert parsed.tzinfo is None


def test_naive_value_kept_as_is():
    assert parse_iso_datetime("2025-03-20T09:12:30") == datetime(2025, 3, 20, 9, 12, 30)


def test_empty_placeholder_and_garbage_are_none():
    assert parse_iso_datetime(None) is None
    assert parse_iso_datetime("-") is None
    assert parse_iso_datetime("20/03/2025") is None


def test_labels():
    assert format_time(None) == "--:--"
    assert format_time(datetime(2025, 3, 20, 9, 5)) == "09:05"
    assert format_uz_date(date(2025, 3, 5)) == "5 Mar, Chor"
