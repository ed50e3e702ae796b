"""Tests for local-calendar date helpers."""

from datetime import date, datetime, timezone

from rfs_tracking.services.dates import format_ymd, normalize_date, today_string


def test_today_string_is_local_iso_date():
    assert today_string() == date.today().isoformat()


def test_format_ymd_zero_pads():
    assert format_ymd(date(2026, 3, 7)) == "2026-03-07"


def test_normalize_native_date():
    assert normalize_date(date(2026, 10, 18)) == "2026-10-18"


def test_normalize_naive_datetime_uses_its_own_fields():
    assert normalize_date(datetime(2026, 10, 18, 23, 59, 59)) == "2026-10-18"


def test_normalize_aware_datetime_uses_local_calendar():
    value = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
    assert normalize_date(value) == value.astimezone().date().isoformat()


def test_normalize_string_trims_and_truncates():
    assert normalize_date("  2026-10-18T09:12:00Z ") == "2026-10-18"
    assert normalize_date("2026-10-18") == "2026-10-18"


def test_normalize_non_string_is_stringified():
    assert normalize_date(20261018) == "20261018"
    assert normalize_date(None) == "None"


def test_native_and_string_dates_share_a_key():
    assert normalize_date(date(2026, 10, 18)) == normalize_date(" 2026-10-18 10:00:00")
