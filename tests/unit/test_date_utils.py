from datetime import date, datetime, timezone

import pytest

from flightlog.shared.utils.date_utils import format_sheet_date, parse_sheet_date


def test_parse_sheet_date_day_first_format():
    assert parse_sheet_date("01/09/2024") == date(2024, 9, 1)
    assert parse_sheet_date("1/9/2024") == date(2024, 9, 1)


def test_parse_sheet_date_iso_date():
    assert parse_sheet_date("2024-09-01") == date(2024, 9, 1)


def test_parse_sheet_date_utc_timestamp_uses_sheet_timezone():
    # Apps Script serializa la medianoche de Madrid como 22:00Z del dia anterior
    assert parse_sheet_date("2024-08-31T22:00:00.000Z") == date(2024, 9, 1)
    assert parse_sheet_date("2024-08-31T22:00:00.000Z", tz_name="UTC") == date(2024, 8, 31)


def test_parse_sheet_date_accepts_date_and_datetime_objects():
    assert parse_sheet_date(date(2024, 9, 1)) == date(2024, 9, 1)
    aware = datetime(2024, 8, 31, 22, 30, tzinfo=timezone.utc)
    assert parse_sheet_date(aware) == date(2024, 9, 1)


def test_parse_sheet_date_free_text_is_day_first():
    assert parse_sheet_date("5 sep 2024") == date(2024, 9, 5)
    assert parse_sheet_date("05-09-2024") == date(2024, 9, 5)


@pytest.mark.parametrize("value", [None, "", "   ", "no es fecha", 12345, "31/02/2024"])
def test_parse_sheet_date_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_sheet_date(value)


def test_format_sheet_date():
    assert format_sheet_date(date(2024, 9, 1)) == "01/09/2024"
