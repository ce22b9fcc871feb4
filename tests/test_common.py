"""Tests for common utilities — the date boundary, exceptions and settings."""

from __future__ import annotations

import json
from datetime import date, datetime

import pytest
from pydantic import ValidationError

from leaveledger.calendar.schemas import HolidaySet, Interval
from leaveledger.common.dates import format_date, parse_date
from leaveledger.common.exceptions import (
    DateFormatException,
    InvalidRequestException,
    ValidationException,
)
from leaveledger.config import Settings


# ═════════════════════════════════════════════════════════════════════
# DATE BOUNDARY
# ═════════════════════════════════════════════════════════════════════


class TestParseDate:
    """Strict YYYY-MM-DD parsing."""

    def test_valid_date(self):
        assert parse_date("2018-01-06") == date(2018, 1, 6)

    def test_format_is_inverse(self):
        assert format_date(parse_date("2019-11-07")) == "2019-11-07"

    @pytest.mark.parametrize("raw", [
        "2018-1-6",
        "06-01-2018",
        "2018/01/06",
        "20180106",
        "2018-01-06T00:00:00",
        "2018-01-06 ",
        "2018-02-30",
        "",
    ])
    def test_rejects_non_iso(self, raw):
        with pytest.raises(DateFormatException) as exc_info:
            parse_date(raw)
        assert exc_info.value.status_code == 422
        assert exc_info.value.error_type == "invalid-date"

    def test_rejects_non_string(self):
        with pytest.raises(DateFormatException):
            parse_date(20180106)  # type: ignore[arg-type]


class TestIsoDateField:
    """Body date fields accept only plain dates and YYYY-MM-DD strings."""

    def test_accepts_iso_string_and_date(self):
        assert Interval(start="2019-01-07", end=date(2019, 1, 8)).start == date(2019, 1, 7)

    @pytest.mark.parametrize("raw", [
        1546819200,
        "1546819200",
        "2019-01-07T00:00:00",
        datetime(2019, 1, 7),
        "2019-1-7",
    ])
    def test_rejects_timestamps_and_datetimes(self, raw):
        with pytest.raises(ValidationError):
            Interval(start=raw, end=date(2019, 1, 8))


# ═════════════════════════════════════════════════════════════════════
# EXCEPTIONS
# ═════════════════════════════════════════════════════════════════════


class TestExceptions:
    def test_invalid_request_carries_field_errors(self):
        exc = InvalidRequestException("total_days", "must be at least 1")
        assert exc.status_code == 422
        assert exc.errors == {"total_days": ["must be at least 1"]}
        assert str(exc) == "must be at least 1"

    def test_validation_exception(self):
        exc = ValidationException({"ledger": ["overlap"]})
        assert exc.error_type == "validation-error"
        assert exc.errors == {"ledger": ["overlap"]}


# ═════════════════════════════════════════════════════════════════════
# SETTINGS
# ═════════════════════════════════════════════════════════════════════


class TestSettings:
    def test_default_bank_holidays(self):
        holidays = Settings().bank_holidays
        assert isinstance(holidays, HolidaySet)
        assert len(holidays) == 13
        assert holidays[date(2018, 12, 25)] == "Pierwszy dzień Bożego Narodzenia"

    def test_custom_bank_holidays(self):
        settings = Settings(BANK_HOLIDAYS=json.dumps({"2020-01-01": "New Year"}))
        assert dict(settings.bank_holidays) == {date(2020, 1, 1): "New Year"}

    def test_bad_holiday_date_raises(self):
        settings = Settings(BANK_HOLIDAYS=json.dumps({"1/1/2020": "New Year"}))
        with pytest.raises(DateFormatException):
            settings.bank_holidays

    def test_cors_origins_fallback(self):
        assert Settings(CORS_ORIGINS="not json").cors_origins_list == ["http://localhost:3000"]
