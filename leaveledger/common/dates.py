"""Date boundary — strict ISO-8601 (YYYY-MM-DD) parsing and formatting."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator

from leaveledger.common.constants import DATE_FORMAT
from leaveledger.common.exceptions import DateFormatException

# strptime alone accepts "2018-1-1"; require zero-padded fields.
_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_date(value: str) -> date:
    """Convert a YYYY-MM-DD string to a date, rejecting anything else."""
    if not isinstance(value, str) or not _ISO_DATE_RE.fullmatch(value):
        raise DateFormatException(value)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise DateFormatException(value) from None


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def _validate_iso_date(value: Any) -> date:
    """Pydantic hook: plain dates pass, strings go through ``parse_date``.

    Timestamps, datetimes and datetime strings are refused.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    try:
        return parse_date(value)
    except DateFormatException as exc:
        raise ValueError(exc.detail) from None


# Use for every date field that can arrive in a request body.
IsoDate = Annotated[date, BeforeValidator(_validate_iso_date)]
