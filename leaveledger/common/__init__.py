"""Common module — shared enums, exceptions and the date boundary."""

from leaveledger.common.constants import (
    DATE_FORMAT,
    DEFAULT_BANK_HOLIDAYS,
    MAX_PREVIEW_DAYS,
    WEEKEND_DAYS,
    DayKind,
    LeaveType,
    RejectionReason,
)
from leaveledger.common.dates import format_date, parse_date
from leaveledger.common.exceptions import (
    AppException,
    DateFormatException,
    InvalidRequestException,
    ValidationException,
    register_exception_handlers,
)

__all__ = [
    # Constants / Enums
    "DayKind",
    "LeaveType",
    "RejectionReason",
    "DATE_FORMAT",
    "DEFAULT_BANK_HOLIDAYS",
    "MAX_PREVIEW_DAYS",
    "WEEKEND_DAYS",
    # Dates
    "format_date",
    "parse_date",
    # Exceptions
    "AppException",
    "DateFormatException",
    "InvalidRequestException",
    "ValidationException",
    "register_exception_handlers",
]
