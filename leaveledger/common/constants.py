"""Enums and constants shared across the leave ledger."""

from __future__ import annotations

import enum


# ── Leave ───────────────────────────────────────────────────────────

class LeaveType(str, enum.Enum):
    annual = "annual"
    sick_leave = "sick-leave"
    maternity = "maternity"
    paternity = "paternity"
    unpaid = "unpaid"
    other = "other"


class RejectionReason(str, enum.Enum):
    starts_on_holiday = "starts_on_holiday"
    overlaps_existing = "overlaps_existing"


class DayKind(str, enum.Enum):
    """Named day sequences exposed by the calendar."""

    calendar = "calendar"
    workdays = "workdays"
    weekends = "weekends"
    holidays = "holidays"


# ── Calendar ────────────────────────────────────────────────────────

# date.weekday(): 0=Mon … 6=Sun
WEEKEND_DAYS: frozenset[int] = frozenset({5, 6})

DATE_FORMAT = "%Y-%m-%d"          # ISO-8601 calendar date: 2018-01-01

# Polish bank holidays for 2018, used when BANK_HOLIDAYS is not configured.
DEFAULT_BANK_HOLIDAYS: dict[str, str] = {
    "2018-01-01": "Nowy Rok",
    "2018-01-06": "Święto Trzech Króli",
    "2018-04-01": "Wielkanoc",
    "2018-04-02": "Poniedziałek Wielkanocny",
    "2018-05-01": "Święto Pracy",
    "2018-05-03": "Święto Konstytucji 3 Maja",
    "2018-05-20": "Zielone Świątki",
    "2018-05-31": "Boże Ciało",
    "2018-08-15": "Wniebowzięcie Najświętszej Maryi Panny",
    "2018-11-01": "Wszystkich Świętych",
    "2018-11-11": "Święto Niepodległości",
    "2018-12-25": "Pierwszy dzień Bożego Narodzenia",
    "2018-12-26": "Drugi dzień Bożego Narodzenia",
}

MAX_PREVIEW_DAYS = 366

# Longest leave request, in workdays (roughly ten working years).
MAX_REQUEST_DAYS = 2600
