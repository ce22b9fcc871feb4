"""Calendar service — lazy day sequences and weekend/holiday classification.

Every sequence is a fresh generator per call: pull-based, restartable and
unbounded in practice (the only end is ``date.max``). Consumers bound them
explicitly with ``take`` / ``as_days``.
The holiday set is always passed in by the caller.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from datetime import date, timedelta
from itertools import islice, takewhile

from leaveledger.calendar.schemas import (
    DayClassificationOut,
    DaysOut,
    HolidaySet,
    Interval,
)
from leaveledger.common.constants import WEEKEND_DAYS, DayKind

ONE_DAY = timedelta(days=1)


class CalendarService:
    """Day sequences, predicates and bounded consumers."""

    # ─────────────────────────────────────────────────────────────────
    # Predicates
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def is_weekend(day: date) -> bool:
        return day.weekday() in WEEKEND_DAYS

    @staticmethod
    def is_bank_holiday(day: date, holidays: HolidaySet) -> bool:
        return day in holidays

    @staticmethod
    def is_holiday(day: date, holidays: HolidaySet) -> bool:
        """Any day that is a weekend or a bank holiday."""
        return CalendarService.is_weekend(day) or CalendarService.is_bank_holiday(
            day, holidays
        )

    @staticmethod
    def is_workday(day: date, holidays: HolidaySet) -> bool:
        return not CalendarService.is_holiday(day, holidays)

    # ─────────────────────────────────────────────────────────────────
    # Sequences
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def calendar(start: date) -> Iterator[date]:
        """Consecutive days starting at ``start``, unbounded up to ``date.max``."""
        day = start
        while True:
            yield day
            if day == date.max:
                return
            day += ONE_DAY

    @staticmethod
    def holidays_seq(start: date, holidays: HolidaySet) -> Iterator[date]:
        return (
            d for d in CalendarService.calendar(start)
            if CalendarService.is_holiday(d, holidays)
        )

    @staticmethod
    def weekends_seq(start: date) -> Iterator[date]:
        return (d for d in CalendarService.calendar(start) if CalendarService.is_weekend(d))

    @staticmethod
    def workdays_seq(start: date, holidays: HolidaySet) -> Iterator[date]:
        return (
            d for d in CalendarService.calendar(start)
            if CalendarService.is_workday(d, holidays)
        )

    @staticmethod
    def sequence(kind: DayKind, start: date, holidays: HolidaySet) -> Iterator[date]:
        """Look up one of the named sequences."""
        factories: dict[DayKind, Callable[[], Iterator[date]]] = {
            DayKind.calendar: lambda: CalendarService.calendar(start),
            DayKind.workdays: lambda: CalendarService.workdays_seq(start, holidays),
            DayKind.weekends: lambda: CalendarService.weekends_seq(start),
            DayKind.holidays: lambda: CalendarService.holidays_seq(start, holidays),
        }
        return factories[kind]()

    # ─────────────────────────────────────────────────────────────────
    # Bounded consumers
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def take(n: int, days: Iterable[date]) -> list[date]:
        """First ``n`` elements of a (possibly infinite) sequence."""
        return list(islice(days, max(n, 0)))

    @staticmethod
    def as_days(interval: Interval, days: Iterable[date]) -> Iterator[date]:
        """Elements of ``days`` while they fall inside ``interval``.

        Take-while, not filter: stops at the first day past the interval,
        so an infinite ``days`` terminates. ``days`` must be ascending.
        """
        return takewhile(interval.contains, days)

    # ─────────────────────────────────────────────────────────────────
    # Responses
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def classify(day: date, holidays: HolidaySet) -> DayClassificationOut:
        return DayClassificationOut(
            date=day,
            is_weekend=CalendarService.is_weekend(day),
            is_bank_holiday=CalendarService.is_bank_holiday(day, holidays),
            is_workday=CalendarService.is_workday(day, holidays),
            holiday_name=holidays.get(day),
        )

    @staticmethod
    def preview(
        kind: DayKind,
        start: date,
        n: int,
        holidays: HolidaySet,
    ) -> DaysOut:
        days = CalendarService.take(n, CalendarService.sequence(kind, start, holidays))
        return DaysOut(kind=kind, start=start, days=days)
