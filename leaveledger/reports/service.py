"""Reports service — pure reducers over ledgers and per-day fragments."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Optional

from leaveledger.calendar.schemas import HolidaySet
from leaveledger.common.constants import LeaveType
from leaveledger.leave.schemas import LeaveRequest, Person
from leaveledger.leave.service import LeaveService
from leaveledger.reports.schemas import (
    Fragment,
    FragmentDayOut,
    FragmentsOut,
    SummaryOut,
)


class ReportService:
    """Aggregates and reporting fragments; nothing here mutates a ledger."""

    # ═════════════════════════════════════════════════════════════════
    # Aggregates
    # ═════════════════════════════════════════════════════════════════

    @staticmethod
    def total_days_off(requests: Iterable[LeaveRequest]) -> int:
        return sum(r.total_days for r in requests)

    @staticmethod
    def filter_by_type(
        leave_type: LeaveType,
        requests: Iterable[LeaveRequest],
    ) -> list[LeaveRequest]:
        return [r for r in requests if r.type == leave_type]

    @staticmethod
    def sick_leaves(requests: Iterable[LeaveRequest]) -> list[LeaveRequest]:
        return ReportService.filter_by_type(LeaveType.sick_leave, requests)

    @staticmethod
    def flatten_ledgers(people: Iterable[Person]) -> list[LeaveRequest]:
        """All requests of all people, person by person, ledger order kept."""
        return [r for person in people for r in person.ledger]

    @staticmethod
    def summary(
        people: Iterable[Person],
        leave_type: Optional[LeaveType] = None,
    ) -> SummaryOut:
        requests = ReportService.flatten_ledgers(people)
        if leave_type is not None:
            requests = ReportService.filter_by_type(leave_type, requests)

        by_type: dict[LeaveType, int] = {}
        for r in requests:
            by_type[r.type] = by_type.get(r.type, 0) + r.total_days

        return SummaryOut(
            total_days_off=ReportService.total_days_off(requests),
            request_count=len(requests),
            by_type=by_type,
        )

    # ═════════════════════════════════════════════════════════════════
    # Fragments
    # ═════════════════════════════════════════════════════════════════

    @staticmethod
    def request_fragments(
        name: str,
        request: LeaveRequest,
        holidays: HolidaySet,
    ) -> list[Fragment]:
        return [
            Fragment(name=name, type=request.type, date=day)
            for day in LeaveService.expand_to_days(request, holidays)
        ]

    @staticmethod
    def person_fragments(person: Person, holidays: HolidaySet) -> list[Fragment]:
        return [
            fragment
            for request in person.ledger
            for fragment in ReportService.request_fragments(person.name, request, holidays)
        ]

    @staticmethod
    def fragments_by_date(
        people: Iterable[Person],
        holidays: HolidaySet,
    ) -> FragmentsOut:
        """Fragments of everyone grouped by date, dates ascending."""
        grouped: dict[date, list[Fragment]] = {}
        for person in people:
            for fragment in ReportService.person_fragments(person, holidays):
                grouped.setdefault(fragment.date, []).append(fragment)

        return FragmentsOut(
            days=[
                FragmentDayOut(date=day, fragments=grouped[day])
                for day in sorted(grouped)
            ]
        )
