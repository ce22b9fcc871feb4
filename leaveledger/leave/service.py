"""Leave service layer — request building, overlap checks and the ledger insert rule.

Business logic:
  - A request spans ``total_days`` workdays from its start date; weekends and
    bank holidays inside the range are skipped, not counted
  - A request may not start on a weekend or bank holiday
  - A request may not overlap any request already in the ledger
  - Chained adds stop at the first rejection (later candidates are dropped)

Ledgers are immutable: every operation returns a new value and a rejection
hands back the input ledger untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date
from typing import Union

from leaveledger.calendar.schemas import HolidaySet, Interval
from leaveledger.calendar.service import ONE_DAY, CalendarService
from leaveledger.common.constants import MAX_REQUEST_DAYS, LeaveType, RejectionReason
from leaveledger.common.exceptions import InvalidRequestException, ValidationException
from leaveledger.leave.schemas import (
    Accepted,
    LeaveDaysOut,
    LeaveRequest,
    LeaveRequestCreate,
    Ledger,
    Rejected,
)

logger = logging.getLogger(__name__)


class LeaveService:
    """Pure leave operations over immutable ledgers."""

    # ─────────────────────────────────────────────────────────────────
    # Build
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def build_leave_request(
        start_date: date,
        total_days: int,
        leave_type: LeaveType,
        holidays: HolidaySet,
    ) -> LeaveRequest:
        """Create a leave request covering ``total_days`` workdays.

        The start date itself is not checked here; ``try_add`` refuses
        requests that begin on a non-workday.
        """
        if total_days < 1:
            raise InvalidRequestException(
                "total_days", f"total_days must be at least 1, got {total_days}."
            )

        if total_days > MAX_REQUEST_DAYS:
            raise InvalidRequestException(
                "total_days",
                f"total_days must be at most {MAX_REQUEST_DAYS}, got {total_days}.",
            )

        workdays = CalendarService.take(
            total_days, CalendarService.workdays_seq(start_date, holidays)
        )
        # The interval end is the day after end_date, which must still be a date.
        if len(workdays) < total_days or workdays[-1] == date.max:
            raise InvalidRequestException(
                "total_days",
                f"Not enough workdays after {start_date} for {total_days} days.",
            )
        end_date = workdays[-1]

        return LeaveRequest(
            type=leave_type,
            start_date=start_date,
            end_date=end_date,
            interval=Interval(start=start_date, end=end_date + ONE_DAY),
            total_days=total_days,
        )

    @staticmethod
    def build_from_create(data: LeaveRequestCreate, holidays: HolidaySet) -> LeaveRequest:
        return LeaveService.build_leave_request(
            data.start_date, data.total_days, data.type, holidays,
        )

    # ─────────────────────────────────────────────────────────────────
    # Overlap
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def overlaps(intervals: Iterable[Interval], candidate: Interval) -> bool:
        """True if at least one of ``intervals`` overlaps ``candidate``."""
        return any(candidate.overlaps(existing) for existing in intervals)

    # ─────────────────────────────────────────────────────────────────
    # Ledger insert
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def try_add(
        ledger: Ledger,
        request: LeaveRequest,
        holidays: HolidaySet,
    ) -> Union[Accepted, Rejected]:
        """Append ``request`` to ``ledger`` or reject it."""

        if CalendarService.is_holiday(request.start_date, holidays):
            logger.info(
                "Rejected %s request starting %s: not a workday",
                request.type.value, request.start_date,
            )
            return Rejected(
                reason=RejectionReason.starts_on_holiday,
                request=request,
                ledger=ledger,
            )

        if LeaveService.overlaps(ledger.intervals(), request.interval):
            logger.info(
                "Rejected %s request %s → %s: overlaps an existing request",
                request.type.value, request.start_date, request.end_date,
            )
            return Rejected(
                reason=RejectionReason.overlaps_existing,
                request=request,
                ledger=ledger,
            )

        logger.debug(
            "Accepted %s request %s → %s (%d days)",
            request.type.value, request.start_date, request.end_date, request.total_days,
        )
        return Accepted(ledger=ledger.appended(request))

    @staticmethod
    def add_all(
        ledger: Ledger,
        requests: Iterable[LeaveRequest],
        holidays: HolidaySet,
    ) -> Union[Accepted, Rejected]:
        """Add ``requests`` left to right; the first rejection ends the chain.

        A rejection discards every later candidate as well and returns the
        ledger as it was before the chain started.
        """
        current = ledger
        for position, request in enumerate(requests):
            result = LeaveService.try_add(current, request, holidays)
            if isinstance(result, Rejected):
                logger.info("Chain stopped at candidate %d (%s)", position, result.reason.value)
                return result.model_copy(update={"ledger": ledger, "position": position})
            current = result.ledger
        return Accepted(ledger=current)

    @staticmethod
    def check_ledger(ledger: Ledger, holidays: HolidaySet, field: str = "ledger") -> Ledger:
        """Verify a caller-supplied ledger against ``holidays``.

        Each entry must be what ``build_leave_request`` produces for its
        start date, length and type, and must start on a workday. Overlaps
        are already refused by the ``Ledger`` schema.
        """
        errors: dict[str, list[str]] = {}
        for i, request in enumerate(ledger):
            key = f"{field}[{i}]"
            if CalendarService.is_holiday(request.start_date, holidays):
                errors.setdefault(key, []).append(
                    f"{request.start_date} is not a workday."
                )
            try:
                rebuilt = LeaveService.build_leave_request(
                    request.start_date, request.total_days, request.type, holidays,
                )
            except InvalidRequestException as exc:
                errors.setdefault(key, []).append(exc.detail)
                continue
            if rebuilt != request:
                errors.setdefault(key, []).append(
                    f"{request.total_days} workdays from {request.start_date} "
                    f"end on {rebuilt.end_date}, not {request.end_date}."
                )
        if errors:
            raise ValidationException(errors)
        return ledger

    # ─────────────────────────────────────────────────────────────────
    # Days
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def expand_to_days(request: LeaveRequest, holidays: HolidaySet) -> Iterator[date]:
        """Workdays covered by ``request``, in order."""
        return CalendarService.as_days(
            request.interval,
            CalendarService.workdays_seq(request.start_date, holidays),
        )

    @staticmethod
    def days_out(request: LeaveRequest, holidays: HolidaySet) -> LeaveDaysOut:
        return LeaveDaysOut(
            request=request,
            days=list(LeaveService.expand_to_days(request, holidays)),
        )
