"""Reports router — days-off summary and fragments grouped by date."""

from fastapi import APIRouter, Depends

from leaveledger.calendar.schemas import HolidaySet
from leaveledger.dependencies import get_holidays
from leaveledger.leave.schemas import Person
from leaveledger.leave.service import LeaveService
from leaveledger.reports.schemas import (
    FragmentsOut,
    FragmentsRequest,
    SummaryOut,
    SummaryRequest,
)
from leaveledger.reports.service import ReportService

router = APIRouter(prefix="", tags=["reports"])


def _check_people(people: list[Person], holidays: HolidaySet) -> None:
    for i, person in enumerate(people):
        LeaveService.check_ledger(person.ledger, holidays, field=f"people[{i}].ledger")


# ── POST /summary ───────────────────────────────────────────────────

@router.post("/summary", response_model=SummaryOut)
async def summary(
    body: SummaryRequest,
    holidays: HolidaySet = Depends(get_holidays),
):
    """Total days off across all given ledgers, optionally for one type."""
    _check_people(body.people, holidays)
    return ReportService.summary(body.people, body.type)


# ── POST /fragments ─────────────────────────────────────────────────

@router.post("/fragments", response_model=FragmentsOut)
async def fragments(
    body: FragmentsRequest,
    holidays: HolidaySet = Depends(get_holidays),
):
    """Who is on leave on each date."""
    _check_people(body.people, holidays)
    return ReportService.fragments_by_date(body.people, holidays)
