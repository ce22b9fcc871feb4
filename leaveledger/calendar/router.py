"""Calendar router — configured holidays, day sequences, day classification."""

from fastapi import APIRouter, Depends, Query

from leaveledger.calendar.schemas import (
    DayClassificationOut,
    DaysOut,
    HolidayOut,
    HolidaySet,
    holidays_to_out,
)
from leaveledger.calendar.service import CalendarService
from leaveledger.common.constants import MAX_PREVIEW_DAYS, DayKind
from leaveledger.common.dates import parse_date
from leaveledger.dependencies import get_holidays

router = APIRouter(prefix="", tags=["calendar"])


# ── GET /holidays ───────────────────────────────────────────────────

@router.get("/holidays", response_model=list[HolidayOut])
async def list_holidays(holidays: HolidaySet = Depends(get_holidays)):
    """Configured bank holidays, sorted by date."""
    return holidays_to_out(holidays)


# ── GET /days ───────────────────────────────────────────────────────

@router.get("/days", response_model=DaysOut)
async def list_days(
    start: str = Query(..., description="First date, YYYY-MM-DD"),
    count: int = Query(10, ge=1, le=MAX_PREVIEW_DAYS),
    kind: DayKind = Query(DayKind.workdays),
    holidays: HolidaySet = Depends(get_holidays),
):
    """First ``count`` days of the calendar / workdays / weekends / holidays sequence."""
    return CalendarService.preview(kind, parse_date(start), count, holidays)


# ── GET /classify/{day} ─────────────────────────────────────────────

@router.get("/classify/{day}", response_model=DayClassificationOut)
async def classify_day(day: str, holidays: HolidaySet = Depends(get_holidays)):
    """Weekend / bank-holiday / workday flags for one date."""
    return CalendarService.classify(parse_date(day), holidays)
