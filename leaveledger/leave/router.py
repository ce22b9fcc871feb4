"""Leave router — build requests, expand to days, add to ledgers.

Stateless: callers send the ledger they want to extend and get a new one back.
A rejection is a normal 200 response with ``status: "rejected"``. Supplied
ledgers are re-checked against the configured holidays before use.
"""

from fastapi import APIRouter, Depends

from leaveledger.calendar.schemas import HolidaySet
from leaveledger.dependencies import get_holidays
from leaveledger.leave.schemas import (
    AddResult,
    LeaveDaysOut,
    LeaveRequest,
    LeaveRequestCreate,
    Ledger,
    LedgerAddRequest,
    LedgerChainRequest,
)
from leaveledger.leave.service import LeaveService

router = APIRouter(prefix="", tags=["leave"])


# ── POST /requests ──────────────────────────────────────────────────

@router.post("/requests", response_model=LeaveRequest)
async def build_request(
    body: LeaveRequestCreate,
    holidays: HolidaySet = Depends(get_holidays),
):
    """Build a leave request spanning ``total_days`` workdays."""
    return LeaveService.build_from_create(body, holidays)


# ── POST /requests/days ─────────────────────────────────────────────

@router.post("/requests/days", response_model=LeaveDaysOut)
async def request_days(
    body: LeaveRequest,
    holidays: HolidaySet = Depends(get_holidays),
):
    """Individual workdays covered by a leave request."""
    LeaveService.check_ledger(Ledger((body,)), holidays, field="request")
    return LeaveService.days_out(body, holidays)


# ── POST /ledger/add ────────────────────────────────────────────────

@router.post("/ledger/add", response_model=AddResult)
async def add_to_ledger(
    body: LedgerAddRequest,
    holidays: HolidaySet = Depends(get_holidays),
):
    """Build the candidate and try to append it to the ledger."""
    ledger = LeaveService.check_ledger(body.ledger, holidays)
    candidate = LeaveService.build_from_create(body.candidate, holidays)
    return LeaveService.try_add(ledger, candidate, holidays)


# ── POST /ledger/chain ──────────────────────────────────────────────

@router.post("/ledger/chain", response_model=AddResult)
async def chain_ledger(
    body: LedgerChainRequest,
    holidays: HolidaySet = Depends(get_holidays),
):
    """Append candidates in order; the first rejection stops the chain."""
    ledger = LeaveService.check_ledger(body.ledger, holidays)
    candidates = [LeaveService.build_from_create(c, holidays) for c in body.candidates]
    return LeaveService.add_all(ledger, candidates, holidays)
