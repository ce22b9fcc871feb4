"""Shared test fixtures — holiday sets, ledgers, app and HTTP client.

The holiday dependency is overridden so API tests never depend on the
environment's BANK_HOLIDAYS.
"""

from __future__ import annotations

from datetime import date
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from leaveledger.calendar.schemas import HolidaySet
from leaveledger.common.constants import DEFAULT_BANK_HOLIDAYS, LeaveType
from leaveledger.dependencies import get_holidays
from leaveledger.leave.schemas import Ledger, LeaveRequest, Person
from leaveledger.leave.service import LeaveService
from leaveledger.main import create_app


# ── Holiday sets ────────────────────────────────────────────────────

@pytest.fixture
def polish_holidays() -> HolidaySet:
    """The built-in 2018 table."""
    return HolidaySet.from_strings(DEFAULT_BANK_HOLIDAYS)


@pytest.fixture
def new_year_only() -> HolidaySet:
    return HolidaySet.from_pairs([("2018-01-01", "Nowy Rok")])


@pytest.fixture
def no_holidays() -> HolidaySet:
    return HolidaySet()


# ── Factories ───────────────────────────────────────────────────────

def _make_request(
    start: date,
    total_days: int,
    leave_type: LeaveType = LeaveType.annual,
    holidays: HolidaySet | None = None,
) -> LeaveRequest:
    return LeaveService.build_leave_request(
        start, total_days, leave_type, holidays or HolidaySet(),
    )


def _make_person(
    name: str,
    requests: list[LeaveRequest],
) -> Person:
    return Person(name=name, ledger=Ledger(tuple(requests)))


def _request_json(request: LeaveRequest) -> dict:
    return request.model_dump(mode="json")


# ── FastAPI test client ─────────────────────────────────────────────

@pytest.fixture
async def app(polish_holidays):
    """Create a fresh app instance with the holiday set overridden."""
    application = create_app()
    application.dependency_overrides[get_holidays] = lambda: polish_holidays
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
