"""Leave Pydantic v2 schemas — leave requests, ledgers and add results.

Naming conventions:
  - *Create / *Request  → request bodies (write)
  - *Out                → response bodies (read)
  - Accepted / Rejected → outcomes of adding to a ledger
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Annotated, Iterator, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

from leaveledger.calendar.schemas import Interval
from leaveledger.common.constants import MAX_REQUEST_DAYS, LeaveType, RejectionReason
from leaveledger.common.dates import IsoDate


# ═════════════════════════════════════════════════════════════════════
# Leave Request
# ═════════════════════════════════════════════════════════════════════


class LeaveRequest(BaseModel):
    """A built leave request. ``end_date`` is inclusive, ``interval`` is not."""

    model_config = ConfigDict(frozen=True)

    type: LeaveType
    start_date: IsoDate
    end_date: IsoDate = Field(..., description="Last workday of the leave (inclusive)")
    interval: Interval
    total_days: int = Field(..., ge=1, description="Workdays requested")

    @model_validator(mode="after")
    def _check_interval(self) -> LeaveRequest:
        if self.end_date == date.max:
            raise ValueError("end_date must be before 9999-12-31")
        expected = Interval(start=self.start_date, end=self.end_date + timedelta(days=1))
        if self.interval != expected:
            raise ValueError("interval must be [start_date, end_date + 1 day)")
        return self


class LeaveRequestCreate(BaseModel):
    """Payload for building a leave request."""

    start_date: IsoDate = Field(..., description="First day of the leave")
    total_days: int = Field(
        ..., le=MAX_REQUEST_DAYS, description="Number of workdays requested"
    )
    type: LeaveType = LeaveType.annual


# ═════════════════════════════════════════════════════════════════════
# Ledger / Person
# ═════════════════════════════════════════════════════════════════════


class Ledger(RootModel[tuple[LeaveRequest, ...]]):
    """Accepted leave requests in acceptance order; intervals never overlap."""

    model_config = ConfigDict(frozen=True)

    root: tuple[LeaveRequest, ...] = ()

    @model_validator(mode="after")
    def _check_no_overlap(self) -> Ledger:
        for i, earlier in enumerate(self.root):
            for later in self.root[i + 1:]:
                if earlier.interval.overlaps(later.interval):
                    raise ValueError(
                        f"requests starting {earlier.start_date} and "
                        f"{later.start_date} overlap"
                    )
        return self

    def __iter__(self) -> Iterator[LeaveRequest]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> LeaveRequest:
        return self.root[index]

    def intervals(self) -> Iterator[Interval]:
        return (r.interval for r in self.root)

    def appended(self, request: LeaveRequest) -> Ledger:
        """New ledger with ``request`` at the end.

        Callers have already checked ``request`` against every entry
        (see ``LeaveService.try_add``), so the overlap scan is skipped.
        """
        return Ledger.model_construct(self.root + (request,))


class Person(BaseModel):
    """A named person and the ledger they own."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    ledger: Ledger = Field(default_factory=Ledger)


# ═════════════════════════════════════════════════════════════════════
# Add results
# ═════════════════════════════════════════════════════════════════════


class Accepted(BaseModel):
    """The candidate was appended; ``ledger`` is the new value."""

    model_config = ConfigDict(frozen=True)

    status: Literal["accepted"] = "accepted"
    ledger: Ledger

    @property
    def accepted(self) -> bool:
        return True


class Rejected(BaseModel):
    """The candidate was refused; ``ledger`` is the untouched input.

    ``position`` is set by chained adds: the zero-based index of the
    candidate that stopped the chain.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["rejected"] = "rejected"
    reason: RejectionReason
    request: LeaveRequest
    ledger: Ledger
    position: Optional[int] = None

    @property
    def accepted(self) -> bool:
        return False


AddResult = Annotated[Union[Accepted, Rejected], Field(discriminator="status")]


# ═════════════════════════════════════════════════════════════════════
# Ledger operations — request bodies
# ═════════════════════════════════════════════════════════════════════


class LedgerAddRequest(BaseModel):
    """Try to add one candidate to an existing ledger."""

    ledger: Ledger = Field(default_factory=Ledger)
    candidate: LeaveRequestCreate


class LedgerChainRequest(BaseModel):
    """Add candidates left to right, stopping at the first rejection."""

    ledger: Ledger = Field(default_factory=Ledger)
    candidates: list[LeaveRequestCreate] = Field(default_factory=list)


class LeaveDaysOut(BaseModel):
    """Individual workdays covered by a leave request."""

    request: LeaveRequest
    days: list[date]
