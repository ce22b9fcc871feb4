"""Reports Pydantic v2 schemas — aggregates and per-day fragments."""

from __future__ import annotations


from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from leaveledger.common.constants import LeaveType
from leaveledger.common.dates import IsoDate
from leaveledger.leave.schemas import Person


# ═════════════════════════════════════════════════════════════════════
# Fragments
# ═════════════════════════════════════════════════════════════════════


class Fragment(BaseModel):
    """One workday of one person's leave request."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: LeaveType
    date: IsoDate


class FragmentsRequest(BaseModel):
    people: list[Person] = Field(default_factory=list)


class FragmentDayOut(BaseModel):
    """Everyone on leave on a single date."""

    date: IsoDate
    fragments: list[Fragment]


class FragmentsOut(BaseModel):
    days: list[FragmentDayOut] = Field(default_factory=list)


# ═════════════════════════════════════════════════════════════════════
# Summary
# ═════════════════════════════════════════════════════════════════════


class SummaryRequest(BaseModel):
    people: list[Person] = Field(default_factory=list)
    type: Optional[LeaveType] = Field(
        default=None, description="Restrict total_days_off to one leave type"
    )


class SummaryOut(BaseModel):
    """Days off across all given ledgers."""

    total_days_off: int = 0
    request_count: int = 0
    by_type: dict[LeaveType, int] = Field(default_factory=dict)
