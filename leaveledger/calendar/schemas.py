"""Calendar value types and Pydantic v2 schemas.

Naming conventions:
  - HolidaySet / Interval  → immutable domain values
  - *Out                   → response bodies (read)
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Iterator, Mapping
from datetime import date
from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from leaveledger.common.constants import DayKind
from leaveledger.common.dates import IsoDate, parse_date


# ═════════════════════════════════════════════════════════════════════
# HolidaySet
# ═════════════════════════════════════════════════════════════════════


class HolidaySet(Mapping[date, str]):
    """Immutable mapping of bank-holiday date → display label."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[date, str]] = None) -> None:
        self._entries = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> HolidaySet:
        """Build from (YYYY-MM-DD, label) literal pairs."""
        return cls({parse_date(raw): label for raw, label in pairs})

    @classmethod
    def from_strings(cls, mapping: Mapping[str, str]) -> HolidaySet:
        return cls.from_pairs(mapping.items())

    def __getitem__(self, key: date) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[date]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"HolidaySet({len(self)} dates)"

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))


# ═════════════════════════════════════════════════════════════════════
# Interval
# ═════════════════════════════════════════════════════════════════════


class Interval(BaseModel):
    """Half-open date range [start, end)."""

    model_config = ConfigDict(frozen=True)

    start: IsoDate
    end: IsoDate = Field(..., description="Exclusive end")

    @model_validator(mode="after")
    def _check_order(self) -> Interval:
        if self.start > self.end:
            raise ValueError("start must be on or before end")
        return self

    def overlaps(self, other: Interval) -> bool:
        return max(self.start, other.start) < min(self.end, other.end)

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end


# ═════════════════════════════════════════════════════════════════════
# Responses
# ═════════════════════════════════════════════════════════════════════


class HolidayOut(BaseModel):
    """One configured bank holiday."""

    date: dt.date
    name: str


class DayClassificationOut(BaseModel):
    """Weekend / holiday / workday flags for a single date."""

    date: dt.date
    is_weekend: bool
    is_bank_holiday: bool
    is_workday: bool
    holiday_name: Optional[str] = None


class DaysOut(BaseModel):
    """Finite prefix of one of the calendar day sequences."""

    kind: DayKind
    start: date
    days: list[date]


def holidays_to_out(holidays: HolidaySet) -> list[HolidayOut]:
    return [HolidayOut(date=d, name=holidays[d]) for d in sorted(holidays)]
