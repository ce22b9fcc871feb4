"""Reports test suite — aggregates over ledgers and per-day fragments."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from leaveledger.common.constants import LeaveType
from leaveledger.leave.schemas import Person
from leaveledger.reports.schemas import Fragment
from leaveledger.reports.service import ReportService
from tests.conftest import _make_person, _make_request


def _john() -> Person:
    return _make_person("john", [
        _make_request(date(2019, 1, 4), 5),
        _make_request(date(2019, 1, 24), 1),
        _make_request(date(2019, 6, 4), 5, LeaveType.sick_leave),
        _make_request(date(2019, 10, 4), 3, LeaveType.sick_leave),
    ])


def _mary() -> Person:
    return _make_person("mary", [
        _make_request(date(2019, 1, 3), 7),
        _make_request(date(2019, 2, 28), 30, LeaveType.maternity),
        _make_request(date(2019, 11, 7), 14, LeaveType.sick_leave),
    ])


# ═════════════════════════════════════════════════════════════════════
# 1. Aggregates
# ═════════════════════════════════════════════════════════════════════


class TestAggregates:
    """total_days_off / filter_by_type / sick_leaves / flatten_ledgers."""

    def test_total_days_off_of_two_sick_leaves(self):
        requests = [
            _make_request(date(2019, 6, 4), 5, LeaveType.sick_leave),
            _make_request(date(2019, 10, 4), 3, LeaveType.sick_leave),
        ]
        assert ReportService.total_days_off(requests) == 8

    def test_total_days_off_empty(self):
        assert ReportService.total_days_off([]) == 0

    def test_sick_leaves_of_one_person(self):
        sick = ReportService.sick_leaves(_john().ledger)
        assert [r.start_date for r in sick] == [date(2019, 6, 4), date(2019, 10, 4)]
        assert ReportService.total_days_off(sick) == 8

    def test_filter_by_type_keeps_order(self):
        annual = ReportService.filter_by_type(LeaveType.annual, _john().ledger)
        assert [r.start_date for r in annual] == [date(2019, 1, 4), date(2019, 1, 24)]

    def test_filter_by_type_no_match(self):
        assert ReportService.filter_by_type(LeaveType.unpaid, _john().ledger) == []

    def test_flatten_ledgers_person_by_person(self):
        flat = ReportService.flatten_ledgers([_mary(), _john()])
        assert [r.start_date for r in flat] == [
            date(2019, 1, 3), date(2019, 2, 28), date(2019, 11, 7),
            date(2019, 1, 4), date(2019, 1, 24), date(2019, 6, 4), date(2019, 10, 4),
        ]

    def test_sick_leaves_across_people(self):
        sick = ReportService.sick_leaves(ReportService.flatten_ledgers([_john(), _mary()]))
        assert ReportService.total_days_off(sick) == 22

    def test_summary_by_type(self):
        out = ReportService.summary([_john(), _mary()])
        assert out.total_days_off == 65
        assert out.request_count == 7
        assert out.by_type == {
            LeaveType.annual: 13,
            LeaveType.sick_leave: 22,
            LeaveType.maternity: 30,
        }

    def test_summary_restricted_to_type(self):
        out = ReportService.summary([_john(), _mary()], LeaveType.maternity)
        assert out.total_days_off == 30
        assert out.request_count == 1

    def test_summary_of_nobody(self):
        out = ReportService.summary([])
        assert out.total_days_off == 0
        assert out.by_type == {}


# ═════════════════════════════════════════════════════════════════════
# 2. Fragments
# ═════════════════════════════════════════════════════════════════════


class TestFragments:
    """One fragment per workday of a leave request."""

    def test_request_fragments(self, no_holidays):
        req = _make_request(date(2019, 1, 4), 5)
        fragments = ReportService.request_fragments("john", req, no_holidays)
        assert [f.date for f in fragments] == [
            date(2019, 1, 4), date(2019, 1, 7), date(2019, 1, 8),
            date(2019, 1, 9), date(2019, 1, 10),
        ]
        assert {f.name for f in fragments} == {"john"}
        assert {f.type for f in fragments} == {LeaveType.annual}

    def test_person_fragments_count_matches_total_days(self, no_holidays):
        john = _john()
        fragments = ReportService.person_fragments(john, no_holidays)
        assert len(fragments) == ReportService.total_days_off(john.ledger)

    def test_fragments_by_date_sorted_and_grouped(self, no_holidays):
        out = ReportService.fragments_by_date([_john(), _mary()], no_holidays)
        dates = [d.date for d in out.days]
        assert dates == sorted(dates)
        # Thu 01-03 only mary; Fri 01-04 both, people in given order
        assert [f.name for f in out.days[0].fragments] == ["mary"]
        assert out.days[0].date == date(2019, 1, 3)
        assert [f.name for f in out.days[1].fragments] == ["john", "mary"]

    def test_fragments_by_date_empty(self, no_holidays):
        assert ReportService.fragments_by_date([], no_holidays).days == []

    def test_fragment_date_is_strict_iso(self):
        assert Fragment(name="mary", type=LeaveType.annual, date="2019-01-07").date == date(2019, 1, 7)
        with pytest.raises(ValidationError):
            Fragment(name="mary", type=LeaveType.annual, date="2019-01-07T00:00:00")
