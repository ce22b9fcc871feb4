#!/usr/bin/env python3
"""Demo Ledgers — build two sample ledgers and print the days-off summary.

Each candidate request is added in order; the first rejection abandons the
rest of that person's chain, exactly as the API's /ledger/chain does.

Usage:
    python -m scripts.demo_ledgers                       # summary of all types
    python -m scripts.demo_ledgers --type sick-leave     # only sick leave
    python -m scripts.demo_ledgers --json                # machine-readable output
    python -m scripts.demo_ledgers --fragments           # who is off on each day

Optionally, in .env (project root):
    BANK_HOLIDAYS  (JSON object of YYYY-MM-DD → name)
    LOG_LEVEL
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

# ── Path setup ────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from leaveledger.calendar.schemas import HolidaySet  # noqa: E402
from leaveledger.common.constants import LeaveType  # noqa: E402
from leaveledger.common.dates import format_date, parse_date  # noqa: E402
from leaveledger.config import settings  # noqa: E402
from leaveledger.leave.schemas import Ledger, Person, Rejected  # noqa: E402
from leaveledger.leave.service import LeaveService  # noqa: E402
from leaveledger.logging_config import setup_logging  # noqa: E402
from leaveledger.reports.service import ReportService  # noqa: E402

logger = logging.getLogger("demo_ledgers")

# (start date, workdays, type) per person, in submission order
SAMPLE_CANDIDATES: dict[str, list[tuple[str, int, LeaveType]]] = {
    "john": [
        ("2019-01-04", 5, LeaveType.annual),
        ("2019-01-24", 1, LeaveType.annual),
        ("2019-06-04", 5, LeaveType.sick_leave),
        ("2019-10-04", 3, LeaveType.sick_leave),
    ],
    "mary": [
        ("2019-01-03", 7, LeaveType.annual),
        ("2019-02-28", 30, LeaveType.maternity),
        ("2019-11-07", 14, LeaveType.sick_leave),
    ],
}


def build_person(
    name: str,
    candidates: list[tuple[str, int, LeaveType]],
    holidays: HolidaySet,
) -> Optional[Person]:
    """Chain the candidates into a ledger; None if any of them is rejected."""
    requests = [
        LeaveService.build_leave_request(parse_date(start), days, leave_type, holidays)
        for start, days, leave_type in candidates
    ]
    result = LeaveService.add_all(Ledger(), requests, holidays)
    if isinstance(result, Rejected):
        logger.warning(
            "%s: candidate %d (%s) rejected — %s; ledger abandoned",
            name, result.position, format_date(result.request.start_date),
            result.reason.value,
        )
        return None
    logger.info("%s: %d requests accepted", name, len(result.ledger))
    return Person(name=name, ledger=result.ledger)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build sample leave ledgers")
    parser.add_argument(
        "--type",
        choices=[t.value for t in LeaveType],
        default=None,
        help="Only count this leave type",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON")
    parser.add_argument("--fragments", action="store_true", help="Print days grouped by date")
    args = parser.parse_args(argv)

    setup_logging(settings.LOG_LEVEL)
    holidays = settings.bank_holidays
    logger.info("Loaded %d bank holidays", len(holidays))

    people = [
        person
        for name, candidates in SAMPLE_CANDIDATES.items()
        if (person := build_person(name, candidates, holidays)) is not None
    ]

    leave_type = LeaveType(args.type) if args.type else None
    summary = ReportService.summary(people, leave_type)

    if args.json:
        payload = {"summary": summary.model_dump(mode="json")}
        if args.fragments:
            payload["fragments"] = ReportService.fragments_by_date(
                people, holidays
            ).model_dump(mode="json")["days"]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    label = leave_type.value if leave_type else "all types"
    print(f"Days off ({label}): {summary.total_days_off} over {summary.request_count} requests")
    for lt, days in summary.by_type.items():
        print(f"  {lt.value:<12} {days}")

    if args.fragments:
        for day in ReportService.fragments_by_date(people, holidays).days:
            names = ", ".join(f"{f.name} ({f.type.value})" for f in day.fragments)
            print(f"{format_date(day.date)}  {names}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
