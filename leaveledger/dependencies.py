"""Shared FastAPI dependencies."""

from leaveledger.calendar.schemas import HolidaySet
from leaveledger.config import settings


def get_holidays() -> HolidaySet:
    """Bank holidays for the current request, built from settings.

    Tests override this via ``app.dependency_overrides``.
    """
    return settings.bank_holidays
