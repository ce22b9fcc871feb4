"""Leave Ledger — workday calendar and leave-request conflict checking."""

__version__ = "1.0.0"
