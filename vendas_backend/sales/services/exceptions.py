# sales/services/exceptions.py

"""
SALES SERVICE ERRORS

Centralized domain errors for the sales ledger services.
"""


class SalesServiceError(Exception):
    """Base exception for all sales service failures."""


class LedgerSyncError(SalesServiceError):
    """
    Raised when a reconciliation step cannot read from or write to the store.
    Rows committed before the failure stay committed.
    """


class InvalidPeriodError(SalesServiceError, ValueError):
    """Raised when a month/year window is out of range."""
