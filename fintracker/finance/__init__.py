"""Mini README: Income and expense tracking for the financial tracker.

This package holds the domain side of the application: the append-only
transaction ledger, the running summary totals, the session object that
owns both, and the form controller that validates user input before
recording it. Nothing here depends on the web framework.
"""

from .forms import (
    InvalidAmountError,
    MissingFieldError,
    TransactionFormController,
    TransactionValidationError,
)
from .ledger import Transaction, TransactionKind, TransactionLedger
from .session import TrackerSession
from .summary import SummaryAccumulator

__all__ = [
    "InvalidAmountError",
    "MissingFieldError",
    "SummaryAccumulator",
    "TrackerSession",
    "Transaction",
    "TransactionFormController",
    "TransactionKind",
    "TransactionLedger",
    "TransactionValidationError",
]
