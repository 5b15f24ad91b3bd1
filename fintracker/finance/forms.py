"""Mini README: Validation and submission of the add-transaction form.

Structure:
    * TransactionValidationError - base error carrying a dialog title/message.
    * MissingFieldError - a required input was left empty.
    * InvalidAmountError - the amount text is not a number.
    * TransactionFormController - turns raw form input into ledger entries.

The controller is the only code that mutates the session. Rejected input
raises before anything is touched, so a failed submission never changes the
ledger or the totals.
"""

from __future__ import annotations

import math
import re
from dataclasses import replace
from typing import Optional

from ..logging_utils import get_logger
from .ledger import Transaction, TransactionKind
from .session import TrackerSession

LOGGER = get_logger(__name__)


class TransactionValidationError(ValueError):
    """Raised when form input cannot be turned into a transaction."""

    title = "Validation Error"
    message = "Invalid transaction."

    def __init__(self) -> None:
        super().__init__(self.message)


class MissingFieldError(TransactionValidationError):
    title = "Validation Error"
    message = "All fields are required!"


class InvalidAmountError(TransactionValidationError):
    title = "Invalid Input"
    message = "Amount must be a number!"


AMOUNT_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_amount(amount_text: str) -> float:
    """Parse a plain decimal literal such as ``12``, ``-3.5`` or ``1e2``.

    Digit-group underscores, non-ASCII digits and non-finite values are all
    rejected with ``InvalidAmountError``.
    """

    text = amount_text.strip()
    if not AMOUNT_PATTERN.fullmatch(text):
        raise InvalidAmountError()
    value = float(text)
    if not math.isfinite(value):
        raise InvalidAmountError()
    return value


class TransactionFormController:
    """Validate form submissions and record them in the session."""

    def __init__(self, session: TrackerSession) -> None:
        self._session = session

    @property
    def session(self) -> TrackerSession:
        return self._session

    def submit(
        self,
        description: Optional[str],
        kind: Optional[str],
        amount_text: Optional[str],
    ) -> Transaction:
        """Validate the raw inputs and append the resulting transaction.

        Raises ``MissingFieldError`` when any field is empty or the kind is
        not one of the selector options, and ``InvalidAmountError`` when the
        amount does not parse as a number or would push a total past the
        float range. The stored amount is the absolute value of the parsed
        number.
        """

        if not description or not kind or not amount_text:
            raise MissingFieldError()
        try:
            transaction_kind = TransactionKind.from_str(kind)
        except ValueError as error:
            raise MissingFieldError() from error

        amount = abs(parse_amount(amount_text))
        transaction = Transaction(
            description=description,
            kind=transaction_kind,
            amount=amount,
        )
        projected = replace(self._session.summary)
        projected.apply(transaction)
        if not all(math.isfinite(total) for total in projected.as_dict().values()):
            raise InvalidAmountError()

        self._session.ledger.append(transaction)
        self._session.summary.apply(transaction)
        LOGGER.info(
            "Recorded %s '%s' of %.2f (balance now %.2f)",
            transaction_kind.label.lower(),
            description,
            amount,
            self._session.summary.balance,
        )
        return transaction
