"""Mini README: In-memory transaction ledger for income and expenses.

Structure:
    * TransactionKind - enum representing income versus expense entries.
    * Transaction - frozen dataclass storing a single recorded entry.
    * TransactionLedger - append-only, insertion ordered collection.

Amounts are always stored as non-negative values; the direction of their
effect on the running totals is carried entirely by ``TransactionKind``.
Records are never edited or removed once appended, so the ledger exposes no
mutation other than ``append``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class TransactionKind(str, Enum):
    """Enumerate the two options offered by the kind selector."""

    INCOME = "Income"
    EXPENSE = "Expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce arbitrary casing into a valid transaction kind."""

        try:
            normalised = value.strip().lower()
        except AttributeError as error:
            raise ValueError(f"Unsupported transaction kind: {value}") from error
        for kind in cls:
            if kind.value.lower() == normalised:
                return kind
        raise ValueError(f"Unsupported transaction kind: {value}")

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a ledger entry as shown in the transactions table."""

    description: str
    kind: TransactionKind
    amount: float

    def __post_init__(self) -> None:
        if not self.description:
            raise ValueError("Transactions require a description.")
        if self.amount < 0:
            raise ValueError("Transaction amounts are stored without a sign.")

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "description": self.description,
            "kind": self.kind.label,
            "amount": self.amount,
        }


class TransactionLedger:
    """Append-only sequence of transactions preserving insertion order."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._transactions: List[Transaction] = list(transactions or [])
        LOGGER.debug("Transaction ledger initialised with %s entries", len(self._transactions))

    def append(self, transaction: Transaction) -> None:
        """Record a new transaction at the end of the ledger."""

        self._transactions.append(transaction)
        LOGGER.debug("Ledger now holds %s entries", len(self._transactions))

    def list_transactions(self) -> List[Transaction]:
        """Return a copy of the transactions in the order they were added."""

        return list(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._transactions))
