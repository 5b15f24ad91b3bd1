"""Mini README: Running totals derived from the transaction ledger.

Structure:
    * SummaryAccumulator - income, expense and balance totals.

At runtime the totals are maintained incrementally: ``apply`` is called once
for every accepted transaction, in ledger order. ``from_transactions``
rebuilds the same values from scratch and is used to check that both paths
agree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from .ledger import Transaction, TransactionKind


@dataclass(slots=True)
class SummaryAccumulator:
    """Three running totals shown in the summary pane."""

    total_income: float = 0.0
    total_expenses: float = 0.0
    balance: float = 0.0

    @classmethod
    def from_transactions(cls, transactions: Iterable[Transaction]) -> "SummaryAccumulator":
        """Recompute the totals by replaying every transaction."""

        summary = cls()
        for transaction in transactions:
            summary.apply(transaction)
        return summary

    def apply(self, transaction: Transaction) -> None:
        """Fold a single accepted transaction into the totals."""

        if transaction.kind is TransactionKind.EXPENSE:
            self.total_expenses += transaction.amount
            self.balance -= transaction.amount
        else:
            self.total_income += transaction.amount
            self.balance += transaction.amount

    def as_dict(self) -> Dict[str, float]:
        return {
            "total_income": self.total_income,
            "total_expenses": self.total_expenses,
            "balance": self.balance,
        }
