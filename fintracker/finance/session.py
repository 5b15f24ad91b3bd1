"""Mini README: Session-scoped state shared by the form and the view.

One ``TrackerSession`` exists per running application. It owns the ledger
and the summary totals so that neither lives in module-level globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..logging_utils import get_logger
from .ledger import TransactionLedger
from .summary import SummaryAccumulator

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class TrackerSession:
    """Ledger plus running totals for the lifetime of the process."""

    ledger: TransactionLedger = field(default_factory=TransactionLedger)
    summary: SummaryAccumulator = field(default_factory=SummaryAccumulator)

    def __post_init__(self) -> None:
        LOGGER.debug("Tracker session created with %s transactions", len(self.ledger))
