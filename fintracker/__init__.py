"""Mini README: Core package initializer for the financial tracker.

The tracker records income and expense transactions entered through a
browser form and keeps running totals for the summary pane. Subpackages:

    * finance - ledger, summary totals, session state and form controller.
    * interface - FastAPI application rendering the tracker page.
    * utils - display formatting helpers.
"""

from .logging_utils import get_logger

__version__ = "1.0.0"

__all__ = ["get_logger", "__version__"]
