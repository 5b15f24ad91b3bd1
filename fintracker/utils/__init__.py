"""Mini README: Shared helper utilities for the financial tracker."""

from .formatting import format_currency

__all__ = ["format_currency"]
