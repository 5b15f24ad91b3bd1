"""Mini README: Interactive interface for the financial tracker.

Exports the FastAPI application factory that serves the tracker page.
"""

from .web_app import create_application

__all__ = ["create_application"]
