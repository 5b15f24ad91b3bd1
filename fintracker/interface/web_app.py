"""Mini README: FastAPI-powered page for the financial tracker.

Structure:
    * create_application - application factory wiring routes and templates.
    * terminate_process - default handler for the File -> Exit menu action.

The page mirrors a small desktop window: a menu bar (File -> Exit,
Help -> About), a transactions tab with the input form and table, and a
summary tab with the three running totals. Every render reads the session
directly, and successful submissions redirect back to the page, so the view
always reflects the latest accepted transaction.
"""

from __future__ import annotations

import os
import signal
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from fastapi import BackgroundTasks, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import TrackerSettings, get_settings
from ..finance import (
    TrackerSession,
    TransactionFormController,
    TransactionKind,
    TransactionValidationError,
)
from ..logging_utils import get_logger
from ..utils.formatting import format_currency

LOGGER = get_logger(__name__)

TEMPLATE_DIRECTORY = Path(__file__).parent / "templates"
STATIC_DIRECTORY = Path(__file__).parent / "static"


def terminate_process() -> None:
    """Ask the hosting server to shut down by interrupting our own process."""

    LOGGER.info("Exit requested from the menu; stopping the tracker")
    os.kill(os.getpid(), signal.SIGINT)


def create_application(
    session: Optional[TrackerSession] = None,
    settings: Optional[TrackerSettings] = None,
    on_exit: Optional[Callable[[], None]] = None,
) -> FastAPI:
    """Create the FastAPI application with routes bound to one tracker session."""

    if settings is None:
        settings = get_settings()
    if session is None:
        session = TrackerSession()
    if on_exit is None:
        on_exit = terminate_process
    controller = TransactionFormController(session)

    app = FastAPI(title=settings.application_title, version=settings.application_version)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIRECTORY)), name="static")
    templates = Jinja2Templates(directory=str(TEMPLATE_DIRECTORY))
    templates.env.filters["currency"] = lambda value: format_currency(value, settings.currency_symbol)

    def render_page(
        request: Request,
        *,
        form: Optional[Dict[str, str]] = None,
        error: Optional[TransactionValidationError] = None,
        show_about: bool = False,
        status_code: int = 200,
    ) -> HTMLResponse:
        return templates.TemplateResponse(
            request,
            "tracker.html",
            {
                "title": settings.application_title,
                "version": settings.application_version,
                "kinds": [kind.label for kind in TransactionKind],
                "transactions": session.ledger.list_transactions(),
                "summary": session.summary,
                "form": form or {"description": "", "amount": "", "kind": ""},
                "error": error,
                "show_about": show_about,
            },
            status_code=status_code,
        )

    @app.get("/", response_class=HTMLResponse)
    async def tracker_page(request: Request) -> HTMLResponse:
        """Render the form, the transactions table and the summary pane."""

        LOGGER.debug("Rendering tracker page with %s transactions", len(session.ledger))
        return render_page(request)

    @app.post("/transactions", response_class=HTMLResponse, response_model=None)
    async def add_transaction(
        request: Request,
        description: str = Form(""),
        amount: str = Form(""),
        kind: Optional[str] = Form(None),
    ) -> Union[HTMLResponse, RedirectResponse]:
        """Validate and record a submission, or show the error dialog."""

        try:
            controller.submit(description, kind, amount)
        except TransactionValidationError as error:
            LOGGER.info("Rejected transaction submission: %s - %s", error.title, error.message)
            return render_page(
                request,
                form={"description": description, "amount": amount, "kind": kind or ""},
                error=error,
                status_code=400,
            )
        return RedirectResponse(url="/", status_code=303)

    @app.get("/about", response_class=HTMLResponse)
    async def about(request: Request) -> HTMLResponse:
        """Render the page with the informational about dialog open."""

        return render_page(request, show_about=True)

    @app.post("/exit", response_class=HTMLResponse)
    async def exit_application(request: Request, background_tasks: BackgroundTasks) -> HTMLResponse:
        """Acknowledge the exit request, then stop the process once it is sent."""

        background_tasks.add_task(on_exit)
        return templates.TemplateResponse(
            request,
            "goodbye.html",
            {"title": settings.application_title},
        )

    @app.get("/api/snapshot")
    async def snapshot() -> JSONResponse:
        """Return the ledger rows and totals as JSON."""

        return JSONResponse(
            {
                "currency_symbol": settings.currency_symbol,
                "transactions": [transaction.as_dict() for transaction in session.ledger],
                "summary": session.summary.as_dict(),
            }
        )

    return app
