"""Mini README: Entry point CLI for launching the financial tracker.

This script exposes a Typer CLI that starts the FastAPI page under uvicorn
with configurable host and port. It applies the logging level chosen by the
settings and draws defaults from environment variables when available.
"""

from __future__ import annotations

import typer
import uvicorn

from fintracker.configuration import get_settings
from fintracker.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch the financial tracker in your browser.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    reload: bool = typer.Option(
        False, help="Restart on source changes (development only)."
    ),
) -> None:
    """Start the tracker page using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot navigate to the wildcard bind addresses.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting {settings.application_title} on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "fintracker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=reload,
    )


if __name__ == "__main__":
    cli()
