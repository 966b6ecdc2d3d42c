"""Mini README: Entry point CLI for launching the Expense Splitter panel.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port, and production flags, and lists the notifier
gateways available to the balance notification feature.
"""

from __future__ import annotations

import typer
import uvicorn

from expense_splitter.configuration import get_settings
from expense_splitter.logging_utils import configure_root_logger
from expense_splitter.notifications import REGISTRY

cli = typer.Typer(help="Launch and inspect the Expense Splitter control panel.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 / :: wildcard, so point at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting Expense Splitter on "
        f"{effective_host}:{effective_port}.\n"
        "Open your browser at "
        f"http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "expense_splitter.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production and settings.environment == "development",
    )


@cli.command()
def gateways() -> None:
    """List the notifier gateways that can be selected in configuration."""

    settings = get_settings()
    for identifier in REGISTRY.available_gateways():
        marker = "*" if identifier == settings.notifier_gateway.lower() else " "
        typer.echo(f"{marker} {identifier}")


if __name__ == "__main__":
    cli()
