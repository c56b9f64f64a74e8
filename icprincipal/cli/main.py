#!/usr/bin/env python3
"""
icprincipal CLI - principal codec tools

Main entrypoint for the icprincipal command-line tool.
"""

from typing import Optional

import typer
from rich.table import Table

from .. import __version__
from ..logging_config import setup_logging
from ._output import console
from .commands import account, identity, principal

app = typer.Typer(
    name="icprincipal",
    help="Principal and ledger account identifier tools",
    add_completion=False,
)

app.add_typer(identity.app, name="identity", help="Ed25519 identity keys")

app.command("decode")(principal.decode_command)
app.command("encode")(principal.encode_command)
app.command("well-known")(principal.well_known_command)
app.command("account")(account.account_command)
app.command("check-account")(account.check_account_command)


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (default: $ICPRINCIPAL_LOG_LEVEL or INFO)"
    ),
    log_format: Optional[str] = typer.Option(
        None, "--log-format", help="json or text (default: $ICPRINCIPAL_LOG_FORMAT or json)"
    ),
):
    setup_logging(level=log_level, fmt=log_format)


@app.command()
def version():
    """Show version information."""
    table = Table(show_header=False, box=None)
    table.add_row("[bold]icprincipal[/bold]", f"v{__version__}")
    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
