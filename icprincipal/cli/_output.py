"""
Shared output helpers for CLI commands.
"""

import json
from typing import Any, Dict, NoReturn

import typer
from rich.console import Console
from rich.table import Table

from ..principal import Principal

console = Console()


def describe(principal: Principal) -> Dict[str, Any]:
    return {
        "text": principal.to_text(),
        "hex": principal.to_hex(),
        "kind": principal.kind.value,
        "length": len(principal.raw),
    }


def print_json(data: Dict[str, Any]) -> None:
    print(json.dumps(data, indent=2))


def print_principal(principal: Principal, json_output: bool, title: str = "Principal") -> None:
    info = describe(principal)
    if json_output:
        print_json(info)
        return

    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Text", info["text"])
    table.add_row("Hex", info["hex"] or "(empty)")
    table.add_row("Kind", info["kind"])
    table.add_row("Length", str(info["length"]))
    console.print(table)


def fail(message: str, json_output: bool, code: int = 2) -> NoReturn:
    """Report an error and exit with code."""
    if json_output:
        print(json.dumps({"success": False, "error": message}))
    else:
        console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code)
