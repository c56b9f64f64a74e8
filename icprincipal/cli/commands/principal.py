"""
Principal commands: decode, encode, well-known
"""

import typer
from rich.table import Table

from ...core.errors import ChecksumMismatch, PrincipalError
from ...principal import Principal
from .._output import console, describe, fail, print_json, print_principal


def decode_command(
    text: str = typer.Argument(..., help="Principal text, e.g. rrkah-fqaaa-aaaaa-aaaaq-cai"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Decode principal text and show its bytes and kind.

    Examples:
        icprincipal decode aaaaa-aa
        icprincipal decode 2vxsx-fae --json
    """
    try:
        principal = Principal.from_text(text)
    except ChecksumMismatch as e:
        fail(str(e), json_output, code=1)
    except PrincipalError as e:
        fail(str(e), json_output, code=2)

    print_principal(principal, json_output)


def encode_command(
    hex_value: str = typer.Argument(..., metavar="HEX", help="Raw principal bytes as hex"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Encode raw principal bytes (hex) as canonical text.

    Examples:
        icprincipal encode 00000000000000010101
        icprincipal encode 04 --json
    """
    try:
        principal = Principal.from_hex(hex_value)
    except PrincipalError as e:
        fail(str(e), json_output, code=2)

    if json_output:
        print_json(describe(principal))
    else:
        console.print(principal.to_text())


def well_known_command(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show the anonymous and management principals.
    """
    principals = {
        "anonymous": Principal.anonymous(),
        "management": Principal.management(),
    }

    if json_output:
        print_json({name: describe(p) for name, p in principals.items()})
        return

    table = Table(title="Well-known principals")
    table.add_column("Name", style="cyan")
    table.add_column("Text", style="green")
    table.add_column("Hex", style="dim")
    table.add_column("Kind", style="yellow")
    for name, p in principals.items():
        table.add_row(name, p.to_text(), p.to_hex() or "(empty)", p.kind.value)
    console.print(table)
