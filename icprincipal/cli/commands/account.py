"""
Account commands: account, check-account
"""

from typing import Optional

import typer

from ...core.encoding import from_hex
from ...core.errors import ChecksumMismatch, PrincipalError
from ...principal import Principal, account_identifier, verify_account_identifier
from .._output import console, fail, print_json


def account_command(
    principal_text: str = typer.Argument(..., metavar="PRINCIPAL", help="Owner principal text"),
    subaccount: Optional[str] = typer.Option(
        None,
        "--subaccount",
        "-s",
        help="32-byte sub-account as 64 hex characters (default: all zeros)",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Derive the ledger account identifier of a principal.

    Examples:
        icprincipal account 2vxsx-fae
        icprincipal account 2vxsx-fae --subaccount 00...01
    """
    try:
        principal = Principal.from_text(principal_text)
        sub = from_hex(subaccount) if subaccount is not None else None
        account_id = account_identifier(principal, sub)
    except ChecksumMismatch as e:
        fail(str(e), json_output, code=1)
    except PrincipalError as e:
        fail(str(e), json_output, code=2)

    if json_output:
        print_json(
            {
                "principal": principal.to_text(),
                "subaccount": (sub or bytes(32)).hex(),
                "account_id": account_id.hex(),
            }
        )
    else:
        console.print(account_id.hex())


def check_account_command(
    account_hex: str = typer.Argument(..., metavar="ACCOUNT_ID", help="Account identifier as hex"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Verify the checksum embedded in an account identifier.

    Exit code 0 if valid, 1 if the checksum does not match.
    """
    try:
        value = from_hex(account_hex)
    except PrincipalError as e:
        fail(str(e), json_output, code=2)

    if not verify_account_identifier(value):
        fail(f"account identifier {account_hex!r} has an invalid checksum", json_output, code=1)

    if json_output:
        print_json({"success": True, "account_id": value.hex()})
    else:
        console.print("[green]✓ Account identifier checksum valid[/green]")
