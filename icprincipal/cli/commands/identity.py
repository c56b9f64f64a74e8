"""
Identity commands: new, show
"""

import os
from typing import Optional

import typer

from ...core.errors import PrincipalError
from ...identity import SigningKey, VerifyingKey, get_default_key_path
from ...principal import account_identifier
from .._output import console, fail, print_json

app = typer.Typer()


@app.command()
def new(
    key_path: Optional[str] = typer.Option(
        None,
        "--key",
        "-k",
        help="Where to write the Ed25519 private key PEM (default: $ICPRINCIPAL_KEY_PATH or ~/.icprincipal/keys/identity_ed25519)",
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing key"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Generate an Ed25519 identity key and print its principal.

    Examples:
        icprincipal identity new
        icprincipal identity new --key ./identity.pem
    """
    path = key_path or str(get_default_key_path())
    public_path = path + ".pub"

    if os.path.exists(path) and not force:
        fail(f"Key already exists: {path} (use --force to overwrite)", json_output, code=2)

    signing_key = SigningKey.generate()
    try:
        signing_key.save_pem(path, public_path)
    except OSError as e:
        fail(f"Cannot write key: {e}", json_output, code=2)

    principal = signing_key.principal()
    if json_output:
        print_json(
            {
                "success": True,
                "key_path": path,
                "public_key_path": public_path,
                "principal": principal.to_text(),
            }
        )
    else:
        console.print("[green]✓ Identity created[/green]")
        console.print(f"  Key: [cyan]{path}[/cyan]")
        console.print(f"  Principal: {principal.to_text()}")


@app.command()
def show(
    key_path: Optional[str] = typer.Option(
        None,
        "--key",
        "-k",
        help="Ed25519 private key PEM, or public key PEM ending in .pub",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show the principal and default account of an identity key.

    Examples:
        icprincipal identity show
        icprincipal identity show --key ./identity.pem.pub --json
    """
    path = key_path or str(get_default_key_path())

    try:
        if path.endswith(".pub"):
            key = VerifyingKey.load_pem(path)
        else:
            key = VerifyingKey.from_signing_key(SigningKey.load_pem(path))
    except FileNotFoundError:
        fail(f"File not found: {path}", json_output, code=2)
    except PrincipalError as e:
        fail(str(e), json_output, code=2)

    principal = key.principal()
    info = {
        "principal": principal.to_text(),
        "public_key_der": key.der_public_key().hex(),
        "account_id": account_identifier(principal).hex(),
    }

    if json_output:
        print_json(info)
    else:
        console.print(f"[bold]Principal:[/bold] {info['principal']}")
        console.print(f"[bold]Account ID:[/bold] {info['account_id']}")
        console.print(f"[dim]Public key (DER):[/dim] {info['public_key_der']}")
