"""CLI commands for authentication management."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from jet_merchant.commands._common import build_client
from jet_merchant.utils.errors import JetError, handle_error
from jet_merchant.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="auth", help="Manage authentication tokens.")


@app.command()
def login(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show request details")] = False,
) -> None:
    """Fetch a token with the configured credentials and show its expiry."""
    client = build_client(verbose)
    try:
        console.print(f"Authenticating as [bold]{client.api_user}[/bold]...", style="yellow")
        client.auth.get_auth_header(force_refresh=True)
        status = client.auth.get_status()
        result = {
            "status": "authenticated",
            "merchant_id": client.merchant_id,
            "token_type": status.token_type,
            "expires_at": str(status.expires_at),
            "seconds_remaining": status.seconds_remaining,
        }
        print_output(result, output, title="Authentication")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command()
def status(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Show the cached token status of a fresh client."""
    client = build_client()
    token_status = client.auth.get_status()
    result = {
        "has_token": token_status.has_token,
        "is_expired": token_status.is_expired,
        "expires_at": str(token_status.expires_at) if token_status.expires_at else "N/A",
        "seconds_remaining": token_status.seconds_remaining or 0,
    }
    print_output(result, output, title="Token Status")
    client.close()


@app.command()
def refresh(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show request details")] = False,
) -> None:
    """Force a token fetch even if the cached token is still valid."""
    client = build_client(verbose)
    try:
        console.print("Force refreshing token...", style="yellow")
        client.auth.get_auth_header(force_refresh=True)
        status = client.auth.get_status()
        result = {
            "status": "refreshed",
            "token_type": status.token_type,
            "expires_at": str(status.expires_at),
            "seconds_remaining": status.seconds_remaining,
        }
        print_output(result, output, title="Token Refreshed")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
