"""CLI commands for refunds."""

from __future__ import annotations

from typing import Annotated

import typer

from jet_merchant.client import JetClient
from jet_merchant.commands._common import build_client, load_body, show_result
from jet_merchant.services.refunds import STATUSES, RefundService
from jet_merchant.utils.errors import JetError, handle_error
from jet_merchant.utils.output import OutputFormat

app = typer.Typer(name="refunds", help="Create and track merchant-initiated refunds.")


def _build_client(verbose: bool = False) -> tuple[JetClient, RefundService]:
    client = build_client(verbose)
    return client, client.refunds()


@app.command("create")
def create_refund(
    order_id: Annotated[str, typer.Argument(help="Merchant order ID")],
    alt_refund_id: Annotated[str, typer.Argument(help="Merchant's own refund ID")],
    body: Annotated[str, typer.Option("--body", "-b", help="JSON body or @file.json")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Create a refund for an order."""
    client, service = _build_client(verbose)
    try:
        result = service.create(order_id, alt_refund_id, load_body(body))
        show_result(result, output, title="Refund Created")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("state")
def refund_state(
    refund_authorization_id: Annotated[str, typer.Argument(help="Refund authorization ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show the state of a refund."""
    client, service = _build_client(verbose)
    try:
        result = service.get_state(refund_authorization_id)
        show_result(result, output, title="Refund State")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("list")
def list_refunds(
    status: Annotated[str, typer.Option("--status", "-s", help=f"One of: {', '.join(STATUSES)}")] = "created",
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List refund URLs in a given state."""
    client, service = _build_client(verbose)
    try:
        result = service.list(status)
        show_result(result, output, title=f"Refunds ({status})", list_key="refund_urls")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
