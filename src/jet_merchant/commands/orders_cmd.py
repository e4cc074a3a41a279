"""CLI commands for order management."""

from __future__ import annotations

from typing import Annotated

import typer

from jet_merchant.client import JetClient
from jet_merchant.commands._common import build_client, load_body, show_result
from jet_merchant.services.orders import STATUSES, OrderService
from jet_merchant.utils.errors import JetError, handle_error
from jet_merchant.utils.output import OutputFormat

app = typer.Typer(name="orders", help="Poll, acknowledge and ship orders.")


def _build_client(verbose: bool = False) -> tuple[JetClient, OrderService]:
    client = build_client(verbose)
    return client, client.orders()


@app.command("list")
def list_orders(
    status: Annotated[str, typer.Option("--status", "-s", help=f"One of: {', '.join(STATUSES)}")] = "ready",
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List order URLs in a given state."""
    client, service = _build_client(verbose)
    try:
        result = service.list(status)
        show_result(result, output, title=f"Orders ({status})", list_key="order_urls")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("get")
def get_order(
    order_id: Annotated[str, typer.Argument(help="Merchant order ID or an order URL")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.JSON,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show a single order."""
    client, service = _build_client(verbose)
    try:
        if order_id.startswith("/"):
            result = service.get(order_id)
        else:
            result = service.get_by_id(order_id)
        show_result(result, output, title="Order")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("directed-cancel")
def directed_cancel(
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List orders Jet has asked to be cancelled."""
    client, service = _build_client(verbose)
    try:
        result = service.directed_cancel()
        show_result(result, output, title="Directed Cancels", list_key="order_urls")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("acknowledge")
def acknowledge_order(
    order_id: Annotated[str, typer.Argument(help="Merchant order ID")],
    body: Annotated[str | None, typer.Option("--body", "-b", help="JSON body or @file.json")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Acknowledge (accept or reject) an order."""
    client, service = _build_client(verbose)
    try:
        result = service.acknowledge(order_id, load_body(body))
        show_result(result, output, title="Order Acknowledged")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("ship")
def ship_order(
    order_id: Annotated[str, typer.Argument(help="Merchant order ID")],
    body: Annotated[str | None, typer.Option("--body", "-b", help="JSON body or @file.json")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Send shipment details for an order."""
    client, service = _build_client(verbose)
    try:
        result = service.ship(order_id, load_body(body))
        show_result(result, output, title="Order Shipped")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("tag")
def tag_order(
    order_id: Annotated[str, typer.Argument(help="Merchant order ID")],
    tag: Annotated[str, typer.Argument(help="Tag to set on the order")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Tag an order."""
    client, service = _build_client(verbose)
    try:
        result = service.tag(order_id, tag)
        show_result(result, output, title="Order Tagged")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
