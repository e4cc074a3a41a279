"""CLI commands for return management."""

from __future__ import annotations

from typing import Annotated

import typer

from jet_merchant.client import JetClient
from jet_merchant.commands._common import build_client, load_body, show_result
from jet_merchant.services.returns import STATUSES, ReturnService
from jet_merchant.utils.errors import JetError, handle_error
from jet_merchant.utils.output import OutputFormat

app = typer.Typer(name="returns", help="Process customer returns.")


def _build_client(verbose: bool = False) -> tuple[JetClient, ReturnService]:
    client = build_client(verbose)
    return client, client.returns()


@app.command("list")
def list_returns(
    status: Annotated[str, typer.Option("--status", "-s", help=f"One of: {', '.join(STATUSES)}")] = "created",
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List return URLs in a given state."""
    client, service = _build_client(verbose)
    try:
        result = service.list(status)
        show_result(result, output, title=f"Returns ({status})", list_key="return_urls")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("get")
def get_return(
    return_id: Annotated[str, typer.Argument(help="Return authorization ID or a return URL")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.JSON,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show a single return."""
    client, service = _build_client(verbose)
    try:
        if return_id.startswith("/"):
            result = service.get(return_id)
        else:
            result = service.get_by_id(return_id)
        show_result(result, output, title="Return")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("acknowledge")
def acknowledge_return(
    return_id: Annotated[str, typer.Argument(help="Return authorization ID")],
    body: Annotated[str | None, typer.Option("--body", "-b", help="JSON body or @file.json")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Acknowledge a return."""
    client, service = _build_client(verbose)
    try:
        result = service.acknowledge(return_id, load_body(body))
        show_result(result, output, title="Return Acknowledged")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("complete")
def complete_return(
    return_id: Annotated[str, typer.Argument(help="Return authorization ID")],
    body: Annotated[str | None, typer.Option("--body", "-b", help="JSON body or @file.json")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Complete a return with refund details."""
    client, service = _build_client(verbose)
    try:
        result = service.complete(return_id, load_body(body))
        show_result(result, output, title="Return Completed")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
