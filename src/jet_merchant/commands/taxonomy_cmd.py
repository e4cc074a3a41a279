"""CLI commands for taxonomy lookups."""

from __future__ import annotations

from typing import Annotated

import typer

from jet_merchant.client import JetClient
from jet_merchant.commands._common import build_client, show_result
from jet_merchant.services.taxonomy import TaxonomyService
from jet_merchant.utils.errors import JetError, handle_error
from jet_merchant.utils.output import OutputFormat

app = typer.Typer(name="taxonomy", help="Browse Jet taxonomy nodes.")


def _build_client(verbose: bool = False) -> tuple[JetClient, TaxonomyService]:
    client = build_client(verbose)
    return client, client.taxonomy()


@app.command("nodes")
def list_nodes(
    offset: Annotated[int, typer.Option("--offset")] = 0,
    limit: Annotated[int, typer.Option("--limit", "-l")] = 100,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List taxonomy node links."""
    client, service = _build_client(verbose)
    try:
        result = service.list_nodes(offset=offset, limit=limit)
        show_result(result, output, title="Taxonomy Nodes", list_key="node_urls")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("node")
def get_node(
    node_id: Annotated[str, typer.Argument(help="Taxonomy node ID")],
    attributes: Annotated[bool, typer.Option("--attributes", "-a", help="Show the node's attributes instead")] = False,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.JSON,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show a taxonomy node or its attributes."""
    client, service = _build_client(verbose)
    try:
        if attributes:
            result = service.get_node_attributes(node_id)
            show_result(result, output, title=f"Node {node_id} Attributes", list_key="attributes")
        else:
            result = service.get_node(node_id)
            show_result(result, output, title=f"Node {node_id}")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
