"""CLI commands for merchant SKU management."""

from __future__ import annotations

from typing import Annotated

import typer

from jet_merchant.client import JetClient
from jet_merchant.commands._common import build_client, load_body, show_result
from jet_merchant.services.products import ProductService
from jet_merchant.utils.errors import JetError, handle_error
from jet_merchant.utils.output import OutputFormat

app = typer.Typer(name="products", help="Manage merchant SKUs, prices and inventory.")

# field name -> ProductService update method
_UPDATERS = {
    "product": "update",
    "price": "update_price",
    "inventory": "update_inventory",
    "image": "update_image",
    "shipping-exception": "update_shipping_exception",
    "returns-exception": "update_returns_exception",
    "variation": "variation",
}


def _build_client(verbose: bool = False) -> tuple[JetClient, ProductService]:
    client = build_client(verbose)
    return client, client.products()


@app.command("list")
def list_products(
    offset: Annotated[int, typer.Option("--offset")] = 0,
    limit: Annotated[int, typer.Option("--limit", "-l")] = 100,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List merchant SKUs."""
    client, service = _build_client(verbose)
    try:
        result = service.list(offset=offset, limit=limit)
        show_result(result, output, title="Merchant SKUs", list_key="sku_urls")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("get")
def get_product(
    sku: Annotated[str, typer.Argument(help="Merchant SKU")],
    field: Annotated[str, typer.Option("--field", "-f", help="product, price, inventory or sales-data")] = "product",
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.JSON,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show a SKU or one of its sub-resources."""
    getters = {
        "product": "get",
        "price": "get_price",
        "inventory": "get_inventory",
        "sales-data": "sales_data",
    }
    if field not in getters:
        raise typer.BadParameter(f"Unknown field '{field}'. Available: {', '.join(getters)}")

    client, service = _build_client(verbose)
    try:
        result = getattr(service, getters[field])(sku)
        show_result(result, output, title=f"{sku} ({field})")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("update")
def update_product(
    sku: Annotated[str, typer.Argument(help="Merchant SKU")],
    body: Annotated[str, typer.Option("--body", "-b", help="JSON body or @file.json")],
    field: Annotated[str, typer.Option("--field", "-f", help=", ".join(_UPDATERS))] = "product",
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be sent without executing")] = False,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Update a SKU or one of its sub-resources."""
    if field not in _UPDATERS:
        raise typer.BadParameter(f"Unknown field '{field}'. Available: {', '.join(_UPDATERS)}")

    client, service = _build_client(verbose)
    try:
        payload = load_body(body)
        if dry_run:
            show_result(payload, output, title=f"{sku} ({field}) [DRY RUN]")
            return
        result = getattr(service, _UPDATERS[field])(sku, payload)
        show_result(result, output, title=f"{sku} ({field}) Updated")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("archive")
def archive_product(
    sku: Annotated[str, typer.Argument(help="Merchant SKU")],
    unarchive: Annotated[bool, typer.Option("--unarchive", help="Restore an archived SKU")] = False,
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Archive or unarchive a SKU."""
    client, service = _build_client(verbose)
    try:
        result = service.archive(sku, archived=not unarchive)
        show_result(result, output, title=f"{sku} Archive Status")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
