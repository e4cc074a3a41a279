"""Jet merchant CLI — entry point.

Command-line front end for the Jet merchant API: orders, returns,
products, taxonomy, bulk files and refunds.
"""

from __future__ import annotations

import logging

import typer

from jet_merchant.commands.auth_cmd import app as auth_app
from jet_merchant.commands.orders_cmd import app as orders_app
from jet_merchant.commands.returns_cmd import app as returns_app
from jet_merchant.commands.products_cmd import app as products_app
from jet_merchant.commands.taxonomy_cmd import app as taxonomy_app
from jet_merchant.commands.files_cmd import app as files_app
from jet_merchant.commands.refunds_cmd import app as refunds_app

app = typer.Typer(
    name="jet-merchant",
    help="CLI tool for the Jet merchant API.",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(auth_app, name="auth")
app.add_typer(orders_app, name="orders")
app.add_typer(returns_app, name="returns")
app.add_typer(products_app, name="products")
app.add_typer(taxonomy_app, name="taxonomy")
app.add_typer(files_app, name="files")
app.add_typer(refunds_app, name="refunds")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Jet merchant CLI — manage orders, returns, SKUs and refunds."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


if __name__ == "__main__":
    app()
