"""Helpers shared by the command groups."""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console

from jet_merchant.client import JetClient
from jet_merchant.config import get_config
from jet_merchant.utils.errors import InvalidInputError
from jet_merchant.utils.output import OutputFormat, print_output

console = Console(stderr=True)


def build_client(verbose: bool = False) -> JetClient:
    return JetClient.from_config(get_config(), verbose=verbose)


def load_body(body: str | None) -> dict[str, Any]:
    """Parse a JSON body given inline or as ``@path/to/file.json``."""
    if not body:
        return {}
    if body.startswith("@"):
        with open(body[1:]) as f:
            body = f.read()
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"--body is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidInputError("--body must be a JSON object")
    return data


def is_error(result: Any) -> bool:
    """True for a status envelope with an HTTP error code."""
    if not isinstance(result, dict):
        return False
    code = result.get("status_code")
    return isinstance(code, int) and code >= 300


def show_result(
    result: Any,
    output: OutputFormat,
    title: str,
    columns: list[str] | None = None,
    list_key: str | None = None,
) -> None:
    """Print an API result; exit 1 if it is an error envelope."""
    print_output(result, output, columns=columns, title=title, list_key=list_key)
    if is_error(result):
        console.print(f"[red]Request failed:[/red] HTTP {result['status_code']} ({result.get('status')})")
        raise typer.Exit(1)
