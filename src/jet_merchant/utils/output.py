"""Output formatting for CLI commands."""

from __future__ import annotations

import csv
import io
import json
import sys
from enum import Enum
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console(stderr=True)


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    CSV = "csv"


def to_rows(data: Any, list_key: str | None = None) -> list[dict[str, Any]]:
    """Normalize an API result into table rows.

    Jet wraps most listings in an object (``{"order_urls": [...]}``);
    ``list_key`` picks that list out. Scalar items become ``{"value": item}``.
    """
    if isinstance(data, dict) and list_key and isinstance(data.get(list_key), list):
        data = data[list_key]
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return [item if isinstance(item, dict) else {"value": item} for item in data]
    return [{"value": data}]


def print_output(
    data: Any,
    fmt: OutputFormat = OutputFormat.TABLE,
    columns: list[str] | None = None,
    title: str | None = None,
    list_key: str | None = None,
) -> None:
    """Print data in the requested format.

    Args:
        data: Decoded API result.
        fmt: Output format (table, json, csv).
        columns: Which columns to show in table/csv mode. None = all.
        title: Optional title for table output.
        list_key: Key holding the row list when ``data`` is a wrapper object.
    """
    if fmt == OutputFormat.JSON:
        print_json(data)
    elif fmt == OutputFormat.CSV:
        print_csv(to_rows(data, list_key), columns)
    else:
        print_table(to_rows(data, list_key), columns, title)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    json.dump(data, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")


def _cell(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return "" if value is None else str(value)


def print_table(
    rows: list[dict[str, Any]],
    columns: list[str] | None = None,
    title: str | None = None,
) -> None:
    """Print rows as a Rich table."""
    if not rows:
        console.print("[dim]No results.[/dim]")
        return

    if columns is None:
        columns = list(rows[0].keys())

    table = Table(title=title, show_lines=False)
    for col in columns:
        table.add_column(col, overflow="fold")

    for row in rows:
        table.add_row(*[_cell(row.get(col)) for col in columns])

    console.print(table)


def print_csv(rows: list[dict[str, Any]], columns: list[str] | None = None) -> None:
    """Print rows as CSV to stdout."""
    if not rows:
        return

    if columns is None:
        columns = list(rows[0].keys())

    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=columns, extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow({k: _cell(row.get(k)) for k in columns})
    sys.stdout.write(buf.getvalue())
