"""CLI commands for bulk file uploads."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from jet_merchant.client import JetClient
from jet_merchant.commands._common import build_client, is_error, show_result
from jet_merchant.services.files import FILE_TYPES, FileService
from jet_merchant.utils.errors import JetError, handle_error
from jet_merchant.utils.output import OutputFormat

console = Console(stderr=True)
app = typer.Typer(name="files", help="Upload bulk feed files.")


def _build_client(verbose: bool = False) -> tuple[JetClient, FileService]:
    client = build_client(verbose)
    return client, client.files()


@app.command("upload")
def upload_file(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="JSON feed file to upload")],
    file_type: Annotated[str, typer.Option("--type", "-t", help=", ".join(FILE_TYPES))],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Upload a feed file: get an upload URL, PUT the file, then register it."""
    if file_type not in FILE_TYPES:
        raise typer.BadParameter(f"Unknown file type '{file_type}'. Available: {', '.join(FILE_TYPES)}")

    client, service = _build_client(verbose)
    try:
        token = service.upload_token()
        if "url" not in token:
            show_result(token, output, title="Upload Token")
            raise typer.Exit(1)

        console.print(f"Uploading [bold]{path.name}[/bold]...", style="yellow")
        uploaded = service.upload(token["url"], path.read_bytes())
        if is_error(uploaded):
            show_result(uploaded, output, title="Upload")

        result = service.uploaded(token["url"], file_type, f"{path.name}.gz")
        show_result(result, output, title="File Registered")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("status")
def file_status(
    file_id: Annotated[str, typer.Argument(help="Jet file ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Show the processing status of an uploaded file."""
    client, service = _build_client(verbose)
    try:
        result = service.status(file_id)
        show_result(result, output, title=f"File {file_id}")
    except JetError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
