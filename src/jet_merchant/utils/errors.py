"""Exception types and structured error output for the CLI."""

from __future__ import annotations

import json
import sys

from rich.console import Console

console = Console(stderr=True)


class JetError(Exception):
    """Base class for every error raised by jet_merchant."""


class InvalidInputError(JetError, ValueError):
    """A payload or argument that cannot be sent to the API."""


class TransportError(JetError):
    """Network or connection failure while talking to the API."""


class AuthenticationError(JetError):
    """The token endpoint could not be reached or rejected the credentials."""


class ResponseDecodeError(JetError, ValueError):
    """A successful response whose body is not valid JSON."""


_ERROR_CODES: list[tuple[type[Exception], str]] = [
    (AuthenticationError, "AUTH_ERROR"),
    (TransportError, "CONNECTION_ERROR"),
    (InvalidInputError, "INVALID_INPUT"),
    (ResponseDecodeError, "DECODE_ERROR"),
]

# Actionable hints keyed by error substring
_ERROR_HINTS: list[tuple[str, str]] = [
    ("token", "Check JET_API_USER / JET_SECRET in your .env file"),
    ("unauthorized", "Check JET_API_USER / JET_SECRET in your .env file"),
    ("environment", "Check config/environments.yaml"),
    ("timeout", "Request timed out — try again or raise JET_TIMEOUT"),
    ("timed out", "Request timed out — try again or raise JET_TIMEOUT"),
    ("connect", "Connection error — check network connectivity"),
    ("unknown status", "Use one of the listed status names"),
]


def _get_hint(error_message: str) -> str | None:
    """Match an error message to an actionable hint."""
    lower = error_message.lower()
    for pattern, hint in _ERROR_HINTS:
        if pattern in lower:
            return hint
    return None


def _get_code(error: Exception) -> str:
    for error_type, code in _ERROR_CODES:
        if isinstance(error, error_type):
            return code
    return "RUNTIME_ERROR"


def handle_error(error: Exception) -> None:
    """Handle an error with structured output to stdout and human-readable output to stderr.

    Outputs a JSON error object to stdout for scripting:
    {"error": true, "code": "AUTH_ERROR", "message": "...", "hint": "..."}

    Also prints a human-readable error to stderr.
    """
    message = str(error)
    hint = _get_hint(message)

    error_obj: dict[str, object] = {
        "error": True,
        "code": _get_code(error),
        "message": message,
    }
    if hint:
        error_obj["hint"] = hint

    json.dump(error_obj, sys.stdout)
    sys.stdout.write("\n")

    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")
