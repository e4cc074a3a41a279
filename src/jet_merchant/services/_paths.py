"""Path helpers shared by the resource services."""

from __future__ import annotations

from urllib.parse import quote

from jet_merchant.utils.errors import InvalidInputError


def segment(value: object) -> str:
    """Quote a single path segment (SKUs may contain '/' or spaces)."""
    return quote(str(value), safe="")


def resolve_status(statuses: dict[str, str], status: str) -> str:
    """Map a status name to its wire value."""
    try:
        return statuses[status]
    except KeyError:
        available = ", ".join(statuses)
        raise InvalidInputError(f"Unknown status '{status}'. Available: {available}") from None
