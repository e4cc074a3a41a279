"""JSON encoding and decoding for Jet payloads.

Jet requires every date to be sent as ``yyyy-MM-ddTHH:mm:ss.fffffff-HH:MM``,
e.g. ``2009-06-15T13:45:30.0000000-07:00``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from jet_merchant.utils.errors import InvalidInputError, ResponseDecodeError


def format_datetime(value: datetime) -> str:
    """Render a datetime in Jet's 7-digit fractional format.

    Naive datetimes are taken to be local time.
    """
    if value.tzinfo is None:
        value = value.astimezone()
    # %z gives +HHMM; Jet wants +HH:MM
    offset = value.strftime("%z")
    return value.strftime("%Y-%m-%dT%H:%M:%S.%f") + "0" + offset[:3] + ":" + offset[3:5]


def _walk(value: Any) -> Any:
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {k: _walk(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_walk(v) for v in value]
    return value


def format_dates(data: Mapping[str, Any] | list | tuple) -> dict[str, Any] | list:
    """Return a copy of ``data`` with every datetime rendered for Jet.

    Plain dates are rendered as ISO dates (``2024-01-02``).

    Raises:
        InvalidInputError: If ``data`` is not a mapping or a list/tuple.
    """
    if not isinstance(data, (Mapping, list, tuple)):
        raise InvalidInputError(
            f"json data must be a mapping or a list. Received {type(data).__name__} : {data!r}"
        )
    return _walk(data)


def encode_json(data: Mapping[str, Any] | list | tuple) -> bytes:
    """Encode a payload as UTF-8 JSON bytes."""
    return json.dumps(format_dates(data), ensure_ascii=False).encode("utf-8")


def decode_json(text: str | bytes) -> Any:
    """Decode a JSON body. Blank input decodes to an empty dict."""
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    if not text.strip():
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseDecodeError(f"Response body is not valid JSON: {e}") from e
