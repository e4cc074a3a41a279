"""Bulk file upload service.

Uploading is a three step exchange: request an upload URL, PUT the gzipped
file to it, then tell Jet the file is there.
"""

from __future__ import annotations

import gzip
from typing import TYPE_CHECKING, Any

from jet_merchant.services._paths import segment

if TYPE_CHECKING:
    from jet_merchant.client import JetClient

FILE_TYPES = (
    "MerchantSKUs",
    "Price",
    "Inventory",
    "Variation",
    "Archive",
)


class FileService:
    """Service for Jet bulk file uploads."""

    def __init__(self, client: JetClient) -> None:
        self._client = client

    def upload_token(self) -> Any:
        """Request a pre-signed upload URL."""
        return self._client.rest_get_with_token("/files/uploadToken")

    def upload(self, url: str, data: bytes | str) -> Any:
        """Gzip ``data`` and PUT it to the pre-signed ``url``."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        return self._client.request_without_token(
            "PUT",
            url,
            content=gzip.compress(data),
            headers={"x-ms-blob-type": "BlockBlob"},
        )

    def uploaded(self, url: str, file_type: str, file_name: str) -> Any:
        """Notify Jet that a file has been uploaded to ``url``."""
        body = {"url": url, "file_type": file_type, "file_name": file_name}
        return self._client.rest_post_with_token("/files/uploaded", body)

    def status(self, file_id: str) -> Any:
        return self._client.rest_get_with_token(f"/files/{segment(file_id)}")
