"""Jet taxonomy lookup service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jet_merchant.services._paths import segment

if TYPE_CHECKING:
    from jet_merchant.client import JetClient


class TaxonomyService:
    """Service for browsing taxonomy nodes and their attributes."""

    def __init__(self, client: JetClient) -> None:
        self._client = client

    def list_nodes(self, offset: int = 0, limit: int = 100) -> Any:
        """List taxonomy node links."""
        return self._client.rest_get_with_token("/taxonomy/links/v1", {"offset": offset, "limit": limit})

    def get_node(self, node_id: str | int) -> Any:
        return self._client.rest_get_with_token(f"/taxonomy/nodes/{segment(node_id)}")

    def get_node_attributes(self, node_id: str | int) -> Any:
        return self._client.rest_get_with_token(f"/taxonomy/nodes/{segment(node_id)}/attributes")
