"""Order management service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jet_merchant.services._paths import resolve_status, segment

if TYPE_CHECKING:
    from jet_merchant.client import JetClient

STATUSES = {
    "created": "created",
    "ready": "ready",
    "acknowledged": "acknowledged",
    "inprogress": "inprogress",
    "complete": "complete",
}


class OrderService:
    """Service for polling, acknowledging and shipping orders."""

    def __init__(self, client: JetClient) -> None:
        self._client = client

    def list(self, status: str = "ready", params: dict[str, Any] | None = None) -> Any:
        """List order URLs in the given state."""
        return self._client.rest_get_with_token(f"/orders/{resolve_status(STATUSES, status)}", params)

    def directed_cancel(self) -> Any:
        """List orders Jet has asked the merchant to cancel."""
        return self._client.rest_get_with_token("/orders/directedCancel")

    def get(self, order_url: str) -> Any:
        """Fetch an order by the relative URL returned from ``list``."""
        return self._client.rest_get_with_token(order_url)

    def get_by_id(self, order_id: str) -> Any:
        return self._client.rest_get_with_token(f"/orders/withoutShipmentDetail/{segment(order_id)}")

    def acknowledge(self, order_id: str, body: dict[str, Any] | None = None) -> Any:
        return self._client.rest_put_with_token(f"/orders/{segment(order_id)}/acknowledge", body)

    def ship(self, order_id: str, body: dict[str, Any] | None = None) -> Any:
        return self._client.rest_put_with_token(f"/orders/{segment(order_id)}/shipped", body)

    def tag(self, order_id: str, tag: str) -> Any:
        return self._client.rest_put_with_token(f"/orders/{segment(order_id)}/tag", {"tag": tag})
