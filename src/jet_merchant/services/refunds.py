"""Merchant-initiated refund service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jet_merchant.services._paths import resolve_status, segment

if TYPE_CHECKING:
    from jet_merchant.client import JetClient

STATUSES = {
    "created": "created",
    "processing": "processing",
    "accepted": "accepted",
    "rejected": "rejected",
}


class RefundService:
    """Service for creating and tracking refunds."""

    def __init__(self, client: JetClient) -> None:
        self._client = client

    def create(self, order_id: str, alt_refund_id: str, body: dict[str, Any] | None = None) -> Any:
        """Create a refund for an order under the merchant's own refund ID."""
        return self._client.rest_post_with_token(
            f"/refunds/{segment(order_id)}/{segment(alt_refund_id)}", body
        )

    def get_state(self, refund_authorization_id: str) -> Any:
        return self._client.rest_get_with_token(f"/refunds/state/{segment(refund_authorization_id)}")

    def list(self, status: str = "created") -> Any:
        return self._client.rest_get_with_token(f"/refunds/{resolve_status(STATUSES, status)}")
