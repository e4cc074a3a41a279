"""Return management service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jet_merchant.services._paths import resolve_status, segment

if TYPE_CHECKING:
    from jet_merchant.client import JetClient

STATUSES = {
    "created": "created",
    "acknowledged": "acknowledged",
    "inprogress": "inprogress",
    "completed_by_merchant": "completedByMerchant",
}


class ReturnService:
    """Service for customer returns."""

    def __init__(self, client: JetClient) -> None:
        self._client = client

    def list(self, status: str = "created") -> Any:
        """List return URLs in the given state."""
        return self._client.rest_get_with_token(f"/returns/{resolve_status(STATUSES, status)}")

    def get(self, return_url: str) -> Any:
        return self._client.rest_get_with_token(return_url)

    def get_by_id(self, return_id: str) -> Any:
        return self._client.rest_get_with_token(f"/returns/state/{segment(return_id)}")

    def acknowledge(self, return_id: str, body: dict[str, Any] | None = None) -> Any:
        return self._client.rest_put_with_token(f"/returns/{segment(return_id)}/acknowledge", body)

    def complete(self, return_id: str, body: dict[str, Any] | None = None) -> Any:
        return self._client.rest_put_with_token(f"/returns/{segment(return_id)}/complete", body)
