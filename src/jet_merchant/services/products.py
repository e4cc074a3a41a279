"""Merchant SKU (product) management service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jet_merchant.services._paths import segment

if TYPE_CHECKING:
    from jet_merchant.client import JetClient


class ProductService:
    """Service for merchant SKUs: listing, price, inventory and archive state."""

    def __init__(self, client: JetClient) -> None:
        self._client = client

    def _path(self, sku: str, suffix: str = "") -> str:
        return f"/merchant-skus/{segment(sku)}{suffix}"

    def list(self, offset: int = 0, limit: int = 100) -> Any:
        """List merchant SKUs, one page at a time."""
        return self._client.rest_get_with_token("/merchant-skus", {"offset": offset, "limit": limit})

    def get(self, sku: str) -> Any:
        return self._client.rest_get_with_token(self._path(sku))

    def update(self, sku: str, body: dict[str, Any]) -> Any:
        """Create or replace the product data for a SKU."""
        return self._client.rest_put_with_token(self._path(sku), body)

    def get_price(self, sku: str) -> Any:
        return self._client.rest_get_with_token(self._path(sku, "/price"))

    def update_price(self, sku: str, body: dict[str, Any]) -> Any:
        return self._client.rest_put_with_token(self._path(sku, "/price"), body)

    def get_inventory(self, sku: str) -> Any:
        return self._client.rest_get_with_token(self._path(sku, "/inventory"))

    def update_inventory(self, sku: str, body: dict[str, Any]) -> Any:
        return self._client.rest_put_with_token(self._path(sku, "/inventory"), body)

    def update_image(self, sku: str, body: dict[str, Any]) -> Any:
        return self._client.rest_put_with_token(self._path(sku, "/image"), body)

    def update_shipping_exception(self, sku: str, body: dict[str, Any]) -> Any:
        return self._client.rest_put_with_token(self._path(sku, "/shippingexception"), body)

    def update_returns_exception(self, sku: str, body: dict[str, Any]) -> Any:
        return self._client.rest_put_with_token(self._path(sku, "/returnsexception"), body)

    def variation(self, sku: str, body: dict[str, Any]) -> Any:
        """Group SKUs under a parent SKU."""
        return self._client.rest_put_with_token(self._path(sku, "/variation"), body)

    def archive(self, sku: str, archived: bool = True) -> Any:
        """Archive (or with ``archived=False`` unarchive) a SKU."""
        return self._client.rest_put_with_token(self._path(sku, "/status/archive"), {"is_archived": archived})

    def sales_data(self, sku: str) -> Any:
        return self._client.rest_get_with_token(self._path(sku, "/salesdata"))
