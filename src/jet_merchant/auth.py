"""Token authentication for the Jet merchant API.

Handles token fetch, caching, and expiry tracking.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone

import httpx
from pydantic import ValidationError

from jet_merchant.codec import decode_json, encode_json
from jet_merchant.models.auth import TokenResponse, TokenStatus
from jet_merchant.utils.errors import AuthenticationError, ResponseDecodeError

logger = logging.getLogger(__name__)


class AuthManager:
    """Fetches and caches the bearer token used on every API call.

    Refresh is serialized behind a lock so that threads sharing one manager
    never fetch more than one token per expiry.
    """

    def __init__(self, api_user: str, secret: str, api_url: str, timeout: float = 30.0) -> None:
        self._api_user = api_user
        self._secret = secret
        self._api_url = api_url
        self._id_token: str | None = None
        self._token_type: str | None = None
        self._expires_on: datetime | None = None
        self._lock = threading.Lock()
        self._http = httpx.Client(timeout=timeout)

    def get_auth_header(self, force_refresh: bool = False) -> dict[str, str]:
        """Return the Authorization header, fetching a new token if needed.

        Args:
            force_refresh: Fetch a new token even if the cached one is valid.

        Raises:
            AuthenticationError: If the token endpoint fails or rejects the credentials.
        """
        if force_refresh or not self._is_token_valid():
            with self._lock:
                if force_refresh or not self._is_token_valid():
                    self._refresh_token()

        return {"Authorization": f"{self._token_type} {self._id_token}"}

    def get_status(self) -> TokenStatus:
        """Get the current token status."""
        if not self._id_token:
            return TokenStatus(has_token=False, is_expired=True)

        now = datetime.now(timezone.utc)
        is_expired = self._expires_on is None or self._expires_on <= now
        seconds_remaining = None
        if self._expires_on and not is_expired:
            seconds_remaining = int((self._expires_on - now).total_seconds())

        return TokenStatus(
            has_token=True,
            is_expired=is_expired,
            token_type=self._token_type,
            expires_at=self._expires_on,
            seconds_remaining=seconds_remaining,
        )

    def _is_token_valid(self) -> bool:
        if not (self._id_token and self._token_type and self._expires_on):
            return False
        return self._expires_on > datetime.now(timezone.utc)

    def _refresh_token(self) -> None:
        """POST the configured credentials to the token endpoint."""
        url = f"{self._api_url}/token"
        logger.debug("Fetching token from %s", url)

        try:
            response = self._http.post(
                url,
                content=encode_json({"user": self._api_user, "pass": self._secret}),
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise AuthenticationError(f"Token request failed: {e}") from e

        if not response.is_success:
            raise AuthenticationError(
                f"Token request failed (HTTP {response.status_code}): {response.text}"
            )

        try:
            token_data = TokenResponse(**decode_json(response.text))
        except (ResponseDecodeError, ValidationError, TypeError) as e:
            raise AuthenticationError(f"Unexpected token response: {e}") from e

        self._id_token = token_data.id_token
        self._token_type = token_data.token_type
        self._expires_on = token_data.expires_on
        logger.debug("Token valid until %s", self._expires_on.isoformat())

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()
