"""Base API client for the Jet merchant API.

Handles auth header injection, body encoding, and response decoding.
Error responses are returned as a status envelope rather than raised.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from jet_merchant.auth import AuthManager
from jet_merchant.codec import decode_json, encode_json
from jet_merchant.config import Config
from jet_merchant.services.files import FileService
from jet_merchant.services.orders import OrderService
from jet_merchant.services.products import ProductService
from jet_merchant.services.refunds import RefundService
from jet_merchant.services.returns import ReturnService
from jet_merchant.services.taxonomy import TaxonomyService
from jet_merchant.utils.errors import ResponseDecodeError, TransportError

logger = logging.getLogger(__name__)


API_URL = "https://merchant-api.jet.com/api"

STATUS_CODES = {
    200: "success",
    201: "created",
    202: "accepted",
    204: "no_content",
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    500: "internal_server_error",
    503: "unavailable",
}


class JetClient:
    """HTTP client for the Jet merchant API."""

    def __init__(
        self,
        api_user: str,
        secret: str,
        merchant_id: str,
        api_url: str = API_URL,
        timeout: float = 60.0,
        verbose: bool = False,
        auth: AuthManager | None = None,
    ) -> None:
        self.api_user = api_user
        self.merchant_id = merchant_id
        self.api_url = api_url
        self._verbose = verbose
        self._auth = auth or AuthManager(api_user, secret, api_url)
        self._http = httpx.Client(timeout=timeout)

    @classmethod
    def from_config(cls, config: Config, verbose: bool = False) -> JetClient:
        """Build a client for the configured environment."""
        settings = config.settings
        return cls(
            api_user=settings.api_user,
            secret=settings.secret,
            merchant_id=settings.merchant_id,
            api_url=config.get_environment(settings.environment).api_url,
            timeout=settings.timeout,
            verbose=verbose,
        )

    @property
    def auth(self) -> AuthManager:
        return self._auth

    def api_call_with_token(
        self,
        method: str,
        path: str,
        *,
        body: dict[str, Any] | list | None = None,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make an authenticated API request and decode the response.

        Args:
            method: HTTP method (GET, PUT, POST).
            path: API path (e.g. "/orders/ready"). Appended to the API root.
            body: JSON request body; dates are rendered in Jet's format.
            headers: Extra headers. These win over the defaults.
            params: Query parameters.

        Returns:
            The decoded body for 2xx responses with content, otherwise a
            status envelope (see ``decode_status``).

        Raises:
            AuthenticationError: If a token could not be obtained.
            TransportError: If the request could not be sent.
        """
        request_headers = self._auth.get_auth_header()
        content = None
        if body is not None:
            content = encode_json(body)
            request_headers["Content-Type"] = "application/json"
        if headers:
            request_headers.update(headers)

        kwargs: dict[str, Any] = {"headers": request_headers}
        if content is not None:
            kwargs["content"] = content
        if params:
            kwargs["params"] = params

        return self._send(method, f"{self.api_url}{path}", **kwargs)

    def request_without_token(
        self,
        method: str,
        url: str,
        *,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request to an absolute URL without the Authorization header.

        Used for file uploads, which go straight to a pre-signed storage URL.
        """
        return self._send(method, url, content=content, headers=headers or {})

    def _send(self, method: str, url: str, **kwargs: Any) -> Any:
        level = logging.INFO if self._verbose else logging.DEBUG
        logger.log(level, "%s %s", method, url)

        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.log(level, "Response: %s", response.status_code)
        return self.decode_status(response)

    @staticmethod
    def decode_status(response: httpx.Response) -> Any:
        """Decode a response, wrapping empty and error responses in a status envelope.

        Blank bodies and status codes >= 300 yield
        ``{**body, "status": <name or None>, "status_code": <code>}``;
        the envelope keys always win over keys of the same name in the body.
        Anything else is returned as the decoded JSON body.
        """
        text = response.text
        code = response.status_code

        if text.strip() and code < 300:
            return decode_json(text)

        try:
            payload = decode_json(text)
        except ResponseDecodeError:
            payload = {"body": text}
        if not isinstance(payload, dict):
            payload = {"body": payload}
        return {**payload, "status": STATUS_CODES.get(code), "status_code": code}

    def rest_get_with_token(self, path: str, query_params: dict[str, Any] | None = None) -> Any:
        """GET ``path``. Query params are sent only when non-empty."""
        return self.api_call_with_token("GET", path, params=query_params or None)

    def rest_put_with_token(self, path: str, body: dict[str, Any] | list | None = None) -> Any:
        """PUT ``body`` (default ``{}``) to ``path``."""
        return self.api_call_with_token("PUT", path, body={} if body is None else body)

    def rest_post_with_token(self, path: str, body: dict[str, Any] | list | None = None) -> Any:
        """POST ``body`` (default ``{}``) to ``path``."""
        return self.api_call_with_token("POST", path, body={} if body is None else body)

    def orders(self) -> OrderService:
        return OrderService(self)

    def returns(self) -> ReturnService:
        return ReturnService(self)

    def products(self) -> ProductService:
        return ProductService(self)

    def taxonomy(self) -> TaxonomyService:
        return TaxonomyService(self)

    def files(self) -> FileService:
        return FileService(self)

    def refunds(self) -> RefundService:
        return RefundService(self)

    def close(self) -> None:
        """Close the underlying HTTP clients."""
        self._http.close()
        self._auth.close()

    def __enter__(self) -> JetClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
