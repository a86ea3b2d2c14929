"""HTTP transport for the Subsonic REST API."""

import hashlib
import logging
import secrets
from collections.abc import Sequence
from types import TracebackType
from typing import Any, Protocol, Self

import httpx

from subsonic_catalog.config import ServerConfig
from subsonic_catalog.exceptions import (
    AuthenticationError,
    NotFoundError,
    TransportError,
)

logger = logging.getLogger(__name__)

# Keys of the subsonic-response envelope that are not payload
_ENVELOPE_KEYS = frozenset(
    {"status", "version", "type", "serverVersion", "openSubsonic"}
)

# Subsonic error codes with a dedicated exception type
_AUTH_ERROR_CODES = frozenset({40, 41, 50})
_NOT_FOUND_ERROR_CODE = 70


class TransportProtocol(Protocol):
    """Protocol for Subsonic transports.

    This protocol enables dependency injection and testing.
    Implement this protocol to create mock transports for testing.
    """

    def perform_get(
        self, operation: str, parameters: Sequence[tuple[str, str]]
    ) -> Any:
        """Call a Subsonic operation and return its unwrapped JSON payload.

        Raises:
            TransportError: If the request fails for any reason.
        """
        ...


class SubsonicTransport:
    """Production Subsonic transport built on httpx.

    Adds authentication and format parameters to every request, unwraps
    the ``subsonic-response`` envelope and translates failures into
    TransportError. Implements TransportProtocol.
    """

    def __init__(
        self,
        config: ServerConfig,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            config: Server connection configuration.
            http_client: Optional httpx client. Creates one if not provided;
                only a client created here is closed by ``close()``.
        """
        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=config.timeout)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            self._http.close()

    def perform_get(
        self, operation: str, parameters: Sequence[tuple[str, str]]
    ) -> Any:
        """Call a Subsonic operation.

        Args:
            operation: REST method name (e.g. "getAlbum").
            parameters: Operation parameters, sent after the auth parameters.

        Returns:
            The payload of the response envelope, or an empty dict when
            the server returned no payload.

        Raises:
            AuthenticationError: If the server rejected the credentials.
            NotFoundError: If the requested entity does not exist.
            TransportError: If the request or response handling fails.
        """
        url = f"{self._base_url}/rest/{operation}"
        params = [*self._auth_params(), *parameters]

        logger.debug("GET %s %s", operation, list(parameters))
        try:
            response = self._http.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("HTTP %d from %s", e.response.status_code, operation)
            raise TransportError(
                f"{operation} failed with HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", operation, e)
            raise TransportError(f"{operation} request failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(f"{operation} returned a non-JSON body") from e

        return self._unwrap(operation, body)

    def _auth_params(self) -> list[tuple[str, str]]:
        """Build the authentication and format parameters for one request.

        Token auth uses a fresh salt per request: t = md5(password + salt).
        """
        config = self._config
        params = [("u", config.username)]
        if config.token_auth:
            salt = secrets.token_hex(8)
            token = hashlib.md5(
                (config.password + salt).encode(), usedforsecurity=False
            ).hexdigest()
            params += [("t", token), ("s", salt)]
        else:
            params.append(("p", "enc:" + config.password.encode().hex()))
        params += [
            ("v", config.api_version),
            ("c", config.client_name),
            ("f", "json"),
        ]
        return params

    def _unwrap(self, operation: str, body: Any) -> Any:
        """Strip the subsonic-response envelope and check its status."""
        envelope = body.get("subsonic-response") if isinstance(body, dict) else None
        if not isinstance(envelope, dict):
            raise TransportError(f"{operation} response has no subsonic-response")

        if envelope.get("status") != "ok":
            raise self._server_error(operation, envelope.get("error"))

        payload = [v for k, v in envelope.items() if k not in _ENVELOPE_KEYS]
        if not payload:
            return {}
        if len(payload) > 1:
            raise TransportError(
                f"{operation} response has {len(payload)} payload keys, expected one"
            )
        return payload[0]

    def _server_error(self, operation: str, error: Any) -> TransportError:
        """Map a Subsonic error object to the matching exception."""
        error = error if isinstance(error, dict) else {}
        code = error.get("code")
        code = code if isinstance(code, int) else None
        detail = error.get("message") or "unknown error"
        message = f"{operation} failed: {detail}"
        logger.warning("Subsonic error %s from %s: %s", code, operation, detail)

        if code in _AUTH_ERROR_CODES:
            return AuthenticationError(message, code=code)
        if code == _NOT_FOUND_ERROR_CODE:
            return NotFoundError(message, code=code)
        return TransportError(message, code=code)
