"""Custom exceptions for subsonic_catalog.

All exceptions include an HTTP status_code attribute for easy
integration with web frameworks like FastAPI.
"""


class CatalogError(Exception):
    """Base exception for subsonic_catalog.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DecodeError(CatalogError):
    """Server payload does not match the expected entity shape.

    Raised by the decoders when a required field is missing, a field has
    the wrong JSON type, or a numeric-string identifier cannot be parsed.

    Attributes:
        entity: Name of the entity being decoded ("album", "song", ...).
        field: Dotted location of the offending field (e.g. "song.3.id").
        expected: Description of the expected shape for that field.
    """

    status_code: int = 502  # Bad Gateway (malformed upstream response)

    def __init__(
        self,
        message: str,
        entity: str | None = None,
        field: str | None = None,
        expected: str | None = None,
    ) -> None:
        super().__init__(message)
        self.entity = entity
        self.field = field
        self.expected = expected


class TransportError(CatalogError):
    """Request to the Subsonic server failed.

    Raised for network failures, HTTP errors, unreadable bodies and
    server-side application errors.

    Attributes:
        code: Subsonic error code when the server reported one.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class AuthenticationError(TransportError):
    """Server rejected the credentials.

    Raised for Subsonic error codes 40 (wrong username or password),
    41 (token authentication not supported) and 50 (not authorized).
    """

    status_code: int = 401  # Unauthorized


class NotFoundError(TransportError):
    """Requested entity does not exist on the server.

    Raised for Subsonic error code 70.
    """

    status_code: int = 404  # Not Found
