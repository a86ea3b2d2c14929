"""Configuration for subsonic_catalog."""

from dataclasses import dataclass

DEFAULT_API_VERSION = "1.16.1"
DEFAULT_CLIENT_NAME = "subsonic-catalog"


@dataclass(frozen=True)
class ServerConfig:
    """Subsonic server connection configuration.

    Attributes:
        base_url: Server root URL (e.g. "https://music.example.com").
        username: Account name sent as the ``u`` parameter.
        password: Account password. Never sent in clear text when
            token_auth is enabled.
        client_name: Client identifier sent as the ``c`` parameter.
        api_version: Subsonic REST API version sent as the ``v`` parameter.
        timeout: Request timeout in seconds.
        token_auth: Use salted token authentication (API >= 1.13.0).
            When disabled, the password is sent hex-encoded.
    """

    base_url: str
    username: str
    password: str
    client_name: str = DEFAULT_CLIENT_NAME
    api_version: str = DEFAULT_API_VERSION
    timeout: float = 30.0
    token_auth: bool = True
