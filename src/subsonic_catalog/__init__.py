"""subsonic_catalog - Typed album catalog for Subsonic music servers.

This library fetches albums and album lists from a Subsonic-compatible
server and decodes them into validated, immutable models. Albums taken
from list responses carry partial songs; the catalog re-fetches them on
demand.

Examples:
    List the newest albums and read their songs:
    ```python
    from subsonic_catalog import ListType, ServerConfig, create_catalog

    config = ServerConfig(
        base_url="https://music.example.com", username="me", password="secret"
    )
    catalog = create_catalog(config)
    for album in catalog.fetch_album_list(ListType.NEWEST, size=10):
        for song in catalog.album_songs(album):
            print(f"{album.name} - {song.title}")
    ```
"""

import httpx

from subsonic_catalog.client import CatalogClient, CatalogProtocol
from subsonic_catalog.config import ServerConfig
from subsonic_catalog.exceptions import (
    AuthenticationError,
    CatalogError,
    DecodeError,
    NotFoundError,
    TransportError,
)
from subsonic_catalog.models import (
    Album,
    ListType,
    Song,
    decode_album,
    decode_album_list,
    decode_song,
)
# Transport implementation is internal (use create_catalog instead)
from subsonic_catalog.transport import SubsonicTransport as _SubsonicTransport
from subsonic_catalog.transport import TransportProtocol


def create_catalog(
    config: ServerConfig,
    http_client: httpx.Client | None = None,
) -> CatalogClient:
    """Create a catalog connected to a Subsonic server.

    This is the recommended way to create a catalog for library usage.
    It handles transport instantiation internally.

    Args:
        config: Server connection configuration.
        http_client: Optional httpx client (e.g. with custom TLS settings).

    Returns:
        A configured CatalogClient instance.

    Examples:
        ```python
        catalog = create_catalog(config)
        album = catalog.fetch_album(1)
        ```
    """
    return CatalogClient(_SubsonicTransport(config, http_client=http_client))


__all__ = [
    "Album",
    "AuthenticationError",
    "CatalogClient",
    "CatalogError",
    "CatalogProtocol",
    "DecodeError",
    "ListType",
    "NotFoundError",
    "ServerConfig",
    "Song",
    "TransportError",
    "TransportProtocol",
    "create_catalog",
    "decode_album",
    "decode_album_list",
    "decode_song",
]
