"""Subsonic album catalog client."""

import logging
from typing import Protocol

from subsonic_catalog.exceptions import TransportError
from subsonic_catalog.models.enums import ListType
from subsonic_catalog.models.subsonic import (
    Album,
    Song,
    decode_album,
    decode_album_list,
)
from subsonic_catalog.query import Params, Query
from subsonic_catalog.transport import TransportProtocol

logger = logging.getLogger(__name__)


def build_album_list_query(
    list_type: ListType,
    size: int | None = None,
    offset: int | None = None,
    folder_id: int | None = None,
) -> Params:
    """Build getAlbumList2 parameters.

    Optional arguments left as None are not sent at all; 0 is sent.
    """
    return (
        Query()
        .arg("type", list_type.value)
        .maybe_arg("size", size)
        .maybe_arg("offset", offset)
        .maybe_arg("musicFolderId", folder_id)
        .build()
    )


class CatalogProtocol(Protocol):
    """Protocol for album catalogs.

    This protocol enables dependency injection and testing.
    Implement this protocol to create mock catalogs for testing.
    """

    def fetch_album(self, album_id: int) -> Album:
        """Fetch one album with its complete song list."""
        ...

    def fetch_album_list(
        self,
        list_type: ListType,
        size: int | None = None,
        offset: int | None = None,
        folder_id: int | None = None,
    ) -> list[Album]:
        """Fetch albums matching a list type."""
        ...

    def album_songs(self, album: Album) -> tuple[Song, ...]:
        """Return the authoritative song list of an album."""
        ...


class CatalogClient:
    """Production album catalog.

    Each call is one synchronous request through the transport. Nothing
    is cached between calls. Implements CatalogProtocol.
    """

    def __init__(self, transport: TransportProtocol) -> None:
        """Initialize the client.

        Args:
            transport: Transport used to reach the server.
        """
        self._transport = transport

    def fetch_album(self, album_id: int) -> Album:
        """Fetch an album by ID.

        The server returns the complete song list for this endpoint.

        Args:
            album_id: Subsonic album ID.

        Returns:
            Decoded Album.

        Raises:
            DecodeError: If the response is not a valid album.
            TransportError: If the request fails.
        """
        logger.debug("Fetching album: %d", album_id)
        try:
            data = self._transport.perform_get(
                "getAlbum", Query.with_arg("id", album_id).build()
            )
        except TransportError as e:
            logger.warning("Failed to fetch album %d: %s", album_id, e)
            raise

        return decode_album(data)

    def fetch_album_list(
        self,
        list_type: ListType,
        size: int | None = None,
        offset: int | None = None,
        folder_id: int | None = None,
    ) -> list[Album]:
        """Fetch albums matching a list type.

        Albums in list responses usually carry no songs; use
        ``album_songs()`` to get them.

        Args:
            list_type: Ordering/filter of the list.
            size: Maximum number of albums to return.
            offset: Number of albums to skip.
            folder_id: Restrict to one music folder.

        Returns:
            Decoded albums in server order. Empty when the server has none.

        Raises:
            DecodeError: If any album in the response is malformed.
            TransportError: If the request fails.
        """
        params = build_album_list_query(list_type, size, offset, folder_id)

        logger.debug("Fetching album list: %s", params)
        try:
            data = self._transport.perform_get("getAlbumList2", params)
        except TransportError as e:
            logger.warning("Failed to fetch %s album list: %s", list_type, e)
            raise

        albums = decode_album_list(data)
        logger.debug("Fetched %d albums (%s)", len(albums), list_type)
        return albums

    def album_songs(self, album: Album) -> tuple[Song, ...]:
        """Return the authoritative song list of an album.

        When the held songs match the declared count they are returned
        as-is. Otherwise (usually an album from a list response) the album
        is fetched again and the fresh songs are returned. The given album
        is never modified.

        Args:
            album: Album whose songs are wanted.

        Returns:
            Songs in server order.

        Raises:
            DecodeError: If the re-fetched album is malformed.
            TransportError: If the re-fetch fails.
        """
        if album.is_complete:
            return album.songs

        logger.info(
            "Album %d holds %d of %d songs, fetching full album",
            album.id,
            len(album.songs),
            album.song_count,
        )
        return self.fetch_album(album.id).songs
