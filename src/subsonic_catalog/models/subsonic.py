"""Models for decoding Subsonic API responses.

The server sends identifiers as numeric strings and omits most optional
fields. All conversion from raw JSON happens here; the rest of the
package only ever sees validated, frozen models.
"""

import logging
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    Strict,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from subsonic_catalog.exceptions import DecodeError

__all__ = [
    "Album",
    "Song",
    "decode_album",
    "decode_album_list",
    "decode_song",
]

logger = logging.getLogger(__name__)

_UINT64_MAX = 2**64 - 1


def _parse_numeric_id(value: Any) -> int:
    """Parse a numeric-string identifier such as ``"27"`` into an int."""
    if not isinstance(value, str):
        raise ValueError(f"expected a numeric string, got {type(value).__name__}")
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"expected a numeric string, got {value!r}")
    number = int(value)
    if number > _UINT64_MAX:
        raise ValueError(f"identifier out of range: {value}")
    return number


# Wire form is a string of decimal digits
NumericId = Annotated[int, BeforeValidator(_parse_numeric_id)]

# Wire form is a JSON integer; numeric strings are rejected
UInt64 = Annotated[int, Strict(), Field(ge=0, le=_UINT64_MAX)]


class SubsonicModel(BaseModel):
    """Base model for Subsonic responses."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class Song(SubsonicModel):
    """Song ("child" entry) as returned inside an album."""

    id: NumericId
    title: str
    album: str | None = None
    artist: str | None = None
    track: UInt64 | None = None
    disc_number: UInt64 | None = Field(default=None, alias="discNumber")
    year: UInt64 | None = None
    genre: str | None = None
    cover_id: str | None = Field(default=None, alias="coverArt")
    size: UInt64 | None = None
    content_type: str | None = Field(default=None, alias="contentType")
    suffix: str | None = None
    duration: UInt64 | None = None
    bit_rate: UInt64 | None = Field(default=None, alias="bitRate")
    path: str | None = None
    album_id: NumericId | None = Field(default=None, alias="albumId")
    artist_id: NumericId | None = Field(default=None, alias="artistId")


class Album(SubsonicModel):
    """Album response from getAlbum / getAlbumList2.

    ``songs`` may be partial: list responses usually omit them entirely.
    Use ``CatalogClient.album_songs()`` to get the authoritative list.
    """

    id: NumericId
    name: str
    artist: str | None = None
    artist_id: NumericId | None = Field(default=None, alias="artistId")
    cover_id: str | None = Field(default=None, alias="coverArt")
    duration: UInt64
    song_count: UInt64 = Field(alias="songCount")
    year: UInt64 | None = None
    genre: str | None = None
    created: str | None = None
    songs: tuple[Song, ...] = Field(default=(), alias="song")

    @field_validator("songs", mode="before")
    @classmethod
    def _null_songs_to_empty(cls, value: Any) -> Any:
        # Some servers send "song": null for albums without tracks
        return () if value is None else value

    @property
    def is_complete(self) -> bool:
        """Whether the held songs match the declared song count."""
        return len(self.songs) == self.song_count


_ALBUM_LIST = TypeAdapter(list[Album])


def _to_decode_error(entity: str, error: ValidationError) -> DecodeError:
    """Convert a pydantic ValidationError into a DecodeError.

    Only the first error is described in detail; the count of the
    remaining ones is appended to the message.
    """
    details = error.errors()
    first = details[0]
    field = ".".join(str(part) for part in first["loc"]) or None
    expected = first["msg"]

    message = f"Malformed {entity} response: {field or '<root>'}: {expected}"
    if len(details) > 1:
        message += f" (and {len(details) - 1} more)"
    return DecodeError(message, entity=entity, field=field, expected=expected)


def decode_song(value: Any) -> Song:
    """Decode one song JSON object.

    Raises:
        DecodeError: If the value does not match the song shape.
    """
    try:
        return Song.model_validate(value)
    except ValidationError as e:
        raise _to_decode_error("song", e) from e


def decode_album(value: Any) -> Album:
    """Decode one album JSON object, including its nested songs.

    A single malformed song fails the whole album. The declared song
    count is not checked against the nested songs.

    Args:
        value: JSON value believed to be an album object.

    Returns:
        Validated Album.

    Raises:
        DecodeError: If the value does not match the album shape.
    """
    try:
        album = Album.model_validate(value)
    except ValidationError as e:
        raise _to_decode_error("album", e) from e

    logger.debug(
        "Decoded album %d (%d of %d songs held)",
        album.id,
        len(album.songs),
        album.song_count,
    )
    return album


def decode_album_list(value: Any) -> list[Album]:
    """Decode a getAlbumList2 payload into albums.

    The server omits the ``album`` key when the list is empty, so a
    missing or non-array key yields an empty list. Any malformed element
    fails the whole list.

    Args:
        value: The ``albumList2`` payload object.

    Returns:
        Albums in server order.

    Raises:
        DecodeError: If any album element is malformed.
    """
    items = value.get("album") if isinstance(value, dict) else None
    if not isinstance(items, list):
        logger.debug("Album list payload has no album array, treating as empty")
        return []

    try:
        return _ALBUM_LIST.validate_python(items)
    except ValidationError as e:
        raise _to_decode_error("album list", e) from e
