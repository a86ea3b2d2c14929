"""Data models for subsonic_catalog.

Public API:
    Album - Album with possibly partial songs
    Song - Song inside an album
    ListType - Album list orderings for getAlbumList2

Decoders (raise DecodeError on malformed payloads):
    decode_album, decode_album_list, decode_song
"""

from subsonic_catalog.models.enums import ListType
from subsonic_catalog.models.subsonic import (
    Album,
    Song,
    decode_album,
    decode_album_list,
    decode_song,
)

__all__ = [
    "Album",
    "ListType",
    "Song",
    "decode_album",
    "decode_album_list",
    "decode_song",
]
