"""Enumerations for subsonic_catalog models."""

from enum import StrEnum


class ListType(StrEnum):
    """Album list orderings recognized by ``getAlbumList2``.

    The value of each member is its canonical wire text, sent as the
    ``type`` query parameter.
    """

    ALPHA_BY_ARTIST = "alphabeticalByArtist"
    ALPHA_BY_NAME = "alphabeticalByName"
    FREQUENT = "frequent"
    HIGHEST = "highest"
    NEWEST = "newest"
    RANDOM = "random"
    RECENT = "recent"
    STARRED = "starred"

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        match self:
            case ListType.ALPHA_BY_ARTIST:
                return "alphabetical by artist"
            case ListType.ALPHA_BY_NAME:
                return "alphabetical by name"
            case ListType.FREQUENT:
                return "frequently played"
            case ListType.HIGHEST:
                return "highest rated"
            case ListType.NEWEST:
                return "recently added"
            case ListType.RANDOM:
                return "random"
            case ListType.RECENT:
                return "recently played"
            case ListType.STARRED:
                return "starred"
