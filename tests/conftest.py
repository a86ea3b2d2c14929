"""Test fixtures and configuration."""

import copy
from collections.abc import Sequence
from typing import Any

import pytest

BELLEVUE_TITLES = [
    "Bellevue Avenue",
    "Don't Get Là",
    "Space Food",
    "Known By Sight (feat. Milk & Bone)",
    "La Nature à Son Meilleur",
    "Interlude",
    "Old Orford",
    "El Kid",
    "Banana Land",
]

# (id, duration, size, bitRate) per track, in track order
_BELLEVUE_TRACKS = [
    ("27", 198, 5400185, 216),
    ("31", 172, 4866004, 224),
    ("29", 303, 8954200, 235),
    ("32", 231, 6219273, 214),
    ("33", 187, 5169929, 220),
    ("34", 99, 2403983, 191),
    ("28", 223, 6403652, 228),
    ("30", 234, 6506923, 221),
    ("26", 273, 6870947, 200),
]


def bellevue_song(index: int) -> dict[str, Any]:
    """Build the raw JSON of one Bellevue song (0-based index)."""
    song_id, duration, size, bit_rate = _BELLEVUE_TRACKS[index]
    title = BELLEVUE_TITLES[index]
    track = index + 1
    return {
        "id": song_id,
        "parent": "25",
        "isDir": False,
        "title": title,
        "album": "Bellevue",
        "artist": "Misteur Valaire",
        "track": track,
        "genre": "(255)",
        "coverArt": "25",
        "size": size,
        "contentType": "audio/mpeg",
        "suffix": "mp3",
        "duration": duration,
        "bitRate": bit_rate,
        "path": f"Misteur Valaire/Bellevue/{track:02d} - Misteur Valaire - {title}.mp3",
        "playCount": 100 + index,
        "created": "2017-03-12T11:07:27.000Z",
        "albumId": "1",
        "artistId": "1",
        "type": "music",
    }


@pytest.fixture
def raw_album() -> dict[str, Any]:
    """Raw getAlbum payload for Bellevue with all nine songs."""
    return {
        "id": "1",
        "name": "Bellevue",
        "artist": "Misteur Valaire",
        "artistId": "1",
        "coverArt": "al-1",
        "songCount": 9,
        "duration": 1920,
        "playCount": 2223,
        "created": "2017-03-12T11:07:25.000Z",
        "genre": "(255)",
        "song": [bellevue_song(i) for i in range(len(BELLEVUE_TITLES))],
    }


@pytest.fixture
def raw_album_summary(raw_album: dict[str, Any]) -> dict[str, Any]:
    """Bellevue as returned by getAlbumList2 (no songs)."""
    summary = dict(raw_album)
    del summary["song"]
    return summary


@pytest.fixture
def raw_other_album() -> dict[str, Any]:
    """A second album summary with a year and no artist ID."""
    return {
        "id": "2",
        "name": "Golden Years",
        "artist": "Various Artists",
        "coverArt": "al-2",
        "songCount": 12,
        "duration": 2710,
        "year": 2009,
        "created": "2018-01-02T10:00:00.000Z",
    }


@pytest.fixture
def album_list_payload(
    raw_album_summary: dict[str, Any], raw_other_album: dict[str, Any]
) -> dict[str, Any]:
    """Raw albumList2 payload holding two album summaries."""
    return {"album": [raw_album_summary, raw_other_album]}


class MockTransport:
    """Mock Subsonic transport for testing.

    Returns a deep copy of the configured payload for each operation and
    records every call.
    """

    def __init__(
        self,
        responses: dict[str, Any] | None = None,
        error: Exception | None = None,
    ) -> None:
        self._responses = responses or {}
        self._error = error
        self.calls: list[tuple[str, tuple[tuple[str, str], ...]]] = []

    def perform_get(
        self, operation: str, parameters: Sequence[tuple[str, str]]
    ) -> Any:
        """Mock perform_get."""
        self.calls.append((operation, tuple(parameters)))
        if self._error is not None:
            raise self._error
        if operation not in self._responses:
            raise ValueError(f"No response configured for {operation}")
        return copy.deepcopy(self._responses[operation])

    def calls_to(self, operation: str) -> list[tuple[tuple[str, str], ...]]:
        """Parameters of every recorded call to an operation."""
        return [params for op, params in self.calls if op == operation]


@pytest.fixture
def mock_transport(
    raw_album: dict[str, Any], album_list_payload: dict[str, Any]
) -> MockTransport:
    """Create a mock transport serving Bellevue and a two-album list."""
    return MockTransport(
        responses={
            "getAlbum": raw_album,
            "getAlbumList2": album_list_payload,
        }
    )
