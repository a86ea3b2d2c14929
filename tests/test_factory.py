"""Tests for factory functions and public API."""

import httpx

from subsonic_catalog import CatalogClient, ListType, ServerConfig, create_catalog


class TestCreateCatalog:
    """Tests for create_catalog factory function."""

    def test_creates_catalog(self) -> None:
        config = ServerConfig(
            base_url="https://music.example.com", username="u", password="p"
        )
        catalog = create_catalog(config)

        assert isinstance(catalog, CatalogClient)

    def test_uses_injected_http_client(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={"subsonic-response": {"status": "ok", "albumList2": {}}},
            )

        config = ServerConfig(
            base_url="https://music.example.com", username="u", password="p"
        )
        http = httpx.Client(transport=httpx.MockTransport(handler))
        catalog = create_catalog(config, http_client=http)

        assert catalog.fetch_album_list(ListType.RANDOM, size=3) == []
        assert seen[0].url.path == "/rest/getAlbumList2"
        assert seen[0].url.params["size"] == "3"


class TestPublicAPI:
    """Tests for public API exports."""

    def test_all_expected_exports_available(self) -> None:
        """All documented exports should be available."""
        import subsonic_catalog

        # Factory and client
        assert hasattr(subsonic_catalog, "create_catalog")
        assert hasattr(subsonic_catalog, "CatalogClient")
        assert hasattr(subsonic_catalog, "CatalogProtocol")
        assert hasattr(subsonic_catalog, "TransportProtocol")

        # Models and decoders
        assert hasattr(subsonic_catalog, "Album")
        assert hasattr(subsonic_catalog, "Song")
        assert hasattr(subsonic_catalog, "ListType")
        assert hasattr(subsonic_catalog, "decode_album")
        assert hasattr(subsonic_catalog, "decode_album_list")

        # Config
        assert hasattr(subsonic_catalog, "ServerConfig")

        # Exceptions
        assert hasattr(subsonic_catalog, "CatalogError")
        assert hasattr(subsonic_catalog, "DecodeError")
        assert hasattr(subsonic_catalog, "TransportError")

    def test_internal_not_exported(self) -> None:
        """The concrete transport is internal (use create_catalog instead)."""
        import subsonic_catalog

        assert not hasattr(subsonic_catalog, "SubsonicTransport")
        assert "SubsonicTransport" not in subsonic_catalog.__all__
