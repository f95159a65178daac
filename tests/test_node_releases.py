"""Tests for the Node.js release directory."""

import asyncio
from datetime import date

import pytest

from common.errors import StructuralError, UnknownRuntimeError
from conftest import RELEASES_URL, StubHttpClient, load_fixture
from versioning.node_releases import NodeReleaseDirectory


class TestLookup:
    """Lookups against a loaded directory."""

    def test_lookup_returns_release_date(self, releases):
        release = releases.lookup("14.0.0")
        assert release.date == date(2020, 4, 21)
        assert release.v8 == "8.1.307.30"
        assert release.lts is None

    def test_lookup_canonicalizes_input(self, releases):
        assert releases.lookup(12).version == "12.0.0"
        assert releases.lookup("v4.9.1").lts == "Argon"

    def test_unknown_version(self, releases):
        with pytest.raises(UnknownRuntimeError, match="Unknown Node.js version: 99.0.0"):
            releases.lookup("99")

    def test_unknown_version_is_lookup_error(self, releases):
        with pytest.raises(LookupError):
            releases.lookup("3.0.0")

    def test_lookup_before_preload(self):
        directory = NodeReleaseDirectory(StubHttpClient())
        with pytest.raises(UnknownRuntimeError, match="preload"):
            directory.lookup("14.0.0")

    def test_versions_sorted_semantically(self, releases):
        assert releases.versions() == ["4.9.1", "10.0.0", "12.0.0", "14.0.0", "16.0.0"]

    def test_malformed_entry(self):
        with pytest.raises(StructuralError):
            NodeReleaseDirectory.from_entries([{"version": "v1.0.0"}])


class TestPreload:
    """Bulk loading from the release index."""

    def test_preload_fetches_once(self):
        client = StubHttpClient({RELEASES_URL: load_fixture("node_releases.json")})
        directory = NodeReleaseDirectory(client, url=RELEASES_URL)

        async def _run():
            await asyncio.gather(directory.preload(), directory.preload(), directory.preload())
            await directory.preload()

        asyncio.run(_run())
        assert client.urls == [RELEASES_URL]
        assert directory.loaded
        assert directory.lookup("16").date == date(2021, 4, 20)

    def test_preload_rejects_non_list(self):
        client = StubHttpClient({RELEASES_URL: {"versions": []}})
        directory = NodeReleaseDirectory(client, url=RELEASES_URL)
        with pytest.raises(StructuralError):
            asyncio.run(directory.preload())
        assert not directory.loaded

    def test_preload_without_client(self):
        directory = NodeReleaseDirectory()
        with pytest.raises(RuntimeError):
            asyncio.run(directory.preload())
