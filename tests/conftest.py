"""Shared fixtures: compat-table documents served without network access."""

import json
from pathlib import Path

import pytest

from common.errors import RetrievalError
from compat import CompatibilityCache, CompatibilityService
from versioning.node_releases import NodeReleaseDirectory

FIXTURES = Path(__file__).resolve().parent / "fixtures"
BASE_URL = "https://compat.example.test/results/v8"
RELEASES_URL = "https://nodejs.example.test/dist/index.json"


def load_fixture(name):
    with open(FIXTURES / name, encoding="utf-8") as fh:
        return json.load(fh)


class StubHttpClient:
    """Serves fixture documents by URL; unknown URLs fail like a 404."""

    def __init__(self, documents=None):
        self.documents = dict(documents or {})
        self.urls = []
        self.stopped = False

    async def get_json(self, url, *, context):
        self.urls.append(url)
        if url not in self.documents:
            raise RetrievalError(f"{context} responded with HTTP 404", url=url)
        return self.documents[url]

    async def stop(self):
        self.stopped = True


def compat_documents():
    return {
        f"{BASE_URL}/{version}.json": load_fixture(f"{version}.json")
        for version in ("4.9.1", "12.0.0", "14.0.0")
    }


@pytest.fixture
def http_client():
    documents = compat_documents()
    documents[RELEASES_URL] = load_fixture("node_releases.json")
    return StubHttpClient(documents)


@pytest.fixture
def releases():
    return NodeReleaseDirectory.from_entries(load_fixture("node_releases.json"))


@pytest.fixture
def cache():
    return CompatibilityCache()


@pytest.fixture
def service(http_client, releases, cache):
    return CompatibilityService(
        cache=cache,
        http_client=http_client,
        releases=releases,
        base_url=BASE_URL,
    )
