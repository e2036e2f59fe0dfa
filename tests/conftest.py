"""Pytest fixtures for gde tests."""

import base64
import sys
from pathlib import Path

import httpx
import pytest

# Ensure src/ is in path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import AppSettings
from core.domain.models import RemoteFile, RepoRef

CONTENTS_PREFIX = "/repos/test-owner/test-repo/contents"


def file_entry(path: str, **extra) -> dict:
    return {"type": "file", "name": path.rsplit("/", 1)[-1], "path": path, **extra}


def dir_entry(path: str) -> dict:
    return {"type": "dir", "name": path.rsplit("/", 1)[-1], "path": path}


class FakeGitHub:
    """In-memory GitHub contents API for `httpx.MockTransport`."""

    def __init__(self, tree=None, files=None, statuses=None, raw=None):
        self.tree = tree or {}
        self.files = files or {}
        self.statuses = statuses or {}
        self.raw = raw or {}
        self.requests: list[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def contents_calls(self) -> list[str]:
        return [
            r.url.path[len(CONTENTS_PREFIX):].strip("/")
            for r in self.requests
            if r.url.path.startswith(CONTENTS_PREFIX)
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url in self.raw:
            return httpx.Response(200, text=self.raw[url])

        path = request.url.path
        if path == "/rate_limit":
            return httpx.Response(
                200,
                json={"resources": {"core": {"limit": 60, "remaining": 42, "reset": 1700000000}}},
            )
        if not path.startswith(CONTENTS_PREFIX):
            return httpx.Response(404, json={"message": "Not Found"})

        rel = path[len(CONTENTS_PREFIX):].strip("/")
        if rel in self.statuses:
            status, headers = self.statuses[rel]
            return httpx.Response(status, headers=headers, json={"message": "error"})
        if rel in self.tree:
            return httpx.Response(200, json=self.tree[rel])
        if rel in self.files:
            content = self.files[rel]
            if isinstance(content, dict):
                return httpx.Response(200, json=content)
            encoded = base64.b64encode(content.encode("utf-8")).decode("ascii")
            return httpx.Response(
                200,
                json={**file_entry(rel), "encoding": "base64", "content": encoded},
            )
        return httpx.Response(404, json={"message": "Not Found"})


class MemorySource:
    """`DocsSource` backed by a dict: document path -> file paths."""

    def __init__(self, listing, contents=None):
        self.listing = listing
        self.contents = contents or {}
        self.fetched: list[str] = []

    async def iter_files(self, document_path, *, on_warning=None):
        if document_path not in self.listing:
            if on_warning:
                on_warning(f'Path "{document_path}" not found.')
            return
        for path in self.listing[document_path]:
            yield RemoteFile(path=path, name=path.rsplit("/", 1)[-1])

    async def fetch_text(self, file):
        self.fetched.append(file.path)
        return self.contents.get(file.path, f"Content for {file.path}")


@pytest.fixture
def settings(monkeypatch) -> AppSettings:
    """Settings isolated from the developer's environment and .env files."""
    for var in ("GITHUB_TOKEN", "GDE_GITHUB_TOKEN", "GDE_MAX_CONCURRENCY"):
        monkeypatch.delenv(var, raising=False)
    return AppSettings(_env_file=None)


@pytest.fixture
def repo() -> RepoRef:
    return RepoRef(owner="test-owner", repo="test-repo")


@pytest.fixture
def fake_github():
    return FakeGitHub


@pytest.fixture
def memory_source():
    return MemorySource


@pytest.fixture
def entries():
    return file_entry, dir_entry
