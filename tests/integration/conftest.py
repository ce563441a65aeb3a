"""Fixtures for integration tests: the HTTP client against a fake Figma API."""

import json
from collections import Counter
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from figma_genui.core.context import DesignContext
from figma_genui.figma import HttpDesignApi

API_KEY = "figd_test_token"
BASE_URL = "https://api.figma.test/v1"


def _find(node: dict[str, Any], node_id: str) -> dict[str, Any] | None:
    if node.get("id") == node_id:
        return node
    for child in node.get("children", []):
        found = _find(child, node_id)
        if found is not None:
            return found
    return None


class FakeFigma:
    """Answers the handful of Figma REST endpoints the server calls."""

    def __init__(self, files: dict[str, tuple[str, dict[str, Any]]], *, listing: bool = True) -> None:
        self.files = files
        self.listing = listing
        self.requests: Counter[str] = Counter()

    @staticmethod
    def _error(status: int, err: str) -> httpx.Response:
        return httpx.Response(status, json={"status": status, "err": err})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.headers.get("X-Figma-Token") != API_KEY:
            return self._error(403, "Invalid token")

        parts = request.url.path.removeprefix("/v1/").split("/")
        self.requests[parts[0]] += 1

        if parts == ["me", "files"] and self.listing:
            listing = [
                {"key": key, "name": name, "lastModified": "2024-05-01T10:00:00Z"}
                for key, (name, _) in self.files.items()
            ]
            return httpx.Response(200, json={"files": listing})

        if len(parts) < 2 or parts[1] not in self.files:
            return self._error(404, "Not found")
        name, document = self.files[parts[1]]
        ids = [i for i in request.url.params.get("ids", "").split(",") if i]

        if parts[0] == "files" and len(parts) == 2:
            payload = {"name": name, "lastModified": "2024-05-02T08:30:00Z", "document": document}
            return httpx.Response(200, json=payload)
        if parts[0] == "files" and parts[2:] == ["nodes"]:
            nodes = {i: ({"document": found} if (found := _find(document, i)) else None) for i in ids}
            return httpx.Response(200, content=json.dumps({"name": name, "nodes": nodes}))
        if parts[0] == "images":
            fmt = request.url.params.get("format", "png")
            images = {i: f"https://s3.figma.test/{parts[1]}/{i}.{fmt}" if _find(document, i) else None for i in ids}
            return httpx.Response(200, json={"err": None, "images": images})
        return self._error(404, "Not found")


@pytest.fixture
def fake_figma(document: dict[str, Any]) -> FakeFigma:
    return FakeFigma({"ABC123": ("Design System", document)})


@pytest_asyncio.fixture
async def http_api(fake_figma: FakeFigma) -> AsyncGenerator[HttpDesignApi, None]:
    api = HttpDesignApi(API_KEY, base_url=BASE_URL, transport=httpx.MockTransport(fake_figma))
    yield api
    await api.dispose()


@pytest.fixture
def http_ctx(http_api: HttpDesignApi) -> DesignContext:
    return DesignContext(api=http_api)


@pytest_asyncio.fixture
async def unauthorized_api(fake_figma: FakeFigma) -> AsyncGenerator[HttpDesignApi, None]:
    api = HttpDesignApi("figd_wrong", base_url=BASE_URL, transport=httpx.MockTransport(fake_figma))
    yield api
    await api.dispose()
