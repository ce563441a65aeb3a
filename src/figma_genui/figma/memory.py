import copy
from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from figma_genui.core.errors import RemoteApiError


@dataclass
class InMemoryFile:
    key: str
    name: str
    document: dict[str, Any]
    last_modified: str = "2024-01-01T00:00:00Z"
    thumbnail_url: str | None = None


def _find_node(document: dict[str, Any], node_id: str) -> dict[str, Any] | None:
    stack = [document]
    while stack:
        node = stack.pop()
        if node.get("id") == node_id:
            return node
        children = node.get("children")
        if isinstance(children, list):
            stack.extend(c for c in children if isinstance(c, dict))
    return None


class InMemoryDesignApi:
    """Stand-in for the Figma API that serves documents from memory and counts calls."""

    def __init__(self, files: list[InMemoryFile] | None = None, *, listing_available: bool = True) -> None:
        self.files: dict[str, InMemoryFile] = {f.key: f for f in files or []}
        self.listing_available = listing_available
        self.images: dict[str, str] = {}
        self.calls: Counter[str] = Counter()
        self.disposed = False

    def add_file(self, file: InMemoryFile) -> None:
        self.files[file.key] = file

    def _require(self, file_key: str) -> InMemoryFile:
        file = self.files.get(file_key)
        if file is None:
            raise RemoteApiError(f"GET /files/{file_key} failed", cause="404 Not found", status_code=404)
        return file

    async def list_files(self) -> list[dict[str, Any]]:
        self.calls["list_files"] += 1
        if not self.listing_available:
            raise RemoteApiError("GET /me/files failed", cause="404 Not found", status_code=404)
        return [
            {"key": f.key, "name": f.name, "lastModified": f.last_modified, "thumbnailUrl": f.thumbnail_url}
            for f in self.files.values()
        ]

    async def get_file(self, file_key: str) -> dict[str, Any]:
        self.calls["get_file"] += 1
        file = self._require(file_key)
        return {
            "name": file.name,
            "lastModified": file.last_modified,
            "thumbnailUrl": file.thumbnail_url,
            "document": copy.deepcopy(file.document),
        }

    async def get_nodes(self, file_key: str, node_ids: list[str]) -> dict[str, Any]:
        self.calls["get_nodes"] += 1
        file = self._require(file_key)
        nodes: dict[str, Any] = {}
        for node_id in node_ids:
            node = _find_node(file.document, node_id)
            nodes[node_id] = {"document": copy.deepcopy(node), "components": {}, "styles": {}} if node else None
        return {"name": file.name, "lastModified": file.last_modified, "nodes": nodes}

    async def get_images(self, file_key: str, node_ids: list[str], image_format: str, scale: int) -> dict[str, Any]:
        self.calls["get_images"] += 1
        file = self._require(file_key)
        images: dict[str, str | None] = {}
        for node_id in node_ids:
            if node_id in self.images:
                images[node_id] = self.images[node_id]
            elif _find_node(file.document, node_id) is not None:
                images[node_id] = f"https://images.example.test/{file_key}/{node_id}@{scale}x.{image_format}"
            else:
                images[node_id] = None
        return {"err": None, "images": images}

    async def dispose(self) -> None:
        self.disposed = True
