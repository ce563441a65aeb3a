"""Process-lifetime memo of Figma API results.

Entries are never expired or refreshed once written. Edits made in Figma show up only
after a restart or ``DesignCache.clear()``.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from figma_genui.models import FigmaFile, NodeSummary

logger = logging.getLogger(__name__)


def node_detail_key(file_key: str, node_id: str) -> str:
    return f"{file_key}:{node_id}"


class DesignCache:
    def __init__(self) -> None:
        self.files: list[FigmaFile] = []
        self.file_nodes: dict[str, list[NodeSummary]] = {}
        self.node_details: dict[str, Any] = {}

    async def get_files(self, fetcher: Callable[[], Awaitable[list[FigmaFile]]]) -> list[FigmaFile]:
        # An empty list counts as unpopulated so the next call lists again.
        if self.files:
            return self.files
        files = await fetcher()
        self.files = list(files)
        return self.files

    def add_file(self, file: FigmaFile) -> bool:
        """Append ``file`` unless its key is already known. Returns True when appended."""
        if any(f.key == file.key for f in self.files):
            return False
        self.files.append(file)
        return True

    def find_file(self, file_key: str) -> FigmaFile | None:
        return next((f for f in self.files if f.key == file_key), None)

    async def get_file_nodes(
        self, file_key: str, fetcher: Callable[[], Awaitable[list[NodeSummary]]]
    ) -> list[NodeSummary]:
        cached = self.file_nodes.get(file_key)
        if cached is not None:
            logger.debug("Using cached nodes for file %s", file_key)
            return cached
        nodes = await fetcher()
        self.file_nodes[file_key] = list(nodes)
        return self.file_nodes[file_key]

    async def get_node_detail(self, file_key: str, node_id: str, fetcher: Callable[[], Awaitable[Any]]) -> Any:
        key = node_detail_key(file_key, node_id)
        if key in self.node_details:
            logger.debug("Using cached detail for node %s", key)
            return self.node_details[key]
        detail = await fetcher()
        self.node_details[key] = detail
        return detail

    def clear(self) -> None:
        self.files = []
        self.file_nodes.clear()
        self.node_details.clear()
