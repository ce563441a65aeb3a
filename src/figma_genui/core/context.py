"""Per-process state threaded through every core operation."""

from __future__ import annotations

from dataclasses import dataclass, field

from figma_genui.core.cache import DesignCache
from figma_genui.core.ports.design_api import DesignApi


@dataclass
class DesignContext:
    """Owns the API client, the cache and the active-file pointer.

    Handlers run one at a time, so nothing here is locked. A transport that services
    requests concurrently must serialize writes to ``cache`` and ``active_file_key``.
    """

    api: DesignApi
    default_file_key: str = ""
    cache: DesignCache = field(default_factory=DesignCache)
    active_file_key: str = ""

    def __post_init__(self) -> None:
        if not self.active_file_key:
            self.active_file_key = self.default_file_key
