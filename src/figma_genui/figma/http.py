"""Figma REST API client on top of ``httpx``."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from figma_genui.core.errors import RemoteApiError

logger = logging.getLogger(__name__)


def _error_cause(exc: httpx.HTTPError) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("err"):
            return f"{exc.response.status_code} {body['err']}"
        return f"{exc.response.status_code} {exc.response.reason_phrase}"
    return str(exc) or type(exc).__name__


class HttpDesignApi:
    """Key-authenticated GET calls against the Figma API. Never retries."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"X-Figma-Token": api_key},
            timeout=timeout,
            transport=transport,
        )

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            status_code = exc.response.status_code if isinstance(exc, httpx.HTTPStatusError) else None
            logger.warning("GET %s failed: %s", path, exc)
            raise RemoteApiError(f"GET {path} failed", cause=_error_cause(exc), status_code=status_code) from exc
        except ValueError as exc:
            raise RemoteApiError(f"GET {path} returned invalid JSON", cause=str(exc)) from exc

        if not isinstance(data, dict):
            raise RemoteApiError(f"GET {path} returned an unexpected payload", cause=type(data).__name__)
        return data

    async def list_files(self) -> list[dict[str, Any]]:
        data = await self._get("/me/files")
        files = data.get("files") or []
        return [f for f in files if isinstance(f, dict)]

    async def get_file(self, file_key: str) -> dict[str, Any]:
        return await self._get(f"/files/{file_key}")

    async def get_nodes(self, file_key: str, node_ids: list[str]) -> dict[str, Any]:
        return await self._get(f"/files/{file_key}/nodes", params={"ids": ",".join(node_ids)})

    async def get_images(self, file_key: str, node_ids: list[str], image_format: str, scale: int) -> dict[str, Any]:
        params = {"ids": ",".join(node_ids), "format": image_format, "scale": scale}
        return await self._get(f"/images/{file_key}", params=params)

    async def dispose(self) -> None:
        await self._client.aclose()
