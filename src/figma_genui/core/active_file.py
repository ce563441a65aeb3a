"""Which Figma file operations default to when no file key is given."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from figma_genui.core.context import DesignContext
from figma_genui.core.errors import MalformedAddressError, NotFoundError, RemoteApiError
from figma_genui.models import FigmaFile

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


def file_from_response(file_key: str, response: dict[str, Any]) -> FigmaFile:
    """Build a ``FigmaFile`` from a ``GET /files/{key}`` response."""
    thumbnail = response.get("thumbnailUrl")
    return FigmaFile(
        key=file_key,
        name=str(response.get("name") or file_key),
        last_modified=str(response.get("lastModified") or _now_iso()),
        thumbnail_url=thumbnail if isinstance(thumbnail, str) else None,
    )


async def get_file(ctx: DesignContext, file_key: str) -> FigmaFile:
    """Fetch one file directly, bypassing the listing endpoint."""
    try:
        response = await ctx.api.get_file(file_key)
    except RemoteApiError as exc:
        logger.warning("Error accessing file %s directly: %s", file_key, exc.message)
        if exc.status_code == 404:
            raise NotFoundError(
                f"File with key {file_key} not found or not accessible",
                {"file_key": file_key, "cause": exc.message},
            ) from exc
        raise RemoteApiError(
            f"Could not access file {file_key}", cause=exc.message, status_code=exc.status_code
        ) from exc
    return file_from_response(file_key, response)


def _parse_listing(raw_files: list[dict[str, Any]]) -> list[FigmaFile]:
    files: list[FigmaFile] = []
    for raw in raw_files:
        try:
            files.append(FigmaFile.model_validate(raw))
        except ValidationError as exc:
            logger.warning("Skipping malformed file entry %r: %s", raw, exc)
    return files


async def _fetch_files(ctx: DesignContext) -> list[FigmaFile]:
    try:
        logger.info("Fetching files from /me/files endpoint")
        raw_files = await ctx.api.list_files()
    except RemoteApiError as exc:
        logger.warning("Error fetching files from /me/files: %s", exc.message)
    else:
        files = _parse_listing(raw_files)
        logger.info("Found %d files from /me/files endpoint", len(files))
        return files

    fallback_key = ctx.active_file_key or ctx.default_file_key
    if not fallback_key:
        return []

    logger.info("Trying to access file directly with key: %s", fallback_key)
    try:
        file = await get_file(ctx, fallback_key)
    except (NotFoundError, RemoteApiError):
        return []
    logger.info("Successfully accessed file: %s", file.name)
    return [file]


async def list_files(ctx: DesignContext) -> list[FigmaFile]:
    """Return the known files. An empty list is a valid answer, not an error."""
    return await ctx.cache.get_files(lambda: _fetch_files(ctx))


async def resolve_active_file(ctx: DesignContext) -> FigmaFile | None:
    files = await list_files(ctx)
    if not files:
        return None

    if ctx.active_file_key:
        active = next((f for f in files if f.key == ctx.active_file_key), None)
        if active is not None:
            return active

    return files[0]


async def set_active_file(ctx: DesignContext, file_key: str) -> FigmaFile:
    """Point the active file at ``file_key`` once the API confirms it exists.

    On failure the previous active file is kept.
    """
    if not file_key:
        raise MalformedAddressError("File key is required")

    logger.info("Setting active file to: %s", file_key)
    file = await get_file(ctx, file_key)

    ctx.active_file_key = file_key
    existing = ctx.cache.find_file(file_key)
    if existing is None:
        ctx.cache.add_file(file)
    else:
        existing.last_modified = file.last_modified

    logger.info("Successfully set active file to: %s (%s)", file.name, file_key)
    return file
