"""Tests for active-file resolution and the file-listing fallback."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from conftest import node

from figma_genui.core.active_file import get_file, list_files, resolve_active_file, set_active_file
from figma_genui.core.context import DesignContext
from figma_genui.core.errors import MalformedAddressError, NotFoundError, RemoteApiError
from figma_genui.figma import InMemoryDesignApi, InMemoryFile


@pytest.mark.asyncio
async def test_resolve_returns_first_file_without_pointer(ctx: DesignContext) -> None:
    active = await resolve_active_file(ctx)
    assert active is not None
    assert active.key == "ABC123"


@pytest.mark.asyncio
async def test_resolve_honours_pointer(api: InMemoryDesignApi) -> None:
    ctx = DesignContext(api=api, default_file_key="XYZ789")
    active = await resolve_active_file(ctx)
    assert active is not None
    assert active.key == "XYZ789"


@pytest.mark.asyncio
async def test_resolve_falls_back_to_first_file_for_unknown_pointer(api: InMemoryDesignApi) -> None:
    ctx = DesignContext(api=api, active_file_key="GONE")
    active = await resolve_active_file(ctx)
    assert active is not None
    assert active.key == "ABC123"


@pytest.mark.asyncio
async def test_resolve_on_empty_listing_returns_none() -> None:
    ctx = DesignContext(api=InMemoryDesignApi())
    assert await resolve_active_file(ctx) is None


@pytest.mark.asyncio
async def test_listing_failure_falls_back_to_default_file() -> None:
    file = InMemoryFile(key="DEF456", name="Default File", document=node("0:0", "Document", "DOCUMENT"))
    api = InMemoryDesignApi([file], listing_available=False)
    ctx = DesignContext(api=api, default_file_key="DEF456")

    files = await list_files(ctx)

    assert len(files) == 1
    assert files[0].key == "DEF456"
    assert files[0].name == "Default File"
    assert api.calls["list_files"] == 1
    assert api.calls["get_file"] == 1


@pytest.mark.asyncio
async def test_listing_failure_without_fallback_is_empty_not_error() -> None:
    api = InMemoryDesignApi(listing_available=False)
    ctx = DesignContext(api=api, default_file_key="MISSING")

    assert await list_files(ctx) == []
    assert await resolve_active_file(ctx) is None


@pytest.mark.asyncio
async def test_listing_failure_without_any_key_skips_direct_fetch() -> None:
    api = InMemoryDesignApi(listing_available=False)
    ctx = DesignContext(api=api)

    assert await list_files(ctx) == []
    assert api.calls["get_file"] == 0


@pytest.mark.asyncio
async def test_listing_is_cached(ctx: DesignContext, api: InMemoryDesignApi) -> None:
    await list_files(ctx)
    await list_files(ctx)
    assert api.calls["list_files"] == 1


@pytest.mark.asyncio
async def test_set_active_commits_pointer(ctx: DesignContext) -> None:
    file = await set_active_file(ctx, "XYZ789")
    assert file.name == "Marketing Site"
    assert ctx.active_file_key == "XYZ789"
    active = await resolve_active_file(ctx)
    assert active is not None
    assert active.key == "XYZ789"


@pytest.mark.asyncio
async def test_set_active_rejected_key_keeps_previous(ctx: DesignContext) -> None:
    await set_active_file(ctx, "ABC123")

    with pytest.raises(NotFoundError) as excinfo:
        await set_active_file(ctx, "NOPE")

    assert ctx.active_file_key == "ABC123"
    assert "NOPE" in excinfo.value.message
    assert excinfo.value.details["cause"]


@pytest.mark.asyncio
async def test_set_active_appends_unlisted_file(api: InMemoryDesignApi) -> None:
    ctx = DesignContext(api=api)
    await list_files(ctx)
    api.add_file(InMemoryFile(key="NEW1", name="Fresh", document=node("0:0", "Document", "DOCUMENT")))

    await set_active_file(ctx, "NEW1")

    assert [f.key for f in ctx.cache.files] == ["ABC123", "XYZ789", "NEW1"]


@pytest.mark.asyncio
async def test_set_active_does_not_duplicate_known_file(ctx: DesignContext) -> None:
    await list_files(ctx)
    await set_active_file(ctx, "ABC123")
    assert [f.key for f in ctx.cache.files] == ["ABC123", "XYZ789"]


@pytest.mark.asyncio
async def test_set_active_requires_key(ctx: DesignContext) -> None:
    with pytest.raises(MalformedAddressError):
        await set_active_file(ctx, "")


@pytest.mark.asyncio
async def test_get_file_wraps_remote_error(ctx: DesignContext) -> None:
    with pytest.raises(NotFoundError, match="File with key NOPE not found or not accessible"):
        await get_file(ctx, "NOPE")


@pytest.mark.asyncio
async def test_get_file_keeps_rate_limit_as_remote_error(ctx: DesignContext, api: InMemoryDesignApi) -> None:
    api.get_file = AsyncMock(  # type: ignore[method-assign]
        side_effect=RemoteApiError("GET /files/ABC123 failed", cause="429 Rate limit exceeded", status_code=429)
    )

    with pytest.raises(RemoteApiError) as excinfo:
        await set_active_file(ctx, "ABC123")

    assert not isinstance(excinfo.value, NotFoundError)
    assert excinfo.value.status_code == 429
    assert "429 Rate limit exceeded" in excinfo.value.message
    assert ctx.active_file_key == ""


@pytest.mark.asyncio
async def test_listing_fallback_swallows_remote_error() -> None:
    api = InMemoryDesignApi(listing_available=False)
    api.get_file = AsyncMock(  # type: ignore[method-assign]
        side_effect=RemoteApiError("GET /files/DEF456 failed", cause="403 Invalid token", status_code=403)
    )
    ctx = DesignContext(api=api, default_file_key="DEF456")

    assert await list_files(ctx) == []


@pytest.mark.asyncio
async def test_listing_skips_malformed_entries(api: InMemoryDesignApi) -> None:
    api.list_files = AsyncMock(  # type: ignore[method-assign]
        return_value=[{"key": "K1"}, {"key": "ABC123", "name": "Design System"}, {"name": "No key"}]
    )
    ctx = DesignContext(api=api)

    files = await list_files(ctx)

    assert [f.key for f in files] == ["ABC123"]


@pytest.mark.asyncio
async def test_resolve_with_only_nameless_entries_returns_none(api: InMemoryDesignApi) -> None:
    api.list_files = AsyncMock(return_value=[{"key": "K1"}])  # type: ignore[method-assign]
    ctx = DesignContext(api=api)

    assert await resolve_active_file(ctx) is None


def test_context_starts_from_default_file(api: InMemoryDesignApi) -> None:
    assert DesignContext(api=api, default_file_key="ABC123").active_file_key == "ABC123"
