from __future__ import annotations

import logging
from typing import Any

from figma_genui.core.context import DesignContext
from figma_genui.core.errors import InvalidArgumentError, NotFoundError
from figma_genui.core.search import DEFAULT_MAX_RESULTS, search_nodes_by_name
from figma_genui.core.traversal import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_NODES,
    DEFAULT_TOP_LEVEL_LIMIT,
    collect_nodes,
    scan_top_level,
)
from figma_genui.models import ImageExport, NodeSummary

logger = logging.getLogger(__name__)

IMAGE_FORMATS = ("png", "jpg", "svg", "pdf")
MIN_IMAGE_SCALE = 1
MAX_IMAGE_SCALE = 4


async def fetch_document(ctx: DesignContext, file_key: str) -> dict[str, Any]:
    logger.info("Fetching file data from Figma API: %s", file_key)
    response = await ctx.api.get_file(file_key)
    document = response.get("document")
    if not isinstance(document, dict):
        raise NotFoundError(f"File {file_key} has no document", {"file_key": file_key})
    return document


async def query_file_nodes(
    ctx: DesignContext,
    file_key: str,
    max_nodes: int = DEFAULT_MAX_NODES,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[NodeSummary]:
    """Frames, components and component sets of a file, cached per file key.

    The first call's bounds decide what is cached; later calls get that list regardless
    of the bounds they pass.
    """

    async def _fetch() -> list[NodeSummary]:
        document = await fetch_document(ctx, file_key)
        logger.info("Starting to traverse document nodes (max: %d, depth: %d)", max_nodes, max_depth)
        nodes = collect_nodes(document, max_nodes=max_nodes, max_depth=max_depth)
        logger.info("Found %d nodes of types FRAME, COMPONENT, or COMPONENT_SET", len(nodes))
        return nodes

    return await ctx.cache.get_file_nodes(file_key, _fetch)


async def query_top_level_components(
    ctx: DesignContext, file_key: str, limit: int = DEFAULT_TOP_LEVEL_LIMIT
) -> list[NodeSummary]:
    logger.info("Fetching top-level components from file: %s", file_key)
    document = await fetch_document(ctx, file_key)
    return scan_top_level(document, limit=limit)


async def query_node_details(ctx: DesignContext, file_key: str, node_id: str) -> dict[str, Any]:
    """Raw ``GET /files/{key}/nodes`` entry for one node, cached per (file, node)."""

    async def _fetch() -> dict[str, Any]:
        response = await ctx.api.get_nodes(file_key, [node_id])
        detail = (response.get("nodes") or {}).get(node_id)
        if not isinstance(detail, dict) or not isinstance(detail.get("document"), dict):
            raise NotFoundError(
                f"Node {node_id} not found in file {file_key}",
                {"file_key": file_key, "node_id": node_id},
            )
        return detail

    result: dict[str, Any] = await ctx.cache.get_node_detail(file_key, node_id, _fetch)
    return result


async def query_nodes_by_name(
    ctx: DesignContext, file_key: str, name: str, max_results: int = DEFAULT_MAX_RESULTS
) -> list[NodeSummary]:
    logger.info('Searching for nodes with name containing "%s" in file %s', name, file_key)
    document = await fetch_document(ctx, file_key)
    matches = search_nodes_by_name(document, name, max_results=max_results)
    logger.info('Found %d nodes matching "%s"', len(matches), name)
    return matches


async def query_image_export(
    ctx: DesignContext,
    file_key: str,
    node_id: str,
    image_format: str = "png",
    scale: int = 1,
) -> ImageExport:
    if image_format not in IMAGE_FORMATS:
        raise InvalidArgumentError(
            f"Unsupported image format {image_format!r}; expected one of {', '.join(IMAGE_FORMATS)}",
            {"format": image_format},
        )
    if not MIN_IMAGE_SCALE <= scale <= MAX_IMAGE_SCALE:
        raise InvalidArgumentError(
            f"Scale must be between {MIN_IMAGE_SCALE} and {MAX_IMAGE_SCALE}, got {scale}",
            {"scale": scale},
        )

    detail = await query_node_details(ctx, file_key, node_id)
    node_name = str(detail["document"].get("name") or node_id)

    logger.info("Requesting %s export of %s at %dx", image_format, node_id, scale)
    response = await ctx.api.get_images(file_key, [node_id], image_format, scale)
    url = (response.get("images") or {}).get(node_id)
    if not url:
        raise NotFoundError(
            f"Failed to export image for node {node_id}. The node might not be exportable.",
            {"file_key": file_key, "node_id": node_id},
        )

    return ImageExport(
        file_key=file_key,
        node_id=node_id,
        node_name=node_name,
        image_format=image_format,
        scale=scale,
        url=str(url),
    )
