"""Tool-shaped operations: resolve the file or node, then run the query.

Results are structured; turning them into chat text is the MCP facade's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from figma_genui.core.active_file import get_file, list_files, resolve_active_file
from figma_genui.core.address import NodeAddress, parse_file_address, resolve_node_address
from figma_genui.core.codegen import (
    DEFAULT_COMPONENT_FORMAT,
    GeneratedCode,
    component_name_from,
    generate_component_code,
)
from figma_genui.core.context import DesignContext
from figma_genui.core.errors import InvalidArgumentError, NoActiveFileError
from figma_genui.core.query import query_image_export, query_node_details, query_nodes_by_name
from figma_genui.core.tokens import DEFAULT_TOKEN_FORMAT, RenderedTokens, extract_design_tokens, render_tokens
from figma_genui.models import FigmaFile, ImageExport, NodeSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NameSearchResult:
    file: FigmaFile
    query: str
    matches: list[NodeSummary]


@dataclass(frozen=True)
class TokenExtraction:
    file: FigmaFile
    tokens: RenderedTokens


async def _require_active_file(ctx: DesignContext) -> FigmaFile:
    active = await resolve_active_file(ctx)
    if active is None:
        raise NoActiveFileError()
    return active


async def find_components_by_name(ctx: DesignContext, name: str, file_key: str | None = None) -> NameSearchResult:
    if not name:
        raise InvalidArgumentError("Component name is required")

    if file_key:
        logger.info("Using specified file key: %s", file_key)
        file = await get_file(ctx, file_key)
    else:
        file = await _require_active_file(ctx)
        logger.info("Using active file: %s (%s)", file.name, file.key)

    matches = await query_nodes_by_name(ctx, file.key, name)
    return NameSearchResult(file=file, query=name, matches=matches)


async def generate_component(
    ctx: DesignContext,
    node_address: str,
    component_name: str | None = None,
    fmt: str = DEFAULT_COMPONENT_FORMAT,
) -> GeneratedCode:
    address: NodeAddress = await resolve_node_address(ctx, node_address)
    detail = await query_node_details(ctx, address.file_key, address.node_id)

    node_name = str(detail["document"].get("name") or address.node_id)
    name = component_name or component_name_from(node_name)
    logger.info('Generating %s code for component "%s" (%s)', fmt, node_name, name)
    return generate_component_code(name, node_name, fmt)


async def export_component_image(
    ctx: DesignContext, node_address: str, image_format: str = "png", scale: int = 1
) -> ImageExport:
    address = await resolve_node_address(ctx, node_address)
    export = await query_image_export(ctx, address.file_key, address.node_id, image_format, scale)
    logger.info("Image export successful, URL: %s", export.url)
    return export


async def extract_tokens(
    ctx: DesignContext, file_address: str | None = None, fmt: str = DEFAULT_TOKEN_FORMAT
) -> TokenExtraction:
    """Design tokens for a file. The token set is a fixed placeholder for every file."""
    if file_address:
        file_key = parse_file_address(file_address)
    else:
        file_key = (await _require_active_file(ctx)).key

    files = await list_files(ctx)
    file = next((f for f in files if f.key == file_key), None)
    if file is None:
        logger.info("File %s not found in cache, trying to access directly", file_key)
        file = await get_file(ctx, file_key)
        ctx.cache.add_file(file)

    logger.info('Extracting design tokens from "%s" as %s', file.name, fmt)
    return TokenExtraction(file=file, tokens=render_tokens(extract_design_tokens(), fmt))
