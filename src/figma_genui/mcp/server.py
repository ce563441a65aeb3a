"""FastMCP server exposing Figma files, nodes and code-generation tools."""

from __future__ import annotations

import json
import logging
from typing import Annotated, Literal

from fastmcp import FastMCP
from fastmcp.exceptions import PromptError, ResourceError, ToolError
from mcp.types import EmbeddedResource, PromptMessage, TextContent, TextResourceContents
from pydantic import Field

from figma_genui.core.active_file import list_files, resolve_active_file, set_active_file
from figma_genui.core.address import ADDRESS_HELP, FILE_ADDRESS_HELP, file_uri
from figma_genui.core.address import node_uri as _node_uri
from figma_genui.core.context import DesignContext
from figma_genui.core.errors import FigmaGenuiError, NoActiveFileError
from figma_genui.core.operations import (
    export_component_image as _export_component_image,
)
from figma_genui.core.operations import (
    extract_tokens as _extract_tokens,
)
from figma_genui.core.operations import (
    find_components_by_name as _find_components_by_name,
)
from figma_genui.core.operations import (
    generate_component as _generate_component,
)
from figma_genui.core.query import query_file_nodes, query_node_details, query_top_level_components
from figma_genui.mcp.formatting import (
    format_active_file,
    format_error,
    format_export,
    format_generated,
    format_search_result,
    format_tokens,
    format_top_level,
)

logger = logging.getLogger(__name__)

ComponentFormat = Literal["react", "swift", "web-component", "vue", "angular", "svelte"]
ImageFormat = Literal["png", "jpg", "svg", "pdf"]
TokenFormat = Literal["json", "css", "scss", "swift"]

_PROMPT_NODE_LIMIT = 5
_API_HINT = "Please check your Figma API key and file access permissions."


async def list_design_resources(ctx: DesignContext) -> list[dict[str, str]]:
    """Every known file, plus node entries for the active file only."""
    files = await list_files(ctx)
    active = await resolve_active_file(ctx)

    resources: list[dict[str, str]] = []
    for file in files:
        is_active = active is not None and file.key == active.key
        resources.append(
            {
                "uri": file_uri(file.key),
                "mimeType": "application/json",
                "name": f"{'✓ ' if is_active else ''}{file.name}",
                "description": f"Figma file: {file.name}{' (Active)' if is_active else ''}",
            }
        )
        if not is_active:
            continue

        try:
            nodes = await query_file_nodes(ctx, file.key)
        except FigmaGenuiError as exc:
            logger.warning("Error fetching nodes for file %s: %s", file.key, exc.message)
            continue
        for node in nodes:
            resources.append(
                {
                    "uri": _node_uri(file.key, node.id),
                    "mimeType": "application/json",
                    "name": f"{file.name} - {node.name}",
                    "description": node.description or f"A {node.type.lower()} from {file.name}",
                }
            )
    return resources


async def _design_messages(ctx: DesignContext, intro: str, outro: str) -> list[PromptMessage]:
    active = await resolve_active_file(ctx)
    if active is None:
        raise PromptError("No Figma files available. Please check your Figma account and API key.")

    try:
        nodes = await query_file_nodes(ctx, active.key)
        details = [(node, await query_node_details(ctx, active.key, node.id)) for node in nodes[:_PROMPT_NODE_LIMIT]]
    except FigmaGenuiError as exc:
        raise PromptError(exc.message) from exc
    if not nodes:
        raise PromptError(f"No components or frames found in the active Figma file: {active.name}")

    messages = [PromptMessage(role="user", content=TextContent(type="text", text=intro.format(file=active.name)))]
    for node, detail in details:
        resource = TextResourceContents(
            uri=_node_uri(active.key, node.id),  # type: ignore[arg-type]
            mimeType="application/json",
            text=json.dumps(detail, indent=2),
        )
        messages.append(PromptMessage(role="user", content=EmbeddedResource(type="resource", resource=resource)))
    messages.append(PromptMessage(role="user", content=TextContent(type="text", text=outro)))
    return messages


def create_mcp_server(ctx: DesignContext) -> FastMCP:
    """Create a FastMCP server wired to the given design context."""

    mcp = FastMCP(
        "figma-genui",
        instructions="Browse Figma files and components, and generate code stubs from design nodes.",
    )

    # -- resources --

    @mcp.resource("figma://files", mime_type="application/json")
    async def files_index() -> str:
        """List Figma files; the active file also lists its frames and components."""
        try:
            return json.dumps(await list_design_resources(ctx), indent=2)
        except FigmaGenuiError as exc:
            raise ResourceError(exc.message) from exc

    @mcp.resource("figma://file/{file_key}", mime_type="application/json")
    async def file_resource(file_key: str) -> str:
        """Frames, components and component sets of a Figma file."""
        try:
            nodes = await query_file_nodes(ctx, file_key)
        except FigmaGenuiError as exc:
            raise ResourceError(exc.message) from exc
        payload = {"fileKey": file_key, "nodes": [n.model_dump() for n in nodes]}
        return json.dumps(payload, indent=2)

    @mcp.resource("figma://node/{file_key}/{node_id}", mime_type="application/json")
    async def node_resource(file_key: str, node_id: str) -> str:
        """Raw Figma API detail for a single node."""
        try:
            detail = await query_node_details(ctx, file_key, node_id)
        except FigmaGenuiError as exc:
            raise ResourceError(exc.message) from exc
        return json.dumps(detail, indent=2)

    # -- tools --

    @mcp.tool()
    async def set_active_figma_file(file_key: str) -> str:
        """Set the active Figma file to work with."""
        try:
            file = await set_active_file(ctx, file_key)
        except FigmaGenuiError as exc:
            raise ToolError(exc.message) from exc
        return format_active_file(file)

    @mcp.tool()
    async def find_component_by_name(name: str, file_key: str | None = None) -> str:
        """Find components by name (case-insensitive, partial match) in a Figma file, the active one by default."""
        try:
            result = await _find_components_by_name(ctx, name, file_key)
        except FigmaGenuiError as exc:
            return format_error(exc, _API_HINT if exc.code == "not_found" else None)
        return format_search_result(result)

    @mcp.tool()
    async def list_top_level_components(file_key: str | None = None, limit: int = 10) -> str:
        """Quickly list components and frames placed directly on the pages of a Figma file."""
        try:
            if not file_key:
                active = await resolve_active_file(ctx)
                if active is None:
                    return format_error(NoActiveFileError())
                file_key = active.key
            components = await query_top_level_components(ctx, file_key, limit)
        except FigmaGenuiError as exc:
            return format_error(exc, f"Failed to fetch components from file {file_key}.")
        return format_top_level(file_key, components)

    @mcp.tool()
    async def generate_component(
        node_uri: str,
        component_name: str | None = None,
        format: ComponentFormat = "react",
    ) -> str:
        """Generate code for a component from a Figma design node."""
        try:
            code = await _generate_component(ctx, node_uri, component_name, format)
        except FigmaGenuiError as exc:
            return format_error(exc, ADDRESS_HELP)
        return format_generated(code)

    @mcp.tool()
    async def export_component_image(
        node_uri: str,
        format: ImageFormat = "png",
        scale: Annotated[int, Field(ge=1, le=4)] = 1,
    ) -> str:
        """Export an image of a component from Figma."""
        try:
            export = await _export_component_image(ctx, node_uri, format, scale)
        except FigmaGenuiError as exc:
            return format_error(exc, ADDRESS_HELP)
        return format_export(export)

    @mcp.tool()
    async def extract_design_tokens(file_uri: str | None = None, format: TokenFormat = "json") -> str:
        """Extract design tokens (colors, typography, spacing) from a Figma file, the active one by default."""
        try:
            extraction = await _extract_tokens(ctx, file_uri, format)
        except FigmaGenuiError as exc:
            return format_error(exc, FILE_ADDRESS_HELP)
        return format_tokens(extraction)

    # -- prompts --

    @mcp.prompt()
    async def describe_design() -> list[PromptMessage]:
        """Describe a Figma design in detail."""
        return await _design_messages(
            ctx,
            'Please describe the following Figma design components from file "{file}" in detail:',
            "For each component, describe its visual appearance, layout, colors, typography, and purpose. "
            "Also mention any patterns or design systems you notice.",
        )

    @mcp.prompt()
    async def suggest_improvements() -> list[PromptMessage]:
        """Suggest improvements for a Figma design."""
        return await _design_messages(
            ctx,
            'Please suggest improvements for the following Figma design components from file "{file}":',
            "For each component, suggest improvements for accessibility, usability, visual design, "
            "and consistency with modern design practices. Be specific and actionable in your suggestions.",
        )

    return mcp

