"""Chat-facing text for tool results and errors."""

from __future__ import annotations

from figma_genui.core.address import node_uri
from figma_genui.core.codegen import GeneratedCode
from figma_genui.core.errors import FigmaGenuiError
from figma_genui.core.operations import NameSearchResult, TokenExtraction
from figma_genui.models import FigmaFile, ImageExport, NodeSummary


def format_error(exc: FigmaGenuiError, hint: str | None = None) -> str:
    text = f"❌ Error: {exc.message}"
    help_text = hint or exc.details.get("help")
    if help_text:
        text += f"\n\n{help_text}"
    return text


def format_active_file(file: FigmaFile) -> str:
    return f'✅ Active Figma file set to: "{file.name}" ({file.key})'


def format_search_result(result: NameSearchResult) -> str:
    file = result.file
    if not result.matches:
        return (
            f'No components found with name containing "{result.query}" in file "{file.name}".\n\n'
            "Try a different name or check if the component exists in this file."
        )

    lines = [
        f'# Components matching "{result.query}" in "{file.name}"',
        "",
        f"Found {len(result.matches)} matching components:",
        "",
        "| Name | Type | Node ID | URI |",
        "|------|------|---------|-----|",
    ]
    lines += [f"| {n.name} | {n.type} | {n.id} | `{node_uri(file.key, n.id)}` |" for n in result.matches]

    first_uri = node_uri(file.key, result.matches[0].id)
    lines += [
        "",
        "## How to use these components",
        "",
        "To export an image of a component, use:",
        "```json",
        "{",
        f'  "node_uri": "{first_uri}",',
        '  "format": "png",',
        '  "scale": 2',
        "}",
        "```",
        "",
        "To generate code for a component, use:",
        "```json",
        "{",
        f'  "node_uri": "{first_uri}",',
        '  "format": "react"',
        "}",
        "```",
    ]
    return "\n".join(lines) + "\n"


def format_top_level(file_key: str, components: list[NodeSummary]) -> str:
    if not components:
        return f"No top-level components found in file {file_key}."
    lines = [f"Found {len(components)} top-level components in {file_key}:", ""]
    lines += [f"- {c.name} ({c.type}) `{node_uri(file_key, c.id)}`" for c in components]
    return "\n".join(lines)


def format_generated(code: GeneratedCode) -> str:
    return (
        f'✅ Generated {code.format.upper()} component "{code.component_name}" '
        f'from Figma node "{code.node_name}"\n\n'
        f"```{code.language}\n{code.code}\n```"
    )


def format_export(export: ImageExport) -> str:
    return (
        f'✅ Exported {export.image_format.upper()} image of "{export.node_name}" at {export.scale}x scale\n\n'
        f"![{export.node_name}]({export.url})\n\n"
        f"Direct URL: {export.url}"
    )


def format_tokens(extraction: TokenExtraction) -> str:
    rendered = extraction.tokens
    return f'✅ Design tokens extracted from: "{extraction.file.name}"\n\n```{rendered.language}\n{rendered.text}\n```'
