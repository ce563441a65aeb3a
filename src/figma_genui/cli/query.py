import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import Annotated, Any, TypeVar

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from figma_genui.core.active_file import list_files, resolve_active_file
from figma_genui.core.context import DesignContext
from figma_genui.core.errors import FigmaGenuiError
from figma_genui.core.operations import extract_tokens as _extract_tokens
from figma_genui.core.operations import find_components_by_name as _find_components_by_name
from figma_genui.core.query import query_file_nodes as _query_file_nodes
from figma_genui.core.query import query_top_level_components as _query_top_level_components
from figma_genui.core.tokens import TOKEN_FORMATS
from figma_genui.core.traversal import DEFAULT_MAX_DEPTH, DEFAULT_MAX_NODES

console = Console()
T = TypeVar("T")


def _render_table(headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(str(v) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def _get_context() -> DesignContext:
    from figma_genui.figma.client import create_context
    from figma_genui.settings import load_settings

    return create_context(load_settings())


def _run(action: Callable[[DesignContext], Awaitable[T]]) -> T:
    try:
        ctx = _get_context()
    except FigmaGenuiError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(code=1) from exc

    async def _main() -> T:
        try:
            return await action(ctx)
        finally:
            await ctx.api.dispose()

    try:
        return asyncio.run(_main())
    except FigmaGenuiError as exc:
        console.print(f"[red]Error:[/red] {exc.message}")
        raise typer.Exit(code=1) from exc


async def _file_key_or_active(ctx: DesignContext, file_key: str | None) -> str:
    if file_key:
        return file_key
    active = await resolve_active_file(ctx)
    if active is None:
        console.print("[yellow]No Figma files available.[/yellow]")
        raise typer.Exit(code=1)
    return active.key


def files() -> None:
    """List known Figma files."""

    async def _action(ctx: DesignContext) -> None:
        rows = await list_files(ctx)
        active = await resolve_active_file(ctx)
        _render_table(
            ["key", "name", "last_modified", "active"],
            [(f.key, f.name, f.last_modified, "✓" if active and f.key == active.key else "") for f in rows],
        )

    _run(_action)


def nodes(
    file_key: Annotated[str | None, typer.Argument(help="File key, defaults to the active file.")] = None,
    max_nodes: Annotated[int, typer.Option(help="Max nodes to return.")] = DEFAULT_MAX_NODES,
    max_depth: Annotated[int, typer.Option(help="Max tree depth to walk.")] = DEFAULT_MAX_DEPTH,
    top_level: Annotated[bool, typer.Option(help="Only scan pages and their direct children.")] = False,
) -> None:
    """List frames and components of a Figma file."""

    async def _action(ctx: DesignContext) -> None:
        key = await _file_key_or_active(ctx, file_key)
        if top_level:
            rows = await _query_top_level_components(ctx, key, max_nodes)
        else:
            rows = await _query_file_nodes(ctx, key, max_nodes=max_nodes, max_depth=max_depth)
        _render_table(["id", "name", "type", "description"], [(n.id, n.name, n.type, n.description) for n in rows])

    _run(_action)


def search(
    name: Annotated[str, typer.Argument(help="Case-insensitive part of the node name.")],
    file_key: Annotated[str | None, typer.Option(help="File key, defaults to the active file.")] = None,
) -> None:
    """Find nodes by name."""

    async def _action(ctx: DesignContext) -> None:
        result = await _find_components_by_name(ctx, name, file_key)
        _render_table(["id", "name", "type"], [(n.id, n.name, n.type) for n in result.matches])

    _run(_action)


def tokens(
    file: Annotated[str | None, typer.Option(help="figma://file/{key} or a bare file key.")] = None,
    format: Annotated[str, typer.Option(help=f"One of {', '.join(TOKEN_FORMATS)}.")] = "json",
) -> None:
    """Print design tokens for a file."""

    async def _action(ctx: DesignContext) -> None:
        extraction = await _extract_tokens(ctx, file, format)
        console.print(f"[green]Design tokens from[/green] {extraction.file.name}")
        console.print(Syntax(extraction.tokens.text, extraction.tokens.language or "text"))

    _run(_action)
