import logging
import os
import sys
from typing import Annotated

import typer
from rich.console import Console

from figma_genui.core.errors import ConfigurationError

# stdout belongs to the stdio transport
console = Console(stderr=True)
logger = logging.getLogger(__name__)


def serve(
    transport: Annotated[str, typer.Option(help="MCP transport (stdio, sse or http).")] = "stdio",
) -> None:
    """Start the MCP server."""
    from figma_genui.figma.client import create_context
    from figma_genui.logging_config import configure_logging
    from figma_genui.mcp.server import create_mcp_server
    from figma_genui.settings import load_settings

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(code=1) from exc

    configure_logging(settings.log_file)
    logger.info("MCP server starting up")
    logger.info("Current directory: %s", os.getcwd())
    logger.info("Python version: %s", sys.version.split()[0])
    logger.info("FIGMA_DEFAULT_FILE: %s", settings.default_file_key or "not set")

    ctx = create_context(settings)
    server = create_mcp_server(ctx)
    console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]
