"""Tests that -h is accepted as a help flag on all CLI commands, plus the query commands."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from figma_genui.cli.app import app
from figma_genui.core.context import DesignContext
from figma_genui.core.errors import ConfigurationError
from figma_genui.figma import InMemoryDesignApi
from figma_genui.settings import Settings

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["serve"],
        ["files"],
        ["nodes"],
        ["search"],
        ["tokens"],
    ],
    ids=["root", "serve", "files", "nodes", "search", "tokens"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_files_lists_and_marks_active(ctx: DesignContext, api: InMemoryDesignApi) -> None:
    with patch("figma_genui.cli.query._get_context", return_value=ctx):
        result = runner.invoke(app, ["files"])

    assert result.exit_code == 0
    assert "ABC123" in result.output
    assert "XYZ789" in result.output
    assert "(2 rows)" in result.output
    assert api.disposed


def test_nodes_top_level_uses_limit(ctx: DesignContext) -> None:
    with patch("figma_genui.cli.query._get_context", return_value=ctx):
        result = runner.invoke(app, ["nodes", "ABC123", "--top-level", "--max-nodes", "3"])

    assert result.exit_code == 0
    assert "(3 rows)" in result.output
    assert "4:1" in result.output


def test_search_defaults_to_active_file(ctx: DesignContext) -> None:
    with patch("figma_genui.cli.query._get_context", return_value=ctx):
        result = runner.invoke(app, ["search", "nav"])

    assert result.exit_code == 0
    assert "Navbar" in result.output
    assert "(3 rows)" in result.output


def test_search_unknown_file_exits_non_zero(ctx: DesignContext) -> None:
    with patch("figma_genui.cli.query._get_context", return_value=ctx):
        result = runner.invoke(app, ["search", "nav", "--file-key", "NOPE"])

    assert result.exit_code == 1
    assert "File with key NOPE not found" in result.output


def test_tokens_prints_css(ctx: DesignContext) -> None:
    with patch("figma_genui.cli.query._get_context", return_value=ctx):
        result = runner.invoke(app, ["tokens", "--format", "css"])

    assert result.exit_code == 0
    assert "--color-primary" in result.output


def test_missing_configuration_exits_non_zero() -> None:
    with patch("figma_genui.cli.query._get_context", side_effect=ConfigurationError("FIGMA_API_KEY is not set")):
        result = runner.invoke(app, ["files"])

    assert result.exit_code == 1
    assert "FIGMA_API_KEY is not set" in result.output


def test_serve_without_api_key_exits_non_zero() -> None:
    with patch("figma_genui.settings.load_settings", side_effect=ConfigurationError("FIGMA_API_KEY is required")):
        result = runner.invoke(app, ["serve"])

    assert result.exit_code == 1


def test_serve_runs_server_with_transport() -> None:
    settings = Settings(api_key="figd_test", log_file="genui.log")
    server = MagicMock()

    with (
        patch("figma_genui.settings.load_settings", return_value=settings),
        patch("figma_genui.logging_config.configure_logging") as configure,
        patch("figma_genui.mcp.server.create_mcp_server", return_value=server) as create,
    ):
        result = runner.invoke(app, ["serve", "--transport", "sse"])

    assert result.exit_code == 0
    create.assert_called_once()
    server.run.assert_called_once_with(transport="sse")
    configure.assert_called_once_with("genui.log")
