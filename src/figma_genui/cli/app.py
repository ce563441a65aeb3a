import typer

from figma_genui.cli.query import files, nodes, search, tokens
from figma_genui.cli.serve import serve

app = typer.Typer(
    name="figma-genui",
    help="Figma GenUI: browse Figma designs and serve them over MCP.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("serve")(serve)
app.command("files")(files)
app.command("nodes")(nodes)
app.command("search")(search)
app.command("tokens")(tokens)


def main() -> None:
    app()
