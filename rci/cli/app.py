from __future__ import annotations

import typer

from rci import __version__
from rci.cli.commands.build_tool_cmd import build_tool
from rci.cli.commands.version_cmd import version


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command("version")(version)
app.command("build-tool")(build_tool)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    show_version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if show_version:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def main() -> None:
    app()
