"""CLI entry point that registers all subcommands."""

from typing import Optional

import typer

from .. import __version__

app = typer.Typer(
    name="include-cost",
    help="include-cost - Estimate C/C++ compilation cost from the include graph",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"include-cost {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Static include-graph analysis for C/C++ build cost."""


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
