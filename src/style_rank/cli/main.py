"""Style Rank command-line entry point."""

import typer

from .. import __version__
from .commands.analyze import analyze
from .commands.watch import watch
from .output import console, setup_logging

app = typer.Typer(
    name="style-rank",
    help="🏆 Rank JavaScript/TypeScript files by complexity and clean code rules",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"style-rank {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """🏆 Style Rank: code complexity and clean code ranking."""
    setup_logging()


app.command("analyze")(analyze)
app.command("watch")(watch)


if __name__ == "__main__":
    app()
