"""[Layer: Presentation] Typer CLI Commands."""

import logging
from importlib.metadata import PackageNotFoundError, version as get_package_version

import typer
from rich.console import Console
from rich.table import Table

from crossyourheart.config import get_settings
from crossyourheart.exceptions import TutorialError
from crossyourheart.tui.app import TutorialApp
from crossyourheart.tui.assets import AssetCatalog
from crossyourheart.tui.theme import Theme
from crossyourheart.tui.tutorial.slides import build_slides

logger = logging.getLogger(__name__)


def _get_version() -> str:
    """Get version from package metadata (single source of truth: pyproject.toml)."""
    try:
        return get_package_version("crossyourheart")
    except PackageNotFoundError:
        return "0.0.0-dev"


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"crossyourheart {_get_version()}")
        raise typer.Exit()


app = typer.Typer(
    name="crossyourheart",
    help="Cross Your Heart crossword tutorial.",
)


def _launch_tutorial() -> None:
    """Run the tutorial TUI until Skip, Done or quit."""
    TutorialApp(settings=get_settings()).run()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Launch the tutorial by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        _launch_tutorial()


@app.command()
def tutorial() -> None:
    """Show the onboarding tutorial."""
    _launch_tutorial()


@app.command()
def slides() -> None:
    """List the tutorial slides with their images and colors."""
    settings = get_settings()
    try:
        built = build_slides(Theme.from_settings(settings), AssetCatalog(settings.assets_dir))
    except TutorialError as e:
        logger.error("Cannot build tutorial slides: %s", e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    table = Table(title="Tutorial slides")
    table.add_column("#", justify="right")
    table.add_column("Title")
    table.add_column("Image")
    table.add_column("Background")
    for number, slide in enumerate(built, start=1):
        table.add_row(
            str(number),
            slide.title,
            slide.image,
            f"[on {slide.background_color}]   [/] {slide.background_color}",
        )
    Console().print(table)
