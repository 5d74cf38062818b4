"""Root Typer app: global options and command registration."""

from __future__ import annotations

from typing import Optional

import typer

from youtube_cli import __version__
from youtube_cli.commands import config_cmd, listing, resource

app = typer.Typer(
    name="youtube-cli",
    help="CLI tool for the YouTube Data API v3.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"youtube-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Look up videos, playlists and channels, and page through collections."""


# Resource and listing commands sit at the top level
app.registered_commands += resource.app.registered_commands
app.registered_commands += listing.app.registered_commands
app.add_typer(config_cmd.app, name="config")


def main() -> None:
    app()
