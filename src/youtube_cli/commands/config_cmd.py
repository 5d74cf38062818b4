"""Config commands: manage API profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from youtube_cli.client.errors import error_handler
from youtube_cli.client.youtube import YouTubeClient
from youtube_cli.commands._common import run
from youtube_cli.config.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from youtube_cli.config.manager import ConfigManager
from youtube_cli.config.models import Profile
from youtube_cli.output.formatter import output

app = typer.Typer(name="config", help="Manage API profiles and CLI configuration.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


def _mask(key: str) -> str:
    return key[:6] + "..." if len(key) > 10 else "***"


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    api_key: Annotated[str, typer.Option("--key", "-k", help="YouTube Data API key")],
    base_url: Annotated[str, typer.Option("--base-url", help="API root URL")] = DEFAULT_BASE_URL,
    timeout: Annotated[float, typer.Option("--timeout", help="Request timeout in seconds")] = DEFAULT_TIMEOUT,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add an API profile."""
    mgr = _get_manager()
    profile = Profile(name=name, api_key=api_key, base_url=base_url, timeout=timeout)
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'youtube-cli config add' to get started.[/]")
        return

    default = mgr.config.default_profile
    columns = ["Name", "Key", "Base URL", "Default"]
    rows = [
        [
            name,
            _mask(p.api_key) if p.api_key else "",
            p.base_url,
            "*" if name == default else "",
        ]
        for name, p in profiles.items()
    ]
    listed = [
        {"name": name, "api_key": row[1], "base_url": p.base_url, "timeout": p.timeout}
        for (name, p), row in zip(profiles.items(), rows)
    ]
    output(
        {"profiles": listed},
        fmt,
        columns=columns,
        rows=rows,
        title="API Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details."""
    mgr = _get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    data = profile.model_dump(exclude_none=True)
    if "api_key" in data:
        data["api_key"] = _mask(data["api_key"])
    output(data, fmt, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default API profile."""
    mgr = _get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove an API profile."""
    mgr = _get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force and not Confirm.ask(f"Remove profile '{name}'?"):
        console.print("Cancelled.")
        return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Check that a profile's API key is accepted."""
    mgr = _get_manager()
    profile = mgr.resolve_profile(profile_name=name)
    console.print(f"Testing key for profile [bold]{profile.name}[/]...")
    body = run(YouTubeClient(profile), lambda client: client.make("i18nLanguages", {"part": "snippet"}))
    console.print(f"[green]Key accepted.[/] ({len(body.get('items', []))} languages listed)")
