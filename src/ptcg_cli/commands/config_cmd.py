"""Config commands — manage API profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from ptcg_cli.client.errors import error_handler
from ptcg_cli.commands import _common
from ptcg_cli.commands._common import FormatOpt
from ptcg_cli.config.constants import DEFAULT_API_URL
from ptcg_cli.config.models import ApiProfile
from ptcg_cli.output.formatter import Columns, render

app = typer.Typer(name="config", help="Manage API profiles and CLI configuration.")
console = Console()


def _mask(api_key: str) -> str:
    return api_key[:4] + "..." if len(api_key) > 8 else "***"


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    url: Annotated[str, typer.Option("--url", "-u", help="API base URL")] = DEFAULT_API_URL,
    api_key: Annotated[Optional[str], typer.Option("--api-key", "-k", help="API key")] = None,
    timeout: Annotated[float, typer.Option("--timeout", help="Request timeout in seconds")] = 30.0,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add an API profile."""
    mgr = _common._get_manager()
    profile = ApiProfile(name=name, url=url, api_key=api_key, timeout=timeout)
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(fmt: FormatOpt = None) -> None:
    """List all configured profiles."""
    mgr = _common._get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'ptcg-cli config add' to create one.[/]")
        return

    default = mgr.config.default_profile
    records = [
        {
            "name": p.name,
            "url": p.url,
            "api_key": _mask(p.api_key) if p.auth_configured else None,
            "timeout": p.timeout,
            "default": p.name == default,
        }
        for p in profiles.values()
    ]
    columns = Columns(
        headers=["Name", "URL", "API Key", "Default"],
        row=lambda r: [r["name"], r["url"], r["api_key"], "*" if r["default"] else ""],
    )
    render(records, _common.resolve_format(fmt), columns=columns, title="API Profiles")


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: FormatOpt = None,
) -> None:
    """Show profile details."""
    mgr = _common._get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    data = profile.model_dump(exclude_none=True)
    if profile.auth_configured:
        data["api_key"] = _mask(profile.api_key)

    render(data, _common.resolve_format(fmt), title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default API profile."""
    mgr = _common._get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command("set-format")
@error_handler
def set_format(
    fmt: Annotated[str, typer.Argument(help="Default output format (table, json, yaml, csv)")],
) -> None:
    """Set the output format used when --format is omitted."""
    _common._get_manager().set_format(fmt)
    console.print(f"[green]Default format set to '{fmt}'.[/]")


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Test connectivity by fetching the type list."""
    from ptcg_cli.client.api import TCGClient

    profile = _common._get_manager().resolve_profile(profile_name=name)
    mode = "with API key" if profile.auth_configured else "anonymously"
    console.print(f"Testing connection to [bold]{profile.url}[/] {mode}...")

    with TCGClient(profile) as client:
        types = client.get_types()
    console.print(f"[green]Connected![/] API returned {len(types)} types.")


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove an API profile."""
    mgr = _common._get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force:
        if not Confirm.ask(f"Remove profile '{name}'?"):
            console.print("Cancelled.")
            return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
