"""Taxonomy commands — types, subtypes, supertypes, rarities."""

from __future__ import annotations

from collections.abc import Callable

import typer

from ptcg_cli.client.api import TCGClient
from ptcg_cli.client.errors import error_handler
from ptcg_cli.commands._common import (
    ApiKeyOpt,
    FormatOpt,
    ProfileOpt,
    UrlOpt,
    make_client,
    resolve_format,
)
from ptcg_cli.output.formatter import Columns, render


def _show(
    fetch: Callable[[TCGClient], list[str]],
    title: str,
    profile: str | None,
    url: str | None,
    api_key: str | None,
    fmt: str | None,
) -> None:
    with make_client(profile, url, api_key) as client:
        names = fetch(client)
    columns = Columns(headers=[title], row=lambda name: [name])
    render(names, resolve_format(fmt), columns=columns, title=title)


@error_handler
def types(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    api_key: ApiKeyOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List all energy types."""
    _show(TCGClient.get_types, "Types", profile, url, api_key, fmt)


@error_handler
def subtypes(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    api_key: ApiKeyOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List all subtypes."""
    _show(TCGClient.get_subtypes, "Subtypes", profile, url, api_key, fmt)


@error_handler
def supertypes(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    api_key: ApiKeyOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List all supertypes."""
    _show(TCGClient.get_supertypes, "Supertypes", profile, url, api_key, fmt)


@error_handler
def rarities(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    api_key: ApiKeyOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List all rarities."""
    _show(TCGClient.get_rarities, "Rarities", profile, url, api_key, fmt)


def register(app: typer.Typer) -> None:
    """Register the taxonomy commands at the top level of *app*."""
    for command in (types, subtypes, supertypes, rarities):
        app.command()(command)
