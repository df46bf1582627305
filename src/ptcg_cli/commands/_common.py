"""Shared helpers for CLI commands — client factory and options."""

from __future__ import annotations

from typing import Annotated

import typer

from ptcg_cli.client.api import TCGClient
from ptcg_cli.config.manager import ConfigManager
from ptcg_cli.models.query import SearchParams

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="API profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="API base URL override"),
]
ApiKeyOpt = Annotated[
    str | None,
    typer.Option("--api-key", help="API key override"),
]
FormatOpt = Annotated[
    str | None,
    typer.Option(
        "--format", "-f",
        help="Output format (table, json, yaml, csv); defaults to the configured default_format",
    ),
]
QueryOpt = Annotated[
    str | None,
    typer.Option("--query", "-q", help="Search query, e.g. 'name:charizard'"),
]
PageOpt = Annotated[
    int | None,
    typer.Option("--page", help="Page number (1-based)"),
]
PageSizeOpt = Annotated[
    int | None,
    typer.Option("--page-size", help="Results per page (max 250)"),
]
OrderByOpt = Annotated[
    str | None,
    typer.Option("--order-by", help="Comma-separated fields; prefix '-' for descending"),
]


def _get_manager() -> ConfigManager:
    return ConfigManager()


def resolve_format(fmt: str | None) -> str:
    """Return *fmt*, or the config file's default_format when the flag is absent."""
    return fmt or _get_manager().config.default_format


def make_client(
    profile: str | None,
    url: str | None,
    api_key: str | None,
) -> TCGClient:
    """Create a TCGClient from CLI options, env vars, or config profile."""
    resolved = _get_manager().resolve_profile(
        profile_name=profile, url=url, api_key=api_key,
    )
    return TCGClient(resolved)


def make_search_params(
    query: str | None,
    page: int | None,
    page_size: int | None,
    order_by: str | None,
) -> SearchParams:
    """Build SearchParams from CLI options; raises ValueError on bad values."""
    fields = [f.strip() for f in order_by.split(",") if f.strip()] if order_by else None
    return SearchParams(
        query=query, page=page, page_size=page_size, order_by=fields,
    )
