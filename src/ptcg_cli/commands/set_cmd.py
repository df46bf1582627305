"""Set commands — get, search, all."""

from __future__ import annotations

from typing import Annotated, Any

import typer

from ptcg_cli.client.errors import error_handler
from ptcg_cli.commands._common import (
    ApiKeyOpt,
    FormatOpt,
    OrderByOpt,
    PageOpt,
    PageSizeOpt,
    ProfileOpt,
    QueryOpt,
    UrlOpt,
    make_client,
    make_search_params,
    resolve_format,
)
from ptcg_cli.models.set import Set
from ptcg_cli.output.formatter import Columns, render

app = typer.Typer(name="set", help="Look up and search sets.")

_COLUMNS = Columns(
    headers=["ID", "Name", "Series", "Total", "Released"],
    row=lambda s: [s.id, s.name, s.series, s.total, s.release_date],
)


def _summary(s: Set) -> dict[str, Any]:
    return {
        "id": s.id,
        "name": s.name,
        "series": s.series,
        "printed_total": s.printed_total,
        "total": s.total,
        "ptcgo_code": s.ptcgo_code,
        "release_date": s.release_date,
        "updated_at": s.updated_at,
    }


@app.command()
@error_handler
def get(
    set_id: Annotated[str, typer.Argument(help="Set id, e.g. base1")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    api_key: ApiKeyOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Show a single set."""
    with make_client(profile, url, api_key) as client:
        result = client.get_set(set_id)
    fmt = resolve_format(fmt)
    if fmt == "table":
        render(_summary(result), fmt, title=f"Set: {result.name}")
    else:
        render(result, fmt, columns=_COLUMNS)


@app.command()
@error_handler
def search(
    query: QueryOpt = None,
    page: PageOpt = None,
    page_size: PageSizeOpt = None,
    order_by: OrderByOpt = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    api_key: ApiKeyOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Search sets (one page of results)."""
    params = make_search_params(query, page, page_size, order_by)
    with make_client(profile, url, api_key) as client:
        sets = client.search_sets(params)
    render(sets, resolve_format(fmt), columns=_COLUMNS, title="Sets")


@app.command("all")
@error_handler
def all_sets(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    api_key: ApiKeyOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Fetch every set."""
    with make_client(profile, url, api_key) as client:
        sets = client.get_all_sets()
    render(sets, resolve_format(fmt), columns=_COLUMNS, title=f"All Sets ({len(sets)})")
