"""Card commands — get, search, all."""

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
from ptcg_cli.models.card import Card
from ptcg_cli.output.formatter import Columns, render

app = typer.Typer(name="card", help="Look up and search cards.")

_COLUMNS = Columns(
    headers=["ID", "Name", "Supertype", "Set", "Number", "Rarity"],
    row=lambda card: [
        card.id,
        card.name,
        card.supertype,
        card.set.name if card.set else None,
        card.number,
        card.rarity,
    ],
)


def _summary(card: Card) -> dict[str, Any]:
    return {
        "id": card.id,
        "name": card.name,
        "supertype": card.supertype,
        "subtypes": card.subtypes,
        "hp": card.hp,
        "types": card.types,
        "evolves_from": card.evolves_from,
        "set": card.set.name if card.set else None,
        "number": card.number,
        "artist": card.artist,
        "rarity": card.rarity,
        "regulation_mark": card.regulation_mark,
        "image": card.images.large if card.images else None,
    }


@app.command()
@error_handler
def get(
    card_id: Annotated[str, typer.Argument(help="Card id, e.g. base1-4")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    api_key: ApiKeyOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Show a single card."""
    with make_client(profile, url, api_key) as client:
        card = client.get_card(card_id)
    fmt = resolve_format(fmt)
    if fmt == "table":
        render(_summary(card), fmt, title=f"Card: {card.name}")
    else:
        render(card, fmt, columns=_COLUMNS)


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
    """Search cards (one page of results)."""
    params = make_search_params(query, page, page_size, order_by)
    with make_client(profile, url, api_key) as client:
        cards = client.search_cards(params)
    render(cards, resolve_format(fmt), columns=_COLUMNS, title="Cards")


@app.command("all")
@error_handler
def all_cards(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    api_key: ApiKeyOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Fetch every card, paging through the whole catalog."""
    with make_client(profile, url, api_key) as client:
        cards = client.get_all_cards()
    render(cards, resolve_format(fmt), columns=_COLUMNS, title=f"All Cards ({len(cards)})")
