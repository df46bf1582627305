"""Set data models."""

from __future__ import annotations

from ptcg_cli.models.common import CatalogModel, Legality


class SetImages(CatalogModel):
    """Symbol and logo image URLs."""

    symbol: str | None = None
    logo: str | None = None


class Set(CatalogModel):
    """A card set / expansion."""

    id: str
    name: str
    series: str | None = None
    printed_total: int | None = None
    total: int | None = None
    legalities: Legality | None = None
    ptcgo_code: str | None = None
    release_date: str | None = None  # YYYY/MM/DD
    updated_at: str | None = None  # YYYY/MM/DD HH:MM:SS
    images: SetImages | None = None
