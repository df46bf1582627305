"""Marketplace price data attached to cards.

TCGplayer prices are in US dollars, cardmarket prices in euros.
"""

from __future__ import annotations

from ptcg_cli.models.common import CatalogModel


class TCGPlayerPrices(CatalogModel):
    """Prices for one printing variant."""

    low: float | None = None
    mid: float | None = None
    high: float | None = None
    market: float | None = None
    direct_low: float | None = None


class TCGPlayer(CatalogModel):
    """TCGplayer listing for a card.

    ``prices`` is keyed by printing variant, e.g. ``normal``, ``holofoil``
    or ``reverseHolofoil``.
    """

    url: str | None = None
    updated_at: str | None = None
    prices: dict[str, TCGPlayerPrices] | None = None


class CardMarketPrices(CatalogModel):
    average_sell_price: float | None = None
    low_price: float | None = None
    trend_price: float | None = None
    german_pro_low: float | None = None
    suggested_price: float | None = None
    reverse_holo_sell: float | None = None
    reverse_holo_low: float | None = None
    reverse_holo_trend: float | None = None
    low_price_ex_plus: float | None = None
    avg1: float | None = None
    avg7: float | None = None
    avg30: float | None = None
    reverse_holo_avg1: float | None = None
    reverse_holo_avg7: float | None = None
    reverse_holo_avg30: float | None = None


class CardMarket(CatalogModel):
    """Cardmarket listing for a card."""

    url: str | None = None
    updated_at: str | None = None
    prices: CardMarketPrices | None = None
