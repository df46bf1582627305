"""Pydantic data models for the Pokémon TCG API."""

from ptcg_cli.models.card import (
    Ability,
    AncientTrait,
    Attack,
    Card,
    CardImages,
    TypeValue,
)
from ptcg_cli.models.common import Legality
from ptcg_cli.models.market import (
    CardMarket,
    CardMarketPrices,
    TCGPlayer,
    TCGPlayerPrices,
)
from ptcg_cli.models.query import SearchParams
from ptcg_cli.models.set import Set, SetImages

__all__ = [
    "Ability",
    "AncientTrait",
    "Attack",
    "Card",
    "CardImages",
    "CardMarket",
    "CardMarketPrices",
    "Legality",
    "SearchParams",
    "Set",
    "SetImages",
    "TCGPlayer",
    "TCGPlayerPrices",
    "TypeValue",
]
