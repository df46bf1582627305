"""Card data models."""

from __future__ import annotations

from pydantic import Field

from ptcg_cli.models.common import CatalogModel, Legality
from ptcg_cli.models.market import CardMarket, TCGPlayer
from ptcg_cli.models.set import Set


class Ability(CatalogModel):
    """A card ability, such as an Ability or Pokémon Power."""

    name: str | None = None
    text: str | None = None
    type_name: str | None = Field(default=None, alias="type")


class AncientTrait(CatalogModel):
    name: str | None = None
    text: str | None = None


class Attack(CatalogModel):
    """An attack and its energy cost."""

    name: str | None = None
    cost: list[str] | None = None
    text: str | None = None
    damage: str | None = None
    converted_energy_cost: int | None = None


class TypeValue(CatalogModel):
    """A weakness or resistance, e.g. ``Fire`` / ``×2``."""

    type_name: str | None = Field(default=None, alias="type")
    value: str | None = None


class CardImages(CatalogModel):
    small: str | None = None
    large: str | None = None


class Card(CatalogModel):
    """A single card, with its set embedded."""

    id: str
    name: str
    supertype: str | None = None
    subtypes: list[str] | None = None
    level: str | None = None
    hp: str | None = None
    types: list[str] | None = None
    evolves_from: str | None = None
    evolves_to: list[str] | None = None
    rules: list[str] | None = None
    ancient_trait: AncientTrait | None = None
    abilities: list[Ability] | None = None
    attacks: list[Attack] | None = None
    weaknesses: list[TypeValue] | None = None
    resistances: list[TypeValue] | None = None
    retreat_cost: list[str] | None = None
    converted_retreat_cost: int | None = None
    set: Set | None = None
    number: str | None = None
    artist: str | None = None
    rarity: str | None = None
    flavor_text: str | None = None
    national_pokedex_numbers: list[int] | None = None
    legalities: Legality | None = None
    regulation_mark: str | None = None
    images: CardImages | None = None
    tcgplayer: TCGPlayer | None = None
    cardmarket: CardMarket | None = None
