"""Shared base model and records used by both cards and sets."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Base for API records.

    Accepts both the API's camelCase keys and snake_case field names on
    input; dumps with snake_case names unless ``by_alias=True``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Legality(CatalogModel):
    """Format legalities. A format that is not legal is absent."""

    standard: str | None = None
    expanded: str | None = None
    unlimited: str | None = None
