"""Pokémon TCG API client."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from ptcg_cli.client.auth import resolve_auth
from ptcg_cli.client.envelope import DataEnvelope, ErrorEnvelope, decode_envelope, resolve
from ptcg_cli.client.errors import DecodeFailedError, RequestError
from ptcg_cli.client.pagination import PagePolicy, paginate
from ptcg_cli.config.models import ApiProfile
from ptcg_cli.models.card import Card
from ptcg_cli.models.query import SearchParams
from ptcg_cli.models.set import Set

logger = logging.getLogger(__name__)


class TCGClient:
    """Synchronous client for the read-only Pokémon TCG REST API.

    Holds only immutable configuration; every call is independent.
    """

    def __init__(
        self,
        profile: ApiProfile | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.profile = profile or ApiProfile(name="default")
        self.base_url = self.profile.url
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=resolve_auth(self.profile),
            timeout=self.profile.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> TCGClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # -- Single-resource fetching -------------------------------------------

    def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        logger.debug("GET %s%s params=%s", self.base_url, path, params)
        try:
            response = self._client.get(path, params=params or None)
        except httpx.ConnectError as exc:
            raise RequestError(
                f"Cannot connect to {self.base_url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise RequestError(
                f"Request to {self.base_url} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise RequestError(
                f"Invalid URL for {self.base_url}: {exc}"
            ) from exc
        except httpx.DecodingError as exc:
            raise DecodeFailedError(
                f"Response from {path} could not be decoded: {exc}"
            ) from exc
        except httpx.RequestError as exc:
            raise RequestError(
                f"Request to {self.base_url} failed: {exc}"
            ) from exc
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeFailedError(
                f"{response.status_code} response from {path} is not JSON"
            ) from exc

    def fetch(
        self,
        path: str,
        payload_type: Any,
        params: dict[str, Any] | None = None,
    ) -> DataEnvelope[Any] | ErrorEnvelope:
        """Issue one GET and decode the body into an envelope without resolving it."""
        return decode_envelope(self._get_json(path, params), payload_type)

    def get_one(
        self,
        path: str,
        payload_type: Any,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Issue one GET and return the payload, raising the classified API error."""
        return resolve(self.fetch(path, payload_type, params))

    def get_all(self, path: str, item_type: Any, policy: PagePolicy) -> list[Any]:
        """Fetch every page of a collection endpoint."""
        return paginate(
            lambda page: self.fetch(path, list[item_type], {"page": page}),
            policy,
        )

    # -- Cards ----------------------------------------------------------------

    def get_card(self, card_id: str) -> Card:
        """Fetch a single card by id."""
        card: Card = self.get_one(f"/cards/{card_id}", Card)
        return card

    def search_cards(self, params: SearchParams | None = None) -> list[Card]:
        """Search cards; returns one page of results."""
        query = params.to_query() if params else None
        cards: list[Card] = self.get_one("/cards", list[Card], query)
        return cards

    def get_all_cards(self) -> list[Card]:
        """Fetch every card. Slow: the full catalog spans dozens of pages."""
        return self.get_all("/cards", Card, PagePolicy.CARDS)

    # -- Sets -------------------------------------------------------------------

    def get_set(self, set_id: str) -> Set:
        """Fetch a single set by id."""
        result: Set = self.get_one(f"/sets/{set_id}", Set)
        return result

    def search_sets(self, params: SearchParams | None = None) -> list[Set]:
        """Search sets; returns one page of results."""
        query = params.to_query() if params else None
        sets: list[Set] = self.get_one("/sets", list[Set], query)
        return sets

    def get_all_sets(self) -> list[Set]:
        """Fetch every set."""
        return self.get_all("/sets", Set, PagePolicy.SETS)

    # -- Taxonomies -------------------------------------------------------------

    def get_types(self) -> list[str]:
        """All energy types, e.g. Fire or Water."""
        return self._get_names("/types")

    def get_subtypes(self) -> list[str]:
        """All subtypes, e.g. Basic, EX or VMAX."""
        return self._get_names("/subtypes")

    def get_supertypes(self) -> list[str]:
        """All supertypes: Pokémon, Energy, Trainer."""
        return self._get_names("/supertypes")

    def get_rarities(self) -> list[str]:
        """All rarities, e.g. Common or Rare Holo."""
        return self._get_names("/rarities")

    def _get_names(self, path: str) -> list[str]:
        names: list[str] = self.get_one(path, list[str])
        return names
