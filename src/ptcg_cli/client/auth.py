"""API key authentication."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from ptcg_cli.config.constants import API_KEY_HEADER
from ptcg_cli.config.models import ApiProfile


class ApiKeyAuth(httpx.Auth):
    """Attach the API key to every request (X-Api-Key header)."""

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers[API_KEY_HEADER] = self.api_key
        yield request


def resolve_auth(profile: ApiProfile) -> httpx.Auth | None:
    """Resolve authentication from a profile; anonymous access when no key is set."""
    if profile.api_key:
        return ApiKeyAuth(profile.api_key)
    return None
