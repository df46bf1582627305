"""E2E test configuration — live API access."""

from __future__ import annotations

import pytest


@pytest.fixture
def live_opts(request):
    if not request.config.getoption("--live"):
        pytest.skip("Live API tests not requested (pass --live)")
    api_key = request.config.getoption("--api-key")
    return ["--api-key", api_key] if api_key else []
