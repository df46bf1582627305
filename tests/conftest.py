"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from ptcg_cli.config.manager import ConfigManager
from ptcg_cli.config.models import ApiProfile


def pytest_addoption(parser):
    parser.addoption("--live", action="store_true", default=False)
    parser.addoption("--api-key", action="store", default=None)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("PTCG_API_URL", "PTCG_API_KEY", "PTCG_PROFILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path):
    """Point the CLI's config manager at a temp file."""
    mgr = ConfigManager(config_path=tmp_path / "cli-config.toml")
    with patch("ptcg_cli.commands._common._get_manager", return_value=mgr):
        yield mgr


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ApiProfile:
    """Return a sample API profile for testing."""
    return ApiProfile(name="test", url="https://api.test/v2", api_key="abc123")


@pytest.fixture
def make_card():
    """Factory for minimal card payloads as the API returns them."""

    def _make(i: int, **extra) -> dict:
        return {"id": f"base1-{i}", "name": f"Card {i}", "supertype": "Pokémon", **extra}

    return _make


@pytest.fixture
def make_set():
    """Factory for minimal set payloads as the API returns them."""

    def _make(i: int, **extra) -> dict:
        return {"id": f"set{i}", "name": f"Set {i}", "series": "Base", **extra}

    return _make


@pytest.fixture
def charizard() -> dict:
    """Full card payload using the API's camelCase keys."""
    return {
        "id": "base1-4",
        "name": "Charizard",
        "supertype": "Pokémon",
        "subtypes": ["Stage 2"],
        "hp": "120",
        "types": ["Fire"],
        "evolvesFrom": "Charmeleon",
        "abilities": [
            {
                "name": "Energy Burn",
                "text": "Turn all Energy attached to Charizard into Fire Energy.",
                "type": "Pokémon Power",
            }
        ],
        "attacks": [
            {
                "name": "Fire Spin",
                "cost": ["Fire", "Fire", "Fire", "Fire"],
                "convertedEnergyCost": 4,
                "damage": "100",
                "text": "Discard 2 Energy cards attached to Charizard.",
            }
        ],
        "weaknesses": [{"type": "Water", "value": "×2"}],
        "resistances": [{"type": "Fighting", "value": "-30"}],
        "retreatCost": ["Colorless", "Colorless", "Colorless"],
        "convertedRetreatCost": 3,
        "set": {
            "id": "base1",
            "name": "Base",
            "series": "Base",
            "printedTotal": 102,
            "total": 102,
            "legalities": {"unlimited": "Legal"},
            "ptcgoCode": "BS",
            "releaseDate": "1999/01/09",
            "updatedAt": "2022/10/10 15:12:00",
            "images": {
                "symbol": "https://images.pokemontcg.io/base1/symbol.png",
                "logo": "https://images.pokemontcg.io/base1/logo.png",
            },
        },
        "number": "4",
        "artist": "Mitsuhiro Arita",
        "rarity": "Rare Holo",
        "nationalPokedexNumbers": [6],
        "legalities": {"unlimited": "Legal"},
        "images": {
            "small": "https://images.pokemontcg.io/base1/4.png",
            "large": "https://images.pokemontcg.io/base1/4_hires.png",
        },
        "tcgplayer": {
            "url": "https://prices.pokemontcg.io/tcgplayer/base1-4",
            "updatedAt": "2021/08/04",
            "prices": {
                "holofoil": {
                    "low": 289.99,
                    "mid": 400.0,
                    "high": 1000.0,
                    "market": 350.5,
                    "directLow": None,
                }
            },
        },
        "cardmarket": {
            "url": "https://prices.pokemontcg.io/cardmarket/base1-4",
            "updatedAt": "2021/08/04",
            "prices": {
                "averageSellPrice": 300.1,
                "lowPrice": 150.0,
                "trendPrice": 320.5,
                "reverseHoloAvg30": None,
                "avg7": 310.0,
            },
        },
    }
