"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "ptcg-cli"
APP_AUTHOR = "ptcg"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_API_URL = "PTCG_API_URL"
ENV_API_KEY = "PTCG_API_KEY"
ENV_PROFILE = "PTCG_PROFILE"

# API defaults
DEFAULT_API_URL = "https://api.pokemontcg.io/v2"
DEFAULT_TIMEOUT = 30.0
API_KEY_HEADER = "X-Api-Key"
