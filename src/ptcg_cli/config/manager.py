"""Configuration manager — read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from ptcg_cli.client.errors import ConfigurationError
from ptcg_cli.config.constants import (
    CONFIG_FILE,
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    ENV_API_KEY,
    ENV_API_URL,
    ENV_PROFILE,
)
from ptcg_cli.config.models import ApiProfile, CLIConfig

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


class ConfigManager:
    """Manages CLI configuration on disk and resolves API profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        try:
            data = tomllib.loads(self.config_path.read_bytes().decode())
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(
                f"Invalid config file {self.config_path}: {exc}"
            ) from exc
        profiles: dict[str, ApiProfile] = {}
        for name, prof_data in data.get("profiles", {}).items():
            profiles[name] = ApiProfile(name=name, **prof_data)
        return CLIConfig(
            default_profile=data.get("default_profile"),
            default_format=data.get("default_format", "table"),
            profiles=profiles,
        )

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Owner-only: profiles hold API keys
        os.chmod(self.config_path.parent, 0o700)
        data: dict[str, Any] = {}
        if self.config.default_profile:
            data["default_profile"] = self.config.default_profile
        if self.config.default_format != "table":
            data["default_format"] = self.config.default_format
        if self.config.profiles:
            data["profiles"] = {}
            for name, profile in self.config.profiles.items():
                prof_dict = profile.model_dump(exclude={"name"}, exclude_none=True)
                if prof_dict.get("url") == DEFAULT_API_URL:
                    del prof_dict["url"]
                if prof_dict.get("timeout") == DEFAULT_TIMEOUT:
                    del prof_dict["timeout"]
                data["profiles"][name] = prof_dict
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def add_profile(self, profile: ApiProfile) -> None:
        self.config.profiles[profile.name] = profile
        if not self.config.default_profile:
            self.config.default_profile = profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        del self.config.profiles[name]
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def set_format(self, fmt: str) -> None:
        self.config.default_format = fmt
        self.save()

    def get_profile(self, name: str | None = None) -> ApiProfile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_profile(
        self,
        profile_name: str | None = None,
        url: str | None = None,
        api_key: str | None = None,
    ) -> ApiProfile:
        """Resolve the API connection.

        Precedence: CLI flags > env vars > config profile > built-in default.
        The public API works without a key, so an empty config is valid.
        """
        requested = profile_name or os.environ.get(ENV_PROFILE)
        profile = self.get_profile(requested)
        if requested and profile is None:
            raise ConfigurationError(
                f"Profile '{requested}' not found. Use 'ptcg-cli config list' "
                "to see configured profiles."
            )

        resolved_url = (
            url
            or os.environ.get(ENV_API_URL)
            or (profile.url if profile else DEFAULT_API_URL)
        )
        resolved_key = (
            api_key
            or os.environ.get(ENV_API_KEY)
            or (profile.api_key if profile else None)
        )

        return ApiProfile(
            name=profile.name if profile else "cli",
            url=resolved_url,
            api_key=resolved_key,
            timeout=profile.timeout if profile else DEFAULT_TIMEOUT,
        )
