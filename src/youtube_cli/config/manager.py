"""Configuration manager: read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from youtube_cli.client.errors import ConfigurationError
from youtube_cli.config.constants import CONFIG_FILE, ENV_API_KEY, ENV_PROFILE
from youtube_cli.config.models import CLIConfig, Profile

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


def _profile_table(profile: Profile) -> dict[str, Any]:
    """TOML table for ``profile``; fields left at their default are omitted."""
    return profile.model_dump(exclude={"name"}, exclude_defaults=True)


def _write_private(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` atomically, readable by the owner only."""
    path.parent.mkdir(parents=True, exist_ok=True)
    os.chmod(path.parent, 0o700)
    staging = path.with_suffix(".tmp")
    fd = os.open(str(staging), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as fh:
        fh.write(text)
    os.replace(staging, path)


class ConfigManager:
    """Stores API profiles in a TOML file and picks the one a command runs with."""

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
        with self.config_path.open("rb") as fh:
            data = tomllib.load(fh)
        tables = data.get("profiles", {})
        data["profiles"] = {name: {**table, "name": name} for name, table in tables.items()}
        return CLIConfig.model_validate(data)

    def save(self) -> None:
        data: dict[str, Any] = {}
        if self.config.default_profile:
            data["default_profile"] = self.config.default_profile
        if self.config.profiles:
            data["profiles"] = {
                name: _profile_table(profile) for name, profile in self.config.profiles.items()
            }
        _write_private(self.config_path, tomli_w.dumps(data))

    def add_profile(self, profile: Profile) -> None:
        """Store ``profile``, replacing one of the same name. The first one becomes the default."""
        self.config.profiles[profile.name] = profile
        self.config.default_profile = self.config.default_profile or profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        removed = self.config.profiles.pop(name, None)
        if removed is None:
            return False
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        found = name in self.config.profiles
        if found:
            self.config.default_profile = name
            self.save()
        return found

    def get_profile(self, name: str | None = None) -> Profile | None:
        return self.config.profiles.get(name or self.config.default_profile or "")

    def resolve_profile(
        self,
        profile_name: str | None = None,
        api_key: str | None = None,
    ) -> Profile:
        """Resolve the profile used for API calls.

        The profile comes from ``profile_name``, then YOUTUBE_PROFILE, then the
        configured default. The key comes from ``api_key``, then
        YOUTUBE_API_KEY, then the profile. Without any stored profile a
        throwaway ``cli`` profile with default settings carries the key.
        """
        name = profile_name or os.environ.get(ENV_PROFILE)
        stored = self.get_profile(name)
        if name and stored is None:
            raise ConfigurationError(f"Profile '{name}' not found in {self.config_path}.")
        profile = stored or Profile(name="cli")

        key = api_key or os.environ.get(ENV_API_KEY) or profile.api_key
        if not key:
            raise ConfigurationError(
                "No API key configured. Use 'youtube-cli config add' or set "
                f"{ENV_API_KEY} or pass --key."
            )
        return profile.model_copy(update={"api_key": key})
