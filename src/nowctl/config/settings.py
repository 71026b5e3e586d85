"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``NOWCTL_*`` prefix
  3. TOML file    — ``nowctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from nowctl.config.discovery import find_config
from nowctl.config.models import ApiConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``nowctl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class NowSettings(BaseSettings):
    """Unified settings for the nowctl CLI.

    Attributes:
        token: API bearer token.
        current_team: Team id every request is scoped to, or None for
            the personal account.
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "NOWCTL_",
        "env_nested_delimiter": "__",
    }

    token: str | None = None
    current_team: str | None = None
    config_path: Path | None = None

    # --- CLI flags ---
    debug: bool = False
    log_json: bool = False

    api: ApiConfig = Field(default_factory=ApiConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        api_url: str | None = None,
        **cli_flags: Any,
    ) -> NowSettings:
        """Construct settings from CLI invocation.

        Discovers ``nowctl.toml`` via walk-up (or explicit *config_path*)
        and merges CLI flags as highest-priority overrides. Flags left
        as None do not shadow lower-priority sources.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config()

        overrides = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            settings = cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

        if api_url:
            api = settings.api.model_copy(update={"url": api_url})
            settings = settings.model_copy(update={"api": api})
        return settings
