"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs (CLI flags and ``--set KEY=VALUE`` overrides)
  2. Env vars (``ENGINEWIRE_*`` prefix, ``__`` nested delimiter)
  3. TOML file (``enginewire.toml`` discovered via walk-up)
  4. Code defaults

Raw configuration keys are stored case-folded inside ``app_settings`` so
the sources merge key by key (env var names arrive lower-cased).
:meth:`EngineSettings.raw_config` restores the canonical names.
"""

from __future__ import annotations

import threading
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from enginewire.config.discovery import resolve_config_path
from enginewire.config.models import OutputConfig, RawValue, normalize_app_settings


def _fold_keys(values: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).casefold(): v for k, v in values.items()}


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``enginewire.toml`` file discovered via walk-up."""

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
        app_settings = self._data.get("app_settings")
        if isinstance(app_settings, dict):
            self._data["app_settings"] = _fold_keys(app_settings)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class EngineSettings(BaseSettings):
    """Unified settings for the enginewire CLI.

    Stored on the :class:`~enginewire.commands._context.AppContext` at the
    CLI root level.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        app_settings: Raw configuration keys and values, keys case-folded.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ENGINEWIRE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    app_settings: dict[str, RawValue] = Field(default_factory=dict)
    output: OutputConfig = Field(default_factory=OutputConfig)

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
        start: Path | None = None,
        overrides: Mapping[str, str] | None = None,
        **cli_flags: Any,
    ) -> EngineSettings:
        """Construct settings from a CLI invocation.

        Discovers ``enginewire.toml`` via walk-up from *start* (or uses the
        explicit *config_path*) and applies *overrides* on top of every
        other source.
        """
        toml_path = resolve_config_path(config_path, start)

        init_kwargs: dict[str, Any] = dict(cli_flags)
        if overrides:
            init_kwargs["app_settings"] = _fold_keys(overrides)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **init_kwargs)
        finally:
            _tls.toml_path = None

    def raw_config(self) -> dict[str, str]:
        """Return the raw key/value mapping fed to the composition root."""
        return normalize_app_settings(self.app_settings)
