"""Pydantic models for ``enginewire.toml``.

Sparse TOML contract: the file only needs an ``[app_settings]`` table.
Values are kept raw; parsing into typed counts belongs to the
composition root.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from enginewire.domain.values import KNOWN_KEYS

# TOML and JSON-decoded env values arrive typed; they are stringified before parsing.
RawValue = str | int | float | bool


def canonical_key(key: str) -> str:
    """Map *key* onto a known configuration key name, ignoring case.

    Environment variables lose their case on the way in, so
    ``TIRECOUNT`` and ``tirecount`` both resolve to ``TireCount``.
    Unknown keys are returned unchanged.
    """
    folded = key.casefold()
    for known in KNOWN_KEYS:
        if known.casefold() == folded:
            return known
    return key


def normalize_app_settings(values: dict[str, RawValue]) -> dict[str, str]:
    """Canonicalize key names and stringify values."""
    return {canonical_key(k): str(v) for k, v in values.items()}


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    ready_message: str = "Engine is ready!"


class FileConfig(BaseModel):
    """Root of ``enginewire.toml``."""

    model_config = {"frozen": True}

    app_settings: dict[str, RawValue] = Field(default_factory=dict)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def raw_config(self) -> dict[str, str]:
        return normalize_app_settings(self.app_settings)
