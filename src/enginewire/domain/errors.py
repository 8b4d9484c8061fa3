"""Configuration errors raised while composing the engine.

Both are fatal to composition: the composition root never returns a
partially wired result. Builders themselves raise nothing.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Base for all configuration failures surfaced by the composition root."""

    code = "CONFIGURATION_ERROR"

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key
        self.message = message

    def __str__(self) -> str:
        return self.message


class MissingKeyError(ConfigurationError, KeyError):
    """A required configuration key is absent."""

    code = "MISSING_KEY"

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Missing required configuration key: {key}")


class ParseError(ConfigurationError, ValueError):
    """A configuration value is present but not a valid non-negative integer."""

    code = "PARSE_ERROR"

    def __init__(self, key: str, raw: str, reason: str = "is not a non-negative integer") -> None:
        shown = raw if len(raw) <= 40 else raw[:37] + "..."
        super().__init__(key, f"Invalid value for {key}: {shown!r} {reason}")
        self.raw = raw
