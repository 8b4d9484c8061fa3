"""Typed configuration values parsed from raw strings.

``TireCount`` and ``PistonCount`` wrap the same kind of integer but are
distinct classes, so a type checker rejects one where the other is
expected and they never compare equal. Neither converts implicitly to
``int``; read the number through ``.value``.

INVARIANT: Values are immutable once constructed.
"""

from __future__ import annotations

import re
from typing import ClassVar, Self

from pydantic import BaseModel, Field

from enginewire.domain.errors import ParseError

TIRE_COUNT_KEY = "TireCount"
PISTON_COUNT_KEY = "PistonCount"
CONNECTION_STRING_KEY = "ConnectionString"

KNOWN_KEYS: tuple[str, ...] = (TIRE_COUNT_KEY, PISTON_COUNT_KEY, CONNECTION_STRING_KEY)

_DIGITS = re.compile(r"^[0-9]+$")

# Largest signed 16-bit value; keeps produce() output small.
MAX_COUNT = 32767


class CountValue(BaseModel):
    """Shared parse-or-fail behaviour for non-negative count values."""

    model_config = {"frozen": True, "strict": True}

    key: ClassVar[str]

    value: int = Field(ge=0, le=MAX_COUNT)

    @classmethod
    def parse(cls, raw: str, *, key: str | None = None) -> Self:
        """Parse *raw* as a base-10 non-negative integer.

        Surrounding whitespace is ignored. Signs, decimals, empty strings
        and values above :data:`MAX_COUNT` are rejected with :class:`ParseError`.
        """
        name = key or cls.key
        text = raw.strip() if isinstance(raw, str) else ""
        if not _DIGITS.match(text):
            raise ParseError(name, str(raw))
        try:
            number = int(text)
        except ValueError as exc:
            raise ParseError(name, str(raw)) from exc
        if number > MAX_COUNT:
            raise ParseError(name, str(raw), f"exceeds the maximum of {MAX_COUNT}")
        return cls(value=number)

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.value})"


class TireCount(CountValue):
    """Number of tires on the engine."""

    key: ClassVar[str] = TIRE_COUNT_KEY


class PistonCount(CountValue):
    """Number of pistons in the engine."""

    key: ClassVar[str] = PISTON_COUNT_KEY


class ConnectionString(BaseModel):
    """Opaque connection string, wrapped so it cannot be mixed up with other text."""

    model_config = {"frozen": True, "strict": True}

    key: ClassVar[str] = CONNECTION_STRING_KEY

    value: str

    @classmethod
    def parse(cls, raw: str) -> ConnectionString:
        return cls(value=raw)
