"""Composition root: parse raw configuration and wire the builders.

Composition runs in two stages:

1. :func:`parse_engine_config` turns the raw key/value mapping into typed
   values. Every required key is parsed before anything is built, so a
   ``MissingKeyError`` or ``ParseError`` always surfaces first.
2. :func:`wire_engine` assembles the object graph by plain constructor
   injection: the tire builder is handed to the engine builder through its
   ``TireDescriptionProducer`` capability.

:func:`compose` runs both and returns the engine builder.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from enginewire.domain.builders import (
    EngineBuilder,
    EngineDescriptionProducer,
    TireBuilder,
    TireDescriptionProducer,
)
from enginewire.domain.errors import MissingKeyError
from enginewire.domain.values import (
    CONNECTION_STRING_KEY,
    PISTON_COUNT_KEY,
    TIRE_COUNT_KEY,
    ConnectionString,
    PistonCount,
    TireCount,
)

logger = logging.getLogger(__name__)

REQUIRED_KEYS: tuple[str, ...] = (TIRE_COUNT_KEY, PISTON_COUNT_KEY)


@dataclass(frozen=True)
class EngineConfig:
    """Typed values needed to build an engine."""

    tire_count: TireCount
    piston_count: PistonCount


def _require(raw_config: Mapping[str, str], key: str) -> str:
    try:
        return raw_config[key]
    except KeyError:
        raise MissingKeyError(key) from None


def parse_engine_config(raw_config: Mapping[str, str]) -> EngineConfig:
    """Parse every required key into its typed value.

    Raises:
        MissingKeyError: A required key is absent.
        ParseError: A value is not a non-negative integer.
    """
    tire_count = TireCount.parse(_require(raw_config, TIRE_COUNT_KEY), key=TIRE_COUNT_KEY)
    piston_count = PistonCount.parse(
        _require(raw_config, PISTON_COUNT_KEY), key=PISTON_COUNT_KEY
    )
    logger.debug(
        "Parsed engine config: tires=%d pistons=%d", tire_count.value, piston_count.value
    )
    return EngineConfig(tire_count=tire_count, piston_count=piston_count)


def load_connection_string(raw_config: Mapping[str, str]) -> ConnectionString:
    """Wrap the ``ConnectionString`` key. Not needed to build an engine."""
    return ConnectionString.parse(_require(raw_config, CONNECTION_STRING_KEY))


def wire_engine(config: EngineConfig) -> EngineDescriptionProducer:
    """Assemble the builder graph from already-validated values."""
    tires: TireDescriptionProducer = TireBuilder(config.tire_count)
    engine = EngineBuilder(tires, config.piston_count)
    logger.debug("Wired %s with %s", type(engine).__name__, type(tires).__name__)
    return engine


def compose(raw_config: Mapping[str, str]) -> EngineDescriptionProducer:
    """Parse *raw_config* and return the fully wired engine builder.

    Any failure is raised before a builder is constructed; there is no
    partial result.
    """
    return wire_engine(parse_engine_config(raw_config))
