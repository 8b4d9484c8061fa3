"""EngineService: compose the engine and report configuration.

Wraps the composition root in the ServiceResult contract: configuration
errors become ``ServiceError`` payloads instead of exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from enginewire.composition import load_connection_string, parse_engine_config, wire_engine
from enginewire.domain.errors import ConfigurationError, MissingKeyError
from enginewire.domain.values import CONNECTION_STRING_KEY
from enginewire.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _error_from(exc: ConfigurationError) -> ServiceError:
    detail: dict[str, Any] = {"key": exc.key}
    raw = getattr(exc, "raw", None)
    if raw is not None:
        detail["raw"] = raw
    return ServiceError(code=exc.code, message=exc.message, detail=detail)


class EngineService:
    """Operations over a raw configuration mapping.

    Usage::

        result = EngineService({"TireCount": "4", "PistonCount": "6"}).build()
        result.data["description"]
    """

    def __init__(self, raw_config: Mapping[str, str]) -> None:
        self._raw_config = dict(raw_config)

    def build(self) -> ServiceResult:
        """Compose the engine builder and render its description."""
        op = "build_engine"
        try:
            config = parse_engine_config(self._raw_config)
        except ConfigurationError as exc:
            logger.debug("Composition failed: %s", exc)
            return ServiceResult.failure(op, _error_from(exc))

        engine = wire_engine(config)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "description": engine.produce(),
                "tire_count": config.tire_count.value,
                "piston_count": config.piston_count.value,
            },
        )

    def show_config(self) -> ServiceResult:
        """Parse every known value without building anything."""
        op = "show_config"
        try:
            config = parse_engine_config(self._raw_config)
        except ConfigurationError as exc:
            logger.debug("Config parse failed: %s", exc)
            return ServiceResult.failure(op, _error_from(exc))

        data: dict[str, Any] = {
            "tire_count": config.tire_count.value,
            "piston_count": config.piston_count.value,
        }
        warnings: list[str] = []
        try:
            data["connection_string"] = load_connection_string(self._raw_config).value
        except MissingKeyError:
            warnings.append(f"{CONNECTION_STRING_KEY} is not set")
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
