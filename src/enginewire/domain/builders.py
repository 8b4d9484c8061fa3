"""Description builders for engine parts.

Each builder exposes a single ``produce()`` operation whose output is a
pure function of the values it was constructed with. The engine builder
depends on the *capability* of producing a tire description, not on
:class:`TireBuilder` itself.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from enginewire.domain.values import PistonCount, TireCount

TIRE_LABEL = "Tires: "
TIRE_TOKEN = "()"
PISTON_LABEL = "Pistons: "
PISTON_TOKEN = "|"
LINE_SEPARATOR = "\n"


@runtime_checkable
class DescriptionProducer(Protocol):
    """Anything that can render a textual description of itself."""

    def produce(self) -> str: ...


@runtime_checkable
class TireDescriptionProducer(DescriptionProducer, Protocol):
    """Capability: produce the ``Tires: ...`` line."""


@runtime_checkable
class EngineDescriptionProducer(DescriptionProducer, Protocol):
    """Capability: produce the full two-line engine description."""


def _repeat(label: str, token: str, count: int) -> str:
    return label + token * count


class TireBuilder:
    """Renders ``Tires: `` followed by one ``()`` per tire."""

    def __init__(self, tire_count: TireCount) -> None:
        self._tire_count = tire_count

    @property
    def tire_count(self) -> TireCount:
        return self._tire_count

    def produce(self) -> str:
        return _repeat(TIRE_LABEL, TIRE_TOKEN, self._tire_count.value)


class EngineBuilder:
    """Renders the piston line, then delegates the tire line.

    Output is always ``<piston line>\\n<tire description>``.
    """

    def __init__(self, tires: TireDescriptionProducer, piston_count: PistonCount) -> None:
        self._tires = tires
        self._piston_count = piston_count

    @property
    def piston_count(self) -> PistonCount:
        return self._piston_count

    def produce(self) -> str:
        pistons = _repeat(PISTON_LABEL, PISTON_TOKEN, self._piston_count.value)
        return pistons + LINE_SEPARATOR + self._tires.produce()
