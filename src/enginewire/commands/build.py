"""Command: compose the engine and print its description."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enginewire.commands._base import EngineCommand

if TYPE_CHECKING:
    from enginewire.commands._context import AppContext


@click.command(
    cls=EngineCommand,
    examples="""\
  enginewire build
  enginewire build --set TireCount=4 --set PistonCount=6
  ENGINEWIRE_APP_SETTINGS__TIRECOUNT=4 enginewire build
  enginewire --json build""",
)
@click.pass_obj
def build(app: AppContext, overrides: dict[str, str]) -> None:
    """Compose the engine builder and print the engine description."""
    from enginewire.services.engine import EngineService

    settings = app.settings(overrides)
    result = EngineService(settings.raw_config()).build()
    app.emit(result)
    if not (settings.json_output or settings.quiet):
        click.echo(settings.output.ready_message)
