"""Command: show the parsed configuration values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enginewire.commands._base import EngineCommand

if TYPE_CHECKING:
    from enginewire.commands._context import AppContext


@click.command(
    "config",
    cls=EngineCommand,
    examples="""\
  enginewire config
  enginewire config --set ConnectionString=sqlite:///engine.db
  enginewire --json config""",
)
@click.pass_obj
def config_cmd(app: AppContext, overrides: dict[str, str]) -> None:
    """Parse and display configuration values without building."""
    from enginewire.services.engine import EngineService

    app.emit(EngineService(app.settings(overrides).raw_config()).show_config())
