"""Subcommand modules for enginewire.

Provides register_commands() which uses deferred imports to keep
``enginewire --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from enginewire.commands.build import build
    from enginewire.commands.config_cmd import config_cmd

    cli.add_command(build)
    cli.add_command(config_cmd)
