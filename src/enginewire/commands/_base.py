"""EngineCommand: the click command class every enginewire command uses.

Each command gets two extra options:

* ``-s/--set KEY=VALUE`` (repeatable), passed to the callback as
  ``overrides``, a dict that outranks env vars and the TOML file.
* ``--examples``, which prints the command's usage examples and exits.
"""

from __future__ import annotations

from typing import Any

import click


def _parse_overrides(
    _ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for item in value:
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", param=param)
        overrides[key.strip()] = raw
    return overrides


class EngineCommand(click.Command):
    """Command with ``--set`` overrides and optional ``--examples`` text."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.params.append(
            click.Option(
                ["-s", "--set", "overrides"],
                multiple=True,
                metavar="KEY=VALUE",
                callback=_parse_overrides,
                help="Override a configuration key, e.g. --set TireCount=4.",
            )
        )
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)
