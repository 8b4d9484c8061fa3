"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Holds the CLI-level flags and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import click

from enginewire.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from enginewire.config.settings import EngineSettings
    from enginewire.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Settings are resolved lazily so that per-command ``--set`` overrides
    take part in the normal source priority chain.
    """

    def __init__(self, *, config_path: str | None = None, **flags: Any) -> None:
        self.config_path = config_path
        self.flags = flags
        self._settings: EngineSettings | None = None

        from enginewire.config.logging import configure_logging

        configure_logging(
            verbose=bool(flags.get("verbose")), log_json=bool(flags.get("log_json"))
        )

    def settings(self, overrides: Mapping[str, str] | None = None) -> EngineSettings:
        """Resolve settings once, applying *overrides* on top of every source."""
        if self._settings is None:
            from enginewire.config.settings import EngineSettings

            self._settings = EngineSettings.from_cli(
                config_path=self.config_path,
                overrides=overrides,
                # unset flags must not mask ENGINEWIRE_* env vars
                **{name: value for name, value in self.flags.items() if value},
            )
        return self._settings

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self._output_settings()
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def _output_settings(self) -> OutputSettings:
        if self._settings is not None:
            s = self._settings
            return OutputSettings(json_output=s.json_output, quiet=s.quiet, verbose=s.verbose)
        return OutputSettings(
            json_output=bool(self.flags.get("json_output")),
            quiet=bool(self.flags.get("quiet")),
            verbose=bool(self.flags.get("verbose")),
        )
