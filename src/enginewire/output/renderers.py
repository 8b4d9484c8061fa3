"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from enginewire.services.result import ServiceResult

ENGINE_THEME = Theme(
    {
        "ew.ok": "bold green",
        "ew.error": "bold red",
        "ew.op": "bold cyan",
        "ew.key": "dim",
        "ew.value": "bold",
    }
)


def _buffer_console() -> Console:
    # Not a TTY, so Rich emits no ANSI codes.
    return Console(file=StringIO(), theme=ENGINE_THEME, highlight=False, width=120)


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = _buffer_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose)
    else:
        _render_error(result, console, verbose)

    assert isinstance(console.file, StringIO)
    return console.file.getvalue().rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    description = result.data.get("description")
    if isinstance(description, str):
        return description
    return f"OK: {result.op}"


def _render_build(result: ServiceResult, console: Console, verbose: bool) -> None:
    # soft_wrap keeps long token runs on one line
    console.print(Text(result.data["description"]), soft_wrap=True)
    if verbose:
        console.print(
            Text(
                f"tires={result.data['tire_count']} pistons={result.data['piston_count']}",
                style="ew.key",
            )
        )


def _render_config(result: ServiceResult, console: Console, verbose: bool) -> None:
    table = Table(title="Configuration", show_header=True, header_style="bold")
    table.add_column("Key", style="ew.key")
    table.add_column("Value", style="ew.value")
    for key, value in result.data.items():
        table.add_row(key, str(value))
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, verbose: bool) -> None:
    console.print(Text("OK", style="ew.ok"), Text(result.op, style="ew.op"))
    for key, value in result.data.items():
        console.print(Text(f"  {key}: ", style="ew.key") + Text(str(value)))


def _render_error(result: ServiceResult, console: Console, verbose: bool) -> None:
    message = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="ew.error"), Text(result.op, style="ew.op"), Text(message)
    )
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            console.print(Text(f"  {key}: ", style="ew.key") + Text(str(value)))


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console, bool], None]] = {
    "build_engine": _render_build,
    "show_config": _render_config,
}
