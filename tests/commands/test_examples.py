"""Tests for the --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from enginewire.cli import cli

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["build", "--examples"], ["enginewire build --set TireCount=4", "--json build"]),
    (["config", "--examples"], ["enginewire config", "ConnectionString="]),
]


@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output


def test_help_stays_short(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["build", "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.output
    assert "enginewire build --set" not in result.output
