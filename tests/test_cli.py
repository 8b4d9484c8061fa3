"""Tests for the root enginewire CLI."""

import pytest
from click.testing import CliRunner

from enginewire import __version__
from enginewire.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "enginewire" in result.output
    assert "build" in result.output
    assert "config" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/missing-enginewire.toml", "--version"])
    assert result.exit_code == 0


@pytest.mark.usefixtures("workdir")
def test_verbose_logs_composition(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(
        cli, ["-v", "--log-json", "build", "--set", "TireCount=1", "--set", "PistonCount=1"]
    )
    assert result.exit_code == 0
    assert "Pistons: |\nTires: ()" in result.output
