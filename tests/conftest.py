"""Shared pytest fixtures for enginewire tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

ENGINE_RAW = {"TireCount": "4", "PistonCount": "6"}
ENGINE_DESCRIPTION = "Pistons: ||||||\nTires: ()()()()"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip ENGINEWIRE_* variables so the host environment never leaks in."""
    for name in list(os.environ):
        if name.upper().startswith("ENGINEWIRE_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("enginewire")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory; config discovery starts here."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_config(directory: Path, body: str) -> Path:
    """Write an ``enginewire.toml`` into *directory* and return its path."""
    path = directory / "enginewire.toml"
    path.write_text(body, encoding="utf-8")
    return path
