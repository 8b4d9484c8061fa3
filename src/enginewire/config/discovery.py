"""Locate and load ``enginewire.toml``.

Lookup order: an explicit ``--config`` path, then the ENGINEWIRE_CONFIG
env var, then a walk up from the working directory (like git and .git/).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from enginewire.config.models import FileConfig

CONFIG_FILENAME = "enginewire.toml"
CONFIG_ENV_VAR = "ENGINEWIRE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest enginewire.toml at or above *start*, or None.

    A set ENGINEWIRE_CONFIG wins; if it names a missing file, nothing is found.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(config_path: str | None, start: Path | None = None) -> Path | None:
    """Resolve ``--config`` if given (None when the file is missing), else discover."""
    if config_path:
        p = Path(config_path)
        return p if p.is_file() else None
    return find_config(start)


def load_config(path: Path | None = None, cwd: Path | None = None) -> FileConfig:
    """Read *path* (or the discovered file) into a :class:`FileConfig`.

    Missing file means defaults.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return FileConfig()
    with path.open("rb") as fh:
        return FileConfig.model_validate(tomllib.load(fh))
