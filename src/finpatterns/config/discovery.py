"""Locate and load ``finpatterns.toml``.

Lookup order: the FINPATTERNS_CONFIG env var, then a walk up the
directory tree from the starting point to the filesystem root.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from finpatterns.config.models import FinConfig

CONFIG_FILENAME = "finpatterns.toml"
CONFIG_ENV_VAR = "FINPATTERNS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest finpatterns.toml at or above *start*, or None.

    An env var pointing at a missing file disables discovery entirely.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse the TOML at *path* into a plain mapping.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    return tomllib.loads(path.read_text(encoding="utf-8"))


def load_config(path: Path | None = None, cwd: Path | None = None) -> FinConfig:
    """Parse *path* (or the discovered file) into a validated FinConfig.

    Falls back to code defaults when no file exists.
    """
    resolved = path if path is not None else find_config(cwd)
    if resolved is None:
        return FinConfig()
    return FinConfig.model_validate(read_config_file(resolved))
