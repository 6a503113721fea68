"""Locate hms.toml.

Search order: the ``HMS_CONFIG`` env var, then a walk up from the start
directory to the filesystem root (the way git finds ``.git/``).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "hms.toml"
CONFIG_ENV_VAR = "HMS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest hms.toml at or above *start* (default: cwd), or None.

    A set ``HMS_CONFIG`` wins over the walk-up, even when it points at a
    missing file (in which case no config is used).
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
