"""Locate envoverview.toml.

The file is searched from the working directory upwards, the way a service
repository keeps one config at its root next to catalog-info.yaml.
ENVOVERVIEW_CONFIG names a file directly; --config bypasses discovery.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "envoverview.toml"
CONFIG_ENV_VAR = "ENVOVERVIEW_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest envoverview.toml at or above *start* (default: cwd).

    A set ENVOVERVIEW_CONFIG wins outright; if it names no file, nothing is
    loaded rather than falling back to discovery.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
