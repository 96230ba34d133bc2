"""envoverview — per-environment deployment metadata from entity annotations."""

from __future__ import annotations

__version__ = "0.1.0"

from envoverview.config.models import OverviewConfig  # noqa: E402
from envoverview.domain.keys import default_map_env_to_keys  # noqa: E402
from envoverview.services.overview import resolve  # noqa: E402

__all__ = ["OverviewConfig", "__version__", "default_map_env_to_keys", "resolve"]
