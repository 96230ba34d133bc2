"""Pluggy hook specifications for envoverview.

One setup-free hook lets an installed plugin own the key-mapping
convention, replacing the ``[keys]`` templates for every environment it
answers for.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from envoverview.domain.models import EnvironmentKeySet

PROJECT_NAME = "envoverview"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class EnvOverviewHookSpec:
    """Hook specifications for the envoverview plugin system."""

    @hookspec(firstresult=True)
    def map_env_to_keys(self, env: str) -> EnvironmentKeySet | None:
        """Return the annotation key set for *env*, or None to defer.

        The first non-None answer wins. Must be deterministic for a
        given *env*.
        """
