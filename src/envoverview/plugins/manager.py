"""Plugin discovery, loading, and the plugin-aware key mapper."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from envoverview.domain.keys import default_map_env_to_keys
from envoverview.domain.models import EnvironmentKeySet
from envoverview.plugins.hookspecs import PROJECT_NAME, EnvOverviewHookSpec

if TYPE_CHECKING:
    from envoverview.domain.keys import KeyMapper

ENTRY_POINT_GROUP = "envoverview.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(EnvOverviewHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Discover plugins from the ``envoverview.plugins`` entry point group.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def key_mapper(self, fallback: KeyMapper = default_map_env_to_keys) -> KeyMapper:
        """Return a mapper that asks plugins first, then *fallback*.

        INVARIANT: a plugin that raises or returns the wrong type is logged
        and skipped; the fallback answers instead.
        """
        hook = self._pm.hook

        def map_env_to_keys(env: str) -> EnvironmentKeySet:
            try:
                answer = hook.map_env_to_keys(env=env)
            except Exception:
                logger.warning("Key mapping plugin failed for %s", env, exc_info=True)
                return fallback(env)
            if answer is None:
                return fallback(env)
            if not isinstance(answer, EnvironmentKeySet):
                logger.warning(
                    "Key mapping plugin returned %s for %s; using fallback",
                    type(answer).__name__,
                    env,
                )
                return fallback(env)
            return answer

        return map_env_to_keys

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("envoverview")`` sets an
        ``envoverview_impl`` attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "envoverview_impl", None):
                return True
        return False
