"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin loading, the configured key
mapper, and centralized result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

import click

from envoverview.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from envoverview.config.settings import EnvOverviewSettings
    from envoverview.domain.keys import KeyMapper
    from envoverview.plugins.manager import PluginManager
    from envoverview.services.overview import OverviewService
    from envoverview.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  Plugins are discovered
    lazily on first use so ``--help`` and ``--version`` never trigger
    entry-point scanning.
    """

    def __init__(self, settings: EnvOverviewSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from envoverview.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (discovered lazily on first access)."""
        if self._plugins is None:
            from envoverview.plugins.manager import PluginManager

            self._plugins = PluginManager()
            if self.settings.plugins.enabled:
                self._plugins.discover_and_load()
        return self._plugins

    @property
    def key_mapper(self) -> KeyMapper:
        """Plugin-provided mapping, falling back to the ``[keys]`` templates."""
        from envoverview.domain.keys import template_key_mapper

        return self.plugins.key_mapper(template_key_mapper(self.settings.keys.templates()))

    def service(
        self,
        *,
        envs: Sequence[str] = (),
        required_envs: Sequence[str] = (),
        title: str | None = None,
    ) -> OverviewService:
        """Build an OverviewService, letting CLI options override config."""
        from envoverview.services.overview import OverviewService

        base = self.settings.overview
        overrides: dict[str, object] = {}
        if envs:
            overrides["envs"] = list(envs)
        if required_envs:
            overrides["required_envs"] = list(required_envs)
        if title is not None:
            overrides["title"] = title
        config = base.model_copy(update=overrides)
        return OverviewService(config, mapper=self.key_mapper)

    def load_annotations(self, path: Path, *, op: str) -> dict[str, str]:
        """Load annotations from *path*, emitting a failure result on error."""
        from envoverview.infrastructure.entity import EntityLoadError, load_annotations
        from envoverview.services.result import ServiceError, ServiceResult

        try:
            return load_annotations(path)
        except EntityLoadError as exc:
            self.emit(
                ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code="ENTITY_LOAD_FAILED",
                        message=str(exc),
                        detail={"path": str(path)},
                    ),
                )
            )
            raise  # unreachable: emit() exits on failure

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
