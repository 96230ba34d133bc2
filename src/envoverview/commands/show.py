"""Command: render the environment overview for an entity file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from envoverview.commands._base import EnvCommand

if TYPE_CHECKING:
    from envoverview.commands._context import AppContext


@click.command(
    cls=EnvCommand,
    examples="""\
  envoverview show catalog-info.yaml
  envoverview show catalog-info.yaml --env dev --env prod
  envoverview show catalog-info.yaml --require prod
  envoverview --json show catalog-info.yaml
  envoverview -q show catalog-info.yaml""",
)
@click.argument("entity_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--env", "envs", multiple=True, help="Environment to show (repeatable).")
@click.option(
    "--require",
    "required_envs",
    multiple=True,
    help="Environment that must resolve host or endpoint (repeatable).",
)
@click.option("--title", default=None, help="Table title.")
@click.pass_obj
def show(
    app: AppContext,
    entity_file: Path,
    envs: tuple[str, ...],
    required_envs: tuple[str, ...],
    title: str | None,
) -> None:
    """Show host, IP, endpoint, namespace, and cluster per environment."""
    annotations = app.load_annotations(entity_file, op="overview")
    svc = app.service(envs=envs, required_envs=required_envs, title=title)
    app.emit(svc.overview(annotations))
