"""Command: verify required environments are resolvable."""

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
  envoverview check catalog-info.yaml --require prod
  envoverview check catalog-info.yaml --require staging --require prod
  envoverview --json check catalog-info.yaml --require prod""",
)
@click.argument("entity_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--require",
    "required_envs",
    multiple=True,
    help="Environment that must resolve host or endpoint (repeatable).",
)
@click.pass_obj
def check(app: AppContext, entity_file: Path, required_envs: tuple[str, ...]) -> None:
    """Check that every required environment has a host or endpoint."""
    annotations = app.load_annotations(entity_file, op="check")
    app.emit(app.service(required_envs=required_envs).check(annotations))
