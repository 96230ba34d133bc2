"""Command: show the annotation keys each environment maps to."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envoverview.commands._base import EnvCommand

if TYPE_CHECKING:
    from envoverview.commands._context import AppContext


@click.command(
    cls=EnvCommand,
    examples="""\
  envoverview keys
  envoverview keys prod
  envoverview --json keys dev staging""",
)
@click.argument("envs", nargs=-1)
@click.pass_obj
def keys(app: AppContext, envs: tuple[str, ...]) -> None:
    """List annotation key names for ENVS (default: configured envs)."""
    app.emit(app.service().keys(envs))
