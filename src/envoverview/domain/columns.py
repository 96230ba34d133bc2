"""Typed column descriptors for presenting environment rows.

Each column is a pure function from an :class:`EnvironmentRow` to a
:class:`Cell` tagged with a semantic role. Renderers own the widget
choice for each role (Rich styles in the terminal, JSON as data).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from envoverview.domain.models import EnvironmentRow
from envoverview.domain.presence import presence
from envoverview.domain.types import BadgeTone, ColumnRole, EnvField, EnvStatus

PLACEHOLDER = "—"


@dataclass(frozen=True)
class Cell:
    """Display value for one row/column intersection."""

    text: str
    role: ColumnRole
    tone: BadgeTone | None = None
    target: str | None = None


@dataclass(frozen=True)
class Column:
    """A fixed column: header, source field, role, and render function."""

    title: str
    field: str
    role: ColumnRole
    render: Callable[[EnvironmentRow], Cell]


def tone_for(value: str | None) -> BadgeTone:
    return BadgeTone.PRIMARY if presence(value) else BadgeTone.DEFAULT


def _env_cell(row: EnvironmentRow) -> Cell:
    return Cell(text=row.env, role=ColumnRole.TEXT)


def _badge(field: EnvField) -> Callable[[EnvironmentRow], Cell]:
    def render(row: EnvironmentRow) -> Cell:
        value = row.value_for(field)
        text = value if value and presence(value) else PLACEHOLDER
        return Cell(text=text, role=ColumnRole.BADGE, tone=tone_for(value))

    return render


def _endpoint_cell(row: EnvironmentRow) -> Cell:
    if row.endpoint and presence(row.endpoint):
        return Cell(text=row.endpoint, role=ColumnRole.LINK, target=row.endpoint)
    # No link without a target; the placeholder is plain text.
    return Cell(text=PLACEHOLDER, role=ColumnRole.TEXT)


def _status_cell(row: EnvironmentRow) -> Cell:
    if row.status is EnvStatus.ACTIVE:
        return Cell(text="Active", role=ColumnRole.BADGE, tone=BadgeTone.PRIMARY)
    return Cell(text="Missing", role=ColumnRole.BADGE, tone=BadgeTone.DEFAULT)


COLUMNS: tuple[Column, ...] = (
    Column("Environment", "env", ColumnRole.TEXT, _env_cell),
    Column("Host", "host", ColumnRole.BADGE, _badge(EnvField.HOST)),
    Column("IP", "ip", ColumnRole.BADGE, _badge(EnvField.IP)),
    Column("Endpoint", "endpoint", ColumnRole.LINK, _endpoint_cell),
    Column("Namespace", "namespace", ColumnRole.BADGE, _badge(EnvField.NAMESPACE)),
    Column("Cluster", "cluster", ColumnRole.BADGE, _badge(EnvField.CLUSTER)),
    Column("Status", "status", ColumnRole.BADGE, _status_cell),
)


def render_row(row: EnvironmentRow) -> list[Cell]:
    """Apply every column to *row*, in column order."""
    return [column.render(row) for column in COLUMNS]
