"""Row filtering — drop environments that carry no information at all.

This is independent of status: a MISSING row that still has, say, a
namespace survives.
"""

from __future__ import annotations

from collections.abc import Iterable

from envoverview.domain.models import EnvironmentRow
from envoverview.domain.presence import presence
from envoverview.domain.types import EnvField


def has_information(row: EnvironmentRow) -> bool:
    return any(presence(row.value_for(field)) for field in EnvField)


def filter_rows(rows: Iterable[EnvironmentRow]) -> list[EnvironmentRow]:
    """Return rows with at least one present field, preserving order."""
    return [row for row in rows if has_information(row)]
