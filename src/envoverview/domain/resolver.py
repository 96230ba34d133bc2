"""Annotation lookup for a single environment's key set."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from envoverview.domain.models import EnvironmentKeySet, ResolvedValues
from envoverview.domain.presence import presence
from envoverview.domain.types import EnvField


def lookup(annotations: Mapping[str, str], key: str | None) -> str | None:
    """Return the annotation under *key*, or None if untracked, unset, or blank."""
    if not key:
        return None
    value = annotations.get(key)
    return value if presence(value) else None


def resolve_values(
    keys: EnvironmentKeySet,
    annotations: Mapping[str, str],
    *,
    fields: Iterable[EnvField] = tuple(EnvField),
) -> ResolvedValues:
    """Resolve each tracked field of *keys* against *annotations*.

    Absence is a normal outcome: missing keys never raise. Only *fields*
    are looked up; the rest stay None.
    """
    return ResolvedValues(
        **{field.value: lookup(annotations, keys.key_for(field)) for field in fields}
    )
