"""Classification enums for environment rows and their columns."""

from __future__ import annotations

from enum import StrEnum


class EnvStatus(StrEnum):
    """Readiness of an environment, derived from host/endpoint presence."""

    ACTIVE = "active"
    MISSING = "missing"


class EnvField(StrEnum):
    """Tracked per-environment attributes, in column order."""

    HOST = "host"
    IP = "ip"
    ENDPOINT = "endpoint"
    NAMESPACE = "namespace"
    CLUSTER = "cluster"


class ColumnRole(StrEnum):
    """Semantic role of a column; the renderer decides the widget."""

    TEXT = "text"
    BADGE = "badge"
    LINK = "link"


class BadgeTone(StrEnum):
    """Emphasis for badge cells."""

    PRIMARY = "primary"
    DEFAULT = "default"
