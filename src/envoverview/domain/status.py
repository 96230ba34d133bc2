"""Readiness classification.

Host and endpoint are proof of reachability. IP, namespace, and cluster
are deployment metadata that can be known while an environment is down,
so they never influence status.
"""

from __future__ import annotations

from envoverview.domain.models import ResolvedValues
from envoverview.domain.presence import presence
from envoverview.domain.types import EnvStatus


def is_reachable(host: str | None, endpoint: str | None) -> bool:
    return presence(host) or presence(endpoint)


def classify(resolved: ResolvedValues) -> EnvStatus:
    """ACTIVE iff host or endpoint resolved, otherwise MISSING."""
    if is_reachable(resolved.host, resolved.endpoint):
        return EnvStatus.ACTIVE
    return EnvStatus.MISSING
