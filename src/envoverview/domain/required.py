"""Required-environment validation.

A required environment must resolve host or endpoint. The check is
opt-in: an empty required list always passes. A failed verdict is
terminal for the resolution pass, which then produces no rows.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from envoverview.domain.keys import KeyMapper
from envoverview.domain.models import MissingRequirement, ValidationVerdict
from envoverview.domain.resolver import resolve_values
from envoverview.domain.status import is_reachable
from envoverview.domain.types import EnvField

# Thai "or"; the join the missing-annotation placeholder has always shown.
DEFAULT_SEPARATOR = " หรือ "

_GATE_FIELDS = (EnvField.HOST, EnvField.ENDPOINT)


def validate_required(
    required_envs: Sequence[str],
    mapper: KeyMapper,
    annotations: Mapping[str, str],
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> ValidationVerdict:
    """Check every required environment for a resolvable host or endpoint.

    Returns a verdict listing failed environments in *required_envs*
    order, each with the key names that would have satisfied it.
    """
    missing: list[MissingRequirement] = []
    for env in required_envs:
        keys = mapper(env)
        resolved = resolve_values(keys, annotations, fields=_GATE_FIELDS)
        if is_reachable(resolved.host, resolved.endpoint):
            continue
        alternatives = [k for k in (keys.key_for(f) for f in _GATE_FIELDS) if k]
        missing.append(
            MissingRequirement(
                env=env,
                alternatives=alternatives,
                display=separator.join(alternatives),
            )
        )
    return ValidationVerdict(missing=missing)
