"""Key mapping — environment identifier to annotation key names.

The default convention namespaces every key under the environment id::

    prod/host, prod/ip, prod/endpoint, prod/k8s-namespace, prod/k8s-cluster

Any callable ``(env: str) -> EnvironmentKeySet`` can replace it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from envoverview.domain.models import EnvironmentKeySet
from envoverview.domain.types import EnvField

if TYPE_CHECKING:
    from collections.abc import Mapping

KeyMapper = Callable[[str], EnvironmentKeySet]

DEFAULT_KEY_TEMPLATES: dict[str, str] = {
    "host": "{env}/host",
    "ip": "{env}/ip",
    "endpoint": "{env}/endpoint",
    "namespace": "{env}/k8s-namespace",
    "cluster": "{env}/k8s-cluster",
}


def default_map_env_to_keys(env: str) -> EnvironmentKeySet:
    """Map *env* to the default ``<env>/<attribute>`` key names."""
    return EnvironmentKeySet(
        host=f"{env}/host",
        ip=f"{env}/ip",
        endpoint=f"{env}/endpoint",
        namespace=f"{env}/k8s-namespace",
        cluster=f"{env}/k8s-cluster",
    )


def template_key_mapper(templates: Mapping[str, str]) -> KeyMapper:
    """Build a mapper from ``str.format`` templates containing ``{env}``.

    Attributes missing from *templates*, or set to ``""``, are untracked.
    """
    frozen = {f.value: templates.get(f.value, "") for f in EnvField}

    def map_env_to_keys(env: str) -> EnvironmentKeySet:
        return EnvironmentKeySet(
            **{name: (tpl.format(env=env) if tpl else None) for name, tpl in frozen.items()}
        )

    return map_env_to_keys
