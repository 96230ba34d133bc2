"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, envoverview.toml only contains
overrides. An empty file gives the dev/staging/prod overview with the
``<env>/<attribute>`` key convention.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from envoverview.domain.keys import DEFAULT_KEY_TEMPLATES
from envoverview.domain.required import DEFAULT_SEPARATOR

DEFAULT_ENVS: tuple[str, ...] = ("dev", "staging", "prod")
DEFAULT_TITLE = "Deploy Environments"

# --- envoverview.toml sections ---


class OverviewConfig(BaseModel):
    """[overview] section — inputs of a resolution pass besides annotations.

    ``title`` is passed through untouched for the presentation layer.
    """

    model_config = {"frozen": True}

    envs: list[str] = Field(default_factory=lambda: list(DEFAULT_ENVS))
    required_envs: list[str] = Field(default_factory=list)
    title: str = DEFAULT_TITLE
    separator: str = DEFAULT_SEPARATOR


class KeysConfig(BaseModel):
    """[keys] section — ``{env}`` templates; ``""`` untracks an attribute."""

    model_config = {"frozen": True}

    host: str = DEFAULT_KEY_TEMPLATES["host"]
    ip: str = DEFAULT_KEY_TEMPLATES["ip"]
    endpoint: str = DEFAULT_KEY_TEMPLATES["endpoint"]
    namespace: str = DEFAULT_KEY_TEMPLATES["namespace"]
    cluster: str = DEFAULT_KEY_TEMPLATES["cluster"]

    @field_validator("host", "ip", "endpoint", "namespace", "cluster")
    @classmethod
    def validate_template(cls, value: str) -> str:
        """Reject templates that ``str.format(env=...)`` cannot render."""
        if value:
            try:
                value.format(env="x")
            except (AttributeError, KeyError, IndexError, ValueError) as exc:
                msg = f"key template {value!r} must only use the {{env}} placeholder ({exc!r})"
                raise ValueError(msg) from exc
        return value

    def templates(self) -> dict[str, str]:
        return self.model_dump()


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
