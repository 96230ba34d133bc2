"""Value models for a single resolution pass.

All models are frozen: a pass builds them fresh from the annotation map
and configuration, and nothing outlives it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from envoverview.domain.types import EnvField, EnvStatus


class EnvironmentKeySet(BaseModel):
    """Annotation key *names* to consult for one environment.

    A field left as None (or empty) is not tracked and is never looked up.
    """

    model_config = {"frozen": True}

    host: str | None = None
    ip: str | None = None
    endpoint: str | None = None
    namespace: str | None = None
    cluster: str | None = None

    def key_for(self, field: EnvField) -> str | None:
        """Return the configured key name for *field*, or None if untracked."""
        key: str | None = getattr(self, field.value)
        return key or None


class ResolvedValues(BaseModel):
    """Values found in the annotation map; None means absent."""

    model_config = {"frozen": True}

    host: str | None = None
    ip: str | None = None
    endpoint: str | None = None
    namespace: str | None = None
    cluster: str | None = None

    def value_for(self, field: EnvField) -> str | None:
        value: str | None = getattr(self, field.value)
        return value


class EnvironmentRow(BaseModel):
    """Resolved output for one environment.

    INVARIANT: ``status`` is ACTIVE iff host or endpoint is present.
    """

    model_config = {"frozen": True}

    env: str
    host: str | None = None
    ip: str | None = None
    endpoint: str | None = None
    namespace: str | None = None
    cluster: str | None = None
    status: EnvStatus

    def value_for(self, field: EnvField) -> str | None:
        value: str | None = getattr(self, field.value)
        return value


class MissingRequirement(BaseModel):
    """A required environment with neither host nor endpoint resolved.

    Attributes:
        env: The environment identifier.
        alternatives: Configured host/endpoint key names, either of which
            would have satisfied the requirement.
        display: ``alternatives`` joined with the configured separator.
    """

    model_config = {"frozen": True}

    env: str
    alternatives: list[str] = Field(default_factory=list)
    display: str = ""


class ValidationVerdict(BaseModel):
    """Outcome of the required-environment check. Empty means ok."""

    model_config = {"frozen": True}

    missing: list[MissingRequirement] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing

    @property
    def failed_envs(self) -> list[str]:
        return [m.env for m in self.missing]

    @property
    def annotation_hint(self) -> str:
        """Every failed environment's alternatives as one comma-joined string."""
        return ", ".join(m.display for m in self.missing)


class OverviewResult(BaseModel):
    """Result of a full resolution pass.

    ``rows`` is empty whenever the verdict failed; callers branch on ``ok``.
    """

    model_config = {"frozen": True}

    title: str
    verdict: ValidationVerdict = Field(default_factory=ValidationVerdict)
    rows: list[EnvironmentRow] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.verdict.ok
