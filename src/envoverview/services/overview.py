"""Environment overview — the resolution pipeline and its service wrapper.

:func:`resolve` is the single deterministic entry point of the core:
equal inputs always give equal results, so any caching belongs to the
caller. :class:`OverviewService` adapts it to :class:`ServiceResult`
for the CLI.

Pipeline::

    validate_required ──fail──> verdict, no rows
          │ ok
          v
    per env: mapper -> resolve_values -> classify -> EnvironmentRow
          │
          v
    filter_rows
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from envoverview.config.models import OverviewConfig
from envoverview.domain.filtering import filter_rows
from envoverview.domain.keys import KeyMapper, default_map_env_to_keys
from envoverview.domain.models import EnvironmentRow, OverviewResult, ValidationVerdict
from envoverview.domain.required import validate_required
from envoverview.domain.resolver import resolve_values
from envoverview.domain.status import classify
from envoverview.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def build_row(env: str, mapper: KeyMapper, annotations: Mapping[str, str]) -> EnvironmentRow:
    """Resolve and classify a single environment (unfiltered)."""
    resolved = resolve_values(mapper(env), annotations)
    return EnvironmentRow(env=env, status=classify(resolved), **resolved.model_dump())


def build_rows(
    envs: Sequence[str],
    mapper: KeyMapper,
    annotations: Mapping[str, str],
) -> list[EnvironmentRow]:
    """Resolve every environment in *envs* order, then drop empty rows."""
    return filter_rows(build_row(env, mapper, annotations) for env in envs)


def resolve(
    config: OverviewConfig,
    annotations: Mapping[str, str],
    *,
    mapper: KeyMapper = default_map_env_to_keys,
) -> OverviewResult:
    """Run the full pass: required check first, rows only if it passes."""
    verdict = validate_required(
        config.required_envs,
        mapper,
        annotations,
        separator=config.separator,
    )
    if not verdict.ok:
        return OverviewResult(title=config.title, verdict=verdict)
    return OverviewResult(
        title=config.title,
        verdict=verdict,
        rows=build_rows(config.envs, mapper, annotations),
    )


def row_payload(row: EnvironmentRow) -> dict[str, Any]:
    return row.model_dump(mode="json")


def _missing_required_error(op: str, verdict: ValidationVerdict) -> ServiceResult:
    hint = verdict.annotation_hint
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="MISSING_REQUIRED",
            message=f"Missing annotation: {hint}",
            detail={
                "annotation": hint,
                "missing": [m.model_dump(mode="json") for m in verdict.missing],
            },
        ),
    )


class OverviewService:
    """Environment overview operations over an in-memory annotation map.

    Usage::

        svc = OverviewService(OverviewConfig(required_envs=["prod"]))
        result = svc.overview(load_annotations(path))
    """

    def __init__(
        self,
        config: OverviewConfig | None = None,
        *,
        mapper: KeyMapper = default_map_env_to_keys,
    ) -> None:
        self._config = config or OverviewConfig()
        self._mapper = mapper

    @property
    def config(self) -> OverviewConfig:
        return self._config

    def overview(self, annotations: Mapping[str, str]) -> ServiceResult:
        """Resolve all environments into rows, or fail on a required env."""
        op = "overview"
        result = resolve(self._config, annotations, mapper=self._mapper)
        if not result.ok:
            logger.debug("Required environments unresolved: %s", result.verdict.failed_envs)
            return _missing_required_error(op, result.verdict)

        shown = {row.env for row in result.rows}
        warnings = [
            f"No annotations for environment '{env}'"
            for env in dict.fromkeys(self._config.envs)
            if env not in shown
        ]
        logger.debug(
            "Resolved %d of %d environments", len(result.rows), len(self._config.envs)
        )
        return ServiceResult(
            ok=True,
            op=op,
            warnings=warnings,
            data={
                "title": result.title,
                "rows": [row_payload(row) for row in result.rows],
                "count": len(result.rows),
            },
        )

    def check(self, annotations: Mapping[str, str]) -> ServiceResult:
        """Run only the required-environment check."""
        op = "check"
        verdict = validate_required(
            self._config.required_envs,
            self._mapper,
            annotations,
            separator=self._config.separator,
        )
        if not verdict.ok:
            logger.debug("Required environments unresolved: %s", verdict.failed_envs)
            return _missing_required_error(op, verdict)
        return ServiceResult(
            ok=True,
            op=op,
            data={"required": list(self._config.required_envs), "healthy": True},
        )

    def keys(self, envs: Sequence[str] | None = None) -> ServiceResult:
        """Show the annotation key names each environment maps to."""
        targets = list(envs) if envs else list(self._config.envs)
        items = [
            {"env": env, **self._mapper(env).model_dump(mode="json")} for env in targets
        ]
        return ServiceResult(ok=True, op="keys", data={"items": items, "count": len(items)})
