"""Tests for the resolution pipeline and OverviewService."""

from __future__ import annotations

from envoverview.config.models import OverviewConfig
from envoverview.domain.models import EnvironmentKeySet
from envoverview.domain.types import EnvStatus
from envoverview.services.overview import OverviewService, build_row, resolve


class TestResolve:
    def test_defaults(self) -> None:
        config = OverviewConfig()
        assert config.envs == ["dev", "staging", "prod"]
        assert config.required_envs == []
        assert config.title == "Deploy Environments"

    def test_single_host_scenario(self) -> None:
        result = resolve(
            OverviewConfig(envs=["dev", "staging"]),
            {"dev/host": "dev.example.com"},
        )
        assert result.ok is True
        assert len(result.rows) == 1
        row = result.rows[0]
        assert row.env == "dev"
        assert row.host == "dev.example.com"
        assert row.status is EnvStatus.ACTIVE
        assert row.ip is None
        assert row.endpoint is None
        assert row.namespace is None
        assert row.cluster is None

    def test_required_failure_produces_no_rows(self) -> None:
        result = resolve(OverviewConfig(required_envs=["prod"]), {"dev/host": "h"})
        assert result.ok is False
        assert result.rows == []
        assert result.verdict.failed_envs == ["prod"]
        assert result.verdict.annotation_hint == "prod/host หรือ prod/endpoint"

    def test_namespace_only_row_survives_as_missing(self) -> None:
        result = resolve(OverviewConfig(envs=["dev"]), {"dev/k8s-namespace": "team-a"})
        assert len(result.rows) == 1
        assert result.rows[0].namespace == "team-a"
        assert result.rows[0].status is EnvStatus.MISSING

    def test_row_order_matches_envs(self) -> None:
        annotations = {"prod/host": "p", "dev/host": "d", "staging/ip": "1.2.3.4"}
        result = resolve(OverviewConfig(envs=["prod", "staging", "dev"]), annotations)
        assert [r.env for r in result.rows] == ["prod", "staging", "dev"]

    def test_referentially_transparent(self) -> None:
        config = OverviewConfig(required_envs=["dev"])
        annotations = {"dev/endpoint": "https://dev"}
        assert resolve(config, annotations) == resolve(config, annotations)

    def test_title_passthrough(self) -> None:
        result = resolve(OverviewConfig(title="Payments"), {})
        assert result.title == "Payments"

    def test_custom_mapper(self) -> None:
        def mapper(env: str) -> EnvironmentKeySet:
            return EnvironmentKeySet(host=f"acme.io/{env}.host")

        result = resolve(OverviewConfig(envs=["dev"]), {"acme.io/dev.host": "h"}, mapper=mapper)
        assert result.rows[0].host == "h"


class TestBuildRow:
    def test_unfiltered_empty_row(self) -> None:
        from envoverview.domain.keys import default_map_env_to_keys

        row = build_row("qa", default_map_env_to_keys, {})
        assert row.env == "qa"
        assert row.status is EnvStatus.MISSING


class TestOverviewService:
    def test_overview_success(self) -> None:
        svc = OverviewService(OverviewConfig(envs=["dev", "prod"]))
        result = svc.overview({"dev/host": "h", "prod/endpoint": "https://p"})
        assert result.ok is True
        assert result.op == "overview"
        assert result.data["count"] == 2
        assert result.data["title"] == "Deploy Environments"
        assert result.data["rows"][0]["status"] == "active"
        assert result.data["rows"][1]["endpoint"] == "https://p"
        assert result.warnings == []

    def test_overview_warns_for_dropped_envs(self) -> None:
        svc = OverviewService(OverviewConfig(envs=["dev", "staging", "prod", "staging"]))
        result = svc.overview({"prod/host": "h"})
        assert result.ok is True
        assert result.data["count"] == 1
        assert result.warnings == [
            "No annotations for environment 'dev'",
            "No annotations for environment 'staging'",
        ]

    def test_overview_missing_required(self) -> None:
        svc = OverviewService(OverviewConfig(required_envs=["prod"]))
        result = svc.overview({})
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "MISSING_REQUIRED"
        assert result.error.detail["annotation"] == "prod/host หรือ prod/endpoint"
        assert result.error.detail["missing"][0]["env"] == "prod"
        assert result.data == {}

    def test_check_ok(self) -> None:
        svc = OverviewService(OverviewConfig(required_envs=["prod"]))
        result = svc.check({"prod/host": "h"})
        assert result.ok is True
        assert result.data == {"required": ["prod"], "healthy": True}

    def test_check_vacuous(self) -> None:
        assert OverviewService().check({}).ok is True

    def test_check_failure(self) -> None:
        result = OverviewService(OverviewConfig(required_envs=["staging"])).check({})
        assert result.ok is False
        assert result.op == "check"

    def test_keys_defaults_to_configured_envs(self) -> None:
        result = OverviewService().keys()
        assert [item["env"] for item in result.data["items"]] == ["dev", "staging", "prod"]
        assert result.data["items"][2]["cluster"] == "prod/k8s-cluster"

    def test_keys_explicit(self) -> None:
        result = OverviewService().keys(["qa"])
        assert result.data["items"] == [
            {
                "env": "qa",
                "host": "qa/host",
                "ip": "qa/ip",
                "endpoint": "qa/endpoint",
                "namespace": "qa/k8s-namespace",
                "cluster": "qa/k8s-cluster",
            }
        ]
