"""Tests for classification enums."""

from envoverview.domain.types import BadgeTone, ColumnRole, EnvField, EnvStatus


class TestEnvStatus:
    def test_values(self) -> None:
        assert EnvStatus.ACTIVE == "active"
        assert EnvStatus.MISSING == "missing"

    def test_string_round_trip(self) -> None:
        assert EnvStatus("active") is EnvStatus.ACTIVE


class TestEnvField:
    def test_column_order(self) -> None:
        assert [f.value for f in EnvField] == ["host", "ip", "endpoint", "namespace", "cluster"]


class TestRolesAndTones:
    def test_roles(self) -> None:
        assert {r.value for r in ColumnRole} == {"text", "badge", "link"}

    def test_tones(self) -> None:
        assert {t.value for t in BadgeTone} == {"primary", "default"}
