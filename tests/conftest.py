"""Shared pytest fixtures and test helpers for envoverview tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

ENTITY_YAML = """\
apiVersion: backstage.io/v1alpha1
kind: Component
metadata:
  name: payments
  annotations:
    dev/host: dev.payments.example.com
    dev/ip: 10.0.0.12
    staging/k8s-namespace: payments-staging
    prod/endpoint: https://payments.example.com
    prod/k8s-cluster: prod-eu-1
spec:
  type: service
  owner: team-a
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp dir so no stray envoverview.toml is discovered."""
    monkeypatch.delenv("ENVOVERVIEW_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_entity(tmp_path: Path) -> Callable[..., Path]:
    """Write an entity file into tmp_path and return its path."""

    def _write(content: str = ENTITY_YAML, name: str = "catalog-info.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def entity_file(write_entity: Callable[..., Path]) -> Path:
    """The sample payments entity on disk."""
    return write_entity()
