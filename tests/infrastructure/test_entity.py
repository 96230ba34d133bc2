"""Tests for entity file loading."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from envoverview.infrastructure.entity import (
    EntityLoadError,
    load_annotations,
    normalize_annotations,
)


class TestLoadAnnotations:
    def test_catalog_entity(self, entity_file: Path) -> None:
        annotations = load_annotations(entity_file)
        assert annotations["dev/host"] == "dev.payments.example.com"
        assert annotations["dev/ip"] == "10.0.0.12"
        assert annotations["prod/endpoint"] == "https://payments.example.com"
        assert "spec" not in annotations

    def test_bare_mapping(self, write_entity: Callable[..., Path]) -> None:
        path = write_entity("dev/host: dev.example.com\n", name="annotations.yaml")
        assert load_annotations(path) == {"dev/host": "dev.example.com"}

    def test_json_entity(self, write_entity: Callable[..., Path]) -> None:
        payload = {"kind": "Component", "metadata": {"annotations": {"prod/host": "p"}}}
        path = write_entity(json.dumps(payload), name="entity.json")
        assert load_annotations(path) == {"prod/host": "p"}

    def test_entity_without_annotations(self, write_entity: Callable[..., Path]) -> None:
        path = write_entity("kind: Component\nmetadata:\n  name: x\n")
        assert load_annotations(path) == {}

    def test_empty_file(self, write_entity: Callable[..., Path]) -> None:
        assert load_annotations(write_entity("")) == {}

    def test_multi_document_picks_annotated(self, write_entity: Callable[..., Path]) -> None:
        content = (
            "kind: Group\nmetadata:\n  name: team-a\n"
            "---\n"
            "kind: Component\nmetadata:\n  annotations:\n    prod/host: p\n"
        )
        assert load_annotations(write_entity(content)) == {"prod/host": "p"}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(EntityLoadError, match="Cannot read"):
            load_annotations(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, write_entity: Callable[..., Path]) -> None:
        with pytest.raises(EntityLoadError, match="Invalid YAML"):
            load_annotations(write_entity("metadata: [unclosed\n"))

    def test_invalid_json(self, write_entity: Callable[..., Path]) -> None:
        with pytest.raises(EntityLoadError, match="Invalid JSON"):
            load_annotations(write_entity("{", name="bad.json"))

    def test_non_mapping_document(self, write_entity: Callable[..., Path]) -> None:
        with pytest.raises(EntityLoadError, match="does not contain a mapping"):
            load_annotations(write_entity("- a\n- b\n"))


class TestNormalizeAnnotations:
    def test_scalars_stringified(self) -> None:
        assert normalize_annotations({"a": 1, "b": True, "c": None, "d": "x"}) == {
            "a": "1",
            "b": "true",
            "d": "x",
        }

    def test_nested_value_rejected(self) -> None:
        with pytest.raises(EntityLoadError, match="not a scalar"):
            normalize_annotations({"a": {"b": "c"}})

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(EntityLoadError, match="must be a mapping"):
            normalize_annotations(["a"])
