"""Entity file loading — annotations from a catalog descriptor.

Accepts YAML (``.yaml``/``.yml``) or JSON. The file may be a full
entity descriptor (annotations under ``metadata.annotations``) or a
bare mapping of annotation keys to values::

    apiVersion: backstage.io/v1alpha1
    kind: Component
    metadata:
      name: payments
      annotations:
        prod/host: payments.example.com
        prod/k8s-namespace: payments

Multi-document YAML is supported: the first document that carries
annotations wins.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

logger = logging.getLogger(__name__)

_JSON_SUFFIXES = frozenset({".json"})


class EntityLoadError(ValueError):
    """Raised when an entity file cannot be read or has the wrong shape."""


def _read_documents(path: Path) -> list[Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        msg = f"Cannot read entity file {path}: {exc}"
        raise EntityLoadError(msg) from exc

    if path.suffix.lower() in _JSON_SUFFIXES:
        try:
            return [json.loads(text)]
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in {path}: {exc}"
            raise EntityLoadError(msg) from exc

    try:
        return [doc for doc in YAML(typ="safe").load_all(text) if doc is not None]
    except YAMLError as exc:
        msg = f"Invalid YAML in {path}: {exc}"
        raise EntityLoadError(msg) from exc


def _annotations_section(doc: Mapping[str, Any]) -> Any:
    """Return ``metadata.annotations`` for an entity, or *doc* itself if bare."""
    if "metadata" not in doc and "kind" not in doc and "apiVersion" not in doc:
        return doc
    metadata = doc.get("metadata") or {}
    if not isinstance(metadata, Mapping):
        return {}
    return metadata.get("annotations") or {}


def normalize_annotations(section: Any, *, source: str = "<memory>") -> dict[str, str]:
    """Coerce an annotations section into a flat ``str -> str`` map.

    Null values are dropped; other scalars are stringified. Nested
    mappings or lists are rejected because annotations are flat.
    """
    if not isinstance(section, Mapping):
        msg = f"Annotations in {source} must be a mapping, got {type(section).__name__}"
        raise EntityLoadError(msg)

    annotations: dict[str, str] = {}
    for key, value in section.items():
        if value is None:
            continue
        if isinstance(value, (Mapping, list)):
            msg = f"Annotation {key!r} in {source} is not a scalar value"
            raise EntityLoadError(msg)
        if isinstance(value, bool):
            annotations[str(key)] = "true" if value else "false"
        else:
            annotations[str(key)] = str(value)
    return annotations


def load_annotations(path: Path) -> dict[str, str]:
    """Load the annotation map from the entity file at *path*."""
    documents = _read_documents(path)
    if not documents:
        logger.debug("Entity file %s is empty", path)
        return {}

    mappings = [doc for doc in documents if isinstance(doc, Mapping)]
    if not mappings:
        msg = f"Entity file {path} does not contain a mapping"
        raise EntityLoadError(msg)

    chosen = mappings[0]
    for doc in mappings:
        section = _annotations_section(doc)
        if section:
            chosen = doc
            break

    annotations = normalize_annotations(_annotations_section(chosen), source=str(path))
    logger.debug("Loaded %d annotations from %s", len(annotations), path)
    return annotations
