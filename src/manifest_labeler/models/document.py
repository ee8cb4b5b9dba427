"""Typed view over decoded YAML documents."""

from __future__ import annotations

import enum
from typing import Any


class NodeType(enum.Enum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    NULL = "null"


def node_type(value: Any) -> NodeType:
    """Classify a decoded YAML value."""
    if value is None:
        return NodeType.NULL
    if isinstance(value, dict):
        return NodeType.MAPPING
    if isinstance(value, list):
        return NodeType.SEQUENCE
    return NodeType.SCALAR


def as_mapping(value: Any) -> dict | None:
    return value if node_type(value) is NodeType.MAPPING else None


def as_sequence(value: Any) -> list | None:
    return value if node_type(value) is NodeType.SEQUENCE else None


def get_mapping(mapping: dict, key: str) -> dict | None:
    """Return the mapping stored at ``key``, or None if absent or not a mapping."""
    return as_mapping(mapping.get(key))


def get_str(mapping: dict, key: str) -> str | None:
    value = mapping.get(key)
    return value if isinstance(value, str) else None


def copy_mapping(mapping: dict, key: str) -> dict:
    """Return a shallow copy of the mapping at ``key``.

    A missing or mistyped value (``metadata: null``, ``labels: "oops"``)
    yields a fresh empty mapping rather than raising.
    """
    return dict(get_mapping(mapping, key) or {})


def has_kind(value: Any) -> bool:
    m = as_mapping(value)
    return m is not None and "kind" in m


def resource_kind(value: Any) -> str | None:
    """Return the ``kind`` of a mapping node as a string, or None if undeclared."""
    m = as_mapping(value)
    if m is None or "kind" not in m:
        return None
    kind = m["kind"]
    return kind if isinstance(kind, str) else str(kind)


def is_list_kind(kind: str | None) -> bool:
    return kind is not None and kind.lower() == "list"


def is_resource(value: Any) -> bool:
    """True for mappings that declare a ``kind`` other than ``List``."""
    return has_kind(value) and not is_list_kind(resource_kind(value))
