"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _default_indent() -> int:
    indent = _env_int("MANIFEST_LABELER_INDENT", 2)
    # PyYAML rejects indents outside 2..9
    return indent if 2 <= indent <= 9 else 2


def _default_strict() -> bool:
    return _env_bool("MANIFEST_LABELER_STRICT", False)


@dataclass
class Settings:
    indent: int = field(default_factory=_default_indent)
    document_separator: str = "---\n"
    strict_documents: bool = field(default_factory=_default_strict)  # error on non-mapping documents
    default_output: str = "table"

    @property
    def separator_bytes(self) -> bytes:
        return self.document_separator.encode("utf-8")


# Global singleton
settings = Settings()
