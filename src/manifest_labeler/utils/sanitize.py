"""Label value sanitization."""

from __future__ import annotations

import re

_INVALID_LABEL_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def sanitize_label(value: str) -> str:
    """Convert a string to a valid Kubernetes label value.

    Every run of characters outside ``[A-Za-z0-9._-]`` collapses to a single
    period, e.g. ``"Jane Doe/Team#1"`` -> ``"Jane.Doe.Team.1"``.
    """
    return _INVALID_LABEL_CHARS.sub(".", value)
