"""Resolve the namespace a single-document manifest targets."""

from __future__ import annotations

import logging

import yaml

from manifest_labeler.core.errors import DecodeError, ValidationError
from manifest_labeler.models.document import as_mapping, get_mapping, get_str

logger = logging.getLogger(__name__)


def _load_first_document(manifest: bytes | str) -> dict:
    if not manifest:
        raise DecodeError(0, "failed to unmarshal yaml manifest when obtaining namespace: empty manifest")
    try:
        doc = next(iter(yaml.safe_load_all(manifest)), None)
    except yaml.YAMLError as err:
        raise DecodeError(0, f"failed to unmarshal yaml manifest when obtaining namespace: {err}") from err
    except RecursionError as err:
        raise DecodeError(0, "failed to unmarshal yaml manifest when obtaining namespace: nested too deeply") from err

    mapping = as_mapping(doc)
    if mapping is None:
        raise DecodeError(0, "failed to unmarshal yaml manifest when obtaining namespace: not a mapping")
    return mapping


def get_namespace(manifest: bytes | str) -> str:
    """Return the namespace of the first resource in ``manifest``.

    ``Namespace`` resources report their own name. Returns an empty string
    when the resource declares no namespace.
    """
    doc = _load_first_document(manifest)

    kind = get_str(doc, "kind")
    if kind is None:
        raise ValidationError("invalid kubernetes manifest, missing 'kind' field")

    if doc.get("metadata") is None:
        return ""
    metadata = get_mapping(doc, "metadata")
    if metadata is None:
        raise ValidationError("invalid kubernetes manifest, 'metadata' field is not a mapping")

    field = "name" if kind.lower() == "namespace" else "namespace"
    if field not in metadata:
        return ""

    value = metadata[field]
    if not isinstance(value, str):
        raise ValidationError(f"invalid kubernetes manifest, '{field}' field is not a string")

    logger.debug("Resolved namespace %r from %s", value, kind)
    return value
