"""Inject application labels into every Kubernetes resource of a manifest."""

from __future__ import annotations

import logging
from typing import Any

from manifest_labeler.core.extractor import extract_documents, join_documents
from manifest_labeler.models.document import as_mapping, as_sequence, copy_mapping, get_mapping, is_resource

logger = logging.getLogger(__name__)


def add_app_labels(manifest: bytes, app_labels: dict[str, str]) -> bytes:
    """Add ``app_labels`` to ``metadata.labels`` of every resource in the manifest.

    A resource is any mapping with a ``kind`` other than ``List``. Items may be
    organised as a ``List`` or split across documents; both are handled.
    """
    if not manifest:
        return manifest

    def post_process(doc: dict[str, Any]) -> None:
        add_resource_labels(doc, app_labels)

    logger.debug("Labeling manifest with %d app label(s)", len(app_labels))
    docs = extract_documents(manifest, post_process)
    return join_documents(docs)


def add_resource_labels(document: Any, app_labels: dict[str, str]) -> None:
    """Walk a decoded document and label each resource found.

    Resources are not descended into, so pod templates and other embedded
    objects keep their own labels. ``List`` kinds are containers only.
    """
    stack: list[Any] = [document]
    # aliases decode to shared objects, and may be self-referencing
    seen: set[int] = set()
    while stack:
        mapping = as_mapping(stack.pop())
        if mapping is None or id(mapping) in seen:
            continue
        seen.add(id(mapping))

        if is_resource(mapping):
            add_labels(mapping, app_labels)
            continue

        for value in mapping.values():
            if as_mapping(value) is not None:
                stack.append(value)
                continue
            # only mappings held directly by a sequence are visited
            for item in as_sequence(value) or ():
                if as_mapping(item) is not None:
                    stack.append(item)


def _label_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def add_labels(resource: dict[str, Any], app_labels: dict[str, str]) -> None:
    """Merge ``app_labels`` into ``resource.metadata.labels``, app labels winning.

    ``metadata`` is replaced by a copy, so a mapping shared through a YAML
    alias elsewhere in the document is left untouched.
    """
    metadata = copy_mapping(resource, "metadata")
    existing = get_mapping(metadata, "labels") or {}

    labels = {str(k): _label_value(v) for k, v in existing.items()}
    labels.update(app_labels)

    metadata["labels"] = labels
    resource["metadata"] = metadata
