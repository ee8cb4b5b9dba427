"""Summarize the documents of a multi-document YAML manifest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from manifest_labeler.core.extractor import iter_documents
from manifest_labeler.models.document import get_mapping, resource_kind


@dataclass
class ParsedDocument:
    index: int
    api_version: str
    kind: str
    name: str
    namespace: str
    raw: dict[str, Any]


def parse_manifest(manifest: bytes | str) -> list[ParsedDocument]:
    """Parse a multi-document YAML manifest into a list of ParsedDocument."""
    documents: list[ParsedDocument] = []
    for index, doc in iter_documents(manifest):
        metadata = get_mapping(doc, "metadata") or {}
        documents.append(ParsedDocument(
            index=index,
            api_version=str(doc.get("apiVersion", "") or ""),
            kind=resource_kind(doc) or "",
            name=str(metadata.get("name", "") or ""),
            namespace=str(metadata.get("namespace", "") or ""),
            raw=doc,
        ))
    return documents


def document_filename(doc: ParsedDocument) -> str:
    """Return a stable file name for a document, e.g. ``000-deployment-web.yaml``."""
    parts = [f"{doc.index:03d}"]
    if doc.kind:
        parts.append(doc.kind.lower())
    if doc.name:
        parts.append(doc.name)
    return "-".join(parts) + ".yaml"
