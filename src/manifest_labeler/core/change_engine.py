"""Preview the label changes a manifest would receive."""

from __future__ import annotations

import copy
import logging

from deepdiff import DeepDiff

from manifest_labeler.core.errors import CompareError
from manifest_labeler.core.labeler import add_resource_labels
from manifest_labeler.models.diff import ChangeReport, ChangeStatus, DocumentChange
from manifest_labeler.utils.manifest_parser import parse_manifest

logger = logging.getLogger(__name__)


def preview_labels(manifest: bytes | str, app_labels: dict[str, str]) -> ChangeReport:
    """Label a copy of every document and report what changed."""
    report = ChangeReport()
    for doc in parse_manifest(manifest):
        try:
            labeled = copy.deepcopy(doc.raw)
            add_resource_labels(labeled, app_labels)
            diff = DeepDiff(doc.raw, labeled, verbose_level=2)
        except RecursionError as err:
            raise CompareError(doc.index, "document is nested too deeply") from err

        if diff:
            report.changes.append(DocumentChange(
                index=doc.index,
                kind=doc.kind,
                name=doc.name,
                status=ChangeStatus.LABELED,
                details=_format_diff(diff),
            ))
        else:
            report.changes.append(DocumentChange(
                index=doc.index,
                kind=doc.kind,
                name=doc.name,
                status=ChangeStatus.UNCHANGED,
            ))

    logger.debug("Previewed labels for %d document(s)", len(report.changes))
    return report


def _format_diff(diff: DeepDiff) -> list[str]:
    """Format DeepDiff output into human-readable strings."""
    details: list[str] = []

    if "values_changed" in diff:
        for path, change in diff["values_changed"].items():
            old = change.get("old_value", "?")
            new = change.get("new_value", "?")
            details.append(f"Changed {path}: {old!r} -> {new!r}")

    if "dictionary_item_added" in diff:
        for path in diff["dictionary_item_added"]:
            details.append(f"Added: {path}")

    if "type_changes" in diff:
        for path, change in diff["type_changes"].items():
            old = change.get("old_value", "?")
            new = change.get("new_value", "?")
            details.append(f"Replaced {path}: {old!r} -> {new!r}")

    return details or ["Differences detected (see raw diff)"]
