"""Tests for the label change preview."""

import pytest

from conftest import DEPLOYMENT, LIST_MANIFEST, load_all
from manifest_labeler.core import change_engine
from manifest_labeler.core.change_engine import preview_labels
from manifest_labeler.core.errors import CompareError
from manifest_labeler.models import LABEL_APP_OWNER
from manifest_labeler.models.diff import ChangeStatus


def test_preview_reports_added_labels(app_labels):
    report = preview_labels(DEPLOYMENT, app_labels)

    assert report.has_changes
    assert report.summary == {"labeled": 1}
    change = report.changes[0]
    assert change.kind == "Deployment"
    assert change.name == "web"
    assert any(LABEL_APP_OWNER in d and d.startswith("Added") for d in change.details)


def test_preview_does_not_modify_input(app_labels):
    before = load_all(DEPLOYMENT)
    preview_labels(DEPLOYMENT, app_labels)
    assert load_all(DEPLOYMENT) == before


def test_preview_reports_overridden_labels():
    manifest = b"kind: Pod\nmetadata:\n  name: p\n  labels:\n    " + LABEL_APP_OWNER.encode() + b": old\n"
    report = preview_labels(manifest, {LABEL_APP_OWNER: "new"})

    details = report.changes[0].details
    assert any(d.startswith("Changed") and "'old' -> 'new'" in d for d in details)


def test_preview_unchanged_document():
    report = preview_labels(b"items:\n  - just: data\n", {LABEL_APP_OWNER: "x"})

    assert not report.has_changes
    assert report.changes[0].status is ChangeStatus.UNCHANGED
    assert report.changes[0].details == []


def test_preview_list_manifest(app_labels):
    report = preview_labels(LIST_MANIFEST, app_labels)
    assert report.changes[0].kind == "List"
    assert report.changes[0].status is ChangeStatus.LABELED


def test_preview_wraps_recursion_failures(monkeypatch, app_labels):
    def too_deep(value):
        raise RecursionError("maximum recursion depth exceeded")

    monkeypatch.setattr(change_engine.copy, "deepcopy", too_deep)

    with pytest.raises(CompareError) as exc_info:
        preview_labels(b"---\n---\n" + DEPLOYMENT, app_labels)

    assert exc_info.value.index == 1
    assert "failed to compare yaml document 1" in str(exc_info.value)
