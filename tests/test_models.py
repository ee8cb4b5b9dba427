"""Tests for label builders, sanitization and the document node helpers."""

import pytest

from manifest_labeler.models import (
    APP_LABEL_KEYS,
    LABEL_APP_KIND,
    LABEL_APP_NAME,
    LABEL_APP_OWNER,
    LABEL_APP_STACK,
    LABEL_APP_STACK_ID,
    KubeAppLabels,
    get_helm_app_labels,
)
from manifest_labeler.models.document import (
    NodeType,
    copy_mapping,
    get_str,
    is_list_kind,
    is_resource,
    node_type,
    resource_kind,
)
from manifest_labeler.utils.sanitize import sanitize_label


class TestSanitizeLabel:

    @pytest.mark.parametrize("value, expected", [
        ("Jane Doe/Team#1", "Jane.Doe.Team.1"),
        ("admin", "admin"),
        ("a_b-c.d", "a_b-c.d"),
        ("a  //  b", "a.b"),
        ("user@example.com", "user.example.com"),
        ("", ""),
    ])
    def test_sanitize(self, value, expected):
        assert sanitize_label(value) == expected


class TestKubeAppLabels:

    def test_to_map(self):
        labels = KubeAppLabels(stack_id=7, stack_name="shop", owner="Jane Doe", kind="git").to_map()
        assert labels == {
            LABEL_APP_STACK_ID: "7",
            LABEL_APP_STACK: "shop",
            LABEL_APP_NAME: "shop",
            LABEL_APP_OWNER: "Jane.Doe",
            LABEL_APP_KIND: "git",
        }

    def test_keys_are_the_recognized_set(self):
        labels = KubeAppLabels(stack_id=1, stack_name="s", owner="o", kind="k").to_map()
        assert set(labels) == set(APP_LABEL_KEYS)

    def test_helm_labels(self):
        assert get_helm_app_labels("release", "Jane Doe") == {
            LABEL_APP_NAME: "release",
            LABEL_APP_OWNER: "Jane.Doe",
        }


class TestDocumentNodes:

    @pytest.mark.parametrize("value, expected", [
        ({}, NodeType.MAPPING),
        ([], NodeType.SEQUENCE),
        ("s", NodeType.SCALAR),
        (0, NodeType.SCALAR),
        (None, NodeType.NULL),
    ])
    def test_node_type(self, value, expected):
        assert node_type(value) is expected

    def test_copy_mapping_copies_existing(self):
        meta = {"name": "a"}
        copied = copy_mapping({"metadata": meta}, "metadata")
        assert copied == meta
        assert copied is not meta

    @pytest.mark.parametrize("value", [None, "broken", ["a"]])
    def test_copy_mapping_replaces_mismatch(self, value):
        doc = {"metadata": value}
        assert copy_mapping(doc, "metadata") == {}
        assert doc["metadata"] == value

    def test_get_str(self):
        assert get_str({"kind": "Pod"}, "kind") == "Pod"
        assert get_str({"kind": 3}, "kind") is None
        assert get_str({}, "kind") is None

    def test_resource_kind(self):
        assert resource_kind({"kind": "Pod"}) == "Pod"
        assert resource_kind({"name": "x"}) is None
        assert resource_kind(["kind"]) is None

    def test_is_resource(self):
        assert is_resource({"kind": "Pod"})
        assert not is_resource({"kind": "LIST"})
        assert not is_resource({"items": []})
        assert is_list_kind("List")
        assert not is_list_kind(None)
