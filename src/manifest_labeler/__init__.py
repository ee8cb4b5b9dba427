"""Manifest Labeler - split Kubernetes manifests and stamp application labels on them."""

from manifest_labeler.core.errors import (
    CompareError,
    DecodeError,
    EncodeError,
    ManifestError,
    TransformError,
    ValidationError,
)
from manifest_labeler.core.extractor import extract_documents, join_documents
from manifest_labeler.core.labeler import add_app_labels, add_resource_labels
from manifest_labeler.core.namespace import get_namespace
from manifest_labeler.models import KubeAppLabels, get_helm_app_labels
from manifest_labeler.utils.sanitize import sanitize_label

__version__ = "0.1.0"

__all__ = [
    "CompareError",
    "DecodeError",
    "EncodeError",
    "KubeAppLabels",
    "ManifestError",
    "TransformError",
    "ValidationError",
    "add_app_labels",
    "add_resource_labels",
    "extract_documents",
    "get_helm_app_labels",
    "get_namespace",
    "join_documents",
    "sanitize_label",
]
