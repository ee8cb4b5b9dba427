"""Errors raised while processing manifests."""

from __future__ import annotations


class ManifestError(Exception):
    """Base class for all manifest processing failures."""


class DocumentError(ManifestError):
    """A failure tied to one document of a multi-document stream."""

    stage = "process"

    def __init__(self, index: int, message: str = ""):
        self.index = index
        detail = f": {message}" if message else ""
        super().__init__(f"failed to {self.stage} yaml document {index}{detail}")


class DecodeError(DocumentError):
    stage = "decode"


class EncodeError(DocumentError):
    stage = "encode"


class TransformError(DocumentError):
    stage = "post process"


class ValidationError(ManifestError):
    """The manifest decoded but is not a usable Kubernetes resource."""


class CompareError(DocumentError):
    stage = "compare"
