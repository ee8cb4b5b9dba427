"""Split multi-document YAML manifests into individually re-encoded documents."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

import yaml

from manifest_labeler.config.settings import settings
from manifest_labeler.core.errors import DecodeError, EncodeError, TransformError
from manifest_labeler.models.document import NodeType, node_type

logger = logging.getLogger(__name__)

PostProcess = Callable[[dict[str, Any]], None]


class ManifestDumper(yaml.SafeDumper):
    """Block-style dumper that expands aliases and indents nested sequences."""

    def ignore_aliases(self, data: Any) -> bool:
        return True

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


def _is_empty(manifest: bytes | str) -> bool:
    return len(manifest) == 0


def iter_documents(manifest: bytes | str) -> Iterator[tuple[int, dict[str, Any]]]:
    """Yield ``(index, document)`` for each mapping document in the stream.

    ``index`` is the position of the document in the stream, counting blank
    documents, so errors point at the right place in the input. Blank
    documents are skipped; non-mapping documents are skipped too unless
    ``settings.strict_documents`` is set.
    """
    if _is_empty(manifest):
        return

    loader = yaml.safe_load_all(manifest)
    index = 0
    while True:
        try:
            doc = next(loader)
        except StopIteration:
            break
        except yaml.YAMLError as err:
            raise DecodeError(index, str(err)) from err
        except RecursionError as err:
            raise DecodeError(index, "document is nested too deeply") from err

        kind = node_type(doc)
        if kind is NodeType.NULL:
            logger.debug("Skipping empty yaml document %d", index)
        elif kind is not NodeType.MAPPING:
            if settings.strict_documents:
                raise DecodeError(index, f"expected a mapping, got a {kind.value}")
            logger.warning("Skipping yaml document %d: expected a mapping, got a %s", index, kind.value)
        else:
            yield index, doc
        index += 1


def encode_document(doc: dict[str, Any], index: int = 0) -> bytes:
    """Serialize a single document with the configured indentation."""
    try:
        text = yaml.dump(
            doc,
            Dumper=ManifestDumper,
            indent=settings.indent,
            default_flow_style=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as err:
        raise EncodeError(index, f"failed to marshal yaml manifest: {err}") from err
    except RecursionError as err:
        # also raised for self-referencing documents, since aliases are expanded
        raise EncodeError(index, "failed to marshal yaml manifest: document is nested too deeply") from err
    return text.encode("utf-8")


def extract_documents(
    manifest: bytes | str,
    post_process: PostProcess | None = None,
) -> list[bytes]:
    """Extract all documents from a yaml manifest.

    Optionally post-process each document with ``post_process``, which may
    modify the document in place. Pass None to skip post-processing.
    """
    docs: list[bytes] = []
    for index, doc in iter_documents(manifest):
        if post_process is not None:
            try:
                post_process(doc)
            except Exception as err:
                raise TransformError(index, str(err)) from err

        docs.append(encode_document(doc, index))

    logger.debug("Extracted %d yaml document(s)", len(docs))
    return docs


def join_documents(docs: list[bytes]) -> bytes:
    """Concatenate encoded documents with the document boundary marker."""
    return settings.separator_bytes.join(docs)
