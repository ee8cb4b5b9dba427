"""mlabel split <manifest> - List or write out the documents of a manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from manifest_labeler.cli.options import ManifestArgument, OutputOption, read_manifest
from manifest_labeler.core.errors import ManifestError
from manifest_labeler.core.extractor import encode_document
from manifest_labeler.output.formatters import output_documents
from manifest_labeler.utils.manifest_parser import document_filename, parse_manifest


def split(
    manifest: str = ManifestArgument,
    output: str = OutputOption,
    directory: Optional[Path] = typer.Option(None, "--dir", "-d", help="Write each document to its own file"),
) -> None:
    """Split a multi-document manifest into its individual documents."""
    data = read_manifest(manifest)
    try:
        documents = parse_manifest(data)
        if directory is not None:
            directory.mkdir(parents=True, exist_ok=True)
            for doc in documents:
                (directory / document_filename(doc)).write_bytes(encode_document(doc.raw, doc.index))
    except ManifestError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    output_documents(documents, output)
