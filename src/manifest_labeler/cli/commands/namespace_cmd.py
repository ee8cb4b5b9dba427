"""mlabel namespace <manifest> - Show the namespace a manifest targets."""

from __future__ import annotations

import typer

from manifest_labeler.cli.options import ManifestArgument, OutputOption, read_manifest
from manifest_labeler.core.errors import ManifestError
from manifest_labeler.core.namespace import get_namespace
from manifest_labeler.output.formatters import output_namespace


def namespace(
    manifest: str = ManifestArgument,
    output: str = OutputOption,
) -> None:
    """Resolve the namespace of the first resource in a manifest."""
    data = read_manifest(manifest)
    try:
        ns = get_namespace(data)
    except ManifestError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    output_namespace(manifest, ns, output)
