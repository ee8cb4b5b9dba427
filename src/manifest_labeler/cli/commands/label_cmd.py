"""mlabel label <manifest> - Add application labels to every resource."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from manifest_labeler.cli.options import ManifestArgument, OutputOption, read_manifest
from manifest_labeler.core.change_engine import preview_labels
from manifest_labeler.core.errors import ManifestError
from manifest_labeler.core.labeler import add_app_labels
from manifest_labeler.models import KubeAppLabels, get_helm_app_labels
from manifest_labeler.output.formatters import output_changes


def label(
    manifest: str = ManifestArgument,
    stack_name: str = typer.Option(..., "--stack-name", help="Stack (or helm release) name"),
    owner: str = typer.Option(..., "--owner", help="Owner of the application"),
    stack_id: int = typer.Option(0, "--stack-id", help="Numeric stack identifier"),
    kind: str = typer.Option("content", "--kind", help="Deployment kind, e.g. content, git, url"),
    helm: bool = typer.Option(False, "--helm", help="Apply the helm label set (name and owner only)"),
    output_file: Optional[Path] = typer.Option(None, "--output-file", "-f", help="Write the result to a file"),
    show_changes: bool = typer.Option(False, "--show-changes", help="Preview label changes instead of printing YAML"),
    output: str = OutputOption,
) -> None:
    """Stamp application labels onto each resource in a manifest."""
    data = read_manifest(manifest)
    if helm:
        app_labels = get_helm_app_labels(stack_name, owner)
    else:
        app_labels = KubeAppLabels(stack_id=stack_id, stack_name=stack_name, owner=owner, kind=kind).to_map()

    try:
        if show_changes:
            output_changes(preview_labels(data, app_labels), output)
            return
        result = add_app_labels(data, app_labels)
    except ManifestError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_file is not None:
        output_file.write_bytes(result)
        typer.echo(f"Wrote labeled manifest to {output_file}", err=True)
        return
    typer.echo(result.decode("utf-8"), nl=False)
