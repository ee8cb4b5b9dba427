"""Shared CLI options."""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from manifest_labeler.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
ManifestArgument = typer.Argument(help="Path to a YAML manifest, or '-' for stdin")


def read_manifest(source: str) -> bytes:
    """Read manifest bytes from a file path or stdin."""
    if source == "-":
        return sys.stdin.buffer.read()
    path = Path(source)
    if not path.is_file():
        typer.echo(f"Manifest '{source}' not found.", err=True)
        raise typer.Exit(code=1)
    return path.read_bytes()
