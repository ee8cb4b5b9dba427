"""Rich table builders for each command."""

from __future__ import annotations

from rich.table import Table

from manifest_labeler.models.diff import ChangeReport
from manifest_labeler.output.themes import styled_change
from manifest_labeler.utils.manifest_parser import ParsedDocument


def document_list_table(documents: list[ParsedDocument]) -> Table:
    table = Table(title="Manifest Documents", expand=True, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("API Version", style="magenta", no_wrap=True)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("Namespace", style="blue", no_wrap=True)

    for d in documents:
        table.add_row(
            str(d.index),
            d.api_version or "-",
            d.kind or "-",
            d.name or "-",
            d.namespace or "-",
        )
    return table


def change_table(report: ChangeReport) -> Table:
    table = Table(title="Label Changes", expand=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Status", no_wrap=True)
    table.add_column("Details", max_width=80)

    for c in report.changes:
        detail = "\n".join(c.details[:5])
        if len(c.details) > 5:
            detail += f"\n... +{len(c.details) - 5} more"
        table.add_row(str(c.index), c.kind or "-", c.name or "-", styled_change(c.status), detail)
    return table


def namespace_table(source: str, namespace: str) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("Manifest", source)
    table.add_row("Namespace", namespace or "[dim](none)[/dim]")
    return table
