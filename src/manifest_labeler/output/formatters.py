"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from manifest_labeler.models.diff import ChangeReport
from manifest_labeler.utils.manifest_parser import ParsedDocument

console = Console()


def _document_to_dict(d: ParsedDocument) -> dict[str, Any]:
    return {
        "index": d.index,
        "api_version": d.api_version,
        "kind": d.kind,
        "name": d.name,
        "namespace": d.namespace,
    }


def output_documents(documents: list[ParsedDocument], fmt: str) -> None:
    if fmt == "json":
        data = [_document_to_dict(d) for d in documents]
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = [_document_to_dict(d) for d in documents]
        console.print(yaml.dump(data, default_flow_style=False))
    else:
        from manifest_labeler.output.tables import document_list_table
        console.print(document_list_table(documents))


def output_namespace(source: str, namespace: str, fmt: str) -> None:
    data = {"manifest": source, "namespace": namespace}
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(data, default_flow_style=False))
    else:
        from manifest_labeler.output.tables import namespace_table
        console.print(namespace_table(source, namespace))


def output_changes(report: ChangeReport, fmt: str) -> None:
    data = {
        "has_changes": report.has_changes,
        "summary": report.summary,
        "documents": [
            {
                "index": c.index,
                "kind": c.kind,
                "name": c.name,
                "status": c.status.value,
                "details": c.details,
            }
            for c in report.changes
        ],
    }
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(data, default_flow_style=False))
    else:
        from manifest_labeler.output.tables import change_table
        console.print(change_table(report))
        if report.has_changes:
            console.print(f"\n[green]Labels would be applied:[/green] {report.summary}")
        else:
            console.print("\n[dim]No resources found to label.[/dim]")
