"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import typer

from manifest_labeler.output.logs import configure_logging

app = typer.Typer(
    name="mlabel",
    help="Manifest Labeler - Split Kubernetes manifests and stamp application labels.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose)


def _register_commands() -> None:
    from manifest_labeler.cli.commands.label_cmd import label
    from manifest_labeler.cli.commands.split_cmd import split
    from manifest_labeler.cli.commands.namespace_cmd import namespace

    # plain commands, so options may follow the manifest argument
    app.command(name="label", help="Add application labels to a manifest")(label)
    app.command(name="split", help="Split a manifest into documents")(split)
    app.command(name="namespace", help="Show the namespace of a manifest")(namespace)


_register_commands()


def main() -> None:
    app()
