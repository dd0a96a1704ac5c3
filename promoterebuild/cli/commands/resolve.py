"""``promoterebuild resolve BUILD_JSON`` — resolve a build's rebuild provenance.

Loads a host build export, runs the resolver, and prints the resulting
record as a Rich panel or as the action's exported JSON metadata.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console

from promoterebuild.cli.render import ProvenanceRenderer
from promoterebuild.config import ResolverSettings
from promoterebuild.core.action import PromoteRebuildCauseAction
from promoterebuild.core.loader import BuildLoadError, load_build

console = Console()

_FORMATS = ("panel", "json")


def resolve_cmd(
    build_json: Path = typer.Argument(
        ...,
        help="Path to the JSON export of the build.",
    ),
    output_format: str = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: panel or json (defaults to PROMOTEREBUILD_OUTPUT_FORMAT).",
    ),
) -> None:
    """Resolve the upstream cause and base commit of a promoted build."""
    settings = ResolverSettings()
    output_format = output_format or settings.output_format
    if output_format not in _FORMATS:
        console.print(f"[bold red]Unknown format:[/bold red] {output_format}")
        raise typer.Exit(code=2)

    try:
        build = load_build(build_json)
    except BuildLoadError as exc:
        console.print(f"[bold red]Cannot load build:[/bold red] {exc}")
        raise typer.Exit(code=1)

    action = PromoteRebuildCauseAction(build)

    if output_format == "json":
        # Plain stdout so the output can be piped into other tools
        typer.echo(json.dumps(action.exported(), indent=2, sort_keys=True))
        return

    renderer = ProvenanceRenderer(console=console, settings=settings)
    console.print()
    renderer.print_record(action.promote_rebuild_cause)
    console.print()
