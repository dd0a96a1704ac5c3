"""``promoterebuild inspect BUILD_JSON`` — show what resolution works from.

Prints the job's configuration shape, the base remote the locator found,
and the remote -> commit map collected from the build's checkout records.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from promoterebuild.cli.render import ProvenanceRenderer
from promoterebuild.config import ResolverSettings
from promoterebuild.core.loader import BuildLoadError, load_build
from promoterebuild.core.locator import locate_base_repository
from promoterebuild.core.matcher import collect_commit_hashes

console = Console()


def inspect_cmd(
    build_json: Path = typer.Argument(
        ...,
        help="Path to the JSON export of the build.",
    ),
) -> None:
    """Show the located base remote and the collected checkout map."""
    try:
        build = load_build(build_json)
    except BuildLoadError as exc:
        console.print(f"[bold red]Cannot load build:[/bold red] {exc}")
        raise typer.Exit(code=1)

    base_remote = locate_base_repository(build.job)
    hashes = collect_commit_hashes(build.checkouts)

    renderer = ProvenanceRenderer(console=console, settings=ResolverSettings())
    console.print()
    renderer.print_inputs(build, base_remote, hashes)

    if base_remote is not None and base_remote not in hashes:
        console.print(
            f"[yellow]No checkout recorded for base remote {base_remote}.[/yellow]"
        )
    console.print()
