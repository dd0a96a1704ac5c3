"""Main Typer application — imports and registers all CLI commands.

Entry point: ``promoterebuild`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from promoterebuild import __version__
from promoterebuild.cli.commands.inspect_cmd import inspect_cmd
from promoterebuild.cli.commands.resolve import resolve_cmd
from promoterebuild.config import ResolverSettings

app = typer.Typer(
    name="promoterebuild",
    help="Record which upstream build and commit a promoted rebuild came from.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to PROMOTEREBUILD_LOG_LEVEL or INFO).",
    ),
) -> None:
    """Configure logging before any subcommand runs."""
    level = (log_level or ResolverSettings().log_level).upper()
    if level not in logging.getLevelNamesMapping():
        raise typer.BadParameter(
            f"unknown level {level!r}; use DEBUG, INFO, WARNING, ERROR or CRITICAL",
            param_hint="'--log-level'",
        )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True), show_path=False, rich_tracebacks=True
            )
        ],
        force=True,
    )


# Register subcommands
app.command(name="resolve", help="Resolve rebuild provenance for a build.")(resolve_cmd)
app.command(name="inspect", help="Show the checkout data used for resolution.")(inspect_cmd)


@app.command(name="version", help="Show the promoterebuild version.")
def version_cmd() -> None:
    typer.echo(f"promoterebuild {__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
