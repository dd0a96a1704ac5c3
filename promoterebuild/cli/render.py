"""Rich terminal rendering for provenance records and resolution inputs."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from promoterebuild.config import ResolverSettings
from promoterebuild.models.build import Build
from promoterebuild.models.provenance import ProvenanceRecord

_ABSENT = "[dim]-[/dim]"


def _value(value: object) -> str:
    return _ABSENT if value is None else str(value)


class ProvenanceRenderer:
    """Renders provenance data as Rich output.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    settings:
        Used to expand relative upstream URLs for display.
    """

    def __init__(
        self,
        console: Console | None = None,
        settings: ResolverSettings | None = None,
    ) -> None:
        self.console = console or Console()
        self.settings = settings or ResolverSettings()

    def render_record(self, record: ProvenanceRecord) -> Panel:
        """Render a record as a Panel wrapping a two-column table."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Field", style="bold")
        table.add_column("Value")

        table.add_row("Reason", f"[magenta]{record.reason}[/magenta]")
        table.add_row("Upstream project", record.upstream_project)
        table.add_row("Upstream build", str(record.upstream_build))
        table.add_row(
            "Upstream URL", _value(self.settings.absolute_url(record.upstream_url))
        )
        table.add_row("Base remote", _value(record.build_remote))
        table.add_row(
            "Commit",
            f"[green]{record.build_hash}[/green]" if record.is_resolved else _ABSENT,
        )

        border = "green" if record.is_resolved else "yellow"
        return Panel(
            table,
            title="[bold]Rebuild Provenance[/bold]",
            border_style=border,
            padding=(1, 2),
        )

    def render_inputs(
        self,
        build: Build,
        base_remote: str | None,
        hashes: dict[str, str],
    ) -> Table:
        """Render the checkout map the matcher works from."""
        table = Table(title=f"Checkouts for {build.full_display_name}")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Remote", style="cyan")
        table.add_column("Commit")
        table.add_column("Base", justify="center")

        for idx, (remote, commit) in enumerate(hashes.items(), start=1):
            is_base = "[green]Yes[/green]" if remote == base_remote else ""
            table.add_row(str(idx), remote, commit, is_base)

        return table

    def print_record(self, record: ProvenanceRecord) -> None:
        self.console.print(self.render_record(record))

    def print_inputs(
        self,
        build: Build,
        base_remote: str | None,
        hashes: dict[str, str],
    ) -> None:
        self.console.print(self.render_inputs(build, base_remote, hashes))
        self.console.print(f"[bold]Job shape:[/bold]   {build.job.kind}")
        self.console.print(f"[bold]Base remote:[/bold] {_value(base_remote)}")
