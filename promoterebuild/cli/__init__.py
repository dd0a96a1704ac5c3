"""promoterebuild CLI — Typer-based command-line interface.

Provides the ``promoterebuild`` command with subcommands for resolving a
build's rebuild provenance and inspecting the data it was resolved from.

All output uses Rich for formatted terminal display.
"""
