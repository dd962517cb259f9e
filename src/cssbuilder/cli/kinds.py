"""CLI command: cssbuilder kinds -- list selector part kinds in order."""

from __future__ import annotations

import click

from cssbuilder.kinds import SelectorPartKind


@click.command()
def kinds() -> None:
    """List selector part kinds in the order CSS requires them."""
    for kind in SelectorPartKind:
        note = " (once)" if kind.singleton else ""
        click.echo(f"{kind.order}  {kind.label:<15} {kind.format('value')}{note}")
