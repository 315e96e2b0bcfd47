"""
Native Click implementation of the list command.

Usage: hashmux list
"""

import click

from ..context import HashmuxContext


@click.command("list")
@click.pass_obj
def list_algorithms(ctx: HashmuxContext) -> None:
    """List registered hash algorithms in registration order."""
    for descriptor in ctx.registry.list_supported():
        click.echo(f"{descriptor.name:<10} {descriptor.alias:<10} {descriptor.width}")
