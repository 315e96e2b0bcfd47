"""
Native Click implementation of the check command.

Usage: hashmux check -a ALGO FILE DIGEST
"""

import click

from ..context import HashmuxContext


@click.command("check")
@click.option("-a", "--algorithm", required=True, help="Algorithm name or alias.")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("digest")
@click.pass_context
def check(click_ctx: click.Context, algorithm: str, file: str, digest: str) -> None:
    """Verify FILE against an expected hex DIGEST.

    Exits with status 1 when the digest does not match.
    """
    ctx: HashmuxContext = click_ctx.obj
    (descriptor,) = ctx.resolve_algorithms([algorithm])

    try:
        matched = ctx.hashing_service().verify(file, descriptor, digest)
    except OSError as e:
        raise click.ClickException(f"{file}: {e}") from e

    if matched:
        click.echo(f"{file}: OK")
    else:
        click.echo(f"{file}: FAILED ({descriptor.name})")
        click_ctx.exit(1)
