"""
Native Click implementation of the string command.

Usage: hashmux string [-a ALGO]... TEXT
"""

import click

from ...hashing.multihasher import MultiHasher
from ...hashing.registry import MD5
from ...hashing.streams import hash_data
from ..context import HashmuxContext


@click.command("string")
@click.option(
    "-a",
    "--algorithm",
    "algorithms",
    multiple=True,
    help="Algorithm name or alias (repeatable). Defaults to md5.",
)
@click.argument("text")
@click.pass_obj
def string(ctx: HashmuxContext, algorithms: tuple[str, ...], text: str) -> None:
    """Print digests of the UTF-8 encoding of TEXT.

    Bytes that are not valid UTF-8 on the command line are hashed as given.
    """
    try:
        data = text.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError as e:
        raise click.BadParameter("text cannot be encoded as bytes", param_hint="TEXT") from e

    if not algorithms:
        click.echo(f"md5:{hash_data(MD5, data)}")
        return

    hasher = MultiHasher(ctx.resolve_algorithms(algorithms))
    hasher.write(data)
    click.echo(hasher.get_hash_info().render())
