"""
Native Click implementation of the sum command.

Usage: hashmux sum [-a ALGO]... [--json] FILE...
"""

import json

import click

from ...hashing.result import HashInfo
from ...hashing.streams import hash_reader_multi
from ..context import HashmuxContext


@click.command("sum")
@click.option(
    "-a",
    "--algorithm",
    "algorithms",
    multiple=True,
    help="Algorithm name or alias (repeatable). Defaults to hash.default.",
)
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of text.")
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.pass_obj
def sum_files(
    ctx: HashmuxContext, algorithms: tuple[str, ...], as_json: bool, files: tuple[str, ...]
) -> None:
    """Compute digests of FILES in a single pass each.

    Use '-' to read standard input.

    \b
    Examples:

        hashmux sum data.bin                 # md5, sha1, sha256

        hashmux sum -a sha256 -a SHA-1 a b   # chosen algorithms

        cat data.bin | hashmux sum --json -
    """
    descriptors = ctx.resolve_algorithms(algorithms)
    service = ctx.hashing_service()

    results: list[tuple[str, HashInfo]] = []
    for path in files:
        try:
            if path == "-":
                stdin = click.get_binary_stream("stdin")
                info = hash_reader_multi(descriptors, stdin, ctx.settings.hash.chunk_size)
            else:
                info = service.hash_path(path, descriptors)
        except OSError as e:
            ctx.logger.error("Failed to hash %s: %s", path, e)
            raise click.ClickException(f"{path}: {e}") from e
        results.append((path, info))

    if as_json:
        click.echo(json.dumps({path: info.to_dict() for path, info in results}, indent=2))
        return

    blocks = [f"{path}\n{info.render()}" for path, info in results]
    click.echo("\n\n".join(blocks))
