"""
Click-based CLI for hashmux.

This module provides the main Click command group and serves as the
entry point for the hashmux CLI.

Usage:
    from hashmux.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from .context import HashmuxContext

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("hashmux")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hashmux")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of .hashmux/config.toml discovery.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """hashmux - compute several digests of the same data in one pass

    \b
    Commands:
        hashmux list                    List registered algorithms
        hashmux sum FILE...             Digest files (md5, sha1, sha256 by default)
        hashmux check -a ALGO FILE HEX  Verify a file against a digest
        hashmux string TEXT             Digest a string
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        ctx.obj = HashmuxContext.create(config_path=config_path)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "HashmuxContext",
    "__version__",
    "cli",
    "register_commands",
]
