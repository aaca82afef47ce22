#!/usr/bin/env python3
"""
Quire CLI
---------

Command-line interface for the content collection.

Command Groups:
    - Build: build, validate
    - Browse: list, show
    - Export: export

Usage:
    # Build the collection and print a summary
    quire build
    quire build --skip-invalid --exclude-drafts

    # Report every issue without building
    quire validate

    # Inspect the collection
    quire list
    quire show hello-world

    # Write the JSON manifest for the rendering layer
    quire export -o dist/collection.json
"""
from __future__ import annotations

import click
from pathlib import Path

from quire.core.cli import setup_logger
from quire.core.cli_options import content_dir_option, log_dir_option, verbose_option


@click.group()
@log_dir_option
@verbose_option
@content_dir_option
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool, content_dir: str) -> None:
    """Quire - content collection loader and indexer"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["content_dir"] = Path(content_dir)
    ctx.obj["logger"] = setup_logger(Path(log_dir), "quire")


# Import and register commands from submodules
from .build import build, validate
from .browse import list_documents, show
from .export import export

cli.add_command(build)
cli.add_command(validate)
cli.add_command(list_documents)
cli.add_command(show)
cli.add_command(export)


if __name__ == "__main__":
    cli(obj={})
