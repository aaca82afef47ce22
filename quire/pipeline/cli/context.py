"""
Shared helpers for CLI commands.
"""
from __future__ import annotations

import click

from quire.core.config import IndexerConfig, ValidationPolicy
from quire.core.logging_manager import QuireLogger
from quire.pipeline.indexer import Collection, build_collection


def load_collection(
    ctx: click.Context,
    skip_invalid: bool = False,
    exclude_drafts: bool = False,
) -> Collection:
    """
    Build the collection of the content directory given to the CLI group.

    Raises:
        LoadError, IndexBuildError: Left for the command's error handler
    """
    logger: QuireLogger = ctx.obj["logger"]
    config = IndexerConfig(
        policy=ValidationPolicy.SKIP if skip_invalid else ValidationPolicy.STRICT,
        include_drafts=not exclude_drafts,
    )
    return build_collection(ctx.obj["content_dir"], indexer_config=config, logger=logger)


def echo_skipped(collection: Collection) -> None:
    """Print skipped documents as warnings on stderr."""
    if not collection.skipped:
        return
    click.echo(f"\n⚠️  {len(collection.skipped)} document(s) skipped:", err=True)
    for item in collection.skipped:
        click.echo(f"  • {item.error}", err=True)
