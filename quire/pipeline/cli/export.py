"""
Export Commands
---------------

Commands:
    - export: Write the JSON manifest consumed by the rendering layer
"""
from __future__ import annotations

import click
from pathlib import Path

from quire.core.cli_options import exclude_drafts_option, output_option, skip_invalid_option
from quire.core.logging_manager import QuireLogger, handle_cli_error
from quire.pipeline.cli.context import echo_skipped, load_collection
from quire.pipeline.export_json import export_manifest


@click.command()
@output_option
@click.option("--include-body", is_flag=True, help="Embed markdown bodies in the manifest")
@skip_invalid_option
@exclude_drafts_option
@click.pass_context
def export(
    ctx: click.Context,
    output: str,
    include_body: bool,
    skip_invalid: bool,
    exclude_drafts: bool,
) -> None:
    """Build the collection and write its JSON manifest."""
    logger: QuireLogger = ctx.obj["logger"]

    try:
        collection = load_collection(ctx, skip_invalid, exclude_drafts)
        status = export_manifest(collection, Path(output), include_body, logger)
    except Exception as e:
        handle_cli_error(ctx, e, "export", additional_context={"output": output})
        return

    click.echo(f"✅ Manifest {status}: {output} ({len(collection)} documents)")
    echo_skipped(collection)
