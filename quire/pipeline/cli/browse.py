"""
Browse Commands
---------------

Read-only views of the built collection.

Commands:
    - list: One line per document, newest first
    - show: Metadata (and optionally body) of one document
"""
from __future__ import annotations

import click
from typing import Optional

from quire.core.cli_options import exclude_drafts_option, skip_invalid_option
from quire.core.logging_manager import handle_cli_error
from quire.pipeline.cli.context import echo_skipped, load_collection


@click.command("list")
@click.option("-t", "--tag", default=None, help="Only documents with this tag")
@skip_invalid_option
@exclude_drafts_option
@click.pass_context
def list_documents(
    ctx: click.Context,
    tag: Optional[str],
    skip_invalid: bool,
    exclude_drafts: bool,
) -> None:
    """List documents in collection order."""
    try:
        collection = load_collection(ctx, skip_invalid, exclude_drafts)
    except Exception as e:
        handle_cli_error(ctx, e, "list", additional_context={"tag": tag})
        return

    documents = collection.by_tag(tag) if tag else collection.all()
    if not documents:
        click.echo("No documents found")
    for document in documents:
        marker = " (draft)" if document.draft else ""
        click.echo(
            f"{document.publish_date.isoformat()}  {document.identifier}  "
            f"{document.title}{marker}"
        )
    echo_skipped(collection)


@click.command()
@click.argument("identifier")
@click.option("--body/--no-body", default=False, help="Print the markdown body")
@click.pass_context
def show(ctx: click.Context, identifier: str, body: bool) -> None:
    """Show one document by identifier."""
    try:
        collection = load_collection(ctx)
        document = collection.by_identifier(identifier)
    except Exception as e:
        handle_cli_error(ctx, e, "show", additional_context={"identifier": identifier})
        return

    click.echo(f"📄 {document.title}")
    click.echo(f"  Identifier: {document.identifier}")
    click.echo(f"  Published: {document.publish_date.isoformat()}")
    if document.updated_date:
        click.echo(f"  Updated: {document.updated_date.isoformat()}")
    if document.description:
        click.echo(f"  Description: {document.description}")
    if document.hero_image_path:
        click.echo(f"  Hero image: {document.hero_image_path}")
    if document.tags:
        click.echo(f"  Tags: {', '.join(document.tags)}")
    if document.draft:
        click.echo("  Draft: yes")
    click.echo(f"  Words: {document.word_count} (~{max(1, round(document.reading_time))} min)")
    click.echo(f"  Source: {document.source_path}")
    for key, value in document.extra.items():
        click.echo(f"  {key}: {value}")

    if body:
        click.echo()
        click.echo(document.body)
