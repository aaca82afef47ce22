"""
Build Commands
--------------

Commands for building and checking the content collection.

Commands:
    - build: Load and index the collection, print a summary
    - validate: Report every issue of every document without aborting

Exit status is 1 whenever the build fails or validation finds errors.
Documents skipped with --skip-invalid are listed as warnings and do not
change the exit status.
"""
from __future__ import annotations

import click
from collections import defaultdict
from pathlib import Path
from typing import Dict, List

from quire.core.cli import BuildStats
from quire.core.cli_options import exclude_drafts_option, skip_invalid_option
from quire.core.config import IndexerConfig, LoaderConfig, ValidationPolicy
from quire.core.exceptions import LoadError
from quire.core.logging_manager import QuireLogger, handle_cli_error
from quire.pipeline.cli.context import echo_skipped
from quire.pipeline.indexer import build as build_index
from quire.pipeline.loader import load_all, load_file
from quire.utils.fs import find_content_files
from quire.utils.slugify import derive_identifier
from quire.validators.document import DocumentValidator, ValidationReport


@click.command()
@skip_invalid_option
@exclude_drafts_option
@click.pass_context
def build(ctx: click.Context, skip_invalid: bool, exclude_drafts: bool) -> None:
    """
    Load the content directory and build the collection.

    Structural problems (broken frontmatter, duplicate identifiers) always
    abort. Invalid metadata aborts too unless --skip-invalid is given.
    """
    logger: QuireLogger = ctx.obj["logger"]
    content_dir: Path = ctx.obj["content_dir"]
    stats = BuildStats()

    click.echo(f"📚 Building collection from {content_dir}...")

    try:
        records = list(load_all(content_dir, LoaderConfig(), logger))
        stats.records_loaded = len(records)
        stats.files_processed = len({record.source_path for record in records})

        config = IndexerConfig(
            policy=ValidationPolicy.SKIP if skip_invalid else ValidationPolicy.STRICT,
            include_drafts=not exclude_drafts,
        )
        collection = build_index(records, config, logger)
    except Exception as e:
        handle_cli_error(ctx, e, "build", additional_context={"content_dir": str(content_dir)})
        return

    stats.documents_indexed = len(collection)
    stats.documents_skipped = len(collection.skipped)
    stats.drafts_excluded = collection.drafts_excluded

    click.echo("\n✅ Build complete:")
    click.echo(f"  Files processed: {stats.files_processed}")
    click.echo(f"  Documents indexed: {stats.documents_indexed}")
    if stats.documents_skipped:
        click.echo(f"  Documents skipped: {stats.documents_skipped}")
    if stats.drafts_excluded:
        click.echo(f"  Drafts excluded: {stats.drafts_excluded}")
    click.echo(f"  Duration: {stats.duration():.2f}s")
    echo_skipped(collection)

    logger.log_operation("build_command", stats.to_dict())


@click.command()
@click.option("--warnings/--no-warnings", default=True, help="Show warnings as well as errors")
@click.pass_context
def validate(ctx: click.Context, warnings: bool) -> None:
    """
    Check every document and report all issues.

    Unlike build, validation continues past broken files so that one run
    lists every problem of the content directory.
    """
    logger: QuireLogger = ctx.obj["logger"]
    content_dir: Path = ctx.obj["content_dir"]
    loader_config = LoaderConfig()
    validator = DocumentValidator()
    report = ValidationReport()
    structural: List[str] = []
    identifiers: Dict[str, List[str]] = defaultdict(list)

    click.echo(f"🔍 Validating {content_dir}...")

    try:
        files = find_content_files(content_dir, loader_config.patterns)
        for file_path in files:
            try:
                records = list(load_file(file_path, loader_config, logger))
            except LoadError as e:
                structural.append(str(e))
                continue

            for record in records:
                identifier = derive_identifier(
                    record.source_path, record.offset, record.frontmatter.get("title")
                )
                if identifier:
                    identifiers[identifier].append(record.location)
                report.add_issues(validator.check(record, identifier))
    except Exception as e:
        handle_cli_error(ctx, e, "validate", additional_context={"content_dir": str(content_dir)})
        return

    for identifier, locations in identifiers.items():
        if len(locations) > 1:
            structural.append(
                f"Duplicate identifier '{identifier}' (from {', '.join(locations)})"
            )

    for message in structural:
        click.echo(f"  ❌ {message}")
    for issue in report.issues:
        if issue.severity == "warning" and not warnings:
            continue
        icon = "❌" if issue.severity == "error" else "⚠️ "
        click.echo(f"  {icon} {issue.location}: {issue.field_name}: {issue.message}")

    click.echo(
        f"\n{report.records_checked} documents checked, "
        f"{report.total_errors + len(structural)} errors, "
        f"{report.total_warnings} warnings"
    )
    logger.log_operation(
        "validate",
        {
            "records": report.records_checked,
            "errors": report.total_errors,
            "structural": len(structural),
            "warnings": report.total_warnings,
        },
    )

    if report.has_errors or structural:
        ctx.exit(1)
    click.echo("✅ All documents valid")
