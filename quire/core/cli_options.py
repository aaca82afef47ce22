#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for consistent CLI interfaces.

Usage:
    from quire.core.cli_options import verbose_option, content_dir_option

    @cli.command()
    @content_dir_option
    @verbose_option
    def my_command(content_dir, verbose):
        pass
"""
import click
from quire.core.paths import CONTENT_DIR, LOG_DIR, MANIFEST_PATH


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose logging with detailed output"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=str(LOG_DIR),
    help="Directory for log files"
)


# ═══════════════════════════════════════════════════════════════════════════
# CONTENT OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

content_dir_option = click.option(
    "-c", "--content-dir",
    type=click.Path(file_okay=False),
    default=str(CONTENT_DIR),
    show_default=True,
    help="Root directory of the content collection"
)

skip_invalid_option = click.option(
    "--skip-invalid",
    is_flag=True,
    help="Exclude invalid documents instead of aborting the build"
)

exclude_drafts_option = click.option(
    "--exclude-drafts",
    is_flag=True,
    help="Leave documents marked 'draft: true' out of the collection"
)


# ═══════════════════════════════════════════════════════════════════════════
# OUTPUT OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

output_option = click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False),
    default=str(MANIFEST_PATH),
    show_default=True,
    help="Path of the JSON manifest"
)
