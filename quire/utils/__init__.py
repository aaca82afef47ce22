"""
Utilities package for Quire.

This package provides commonly-used utilities organized by domain:
- md: Document splitting, frontmatter extraction and parsing, excerpts
- slugify: Identifier derivation
- fs: Content discovery and artifact writing
- txt: Word count and reading time

Import commonly-used utilities directly from this package:
    from quire.utils import split_frontmatter, slugify

Or import specific modules:
    from quire.utils import md, fs, slugify, txt
"""

# Markdown and YAML utilities
from .md import (
    FrontmatterSyntaxError,
    split_documents,
    split_frontmatter,
    parse_frontmatter,
    extract_excerpt,
)

# Identifier utilities
from .slugify import slugify, derive_identifier

# Filesystem utilities
from .fs import find_content_files, write_if_changed

# Text metrics
from .txt import compute_metrics

__all__ = [
    # Markdown/YAML
    "FrontmatterSyntaxError",
    "split_documents",
    "split_frontmatter",
    "parse_frontmatter",
    "extract_excerpt",
    # Identifiers
    "slugify",
    "derive_identifier",
    # Filesystem
    "find_content_files",
    "write_if_changed",
    # Text
    "compute_metrics",
]
