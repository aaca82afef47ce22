"""
Quire
=====

Content-collection loader and indexer for a static blog.

Turns a directory of markdown articles with YAML frontmatter into an
ordered, immutable collection that page templates can list and look up.

Main Components:
    - pipeline: Loader (files → records), indexer (records → collection),
      JSON manifest export and the ``quire`` CLI
    - validators: Frontmatter schema checks
    - dataclasses: RawRecord and Document
    - core: Exceptions, logging, configuration, paths
    - utils: Markdown splitting, slugs, filesystem and text helpers

Example Usage:
    >>> from quire import build_collection
    >>> collection = build_collection(Path("content"))
    >>> for post in collection.all():
    ...     print(post.publish_date, post.title)
"""

__version__ = "1.0.0"

from quire.core.config import IndexerConfig, LoaderConfig, ValidationPolicy
from quire.core.exceptions import (
    CollectionValidationError,
    DuplicateIdentifierError,
    IndexBuildError,
    LoadError,
    MalformedFrontmatterError,
    NotFoundError,
    ValidationError,
)
from quire.dataclasses import Document, RawRecord
from quire.pipeline import Collection, build, build_collection, load_all

__all__ = [
    "Collection",
    "CollectionValidationError",
    "Document",
    "DuplicateIdentifierError",
    "IndexBuildError",
    "IndexerConfig",
    "LoadError",
    "LoaderConfig",
    "MalformedFrontmatterError",
    "NotFoundError",
    "RawRecord",
    "ValidationError",
    "ValidationPolicy",
    "build",
    "build_collection",
    "load_all",
]
