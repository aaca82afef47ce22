#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Quire content pipeline.

This module defines the hierarchy of exceptions raised while loading
content files and building the document collection.

Exception Hierarchy:
    Exception (built-in)
    ├── LoadError - Content files cannot be read or split
    │   └── MalformedFrontmatterError - Missing fences or unparseable block
    ├── ValidationError - A document fails the metadata schema
    ├── IndexBuildError - The collection cannot be built
    │   ├── DuplicateIdentifierError - Two documents share an identifier
    │   └── CollectionValidationError - Strict build with invalid documents
    └── NotFoundError (LookupError) - Unknown identifier lookup

Structural errors (LoadError, DuplicateIdentifierError) are always fatal.
Validation errors are collected per document and either abort the build
or are reported as skipped documents, depending on the validation policy.

Usage:
    from quire.core.exceptions import LoadError, ValidationError

    try:
        collection = build_collection(content_dir)
    except LoadError as e:
        logger.error(f"Broken content source: {e}")
    except IndexBuildError as e:
        logger.error(f"Collection build failed: {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional, Sequence


def format_location(
    source_path: Optional[Path], offset: Optional[int] = 0, is_split: bool = False
) -> str:
    """
    Format 'path' or 'path [document N]' for messages.

    The sub-document number is shown for every document of a split file,
    the first included, and for any non-zero offset.
    """
    if source_path is None:
        return "<unknown source>"
    if is_split or offset:
        return f"{source_path} [document {(offset or 0) + 1}]"
    return str(source_path)


class LoadError(Exception):
    """
    Base exception for content loading failures.

    Raised when the content root or one of its files cannot be read:
    - Content root is a file instead of a directory
    - File cannot be opened or decoded as text

    Attributes:
        source_path: File (or directory) that failed to load

    Examples:
        >>> raise LoadError("Content root is not a directory", Path("posts.md"))
    """

    def __init__(self, message: str, source_path: Optional[Path] = None) -> None:
        self.message = message
        self.source_path = source_path
        if source_path is not None:
            message = f"{source_path}: {message}"
        super().__init__(message)


class MalformedFrontmatterError(LoadError):
    """
    Exception for frontmatter blocks that cannot be parsed.

    Raised when a document (or sub-document of a multi-document file):
    - Does not open with a '---' fence
    - Never closes its frontmatter with a second '---' fence
    - Holds frontmatter that is not a key/value mapping

    Attributes:
        source_path: File containing the broken document
        offset: Zero-based position of the sub-document within the file
        is_split: Whether the file held several documents
        reason: Short description of the problem

    Examples:
        >>> raise MalformedFrontmatterError("closing fence not found", Path("a.md"), 0)
    """

    def __init__(
        self, reason: str, source_path: Path, offset: int = 0, is_split: bool = False
    ) -> None:
        self.reason = reason
        self.offset = offset
        self.is_split = is_split
        Exception.__init__(self, f"{format_location(source_path, offset, is_split)}: {reason}")
        self.message = reason
        self.source_path = source_path


class ValidationError(Exception):
    """
    Exception for documents that fail metadata validation.

    Raised when a parsed record cannot become a Document:
    - Missing or empty required field (title, publishDate)
    - Date that is not a YYYY-MM-DD calendar date
    - Field of the wrong shape (draft, tags)
    - No usable identifier

    Attributes:
        field: Canonical name of the first offending field
        source_path: File the record was loaded from
        offset: Sub-document position within the file
        is_split: Whether the file held several documents
        message: Human-readable description

    Examples:
        >>> raise ValidationError("publishDate", Path("a.md"), 0, "not a YYYY-MM-DD date")
    """

    def __init__(
        self,
        field: str,
        source_path: Optional[Path] = None,
        offset: int = 0,
        message: str = "",
        is_split: bool = False,
    ) -> None:
        self.field = field
        self.source_path = source_path
        self.offset = offset
        self.is_split = is_split
        self.message = message or f"Required field '{field}' missing or empty"
        super().__init__(
            f"{format_location(source_path, offset, is_split)}: {self.field}: {self.message}"
        )


class IndexBuildError(Exception):
    """
    Base exception for collection build failures.

    Catch this to handle any failure of the indexing stage, or catch a
    subclass for more granular handling.

    See Also:
        DuplicateIdentifierError, CollectionValidationError
    """

    pass


class DuplicateIdentifierError(IndexBuildError):
    """
    Exception for two records resolving to the same identifier.

    This is a structural integrity violation: the whole build aborts,
    no document is silently overwritten.

    Attributes:
        identifier: The contested identifier
        sources: Locations of the conflicting records

    Examples:
        >>> raise DuplicateIdentifierError("hello-world", ["a/hello-world.md", "b/hello-world.md"])
    """

    def __init__(self, identifier: str, sources: Sequence[str] = ()) -> None:
        self.identifier = identifier
        self.sources = list(sources)
        message = f"Duplicate identifier '{identifier}'"
        if self.sources:
            message += f" (from {', '.join(self.sources)})"
        super().__init__(message)


class CollectionValidationError(IndexBuildError, ValidationError):
    """
    Exception for a strict build that found invalid documents.

    Carries every collected ValidationError. The field, source_path and
    offset attributes mirror the first error so callers can treat it as
    a plain ValidationError.
    """

    def __init__(self, errors: List[ValidationError]) -> None:
        self.errors = list(errors)
        first = self.errors[0]
        self.field = first.field
        self.source_path = first.source_path
        self.offset = first.offset
        self.is_split = first.is_split
        self.message = first.message
        lines = [f"{len(self.errors)} document(s) failed validation:"]
        lines.extend(f"  - {error}" for error in self.errors)
        Exception.__init__(self, "\n".join(lines))


class NotFoundError(LookupError):
    """
    Exception for lookups of identifiers absent from the collection.

    Attributes:
        identifier: The identifier that was requested
    """

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"No document with identifier '{identifier}'")
