#!/usr/bin/env python3
"""
loader.py
---------
First stage of the pipeline: content files → RawRecords.

Walks a content root, reads every source file, splits files that bundle
several articles on the document separator and parses each sub-document
into a frontmatter mapping and a body.

The split is a pure text step performed before any frontmatter parsing,
so a sub-document goes through exactly the same code as a whole file.

Records are produced lazily in traversal order (sorted paths). Ordering
of the final collection is the indexer's job.

Usage:
    from quire.pipeline.loader import load_all

    for record in load_all(Path("content")):
        print(record.location, record.frontmatter.get("title"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Iterator, Optional

# --- Local imports ---
from quire.core.config import LoaderConfig
from quire.core.exceptions import LoadError, MalformedFrontmatterError
from quire.core.logging_manager import QuireLogger, safe_logger
from quire.dataclasses.raw_record import RawRecord
from quire.utils.fs import find_content_files
from quire.utils.md import (
    FrontmatterSyntaxError,
    parse_frontmatter,
    split_documents,
    split_frontmatter,
)


def parse_document(text: str, source_path: Path, offset: int = 0, is_split: bool = False) -> RawRecord:
    """
    Parse one (sub-)document into a RawRecord.

    Args:
        text: Document text starting with a frontmatter block
        source_path: File the text came from
        offset: Zero-based sub-document position within the file
        is_split: Whether the file held several documents

    Returns:
        RawRecord with frontmatter mapping and stripped body

    Raises:
        MalformedFrontmatterError: If fences are missing or the block
            is not a key/value mapping
    """
    try:
        frontmatter_text, body = split_frontmatter(text)
        frontmatter = parse_frontmatter(frontmatter_text)
    except FrontmatterSyntaxError as e:
        raise MalformedFrontmatterError(str(e), source_path, offset, is_split) from e

    return RawRecord(
        source_path=source_path,
        offset=offset,
        frontmatter=frontmatter,
        body=body,
        is_split=is_split,
    )


def load_file(
    file_path: Path,
    config: Optional[LoaderConfig] = None,
    logger: Optional[QuireLogger] = None,
) -> Iterator[RawRecord]:
    """
    Load every document of a single file.

    Args:
        file_path: Source file
        config: Loader settings (defaults when None)
        logger: Optional logger

    Yields:
        One RawRecord per sub-document (one for a plain file)

    Raises:
        LoadError: If the file cannot be read or decoded
        MalformedFrontmatterError: If a sub-document's frontmatter is broken
    """
    config = config or LoaderConfig()
    log = safe_logger(logger)

    try:
        # Read bytes so bodies keep their original line endings
        content = file_path.read_bytes().decode(config.encoding)
    except UnicodeDecodeError as e:
        raise LoadError(f"cannot decode as {config.encoding}: {e.reason}", file_path) from e
    except OSError as e:
        raise LoadError(f"cannot read file: {e.strerror or e}", file_path) from e

    chunks = split_documents(content, config.separator)
    if not chunks:
        # Empty or whitespace-only file still has to carry frontmatter
        chunks = [content]
    is_split = len(chunks) > 1

    log.log_debug(f"Read {file_path}", {"documents": len(chunks)})

    for offset, chunk in enumerate(chunks):
        yield parse_document(chunk, file_path, offset, is_split)


def load_all(
    content_root: Path,
    config: Optional[LoaderConfig] = None,
    logger: Optional[QuireLogger] = None,
) -> Iterator[RawRecord]:
    """
    Load every document under a content root.

    A missing root yields nothing (an empty site is valid).

    Args:
        content_root: Directory holding content files
        config: Loader settings (defaults when None)
        logger: Optional logger

    Yields:
        RawRecords in traversal order

    Raises:
        LoadError: If the root is not a directory or a file is unreadable
        MalformedFrontmatterError: On broken frontmatter, naming file and offset
    """
    config = config or LoaderConfig()
    log = safe_logger(logger)
    content_root = Path(content_root)

    if content_root.exists() and not content_root.is_dir():
        raise LoadError("content root is not a directory", content_root)

    files = find_content_files(content_root, config.patterns)
    log.log_operation(
        "load_all",
        {"content_root": str(content_root), "files": len(files)},
    )

    for file_path in files:
        yield from load_file(file_path, config, logger)
