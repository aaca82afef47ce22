#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for content discovery and artifact writing.

Functions:
    find_content_files: Discover source files under a content root
    write_if_changed: Write text only when it differs from the file on disk

Usage:
    from quire.utils.fs import find_content_files

    files = find_content_files(Path("content"), ("**/*.md",))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Iterable, List


def find_content_files(directory: Path, patterns: Iterable[str] = ("**/*.md",)) -> List[Path]:
    """
    Find all content files matching any of the patterns.

    Hidden files and files inside hidden directories (``.git``,
    ``.obsidian``...) are ignored. Results are de-duplicated and sorted so
    that traversal order is stable across platforms.

    Args:
        directory: Content root
        patterns: Glob patterns relative to the root

    Returns:
        Sorted list of file paths (empty if the directory does not exist)
    """
    if not directory.exists():
        return []

    found = set()
    for pattern in patterns:
        for path in directory.glob(pattern):
            if not path.is_file():
                continue
            relative = path.relative_to(directory)
            if any(part.startswith(".") for part in relative.parts):
                continue
            found.add(path)
    return sorted(found)


def write_if_changed(path: Path, content: str) -> str:
    """
    Write content to file only if it differs from existing content.

    Args:
        path: Target file path
        content: Content to write

    Returns:
        Status string: "created", "updated", or "unchanged"
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.exists():
        existing = path.read_text(encoding="utf-8")
        if existing == content:
            return "unchanged"
        path.write_text(content, encoding="utf-8")
        return "updated"
    else:
        path.write_text(content, encoding="utf-8")
        return "created"
