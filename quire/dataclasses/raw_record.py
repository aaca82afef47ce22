#!/usr/bin/env python3
"""
raw_record.py
-------------------
Dataclass for a parsed-but-unvalidated content unit.

A RawRecord is what the loader hands to the indexer: the location of the
sub-document, its frontmatter mapping and its body text. No field has been
checked against the schema yet.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

# --- Local imports ---
from quire.core.exceptions import format_location


@dataclass(frozen=True)
class RawRecord:
    """
    One frontmatter-plus-body unit read from a source file.

    Attributes:
        source_path: File the record was read from
        offset: Zero-based position of the sub-document within the file
        frontmatter: Field name to value mapping (scalars are strings)
        body: Markdown text after the frontmatter, stripped
        is_split: True when the file held several documents
    """

    source_path: Path
    offset: int
    frontmatter: Dict[str, Any] = field(default_factory=dict, hash=False)
    body: str = ""
    is_split: bool = False

    @property
    def location(self) -> str:
        """Human-readable 'path' or 'path [document N]'."""
        return format_location(self.source_path, self.offset, self.is_split)
