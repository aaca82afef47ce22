#!/usr/bin/env python3
"""
document.py
-------------------
Dataclass representing a validated article of the content collection.

A Document is created once per build by the indexer from a RawRecord and
is never modified afterwards. It is what the rendering layer receives:
metadata for listing pages plus the raw markdown body for article pages.

Key Design:
- Immutable: frozen dataclass, read-only mapping for unknown fields
- Forward-compatible: frontmatter fields outside the schema are kept
  in ``extra`` instead of being rejected
- Rendering-agnostic: body stays markdown; conversion to markup is the
  rendering layer's job
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

# --- Local imports ---
from quire.utils.md import extract_excerpt
from quire.utils.txt import compute_metrics


@dataclass(frozen=True)
class Document:
    """
    One validated article.

    Attributes:
        identifier: Unique URL-safe slug
        title: Article title
        publish_date: Publication date, used for ordering
        body: Markdown source (may be empty)
        description: Optional short description
        hero_image_path: Optional image reference (not checked on disk)
        updated_date: Optional date of the last revision
        draft: Whether the article is unpublished
        tags: Tag names, in frontmatter order
        extra: Frontmatter fields outside the schema
        source_path: File the article was loaded from
        offset: Sub-document position within the file

    Examples:
        >>> doc = collection.by_identifier("hello-world")
        >>> doc.publish_date.isoformat()
        '2024-01-01'
    """

    identifier: str
    title: str
    publish_date: date
    body: str = ""
    description: Optional[str] = None
    hero_image_path: Optional[str] = None
    updated_date: Optional[date] = None
    draft: bool = False
    tags: Tuple[str, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)
    source_path: Optional[Path] = None
    offset: int = 0

    def __post_init__(self) -> None:
        if not self.identifier:
            raise ValueError("identifier must not be empty")
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))
        object.__setattr__(self, "tags", tuple(self.tags))

    # ---- Derived values ----
    @property
    def word_count(self) -> int:
        """Number of words in the body."""
        return compute_metrics(self.body)[0]

    @property
    def reading_time(self) -> float:
        """Estimated reading time in minutes."""
        return compute_metrics(self.body)[1]

    @property
    def summary(self) -> str:
        """Description if given, otherwise the first paragraph of the body."""
        if self.description:
            return self.description
        return extract_excerpt(self.body)

    # ---- Serialization ----
    def to_dict(self, include_body: bool = False) -> Dict[str, Any]:
        """
        Convert to a JSON-serializable dictionary.

        Args:
            include_body: Include the markdown body

        Returns:
            Dictionary with ISO-formatted dates
        """
        data: Dict[str, Any] = {
            "identifier": self.identifier,
            "title": self.title,
            "description": self.description,
            "publishDate": self.publish_date.isoformat(),
            "updatedDate": self.updated_date.isoformat() if self.updated_date else None,
            "heroImage": self.hero_image_path,
            "draft": self.draft,
            "tags": list(self.tags),
            "summary": self.summary,
            "wordCount": self.word_count,
            "readingTime": round(self.reading_time, 1),
            "source": str(self.source_path) if self.source_path else None,
        }
        if self.extra:
            data["extra"] = dict(self.extra)
        if include_body:
            data["body"] = self.body
        return data
