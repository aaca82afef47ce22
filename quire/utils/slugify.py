#!/usr/bin/env python3
"""
slugify.py
----------
String slugification utilities for document identifiers.

Converts filenames and titles into slugs used both for lookups and, by
the rendering layer, for routes. Letters and digits of every script are
kept, so CJK filenames give distinct identifiers.

Key Features:
    - Lowercase transformation
    - Accent/diacritic normalization (Café → cafe)
    - Non-Latin letters kept (装饰器详解 stays as is)
    - Apostrophe removal, punctuation and whitespace to hyphens
    - Maximum length enforcement

Usage:
    from quire.utils.slugify import slugify, derive_identifier

    slugify("Hello, World!")  # "hello-world"
    derive_identifier(Path("posts/My Post.md"), offset=1)  # "my-post-2"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
import unicodedata
from pathlib import Path
from typing import Optional


def _strip_latin_accents(text: str) -> str:
    """
    Remove accents from Latin letters only.

    Marks on other scripts are kept (が must not become か) and Hangul
    syllables are recomposed.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    kept = []
    base_is_ascii = False
    for char in decomposed:
        if unicodedata.combining(char):
            if base_is_ascii:
                continue
        else:
            base_is_ascii = char.isascii()
        kept.append(char)
    return unicodedata.normalize("NFC", "".join(kept))


def slugify(text: str, max_length: int = 200) -> str:
    """
    Convert text to a slug.

    Applies transformations:
    - Lowercase
    - Drop combining accents (Café → cafe), keep other scripts intact
    - Remove apostrophes (author's → authors)
    - Replace ampersands with 'and'
    - Replace whitespace, underscores and punctuation with hyphens
    - Collapse multiple hyphens

    Args:
        text: Input text to slugify
        max_length: Maximum slug length (default 200)

    Returns:
        Slugified string, possibly empty

    Examples:
        >>> slugify("Café Society")
        'cafe-society'
        >>> slugify("Q&A: Python's GIL")
        'qanda-pythons-gil'
        >>> slugify("2024_01_15 release.notes")
        '2024-01-15-release-notes'
        >>> slugify("Python装饰器 详解")
        'python装饰器-详解'
    """
    if not text:
        return ""

    text = _strip_latin_accents(text)

    text = text.lower()

    text = text.replace("'", "")
    text = text.replace("&", "and")

    # Everything that is not a letter or digit becomes a hyphen
    text = re.sub(r"[\W_]+", "-", text)

    text = text.strip("-")

    if len(text) > max_length:
        text = text[:max_length].rstrip("-")

    return text


def derive_identifier(
    source_path: Path,
    offset: int = 0,
    title: Optional[str] = None,
) -> str:
    """
    Derive a document identifier from its source file.

    The slug of the filename stem is used. The Nth sub-document of a split
    file (N >= 2, i.e. offset >= 1) gets a numeric suffix ``-N``. When the
    stem has no usable characters the title slug is used instead.

    Args:
        source_path: File the document was loaded from
        offset: Zero-based sub-document position within the file
        title: Optional title used as a fallback

    Returns:
        Identifier, or an empty string if neither stem nor title yields one

    Examples:
        >>> derive_identifier(Path("content/Hello World.md"))
        'hello-world'
        >>> derive_identifier(Path("content/digest.md"), offset=2)
        'digest-3'
        >>> derive_identifier(Path("content/!!!.md"), title="Launch Notes")
        'launch-notes'
    """
    base = slugify(source_path.stem)
    if not base and isinstance(title, str):
        base = slugify(title)
    if not base:
        return ""
    if offset >= 1:
        return f"{base}-{offset + 1}"
    return base
