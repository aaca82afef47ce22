#!/usr/bin/env python3
"""
md.py
-------------------
Markdown-specific utilities for the Quire project.

Provides functions for taking apart Markdown source files with YAML
frontmatter:
- Splitting files that bundle several articles on a separator line
- Strict frontmatter extraction (fences are mandatory)
- Frontmatter parsing into a string-valued mapping
- Plain-text excerpts of a markdown body

This module handles Markdown structure only. Type conversion and schema
checks live in quire.core.validators and quire.validators.document.
"""
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict, List, Tuple

# --- Third-party imports ---
import yaml
from markdown_it import MarkdownIt

# --- Local imports ---
from quire.core.config import FRONTMATTER_FENCE


class FrontmatterSyntaxError(ValueError):
    """Raised by split/parse helpers; the loader adds file and offset."""

    pass


# ----- Multi-document files -----
def split_documents(content: str, separator: str) -> List[str]:
    """
    Split file content into sub-documents on separator lines.

    Lines are split on ``\\n`` only, so form feeds, U+2028 and other
    characters that ``str.splitlines`` treats as breaks stay in the text.
    A separator line is a line whose stripped text equals ``separator``.
    Chunks holding only whitespace (e.g. after a trailing separator) are
    dropped. Content without any separator comes back as a single chunk.

    Args:
        content: Full file content
        separator: Separator line text

    Returns:
        List of sub-document texts, in file order

    Examples:
        >>> split_documents("a\\n<!-- document-break -->\\nb", "<!-- document-break -->")
        ['a', 'b']
        >>> split_documents("", "<!-- document-break -->")
        []
    """
    marker = separator.strip()
    chunks: List[str] = []
    current: List[str] = []

    for line in content.split("\n"):
        if line.strip() == marker:
            chunks.append("\n".join(current))
            current = []
        else:
            current.append(line)
    chunks.append("\n".join(current))

    return [chunk for chunk in chunks if chunk.strip()]


# ----- YAML Frontmatter Parsing -----
def split_frontmatter(content: str) -> Tuple[str, str]:
    """
    Split markdown content into YAML frontmatter and body.

    Expected format:
        ---
        yaml: content
        ---

        Body content here...

    Leading blank lines are ignored; the first non-blank line must be the
    opening fence. A fence is a line holding exactly ``---`` (a trailing
    ``\\r`` is tolerated); indented dashes are body text. The body keeps its
    line endings and every other character as written.

    Args:
        content: Markdown document content

    Returns:
        Tuple of (frontmatter_text, body)
        - frontmatter_text: Text between the fences
        - body: Text after the closing fence, stripped

    Raises:
        FrontmatterSyntaxError: If either fence is missing

    Examples:
        >>> split_frontmatter("---\\ntitle: Hi\\n---\\n\\nBody text")
        ('title: Hi', 'Body text')
    """
    lines = content.split("\n")

    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1

    if start >= len(lines) or not _is_fence(lines[start]):
        raise FrontmatterSyntaxError("opening '---' fence not found")

    frontmatter_end = None
    for i in range(start + 1, len(lines)):
        if _is_fence(lines[i]):
            frontmatter_end = i
            break

    if frontmatter_end is None:
        raise FrontmatterSyntaxError("closing '---' fence not found")

    frontmatter = "\n".join(lines[start + 1 : frontmatter_end])
    body = "\n".join(lines[frontmatter_end + 1 :]).strip()
    return frontmatter, body


def _is_fence(line: str) -> bool:
    return line.rstrip("\r") == FRONTMATTER_FENCE


def parse_frontmatter(text: str) -> Dict[str, Any]:
    """
    Parse a frontmatter block into a mapping.

    Uses the YAML base loader, so every scalar stays a string (quotes are
    stripped, ``2024-01-01`` is not turned into a date). Nested lists and
    mappings are kept as-is. An empty block gives an empty mapping.

    Args:
        text: Frontmatter text without fences

    Returns:
        Mapping of field name to value

    Raises:
        FrontmatterSyntaxError: If the block is not a YAML key/value mapping

    Examples:
        >>> parse_frontmatter('title: "Hello"\\npubDate: 2024-01-01')
        {'title': 'Hello', 'pubDate': '2024-01-01'}
    """
    try:
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise FrontmatterSyntaxError(f"invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontmatterSyntaxError(
            f"frontmatter must be key/value pairs, got {type(data).__name__}"
        )
    return data


# ----- Excerpts -----
_md = MarkdownIt("commonmark")


def extract_excerpt(body: str, max_length: int = 200) -> str:
    """
    Plain text of the first paragraph of a markdown body.

    Headings, code blocks and other non-paragraph blocks are skipped.
    Inline markup is reduced to its text.

    Args:
        body: Markdown text
        max_length: Longest excerpt before truncation with an ellipsis

    Returns:
        Excerpt string, empty if the body has no paragraph

    Examples:
        >>> extract_excerpt("# Title\\n\\nSome *emphasis* here.\\n\\nMore.")
        'Some emphasis here.'
    """
    tokens = _md.parse(body)
    for i, token in enumerate(tokens):
        if token.type != "paragraph_open" or token.level != 0:
            continue
        text = _inline_text(tokens[i + 1].children or [])
        text = " ".join(text.split())
        if len(text) > max_length:
            text = text[:max_length].rstrip() + "..."
        return text
    return ""


def _inline_text(children: List[Any]) -> str:
    """Join inline text children, turning line breaks into spaces."""
    parts = []
    for child in children:
        if child.type in ("text", "code_inline"):
            parts.append(child.content)
        elif child.type in ("softbreak", "hardbreak"):
            parts.append(" ")
    return "".join(parts)

