#!/usr/bin/env python3
"""
config.py
---------
Configuration dataclasses for the loading and indexing stages.

Gathers the tunables of each stage in one place so the CLI, tests and
library callers pass a single object instead of loose keyword arguments.

Usage:
    from quire.core.config import IndexerConfig, LoaderConfig, ValidationPolicy

    loader_config = LoaderConfig(patterns=("**/*.md",))
    indexer_config = IndexerConfig(policy=ValidationPolicy.SKIP)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


# Line that separates articles bundled back-to-back in one file
DOCUMENT_SEPARATOR = "<!-- document-break -->"

# Line that opens and closes a frontmatter block
FRONTMATTER_FENCE = "---"

DEFAULT_PATTERNS: Tuple[str, ...] = ("**/*.md", "**/*.mdx")


class ValidationPolicy(str, Enum):
    """What the indexer does with documents that fail validation."""

    STRICT = "strict"  # abort the build listing every invalid document
    SKIP = "skip"  # exclude invalid documents and report them


@dataclass(frozen=True)
class LoaderConfig:
    """
    Settings for content discovery and parsing.

    Attributes:
        patterns: Glob patterns, relative to the content root
        separator: Line splitting a file into several documents
        encoding: Text encoding of content files
    """

    patterns: Tuple[str, ...] = DEFAULT_PATTERNS
    separator: str = DOCUMENT_SEPARATOR
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate configuration on initialization."""
        if not self.patterns:
            raise ValueError("patterns must contain at least one glob pattern")
        if not self.separator.strip():
            raise ValueError("separator must not be blank")
        if self.separator.strip() == FRONTMATTER_FENCE:
            raise ValueError(
                f"separator cannot be the frontmatter fence '{FRONTMATTER_FENCE}'"
            )


@dataclass(frozen=True)
class IndexerConfig:
    """
    Settings for validation and collection building.

    Attributes:
        policy: Handling of invalid documents
        include_drafts: Keep documents flagged ``draft: true``
    """

    policy: ValidationPolicy = ValidationPolicy.STRICT
    include_drafts: bool = True

    def __post_init__(self) -> None:
        """Coerce string policies ('strict', 'skip') to the enum."""
        if not isinstance(self.policy, ValidationPolicy):
            try:
                object.__setattr__(self, "policy", ValidationPolicy(self.policy))
            except ValueError as e:
                raise ValueError(
                    f"Unknown validation policy '{self.policy}', "
                    f"expected one of: {', '.join(p.value for p in ValidationPolicy)}"
                ) from e
