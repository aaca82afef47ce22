"""
Tests for loader and indexer configuration.
"""
import pytest

from quire.core.config import (
    DEFAULT_PATTERNS,
    DOCUMENT_SEPARATOR,
    IndexerConfig,
    LoaderConfig,
    ValidationPolicy,
)


class TestLoaderConfig:
    """Tests for LoaderConfig."""

    def test_defaults(self):
        config = LoaderConfig()
        assert config.patterns == DEFAULT_PATTERNS
        assert config.separator == DOCUMENT_SEPARATOR
        assert config.encoding == "utf-8"

    def test_empty_patterns_rejected(self):
        with pytest.raises(ValueError, match="patterns"):
            LoaderConfig(patterns=())

    def test_blank_separator_rejected(self):
        with pytest.raises(ValueError, match="blank"):
            LoaderConfig(separator="  ")

    def test_fence_separator_rejected(self):
        """The frontmatter fence cannot double as the separator."""
        with pytest.raises(ValueError, match="fence"):
            LoaderConfig(separator="---")

    def test_frozen(self):
        config = LoaderConfig()
        with pytest.raises(AttributeError):
            config.encoding = "latin-1"


class TestIndexerConfig:
    """Tests for IndexerConfig."""

    def test_defaults(self):
        """Strict policy, drafts included."""
        config = IndexerConfig()
        assert config.policy is ValidationPolicy.STRICT
        assert config.include_drafts is True

    def test_string_policy_coerced(self):
        assert IndexerConfig(policy="skip").policy is ValidationPolicy.SKIP

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValueError, match="Unknown validation policy"):
            IndexerConfig(policy="lenient")
