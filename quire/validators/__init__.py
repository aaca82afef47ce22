#!/usr/bin/env python3
"""
validators
----------
Validation tools for content records.

- document: Frontmatter schema checks and Document construction

Usage:
    from quire.validators.document import DocumentValidator
"""
from quire.validators.document import (
    DocumentIssue,
    DocumentValidator,
    ValidationReport,
)

__all__ = ["DocumentIssue", "DocumentValidator", "ValidationReport"]
