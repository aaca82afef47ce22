#!/usr/bin/env python3
"""
document.py
-----------
Schema validation for content records.

Checks a RawRecord's frontmatter against the document schema and, when
it passes, converts it into a Document. This is STRUCTURAL validation of
metadata values; duplicate identifiers are a collection-level concern
handled by the indexer.

Validates:
- Required fields (title, publishDate) present and non-empty
- Dates in YYYY-MM-DD form and real calendar dates
- Single-valued fields are not lists or mappings
- draft is a boolean word, tags a string or list of strings
- Unknown fields (warnings only)

Usage:
    from quire.validators.document import DocumentValidator

    validator = DocumentValidator()
    issues = validator.check(record)
    document = validator.to_document(record, "hello-world")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

# --- Local imports ---
from quire.core.exceptions import ValidationError, format_location
from quire.core.validators import DataValidator
from quire.dataclasses.document import Document
from quire.dataclasses.raw_record import RawRecord


# Canonical field name -> accepted frontmatter keys, in lookup order
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "title": ("title",),
    "publishDate": ("pubDate", "publishDate"),
    "updatedDate": ("updatedDate",),
    "description": ("description",),
    "heroImage": ("heroImage", "heroImagePath"),
    "draft": ("draft",),
    "tags": ("tags",),
}

REQUIRED_FIELDS: Tuple[str, ...] = ("title", "publishDate")

KNOWN_KEYS = frozenset(key for keys in FIELD_ALIASES.values() for key in keys)


@dataclass
class DocumentIssue:
    """Represents a validation issue of one record."""

    source_path: Path
    offset: int
    field_name: str
    severity: str  # error, warning
    message: str
    value: Optional[Any] = None
    is_split: bool = False

    @property
    def location(self) -> str:
        return format_location(self.source_path, self.offset, self.is_split)

    def to_error(self) -> ValidationError:
        """Convert an error-level issue into a ValidationError."""
        return ValidationError(
            self.field_name, self.source_path, self.offset, self.message, self.is_split
        )


@dataclass
class ValidationReport:
    """Validation results for a whole content directory."""

    records_checked: int = 0
    records_with_errors: int = 0
    total_errors: int = 0
    total_warnings: int = 0
    issues: List[DocumentIssue] = field(default_factory=list)

    def add_issues(self, issues: List[DocumentIssue]) -> None:
        """Add the issues of one record to the report."""
        self.records_checked += 1
        errors = [i for i in issues if i.severity == "error"]
        if errors:
            self.records_with_errors += 1
        self.total_errors += len(errors)
        self.total_warnings += len(issues) - len(errors)
        self.issues.extend(issues)

    @property
    def has_errors(self) -> bool:
        """Check if any errors were found."""
        return self.total_errors > 0

    @property
    def is_healthy(self) -> bool:
        """Check if every record is valid."""
        return not self.has_errors


class DocumentValidator:
    """Validates record frontmatter and builds Documents."""

    def lookup(self, frontmatter: Dict[str, Any], field_name: str) -> Any:
        """
        Value of a canonical field, trying each accepted key in order.

        Returns:
            The first value found, or None
        """
        for key in FIELD_ALIASES[field_name]:
            if key in frontmatter:
                return frontmatter[key]
        return None

    # --- Field checks ---

    def _check_scalar(self, field_name: str, value: Any) -> Optional[str]:
        try:
            DataValidator.normalize_string(value)
        except ValueError as e:
            return str(e)
        return None

    def _check_date(self, field_name: str, value: Any) -> Optional[str]:
        try:
            DataValidator.normalize_date(value)
        except ValueError as e:
            return str(e)
        return None

    def _check_bool(self, field_name: str, value: Any) -> Optional[str]:
        try:
            DataValidator.normalize_bool(value)
        except ValueError as e:
            return str(e)
        return None

    def _check_list(self, field_name: str, value: Any) -> Optional[str]:
        try:
            DataValidator.normalize_str_list(value)
        except ValueError as e:
            return str(e)
        return None

    def _field_checks(self) -> List[Tuple[str, bool, Callable[[str, Any], Optional[str]]]]:
        """(field, required, check) in reporting order."""
        checks = [
            ("title", self._check_scalar),
            ("publishDate", self._check_date),
            ("updatedDate", self._check_date),
            ("description", self._check_scalar),
            ("heroImage", self._check_scalar),
            ("draft", self._check_bool),
            ("tags", self._check_list),
        ]
        return [(name, name in REQUIRED_FIELDS, checker) for name, checker in checks]

    def check(self, record: RawRecord, identifier: Optional[str] = None) -> List[DocumentIssue]:
        """
        Collect every issue of a record.

        Args:
            record: Parsed record to check
            identifier: Derived identifier; an empty string is an error,
                None skips the identifier check

        Returns:
            Issues in field order (errors and warnings)
        """
        issues: List[DocumentIssue] = []
        frontmatter = record.frontmatter

        for field_name, required, checker in self._field_checks():
            value = self.lookup(frontmatter, field_name)
            if value is None and not required:
                continue
            if value is None or (required and DataValidator.is_blank(value)):
                message = f"Required field '{field_name}' missing or empty"
            elif not required and DataValidator.is_blank(value):
                continue
            else:
                message = checker(field_name, value)
            if message:
                issues.append(DocumentIssue(
                    record.source_path, record.offset, field_name, "error", message, value,
                    is_split=record.is_split,
                ))

        if identifier is not None and not identifier:
            issues.append(DocumentIssue(
                record.source_path, record.offset, "identifier", "error",
                "Cannot derive an identifier from the filename or title",
                is_split=record.is_split,
            ))

        for field_name, keys in FIELD_ALIASES.items():
            present = [key for key in keys if key in frontmatter]
            if len(present) > 1:
                issues.append(DocumentIssue(
                    record.source_path, record.offset, field_name, "warning",
                    f"Both {' and '.join(present)} given; using '{present[0]}'",
                    is_split=record.is_split,
                ))

        unknown = sorted(set(frontmatter) - KNOWN_KEYS)
        if unknown:
            issues.append(DocumentIssue(
                record.source_path, record.offset, "frontmatter", "warning",
                f"Unknown fields kept as extra: {', '.join(unknown)}",
                is_split=record.is_split,
            ))

        return issues

    def to_document(self, record: RawRecord, identifier: str) -> Document:
        """
        Build a Document from a record.

        Args:
            record: Parsed record
            identifier: Identifier assigned by the indexer

        Returns:
            Validated Document

        Raises:
            ValidationError: Naming the first invalid field
        """
        for issue in self.check(record, identifier):
            if issue.severity == "error":
                raise issue.to_error()

        frontmatter = record.frontmatter
        updated = self.lookup(frontmatter, "updatedDate")
        updated_date: Optional[date] = (
            None if DataValidator.is_blank(updated) else DataValidator.normalize_date(updated)
        )

        return Document(
            identifier=identifier,
            title=DataValidator.normalize_string(self.lookup(frontmatter, "title")),
            publish_date=DataValidator.normalize_date(self.lookup(frontmatter, "publishDate")),
            body=record.body,
            description=DataValidator.normalize_string(self.lookup(frontmatter, "description")),
            hero_image_path=DataValidator.normalize_string(self.lookup(frontmatter, "heroImage")),
            updated_date=updated_date,
            draft=self._draft_flag(frontmatter),
            tags=DataValidator.normalize_str_list(self.lookup(frontmatter, "tags")),
            extra={k: v for k, v in frontmatter.items() if k not in KNOWN_KEYS},
            source_path=record.source_path,
            offset=record.offset,
        )

    def _draft_flag(self, frontmatter: Dict[str, Any]) -> bool:
        value = self.lookup(frontmatter, "draft")
        if DataValidator.is_blank(value):
            return False
        return bool(DataValidator.normalize_bool(value))
