#!/usr/bin/env python3
"""
validators.py
--------------------
Data normalization utilities for frontmatter values.

Frontmatter scalars arrive as strings (quotes already stripped); these
helpers convert them to the Python types of the Document fields. They
raise ValueError with a readable message; callers attach the field name
and source location.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Optional, Tuple

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TRUE_WORDS = frozenset({"true", "yes", "on", "1", 1})
FALSE_WORDS = frozenset({"false", "no", "off", "0", 0})


class DataValidator:
    """Centralized type conversion for frontmatter values."""

    @staticmethod
    def is_blank(value: Any) -> bool:
        """True for None, empty strings and whitespace-only strings."""
        if value is None:
            return True
        return isinstance(value, str) and not value.strip()

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Normalize a scalar string value.

        Args:
            value: Value to normalize

        Returns:
            Stripped string, or None when blank

        Raises:
            ValueError: If value is a list or mapping
        """
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError(f"expected a single value, got {type(value).__name__}")
        value = value.strip()
        return value or None

    @staticmethod
    def normalize_date(value: Any) -> date:
        """
        Parse an ISO-8601 calendar date.

        Only the ``YYYY-MM-DD`` form is accepted; datetimes and other
        notations are rejected.

        Args:
            value: Date string or date object

        Returns:
            date object

        Raises:
            ValueError: If value is not a valid YYYY-MM-DD calendar date

        Examples:
            >>> DataValidator.normalize_date("2024-01-15")
            datetime.date(2024, 1, 15)
        """
        if isinstance(value, datetime):
            raise ValueError(f"expected a date without time, got '{value}'")
        if isinstance(value, date):
            return value
        if not isinstance(value, str) or not ISO_DATE_RE.match(value.strip()):
            raise ValueError(f"'{value}' is not a YYYY-MM-DD date")
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError as e:
            raise ValueError(f"'{value}' is not a valid calendar date") from e

    @staticmethod
    def normalize_bool(value: Any) -> Optional[bool]:
        """
        Interpret a frontmatter flag such as ``draft``.

        Accepts YAML-style words (true/false, yes/no, on/off, 1/0) in any
        case, and real booleans or 0/1 from callers building records by
        hand. None stays None.

        Raises:
            ValueError: For any other value
        """
        if value is None or isinstance(value, bool):
            return value
        if not isinstance(value, (str, int)):
            raise ValueError(f"expected true or false, got {type(value).__name__}")
        key = value.strip().lower() if isinstance(value, str) else value
        if key in TRUE_WORDS:
            return True
        if key in FALSE_WORDS:
            return False
        raise ValueError(f"'{value}' is not a boolean (use true or false)")

    @staticmethod
    def normalize_str_list(value: Any) -> Tuple[str, ...]:
        """
        Normalize a string or list of strings into a tuple.

        A single string may hold comma-separated items.

        Examples:
            >>> DataValidator.normalize_str_list("python, web")
            ('python', 'web')
            >>> DataValidator.normalize_str_list(["python", " web "])
            ('python', 'web')
        """
        if value is None:
            return ()
        if isinstance(value, str):
            items = value.split(",")
        elif isinstance(value, list):
            items = value
        else:
            raise ValueError(f"expected a list of strings, got {type(value).__name__}")

        result = []
        for item in items:
            if not isinstance(item, str):
                raise ValueError(f"list items must be strings, got {type(item).__name__}")
            item = item.strip()
            if item and item not in result:
                result.append(item)
        return tuple(result)
