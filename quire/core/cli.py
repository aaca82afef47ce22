#!/usr/bin/env python3
"""
cli.py
------
Logger setup and run statistics shared by the ``quire`` commands.

Usage:
    from quire.core.cli import setup_logger, BuildStats

    logger = setup_logger(log_dir, "quire")
    stats = BuildStats(records_loaded=12)
    click.echo(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from quire.core.logging_manager import QuireLogger


def setup_logger(log_dir: Path, component_name: str) -> QuireLogger:
    """
    Logger for a CLI run, writing under ``<log_dir>/operations``.

    Args:
        log_dir: Base log directory (``--log-dir``, defaults to paths.LOG_DIR)
        component_name: Log file name, e.g. 'quire'
    """
    return QuireLogger(log_dir / "operations", component_name=component_name)


@dataclass
class OperationStats:
    """
    Counters common to every command.

    All counter fields are non-negative integers; duration is measured
    from construction and frozen on first read.
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now, repr=False)
    _elapsed: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        for name in self._counters():
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def _counters(self) -> List[str]:
        return [f.name for f in fields(self) if f.type in ("int", int)]

    def duration(self) -> float:
        """Seconds since the run started."""
        if self._elapsed is None:
            self._elapsed = (datetime.now() - self.start_time).total_seconds()
        return self._elapsed

    def _summary_parts(self) -> List[str]:
        return [f"{self.files_processed} files processed", f"{self.errors} errors"]

    def summary(self) -> str:
        """One-line summary for the terminal."""
        return ", ".join(self._summary_parts() + [f"{self.duration():.2f}s"])

    def to_dict(self) -> Dict[str, Any]:
        """Counters and duration, for log_operation."""
        data = {name: value for name, value in asdict(self).items() if name in self._counters()}
        data["duration"] = self.duration()
        return data


@dataclass
class BuildStats(OperationStats):
    """
    Counters of a collection build.

    Attributes:
        records_loaded: RawRecords produced by the loader
        documents_indexed: Documents in the final collection
        documents_skipped: Invalid documents excluded (--skip-invalid)
        drafts_excluded: Drafts left out (--exclude-drafts)
    """
    records_loaded: int = 0
    documents_indexed: int = 0
    documents_skipped: int = 0
    drafts_excluded: int = 0

    def _summary_parts(self) -> List[str]:
        parts = [
            f"{self.files_processed} files processed",
            f"{self.records_loaded} records loaded",
            f"{self.documents_indexed} indexed",
        ]
        if self.documents_skipped:
            parts.append(f"{self.documents_skipped} skipped")
        if self.drafts_excluded:
            parts.append(f"{self.drafts_excluded} drafts excluded")
        parts.append(f"{self.errors} errors")
        return parts
