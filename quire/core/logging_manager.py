#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for loader, indexer, export and CLI runs.

Every component gets a rotating ``<component>.log`` holding the full
operation trail (file reads, build summaries, skipped documents) and a
shared ``errors.log`` for failures only. Warnings are echoed on stderr so
that skipped documents are visible during a build.

Library code never requires a logger: functions take ``logger=None`` and
call ``safe_logger(logger)``, which falls back to a no-op NullLogger.

Usage:
    from quire.core.logging_manager import QuireLogger, safe_logger

    logger = QuireLogger(Path("logs"), component_name="indexer")
    collection = build(records, logger=logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _with_details(message: str, details: Optional[Dict[str, Any]]) -> str:
    """Append details as compact JSON."""
    if not details:
        return message
    return f"{message}: {json.dumps(details, default=str)}"


class QuireLogger:
    """
    Per-component logger writing rotating files.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Component tag, also the main log's file name
        main_logger: Receives every record
        error_logger: Receives errors only, written to errors.log
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "quire",
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        console_level: int = logging.WARNING,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files (created if missing)
            component_name: e.g. 'loader', 'indexer', 'quire'
            max_bytes: Size at which a log file is rotated
            backup_count: Rotated files kept per log
            console_level: Lowest level echoed on stderr
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._fresh_logger(f"quire.{component_name}", logging.DEBUG)
        self.main_logger.addHandler(
            self._file_handler(self.log_dir / f"{component_name}.log", logging.DEBUG)
        )
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        self.main_logger.addHandler(console)

        self.error_logger = self._fresh_logger(f"quire.{component_name}.errors", logging.ERROR)
        self.error_logger.addHandler(
            self._file_handler(self.log_dir / "errors.log", logging.ERROR)
        )

    @staticmethod
    def _fresh_logger(name: str, level: int) -> logging.Logger:
        """Named logger with its previous handlers detached."""
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
        return logger

    def _file_handler(self, path: Path, level: int) -> RotatingFileHandler:
        handler = RotatingFileHandler(
            path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        return handler

    def close(self) -> None:
        """Flush and detach all handlers so log files are released."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    # ---- Structured records ----
    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Record a completed pipeline step (load_all, build, export_manifest...)."""
        self.main_logger.info(_with_details(f"OPERATION - {operation}", details or {}))

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(_with_details(f"DEBUG - {message}", details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(_with_details(f"INFO - {message}", details))

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.warning(_with_details(f"WARNING - {message}", details))

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Record a failure in errors.log.

        The traceback is included when called while the exception is
        being handled.
        """
        lines = [f"ERROR - {type(error).__name__}: {error}"]
        if context:
            lines.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))
        if sys.exc_info()[0] is not None:
            lines.append(f"Traceback:\n{traceback.format_exc()}")
        self.error_logger.error("\n".join(lines))

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error and return its one-line terminal form.

        Examples:
            >>> logger.log_cli_error(NotFoundError("hello"))
            "❌ NotFoundError: No document with identifier 'hello'"
        """
        self.log_error(error, context or {"source": "cli"})
        return _cli_message(error, show_traceback)


def _cli_message(error: Exception, show_traceback: bool = False) -> str:
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        message += f"\n\n{traceback.format_exc()}"
    return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed CLI command and exit.

    Details go to errors.log; stderr gets one line, plus the traceback
    with ``--verbose``. Never returns.

    Args:
        ctx: Click context holding 'logger' and 'verbose'
        error: Exception that ended the command
        operation: Command name, e.g. 'build'
        additional_context: Extra fields for the log (content dir, output)
        exit_code: Process exit status
    """
    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(ctx.obj.get("logger")).log_cli_error(
        error, context, show_traceback=ctx.obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """No-op stand-in with the QuireLogger interface."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return _cli_message(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[QuireLogger]) -> QuireLogger:
    """The given logger, or the shared NullLogger when None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
