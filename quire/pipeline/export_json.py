#!/usr/bin/env python3
"""
export_json.py
--------------
Export a built collection as a JSON manifest for the rendering layer.

The manifest is a machine-generated file listing every document in
collection order with its metadata (ISO dates, tags, summary, reading
time). Bodies are included only on request, since article pages usually
read the markdown source directly.

Manifest layout:
    {
      "generated": "2024-06-01T12:00:00",
      "count": 2,
      "tags": {"python": 2},
      "documents": [{"identifier": "...", "title": "...", ...}, ...]
    }

The file is only rewritten when its content changes, apart from the
generation timestamp, so repeated builds don't churn version control.

Usage:
    from quire.pipeline.export_json import export_manifest

    status = export_manifest(collection, Path("dist/collection.json"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from quire.core.logging_manager import QuireLogger, safe_logger
from quire.pipeline.indexer import Collection
from quire.utils.fs import write_if_changed


def build_manifest(collection: Collection, include_body: bool = False) -> Dict[str, Any]:
    """
    Manifest dictionary of a collection, without the timestamp.

    Args:
        collection: Built collection
        include_body: Include markdown bodies

    Returns:
        JSON-serializable dictionary
    """
    return {
        "count": len(collection),
        "tags": collection.tags(),
        "documents": [
            document.to_dict(include_body=include_body) for document in collection.all()
        ],
    }


def _previous_timestamp(path: Path, manifest: Dict[str, Any]) -> Optional[str]:
    """Timestamp of an existing manifest whose content is unchanged."""
    if not path.exists():
        return None
    try:
        existing = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return None
    if not isinstance(existing, dict):
        return None
    generated = existing.pop("generated", None)
    return generated if existing == manifest else None


def export_manifest(
    collection: Collection,
    output_path: Path,
    include_body: bool = False,
    logger: Optional[QuireLogger] = None,
) -> str:
    """
    Write the collection manifest to disk.

    Args:
        collection: Built collection
        output_path: Target JSON file
        include_body: Include markdown bodies
        logger: Optional logger

    Returns:
        Status string: "created", "updated", or "unchanged"
    """
    manifest = build_manifest(collection, include_body)
    generated = _previous_timestamp(output_path, manifest) or datetime.now().isoformat(
        timespec="seconds"
    )

    content = json.dumps(
        {"generated": generated, **manifest}, indent=2, ensure_ascii=False
    ) + "\n"
    status = write_if_changed(output_path, content)

    safe_logger(logger).log_operation(
        "export_manifest",
        {"output": str(output_path), "documents": len(collection), "status": status},
    )
    return status
