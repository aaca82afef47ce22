#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the Quire project.

Default locations used by the CLI when no option overrides them. They are
relative to the site root: ``$QUIRE_ROOT`` when set, otherwise the working
directory the command is run from (never the installed package).

    ROOT/
    ├── content/       # Markdown articles (the content collection)
    ├── dist/          # Generated artifacts (JSON manifest)
    └── logs/          # Application logs
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path

ROOT_ENV_VAR = "QUIRE_ROOT"


def project_root() -> Path:
    """
    Determine the site root directory.

    Returns:
        ``$QUIRE_ROOT`` if set and non-empty, else the current directory
    """
    override = os.environ.get(ROOT_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return Path.cwd()


# ----- Project directory -----
ROOT: Path = project_root()

# ---- Content ----
CONTENT_DIR = ROOT / "content"

# ---- Build output ----
DIST_DIR = ROOT / "dist"
MANIFEST_PATH = DIST_DIR / "collection.json"

# ---- Logs ----
LOG_DIR = ROOT / "logs"
