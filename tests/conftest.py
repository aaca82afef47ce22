"""
conftest.py
-----------
Shared pytest fixtures for Quire tests.

Provides fixtures for:
- Temporary content directories
- Sample markdown articles (single and multi-document)
- A helper to write articles with given frontmatter
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from quire.core.config import DOCUMENT_SEPARATOR


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def content_dir(tmp_dir):
    """Empty content root inside the temporary directory."""
    path = tmp_dir / "content"
    path.mkdir()
    return path


# ----- Sample Markdown Content Fixtures -----

@pytest.fixture
def minimal_post_content():
    """Minimal valid article with only the required fields."""
    return """---
title: "Test"
pubDate: "2024-01-01"
---

Body of the test article.
"""


@pytest.fixture
def full_post_content():
    """Article with every schema field and an unknown field."""
    return """---
title: "Understanding the GIL"
description: "Why Python threads don't run bytecode in parallel"
pubDate: "2024-06-19"
updatedDate: "2024-07-02"
heroImage: "/images/gil.png"
draft: false
tags: [python, concurrency]
author: "Jordan"
---

# Understanding the GIL

The *global interpreter lock* protects interpreter state.

## Q&A

Does it affect I/O-bound code? Much less.
"""


@pytest.fixture
def multi_post_content():
    """Three articles bundled in one file."""
    return f"""---
title: "Part One"
pubDate: "2024-01-01"
---

First part.
{DOCUMENT_SEPARATOR}
---
title: "Part Two"
pubDate: "2024-02-01"
---

Second part.
{DOCUMENT_SEPARATOR}
---
title: "Part Three"
pubDate: "2024-03-01"
---

Third part.
"""


# ----- Factory Fixtures -----

def render_post(fields, body="Body text."):
    """Render frontmatter fields (dict of raw YAML values) and a body."""
    lines = ["---"]
    lines.extend(f"{key}: {value}" for key, value in fields.items())
    lines.append("---")
    lines.append("")
    lines.append(body)
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_post(content_dir):
    """
    Factory writing an article into the content directory.

    Usage:
        path = write_post("hello.md", title="Hello", pubDate="2024-01-01")
    """
    def _write(name, body="Body text.", **fields):
        path = content_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_post(fields, body), encoding="utf-8")
        return path

    return _write
