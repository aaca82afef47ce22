"""
Tests for JSON manifest export.
"""
import json
from pathlib import Path

import pytest

from quire.pipeline.export_json import build_manifest, export_manifest
from quire.pipeline.indexer import build
from quire.dataclasses import RawRecord


@pytest.fixture
def collection():
    return build([
        RawRecord(Path("content/a.md"), 0, {"title": "A", "pubDate": "2024-01-01", "tags": "python"}, "Alpha body."),
        RawRecord(Path("content/b.md"), 0, {"title": "B", "pubDate": "2024-02-01"}, "Beta body."),
    ])


class TestBuildManifest:
    """Tests for build_manifest."""

    def test_layout(self, collection):
        manifest = build_manifest(collection)
        assert manifest["count"] == 2
        assert manifest["tags"] == {"python": 1}
        assert [d["identifier"] for d in manifest["documents"]] == ["b", "a"]
        assert "body" not in manifest["documents"][0]

    def test_include_body(self, collection):
        manifest = build_manifest(collection, include_body=True)
        assert manifest["documents"][1]["body"] == "Alpha body."


class TestExportManifest:
    """Tests for export_manifest."""

    def test_created(self, collection, tmp_dir):
        output = tmp_dir / "dist" / "collection.json"
        assert export_manifest(collection, output) == "created"

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["count"] == 2
        assert "generated" in data
        assert data["documents"][0]["publishDate"] == "2024-02-01"

    def test_unchanged_on_rebuild(self, collection, tmp_dir):
        """Re-exporting identical content keeps the file untouched."""
        output = tmp_dir / "collection.json"
        export_manifest(collection, output)
        before = output.read_text(encoding="utf-8")

        assert export_manifest(collection, output) == "unchanged"
        assert output.read_text(encoding="utf-8") == before

    def test_updated_on_change(self, collection, tmp_dir):
        output = tmp_dir / "collection.json"
        export_manifest(collection, output)
        assert export_manifest(collection, output, include_body=True) == "updated"

    def test_non_ascii_kept(self, tmp_dir):
        collection = build([
            RawRecord(Path("cafe.md"), 0, {"title": "Café", "pubDate": "2024-01-01"}),
        ])
        output = tmp_dir / "collection.json"
        export_manifest(collection, output)
        assert "Café" in output.read_text(encoding="utf-8")
