"""
test_fs_utils.py
----------------
Unit tests for filesystem utilities.
"""
from quire.utils.fs import find_content_files, write_if_changed


class TestFindContentFiles:
    """Test find_content_files function."""

    def test_missing_directory(self, tmp_dir):
        assert find_content_files(tmp_dir / "nope") == []

    def test_sorted_recursive(self, tmp_dir):
        (tmp_dir / "b.md").write_text("x")
        (tmp_dir / "a.md").write_text("x")
        (tmp_dir / "sub").mkdir()
        (tmp_dir / "sub" / "c.md").write_text("x")

        files = find_content_files(tmp_dir)
        assert [p.relative_to(tmp_dir).as_posix() for p in files] == ["a.md", "b.md", "sub/c.md"]

    def test_non_matching_ignored(self, tmp_dir):
        (tmp_dir / "a.md").write_text("x")
        (tmp_dir / "notes.txt").write_text("x")
        assert [p.name for p in find_content_files(tmp_dir)] == ["a.md"]

    def test_hidden_paths_skipped(self, tmp_dir):
        (tmp_dir / ".draft.md").write_text("x")
        (tmp_dir / ".obsidian").mkdir()
        (tmp_dir / ".obsidian" / "a.md").write_text("x")
        assert find_content_files(tmp_dir) == []

    def test_overlapping_patterns_deduplicated(self, tmp_dir):
        (tmp_dir / "a.md").write_text("x")
        files = find_content_files(tmp_dir, ("*.md", "**/*.md"))
        assert len(files) == 1

    def test_multiple_patterns(self, tmp_dir):
        (tmp_dir / "a.md").write_text("x")
        (tmp_dir / "b.mdx").write_text("x")
        files = find_content_files(tmp_dir, ("**/*.md", "**/*.mdx"))
        assert [p.name for p in files] == ["a.md", "b.mdx"]


class TestWriteIfChanged:
    """Test write_if_changed function."""

    def test_created(self, tmp_dir):
        path = tmp_dir / "out" / "file.json"
        assert write_if_changed(path, "{}") == "created"
        assert path.read_text() == "{}"

    def test_unchanged(self, tmp_dir):
        path = tmp_dir / "file.json"
        write_if_changed(path, "{}")
        assert write_if_changed(path, "{}") == "unchanged"

    def test_updated(self, tmp_dir):
        path = tmp_dir / "file.json"
        write_if_changed(path, "{}")
        assert write_if_changed(path, "[]") == "updated"
        assert path.read_text() == "[]"
