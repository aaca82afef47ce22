"""
Tests for CLI statistics and logger setup.
"""
import pytest

from quire.core.cli import BuildStats, OperationStats, setup_logger


class TestBuildStats:
    """Tests for BuildStats."""

    def test_negative_counter_rejected(self):
        with pytest.raises(ValueError, match="documents_skipped"):
            BuildStats(documents_skipped=-1)

    def test_base_counter_rejected(self):
        with pytest.raises(ValueError, match="errors"):
            OperationStats(errors=-1)

    def test_summary_omits_zero_optional_counters(self):
        summary = BuildStats(files_processed=2, records_loaded=3, documents_indexed=3).summary()
        assert summary.startswith("2 files processed, 3 records loaded, 3 indexed, 0 errors")
        assert "skipped" not in summary

    def test_summary_with_skipped_and_drafts(self):
        summary = BuildStats(documents_skipped=1, drafts_excluded=2).summary()
        assert "1 skipped" in summary
        assert "2 drafts excluded" in summary

    def test_to_dict(self):
        data = BuildStats(files_processed=1, documents_indexed=4).to_dict()
        assert data["files_processed"] == 1
        assert data["documents_indexed"] == 4
        assert "duration" in data
        assert "start_time" not in data


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_operations_directory(self, tmp_dir):
        logger = setup_logger(tmp_dir / "logs", "cli_test")
        try:
            assert (tmp_dir / "logs" / "operations" / "cli_test.log").exists()
        finally:
            logger.close()
