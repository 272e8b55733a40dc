"""
Tests for the CLI helpers and statistics classes in mdpress.core.cli.
"""
import pytest
from datetime import datetime, timedelta
from pathlib import Path

from mdpress.core.cli import (
    BatchStats,
    ConversionStats,
    OperationStats,
    format_size,
    setup_logger,
)


class TestFormatSize:
    """Tests for format_size."""

    @pytest.mark.parametrize(
        "size,expected",
        [
            (0, "0 B"),
            (512, "512 B"),
            (2048, "2.0 KB"),
            (3 * 1024 * 1024, "3.0 MB"),
        ],
    )
    def test_units(self, size, expected):
        """Sizes are shown in the largest fitting unit."""
        assert format_size(size) == expected


class TestConversionStats:
    """Tests for ConversionStats."""

    def test_defaults(self):
        """A fresh instance has zero sizes and no end time."""
        stats = ConversionStats()
        assert stats.input_size == 0
        assert stats.output_size == 0
        assert stats.page_count == 0
        assert stats.end_time is None

    def test_finish_records_duration(self):
        """finish stamps the end time and the processing duration."""
        stats = ConversionStats(start_time=datetime.now() - timedelta(milliseconds=250))
        stats.finish()

        assert stats.end_time is not None
        assert stats.processing_ms >= 250
        assert stats.duration() == pytest.approx(stats.processing_ms / 1000)

    def test_to_dict(self):
        """to_dict exposes the measured values."""
        stats = ConversionStats(input_size=10, output_size=2048)
        stats.finish()

        data = stats.to_dict()
        assert data["input_size"] == 10
        assert data["output_size"] == 2048
        assert "processing_ms" in data

    def test_summary(self):
        """summary mentions both sizes."""
        stats = ConversionStats(input_size=100, output_size=2048)
        stats.finish()
        assert "100 B → 2.0 KB" in stats.summary()


class TestBatchStats:
    """Tests for OperationStats and BatchStats."""

    def test_negative_counts_rejected(self):
        """Counts cannot start negative."""
        with pytest.raises(ValueError):
            OperationStats(files_processed=-1)

    def test_completion_line(self):
        """summary is the batch completion line."""
        stats = BatchStats(files_processed=3, pdfs_created=2)
        assert stats.summary() == "Completed: 2/3 files converted successfully"

    def test_to_dict_lists_failed(self):
        """Failed inputs are listed as strings."""
        stats = BatchStats(files_processed=1, errors=1, failed=[Path("bad.md")])
        data = stats.to_dict()
        assert data["failed"] == ["bad.md"]
        assert data["pdfs_created"] == 0


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_creates_operations_dir(self, tmp_path):
        """Logs go to <log_dir>/operations."""
        logger = setup_logger(tmp_path, "cli")
        try:
            assert (tmp_path / "operations").is_dir()
            assert logger.log_dir == tmp_path / "operations"
            assert logger.component_name == "cli"
        finally:
            logger.close()
