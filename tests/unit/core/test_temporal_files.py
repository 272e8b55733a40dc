"""
Tests for TemporalFileManager.

The manager must leave nothing behind once its context exits, whether
the block finished normally or raised.
"""
import pytest
from unittest.mock import MagicMock, patch

from mdpress.core.exceptions import TemporalFileError
from mdpress.core.temporal_files import TemporalFileManager


class TestTemporalFileManager:
    """Tests for temp file creation and cleanup."""

    def test_create_temp_file_is_unique(self, tmp_path):
        """Two files created back to back never share a name."""
        with TemporalFileManager(tmp_path) as manager:
            first = manager.create_temp_file(suffix=".html")
            second = manager.create_temp_file(suffix=".html")

            assert first != second
            assert first.exists() and second.exists()
            assert first.suffix == ".html"
            assert first.parent == tmp_path
            assert first.name.startswith("mdpress_")

    def test_write_temp_file_holds_content(self, tmp_path):
        """write_temp_file stores the text as UTF-8."""
        with TemporalFileManager(tmp_path) as manager:
            path = manager.write_temp_file("<h1>Título</h1>", suffix=".html")
            assert path.read_text(encoding="utf-8") == "<h1>Título</h1>"

    def test_files_removed_on_exit(self, tmp_path):
        """Every tracked file is gone after the context exits."""
        with TemporalFileManager(tmp_path) as manager:
            path = manager.write_temp_file("x", suffix=".html")

        assert not path.exists()
        assert manager.active_files == []

    def test_files_removed_when_block_raises(self, tmp_path):
        """Cleanup also runs when the block raises."""
        with pytest.raises(RuntimeError):
            with TemporalFileManager(tmp_path) as manager:
                path = manager.write_temp_file("x", suffix=".html")
                raise RuntimeError("render failed")

        assert not path.exists()

    def test_cleanup_stats(self, tmp_path):
        """cleanup reports what it removed."""
        manager = TemporalFileManager(tmp_path)
        manager.create_temp_file()

        stats = manager.cleanup()

        assert stats == {"files_removed": 1, "errors": 0}

    def test_cleanup_failure_is_logged_not_raised(self, tmp_path):
        """A file that cannot be removed is counted and logged."""
        mock_logger = MagicMock()
        manager = TemporalFileManager(tmp_path, logger=mock_logger)
        manager.create_temp_file()

        with patch("pathlib.Path.unlink", side_effect=OSError("busy")):
            stats = manager.cleanup()

        assert stats["errors"] == 1
        mock_logger.log_warning.assert_called_once()

    def test_create_failure_raises_temporal_file_error(self, tmp_path):
        """A missing base directory surfaces as TemporalFileError."""
        manager = TemporalFileManager(tmp_path / "missing")
        with pytest.raises(TemporalFileError):
            manager.create_temp_file()
