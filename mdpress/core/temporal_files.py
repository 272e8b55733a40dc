#!/usr/bin/env python3
"""
temporal_files.py
--------------------
Scoped temporary files for the rendering pipeline.

The PDF renderer hands the browser a file URL, so each render writes its
HTML document to a uniquely named temporary file. The manager tracks every
file it creates and removes them all when its context exits, on success,
on error and on timeout alike.

Usage:
    from mdpress.core.temporal_files import TemporalFileManager

    with TemporalFileManager() as temp_manager:
        html_path = temp_manager.write_temp_file(html, suffix=".html")
        # ... render html_path ...
    # html_path no longer exists here
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from .exceptions import TemporalFileError
from .logging_manager import MdpressLogger, safe_logger


class TemporalFileManager:
    """
    Creates temporary files and removes them on exit.

    Attributes:
        base_dir: Directory temporary files are created in
        active_files: Files created and not yet cleaned up
    """

    def __init__(
        self,
        base_dir: Optional[Path] = None,
        logger: Optional[MdpressLogger] = None,
    ) -> None:
        """
        Initialize temporal file manager.

        Args:
            base_dir: Base directory for temporary files. Uses system temp if None.
            logger: Optional logger for cleanup failures
        """
        self.base_dir = Path(base_dir) if base_dir else Path(tempfile.gettempdir())
        self.logger = logger
        self.active_files: List[Path] = []

    def create_temp_file(self, suffix: str = "", prefix: str = "mdpress_") -> Path:
        """
        Create an empty, uniquely named temporary file and track it.

        Args:
            suffix: File suffix/extension
            prefix: File prefix

        Returns:
            Path to the temporary file

        Raises:
            TemporalFileError: If file creation fails
        """
        try:
            temp_file_obj = tempfile.NamedTemporaryFile(
                suffix=suffix, prefix=prefix, dir=self.base_dir, delete=False
            )
            temp_file_obj.close()
        except OSError as e:
            raise TemporalFileError(f"Failed to create temporary file: {e}") from e

        temp_path = Path(temp_file_obj.name)
        self.active_files.append(temp_path)
        return temp_path

    def write_temp_file(
        self, content: str, suffix: str = "", prefix: str = "mdpress_"
    ) -> Path:
        """
        Create a tracked temporary file holding ``content`` (UTF-8).

        Args:
            content: Text to write
            suffix: File suffix/extension
            prefix: File prefix

        Returns:
            Path to the written file

        Raises:
            TemporalFileError: If the file cannot be created or written
        """
        temp_path = self.create_temp_file(suffix=suffix, prefix=prefix)
        try:
            temp_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise TemporalFileError(
                f"Failed to write temporary file {temp_path}: {e}"
            ) from e
        return temp_path

    def cleanup(self) -> Dict[str, int]:
        """
        Remove all tracked temporary files.

        Failures are counted and logged, never raised, so cleanup cannot
        mask the error that ended the render.

        Returns:
            Dictionary with cleanup statistics
        """
        cleanup_stats = {"files_removed": 0, "errors": 0}
        log = safe_logger(self.logger)

        for temp_file in self.active_files[:]:
            try:
                if temp_file.exists():
                    temp_file.unlink()
                    cleanup_stats["files_removed"] += 1
                self.active_files.remove(temp_file)
            except OSError as e:
                cleanup_stats["errors"] += 1
                log.log_warning(f"Could not remove temporary file {temp_file}: {e}")

        return cleanup_stats

    def __enter__(self) -> "TemporalFileManager":
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        """Context manager exit with automatic cleanup."""
        del exc_type, exc_val, exc_tb
        self.cleanup()
