#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers and statistics for mdpress commands.

Functions:
    setup_logger: Initialize MdpressLogger for CLI operations

Classes:
    ConversionStats: Measurements for one document conversion
    OperationStats: Base class for multi-document statistics
    BatchStats: Counts for batch conversions

Usage:
    from mdpress.core.cli import setup_logger, ConversionStats

    logger = setup_logger(log_dir, "convert")
    stats = ConversionStats(input_size=len(content))
    ...
    stats.finish()
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from mdpress.core.logging_manager import MdpressLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(
    log_dir: Path, component_name: str, verbose: bool = False
) -> MdpressLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    an MdpressLogger for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'cli', 'watch')
        verbose: Echo INFO messages to the console as well

    Returns:
        Configured MdpressLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return MdpressLogger(
        operations_log_dir,
        component_name=component_name,
        console_level=logging.INFO if verbose else logging.WARNING,
    )


def format_size(size: int) -> str:
    """
    Format a byte count for terminal output.

    Examples:
        >>> format_size(512)
        '512 B'
        >>> format_size(2048)
        '2.0 KB'
    """
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class ConversionStats:
    """
    Measurements for a single document conversion.

    Created when the conversion starts and finalized by ``finish()`` once
    the PDF has been written.

    Attributes:
        start_time: Conversion start timestamp
        end_time: Conversion end timestamp (None until finished)
        input_size: Size of the source document in bytes
        output_size: Size of the generated PDF in bytes
        page_count: Reserved; not computed
        processing_ms: Wall time of the whole pipeline in milliseconds
    """
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None
    input_size: int = 0
    output_size: int = 0
    page_count: int = 0
    processing_ms: int = 0

    def finish(self) -> None:
        """Stamp the end time and compute the processing duration."""
        self.end_time = datetime.now()
        self.processing_ms = int(
            (self.end_time - self.start_time).total_seconds() * 1000
        )

    def duration(self) -> float:
        """
        Get the conversion duration in seconds.

        Returns:
            Recorded duration once finished, elapsed time otherwise
        """
        if self.end_time is None:
            return (datetime.now() - self.start_time).total_seconds()
        return self.processing_ms / 1000

    def summary(self) -> str:
        """Get a one-line summary of sizes and duration."""
        return (
            f"{format_size(self.input_size)} → {format_size(self.output_size)} "
            f"in {self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "input_size": self.input_size,
            "output_size": self.output_size,
            "page_count": self.page_count,
            "processing_ms": self.processing_ms,
        }


@dataclass
class OperationStats:
    """
    Base class for multi-document statistics.

    Attributes:
        files_processed: Number of files attempted
        errors: Number of files that failed
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Get elapsed time in seconds."""
        return (datetime.now() - self.start_time).total_seconds()

    def summary(self) -> str:
        """Get formatted summary string."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class BatchStats(OperationStats):
    """
    Statistics for batch conversions.

    Attributes:
        pdfs_created: Number of PDFs written successfully
        failed: Input paths whose conversion failed
    """
    pdfs_created: int = 0
    failed: List[Path] = field(default_factory=list)

    def summary(self) -> str:
        """Get the batch completion line."""
        return (
            f"Completed: {self.pdfs_created}/{self.files_processed} "
            f"files converted successfully"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with batch metrics."""
        d = super().to_dict()
        d.update({
            "pdfs_created": self.pdfs_created,
            "failed": [str(path) for path in self.failed],
        })
        return d
