#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem helpers for locating Markdown inputs and naming PDF outputs.

Functions:
    is_markdown_file: Check a path's extension against the Markdown suffixes
    find_markdown_files: Expand a glob pattern to sorted Markdown files
    output_path_for: Derive the PDF path for an input file

Usage:
    from mdpress.utils.fs import find_markdown_files, output_path_for

    for md_file in find_markdown_files("docs/**/*.md"):
        pdf = output_path_for(md_file, Path("pdfs"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import glob
from pathlib import Path
from typing import List, Optional


MARKDOWN_EXTENSIONS = frozenset({".md", ".markdown"})
"""Lower-cased suffixes treated as Markdown documents."""


def is_markdown_file(path: str | Path) -> bool:
    """
    Return True if ``path`` has a Markdown extension (case-insensitive).

    Examples:
        >>> is_markdown_file("README.MD")
        True
        >>> is_markdown_file("notes.txt")
        False
    """
    return Path(path).suffix.lower() in MARKDOWN_EXTENSIONS


def find_markdown_files(pattern: str) -> List[Path]:
    """
    Expand a glob pattern and keep the Markdown files.

    ``**`` in the pattern matches across directories.

    Args:
        pattern: Glob pattern, e.g. ``"*.md"`` or ``"docs/**/*.md"``

    Returns:
        Sorted list of matching Markdown files
    """
    matches = glob.glob(pattern, recursive="**" in pattern)
    return sorted(
        Path(match) for match in matches
        if Path(match).is_file() and is_markdown_file(match)
    )


def output_path_for(input_path: Path, output_dir: Optional[Path] = None) -> Path:
    """
    Derive the PDF destination for an input document.

    Args:
        input_path: Markdown source
        output_dir: Directory to place ``<stem>.pdf`` in; next to the input if None

    Returns:
        PDF path

    Examples:
        >>> output_path_for(Path("docs/guide.md"))
        PosixPath('docs/guide.pdf')
        >>> output_path_for(Path("docs/guide.md"), Path("pdfs"))
        PosixPath('pdfs/guide.pdf')
    """
    input_path = Path(input_path)
    if output_dir is not None:
        return Path(output_dir) / f"{input_path.stem}.pdf"
    return input_path.with_suffix(".pdf")
