#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the mdpress project.

Every stage of the conversion pipeline raises its own subclass of
ConversionError, so callers can abort a single document and keep going
with the next one (batch and watch modes) while the CLI still reports
which stage failed.

Exception Hierarchy:
    Exception (built-in)
    ├── ConversionError - Base for all per-document pipeline errors
    │   ├── InputError - Source document unreadable
    │   ├── FrontMatterError - Malformed front matter block
    │   ├── MarkdownRenderError - Markdown → HTML failure
    │   ├── TemplateError - Explicit custom stylesheet unreadable
    │   ├── PdfRenderError - Browser session, navigation, timeout, capture
    │   └── OutputError - Destination PDF unwritable
    └── TemporalFileError - Temporary file management errors

Usage:
    from mdpress.core.exceptions import ConversionError, FrontMatterError

    try:
        converter.convert()
    except FrontMatterError as e:
        logger.log_error(e, {"line": e.line_number})
    except ConversionError as e:
        logger.log_error(e)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional


class ConversionError(Exception):
    """
    Base exception for errors raised while converting one document.

    Carries an optional source position so errors that can be localized
    in the input (front matter syntax errors, mostly) point at the line.

    Attributes:
        message: Human-readable description
        line_number: 1-based line in the source document, if known
        snippet: Offending source text, if known
        cause: Wrapped underlying exception, if any

    Examples:
        >>> str(ConversionError("bad value", line_number=3, snippet="theme: [x"))
        'line 3: bad value - theme: [x'
        >>> str(ConversionError("renderer crashed"))
        'renderer crashed'
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        snippet: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.snippet = snippet
        self.cause = cause

    def __str__(self) -> str:
        if self.line_number:
            return f"line {self.line_number}: {self.message} - {self.snippet or ''}"
        return self.message


class InputError(ConversionError):
    """
    Exception for unreadable source documents.

    Examples:
        >>> raise InputError("Failed to read input file: notes.md")
    """

    pass


class FrontMatterError(ConversionError):
    """
    Exception for malformed front matter blocks.

    Only raised when a closed ``---`` block exists and its YAML cannot be
    parsed into the expected mapping. Missing or unterminated blocks are
    never errors.

    Examples:
        >>> raise FrontMatterError("Invalid YAML front matter", line_number=2)
    """

    pass


class MarkdownRenderError(ConversionError):
    """
    Exception for Markdown to HTML rendering failures.

    A conforming Markdown grammar accepts any text, so this signals a bug
    or an environment problem (e.g. a broken highlighter plugin).
    """

    pass


class TemplateError(ConversionError):
    """
    Exception for document composition failures.

    Raised when an explicitly requested custom stylesheet cannot be read.
    Unknown template and theme names fall back to the built-in defaults
    and never raise.

    Examples:
        >>> raise TemplateError("Failed to read custom CSS file: print.css")
    """

    pass


class PdfRenderError(ConversionError):
    """
    Exception for HTML to PDF rendering failures.

    Raised when the browser session cannot be started, the page cannot be
    loaded, the render deadline expires, or the PDF capture fails.

    Examples:
        >>> raise PdfRenderError("PDF rendering timed out after 30s")
        >>> raise PdfRenderError("Failed to launch Chromium")
    """

    pass


class OutputError(ConversionError):
    """
    Exception for PDF destination write failures.

    Examples:
        >>> raise OutputError("Failed to write PDF file: /readonly/out.pdf")
    """

    pass


class TemporalFileError(Exception):
    """
    Exception for temporary file management errors.

    Raised when temporary file operations fail:
    - Unable to create temp files
    - Cleanup failures
    - Permission issues
    - Disk space issues

    Examples:
        >>> raise TemporalFileError("Cannot create temp file: /tmp not writable")
        >>> raise TemporalFileError("Failed to cleanup temp files: permission denied")
    """

    pass
