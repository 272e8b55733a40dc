#!/usr/bin/env python3
"""
toc.py
-------------------
Table of contents injection.

Authors request a table of contents by placing the marker comment
``<!-- TOC -->`` on its own line in the Markdown source. The rendered
fragment is scanned for headings that carry an ``id`` and the marker is
replaced with a linked list of them.

The scan is a regular expression over the fragment, not an HTML parse:

- only headings with an ``id="…"`` attribute are listed
- the label is the heading's whole text; a heading containing any
  nested markup (emphasis, code, links) is skipped
- entries are indented by heading level (two spaces per level below h1),
  regardless of gaps between levels
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import List, NamedTuple, Optional

# --- Local imports ---
from mdpress.core.logging_manager import MdpressLogger, safe_logger


TOC_MARKER = "<!-- TOC -->"
"""Comment that requests a table of contents at its position."""

TOC_TITLE = "Table of Contents"
"""Heading shown above the generated list."""

TOC_INDENT = "  "
"""One indentation unit per heading level below h1."""

HEADING_PATTERN = re.compile(
    r'<h([1-6])[^>]*id="([^"]*)"[^>]*>([^<]+)</h[1-6]>'
)
"""A heading with an id whose content is plain text."""


class TocEntry(NamedTuple):
    """One heading listed in the table of contents."""
    level: int
    anchor: str
    label: str


def collect_headings(fragment: str) -> List[TocEntry]:
    """
    Find id-bearing headings in document order.

    Args:
        fragment: Rendered HTML fragment

    Returns:
        List of TocEntry; headings with a blank label are skipped

    Examples:
        >>> collect_headings('<h1 id="a">A</h1><h2 id="b">B <em>x</em></h2>')
        [TocEntry(level=1, anchor='a', label='A')]
    """
    entries = []
    for match in HEADING_PATTERN.finditer(fragment):
        label = match.group(3).strip()
        if label:
            entries.append(TocEntry(int(match.group(1)), match.group(2), label))
    return entries


def build_toc(entries: List[TocEntry]) -> str:
    """
    Render TOC entries as a titled, indented list.

    Args:
        entries: Headings in document order (non-empty)

    Returns:
        ``<div class="toc">`` container HTML
    """
    lines = ['<div class="toc">', f"<h2>{TOC_TITLE}</h2>", "<ul>"]
    for entry in entries:
        indent = TOC_INDENT * (entry.level - 1)
        lines.append(
            f'{indent}<li class="toc-h{entry.level}">'
            f'<a href="#{entry.anchor}">{entry.label}</a></li>'
        )
    lines.extend(["</ul>", "</div>"])
    return "\n".join(lines) + "\n"


def inject_toc(fragment: str, logger: Optional[MdpressLogger] = None) -> str:
    """
    Replace every TOC marker with the generated table of contents.

    Args:
        fragment: Rendered HTML fragment
        logger: Optional logger

    Returns:
        The fragment unchanged when it holds no marker; otherwise every
        marker is replaced by the TOC, or removed when no heading qualifies
    """
    if TOC_MARKER not in fragment:
        return fragment

    entries = collect_headings(fragment)
    safe_logger(logger).log_debug(
        "Injecting table of contents",
        {"markers": fragment.count(TOC_MARKER), "headings": len(entries)},
    )

    if not entries:
        return fragment.replace(TOC_MARKER, "")
    return fragment.replace(TOC_MARKER, build_toc(entries))
