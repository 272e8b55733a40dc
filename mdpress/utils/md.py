#!/usr/bin/env python3
"""
md.py
-------------------
Front matter handling for Markdown documents.

A document may open with a YAML block fenced by lines holding exactly
``---``:

    ---
    title: Release Notes
    theme: dark
    ---

    # Changes

The policy is permissive. Only a line-exact opening delimiter starts a
block, and a block that is never closed is treated as ordinary content,
so a stray ``---`` never breaks a conversion. The single error path is a
closed block whose YAML is malformed.
"""
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Optional, Tuple

# --- Third party imports ---
import yaml

# --- Local imports ---
from mdpress.core.exceptions import FrontMatterError
from mdpress.dataclasses.front_matter import FrontMatter


FRONT_MATTER_DELIMITER = b"---"
"""Line that opens and closes a front matter block."""


class FrontMatterLoader(yaml.SafeLoader):
    """
    SafeLoader that keeps plain scalars as written.

    Booleans, numbers and timestamps are not resolved, so ``title: true``
    reads as ``"true"`` and ``title: 1.10`` as ``"1.10"``. Only the null
    forms (``null``, ``~``, empty) still resolve, to None.
    """


FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag == "tag:yaml.org,2002:null"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


# ----- Splitting -----
def split_frontmatter(content: bytes) -> Tuple[Optional[List[bytes]], bytes]:
    """
    Split raw document bytes into front matter lines and body.

    Args:
        content: Full document bytes

    Returns:
        Tuple of (frontmatter_lines, body)
        - frontmatter_lines: Lines strictly between the delimiters, or None
          when there is no closed block
        - body: Bytes after the closing delimiter, or ``content`` unchanged
          when there is no closed block

    Examples:
        >>> split_frontmatter(b"---\\ntitle: X\\n---\\nBody")
        ([b'title: X'], b'Body')
        >>> split_frontmatter(b"# No metadata")
        (None, b'# No metadata')
        >>> split_frontmatter(b"---\\nnever closed")
        (None, b'---\\nnever closed')
    """
    first_line, _, _ = content.partition(b"\n")
    if first_line != FRONT_MATTER_DELIMITER:
        return None, content

    lines = content.split(b"\n")
    for i, line in enumerate(lines[1:], 1):
        if line == FRONT_MATTER_DELIMITER:
            return lines[1:i], b"\n".join(lines[i + 1:])

    return None, content


# ----- Parsing -----
def parse_frontmatter(lines: List[bytes]) -> FrontMatter:
    """
    Parse front matter lines into a FrontMatter.

    Args:
        lines: Lines between the delimiters (without the delimiters)

    Returns:
        FrontMatter; empty if the block holds nothing

    Raises:
        FrontMatterError: If the block is not valid UTF-8 YAML or is not a
            mapping. The line number refers to the whole document (the
            opening delimiter is line 1).
    """
    try:
        text = b"\n".join(lines).decode("utf-8")
    except UnicodeDecodeError as e:
        raise FrontMatterError(
            "Front matter is not valid UTF-8", cause=e
        ) from e

    if not text.strip():
        return FrontMatter()

    try:
        data = yaml.load(text, Loader=FrontMatterLoader)
    except yaml.YAMLError as e:
        line_number = None
        snippet = None
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            # Mark lines are 0-based within the block; +2 skips the delimiter
            line_number = mark.line + 2
            block_lines = text.split("\n")
            if mark.line < len(block_lines):
                snippet = block_lines[mark.line]
        raise FrontMatterError(
            f"Invalid YAML front matter: {getattr(e, 'problem', None) or e}",
            line_number=line_number,
            snippet=snippet,
            cause=e,
        ) from e

    if data is None:
        return FrontMatter()
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}",
            line_number=2,
            snippet=text.split("\n", 1)[0],
        )

    return FrontMatter.from_mapping(data)


def extract_front_matter(content: bytes) -> Tuple[FrontMatter, bytes]:
    """
    Separate a document's front matter from its Markdown body.

    Args:
        content: Raw document bytes

    Returns:
        Tuple of (front_matter, body). Without a closed block the front
        matter is empty and the body is ``content`` unchanged.

    Raises:
        FrontMatterError: If a closed block holds malformed YAML

    Examples:
        >>> fm, body = extract_front_matter(b"---\\ntitle: X\\n---\\nBody")
        >>> fm.title, body
        ('X', b'Body')
    """
    lines, body = split_frontmatter(content)
    if lines is None:
        return FrontMatter(), content
    return parse_frontmatter(lines), body
