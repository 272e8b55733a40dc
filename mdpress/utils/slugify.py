#!/usr/bin/env python3
"""
slugify.py
----------
Heading slugs for anchor ids.

The same heading text always yields the same slug, so ids in the rendered
HTML, TOC links and links written by hand (``[see](#getting-started)``)
stay stable across runs.

Usage:
    from mdpress.utils.slugify import slugify

    slugify("Getting Started")   # "getting-started"
    slugify("Qué es esto?")      # "que-es-esto"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
import unicodedata


FALLBACK_SLUG = "section"
"""Slug used when a heading has no sluggable characters."""


def slugify(text: str, max_length: int = 80) -> str:
    """
    Convert heading text to an anchor-safe slug.

    - Normalize accents (Qué → que)
    - Lowercase
    - Drop apostrophes and inline HTML entities
    - Spaces, underscores, dashes and dots become single hyphens
    - Strip everything else that is not a letter or digit

    Args:
        text: Heading text
        max_length: Maximum slug length (default 80)

    Returns:
        Slug, or ``FALLBACK_SLUG`` if nothing survives

    Examples:
        >>> slugify("Getting Started")
        'getting-started'
        >>> slugify("C++ & Rust — a comparison")
        'c-rust-a-comparison'
        >>> slugify("v1.2 Release")
        'v1-2-release'
        >>> slugify("!!!")
        'section'
    """
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower()
    text = re.sub(r"&[a-z]+;", "", text)
    text = text.replace("'", "")
    text = re.sub(r"[\s_.\-/]+", "-", text)
    text = re.sub(r"[^a-z0-9-]", "", text)
    text = re.sub(r"-+", "-", text).strip("-")

    if len(text) > max_length:
        text = text[:max_length].rstrip("-")

    return text or FALLBACK_SLUG
