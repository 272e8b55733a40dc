"""
Utilities package for mdpress.

- md: Front matter splitting and parsing
- fs: Markdown file discovery and output path naming
- slugify: Heading anchor slugs
- templates: Literal {{NAME}} placeholder substitution

Import commonly-used utilities directly from this package:
    from mdpress.utils import output_path_for, slugify
"""

from .fs import (
    MARKDOWN_EXTENSIONS,
    find_markdown_files,
    is_markdown_file,
    output_path_for,
)
from .slugify import slugify
from .templates import placeholder, substitute_variables

__all__ = [
    # Filesystem
    "MARKDOWN_EXTENSIONS",
    "find_markdown_files",
    "is_markdown_file",
    "output_path_for",
    # Slugs
    "slugify",
    # Templates
    "placeholder",
    "substitute_variables",
]
