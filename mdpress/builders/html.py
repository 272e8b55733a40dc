#!/usr/bin/env python3
"""
html.py
-------------------
Markdown → HTML fragment rendering.

Renders a document body with markdown-it-py and a fixed extension set:

- GFM tables, strikethrough and bare-URL autolinking (linkify)
- Task lists and definition lists (mdit-py-plugins)
- Deterministic ``id`` attributes on every heading level (h1-h6)
- Pygments highlighting for fenced code; untagged blocks get a guessed lexer
- Single newlines inside paragraphs become ``<br />``
- XHTML-style void elements; raw HTML (including the ``<!-- TOC -->``
  marker) passes through

Usage:
    renderer = MarkdownRenderer(logger=logger)
    fragment = renderer.render(b"# Title\\n\\nHello")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from html import escape
from typing import Optional

# --- Third party ---
from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.tasklists import tasklists_plugin
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

# --- Local imports ---
from mdpress.core.exceptions import MarkdownRenderError
from mdpress.core.logging_manager import MdpressLogger, safe_logger
from mdpress.utils.slugify import slugify


HIGHLIGHT_CSS_CLASS = "highlight"
"""Class on highlighted ``<pre>`` blocks; theme palettes are scoped to it."""


class CodeHighlighter:
    """
    Pygments-backed highlight callback for markdown-it fences.

    Returns a complete ``<pre class="highlight"><code>…</code></pre>``
    block, or an empty string to let markdown-it fall back to plain
    escaped code when no lexer applies.
    """

    def __init__(self, logger: Optional[MdpressLogger] = None) -> None:
        self.formatter = HtmlFormatter(nowrap=True)
        self.logger = logger

    def _lexer_for(self, code: str, lang: str) -> Optional[Lexer]:
        if lang:
            try:
                return get_lexer_by_name(lang)
            except ClassNotFound:
                safe_logger(self.logger).log_debug(
                    f"Unknown code language '{lang}', guessing lexer"
                )
        try:
            return guess_lexer(code)
        except ClassNotFound:
            return None

    def __call__(self, code: str, lang: str, attrs: str) -> str:
        lexer = self._lexer_for(code, lang)
        if lexer is None:
            return ""

        spans = highlight(code, lexer, self.formatter)
        class_attr = f' class="language-{escape(lang)}"' if lang else ""
        return (
            f'<pre class="{HIGHLIGHT_CSS_CLASS}">'
            f"<code{class_attr}>{spans}</code></pre>"
        )


TASK_CHECKBOX_PREFIX = '<input class="task-list-item-checkbox"'


def close_task_checkboxes(state: StateCore) -> None:
    """Core rule: emit task list checkboxes as self-closing ``<input />``."""
    for token in state.tokens:
        for child in token.children or ():
            if (
                child.type == "html_inline"
                and child.content.startswith(TASK_CHECKBOX_PREFIX)
                and not child.content.endswith("/>")
            ):
                child.content = child.content[:-1].rstrip() + " />"


def build_markdown_parser(logger: Optional[MdpressLogger] = None) -> MarkdownIt:
    """
    Create the markdown-it parser with the fixed extension set.

    Args:
        logger: Optional logger passed to the highlighter

    Returns:
        Configured MarkdownIt instance
    """
    md = MarkdownIt(
        "gfm-like",
        {
            "html": True,
            "xhtmlOut": True,
            "breaks": True,
            "linkify": True,
            "highlight": CodeHighlighter(logger),
        },
    )
    md.use(anchors_plugin, min_level=1, max_level=6, slug_func=slugify, permalink=False)
    md.use(deflist_plugin)
    md.use(tasklists_plugin, enabled=False)
    md.core.ruler.after("github-tasklists", "close_task_checkboxes", close_task_checkboxes)
    return md


class MarkdownRenderer:
    """
    Renders Markdown bodies to HTML fragments.

    One parser is built per renderer and reused across documents; it holds
    no per-document state.

    Attributes:
        md: Configured MarkdownIt parser
        logger: Optional logger
    """

    def __init__(
        self,
        md: Optional[MarkdownIt] = None,
        logger: Optional[MdpressLogger] = None,
    ) -> None:
        """
        Initialize the renderer.

        Args:
            md: Parser to use; defaults to ``build_markdown_parser()``
            logger: Optional logger
        """
        self.logger = logger
        self.md = md or build_markdown_parser(logger)

    def render(self, body: bytes | str) -> str:
        """
        Render a Markdown body to an HTML fragment.

        Invalid UTF-8 sequences are replaced rather than rejected.

        Args:
            body: Markdown source (bytes are decoded as UTF-8)

        Returns:
            HTML fragment

        Raises:
            MarkdownRenderError: If the parser or a plugin fails
        """
        text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body

        try:
            fragment = self.md.render(text)
        except Exception as e:
            raise MarkdownRenderError(
                f"Markdown conversion failed: {e}", cause=e
            ) from e

        safe_logger(self.logger).log_debug(
            "Rendered Markdown fragment",
            {"markdown_chars": len(text), "html_chars": len(fragment)},
        )
        return fragment
