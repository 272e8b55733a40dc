"""
Tests for table of contents injection.
"""
import re

from mdpress.builders.toc import (
    TOC_INDENT,
    TOC_MARKER,
    TocEntry,
    build_toc,
    collect_headings,
    inject_toc,
)


def _entry_indents(toc_html):
    """Map anchor → leading whitespace of its list item."""
    return {
        match.group(2): match.group(1)
        for match in re.finditer(r'^( *)<li[^>]*><a href="#([^"]*)"', toc_html, re.M)
    }


class TestCollectHeadings:
    """Tests for the heading scan."""

    def test_document_order(self):
        """Headings are listed in document order with their level."""
        fragment = '<h2 id="b">B</h2><p>x</p><h1 id="a">A</h1>'
        assert collect_headings(fragment) == [
            TocEntry(2, "b", "B"),
            TocEntry(1, "a", "A"),
        ]

    def test_requires_id(self):
        """Headings without an id are skipped."""
        assert collect_headings("<h1>No id</h1><h2 id='single'>Quoted</h2>") == []

    def test_nested_markup_skipped(self):
        """A heading with markup anywhere in its text is not listed."""
        fragment = '<h1 id="a">A</h1><h2 id="b">Intro <em>part</em> two</h2>'
        assert collect_headings(fragment) == [TocEntry(1, "a", "A")]

    def test_nested_markup_not_in_toc(self):
        """The injected list leaves out headings with nested markup."""
        fragment = f'{TOC_MARKER}<h1 id="a">A</h1><h2 id="b">B <em>x</em></h2>'
        result = inject_toc(fragment)
        assert 'href="#a"' in result
        assert 'href="#b"' not in result

    def test_markup_first_skipped(self):
        """A heading that opens with markup is skipped too."""
        assert collect_headings('<h2 id="c"><code>api</code> reference</h2>') == []

    def test_other_attributes(self):
        """Other attributes around the id are allowed."""
        entries = collect_headings('<h3 class="x" id="d" data-k="v">D</h3>')
        assert entries == [TocEntry(3, "d", "D")]


class TestBuildToc:
    """Tests for TOC markup."""

    def test_container_and_title(self):
        """The list is wrapped in a titled container."""
        html = build_toc([TocEntry(1, "a", "A")])
        assert html.startswith('<div class="toc">\n<h2>Table of Contents</h2>\n<ul>\n')
        assert html.endswith("</ul>\n</div>\n")
        assert '<li class="toc-h1"><a href="#a">A</a></li>' in html

    def test_indent_by_level_ignores_gaps(self):
        """Level n is indented n-1 units, even after a gap."""
        html = build_toc([TocEntry(1, "a", "A"), TocEntry(4, "d", "D")])
        indents = _entry_indents(html)
        assert indents["a"] == ""
        assert indents["d"] == TOC_INDENT * 3


class TestInjectToc:
    """Tests for marker replacement."""

    def test_no_marker_unchanged(self):
        """Without the marker the fragment is returned as is."""
        fragment = '<h1 id="a">A</h1>'
        assert inject_toc(fragment) is fragment

    def test_h2_one_level_deeper_than_h1(self):
        """B's entry is indented exactly one unit more than A's."""
        fragment = f'{TOC_MARKER}\n<h1 id="a">A</h1><h2 id="b">B</h2>'
        result = inject_toc(fragment)

        indents = _entry_indents(result)
        assert len(indents["b"]) - len(indents["a"]) == len(TOC_INDENT)
        assert TOC_MARKER not in result
        assert result.endswith('<h1 id="a">A</h1><h2 id="b">B</h2>')

    def test_no_headings_removes_marker(self):
        """With no qualifying heading the marker is removed, nothing else."""
        fragment = f"<p>before</p>\n{TOC_MARKER}\n<h1>No id</h1>"
        assert inject_toc(fragment) == "<p>before</p>\n\n<h1>No id</h1>"

    def test_every_marker_replaced(self):
        """Each marker occurrence gets the TOC."""
        fragment = f'{TOC_MARKER}<h1 id="a">A</h1>{TOC_MARKER}'
        result = inject_toc(fragment)
        assert result.count('<div class="toc">') == 2
        assert TOC_MARKER not in result

    def test_logs_when_injecting(self, mock_logger):
        """Injection is logged at debug level."""
        inject_toc(f'{TOC_MARKER}<h1 id="a">A</h1>', logger=mock_logger)
        mock_logger.log_debug.assert_called_once()
