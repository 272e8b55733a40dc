"""
conftest.py
-----------
Shared pytest fixtures for mdpress tests.

Provides fixtures for:
- Sample Markdown documents
- A fake PDF engine (no browser is ever started)
- A minimal dict-backed asset library
- Run configurations pointing into tmp_path
"""
import pytest
from pathlib import Path
from typing import List, Optional
from unittest.mock import MagicMock

from mdpress.builders.document import AssetLibrary, TemplateComposer
from mdpress.builders.pdfbuilder import PdfOptions, PdfRenderer
from mdpress.dataclasses.run_config import RunConfig


FAKE_PDF = b"%PDF-1.7\n% fake\n%%EOF\n"


class FakeEngine:
    """
    PdfEngine stand-in that records what it was asked to print.

    The HTML file is read during ``render`` so tests can assert on the
    document the renderer staged, and ``seen_paths`` lets tests check that
    the file is gone afterwards.
    """

    def __init__(self, pdf: bytes = FAKE_PDF, error: Optional[BaseException] = None):
        self.pdf = pdf
        self.error = error
        self.seen_paths: List[Path] = []
        self.seen_html: List[str] = []
        self.seen_options: List[PdfOptions] = []
        self.seen_timeouts: List[float] = []

    def render(self, html_path: Path, options: PdfOptions, timeout: float) -> bytes:
        self.seen_paths.append(html_path)
        self.seen_html.append(html_path.read_text(encoding="utf-8"))
        self.seen_options.append(options)
        self.seen_timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        return self.pdf


# ----- Logger Fixtures -----

@pytest.fixture
def mock_logger():
    """Mock logger instance."""
    return MagicMock()


# ----- Engine / Renderer Fixtures -----

@pytest.fixture
def engine_factory():
    """FakeEngine class, for tests that need a custom result or error."""
    return FakeEngine


@pytest.fixture
def fake_engine():
    """Engine returning a small fixed PDF."""
    return FakeEngine()


@pytest.fixture
def fake_renderer(fake_engine, tmp_path):
    """PdfRenderer backed by the fake engine, staging HTML in tmp_path."""
    temp_dir = tmp_path / "render_tmp"
    temp_dir.mkdir()
    return PdfRenderer(engine=fake_engine, temp_dir=temp_dir)


# ----- Asset Fixtures -----

@pytest.fixture
def asset_library():
    """Small asset set instead of the bundled one."""
    return AssetLibrary(
        assets={
            "templates/plain.html": "<html><head><title>{{TITLE}}</title>"
                                    "<style>{{CSS}}</style></head>"
                                    "<body>{{CONTENT}}</body></html>",
            "templates/bare.html": "<main>{{CONTENT}}</main>",
            "themes/sepia.css": "body { background: #f4ecd8; }",
        }
    )


@pytest.fixture
def composer(asset_library):
    """TemplateComposer over the small asset set."""
    return TemplateComposer(asset_library)


# ----- Document Fixtures -----

@pytest.fixture
def write_markdown(tmp_path):
    """Factory writing a Markdown file into tmp_path."""
    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def simple_doc(write_markdown):
    """Minimal document without front matter."""
    return write_markdown("simple.md", "# Title\n\nHello")


@pytest.fixture
def styled_doc(write_markdown):
    """Document whose front matter sets every presentation field."""
    return write_markdown(
        "styled.md",
        "---\n"
        "title: Quarterly Report\n"
        "theme: sepia\n"
        "template: plain\n"
        "---\n"
        "# Summary\n"
        "\n"
        "<!-- TOC -->\n"
        "\n"
        "## Revenue\n"
        "\n"
        "Up and to the right.\n",
    )


@pytest.fixture
def make_config():
    """Factory for RunConfig objects with default styling."""
    def _make(input_path: Path, **kwargs) -> RunConfig:
        return RunConfig.for_file(input_path, **kwargs)
    return _make
