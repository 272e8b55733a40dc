"""
End-to-end rendering with a real headless Chromium.

Skipped unless MDPRESS_E2E=1 and the Playwright browser is installed
(``playwright install chromium``).
"""
import os

import pytest

from mdpress.builders.pdfbuilder import PdfRenderer
from mdpress.dataclasses.run_config import RunConfig
from mdpress.pipeline.md2pdf import convert_file

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(
        os.environ.get("MDPRESS_E2E") != "1",
        reason="set MDPRESS_E2E=1 to render with Chromium",
    ),
]


def test_renders_real_pdf(styled_doc, tmp_path):
    """A styled document with a TOC becomes a real PDF file."""
    output = tmp_path / "out" / "styled.pdf"
    config = RunConfig(styled_doc, output, theme="dark")

    stats = convert_file(config, renderer=PdfRenderer(timeout=60))

    data = output.read_bytes()
    assert data.startswith(b"%PDF-")
    assert stats.output_size == len(data)
