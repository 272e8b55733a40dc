#!/usr/bin/env python3
"""
md2pdf.py
-------------------
Convert Markdown documents to styled PDFs.

Runs one document through the full pipeline:

    bytes → front matter → config merge → Markdown → TOC → template → PDF

Each stage raises its own ConversionError subclass and aborts only the
current document. Batch conversion runs documents strictly one after the
other, so at most one browser session is alive at any time.

Programmatic API:
    from mdpress.pipeline.md2pdf import convert_file, convert_batch

    stats = convert_file(RunConfig.for_file("notes.md"), logger=logger)
    batch = convert_batch(paths, base_config, output_dir=Path("pdf"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

# --- Local imports ---
from mdpress.builders.document import TemplateComposer
from mdpress.builders.html import MarkdownRenderer
from mdpress.builders.pdfbuilder import PdfRenderer
from mdpress.builders.toc import inject_toc
from mdpress.core.cli import BatchStats, ConversionStats
from mdpress.core.exceptions import ConversionError, InputError, OutputError
from mdpress.core.logging_manager import MdpressLogger, safe_logger
from mdpress.dataclasses.run_config import RunConfig, merge_front_matter
from mdpress.utils.md import extract_front_matter


BatchCallback = Callable[[RunConfig, Optional[ConversionStats], Optional[ConversionError]], None]
"""Called after each batch document with its stats or its error."""


class Converter:
    """
    Runs the conversion pipeline for one document.

    The Markdown renderer, composer and PDF renderer are injectable so a
    batch can share them across documents and tests can replace the
    browser with a fake engine.

    Attributes:
        config: Effective configuration (mutated by front matter)
        markdown: Markdown → HTML renderer
        composer: Template and theme composer
        renderer: HTML → PDF renderer
        stats: Measurements of the latest conversion
        logger: Optional logger
    """

    def __init__(
        self,
        config: RunConfig,
        composer: Optional[TemplateComposer] = None,
        renderer: Optional[PdfRenderer] = None,
        markdown: Optional[MarkdownRenderer] = None,
        logger: Optional[MdpressLogger] = None,
    ) -> None:
        self.config = config
        self.logger = logger
        self.markdown = markdown or MarkdownRenderer(logger=logger)
        self.composer = composer or TemplateComposer(logger=logger)
        self.renderer = renderer or PdfRenderer(logger=logger)
        self.stats = ConversionStats()

    def read_input(self) -> bytes:
        """
        Read the source document.

        Raises:
            InputError: If the file cannot be read
        """
        try:
            return self.config.input_path.read_bytes()
        except OSError as e:
            raise InputError(
                f"Failed to read input file: {self.config.input_path}", cause=e
            ) from e

    def write_output(self, pdf: bytes) -> None:
        """
        Write the PDF to the configured output path.

        Missing parent directories are created.

        Raises:
            OutputError: If the destination cannot be written
        """
        output_path = self.config.output_path
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(pdf)
        except OSError as e:
            raise OutputError(
                f"Failed to write PDF file: {output_path}", cause=e
            ) from e

    def convert(self) -> ConversionStats:
        """
        Convert the configured document to PDF.

        Failures outside the known stage errors are wrapped in a plain
        ConversionError so callers looping over documents only need to
        handle one exception type.

        Returns:
            ConversionStats for this conversion

        Raises:
            ConversionError: Subclass naming the stage that failed
        """
        try:
            return self._run()
        except ConversionError:
            raise
        except Exception as e:
            raise ConversionError(
                f"Unexpected conversion failure: {e}", cause=e
            ) from e

    def _run(self) -> ConversionStats:
        log = safe_logger(self.logger)
        self.stats = ConversionStats()

        log.log_operation(
            "conversion_start",
            {
                "input": str(self.config.input_path),
                "output": str(self.config.output_path),
            },
        )

        content = self.read_input()
        self.stats.input_size = len(content)

        front_matter, body = extract_front_matter(content)
        if not front_matter.is_empty():
            merge_front_matter(self.config, front_matter)
            log.log_operation(
                "front_matter_merged",
                {
                    "title": front_matter.title,
                    "template": self.config.template_name,
                    "theme": self.config.theme,
                    "css": str(self.config.css_path) if self.config.css_path else None,
                },
            )

        fragment = self.markdown.render(body)
        fragment = inject_toc(fragment, logger=self.logger)
        document = self.composer.compose(fragment, self.config, front_matter)

        pdf = self.renderer.render(document)
        log.log_operation("pdf_render_complete", {"pdf_bytes": len(pdf)})

        self.write_output(pdf)
        self.stats.output_size = len(pdf)
        self.stats.finish()

        log.log_operation(
            "conversion_complete",
            {"output": str(self.config.output_path), **self.stats.to_dict()},
        )
        return self.stats


# --- Programmatic API ---


def convert_file(config: RunConfig, **kwargs: Any) -> ConversionStats:
    """
    Convert a single Markdown file to PDF.

    This is the programmatic API used by the ``convert`` and ``watch``
    commands.

    Args:
        config: Effective configuration for the document
        **kwargs: Passed to Converter (composer, renderer, markdown, logger)

    Returns:
        ConversionStats with input/output sizes and duration

    Raises:
        ConversionError: If any pipeline stage fails
    """
    return Converter(config, **kwargs).convert()


def convert_batch(
    inputs: Iterable[Path],
    base_config: RunConfig,
    output_dir: Optional[Path] = None,
    on_result: Optional[BatchCallback] = None,
    logger: Optional[MdpressLogger] = None,
    **kwargs: Any,
) -> BatchStats:
    """
    Convert several Markdown files sequentially.

    A failing document is logged, counted and skipped; the batch always
    runs to the end.

    Args:
        inputs: Markdown files, in conversion order
        base_config: Template, theme and css shared by every document
        output_dir: Directory for the PDFs; next to each input if None
        on_result: Optional per-document callback (config, stats, error)
        logger: Optional logger
        **kwargs: Passed to Converter (composer, renderer, markdown)

    Returns:
        BatchStats with processed, created and failed counts
    """
    log = safe_logger(logger)
    stats = BatchStats()

    # One parser, composer and renderer for the whole batch
    kwargs.setdefault("markdown", MarkdownRenderer(logger=logger))
    kwargs.setdefault("composer", TemplateComposer(logger=logger))
    kwargs.setdefault("renderer", PdfRenderer(logger=logger))

    log.log_operation(
        "batch_start",
        {"output_dir": str(output_dir) if output_dir else None},
    )

    for input_path in inputs:
        config = base_config.for_input(input_path, output_dir)
        stats.files_processed += 1

        try:
            result = Converter(config, logger=logger, **kwargs).convert()
        except ConversionError as e:
            stats.errors += 1
            stats.failed.append(config.input_path)
            log.log_error(
                e,
                {
                    "operation": "batch_convert",
                    "input": str(config.input_path),
                },
            )
            if on_result:
                on_result(config, None, e)
            continue

        stats.pdfs_created += 1
        if on_result:
            on_result(config, result, None)

    log.log_operation("batch_complete", stats.to_dict())
    return stats
