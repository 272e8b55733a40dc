"""
Conversion Commands
------------------------

Commands for turning Markdown files into PDFs.

Commands:
    - convert: Convert a single Markdown file (md → pdf)
    - batch: Convert all Markdown files matching a glob pattern

Files are converted one at a time; a failing file in a batch is reported
and the batch moves on.
"""
from __future__ import annotations

import click
from pathlib import Path
from typing import Optional

from mdpress.builders.pdfbuilder import PdfRenderer
from mdpress.core.cli import ConversionStats, format_size
from mdpress.core.cli_options import output_dir_option, style_options
from mdpress.core.exceptions import ConversionError, InputError, OutputError
from mdpress.core.logging_manager import MdpressLogger, handle_cli_error
from mdpress.dataclasses.run_config import RunConfig
from mdpress.pipeline import md2pdf
from mdpress.utils.fs import find_markdown_files


def report_result(
    config: RunConfig,
    stats: Optional[ConversionStats],
    error: Optional[ConversionError],
) -> None:
    """Echo one line per converted (or failed) document."""
    if stats is not None:
        click.echo(f"  ✓ {config.input_path} → {config.output_path} ({stats.summary()})")
    else:
        click.echo(f"  ✗ {config.input_path}: {error}", err=True)


@click.command("convert")
@click.argument(
    "input_path",
    metavar="INPUT",
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output PDF file (default: INPUT with a .pdf suffix)",
)
@style_options
@click.pass_context
def convert(
    ctx: click.Context,
    input_path: str,
    output: Optional[str],
    template: str,
    css: Optional[str],
    theme: str,
    timeout: float,
) -> None:
    """
    Convert a Markdown file to PDF.

    Front matter in the document (title, theme, template, css) overrides
    the options given here.
    """
    logger: MdpressLogger = ctx.obj["logger"]

    config = RunConfig.for_file(
        Path(input_path),
        output_path=Path(output) if output else None,
        template_name=template,
        css_path=Path(css) if css else None,
        theme=theme,
    )

    click.echo(f"📄 Converting {config.input_path}...")

    try:
        stats = md2pdf.convert_file(
            config,
            renderer=PdfRenderer(timeout=timeout, logger=logger),
            logger=logger,
        )

        click.echo(f"\n✅ Successfully converted to {config.output_path}")
        click.echo(f"  Input size: {format_size(stats.input_size)}")
        click.echo(f"  Output size: {format_size(stats.output_size)}")
        click.echo(f"  Duration: {stats.duration():.2f}s")

    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "convert",
            additional_context={"input": input_path, "output": str(config.output_path)},
        )


@click.command("batch")
@click.argument("pattern")
@output_dir_option
@style_options
@click.pass_context
def batch(
    ctx: click.Context,
    pattern: str,
    output_dir: Optional[str],
    template: str,
    css: Optional[str],
    theme: str,
    timeout: float,
) -> None:
    """
    Convert all Markdown files matching PATTERN.

    PATTERN is a glob; quote it so the shell does not expand it. Use ``**``
    to search subdirectories. Non-Markdown matches are skipped.
    """
    logger: MdpressLogger = ctx.obj["logger"]
    out_dir = Path(output_dir) if output_dir else None

    try:
        files = find_markdown_files(pattern)
        if not files:
            raise InputError(f"No Markdown files match pattern: {pattern}")

        if out_dir is not None:
            try:
                out_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise OutputError(
                    f"Failed to create output directory: {out_dir}", cause=e
                ) from e

        click.echo(f"📚 Converting {len(files)} files...")

        base_config = RunConfig.for_file(
            files[0],
            output_dir=out_dir,
            template_name=template,
            css_path=Path(css) if css else None,
            theme=theme,
        )
        stats = md2pdf.convert_batch(
            files,
            base_config,
            output_dir=out_dir,
            on_result=report_result,
            renderer=PdfRenderer(timeout=timeout, logger=logger),
            logger=logger,
        )

        click.echo(f"\n{stats.summary()}")
        click.echo(f"  Duration: {stats.duration():.2f}s")

    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "batch",
            additional_context={"pattern": pattern},
        )


__all__ = ["convert", "batch", "report_result"]
