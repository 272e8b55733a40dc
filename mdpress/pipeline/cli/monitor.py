"""
Watch Command
------------------------

Reconvert Markdown files as they are saved.

Commands:
    - watch: Watch a directory (non-recursively) until interrupted
"""
from __future__ import annotations

import click
from pathlib import Path
from typing import Optional

from mdpress.builders.document import TemplateComposer
from mdpress.builders.html import MarkdownRenderer
from mdpress.builders.pdfbuilder import PdfRenderer
from mdpress.core.cli import ConversionStats
from mdpress.core.cli_options import output_dir_option, style_options
from mdpress.core.logging_manager import MdpressLogger, handle_cli_error
from mdpress.dataclasses.run_config import RunConfig
from mdpress.pipeline import md2pdf
from mdpress.pipeline.watch import WatchDebouncer, watch_directory
from .conversion import report_result


@click.command("watch")
@click.argument("directory", type=click.Path(exists=True, file_okay=False))
@output_dir_option
@style_options
@click.pass_context
def watch(
    ctx: click.Context,
    directory: str,
    output_dir: Optional[str],
    template: str,
    css: Optional[str],
    theme: str,
    timeout: float,
) -> None:
    """
    Watch DIRECTORY and convert Markdown files when they change.

    Saves of the same file within two seconds trigger one conversion.
    A failed conversion is reported and watching continues. Stop with
    Ctrl+C.
    """
    logger: MdpressLogger = ctx.obj["logger"]
    watch_dir = Path(directory)
    out_dir = Path(output_dir) if output_dir else None

    # Paths are filled in per event
    base_config = RunConfig(
        input_path=watch_dir,
        output_path=watch_dir,
        template_name=template,
        css_path=Path(css) if css else None,
        theme=theme,
    )

    markdown = MarkdownRenderer(logger=logger)
    composer = TemplateComposer(logger=logger)
    renderer = PdfRenderer(timeout=timeout, logger=logger)

    def convert_one(config: RunConfig) -> ConversionStats:
        return md2pdf.convert_file(
            config,
            markdown=markdown,
            composer=composer,
            renderer=renderer,
            logger=logger,
        )

    debouncer = WatchDebouncer(
        base_config,
        output_dir=out_dir,
        convert=convert_one,
        on_result=report_result,
        logger=logger,
    )

    click.echo(f"👀 Watching {watch_dir} for changes (Ctrl+C to stop)...")

    try:
        conversions = watch_directory(watch_dir, debouncer)
        click.echo(f"\nWatch ended: {conversions} conversions")
    except KeyboardInterrupt:
        click.echo(f"\n⏹  Stopped watching ({debouncer.conversions} conversions)")
    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "watch",
            additional_context={"directory": directory},
        )


__all__ = ["watch"]
