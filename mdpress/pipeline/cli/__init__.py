#!/usr/bin/env python3
"""
mdpress CLI
------------------------

Command-line interface for converting Markdown documents to styled PDFs.

Commands:
    - convert: Convert one Markdown file
    - batch: Convert every Markdown file matching a glob pattern
    - watch: Reconvert files in a directory as they change

Usage:
    # Single file
    mdpress convert notes.md
    mdpress convert notes.md -o out/notes.pdf --theme dark

    # Many files
    mdpress batch "docs/**/*.md" --output-dir pdf

    # Live preview
    mdpress watch docs --output-dir pdf
"""
from __future__ import annotations

import click
from pathlib import Path

from mdpress.core.cli import setup_logger
from mdpress.core.cli_options import log_dir_option, verbose_option


@click.group()
@log_dir_option
@verbose_option
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """Convert Markdown documents to styled PDFs"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "cli", verbose=verbose)


# Import and register commands from submodules
from .conversion import convert, batch
from .monitor import watch

# Register commands
cli.add_command(convert)
cli.add_command(batch)
cli.add_command(watch)


if __name__ == "__main__":
    cli(obj={})
