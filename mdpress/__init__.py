"""
mdpress
=======

Markdown to PDF conversion with front matter, templates and themes.

Converts a Markdown document into a print-styled HTML document and renders
it to PDF through a headless Chromium session. Documents may carry a YAML
front matter block that selects the title, template, theme and an extra
stylesheet. Single files, glob batches and watched directories are supported.

Main Components:
    - pipeline: Conversion orchestration (md2pdf), watch mode, CLI
    - builders: Markdown rendering, TOC injection, document composition, PDF
    - core: Logging, exceptions, paths, temporary files, CLI stats
    - dataclasses: FrontMatter and RunConfig
    - utils: Front matter extraction, slugs, placeholder substitution, paths

Primary Interfaces:
    - mdpress.pipeline.cli: ``mdpress`` command group
    - mdpress.pipeline.md2pdf.convert_file: One-shot programmatic conversion

Example Usage:
    >>> from pathlib import Path
    >>> from mdpress import RunConfig, convert_file
    >>> config = RunConfig(input_path=Path("notes.md"), output_path=Path("notes.pdf"))
    >>> stats = convert_file(config)
    >>> stats.summary()
"""

__version__ = "1.0.0"

from mdpress.dataclasses.run_config import RunConfig
from mdpress.pipeline.md2pdf import convert_file

__all__ = [
    "RunConfig",
    "convert_file",
]
