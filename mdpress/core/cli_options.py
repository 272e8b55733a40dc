#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for the mdpress commands.

convert, batch and watch all accept the same presentation options, so
they are declared once here and stacked with ``style_options``.

Usage:
    from mdpress.core.cli_options import style_options, output_dir_option

    @cli.command()
    @click.argument("pattern")
    @output_dir_option
    @style_options
    def batch(pattern, output_dir, template, css, theme, timeout):
        pass
"""
from typing import Callable

import click

from mdpress.core.paths import LOG_DIR
from mdpress.dataclasses.run_config import DEFAULT_TEMPLATE, DEFAULT_THEME
from mdpress.builders.document import AssetLibrary
from mdpress.builders.pdfbuilder import RENDER_TIMEOUT


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose logging with detailed output"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files"
)


# ═══════════════════════════════════════════════════════════════════════════
# PATH OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

output_dir_option = click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Output directory for PDF files (default: next to each input)"
)


# ═══════════════════════════════════════════════════════════════════════════
# PRESENTATION OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

def _available(builtin: str, bundled: list) -> str:
    """Comma-separated names: the built-in default, then the bundled assets."""
    return ", ".join([builtin] + [name for name in bundled if name != builtin])


_BUNDLED = AssetLibrary()

template_option = click.option(
    "-t", "--template",
    default=DEFAULT_TEMPLATE,
    show_default=True,
    help=f"Template to use ({_available(DEFAULT_TEMPLATE, _BUNDLED.list_templates())})"
)

css_option = click.option(
    "--css",
    type=click.Path(dir_okay=False),
    default=None,
    help="Custom CSS file appended after the theme stylesheet"
)

theme_option = click.option(
    "--theme",
    default=DEFAULT_THEME,
    show_default=True,
    help=f"Theme to use ({_available(DEFAULT_THEME, _BUNDLED.list_themes())})"
)

timeout_option = click.option(
    "--timeout",
    type=click.FloatRange(min=1.0),
    default=RENDER_TIMEOUT,
    show_default=True,
    help="Seconds allowed for one PDF render"
)


def style_options(f: Callable) -> Callable:
    """
    Apply the template, css, theme and timeout options to a command.

    Args:
        f: Click command callback

    Returns:
        Decorated callback
    """
    for option in (timeout_option, theme_option, css_option, template_option):
        f = option(f)
    return f
