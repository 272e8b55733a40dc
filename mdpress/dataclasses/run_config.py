#!/usr/bin/env python3
"""
run_config.py
-------------------

Defines the `RunConfig` class, the effective settings of one conversion:
which file to read, where to write the PDF, and which template, theme and
extra stylesheet shape the output.

A RunConfig is built by the caller (the CLI, or a programmatic user) and
then folded together with the document's front matter. Front matter wins:
any non-empty `theme`, `template` or `css` value it carries replaces the
invocation-time value, even one the user passed explicitly.
"""
from __future__ import annotations

# --- Standard Library ---
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

# --- Local ---
from mdpress.dataclasses.front_matter import FrontMatter
from mdpress.utils.fs import output_path_for


DEFAULT_TEMPLATE = "default"
"""Template used when none is requested."""

DEFAULT_THEME = "light"
"""Theme used when none is requested."""


@dataclass
class RunConfig:
    """
    Effective settings for one conversion.

    Fields:
    - input_path:    Markdown source
    - output_path:   PDF destination
    - template_name: Named template document
    - css_path:      Optional extra stylesheet appended after the theme
    - theme:         Named theme stylesheet

    Mutated in place by `merge_front_matter`; never shared between two
    conversions.
    """
    input_path:    Path
    output_path:   Path
    template_name: str            = DEFAULT_TEMPLATE
    css_path:      Optional[Path] = None
    theme:         str            = DEFAULT_THEME

    def __post_init__(self) -> None:
        self.input_path = Path(self.input_path)
        self.output_path = Path(self.output_path)
        if self.css_path is not None:
            self.css_path = Path(self.css_path)

    # ---- Construction ----
    @classmethod
    def for_file(
        cls,
        input_path: Path,
        output_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        template_name: str = DEFAULT_TEMPLATE,
        css_path: Optional[Path] = None,
        theme: str = DEFAULT_THEME,
    ) -> "RunConfig":
        """
        Build a config, deriving the output path when none is given.

        Args:
            input_path: Markdown source
            output_path: Explicit PDF destination (wins over output_dir)
            output_dir: Directory for ``<stem>.pdf``; next to the input if None
            template_name: Template name
            css_path: Optional extra stylesheet
            theme: Theme name

        Returns:
            New RunConfig
        """
        input_path = Path(input_path)
        if output_path is None:
            output_path = output_path_for(input_path, output_dir)
        return cls(
            input_path=input_path,
            output_path=Path(output_path),
            template_name=template_name,
            css_path=css_path,
            theme=theme,
        )

    def for_input(
        self, input_path: Path, output_dir: Optional[Path] = None
    ) -> "RunConfig":
        """
        Copy this config for another input file.

        Used by batch and watch mode: the template, theme and css of the
        base config are shared read-only values, the paths are per file.

        Args:
            input_path: Markdown source for the new conversion
            output_dir: Directory for the PDF; next to the input if None

        Returns:
            Independent RunConfig for ``input_path``
        """
        input_path = Path(input_path)
        return replace(
            self,
            input_path=input_path,
            output_path=output_path_for(input_path, output_dir),
        )

    # ---- Merging ----
    def merge_front_matter(self, front_matter: FrontMatter) -> None:
        """
        Fold document front matter into this config, in place.

        Non-empty `theme`, `template` and `css` values overwrite the current
        fields unconditionally. `title` has no counterpart here.

        Args:
            front_matter: Parsed front matter of the document
        """
        if front_matter.theme:
            self.theme = front_matter.theme
        if front_matter.template:
            self.template_name = front_matter.template
        if front_matter.css:
            self.css_path = Path(front_matter.css)


def merge_front_matter(config: RunConfig, front_matter: FrontMatter) -> RunConfig:
    """
    Merge front matter into ``config`` in place and return it.

    Args:
        config: Effective configuration (mutated)
        front_matter: Parsed front matter

    Returns:
        The same config, for chaining

    Examples:
        >>> cfg = RunConfig(Path("a.md"), Path("a.pdf"), theme="light")
        >>> merge_front_matter(cfg, FrontMatter(theme="dark")).theme
        'dark'
    """
    config.merge_front_matter(front_matter)
    return config
