#!/usr/bin/env python3
"""
document.py
-----------
Full HTML document composition from a rendered fragment.

Resolves the named template and theme through an AssetLibrary, appends
the optional custom stylesheet, and fills the template's literal
placeholders:

    {{TITLE}}    front matter title, else the input file name
    {{CSS}}      theme stylesheet followed by the custom stylesheet
    {{CONTENT}}  rendered HTML fragment

Asset lookup never fails: an unknown template or theme name resolves to
the built-in default. Only an explicitly configured custom stylesheet
that cannot be read is an error.

Usage:
    composer = TemplateComposer(AssetLibrary(), logger=logger)
    html = composer.compose(fragment, config, front_matter)

    # Tests: supply assets as a dict
    library = AssetLibrary(assets={"templates/plain.html": "{{CONTENT}}"})
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from html import escape
from pathlib import Path
from typing import Dict, Optional

# --- Third-party imports ---
from jinja2 import BaseLoader, DictLoader, Environment, FileSystemLoader, TemplateNotFound

# --- Local imports ---
from mdpress.builders.defaults import DEFAULT_CSS, DEFAULT_TEMPLATE_HTML
from mdpress.core.exceptions import TemplateError
from mdpress.core.logging_manager import MdpressLogger, safe_logger
from mdpress.core.paths import ASSETS_DIR
from mdpress.dataclasses.front_matter import FrontMatter
from mdpress.dataclasses.run_config import RunConfig
from mdpress.utils.templates import substitute_variables


class AssetLibrary:
    """
    Read-only provider of named templates and theme stylesheets.

    Assets are addressed as ``templates/<name>.html`` and
    ``themes/<name>.css`` through a Jinja2 loader. Only the loader's lookup
    is used; the sources are never rendered as Jinja2 templates.

    Attributes:
        env: Jinja2 Environment holding the loader
    """

    def __init__(
        self,
        assets_dir: Optional[Path] = None,
        assets: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Initialize the library.

        Provide either a filesystem assets directory or a dict of asset
        sources. If neither is provided, the bundled assets are used.

        Args:
            assets_dir: Directory holding templates/ and themes/ (FileSystemLoader)
            assets: Dict of asset path → source (DictLoader)

        Raises:
            ValueError: If both assets_dir and assets are provided
        """
        if assets_dir and assets:
            raise ValueError("Provide either assets_dir or assets, not both")

        loader: BaseLoader
        if assets is not None:
            loader = DictLoader(assets)
        else:
            loader = FileSystemLoader(str(assets_dir or ASSETS_DIR), encoding="utf-8")

        self.env = Environment(loader=loader, autoescape=False)

    def _lookup(self, path: str) -> Optional[str]:
        try:
            source, _, _ = self.env.loader.get_source(self.env, path)  # type: ignore[union-attr]
        except TemplateNotFound:
            return None
        return source

    def template(self, name: str) -> Optional[str]:
        """
        Look up a template document by name.

        Returns:
            Template source, or None if no such template exists
        """
        return self._lookup(f"templates/{name}.html")

    def theme(self, name: str) -> Optional[str]:
        """
        Look up a theme stylesheet by name.

        Returns:
            Stylesheet source, or None if no such theme exists
        """
        return self._lookup(f"themes/{name}.css")

    def list_templates(self) -> list:
        """Names of all available templates (not counting the built-in default)."""
        return sorted(
            path[len("templates/"):-len(".html")]
            for path in self.env.list_templates()
            if path.startswith("templates/") and path.endswith(".html")
        )

    def list_themes(self) -> list:
        """Names of all available themes (not counting the built-in default)."""
        return sorted(
            path[len("themes/"):-len(".css")]
            for path in self.env.list_templates()
            if path.startswith("themes/") and path.endswith(".css")
        )


class TemplateComposer:
    """
    Wraps rendered fragments in a styled, complete HTML document.

    Attributes:
        library: Asset provider for templates and themes
        logger: Optional logger
    """

    def __init__(
        self,
        library: Optional[AssetLibrary] = None,
        logger: Optional[MdpressLogger] = None,
    ) -> None:
        self.library = library or AssetLibrary()
        self.logger = logger

    def load_template(self, name: str) -> str:
        """Return the named template, or the built-in default template."""
        template = self.library.template(name) if name else None
        if template is None:
            safe_logger(self.logger).log_debug(
                f"Template '{name}' not found, using built-in default"
            )
            return DEFAULT_TEMPLATE_HTML
        return template

    def load_css(self, config: RunConfig) -> str:
        """
        Compose the stylesheet for a conversion.

        The named theme (or the built-in default stylesheet) comes first,
        followed by the custom stylesheet when one is configured.

        Args:
            config: Effective configuration

        Returns:
            Combined CSS text

        Raises:
            TemplateError: If the configured custom stylesheet cannot be read
        """
        theme_css = self.library.theme(config.theme) if config.theme else None
        if theme_css is None:
            safe_logger(self.logger).log_debug(
                f"Theme '{config.theme}' not found, using built-in default"
            )
            theme_css = DEFAULT_CSS

        parts = [theme_css, "\n"]

        if config.css_path is not None:
            try:
                parts.append(config.css_path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError, ValueError) as e:
                raise TemplateError(
                    f"Failed to read custom CSS file: {config.css_path}", cause=e
                ) from e

        return "".join(parts)

    @staticmethod
    def document_title(config: RunConfig, front_matter: FrontMatter) -> str:
        """Front matter title, else the input file's base name."""
        return front_matter.title or config.input_path.name

    def compose(
        self, content: str, config: RunConfig, front_matter: FrontMatter
    ) -> str:
        """
        Build the final HTML document.

        Args:
            content: Rendered HTML fragment (TOC already injected)
            config: Effective configuration (after front matter merge)
            front_matter: Document front matter

        Returns:
            Complete HTML document

        Raises:
            TemplateError: If the custom stylesheet cannot be read
        """
        template = self.load_template(config.template_name)
        css = self.load_css(config)

        document = substitute_variables(
            template,
            {
                "TITLE": escape(self.document_title(config, front_matter), quote=False),
                "CSS": css,
                "CONTENT": content,
            },
        )

        safe_logger(self.logger).log_operation(
            "document_composed",
            {
                "template": config.template_name,
                "theme": config.theme,
                "css": str(config.css_path) if config.css_path else None,
                "html_chars": len(document),
            },
        )
        return document
