#!/usr/bin/env python3
"""
front_matter.py
-------------------

Defines the `FrontMatter` class, the presentation settings a document can
carry in its leading YAML block:

    ---
    title: Quarterly Report
    theme: dark
    template: technical
    css: styles/print.css
    ---

Every field is optional. Values found here override the settings the
conversion was invoked with (see `RunConfig.merge_front_matter`).
"""
from __future__ import annotations

# --- Standard Library ---
from dataclasses import dataclass
from typing import Any, Mapping

# --- Local ---
from mdpress.core.exceptions import FrontMatterError


FRONT_MATTER_KEYS = ("title", "theme", "template", "css")
"""Keys recognized in a front matter block; anything else is ignored."""


@dataclass(frozen=True)
class FrontMatter:
    """
    Presentation metadata parsed from a document's front matter.

    Fields:
    - title:    Display title (falls back to the input file name)
    - theme:    Theme stylesheet name
    - template: Template document name
    - css:      Path of an extra stylesheet

    An empty string means the field was absent.
    """
    title:    str = ""
    theme:    str = ""
    template: str = ""
    css:      str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FrontMatter":
        """
        Build a FrontMatter from a parsed YAML mapping.

        Values are kept as their string form with surrounding whitespace
        intact. Parsed through ``FrontMatterLoader`` a scalar keeps its
        source text (``title: true`` → ``"true"``). ``null`` counts as
        absent and unknown keys are ignored.

        Args:
            data: Parsed YAML mapping

        Returns:
            FrontMatter instance

        Raises:
            FrontMatterError: If a recognized key holds a list or mapping
        """
        values = {}
        for key in FRONT_MATTER_KEYS:
            value = data.get(key)
            if value is None:
                continue
            if isinstance(value, (list, dict)):
                raise FrontMatterError(
                    f"Front matter field '{key}' must be a string, "
                    f"got {type(value).__name__}"
                )
            values[key] = str(value)
        return cls(**values)

    def is_empty(self) -> bool:
        """Return True when no field is set."""
        return not (self.title or self.theme or self.template or self.css)
