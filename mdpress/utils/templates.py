"""
templates.py
------------
Literal placeholder substitution for document templates.

Templates mark insertion points with upper-case ``{{NAME}}`` tokens. The
substitution is a plain string replacement, not a template language, so
CSS and HTML content containing braces pass through untouched and a
template that omits a placeholder is still valid.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Any, Dict


def placeholder(name: str) -> str:
    """
    Return the literal token for a variable name.

    Example:
        >>> placeholder("TITLE")
        '{{TITLE}}'
    """
    return f"{{{{{name}}}}}"


def substitute_variables(template: str, variables: Dict[str, Any]) -> str:
    """
    Replace every ``{{NAME}}`` occurrence with its value.

    All placeholders are replaced in a single pass over the template, so a
    value that itself contains ``{{CSS}}`` (a code sample, say) is never
    expanded again and the order of ``variables`` does not matter.

    Args:
        template: Template string with {{NAME}} placeholders
        variables: Mapping of placeholder names to values; None → ""

    Returns:
        Template with all known placeholders substituted

    Example:
        >>> substitute_variables("<title>{{TITLE}}</title>", {"TITLE": "Notes"})
        '<title>Notes</title>'
    """
    if not variables:
        return template

    values = {
        placeholder(name): "" if value is None else str(value)
        for name, value in variables.items()
    }
    pattern = re.compile("|".join(re.escape(token) for token in values))
    return pattern.sub(lambda match: values[match.group(0)], template)
