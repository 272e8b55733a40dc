"""
test_slugify.py
---------------
Unit tests for heading slugs.
"""
import pytest

from mdpress.utils.slugify import FALLBACK_SLUG, slugify


class TestSlugify:
    """Test slugify function."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Getting Started", "getting-started"),
            ("Qué es esto?", "que-es-esto"),
            ("C++ & Rust — a comparison", "c-rust-a-comparison"),
            ("v1.2 Release", "v1-2-release"),
            ("snake_case_name", "snake-case-name"),
            ("Don't Panic", "dont-panic"),
            ("  padded  ", "padded"),
        ],
    )
    def test_examples(self, text, expected):
        """Representative headings."""
        assert slugify(text) == expected

    def test_stable(self):
        """The same text always gives the same slug."""
        assert slugify("Release Notes 2024") == slugify("Release Notes 2024")

    def test_fallback(self):
        """Text without letters or digits falls back."""
        assert slugify("!!!") == FALLBACK_SLUG
        assert slugify("") == FALLBACK_SLUG

    def test_max_length(self):
        """Long headings are truncated without a trailing hyphen."""
        slug = slugify("word " * 40, max_length=20)
        assert len(slug) <= 20
        assert not slug.endswith("-")
