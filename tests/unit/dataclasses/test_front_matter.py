"""
Tests for the FrontMatter dataclass.
"""
import dataclasses

import pytest

from mdpress.core.exceptions import FrontMatterError
from mdpress.dataclasses.front_matter import FRONT_MATTER_KEYS, FrontMatter


class TestFrontMatter:
    """Tests for FrontMatter construction."""

    def test_defaults_empty(self):
        """A default instance has no fields set."""
        fm = FrontMatter()
        assert fm.is_empty()
        assert (fm.title, fm.theme, fm.template, fm.css) == ("", "", "", "")

    def test_from_mapping(self):
        """Known keys are read as given, extra keys ignored."""
        fm = FrontMatter.from_mapping(
            {"title": "  Report ", "theme": "dark", "tags": ["x"], "date": "2024-01-01"}
        )
        assert fm.title == "  Report "
        assert fm.theme == "dark"
        assert fm.template == ""
        assert not fm.is_empty()

    def test_null_is_absent(self):
        """A null value counts as absent."""
        assert FrontMatter.from_mapping({"theme": None}).is_empty()

    @pytest.mark.parametrize("value", [["a", "b"], {"nested": True}])
    def test_structured_value_rejected(self, value):
        """Lists and mappings are not valid field values."""
        with pytest.raises(FrontMatterError, match="must be a string"):
            FrontMatter.from_mapping({"css": value})

    def test_immutable(self):
        """FrontMatter cannot be modified after parsing."""
        fm = FrontMatter(title="X")
        with pytest.raises(dataclasses.FrozenInstanceError):
            fm.title = "Y"

    def test_keys(self):
        """The recognized keys."""
        assert set(FRONT_MATTER_KEYS) == {"title", "theme", "template", "css"}
