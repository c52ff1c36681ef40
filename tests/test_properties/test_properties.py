"""Tests for the property matcher."""

import pytest

from minicss.errors import UnknownProperty
from minicss.model import Property, PropertyName
from minicss.properties import KNOWN_PROPERTIES, match_property


class TestMatchProperty:
    def test_known_names(self):
        assert KNOWN_PROPERTIES == ("color", "background")

    def test_color(self):
        assert match_property("color", "red") == Property(name=PropertyName.COLOR, value="red")

    def test_background(self):
        prop = match_property("background", "white")
        assert prop.name is PropertyName.BACKGROUND
        assert prop.value == "white"

    def test_value_is_verbatim(self):
        assert match_property("color", "ReD").value == "ReD"

    def test_unknown_name(self):
        with pytest.raises(UnknownProperty) as exc_info:
            match_property("margin", "a")
        assert exc_info.value.name == "margin"

    def test_case_sensitive(self):
        with pytest.raises(UnknownProperty):
            match_property("Color", "red")
