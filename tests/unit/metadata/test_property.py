"""Tests for property descriptors."""

import dataclasses

import pytest

from docmeta.metadata.property import Property, PropertyType, ValueType


class TestPropertyCreation:
    """Tests for Property construction."""

    def test_defaults_to_simple_text(self):
        """A bare Property should be SIMPLE and TEXT."""
        prop = Property("title")

        assert prop.name == "title"
        assert prop.property_type is PropertyType.SIMPLE
        assert prop.value_type is ValueType.TEXT

    @pytest.mark.parametrize(
        "factory,value_type",
        [
            (Property.text, ValueType.TEXT),
            (Property.integer, ValueType.INTEGER),
            (Property.date, ValueType.DATE),
        ],
    )
    def test_simple_factories(self, factory, value_type):
        """Factory classmethods should build SIMPLE descriptors of their kind."""
        prop = factory("key")

        assert prop == Property("key", PropertyType.SIMPLE, value_type)
        assert prop.is_simple is True
        assert prop.is_multi_valued is False

    def test_multi_valued_factory_defaults_to_text(self):
        """multi_valued should default to TEXT values."""
        prop = Property.multi_valued("Message-To")

        assert prop.property_type is PropertyType.MULTI_VALUED
        assert prop.value_type is ValueType.TEXT
        assert prop.is_multi_valued is True
        assert prop.is_simple is False

    def test_multi_valued_factory_accepts_value_type(self):
        """multi_valued should keep the requested value type."""
        prop = Property.multi_valued("tiff:BitsPerSample", ValueType.INTEGER)

        assert prop.value_type is ValueType.INTEGER


class TestPropertyValueSemantics:
    """Tests for immutability and equality."""

    def test_is_frozen(self):
        """Descriptors should not be mutable."""
        prop = Property.integer("Page-Count")

        with pytest.raises(dataclasses.FrozenInstanceError):
            prop.name = "Word-Count"

    def test_equal_descriptors_hash_alike(self):
        """Equal descriptors should be interchangeable as dict keys."""
        first = Property.date("Creation-Date")
        second = Property.date("Creation-Date")

        assert first == second
        assert {first: 1}[second] == 1

    def test_same_name_different_kind_not_equal(self):
        """Descriptors differing only in kind should not be equal."""
        assert Property.integer("x") != Property.date("x")
        assert Property.text("x") != Property.multi_valued("x")

    def test_str_is_name(self):
        """str() should give the metadata name."""
        assert str(Property.text("resourceName")) == "resourceName"
