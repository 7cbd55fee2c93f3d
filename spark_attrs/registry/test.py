"""Unit tests for the attribute registry."""

from enum import Enum

import pytest
from pydantic import ValidationError as PydanticValidationError

from .lib import (
    BASE_ATTRIBUTES,
    AttributeRegistry,
    ConfigurationError,
    TagAttributeSpec,
    TagGroup,
    export_json_schema,
    group_key,
)


class Theme(str, Enum):
    DARK = "dark"


class TestDeclare:
    """Tests for attribute declaration."""

    @pytest.mark.unit
    def test_base_attributes_seeded(self):
        """Every registry starts with the fixed base attributes."""
        registry = AttributeRegistry("Test")
        assert registry.defaults() == dict.fromkeys(BASE_ATTRIBUTES)

    @pytest.mark.unit
    def test_positional_and_keyword_defaults(self):
        """Positional names default to None, keywords to their value."""
        registry = AttributeRegistry("Test")
        registry.declare("foo", bar="baz")
        assert registry.is_declared("foo")
        assert registry.defaults()["foo"] is None
        assert registry.defaults()["bar"] == "baz"

    @pytest.mark.unit
    def test_redeclare_overwrites(self):
        """Declaring a name again replaces its default."""
        registry = AttributeRegistry("Test")
        registry.declare(size="small")
        registry.declare(size="large")
        assert registry.defaults()["size"] == "large"
        assert registry.names().count("size") == 1

    @pytest.mark.unit
    def test_declaration_order_kept(self):
        """Names come back in declaration order."""
        registry = AttributeRegistry("Test")
        registry.declare("b", "a")
        assert registry.names()[-2:] == ["b", "a"]


class TestTagAttributes:
    """Tests for tag attribute flags."""

    @pytest.mark.unit
    def test_top_level_tag_attribute(self):
        """Plain tag attributes land in the NONE group."""
        registry = AttributeRegistry("Test")
        registry.declare_tag_attribute("foo", bar=True)
        assert registry.tag_attributes(TagGroup.NONE) == ["foo", "bar"]
        assert registry.defaults()["bar"] is True

    @pytest.mark.unit
    def test_data_and_aria_keywords(self):
        """data= and aria= mappings declare grouped attributes."""
        registry = AttributeRegistry("Test")
        registry.declare_tag_attribute(data={"foo": None}, aria={"label": "x"})
        assert registry.tag_attributes(TagGroup.DATA) == ["foo"]
        assert registry.tag_attributes(TagGroup.ARIA) == ["label"]
        assert registry.defaults()["label"] == "x"

    @pytest.mark.unit
    def test_group_shorthands(self):
        """data/aria shorthands match the keyword form."""
        registry = AttributeRegistry("Test")
        registry.declare_data_attribute("foo", bar=True)
        registry.declare_aria_attribute("expanded")
        assert registry.tag_spec("bar") == TagAttributeSpec(
            name="bar", group=TagGroup.DATA
        )
        assert registry.tag_spec("expanded").group == TagGroup.ARIA
        assert registry.tag_spec("missing") is None

    @pytest.mark.unit
    def test_spec_is_frozen(self):
        """TagAttributeSpec instances are immutable."""
        spec = TagAttributeSpec(name="foo")
        with pytest.raises(PydanticValidationError):
            spec.name = "bar"


class TestDefaultGroups:
    """Tests for default group resolution."""

    @pytest.mark.unit
    def test_selects_matching_table(self):
        """The trigger value picks its defaults."""
        registry = AttributeRegistry("Test")
        registry.declare_default_group(theme={"a": {"bar": True}, "b": {"baz": True}})
        assert registry.resolve_default_group("theme", "b") == {"baz": True}

    @pytest.mark.unit
    def test_boolean_and_enum_triggers(self):
        """Lookup compares string forms."""
        registry = AttributeRegistry("Test")
        registry.declare_default_group(
            foo={"true": {"bar": 1}}, theme={"dark": {"baz": 2}}
        )
        assert registry.resolve_default_group("foo", True) == {"bar": 1}
        assert registry.resolve_default_group("theme", Theme.DARK) == {"baz": 2}

    @pytest.mark.unit
    def test_no_match_is_empty(self):
        """Unknown trigger values and None select nothing."""
        registry = AttributeRegistry("Test")
        registry.declare_default_group(theme={"a": {"bar": True}})
        assert registry.resolve_default_group("theme", "z") == {}
        assert registry.resolve_default_group("theme", None) == {}
        assert registry.resolve_default_group("other", "a") == {}

    @pytest.mark.unit
    def test_malformed_group_raises(self):
        """A non-mapping entry fails when selected."""
        registry = AttributeRegistry("Test")
        registry.declare_default_group(theme={"test": True})

        with pytest.raises(ConfigurationError) as exc_info:
            registry.resolve_default_group("theme", "test")

        assert "In argument group `test`, value `True` must be a mapping." in str(
            exc_info.value
        )
        assert exc_info.value.group_value == "test"
        assert exc_info.value.value is True

    @pytest.mark.unit
    def test_resolve_all_groups(self):
        """Every matching group contributes."""
        registry = AttributeRegistry("Test")
        registry.declare_default_group(
            theme={"a": {"bar": 1}}, size={"s": {"baz": 2}}
        )
        assert registry.resolve_default_groups({"theme": "a", "size": "s"}) == {
            "bar": 1,
            "baz": 2,
        }

    @pytest.mark.unit
    def test_group_key(self):
        """group_key normalizes booleans and enums."""
        assert group_key(True) == "true"
        assert group_key(Theme.DARK) == "dark"
        assert group_key("a") == "a"


class TestLifecycle:
    """Tests for freezing and inheritance."""

    @pytest.mark.unit
    def test_frozen_rejects_declarations(self):
        """Declaring after freeze() raises."""
        registry = AttributeRegistry("Frozen")
        registry.freeze()
        assert registry.frozen
        with pytest.raises(ConfigurationError, match="Frozen"):
            registry.declare("foo")
        with pytest.raises(ConfigurationError):
            registry.declare_default_group(foo={})

    @pytest.mark.unit
    def test_child_copies_parent(self):
        """A child registry inherits without sharing state."""
        parent = AttributeRegistry("Parent")
        parent.declare(size="small")
        parent.declare_data_attribute("foo")
        parent.declare_default_group(size={"small": {"x": 1}})
        parent.freeze()

        child = AttributeRegistry("Child", parent=parent)
        child.declare(color="red")
        child.declare_default_group(size={"large": {"x": 2}})

        assert not child.frozen
        assert child.defaults()["size"] == "small"
        assert child.tag_attributes(TagGroup.DATA) == ["foo"]
        assert "color" not in parent.defaults()
        assert "large" not in parent.default_groups["size"]


class TestJsonSchema:
    """Tests for JSON Schema export."""

    @pytest.mark.unit
    def test_properties_follow_declarations(self):
        """Each declared attribute becomes a property."""
        registry = AttributeRegistry("Badge")
        registry.declare(size="small")
        registry.declare_data_attribute("count")

        schema = registry.json_schema()

        assert schema["title"] == "Badge"
        assert set(schema["properties"]) == {*BASE_ATTRIBUTES, "size", "count"}
        assert schema["properties"]["size"]["default"] == "small"
        assert "data group" in schema["properties"]["count"]["description"]
        assert "required" not in schema


class TestExportJsonSchema:
    """Tests for the module-level schema export."""

    @pytest.mark.unit
    def test_export_from_component_class(self, component_cls):
        """The schema is titled after the class and lists its attributes."""
        component_cls.tag_attribute(size="small")

        schema = export_json_schema(component_cls)

        assert schema["title"] == component_cls.__name__
        assert schema["properties"]["size"]["default"] == "small"
        assert "none group" in schema["properties"]["size"]["description"]
        assert component_cls.json_schema() == schema


class TestDefaultCopies:
    """Tests for copies handed out by the registry."""

    @pytest.mark.unit
    def test_defaults_are_deep_copies(self):
        """Mutating returned defaults leaves the registry unchanged."""
        registry = AttributeRegistry("Test")
        registry.declare(tags=["a"])
        registry.defaults()["tags"].append("b")
        assert registry.defaults()["tags"] == ["a"]

    @pytest.mark.unit
    def test_group_defaults_are_deep_copies(self):
        """Mutating resolved group values leaves the table unchanged."""
        registry = AttributeRegistry("Test")
        registry.declare_default_group(theme={"a": {"tags": ["x"]}})
        registry.resolve_default_group("theme", "a")["tags"].append("y")
        assert registry.resolve_default_group("theme", "a") == {"tags": ["x"]}

    @pytest.mark.unit
    def test_self_as_attribute_name(self):
        """self can be declared through keyword defaults."""
        registry = AttributeRegistry("Test")
        registry.declare(self=1)
        registry.declare_default_group(self={"1": {"x": 2}})
        assert registry.defaults()["self"] == 1
        assert registry.resolve_default_group("self", 1) == {"x": 2}
