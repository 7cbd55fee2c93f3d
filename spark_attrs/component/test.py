"""Unit tests for the attribute-aware component base class."""

import pytest

from spark_attrs.registry import ConfigurationError
from spark_attrs.validation import AttributeValidationError

from .lib import AttributeComponent


class TestDeclarations:
    """Tests for class-level declarations."""

    @pytest.mark.unit
    def test_has_default_attributes(self, component_cls):
        """A fresh class declares only the base attributes."""
        expected = {"id": None, "class": None, "data": None, "aria": None, "html": None}
        assert component_cls.declared_attributes() == expected

    @pytest.mark.unit
    def test_can_add_to_attributes(self, component_cls):
        """Positional declarations are recorded."""
        component_cls.define_attributes("foo")
        assert "foo" in component_cls.declared_attributes()

    @pytest.mark.unit
    def test_attributes_with_defaults(self, component_cls):
        """Keyword declarations carry defaults."""
        component_cls.define_attributes("foo", bar="baz")
        assert "foo" in component_cls.declared_attributes()
        assert component_cls.declared_attributes()["bar"] == "baz"

    @pytest.mark.unit
    def test_subclasses_do_not_leak(self, component_cls):
        """Declarations stay on the class that made them."""

        class Child(component_cls):
            pass

        Child.define_attributes("only_child")
        assert "only_child" in Child.declared_attributes()
        assert "only_child" not in component_cls.declared_attributes()

    @pytest.mark.unit
    def test_declaring_after_instantiation_fails(self, component_cls):
        """The registry is frozen by the first instance."""
        component_cls()
        with pytest.raises(ConfigurationError):
            component_cls.define_attributes("late")

    @pytest.mark.unit
    def test_json_schema(self, component_cls):
        """The class exports a schema of its attributes."""
        component_cls.define_attributes(size="small")
        schema = component_cls.json_schema()
        assert schema["properties"]["size"]["default"] == "small"


class TestAttributeStore:
    """Tests for construction-time resolution."""

    @pytest.mark.unit
    def test_initialize_attributes(self, component_cls):
        """Supplied values overlay static defaults."""
        component_cls.define_attributes("foo", bar="baz")

        component = component_cls(foo="filled")
        assert component.attribute("foo") == "filled"
        assert component.attribute("bar") == "baz"
        assert component.attributes == {"foo": "filled", "bar": "baz"}

    @pytest.mark.unit
    def test_accepts_mapping_argument(self, component_cls):
        """A mapping and keywords can both be supplied."""
        component_cls.define_attributes("foo", "bar")
        component = component_cls({"foo": 1}, bar=2)
        assert component.attributes == {"foo": 1, "bar": 2}

    @pytest.mark.unit
    def test_ignores_undefined_attributes(self, component_cls):
        """Undeclared keys are dropped."""
        component_cls.define_attributes(foo="bar")

        component = component_cls(test=True)
        assert component.attributes == {"foo": "bar"}
        assert component.attribute("test") is None

    @pytest.mark.unit
    def test_unknown_keys_do_not_change_result(self, component_cls):
        """Extra keys never affect the attribute map."""
        component_cls.define_attributes("foo", size="small")
        plain = component_cls(foo="x")
        noisy = component_cls(foo="x", nonsense=1, other={"a": 1})
        assert plain.attributes == noisy.attributes

    @pytest.mark.unit
    def test_unknown_keys_logged(self, component_cls, caplog, monkeypatch):
        """Dropped keys are logged at WARNING when configured."""
        monkeypatch.setenv("SPARK_ATTRS_LOG_UNKNOWN", "true")
        with caplog.at_level("WARNING", logger="spark-attrs.component"):
            component_cls(nonsense=1)
        assert "nonsense" in caplog.text

    @pytest.mark.unit
    def test_includes_base_attributes(self, component_cls):
        """Base attributes are always assignable."""
        attrs = {
            "id": "foo",
            "class": "bar",
            "data": {"baz": True},
            "aria": {"label": "test"},
            "html": {"role": "button"},
        }
        assert component_cls(**attrs).attributes == attrs

    @pytest.mark.unit
    def test_class_alias(self, component_cls):
        """class_ is accepted in place of class."""
        assert component_cls(class_="btn").classname == "btn"

    @pytest.mark.unit
    def test_true_stored_as_string(self, component_cls):
        """Top-level True is stored as "true", False as given."""
        component_cls.define_attributes("foo", "bar")
        component = component_cls(foo=True, bar=False)
        assert component.attribute("foo") == "true"
        assert component.attribute("bar") is False

    @pytest.mark.unit
    def test_set_attribute(self, component_cls):
        """Declared attributes can be updated after construction."""
        component_cls.define_attributes("foo")
        component = component_cls()
        component.set_attribute("foo", "later")
        assert component.attribute("foo") == "later"
        with pytest.raises(KeyError):
            component.set_attribute("missing", 1)


class TestDefaultGroups:
    """Tests for default groups."""

    @pytest.mark.unit
    def test_assigns_defaults(self, component_cls):
        """The trigger's default value selects a group too."""
        component_cls.define_attributes(bar="toast", theme="a")
        component_cls.attribute_default_group(
            theme={"a": {"bar": True, "baz": False}, "b": {"baz": True}}
        )

        assert component_cls().attributes == {"bar": "true", "theme": "a"}

        component = component_cls(theme="b")
        assert component.attributes == {"bar": "toast", "theme": "b"}
        assert component.extra("baz") is True

    @pytest.mark.unit
    def test_boolean_keys(self, component_cls):
        """A True trigger value selects the "true" group."""
        component_cls.define_attributes("foo")
        component_cls.attribute_default_group(foo={"true": {"bar": True, "baz": False}})

        component = component_cls(foo=True)
        assert component.attributes == {"foo": "true"}
        assert component.extra("bar") is True
        assert component.extra("baz") is False
        assert component.extras == {"bar": True, "baz": False}

    @pytest.mark.unit
    def test_precedence(self, component_cls):
        """supplied > default group > static default."""
        component_cls.define_attributes(theme="a", color="static", size="static")
        component_cls.attribute_default_group(
            theme={"a": {"color": "group", "size": "group"}}
        )

        component = component_cls(size="supplied")
        assert component.attribute("color") == "group"
        assert component.attribute("size") == "supplied"

    @pytest.mark.unit
    def test_raises_for_improperly_formed_groups(self, component_cls):
        """A non-mapping group entry fails at construction."""
        component_cls.define_attributes("theme")
        component_cls.attribute_default_group(theme={"test": True})

        with pytest.raises(ConfigurationError) as exc_info:
            component_cls(theme="test")

        assert "In argument group `test`, value `True` must be a mapping." in str(
            exc_info.value
        )
        assert exc_info.value.group_value == "test"


class TestProjection:
    """Tests for attr_hash and tag_attrs."""

    @pytest.mark.unit
    def test_attr_hash(self, component_cls):
        """Only present values are returned, True as "true"."""
        component_cls.define_attributes("a", b=True)

        component = component_cls(a=1)
        assert component.attr_hash("a", "b", "c", "id", "data") == {"a": 1, "b": "true"}

    @pytest.mark.unit
    def test_base_attrs_assignable_by_attributes(self, component_cls):
        """Base attributes feed tag_attrs."""
        component = component_cls(
            aria={"label": "test"},
            data={"some_data": True},
            id="foo",
            class_=["bar", "baz"],
            html={"role": "button"},
        )
        assert component.data == {"some-data": True}
        assert component.aria == {"label": "test"}
        assert component.classname == ["bar", "baz"]
        assert component.html == {"role": "button"}

        assert component.tag_attrs() == {
            "aria": {"label": "test"},
            "data": {"some-data": True},
            "class": ["bar", "baz"],
            "id": "foo",
            "role": "button",
        }
        assert component.html_attrs() == (
            'aria-label="test" class="bar baz" data-some-data="true" '
            'id="foo" role="button"'
        )

    @pytest.mark.unit
    def test_tag_attribute_injects_arguments(self, component_cls):
        """Top-level tag attributes are rendered."""
        component_cls.tag_attribute("foo", bar=True)

        assert component_cls().tag_attrs() == {"bar": "true"}
        component = component_cls(foo="hi", bar=False)
        assert component.tag_attrs() == {"foo": "hi", "bar": False}

    @pytest.mark.unit
    def test_tag_attribute_supports_data_key(self, component_cls):
        """tag_attribute(data=...) groups under data."""
        component_cls.tag_attribute(data={"foo": None, "bar": True})

        assert component_cls().tag_attrs() == {"data": {"bar": "true"}}
        component = component_cls(foo="hi", bar=False)
        assert component.tag_attrs() == {"data": {"foo": "hi", "bar": False}}

    @pytest.mark.unit
    def test_data_attribute_injects_arguments(self, component_cls):
        """data_attribute is the shorthand for the data group."""
        component_cls.data_attribute("foo", bar=True)

        assert component_cls().tag_attrs() == {"data": {"bar": "true"}}
        component = component_cls(foo="hi", bar=False)
        assert component.tag_attrs() == {"data": {"foo": "hi", "bar": False}}

    @pytest.mark.unit
    def test_tag_attribute_supports_aria_key(self, component_cls):
        """tag_attribute(aria=...) groups under aria."""
        component_cls.tag_attribute(aria={"foo": None, "bar": True})

        assert component_cls().tag_attrs() == {"aria": {"bar": "true"}}
        component = component_cls(foo="hi", bar=False)
        assert component.tag_attrs() == {"aria": {"foo": "hi", "bar": False}}

    @pytest.mark.unit
    def test_aria_attribute_injects_arguments(self, component_cls):
        """aria_attribute is the shorthand for the aria group."""
        component_cls.aria_attribute("foo", bar=True)

        assert component_cls().tag_attrs() == {"aria": {"bar": "true"}}
        component = component_cls(foo="hi", bar=False)
        assert component.tag_attrs() == {"aria": {"foo": "hi", "bar": False}}

    @pytest.mark.unit
    def test_empty_group_kept_but_not_rendered(self, component_cls):
        """A declared group with no values renders nothing."""
        component_cls.data_attribute("foo")

        component = component_cls()
        assert component.tag_attrs() == {"data": {}}
        assert component.html_attrs() == ""

    @pytest.mark.unit
    def test_group_values_merge_over_base(self, component_cls):
        """Declared data attributes override the data base attribute."""
        component_cls.data_attribute(controller="menu")

        component = component_cls(data={"controller": "other", "target": "x"})
        assert component.tag_attrs() == {
            "data": {"controller": "menu", "target": "x"}
        }
        assert component.html_attrs() == 'data-controller="menu" data-target="x"'


class TestValidation:
    """Tests for validates_attr."""

    @pytest.mark.unit
    def test_presence_raises(self, component_cls):
        """A missing required attribute fails."""
        component_cls.define_attributes("foo")
        component_cls.validates_attr("foo", presence=True)

        with pytest.raises(AttributeValidationError) as exc_info:
            component_cls().validate_or_raise()
        assert "Attribute foo can't be blank" in str(exc_info.value)

    @pytest.mark.unit
    def test_presence_passes(self, component_cls):
        """A present attribute passes."""
        component_cls.define_attributes("foo")
        component_cls.validates_attr("foo", presence=True)

        assert component_cls(foo=True).is_valid()

    @pytest.mark.unit
    def test_choices_raises(self, component_cls):
        """A value outside the choices fails."""
        component_cls.define_attributes("size")
        component_cls.validates_attr("size", choices=["small", "medium", "large"])

        with pytest.raises(AttributeValidationError) as exc_info:
            component_cls(size="xlarge").validate_or_raise()
        message = str(exc_info.value)
        assert 'Attribute size "xlarge" is not valid.' in message
        assert 'Options include: "small", "medium", or "large"' in message

    @pytest.mark.unit
    def test_choices_passes(self, component_cls):
        """A listed value passes."""
        component_cls.define_attributes("size")
        component_cls.validates_attr("size", choices=["small", "medium", "large"])

        assert component_cls(size="small").is_valid()

    @pytest.mark.unit
    def test_both_checks_run(self, component_cls):
        """presence and choices report independently."""
        component_cls.define_attributes("size")
        component_cls.validates_attr("size", presence=True, choices=["small"])

        errors = component_cls().validate()
        assert [error.error_type for error in errors] == ["presence", "choices"]


class TestBaseClass:
    """Tests for the base class itself."""

    @pytest.mark.unit
    def test_repr_lists_attributes(self, component_cls):
        """repr shows present attributes."""
        assert repr(component_cls(id="x")) == f"{component_cls.__name__}({{'id': 'x'}})"

    @pytest.mark.unit
    def test_subclass_of_base(self, component_cls):
        """The fixture returns an AttributeComponent subclass."""
        assert issubclass(component_cls, AttributeComponent)


class TestConstructionEdgeCases:
    """Tests for permissive construction and per-instance state."""

    @pytest.mark.unit
    def test_parameter_names_pass_through(self, component_cls):
        """Keys named like __init__ parameters are ignored like any other."""
        component_cls.define_attributes("size")

        component = component_cls(size="small", attributes="passthrough", self=1)
        assert component.attributes == {"size": "small"}

    @pytest.mark.unit
    def test_mapping_keys_named_like_parameters(self, component_cls):
        """The mapping argument may also carry such keys."""
        component_cls.define_attributes("size")

        component = component_cls({"attributes": 1, "self": 2}, size="small")
        assert component.attributes == {"size": "small"}

    @pytest.mark.unit
    def test_mutable_static_default_not_shared(self, component_cls):
        """Mutating one instance's default leaves the class default intact."""
        component_cls.define_attributes(**{"class": ["btn"]})

        first = component_cls()
        first.attribute("class").append("active")

        assert component_cls().attribute("class") == ["btn"]
        assert component_cls.declared_attributes()["class"] == ["btn"]

    @pytest.mark.unit
    def test_mutable_group_default_not_shared(self, component_cls):
        """Group-selected values are copied per instance."""
        component_cls.define_attributes(theme="a", tags=None)
        component_cls.attribute_default_group(theme={"a": {"tags": ["x"]}})

        first = component_cls()
        first.attribute("tags").append("y")
        first.extra("tags").append("z")

        fresh = component_cls()
        assert fresh.attribute("tags") == ["x"]
        assert fresh.extra("tags") == ["x"]

    @pytest.mark.unit
    def test_repr_after_failed_initialization(self, component_cls):
        """repr works on an instance whose attributes never resolved."""
        component_cls.define_attributes("theme")
        component_cls.attribute_default_group(theme={"bad": True})

        component = component_cls.__new__(component_cls)
        with pytest.raises(ConfigurationError):
            component.initialize_attributes({"theme": "bad"})
        assert repr(component) == f"{component_cls.__name__}({{}})"


class TestDeclarationNames:
    """Tests for attribute names that match method parameter names."""

    @pytest.mark.unit
    def test_cls_as_attribute_name(self, component_cls):
        """cls can be declared like any other attribute."""
        component_cls.define_attributes(cls=1)
        component_cls.tag_attribute(cls_tag="x")
        component_cls.data_attribute(cls="c")

        assert component_cls.declared_attributes()["cls"] == "c"
        assert component_cls(cls="given").attribute("cls") == "given"

    @pytest.mark.unit
    def test_default_group_on_cls_trigger(self, component_cls):
        """A default group can be keyed on an attribute named cls."""
        component_cls.define_attributes("cls")
        component_cls.attribute_default_group(cls={"a": {"picked": True}})

        assert component_cls(cls="a").extra("picked") is True


class TestGroupMerging:
    """Tests for data/aria sources merged by tag_attrs."""

    @pytest.mark.unit
    def test_html_data_merged_under_group(self, component_cls):
        """data passed through html survives a declared data group."""
        component_cls.data_attribute(controller="menu")

        component = component_cls(html={"data": {"x": 1}, "role": "menu"})
        assert component.tag_attrs() == {
            "data": {"x": 1, "controller": "menu"},
            "role": "menu",
        }
        assert component.html_attrs() == (
            'data-controller="menu" data-x="1" role="menu"'
        )

    @pytest.mark.unit
    def test_html_data_without_group(self, component_cls):
        """data passed through html renders with no group declared."""
        component = component_cls(html={"data": {"user_id": 7}})
        assert component.tag_attrs() == {"data": {"user-id": 7}}

    @pytest.mark.unit
    def test_stored_data_overrides_html_data(self, component_cls):
        """The data attribute wins over html's data entry."""
        component = component_cls(data={"x": 2}, html={"data": {"x": 1, "y": 1}})
        assert component.tag_attrs()["data"] == {"x": 2, "y": 1}

    @pytest.mark.unit
    def test_non_mapping_data_logged(self, component_cls, caplog):
        """A non-mapping data value is dropped with a debug log."""
        component_cls.data_attribute(controller="menu")

        with caplog.at_level("DEBUG", logger="spark-attrs.component"):
            tag = component_cls(data="oops").tag_attrs()

        assert tag == {"data": {"controller": "menu"}}
        assert "dropping non-mapping data value: 'oops'" in caplog.text
