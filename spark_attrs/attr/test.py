"""Unit tests for the attribute serializer."""

from enum import Enum

import pytest

from .lib import Attr, dasherize, format_value, is_empty, to_attr_string


class Size(str, Enum):
    SMALL = "small"


class TestDasherize:
    """Tests for key dasherization."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("a_b", "a-b"),
            ("a__b", "a-b"),
            ("a_.b", "a-b"),
            ("data-foo", "data-foo"),
            ("plain", "plain"),
        ],
    )
    def test_collapses_runs(self, key, expected):
        """Each maximal run of separators becomes one hyphen."""
        assert dasherize(key) == expected


class TestFormatValue:
    """Tests for value formatting."""

    @pytest.mark.unit
    def test_booleans_lowercase(self):
        """Booleans render as true/false."""
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    @pytest.mark.unit
    def test_token_list_joined(self):
        """Lists render space-joined without empty tokens."""
        assert format_value(["bar", None, "baz", ""]) == "bar baz"

    @pytest.mark.unit
    def test_enum_uses_value(self):
        """Enum members render their value."""
        assert format_value(Size.SMALL) == "small"

    @pytest.mark.unit
    def test_numbers_use_str(self):
        """Other values use their natural string form."""
        assert format_value(1) == "1"


class TestIsEmpty:
    """Tests for the emptiness check."""

    @pytest.mark.unit
    def test_sized_values(self):
        """Empty containers and strings are empty."""
        assert is_empty("")
        assert is_empty([])
        assert is_empty({})

    @pytest.mark.unit
    def test_unsized_values(self):
        """Zero and False are not empty."""
        assert not is_empty(0)
        assert not is_empty(False)


class TestAdd:
    """Tests for Attr.add."""

    @pytest.mark.unit
    def test_none_and_empty_are_noops(self):
        """Adding nothing leaves the map unchanged."""
        attrs = Attr()
        assert attrs.add(None) is attrs
        assert attrs.add({}) is attrs
        assert len(attrs) == 0

    @pytest.mark.unit
    def test_deep_compact_drops_nil_and_empty(self):
        """None and empty values are stripped at every level."""
        attrs = Attr().add(
            {"a": None, "b": "", "c": [], "d": {"e": None}, "f": {"g": 1, "h": ""}}
        )
        assert attrs.to_dict() == {"f": {"g": 1}}

    @pytest.mark.unit
    def test_keeps_false_and_zero(self):
        """False and 0 survive compaction."""
        attrs = Attr().add({"hidden": False, "tabindex": 0})
        assert attrs.to_dict() == {"hidden": False, "tabindex": 0}

    @pytest.mark.unit
    def test_underscored_key_is_moved(self):
        """Underscored keys are replaced by their hyphenated form."""
        attrs = Attr().add({"a_b": 1})
        assert "a-b" in attrs
        assert "a_b" not in attrs

    @pytest.mark.unit
    def test_nested_mapping_becomes_prefixed_child(self):
        """Nested mappings become child Attr instances."""
        attrs = Attr().add({"data": {"some_data": True}})
        child = attrs["data"]
        assert isinstance(child, Attr)
        assert child.prefix == "data"
        assert child.to_dict() == {"some-data": True}

    @pytest.mark.unit
    def test_later_add_overrides(self):
        """Later values replace earlier ones."""
        attrs = Attr({"id": "a"}).add({"id": "b"})
        assert attrs.get("id") == "b"

    @pytest.mark.unit
    def test_accepts_attr(self):
        """Another Attr can be merged in."""
        attrs = Attr().add(Attr({"role": "button"}))
        assert attrs == Attr({"role": "button"})


class TestSerialize:
    """Tests for Attr.serialize."""

    @pytest.mark.unit
    def test_round_trip_renders_once(self):
        """An underscored key renders exactly once."""
        output = Attr().add({"a_b": 1}).serialize()
        assert output == 'a-b="1"'
        assert output.count('a-b="1"') == 1

    @pytest.mark.unit
    def test_sorted_regardless_of_order(self):
        """Output does not depend on insertion order."""
        first = Attr().add({"id": "foo", "role": "button", "class": "bar"})
        second = Attr().add({"role": "button", "class": "bar", "id": "foo"})
        assert str(first) == str(second) == 'class="bar" id="foo" role="button"'

    @pytest.mark.unit
    def test_nested_renders_without_wrapping_key(self):
        """Nested maps flatten into prefixed pairs."""
        attrs = Attr().add(
            {
                "aria": {"label": "test"},
                "class": ["bar", "baz"],
                "id": "foo",
                "role": "button",
            }
        )
        assert str(attrs) == 'aria-label="test" class="bar baz" id="foo" role="button"'

    @pytest.mark.unit
    def test_nested_fragment_kept_together(self):
        """A nested map contributes one sorted fragment."""
        attrs = Attr().add({"data": {"b": 2, "a": 1}, "z": "last"})
        assert str(attrs) == 'data-a="1" data-b="2" z="last"'

    @pytest.mark.unit
    def test_prefix_applies_to_keys(self):
        """A prefixed Attr renders prefixed names."""
        assert to_attr_string({"user_id": 7}, prefix="data") == 'data-user-id="7"'

    @pytest.mark.unit
    def test_non_word_keys_dasherized(self):
        """Non-word characters in keys become hyphens."""
        assert to_attr_string({"x.y": "1"}) == 'x-y="1"'

    @pytest.mark.unit
    def test_booleans_render_lowercase(self):
        """Boolean values render as true/false."""
        assert to_attr_string({"hidden": False, "open": True}) == (
            'hidden="false" open="true"'
        )

    @pytest.mark.unit
    def test_empty_renders_empty_string(self):
        """An empty map renders nothing."""
        assert str(Attr()) == ""
        assert to_attr_string({"data": {"foo": None}}) == ""
