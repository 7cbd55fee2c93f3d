"""Unit tests for validation module."""

from enum import Enum

import pytest

from spark_attrs.validation import (
    AttributeValidationError,
    ChoicesRule,
    PresenceRule,
    ValidationError,
    build_rules,
    is_blank,
    is_valid,
    to_sentence,
    validate_attributes,
    validate_or_raise,
)


class Size(str, Enum):
    SMALL = "small"


class FakeComponent:
    """Minimal object exposing attribute() for rule evaluation."""

    def __init__(self, rules, **values):
        self.rules = rules
        self.values = values

    def attribute(self, name):
        return self.values.get(name)

    def validate(self):
        return validate_attributes(self, self.rules)


class TestToSentence:
    """Tests for the option list join."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("items", "expected"),
        [
            ([], ""),
            (['"a"'], '"a"'),
            (['"a"', '"b"'], '"a" or "b"'),
            (['"a"', '"b"', '"c"'], '"a", "b", or "c"'),
        ],
    )
    def test_join(self, items, expected):
        """Oxford-comma join with 'or' before the last option."""
        assert to_sentence(items) == expected


class TestIsBlank:
    """Tests for blank detection."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, False, "", "   ", [], {}])
    def test_blank(self, value):
        """Missing, false, empty and whitespace values are blank."""
        assert is_blank(value)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [True, "x", 0, ["a"]])
    def test_present(self, value):
        """Anything else is present."""
        assert not is_blank(value)


class TestRules:
    """Tests for individual rules."""

    @pytest.mark.unit
    def test_presence_message(self):
        """Presence failure names the attribute."""
        error = PresenceRule("foo").check(None)
        assert error == ValidationError(
            attribute="foo",
            message="Attribute foo can't be blank",
            error_type="presence",
        )

    @pytest.mark.unit
    def test_presence_passes(self):
        """Present values pass."""
        assert PresenceRule("foo").check("true") is None

    @pytest.mark.unit
    def test_choices_message(self):
        """Choices failure lists every option."""
        error = ChoicesRule("size", ["small", "medium", "large"]).check("xlarge")
        assert error.error_type == "choices"
        assert error.message == (
            'Attribute size "xlarge" is not valid. '
            'Options include: "small", "medium", or "large"'
        )

    @pytest.mark.unit
    def test_choices_compare_string_form(self):
        """Enum members and strings validate alike."""
        rule = ChoicesRule("size", ["small", "medium"])
        assert rule.check("small") is None
        assert rule.check(Size.SMALL) is None

    @pytest.mark.unit
    def test_choices_reject_none(self):
        """A missing value is not among the choices."""
        error = ChoicesRule("size", ["small"]).check(None)
        assert 'Attribute size "" is not valid.' in error.message

    @pytest.mark.unit
    def test_choices_must_not_be_empty(self):
        """An empty choice list is a declaration error."""
        with pytest.raises(ValueError):
            ChoicesRule("size", [])


class TestBuildRules:
    """Tests for build_rules."""

    @pytest.mark.unit
    def test_both_rules(self):
        """presence and choices register independently."""
        rules = build_rules("size", presence=True, choices=["s"])
        assert [type(rule) for rule in rules] == [PresenceRule, ChoicesRule]

    @pytest.mark.unit
    def test_requires_a_check(self):
        """At least one check is required."""
        with pytest.raises(ValueError):
            build_rules("size")


class TestValidateOrRaise:
    """Tests for aggregated validation."""

    @pytest.mark.unit
    def test_collects_every_error(self):
        """All failing rules are reported together."""
        component = FakeComponent(
            build_rules("foo", presence=True) + build_rules("size", choices=["s"]),
            size="xl",
        )
        assert not is_valid(component)

        with pytest.raises(AttributeValidationError) as exc_info:
            validate_or_raise(component)

        assert len(exc_info.value.errors) == 2
        assert str(exc_info.value).startswith("Validation failed: ")
        assert "Attribute foo can't be blank" in str(exc_info.value)
        assert 'Attribute size "xl" is not valid.' in str(exc_info.value)

    @pytest.mark.unit
    def test_valid_does_not_raise(self):
        """Valid targets pass silently."""
        component = FakeComponent(build_rules("foo", presence=True), foo="bar")
        assert is_valid(component)
        validate_or_raise(component)
