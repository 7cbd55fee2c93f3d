"""Attribute validation rules and their evaluation.

Rules are declared per attribute on a component class and evaluated
against an instance's current attribute values. Failures are collected as
`ValidationError` records; `validate_or_raise` aggregates them into one
`AttributeValidationError`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from spark_attrs.attr import format_value, is_empty


@dataclass
class ValidationError:
    """Represents one failed attribute check.

    Attributes:
        attribute: Name of the attribute that failed.
        message: Human-readable error description.
        error_type: Category of the error ("presence" or "choices").
    """

    attribute: str
    message: str
    error_type: str


class AttributeValidationError(Exception):
    """Raised when an instance fails one or more attribute checks."""

    def __init__(self, errors: Sequence[ValidationError]):
        self.errors = list(errors)
        super().__init__(
            "Validation failed: " + ", ".join(error.message for error in self.errors)
        )


class Validatable(Protocol):
    """Anything that can report its own validation errors."""

    def validate(self) -> list[ValidationError]: ...


def is_blank(value: Any) -> bool:
    """None, False, empty values and whitespace-only strings are blank."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    return is_empty(value)


def to_sentence(items: Iterable[str], last_connector: str = "or") -> str:
    """Join items as an English list with an Oxford comma.

    Example:
        >>> to_sentence(['"a"', '"b"', '"c"'])
        '"a", "b", or "c"'
    """
    words = list(items)
    if len(words) <= 1:
        return "".join(words)
    if len(words) == 2:
        return f"{words[0]} {last_connector} {words[1]}"
    return f"{', '.join(words[:-1])}, {last_connector} {words[-1]}"


class AttributeRule(ABC):
    """A check applied to one attribute's value."""

    error_type: str = ""

    def __init__(self, attribute: str):
        self.attribute = attribute

    @abstractmethod
    def check(self, value: Any) -> ValidationError | None:
        """Return an error for a failing value, None otherwise."""
        ...

    def _error(self, message: str) -> ValidationError:
        return ValidationError(
            attribute=self.attribute, message=message, error_type=self.error_type
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attribute!r})"


class PresenceRule(AttributeRule):
    error_type = "presence"

    def check(self, value: Any) -> ValidationError | None:
        if is_blank(value):
            return self._error(f"Attribute {self.attribute} can't be blank")
        return None


class ChoicesRule(AttributeRule):
    """Value, compared as a string, must be one of the allowed choices."""

    error_type = "choices"

    def __init__(self, attribute: str, choices: Iterable[Any]):
        super().__init__(attribute)
        self.choices = [format_value(choice) for choice in choices]
        if not self.choices:
            raise ValueError(f"Attribute {attribute} needs at least one choice")

    def check(self, value: Any) -> ValidationError | None:
        candidate = "" if value is None else format_value(value)
        if candidate in self.choices:
            return None
        options = to_sentence(f'"{choice}"' for choice in self.choices)
        return self._error(
            f'Attribute {self.attribute} "{candidate}" is not valid. '
            f"Options include: {options}"
        )


def build_rules(
    attribute: str,
    presence: bool = False,
    choices: Iterable[Any] | None = None,
) -> list[AttributeRule]:
    """Create the rules requested for one attribute.

    Raises:
        ValueError: If no check is requested.
    """
    rules: list[AttributeRule] = []
    if presence:
        rules.append(PresenceRule(attribute))
    if choices is not None:
        rules.append(ChoicesRule(attribute, choices))
    if not rules:
        raise ValueError(
            f"validates_attr({attribute!r}) needs presence=True or choices=[...]"
        )
    return rules


def validate_attributes(
    values: Any, rules: Iterable[AttributeRule]
) -> list[ValidationError]:
    """Run rules against an object exposing ``attribute(name)``.

    Every rule runs, so one attribute can report several errors.
    """
    errors: list[ValidationError] = []
    for rule in rules:
        error = rule.check(values.attribute(rule.attribute))
        if error is not None:
            errors.append(error)
    return errors


def is_valid(target: Validatable) -> bool:
    """Check if a target reports no validation errors."""
    return not target.validate()


def validate_or_raise(target: Validatable) -> None:
    """Raise AttributeValidationError when the target is invalid."""
    errors = target.validate()
    if errors:
        raise AttributeValidationError(errors)


__all__ = [
    "AttributeRule",
    "AttributeValidationError",
    "ChoicesRule",
    "PresenceRule",
    "Validatable",
    "ValidationError",
    "build_rules",
    "is_blank",
    "is_valid",
    "to_sentence",
    "validate_attributes",
    "validate_or_raise",
]
