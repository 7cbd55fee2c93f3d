"""Attribute validation utilities."""

from spark_attrs.validation.lib import (
    AttributeRule,
    AttributeValidationError,
    ChoicesRule,
    PresenceRule,
    Validatable,
    ValidationError,
    build_rules,
    is_blank,
    is_valid,
    to_sentence,
    validate_attributes,
    validate_or_raise,
)

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
