"""spark-attrs: declarative attributes for view components."""

from spark_attrs.attr import Attr, to_attr_string
from spark_attrs.component import AttributeComponent
from spark_attrs.registry import (
    BASE_ATTRIBUTES,
    AttributeRegistry,
    ConfigurationError,
    TagAttributeSpec,
    TagGroup,
    export_json_schema,
)
from spark_attrs.validation import (
    AttributeValidationError,
    ValidationError,
    is_valid,
    validate_or_raise,
)

__version__ = "0.1.0"

__all__ = [
    # Serialization
    "Attr",
    "to_attr_string",
    # Components
    "AttributeComponent",
    # Registry
    "AttributeRegistry",
    "BASE_ATTRIBUTES",
    "ConfigurationError",
    "TagAttributeSpec",
    "TagGroup",
    "export_json_schema",
    # Validation
    "AttributeValidationError",
    "ValidationError",
    "is_valid",
    "validate_or_raise",
]
