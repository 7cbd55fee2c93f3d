"""Per-class attribute declarations.

Example usage:
    >>> from spark_attrs.registry import AttributeRegistry, TagGroup
    >>> registry = AttributeRegistry("Badge")
    >>> registry.declare_data_attribute("count", pulse=True)
    >>> registry.tag_attributes(TagGroup.DATA)
    ['count', 'pulse']
"""

from .lib import (
    BASE_ATTRIBUTES,
    AttributeRegistry,
    ConfigurationError,
    TagAttributeSpec,
    TagGroup,
    export_json_schema,
    group_key,
)

__all__ = [
    "BASE_ATTRIBUTES",
    "AttributeRegistry",
    "ConfigurationError",
    "TagAttributeSpec",
    "TagGroup",
    "export_json_schema",
    "group_key",
]
