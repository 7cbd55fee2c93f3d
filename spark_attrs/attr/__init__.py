"""HTML attribute map and serializer."""

from .lib import Attr, dasherize, format_value, is_empty, to_attr_string

__all__ = [
    "Attr",
    "dasherize",
    "format_value",
    "is_empty",
    "to_attr_string",
]
