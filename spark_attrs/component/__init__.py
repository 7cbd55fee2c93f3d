"""Attribute-aware component base class."""

from .lib import AttributeComponent

__all__ = ["AttributeComponent"]
