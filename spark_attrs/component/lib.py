"""Attribute-aware base class for view components.

Subclasses declare their attributes at class-definition time, accept a
permissive set of keyword arguments at construction, and project a
filtered subset of their attributes for the rendered start tag.

Resolution at construction, lowest to highest precedence:
    1. static defaults from the class registry
    2. default-group values selected by a trigger attribute's value
    3. explicitly supplied values

Default-group values are written twice: every selected key is kept in the
instance's ``extras`` side map, and keys that are declared attributes also
replace the static default in the attribute map.

Example:
    >>> class Button(AttributeComponent):
    ...     pass
    >>> Button.tag_attribute(type="button")
    >>> Button.data_attribute("action")
    >>> Button(action="save", class_="btn").html_attrs()
    'class="btn" data-action="save" type="button"'
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from spark_attrs.attr import Attr
from spark_attrs.config import EnvVar, get_environment
from spark_attrs.core import get_logger
from spark_attrs.registry import AttributeRegistry, TagGroup, export_json_schema
from spark_attrs.validation import (
    ValidationError,
    build_rules,
    is_valid,
    validate_attributes,
    validate_or_raise,
)

logger = get_logger("spark-attrs.component")

# Stored dasherized, as rendered under their prefix.
_NESTED_BASE_ATTRIBUTES = ("data", "aria")


class AttributeComponent:
    """Base class holding declared attributes for one component.

    Class-level declarations (``define_attributes``, ``tag_attribute``,
    ``data_attribute``, ``aria_attribute``, ``attribute_default_group``,
    ``validates_attr``) populate the class's registry. The registry is frozen
    once the first instance is built.
    """

    _attribute_registry: ClassVar[AttributeRegistry] = AttributeRegistry(
        "AttributeComponent"
    )

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._attribute_registry = AttributeRegistry(
            cls.__qualname__, parent=cls._attribute_registry
        )

    def __init__(
        self, attributes: Mapping[str, Any] | None = None, /, **kwargs: Any
    ):
        self.initialize_attributes({**(attributes or {}), **kwargs})

    # -------------------------------------------------------------------------
    # Class-level declarations
    # -------------------------------------------------------------------------

    @classmethod
    def attribute_registry(cls) -> AttributeRegistry:
        return cls._attribute_registry

    @classmethod
    def define_attributes(cls, /, *names: str, **defaults: Any) -> None:
        """Declare attributes; positional names default to ``None``.

        Example:
            >>> Card.define_attributes("title", elevation=1)
        """
        cls._attribute_registry.declare(*names, **defaults)

    @classmethod
    def tag_attribute(
        cls,
        /,
        *names: str,
        data: Mapping[str, Any] | None = None,
        aria: Mapping[str, Any] | None = None,
        **defaults: Any,
    ) -> None:
        """Declare attributes that are rendered on the tag.

        ``data={...}`` and ``aria={...}`` declare attributes rendered under
        the ``data-*`` and ``aria-*`` prefixes.
        """
        cls._attribute_registry.declare_tag_attribute(
            *names, data=data, aria=aria, **defaults
        )

    @classmethod
    def data_attribute(cls, /, *names: str, **defaults: Any) -> None:
        cls._attribute_registry.declare_data_attribute(*names, **defaults)

    @classmethod
    def aria_attribute(cls, /, *names: str, **defaults: Any) -> None:
        cls._attribute_registry.declare_aria_attribute(*names, **defaults)

    @classmethod
    def attribute_default_group(cls, /, **groups: Mapping[Any, Any]) -> None:
        """Declare defaults selected by another attribute's value.

        Example:
            >>> Alert.attribute_default_group(
            ...     theme={"error": {"icon": "x"}, "notice": {"icon": "info"}}
            ... )
        """
        cls._attribute_registry.declare_default_group(**groups)

    @classmethod
    def validates_attr(
        cls,
        name: str,
        presence: bool = False,
        choices: Iterable[Any] | None = None,
    ) -> None:
        """Register presence and/or allowed-choices checks for an attribute."""
        for rule in build_rules(name, presence=presence, choices=choices):
            cls._attribute_registry.add_validation(rule)

    @classmethod
    def declared_attributes(cls) -> dict[str, Any]:
        """Declared names mapped to their static defaults."""
        return cls._attribute_registry.defaults()

    @classmethod
    def json_schema(cls) -> dict[str, Any]:
        """JSON Schema describing the declared attributes."""
        return export_json_schema(cls)

    # -------------------------------------------------------------------------
    # Attribute store
    # -------------------------------------------------------------------------

    def initialize_attributes(self, supplied: Mapping[str, Any] | None = None) -> None:
        """Build this instance's attributes from defaults and supplied values.

        Undeclared keys are dropped without error. ``class_`` is accepted in
        place of ``class``.

        Raises:
            ConfigurationError: If a selected default group is malformed.
        """
        registry = self._attribute_registry
        registry.freeze()

        supplied = dict(supplied or {})
        if "class_" in supplied and not registry.is_declared("class_"):
            supplied.setdefault("class", supplied.pop("class_"))

        known = {
            name: value
            for name, value in supplied.items()
            if registry.is_declared(name)
        }
        unknown = [name for name in supplied if name not in known]
        if unknown:
            level = "warning" if get_environment(EnvVar.LOG_UNKNOWN) else "debug"
            getattr(logger, level)(
                f"[{type(self).__name__}] ignoring undeclared attributes: {unknown}"
            )

        values = registry.defaults()
        selected = registry.resolve_default_groups({**values, **known})
        if selected:
            logger.debug(f"[{type(self).__name__}] default groups applied: {selected}")
        self._extras: dict[str, Any] = copy.deepcopy(selected)
        for name, value in selected.items():
            if registry.is_declared(name) and name not in known:
                values[name] = value
        values.update(known)

        self._attributes: dict[str, Any] = {
            name: self._normalize(name, value) for name, value in values.items()
        }

    @staticmethod
    def _normalize(name: str, value: Any) -> Any:
        if value is True:
            return "true"
        if name in _NESTED_BASE_ATTRIBUTES and isinstance(value, Mapping):
            return Attr(value).to_dict()
        return value

    def attribute(self, name: str) -> Any:
        """Current value of ``name``, None if unset or undeclared."""
        return self._attributes.get(name)

    @property
    def attributes(self) -> dict[str, Any]:
        """All attributes that currently have a value."""
        return {
            name: value for name, value in self._attributes.items() if value is not None
        }

    def set_attribute(self, name: str, value: Any) -> None:
        """Update a declared attribute.

        Raises:
            KeyError: If ``name`` is not declared on this component.
        """
        if not self._attribute_registry.is_declared(name):
            raise KeyError(f"Undeclared attribute '{name}' on {type(self).__name__}")
        self._attributes[name] = self._normalize(name, value)

    def extra(self, name: str, default: Any = None) -> Any:
        """Value a default group selected for ``name``."""
        return self._extras.get(name, default)

    @property
    def extras(self) -> dict[str, Any]:
        """Every value selected by default groups, declared or not."""
        return dict(self._extras)

    @property
    def data(self) -> dict[str, Any] | None:
        return self.attribute("data")

    @property
    def aria(self) -> dict[str, Any] | None:
        return self.attribute("aria")

    @property
    def classname(self) -> Any:
        return self.attribute("class")

    @property
    def html(self) -> Mapping[str, Any] | None:
        return self.attribute("html")

    # -------------------------------------------------------------------------
    # Projection
    # -------------------------------------------------------------------------

    def attr_hash(self, *names: str) -> dict[str, Any]:
        """Select attributes that have a value.

        ``True`` is returned as ``"true"``; unset names are left out.

        Example:
            >>> component.attr_hash("size", "missing")
            {'size': 'small'}
        """
        selected: dict[str, Any] = {}
        for name in names:
            value = self._attributes.get(name)
            if value is None:
                continue
            selected[name] = "true" if value is True else value
        return selected

    def tag_attrs(self) -> dict[str, Any]:
        """Nested mapping of everything rendered on the tag.

        Precedence, lowest to highest: flattened ``html`` entries, ``id`` and
        ``class``, top-level tag attributes, then the ``data`` and ``aria``
        sub-mappings. A ``data``/``aria`` entry passed through ``html`` is
        merged under the stored attribute of the same name.
        """
        registry = self._attribute_registry
        tag: dict[str, Any] = {}

        html = self.attribute("html")
        if isinstance(html, Mapping):
            tag.update(html)
        tag.update(self.attr_hash("id", "class"))
        tag.update(self.attr_hash(*registry.tag_attributes(TagGroup.NONE)))

        # html passthrough < stored base attribute < declared group attributes
        for group in (TagGroup.DATA, TagGroup.ARIA):
            layers = [tag.pop(group.value, None), self.attribute(group.value)]
            names = registry.tag_attributes(group)
            merged: dict[str, Any] = {}
            for layer in layers:
                if isinstance(layer, Mapping):
                    merged.update(Attr(layer).to_dict())
                elif layer is not None:
                    logger.debug(
                        f"[{type(self).__name__}] dropping non-mapping "
                        f"{group.value} value: {layer!r}"
                    )
            merged.update(self.attr_hash(*names))
            if names or merged:
                tag[group.value] = merged
        return tag

    def html_attrs(self) -> str:
        """Serialized tag attributes, ready for a start tag."""
        return Attr().add(self.tag_attrs()).serialize()

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self) -> list[ValidationError]:
        """Run every declared check and collect the failures."""
        return validate_attributes(self, self._attribute_registry.validations)

    def is_valid(self) -> bool:
        return is_valid(self)

    def validate_or_raise(self) -> None:
        """Raise AttributeValidationError listing every failed check."""
        validate_or_raise(self)

    def __repr__(self) -> str:
        attributes = {
            name: value
            for name, value in getattr(self, "_attributes", {}).items()
            if value is not None
        }
        return f"{type(self).__name__}({attributes!r})"


__all__ = ["AttributeComponent"]
