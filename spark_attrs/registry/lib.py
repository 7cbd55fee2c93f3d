"""Declarative attribute registry attached to a component class.

A registry records, for one component class:
- which attribute names exist, with their static defaults
- which attributes feed the rendered tag, and under which group
  (top level, ``data-*`` or ``aria-*``)
- default groups: extra defaults selected by another attribute's value
- validation rules, evaluated by ``spark_attrs.validation``

Registries are populated while the class is being set up and frozen when
the first instance is built. Subclasses start from a copy of their
parent's registry.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, create_model

from spark_attrs.attr import format_value
from spark_attrs.core import get_logger

logger = get_logger("spark-attrs.registry")

# Always declared, never configurable.
BASE_ATTRIBUTES: tuple[str, ...] = ("id", "class", "data", "aria", "html")


class TagGroup(str, Enum):
    """Where a tag attribute lands in the projected tag mapping."""

    NONE = "none"
    DATA = "data"
    ARIA = "aria"


class TagAttributeSpec(BaseModel):
    """Marks a declared attribute as contributing to tag output.

    Attributes:
        name: Declared attribute name.
        group: Top level, or the ``data``/``aria`` sub-mapping.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Declared attribute name")
    group: TagGroup = Field(default=TagGroup.NONE, description="Output group")


class ConfigurationError(RuntimeError):
    """A component's attribute declarations are malformed.

    Attributes:
        group_value: Trigger value whose default group is malformed.
        value: The offending value found for that trigger value.
    """

    def __init__(
        self,
        message: str,
        group_value: Any = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.group_value = group_value
        self.value = value


def group_key(value: Any) -> str:
    """Normalize a trigger value for default-group lookup.

    ``True`` matches a ``"true"`` key and Enum members match their value.
    """
    return format_value(value)


class AttributeRegistry:
    """Per-class attribute metadata.

    Example:
        >>> registry = AttributeRegistry("Button")
        >>> registry.declare("label", size="medium")
        >>> registry.defaults()["size"]
        'medium'
    """

    def __init__(self, owner: str = "", parent: AttributeRegistry | None = None):
        self.owner = owner
        self._frozen = False
        if parent is None:
            self._defaults: dict[str, Any] = dict.fromkeys(BASE_ATTRIBUTES)
            self._tag_attributes: dict[str, TagAttributeSpec] = {}
            self._default_groups: dict[str, dict[Any, Any]] = {}
            self._validations: list[Any] = []
        else:
            self._defaults = dict(parent._defaults)
            self._tag_attributes = dict(parent._tag_attributes)
            self._default_groups = {
                trigger: dict(table)
                for trigger, table in parent._default_groups.items()
            }
            self._validations = list(parent._validations)

    # -------------------------------------------------------------------------
    # Declaration
    # -------------------------------------------------------------------------

    def declare(self, /, *names: str, **defaults: Any) -> None:
        """Declare attributes; positional names default to ``None``."""
        self._check_mutable()
        for name in names:
            self._defaults[name] = None
        self._defaults.update(defaults)
        logger.debug(
            f"[{self.owner}] declared {[*names, *defaults]} "
            f"({len(self._defaults)} attributes)"
        )

    def declare_tag_attribute(
        self,
        /,
        *names: str,
        data: Mapping[str, Any] | None = None,
        aria: Mapping[str, Any] | None = None,
        **defaults: Any,
    ) -> None:
        """Declare attributes and flag them for tag output.

        Args:
            *names: Top-level tag attributes defaulting to ``None``.
            data: ``name -> default`` pairs rendered under ``data-*``.
            aria: ``name -> default`` pairs rendered under ``aria-*``.
            **defaults: Top-level tag attributes with defaults.
        """
        self._declare_group(TagGroup.NONE, names, defaults)
        if data:
            self._declare_group(TagGroup.DATA, (), data)
        if aria:
            self._declare_group(TagGroup.ARIA, (), aria)

    def declare_data_attribute(self, /, *names: str, **defaults: Any) -> None:
        """Declare attributes rendered under ``data-*``."""
        self._declare_group(TagGroup.DATA, names, defaults)

    def declare_aria_attribute(self, /, *names: str, **defaults: Any) -> None:
        """Declare attributes rendered under ``aria-*``."""
        self._declare_group(TagGroup.ARIA, names, defaults)

    def declare_default_group(self, /, **groups: Mapping[Any, Any]) -> None:
        """Register defaults selected by another attribute's value.

        Each keyword is a trigger attribute name mapped to a table of
        ``trigger value -> {attribute name -> value}``. Tables are checked
        when an instance selects them, not here.
        """
        self._check_mutable()
        for trigger, table in groups.items():
            self._default_groups[trigger] = dict(table)
            logger.debug(f"[{self.owner}] default group on '{trigger}': {list(table)}")

    def add_validation(self, rule: Any) -> None:
        """Attach a validation rule (see ``spark_attrs.validation``)."""
        self._check_mutable()
        self._validations.append(rule)

    def freeze(self) -> None:
        """Reject further declarations."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _declare_group(
        self, group: TagGroup, names: tuple[str, ...], defaults: Mapping[str, Any]
    ) -> None:
        self.declare(*names, **defaults)
        for name in (*names, *defaults):
            self._tag_attributes[name] = TagAttributeSpec(name=name, group=group)

    def _check_mutable(self) -> None:
        if self._frozen:
            raise ConfigurationError(
                f"Attribute registry for {self.owner or 'component'} is frozen; "
                "declare attributes before the first instance is created."
            )

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def names(self) -> list[str]:
        """Declared attribute names in declaration order."""
        return list(self._defaults)

    def is_declared(self, name: str) -> bool:
        return name in self._defaults

    def defaults(self) -> dict[str, Any]:
        """Deep copy of the ``name -> static default`` map."""
        return copy.deepcopy(self._defaults)

    def tag_attributes(self, group: TagGroup | None = None) -> list[str]:
        """Names flagged for tag output, optionally limited to one group."""
        return [
            name
            for name, spec in self._tag_attributes.items()
            if group is None or spec.group == group
        ]

    def tag_spec(self, name: str) -> TagAttributeSpec | None:
        return self._tag_attributes.get(name)

    @property
    def default_groups(self) -> Mapping[str, Mapping[Any, Any]]:
        return MappingProxyType(self._default_groups)

    @property
    def validations(self) -> tuple[Any, ...]:
        return tuple(self._validations)

    # -------------------------------------------------------------------------
    # Default group resolution
    # -------------------------------------------------------------------------

    def resolve_default_group(self, trigger: str, value: Any) -> dict[str, Any]:
        """Look up the defaults selected by ``trigger == value``.

        Args:
            trigger: Trigger attribute name.
            value: The trigger attribute's resolved value.

        Returns:
            dict: Selected defaults, empty when nothing matches.

        Raises:
            ConfigurationError: If the selected entry is not a mapping.
        """
        table = self._default_groups.get(trigger)
        if not table or value is None:
            return {}

        wanted = group_key(value)
        for key, defaults in table.items():
            if group_key(key) != wanted:
                continue
            if not isinstance(defaults, Mapping):
                message = (
                    f"In argument group `{wanted}`, value `{defaults!r}` "
                    "must be a mapping."
                )
                logger.error(f"[{self.owner}] {message}")
                raise ConfigurationError(message, group_value=key, value=defaults)
            return copy.deepcopy(dict(defaults))
        return {}

    def resolve_default_groups(self, resolved: Mapping[str, Any]) -> dict[str, Any]:
        """Merge the defaults of every group whose trigger value matches.

        Args:
            resolved: Current attribute values (static defaults overlaid
                with supplied values).
        """
        selected: dict[str, Any] = {}
        for trigger in self._default_groups:
            selected.update(self.resolve_default_group(trigger, resolved.get(trigger)))
        return selected

    # -------------------------------------------------------------------------
    # Schema export
    # -------------------------------------------------------------------------

    def json_schema(self, title: str | None = None) -> dict[str, Any]:
        """Export declared attributes as a JSON Schema.

        Every attribute is an optional property whose default is its static
        default.
        """
        fields: dict[str, Any] = {}
        for index, (name, default) in enumerate(self._defaults.items()):
            spec = self._tag_attributes.get(name)
            description = (
                f"Tag attribute ({spec.group.value} group)" if spec else "Attribute"
            )
            fields[f"field_{index}"] = (
                Any,
                Field(default=default, alias=name, title=name, description=description),
            )
        model = create_model(title or self.owner or "Attributes", **fields)
        return model.model_json_schema()



def export_json_schema(component_cls: type) -> dict[str, Any]:
    """Export a component class's declared attributes as a JSON Schema.

    Args:
        component_cls: Class exposing ``attribute_registry()``, such as an
            ``AttributeComponent`` subclass.

    Returns:
        dict: JSON Schema titled after the class.

    Example:
        >>> schema = export_json_schema(Button)
        >>> schema["title"]
        'Button'
    """
    return component_cls.attribute_registry().json_schema(component_cls.__name__)


__all__ = [
    "BASE_ATTRIBUTES",
    "AttributeRegistry",
    "ConfigurationError",
    "TagAttributeSpec",
    "TagGroup",
    "export_json_schema",
    "group_key",
]
