"""Nested HTML attribute map and its serializer.

`Attr` accumulates attribute mappings and renders them as the string that
goes inside an HTML start tag. Nested mappings become child `Attr`
instances whose keys are prefixed with the parent key, so
``{"data": {"user_id": 1}}`` renders as ``data-user-id="1"``.

Rendering rules:
    - ``None`` values, and values that are empty (``len() == 0``), are
      dropped at every nesting level
    - keys are dasherized: every run of non-word characters or underscores
      becomes a single ``-``
    - fragments are sorted so output does not depend on insertion order

Example:
    >>> attrs = Attr().add({"id": "foo", "aria": {"label": "test"}})
    >>> str(attrs)
    'aria-label="test" id="foo"'
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

__all__ = ["Attr", "dasherize", "format_value", "is_empty", "to_attr_string"]

_SEPARATOR_RUN = re.compile(r"[\W_]+")

_TOKEN_SEQUENCES = (list, tuple, set, frozenset)


def dasherize(key: Any) -> str:
    """Replace every run of non-word characters or underscores with ``-``."""
    return _SEPARATOR_RUN.sub("-", str(key))


def is_empty(value: Any) -> bool:
    """Check whether a value is empty-when-checkable.

    Only values with a length can be empty; ``0`` and ``False`` are not.
    """
    return hasattr(value, "__len__") and len(value) == 0


def format_value(value: Any) -> str:
    """Format a single attribute value for interpolation into markup.

    Booleans render lowercase, token sequences (e.g. a class list) render
    space-joined with falsy tokens skipped, and Enum members render their
    value.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_value(value.value)
    if isinstance(value, _TOKEN_SEQUENCES):
        tokens = [format_value(token) for token in value if token]
        if isinstance(value, (set, frozenset)):
            tokens.sort()
        return " ".join(tokens)
    return str(value)


def _deep_compact(mapping: Mapping[Any, Any]) -> dict[Any, Any]:
    """Return a copy without None or empty values, recursing into mappings."""
    compacted: dict[Any, Any] = {}
    for key, value in mapping.items():
        if isinstance(value, Attr):
            value = value.to_dict()
        if isinstance(value, Mapping):
            value = _deep_compact(value)
        if value is None or is_empty(value):
            continue
        compacted[key] = value
    return compacted


def _dasherize_keys(mapping: dict[Any, Any]) -> dict[str, Any]:
    """Move underscored keys to their hyphenated form.

    The underscored original is not kept, so each value renders once.
    """
    return {
        (dasherize(key) if "_" in str(key) else str(key)): value
        for key, value in mapping.items()
    }


class Attr:
    """Accumulating, nested attribute map.

    Attributes:
        prefix: Key prefix applied to every rendered name (``data``, ``aria``,
            or ``None`` at the top level).
    """

    __slots__ = ("prefix", "_items")

    def __init__(
        self, mapping: Mapping[Any, Any] | None = None, *, prefix: str | None = None
    ) -> None:
        self.prefix = prefix
        self._items: dict[str, Any] = {}
        self.add(mapping)

    def add(self, mapping: Mapping[Any, Any] | None) -> Attr:
        """Compact, dasherize and merge a mapping into this one.

        Passing ``None`` or an empty mapping is a no-op. Nested mappings
        replace any previous value under the same key.

        Args:
            mapping: Attributes to merge; values may be nested mappings.

        Returns:
            Attr: ``self``, so calls can be chained.
        """
        if not mapping:
            return self
        if isinstance(mapping, Attr):
            mapping = mapping.to_dict()

        for key, value in _dasherize_keys(_deep_compact(mapping)).items():
            if isinstance(value, Mapping):
                value = Attr(value, prefix=self._child_prefix(key))
            self._items[key] = value
        return self

    def serialize(self) -> str:
        """Render as sorted, space-joined ``name="value"`` pairs."""
        fragments: list[str] = []
        for name, value in self._items.items():
            if isinstance(value, Attr):
                rendered = value.serialize()
                if rendered:
                    fragments.append(rendered)
                continue
            if value is None:
                continue
            fragments.append(f'{self._qualified_name(name)}="{format_value(value)}"')
        return " ".join(sorted(fragments))

    def to_dict(self) -> dict[str, Any]:
        """Return a plain nested dict copy."""
        return {
            key: value.to_dict() if isinstance(value, Attr) else value
            for key, value in self._items.items()
        }

    def get(self, key: str, default: Any = None) -> Any:
        return self._items.get(key, default)

    def _child_prefix(self, key: str) -> str:
        return "-".join(part for part in (self.prefix, key) if part is not None)

    def _qualified_name(self, name: str) -> str:
        return dasherize(self._child_prefix(name))

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r}, prefix={self.prefix!r})"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __getitem__(self, key: str) -> Any:
        return self._items[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attr):
            return NotImplemented
        return self.prefix == other.prefix and self._items == other._items

    __hash__ = None  # type: ignore[assignment]


def to_attr_string(mapping: Mapping[Any, Any] | None, prefix: str | None = None) -> str:
    """Serialize a (possibly nested) mapping in one call.

    Example:
        >>> to_attr_string({"class": ["bar", "baz"], "role": "button"})
        'class="bar baz" role="button"'
    """
    return Attr(mapping, prefix=prefix).serialize()
