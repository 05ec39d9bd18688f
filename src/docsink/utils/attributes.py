#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/utils/attributes.py
"""Attribute sets passed along with sink events.

An AttributeSet is an insertion-ordered mapping from attribute name to string
value. Sinks create one per event, filter it against the whitelist of the
construct being rendered, add their defaults and hand it to the tag emitter.

Examples
--------
    >>> attrs = AttributeSet({"class": "wide", "onclick": "x()"})
    >>> filter_attributes(attrs, {"class", "id"})
    AttributeSet({'class': 'wide'})

"""

from __future__ import annotations

from typing import Any, Collection, Iterator, Mapping, MutableMapping, Union

AttributesLike = Union["AttributeSet", Mapping[str, Any], None]


class AttributeSet(MutableMapping[str, str]):
    """Ordered mapping of attribute names to string values.

    Names are case-sensitive. Values are converted to ``str`` on assignment and
    a later assignment to an existing name replaces the earlier value.

    Parameters
    ----------
    attributes : mapping, optional
        Initial attributes
    **kwargs : Any
        Additional attributes, applied after ``attributes``

    """

    __slots__ = ("_items",)

    def __init__(self, attributes: Mapping[str, Any] | None = None, **kwargs: Any):
        """Initialize the set from an optional mapping and keyword attributes."""
        self._items: dict[str, str] = {}
        if attributes:
            self.add_all(attributes)
        if kwargs:
            self.add_all(kwargs)

    @classmethod
    def coerce(cls, attributes: AttributesLike) -> AttributeSet:
        """Return a fresh AttributeSet built from any attributes-like value."""
        return cls(attributes)

    def __getitem__(self, name: str) -> str:
        return self._items[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._items[name] = str(value)

    def __delitem__(self, name: str) -> None:
        del self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeSet):
            return self._items == other._items
        if isinstance(other, Mapping):
            return self._items == dict(other)
        return NotImplemented

    def copy(self) -> AttributeSet:
        """Return a shallow copy."""
        return AttributeSet(self._items)

    def is_defined(self, name: str) -> bool:
        """Check whether an attribute with this name is present."""
        return name in self._items

    def contains(self, name: str, value: str) -> bool:
        """Check whether the attribute is present with exactly this value."""
        return self._items.get(name) == value

    def add_all(self, attributes: AttributesLike) -> AttributeSet:
        """Merge attributes into this set; incoming values win.

        Returns
        -------
        AttributeSet
            This set, to allow chaining

        """
        if attributes:
            for name, value in attributes.items():
                self[name] = value
        return self

    def remove(self, *names: str) -> None:
        """Remove attributes by name; missing names are ignored."""
        for name in names:
            self._items.pop(name, None)

    def clear(self) -> None:
        self._items.clear()

    def filter(self, allowed: Collection[str]) -> AttributeSet:
        """Return a new set keeping only the allowed attribute names."""
        return AttributeSet({name: value for name, value in self._items.items() if name in allowed})


def filter_attributes(attributes: AttributesLike, allowed: Collection[str]) -> AttributeSet:
    """Filter attributes against a whitelist of attribute names.

    Parameters
    ----------
    attributes : AttributeSet, mapping or None
        Caller supplied attributes. ``None`` yields an empty set.
    allowed : collection of str
        Attribute names to keep

    Returns
    -------
    AttributeSet
        New set holding only the allowed names, in their original order

    """
    if not attributes:
        return AttributeSet()
    return AttributeSet({name: value for name, value in attributes.items() if name in allowed})


def merge_attributes(*attribute_sets: AttributesLike) -> AttributeSet:
    """Merge attribute sets left to right; later values win."""
    merged = AttributeSet()
    for attributes in attribute_sets:
        merged.add_all(attributes)
    return merged


__all__ = ["AttributeSet", "AttributesLike", "filter_attributes", "merge_attributes"]
