"""Checks for the presence of attributes on an element."""

from typing import Any, TypeVar

from annotify.lookup import attribute, attributes
from annotify.metadata import BaseAttribute

__all__ = (
    "has_attribute",
    "has_attribute_of",
    "has_any_attribute",
    "has_all_attributes",
)

A = TypeVar("A", bound=BaseAttribute)


def has_attribute(element: Any, kind: type[BaseAttribute]) -> bool:
    """Checks whether the element has an attribute of the kind."""
    return attribute(element, kind) is not None


def has_attribute_of(element: Any, kind: type[A]) -> bool:
    return has_attribute(element, kind)


def has_any_attribute(element: Any, *kinds: type[BaseAttribute]) -> bool:
    """Checks whether the element has an attribute of any of the kinds.
    Without kinds, checks whether the element has any attribute at all.
    """
    for _ in attributes(element, *kinds):
        return True
    return False


def has_all_attributes(element: Any, *kinds: type[BaseAttribute]) -> bool:
    """Checks whether the element has an attribute of each of the kinds.
    Always True without kinds.
    """
    return all(has_attribute(element, kind) for kind in kinds)
