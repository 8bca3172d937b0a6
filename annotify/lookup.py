"""Lookup of the attributes attached to classes, functions, members and enum values.

A queried kind matches an attribute of that exact kind or of any of its
subclasses. Lookups never fail for a missing attribute: single lookups
return None and multiple lookups yield nothing.

Example:
    from dataclasses import dataclass
    from typing import Annotated

    from annotify import attribute_of, member
    from annotify.metadata import BaseAttribute

    @dataclass(frozen=True, slots=True)
    class Required(BaseAttribute):
        pass

    @dataclass
    class Shape:
        radius: Annotated[float, Required()]

    print(attribute_of(member(Shape, "radius"), Required))
    #> Required()
"""

from collections.abc import Iterator
from enum import Enum
from typing import Any, TypeVar, cast

from annotify._source import read_attributes
from annotify.members import MemberKind, member
from annotify.metadata import BaseAttribute

__all__ = (
    "attributes",
    "attributes_of",
    "attribute",
    "attribute_of",
    "enum_attribute",
)

A = TypeVar("A", bound=BaseAttribute)


def attributes(
    element: Any, *kinds: type[BaseAttribute]
) -> Iterator[BaseAttribute]:
    """Iterate the attributes attached to an element, optionally filtered by kinds.

    Args:
        element (Any): The class, function, property, member or enum value.
        *kinds (type[BaseAttribute]): Include only attributes of any of these kinds.

    Returns:
        Iterator[BaseAttribute]: The attributes in attachment order.
    """
    for attr in read_attributes(element):
        if not kinds or isinstance(attr, kinds):
            yield attr


def attributes_of(element: Any, kind: type[A]) -> Iterator[A]:
    """Iterate the attributes of a specific kind attached to an element."""
    return cast(Iterator[A], attributes(element, kind))


def attribute(
    element: Any, kind: type[BaseAttribute] | None = None
) -> BaseAttribute | None:
    """Returns the first attribute attached to an element.

    Args:
        element (Any): The element to search.
        kind (type[BaseAttribute] | None, optional): Only consider attributes of this kind. Defaults to None.

    Returns:
        BaseAttribute | None: The first matching attribute if found; otherwise None.
    """
    found = attributes(element) if kind is None else attributes(element, kind)
    return next(found, None)


def attribute_of(element: Any, kind: type[A]) -> A | None:
    return next(attributes_of(element, kind), None)


def enum_attribute(value: Enum, kind: type[A]) -> A | None:
    """Find an attribute on the declaration of an enumeration value.

    Args:
        value (Enum): The enumeration value.
        kind (type[A]): The attribute kind to search for.

    Returns:
        A | None: The first attribute of the kind if the value declaration has one; otherwise None.
    """
    declared = member(type(value), value.name, MemberKind.FIELD)
    if declared is None:
        return None
    return attribute_of(declared, kind)
