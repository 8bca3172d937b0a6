"""Collect the classes of a module and the members of a class by their attributes.

Collectors keep the discovery order of the module or class; nothing is
sorted. Without attribute kinds, member collectors apply no attribute
filter at all.
"""

from collections.abc import Iterator
from types import ModuleType
from typing import TypeVar

from annotify.lookup import attributes
from annotify.members import Binding, Member, MemberKind, declared_types, members
from annotify.metadata import BaseAttribute
from annotify.presence import has_any_attribute, has_attribute

__all__ = (
    "types_with",
    "types_with_attribute_of",
    "members_with",
    "members_with_attribute_of",
    "fields_and_properties_with",
    "members_and_attributes",
)

A = TypeVar("A", bound=BaseAttribute)


def types_with(module: ModuleType, kind: type[BaseAttribute]) -> Iterator[type]:
    """Iterate the classes declared in a module that have an attribute of the kind.

    Args:
        module (ModuleType): The module to search.
        kind (type[BaseAttribute]): The attribute kind.

    Returns:
        Iterator[type]: The matching classes in module order.
    """
    for type_ in declared_types(module):
        if has_attribute(type_, kind):
            yield type_


def types_with_attribute_of(module: ModuleType, kind: type[A]) -> Iterator[type]:
    return types_with(module, kind)


def members_with(
    type_: type,
    member_kinds: MemberKind,
    *kinds: type[BaseAttribute],
    binding: Binding = Binding.ALL,
) -> Iterator[Member]:
    """Iterate the members of a class that have an attribute of any of the kinds.

    Args:
        type_ (type): The class to search.
        member_kinds (MemberKind): The kinds of member to include.
        *kinds (type[BaseAttribute]): The attribute kinds; without kinds every member is included.
        binding (Binding, optional): The visibility and scope to include. Defaults to Binding.ALL.

    Returns:
        Iterator[Member]: The matching members.
    """
    for found in members(type_, member_kinds, binding):
        if not kinds or has_any_attribute(found, *kinds):
            yield found


def members_with_attribute_of(
    type_: type,
    member_kinds: MemberKind,
    kind: type[A],
    *,
    binding: Binding = Binding.ALL,
) -> Iterator[Member]:
    return members_with(type_, member_kinds, kind, binding=binding)


def fields_and_properties_with(
    type_: type, *kinds: type[BaseAttribute]
) -> Iterator[Member]:
    """Iterate the fields and properties of a class that have an attribute of any of the kinds.
    Without kinds every field and property is included.
    """
    return members_with(type_, MemberKind.FIELD | MemberKind.PROPERTY, *kinds)


def members_and_attributes(
    type_: type,
    member_kinds: MemberKind,
    *kinds: type[BaseAttribute],
    binding: Binding = Binding.ALL,
) -> dict[Member, list[BaseAttribute]]:
    """Map the members of a class to their attributes of any of the kinds.

    Members without a matching attribute are left out, so no list is empty.

    Args:
        type_ (type): The class to search.
        member_kinds (MemberKind): The kinds of member to include.
        *kinds (type[BaseAttribute]): The attribute kinds; without kinds all attributes are included.
        binding (Binding, optional): The visibility and scope to include. Defaults to Binding.ALL.

    Returns:
        dict[Member, list[BaseAttribute]]: The members in discovery order with their attributes.
    """
    result: dict[Member, list[BaseAttribute]] = {}
    for found in members(type_, member_kinds, binding):
        matched = list(attributes(found, *kinds))
        if matched:
            result[found] = matched
    return result
