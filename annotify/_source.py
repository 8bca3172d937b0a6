"""Reads the raw attributes attached to program elements."""

import inspect
from enum import Enum
from typing import Annotated, Any, get_origin

from annotify.decorators import ATTRIBUTES_ATTR, unwrap_target
from annotify.members import Member, MemberKind, member
from annotify.metadata import BaseAttribute, collect_attributes


def _own_attributes(value: Any) -> tuple[BaseAttribute, ...]:
    namespace = getattr(value, "__dict__", None)
    if namespace is None:
        return ()
    return namespace.get(ATTRIBUTES_ATTR, ())


def _class_attributes(type_: type) -> tuple[BaseAttribute, ...]:
    result: list[BaseAttribute] = []
    for base in type_.__mro__:
        if base is object:
            continue
        result.extend(_own_attributes(base))
    return tuple(result)


def _member_attributes(declared: Member) -> tuple[BaseAttribute, ...]:
    if declared.kind is MemberKind.FIELD:
        return collect_attributes(declared.annotation)
    return read_attributes(declared.value)


def read_attributes(element: Any) -> tuple[BaseAttribute, ...]:
    """Read the attributes attached to an element, in attachment order.

    Elements that cannot carry attributes have none.
    """
    if isinstance(element, Member):
        return _member_attributes(element)
    if isinstance(element, Enum):
        declared = member(type(element), element.name, MemberKind.FIELD)
        return () if declared is None else _member_attributes(declared)
    if get_origin(element) is Annotated:
        return collect_attributes(element)
    if isinstance(element, type):
        return _class_attributes(element)
    if inspect.ismethod(element):
        element = element.__func__
    return _own_attributes(unwrap_target(element))
