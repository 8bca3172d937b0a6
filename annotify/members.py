"""Enumeration of the members declared on classes and the classes declared in modules.

Members are discovered from the class dictionaries and annotations along
the MRO. A name declared on a subclass hides the same name on its bases.
Members of classes provided by the runtime itself (object, Enum, ...) or
by a framework in EXCLUDED_BASE_TYPES are not enumerated, nor is the
bookkeeping those write into user classes. A name declared without an
annotation takes the annotation of the nearest base declaring it.
"""

import inspect
import logging
from collections import ChainMap
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum, Flag
from functools import cached_property
from types import MemberDescriptorType, ModuleType
from typing import Any

from pydantic import BaseModel

from annotify._helper import (
    is_class_var,
    is_dunder,
    is_reserved_name,
    resolve_type_name,
)

__all__ = (
    "MemberKind",
    "Binding",
    "Member",
    "members",
    "member",
    "declared_types",
)

logger = logging.getLogger(__name__)


class MemberKind(Flag):
    """Kinds of class members, combinable into a mask."""

    FIELD = 1
    PROPERTY = 2
    METHOD = 4
    CONSTRUCTOR = 8
    NESTED_TYPE = 16
    ALL = 31


class Binding(Flag):
    """Visibility and scope of class members, combinable into a filter."""

    PUBLIC = 1
    NON_PUBLIC = 2
    INSTANCE = 4
    STATIC = 8
    ALL = 15


_VISIBILITY = Binding.PUBLIC | Binding.NON_PUBLIC
_SCOPE = Binding.INSTANCE | Binding.STATIC

_RUNTIME_MODULES = frozenset({"builtins", "enum", "typing", "abc"})

# bookkeeping the runtime writes into user classes
_RUNTIME_NAMES = frozenset({"_abc_impl"})

EXCLUDED_BASE_TYPES: tuple[type, ...] = (BaseModel,)


@dataclass(frozen=True)
class Member:
    """A member declared on a class."""

    owner: type
    name: str
    kind: MemberKind
    binding: Binding = field(compare=False)
    value: Any = field(default=None, hash=False, compare=False)
    annotation: Any = field(default=None, hash=False, compare=False)

    @property
    def is_public(self) -> bool:
        return bool(self.binding & Binding.PUBLIC)

    @property
    def is_static(self) -> bool:
        return bool(self.binding & Binding.STATIC)

    def matches(self, binding: Binding) -> bool:
        """Checks the member visibility and scope against a binding filter."""
        return bool(self.binding & _VISIBILITY & binding) and bool(
            self.binding & _SCOPE & binding
        )

    def __repr__(self) -> str:
        return f"Member({resolve_type_name(self.owner)}.{self.name}, kind={self.kind.name}, binding={self.binding!r})"


def _visibility(name: str) -> Binding:
    if name.startswith("_") and not is_dunder(name):
        return Binding.NON_PUBLIC
    return Binding.PUBLIC


def _classify(
    owner: type, name: str, value: Any, annotations: Mapping[str, Any]
) -> tuple[MemberKind, Binding]:
    if issubclass(owner, Enum) and name in owner.__members__:
        return MemberKind.FIELD, Binding.STATIC
    if name == "__init__" and inspect.isfunction(value):
        return MemberKind.CONSTRUCTOR, Binding.INSTANCE
    if inspect.isfunction(value):
        return MemberKind.METHOD, Binding.INSTANCE
    if isinstance(value, (staticmethod, classmethod)):
        return MemberKind.METHOD, Binding.STATIC
    if isinstance(value, (property, cached_property)):
        return MemberKind.PROPERTY, Binding.INSTANCE
    if isinstance(value, type):
        return MemberKind.NESTED_TYPE, Binding.STATIC
    if isinstance(value, MemberDescriptorType):
        return MemberKind.FIELD, Binding.INSTANCE
    if name in annotations and not is_class_var(annotations[name]):
        return MemberKind.FIELD, Binding.INSTANCE
    return MemberKind.FIELD, Binding.STATIC


def _declared_members(
    owner: type, own: dict[str, Any], inherited: Mapping[str, Any]
) -> Iterator[Member]:
    annotations = ChainMap(own, inherited)
    values = dict(vars(owner))
    names = dict.fromkeys(own) | dict.fromkeys(values)
    if issubclass(owner, Enum):
        # enum members first, in declaration order
        values.update(owner.__members__)
        names = dict.fromkeys(owner.__members__) | names
    for name in names:
        if name != "__init__" and is_reserved_name(name):
            continue
        value = values.get(name)
        kind, scope = _classify(owner, name, value, annotations)
        yield Member(
            owner=owner,
            name=name,
            kind=kind,
            binding=_visibility(name) | scope,
            value=value,
            annotation=annotations.get(name),
        )


def _user_bases(type_: type) -> list[type]:
    return [
        base
        for base in type_.__mro__
        if base.__module__ not in _RUNTIME_MODULES
        and base not in EXCLUDED_BASE_TYPES
    ]


def _framework_names(type_: type) -> set[str]:
    """Names of the data an excluded base declares, which frameworks copy into subclasses."""
    names = set(_RUNTIME_NAMES)
    for base in type_.__mro__:
        if base in EXCLUDED_BASE_TYPES:
            names.update(inspect.get_annotations(base))
            names.update(
                name
                for name, value in vars(base).items()
                if not inspect.isroutine(value)
            )
    names.discard("__init__")
    return names


def members(
    type_: type,
    member_kinds: MemberKind = MemberKind.ALL,
    binding: Binding = Binding.ALL,
) -> Iterator[Member]:
    """Enumerate the members of a class.

    Args:
        type_ (type): The class to enumerate.
        member_kinds (MemberKind, optional): The kinds of member to include. Defaults to MemberKind.ALL.
        binding (Binding, optional): The visibility and scope to include. Defaults to Binding.ALL.

    Returns:
        Iterator[Member]: The members, own declarations first then the bases' in MRO order.
    """
    logger.debug(
        "Enumerating %s members of %r with %r", member_kinds, type_, binding
    )
    bases = _user_bases(type_)
    own = [inspect.get_annotations(base, eval_str=True) for base in bases]
    seen = _framework_names(type_)
    for index, base in enumerate(bases):
        for declared in _declared_members(
            base, own[index], ChainMap(*own[index + 1 :])
        ):
            if declared.name in seen:
                continue
            seen.add(declared.name)
            if declared.kind & member_kinds and declared.matches(binding):
                yield declared


def member(
    type_: type,
    name: str | None,
    member_kinds: MemberKind = MemberKind.ALL,
    binding: Binding = Binding.ALL,
) -> Member | None:
    """Returns the first member with the name, or None if there is no such member."""
    if name is None:
        return None
    for found in members(type_, member_kinds, binding):
        if found.name == name:
            return found
    return None


def _nested_types(owner: type) -> Iterator[type]:
    for value in vars(owner).values():
        if (
            isinstance(value, type)
            and value.__qualname__ == f"{owner.__qualname__}.{value.__name__}"
        ):
            yield value
            yield from _nested_types(value)


def declared_types(module: ModuleType) -> Iterator[type]:
    """Enumerate the classes declared in a module, including nested classes.

    Classes imported into the module from elsewhere are not included.
    """
    seen: set[type] = set()
    for value in vars(module).values():
        if (
            not isinstance(value, type)
            or value.__module__ != module.__name__
            or value.__qualname__ != value.__name__
            or value in seen
        ):
            continue
        seen.add(value)
        yield value
        yield from _nested_types(value)
