"""This module contains the @annotate decorator.

Example:
    from dataclasses import dataclass

    from annotify import annotate, has_attribute
    from annotify.metadata import BaseAttribute

    @dataclass(frozen=True, slots=True)
    class Exported(BaseAttribute):
        pass

    @annotate(Exported())
    class Api:
        pass

    print(has_attribute(Api, Exported))
    #> True

"""

import logging
from collections.abc import Iterable
from functools import cached_property
from typing import Any, TypeVar

from annotify.errors import InvalidAnnotationTargetError, InvalidAttributeError
from annotify.metadata import BaseAttribute

__all__ = ("annotate", "attach_attributes", "ATTRIBUTES_ATTR")

logger = logging.getLogger(__name__)

ATTRIBUTES_ATTR = "__attributes__"

F = TypeVar("F")


def unwrap_target(target: Any) -> Any:
    """Returns the object holding attributes on behalf of the target."""
    if isinstance(target, property):
        return target.fget
    if isinstance(target, cached_property):
        return target.func
    if isinstance(target, (staticmethod, classmethod)):
        return target.__func__
    return target


def attach_attributes(target: Any, attributes: Iterable[BaseAttribute]) -> None:
    """Attach attributes to an object, after any previously attached ones.
    To be used with custom attribute decorators.

    Args:
        target (Any): The class or function to attach the attributes to.
        attributes (Iterable[BaseAttribute]): The attributes to attach.

    Raises:
        InvalidAttributeError: If any of the values is not a BaseAttribute.
        InvalidAnnotationTargetError: If the target cannot hold attributes.
    """
    attributes = tuple(attributes)
    for attribute in attributes:
        if not isinstance(attribute, BaseAttribute):
            raise InvalidAttributeError(attribute)
    holder = unwrap_target(target)
    try:
        existing = vars(holder).get(ATTRIBUTES_ATTR, ())
        setattr(holder, ATTRIBUTES_ATTR, existing + attributes)
    except (AttributeError, TypeError) as exc:
        raise InvalidAnnotationTargetError(target) from exc
    logger.debug("Attached %d attribute(s) to %r", len(attributes), target)


def annotate(*attributes: BaseAttribute):
    """Marks a class, function, method or property with attributes.

    Args:
        *attributes (BaseAttribute): The attributes to attach, in order.

    Returns:
        A decorator returning the input object.

    Raises:
        InvalidAttributeError: Raised if any value is not a BaseAttribute.
        InvalidAnnotationTargetError: Raised if the decorated object cannot hold attributes.

    """

    def decorator(target: F) -> F:
        attach_attributes(target, attributes)
        return target

    return decorator
