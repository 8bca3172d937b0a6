"""Implementation of attributes."""

from typing import Annotated, Any, get_origin


class BaseAttribute:
    """Base class for all attributes."""

    __slots__ = ()


def _is_attribute_instance(val: Any) -> bool:
    return isinstance(val, BaseAttribute)


def collect_attributes(type_: Any) -> tuple[BaseAttribute, ...]:
    """Collect all BaseAttribute instances of an annotated type.

    Args:
        type_ (Any): The type annotated with attributes.

    Returns:
        tuple[BaseAttribute, ...]: The attributes in declaration order.
    """
    if get_origin(type_) is not Annotated:
        return ()
    vals: tuple[Any, ...] = getattr(type_, "__metadata__", tuple())
    return tuple(filter(_is_attribute_instance, vals))
