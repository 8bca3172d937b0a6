"""Supports for pydantic.BaseModel fields.

Pydantic moves the Annotated metadata of a model field into
FieldInfo.metadata, which is where the attributes are read from.
"""

from collections.abc import Iterator

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from annotify.metadata import BaseAttribute


def field_attributes(
    field: FieldInfo, *kinds: type[BaseAttribute]
) -> list[BaseAttribute]:
    """Returns the attributes of a model field, optionally filtered by kinds."""
    return [
        metadata
        for metadata in field.metadata
        if isinstance(metadata, BaseAttribute)
        and (not kinds or isinstance(metadata, kinds))
    ]


def model_fields_with(
    model: type[BaseModel], *kinds: type[BaseAttribute]
) -> Iterator[str]:
    """Iterate the names of the model fields that have an attribute of any of the kinds.

    Args:
        model (type[BaseModel]): The model class.
        *kinds (type[BaseAttribute]): The attribute kinds; without kinds every field is included.

    Returns:
        Iterator[str]: The field names in declaration order.
    """
    for name, field in model.model_fields.items():
        if not kinds or field_attributes(field, *kinds):
            yield name


def model_fields_and_attributes(
    model: type[BaseModel], *kinds: type[BaseAttribute]
) -> dict[str, list[BaseAttribute]]:
    """Map the model field names to their attributes of any of the kinds.
    Fields without a matching attribute are left out.
    """
    result: dict[str, list[BaseAttribute]] = {}
    for name, field in model.model_fields.items():
        matched = field_attributes(field, *kinds)
        if matched:
            result[name] = matched
    return result
