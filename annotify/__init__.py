"""Annotify, query the attributes attached to classes, members and enum values."""

__version__ = "0.1.0"


from .collectors import (
    fields_and_properties_with,
    members_and_attributes,
    members_with,
    members_with_attribute_of,
    types_with,
    types_with_attribute_of,
)
from .decorators import annotate, attach_attributes
from .lookup import (
    attribute,
    attribute_of,
    attributes,
    attributes_of,
    enum_attribute,
)
from .members import Binding, Member, MemberKind, declared_types, member, members
from .metadata import BaseAttribute
from .presence import (
    has_all_attributes,
    has_any_attribute,
    has_attribute,
    has_attribute_of,
)

__all__ = [
    "BaseAttribute",
    "annotate",
    "attach_attributes",
    "attributes",
    "attributes_of",
    "attribute",
    "attribute_of",
    "enum_attribute",
    "has_attribute",
    "has_attribute_of",
    "has_any_attribute",
    "has_all_attributes",
    "types_with",
    "types_with_attribute_of",
    "members_with",
    "members_with_attribute_of",
    "fields_and_properties_with",
    "members_and_attributes",
    "Member",
    "MemberKind",
    "Binding",
    "members",
    "member",
    "declared_types",
]
