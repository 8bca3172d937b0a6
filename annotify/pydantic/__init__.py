"""Integration with pydantic."""

from .fields import field_attributes, model_fields_and_attributes, model_fields_with

__all__ = ("model_fields_with", "model_fields_and_attributes", "field_attributes")
