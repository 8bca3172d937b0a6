from .base import BaseAttribute, collect_attributes

__all__ = [
    "BaseAttribute",
    "collect_attributes",
]
