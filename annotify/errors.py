"""Module containing errors classes."""

from typing import Any


class AnnotifyError(Exception):
    """Base class for all annotify errors."""

    pass


class InvalidAttributeError(AnnotifyError, TypeError):
    """Raised when attaching a value that is not an attribute."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"{value!r} is not an attribute, attributes must inherit BaseAttribute"
        )


class InvalidAnnotationTargetError(AnnotifyError, TypeError):
    """Raised when attaching attributes to an object that cannot hold them."""

    def __init__(self, target: Any) -> None:
        self.target = target
        super().__init__(f"Unable to attach attributes to {target!r}")
