from typing import Annotated, Any, ClassVar, get_args, get_origin


def unwrap_annotated(annotation: Any) -> Any:
    """Strip Annotated layers off an annotation."""
    while get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    return annotation


def is_class_var(annotation: Any) -> bool:
    annotation = unwrap_annotated(annotation)
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name[:2] == name[-2:] == "__"


def _is_sunder(name: str) -> bool:
    return (
        len(name) > 2
        and name[0] == name[-1] == "_"
        and name[1] != "_"
        and name[-2] != "_"
    )


def is_reserved_name(name: str) -> bool:
    """Checks for dunder and sunder names reserved by the runtime."""
    return is_dunder(name) or _is_sunder(name)


def resolve_type_name(value: Any) -> str:
    """Resolve qualified name of a value."""
    return f"{value.__module__}.{value.__qualname__}".replace(".<locals>", "")
