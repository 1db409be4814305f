"""Type descriptor utility functions.

This module provides helper functions for working with the type descriptors used as registry
keys: checking union and optional annotations, recognizing array aliases such as `list[int]`
or `tuple[int, ...]`, walking the fallback chain of a descriptor and resolving forward
references in annotations.
"""
from types import GenericAlias, NoneType, UnionType
from typing import Any, Union, get_args, get_origin, get_type_hints

type Annotation = Any

ARRAY_ORIGINS: tuple[type, ...] = (list, tuple)


def is_union(annotation: Annotation) -> bool:
    """Check if an annotation is a union. A union is a Union or UnionType type.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is a union.
    """
    o = get_origin(annotation) or annotation
    return o in (Union, UnionType)


def is_binary_optional(annotation: Annotation) -> bool:
    """Check if an annotation is a binary optional. A binary optional is a Union with NoneType and
    a single other type.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is a binary optional.
    """
    if not is_union(annotation):
        return False
    args = get_args(annotation)
    return len(args) == 2 and NoneType in args


def unwrap_optional(annotation: Annotation) -> Annotation:
    """Return `T` for `T | None`, the annotation itself otherwise."""
    if not is_binary_optional(annotation):
        return annotation
    return next(arg for arg in get_args(annotation) if arg is not NoneType)


def is_array_type(annotation: Annotation) -> bool:
    """Check if an annotation describes an array. Arrays are `list[T]` and `tuple[T, ...]`.

    Bare `list` or `tuple` are not arrays since their element type is unknown, neither are
    fixed size tuples such as `tuple[int, str]`.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is an array type.
    """
    origin = get_origin(annotation)
    if origin not in ARRAY_ORIGINS:
        return False
    args = get_args(annotation)
    if origin is list:
        return len(args) == 1
    return len(args) == 2 and args[1] is Ellipsis


def array_element_type(annotation: Annotation) -> Annotation:
    """Get the element type of an array annotation.

    Args:
        annotation (Any): An array annotation, see is_array_type.

    Raises:
        TypeError: Raised if the annotation is not an array type.

    Returns:
        Any: The element type, `int` for `list[int]` or `tuple[int, ...]`.
    """
    if not is_array_type(annotation):
        raise TypeError(f"'{annotation}' is not an array type.")
    return get_args(annotation)[0]


def new_array(annotation: Annotation, elements: list[Any]) -> list[Any] | tuple[Any, ...]:
    """Build the container described by an array annotation from its elements."""
    if get_origin(annotation) is tuple:
        return tuple(elements)
    return list(elements)


def type_ancestors(annotation: Annotation) -> tuple[Annotation, ...]:
    """Fallback chain of a type descriptor, the descriptor itself first.

    For a class this is its MRO, ending with `object`. For a generic alias such as `list[int]`
    the alias comes first, followed by the MRO of its origin. Anything else, unions included,
    has no ancestors.

    Args:
        annotation (Any): The type descriptor.

    Returns:
        tuple[Any, ...]: The descriptors to consult, most specific first.
    """
    if isinstance(annotation, type) and not isinstance(annotation, GenericAlias):
        return annotation.__mro__
    origin = get_origin(annotation)
    if isinstance(origin, type) and not is_union(annotation):
        return (annotation, *origin.__mro__)
    return (annotation,)


def resolve_annotation_types(annotations: dict[str, Any]) -> dict[str, Annotation]:
    """
    Get type hints from a dictionary of annotations. See typing.get_type_hints.

    This function is useful when you want to get the type hints from a dictionary
    of annotations instead of a class or a function.

    Args:
        annotations (dict[str, Any]): A dictionary of annotations.

    Returns:
        dict[str, Any]: A dictionary of type hints.
    """
    X = type("X", (), {"__annotations__": annotations})
    return get_type_hints(X)
