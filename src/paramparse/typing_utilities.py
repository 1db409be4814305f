"""
Re-export utilities module for cleaner imports.

This allows: from paramparse.typing_utilities import is_array_type
Instead of: from paramparse.meta.typing.utilities import is_array_type
"""

from .meta.typing.utilities import (
    array_element_type,
    is_array_type,
    is_binary_optional,
    is_union,
    resolve_annotation_types,
    type_ancestors,
    unwrap_optional,
)

__all__ = [
    "is_union",
    "is_binary_optional",
    "unwrap_optional",
    "is_array_type",
    "array_element_type",
    "type_ancestors",
    "resolve_annotation_types",
]
