"""
Re-export kinds module for cleaner imports.

This allows: from paramparse.kinds import Byte
Instead of: from paramparse.meta.typing.kinds import Byte
"""

from .meta.typing.kinds import BoundedInt, Byte, Char, Float, Integer, Long, Short

__all__ = [
    "BoundedInt",
    "Byte",
    "Short",
    "Integer",
    "Long",
    "Float",
    "Char",
]
