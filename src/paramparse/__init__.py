"""
paramparse: Convert string encoded parameters to typed values.

This library provides:
- ParamParserService, a registry of parsers with ancestor fallback and array expansion
- Built-in parsers for fixed width integers, int, bool, Char, str, Float, float, Decimal,
  datetime and date
- Pluggable array splitters
- Parameter binding of a whole mapping against annotations
"""

from .errors import (
    ArraySplitterError,
    ParamBindingError,
    ParamParserError,
    ParserRegistrationError,
    TracedException,
)
from .meta.typing.kinds import Byte, Char, Float, Integer, Long, Short
from .parsing import (
    ArraySplitter,
    CallableArraySplitter,
    DelimiterArraySplitter,
    HousingParamParser,
    ParamParser,
    ParamParserService,
    ParserPreset,
    RegexArraySplitter,
    SpaceArraySplitter,
)

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Service
    "ParamParserService",
    "ParamParser",
    "HousingParamParser",
    "ParserPreset",
    # Splitters
    "ArraySplitter",
    "SpaceArraySplitter",
    "DelimiterArraySplitter",
    "RegexArraySplitter",
    "CallableArraySplitter",
    # Kinds
    "Byte",
    "Short",
    "Integer",
    "Long",
    "Float",
    "Char",
    # Errors
    "TracedException",
    "ParamParserError",
    "ParserRegistrationError",
    "ArraySplitterError",
    "ParamBindingError",
]
