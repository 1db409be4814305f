"""Parameter parsing system for paramparse."""

from .base import HousingParamParser, ParamParser
from .known_types import (
    BigDecimalParser,
    BigIntegerParser,
    BooleanParser,
    BoundedIntegerParser,
    ByteParser,
    CharacterParser,
    DateParser,
    DateTimeParser,
    DoubleParser,
    FloatParser,
    IntegerParser,
    LongParser,
    ShortParser,
    StringParser,
)
from .presets import ParserPreset, basic_parsers, full_parsers
from .service import ParamParserService
from .splitters import (
    ArraySplitter,
    CallableArraySplitter,
    DelimiterArraySplitter,
    RegexArraySplitter,
    SpaceArraySplitter,
)

__all__ = [
    # Core classes
    "ParamParserService",
    "ParamParser",
    "HousingParamParser",
    "ParserPreset",
    "full_parsers",
    "basic_parsers",
    # Built-in parsers
    "BoundedIntegerParser",
    "ByteParser",
    "ShortParser",
    "IntegerParser",
    "LongParser",
    "BigIntegerParser",
    "BooleanParser",
    "CharacterParser",
    "StringParser",
    "FloatParser",
    "DoubleParser",
    "BigDecimalParser",
    "DateTimeParser",
    "DateParser",
    # Splitters
    "ArraySplitter",
    "SpaceArraySplitter",
    "DelimiterArraySplitter",
    "RegexArraySplitter",
    "CallableArraySplitter",
]
