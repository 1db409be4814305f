"""Parser presets a ParamParserService can be built from."""

from enum import Enum

from .base import ParamParser
from .known_types import (
    BigDecimalParser,
    BigIntegerParser,
    BooleanParser,
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


class ParserPreset(Enum):
    """Available parser sets.

    FULL: every built-in parser, fixed width kinds included.
    BASIC: str, int, float, bool and the dates.
    """

    FULL = "full"
    BASIC = "basic"

    def parsers(self) -> list[ParamParser]:
        """Fresh instances of the preset parsers, in registration order."""
        match self:
            case ParserPreset.FULL:
                return full_parsers()
            case ParserPreset.BASIC:
                return basic_parsers()
        raise ValueError(f"Unknown parser preset {self!r}.")


def full_parsers() -> list[ParamParser]:
    """Every built-in parser."""
    return [
        ByteParser(),
        BooleanParser(),
        ShortParser(),
        IntegerParser(),
        LongParser(),
        CharacterParser(),
        StringParser(),
        FloatParser(),
        DoubleParser(),
        DateTimeParser(),
        DateParser(),
        BigDecimalParser(),
        BigIntegerParser(),
    ]


def basic_parsers() -> list[ParamParser]:
    """The narrow parser set. Fixed width kinds fall back on the int and float parsers."""
    return [
        StringParser(),
        BigIntegerParser(),
        DoubleParser(),
        BooleanParser(),
        DateTimeParser(),
        DateParser(),
    ]
