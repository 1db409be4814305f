"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-19
Description: Built-in parameter parsers. This module provides parsers for the fixed width
            integer kinds, int, bool, Char, str, Float, float, Decimal, datetime and date.
            Every parser trims the surrounding whitespace of its input, except the str and
            Char parsers which take the input as is. Blank inputs never give a value.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import math
import re
import struct
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import ClassVar

from dateutil import parser as date_parser

from ..meta.typing.kinds import BoundedInt, Byte, Char, Float, Integer, Long, Short
from ..meta.typing.utilities import Annotation
from .base import ParamParser

_INTEGER = re.compile(r"[+-]?[0-9]+")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _parse_integer(param: str) -> int | None:
    """Parse a signed base 10 integer literal, None if the literal is malformed."""
    text = param.strip()
    if not _INTEGER.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # over sys.get_int_max_str_digits()
        return None


def _parse_double(param: str) -> float | None:
    """Parse a float literal, None if the literal is malformed or overflows."""
    text = param.strip()
    if not text or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isinf(value) and "inf" not in text.lower():
        return None
    return value


# Integers
class BoundedIntegerParser(ParamParser[int]):
    """Parser of a fixed width integer kind. Values out of the kind range give None."""

    kind: ClassVar[type[BoundedInt]]

    def match(self) -> tuple[Annotation, ...]:
        return (self.kind,)

    def parse(self, param: str) -> BoundedInt | None:
        value = _parse_integer(param)
        if value is None or not self.kind.in_range(value):
            return None
        return self.kind(value)


class ByteParser(BoundedIntegerParser):
    """Byte parser."""

    kind = Byte


class ShortParser(BoundedIntegerParser):
    """Short parser."""

    kind = Short


class IntegerParser(BoundedIntegerParser):
    """Integer parser."""

    kind = Integer


class LongParser(BoundedIntegerParser):
    """Long parser."""

    kind = Long


class BigIntegerParser(ParamParser[int]):
    """Unbounded int parser."""

    def match(self) -> tuple[Annotation, ...]:
        return (int,)

    def parse(self, param: str) -> int | None:
        return _parse_integer(param)


# bool
class BooleanParser(ParamParser[bool]):
    """Boolean parser. Accepts 'true' and 'false' in any case."""

    def match(self) -> tuple[Annotation, ...]:
        return (bool,)

    def parse(self, param: str) -> bool | None:
        match param.strip().lower():
            case "true":
                return True
            case "false":
                return False
        return None


# Strings
class CharacterParser(ParamParser[Char]):
    """Char parser. The input must be exactly one non blank character."""

    def match(self) -> tuple[Annotation, ...]:
        return (Char,)

    def parse(self, param: str) -> Char | None:
        if len(param) != 1 or param.isspace():
            return None
        return Char(param)


class StringParser(ParamParser[str]):
    """String parser. Any non empty string is returned unchanged."""

    def match(self) -> tuple[Annotation, ...]:
        return (str,)

    def parse(self, param: str) -> str | None:
        return param or None


# Floating point
class FloatParser(ParamParser[Float]):
    """Single precision parser. Values that overflow a single give None."""

    def match(self) -> tuple[Annotation, ...]:
        return (Float,)

    def parse(self, param: str) -> Float | None:
        value = _parse_double(param)
        if value is None:
            return None
        try:
            (single,) = struct.unpack("f", struct.pack("f", value))
        except OverflowError:
            return None
        return Float(single)


class DoubleParser(ParamParser[float]):
    """Double precision parser."""

    def match(self) -> tuple[Annotation, ...]:
        return (float,)

    def parse(self, param: str) -> float | None:
        return _parse_double(param)


class BigDecimalParser(ParamParser[Decimal]):
    """Arbitrary precision decimal parser. NaN and infinities are not decimals."""

    def match(self) -> tuple[Annotation, ...]:
        return (Decimal,)

    def parse(self, param: str) -> Decimal | None:
        text = param.strip()
        if not text or "_" in text:
            return None
        try:
            value = Decimal(text)
        except InvalidOperation:
            return None
        return value if value.is_finite() else None


# Dates
class DateTimeParser(ParamParser[datetime]):
    """Datetime parser.

    An all digits input is read as milliseconds since the epoch and gives an UTC aware
    datetime. Anything else is handed to `dateutil.parser.parse`, which accepts ISO 8601 as
    well as most human readable formats. Such inputs give an aware datetime only when they
    carry an offset or a zone, naive otherwise: aware and naive values do not compare.
    """

    def match(self) -> tuple[Annotation, ...]:
        return (datetime,)

    def parse(self, param: str) -> datetime | None:
        text = param.strip()
        if not text:
            return None
        millis = _parse_integer(text)
        try:
            if millis is not None:
                return _EPOCH + timedelta(milliseconds=millis)
            value = date_parser.parse(text)
            # dateutil accepts offsets of a day or more, datetime rejects them on use.
            value.utcoffset()
            return value
        except (ValueError, OverflowError):
            return None


class DateParser(DateTimeParser):
    """Date parser. Same formats as the datetime parser, the time part is dropped."""

    def match(self) -> tuple[Annotation, ...]:
        return (date,)

    def parse(self, param: str) -> date | None:
        value = super().parse(param)
        return value.date() if value is not None else None
