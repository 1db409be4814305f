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
Description: Array splitters. A splitter cuts the raw parameter of an array type into the
            tokens that are parsed to the element type.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Callable

from ..errors import ArraySplitterError

type SplitFunction = Callable[[str], Sequence[str]]


class ArraySplitter(ABC):
    """Base class of the array splitters."""

    @abstractmethod
    def split(self, param: str) -> list[str]:
        """Cut a raw parameter into ordered tokens.

        Args:
            param (str): The raw parameter.

        Returns:
            list[str]: The tokens, in order.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SpaceArraySplitter(ArraySplitter):
    """Split on runs of whitespace. Leading and trailing whitespace give no token."""

    def split(self, param: str) -> list[str]:
        return param.split()


class DelimiterArraySplitter(ArraySplitter):
    """Split on a fixed delimiter, ',' by default.

    Args:
        delimiter (str): The delimiter. Must not be empty.
        strip (bool): Strip the whitespace around each token.
        skip_empty (bool): Drop the empty tokens, "1,,2" then gives two tokens instead of three.
    """

    def __init__(self, delimiter: str = ",", strip: bool = True, skip_empty: bool = False):
        if not delimiter:
            raise ArraySplitterError("The delimiter of a DelimiterArraySplitter cannot be empty.")
        self.delimiter = delimiter
        self.strip = strip
        self.skip_empty = skip_empty

    def split(self, param: str) -> list[str]:
        tokens = param.split(self.delimiter)
        if self.strip:
            tokens = [token.strip() for token in tokens]
        if self.skip_empty:
            tokens = [token for token in tokens if token]
        return tokens

    def __repr__(self) -> str:
        return f"DelimiterArraySplitter({self.delimiter!r})"


class RegexArraySplitter(ArraySplitter):
    """Split on every match of a regular expression, e.g. r"[,;]\\s*"."""

    def __init__(self, pattern: str | re.Pattern[str]):
        self.pattern = re.compile(pattern)

    def split(self, param: str) -> list[str]:
        return self.pattern.split(param)

    def __repr__(self) -> str:
        return f"RegexArraySplitter({self.pattern.pattern!r})"


class CallableArraySplitter(ArraySplitter):
    """House a plain split function given as an independent callable."""

    def __init__(self, function: SplitFunction):
        self.function = function

    def split(self, param: str) -> list[str]:
        return list(self.function(param))

    def __repr__(self) -> str:
        name = getattr(self.function, "__qualname__", repr(self.function))
        return f"CallableArraySplitter({name})"
