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
Description: Base classes of the parameter parsers. A parser declares the type descriptors it
            handles and converts a string to a value of that type, or gives None when the
            string cannot be converted.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..meta.typing.utilities import Annotation

type ParseFunction = Callable[[str], Any]


class ParamParser[T](ABC):
    """Base class of the parameter parsers.

    Sub-classes declare the handled types with `match` and implement `parse`. `parse` must not
    raise on malformed input, it returns None instead.
    """

    @abstractmethod
    def match(self) -> tuple[Annotation, ...]:
        """The type descriptors handled by the parser.

        Returns:
            tuple[Annotation, ...]: The handled types. An empty tuple makes the parser
                impossible to register.
        """

    @abstractmethod
    def parse(self, param: str) -> T | None:
        """Convert a string to a value.

        Args:
            param (str): The raw parameter.

        Returns:
            T | None: The value, or None if the parameter cannot be converted.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class HousingParamParser(ParamParser[Any]):
    """House a plain parse function given as an independent callable.

    The function follows the parser contract: it takes the raw string and gives the value or
    None. ValueError and ArithmeticError raised by the function are read as "no value" so that
    builtins such as `int` or `Fraction` can be used directly.
    """

    def __init__(self, types: tuple[Annotation, ...], function: ParseFunction):
        self._types = tuple(types)
        self._function = function

    def match(self) -> tuple[Annotation, ...]:
        return self._types

    def parse(self, param: str) -> Any:
        try:
            return self._function(param)
        except (ValueError, ArithmeticError):
            return None

    @property
    def function(self) -> ParseFunction:
        """The housed function."""
        return self._function

    def __repr__(self) -> str:
        name = getattr(self._function, "__qualname__", repr(self._function))
        return f"HousingParamParser({name}, types={self._types!r})"
