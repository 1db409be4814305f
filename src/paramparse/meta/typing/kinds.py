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
Description: Fixed width value kinds. Python has a single unbounded int, a double precision
            float and no character type. These subclasses give parameters a narrower kind
            that can be used as a type descriptor while still behaving as the builtin they
            extend. Since they are subclasses, a parser registered for the builtin serves them
            when no dedicated parser is registered.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import ClassVar


class BoundedInt(int):
    """Base class of the signed fixed width integer kinds."""

    MIN: ClassVar[int]
    MAX: ClassVar[int]

    @classmethod
    def in_range(cls, value: int) -> bool:
        """Whether the value fits in the kind."""
        return cls.MIN <= value <= cls.MAX

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class Byte(BoundedInt):
    """8 bits signed integer."""

    MIN = -(2**7)
    MAX = 2**7 - 1


class Short(BoundedInt):
    """16 bits signed integer."""

    MIN = -(2**15)
    MAX = 2**15 - 1


class Integer(BoundedInt):
    """32 bits signed integer."""

    MIN = -(2**31)
    MAX = 2**31 - 1


class Long(BoundedInt):
    """64 bits signed integer."""

    MIN = -(2**63)
    MAX = 2**63 - 1


class Float(float):
    """Single precision float. Values are rounded to the nearest representable single."""

    def __repr__(self) -> str:
        return f"Float({float(self)!r})"


class Char(str):
    """A single character."""

    def __repr__(self) -> str:
        return f"Char({str(self)!r})"
