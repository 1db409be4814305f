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
Description: Tests for the array splitters.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import re

import pytest

from paramparse import ArraySplitterError
from paramparse.parsing import (
    ArraySplitter,
    CallableArraySplitter,
    DelimiterArraySplitter,
    RegexArraySplitter,
    SpaceArraySplitter,
)


class TestSpaceArraySplitter:
    """Test the default whitespace splitter."""

    def test_runs_of_whitespace(self):
        """Runs of any whitespace separate tokens."""
        assert SpaceArraySplitter().split("1  2\t3\n4") == ["1", "2", "3", "4"]

    def test_surrounding_whitespace(self):
        """Leading and trailing whitespace give no token."""
        assert SpaceArraySplitter().split("  1 2  ") == ["1", "2"]

    def test_blank(self):
        """A blank parameter has no token."""
        assert SpaceArraySplitter().split("   ") == []


class TestDelimiterArraySplitter:
    """Test the delimiter splitter."""

    def test_default_is_comma_with_strip(self):
        """Tokens are stripped by default."""
        assert DelimiterArraySplitter().split("1, 2 ,3") == ["1", "2", "3"]

    def test_keeps_empty_tokens_by_default(self):
        """Empty tokens keep their position."""
        assert DelimiterArraySplitter().split("1,,3") == ["1", "", "3"]

    def test_skip_empty(self):
        """Empty tokens can be dropped."""
        assert DelimiterArraySplitter(skip_empty=True).split("1,,3,") == ["1", "3"]

    def test_no_strip(self):
        """Stripping can be disabled."""
        assert DelimiterArraySplitter(";", strip=False).split("a; b") == ["a", " b"]

    def test_empty_delimiter_is_rejected(self):
        """An empty delimiter cannot split."""
        with pytest.raises(ArraySplitterError):
            DelimiterArraySplitter("")


class TestOtherSplitters:
    """Test the regex and callable splitters."""

    def test_regex(self):
        """Every match of the pattern separates tokens."""
        assert RegexArraySplitter(r"[,;]\s*").split("a, b;c") == ["a", "b", "c"]

    def test_regex_accepts_compiled_patterns(self):
        """Compiled patterns are used as is."""
        pattern = re.compile(r"\|")
        assert RegexArraySplitter(pattern).split("a|b") == ["a", "b"]

    def test_callable(self):
        """Any callable returning a sequence of strings can split."""
        splitter = CallableArraySplitter(lambda s: tuple(s))
        assert splitter.split("abc") == ["a", "b", "c"]

    def test_custom_subclass(self):
        """ArraySplitter can be sub-classed."""

        class LineSplitter(ArraySplitter):
            """Test"""

            def split(self, param):
                return param.splitlines()

        assert LineSplitter().split("a\nb") == ["a", "b"]
        assert repr(LineSplitter()) == "LineSplitter()"

    def test_abstract(self):
        """ArraySplitter cannot be instantiated."""
        with pytest.raises(TypeError):
            ArraySplitter()  # type: ignore
