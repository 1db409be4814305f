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
Description: Tests for the type descriptor utilities and the fixed width kinds.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Optional, Union

import pytest

from paramparse.kinds import BoundedInt, Byte, Char, Float, Integer, Long, Short
from paramparse.meta.typing.utilities import new_array
from paramparse.typing_utilities import (
    array_element_type,
    is_array_type,
    is_binary_optional,
    is_union,
    resolve_annotation_types,
    type_ancestors,
    unwrap_optional,
)


# =============================================================================
# Unions and optionals
# =============================================================================


class TestUnions:
    """Test union and optional helpers."""

    def test_is_union(self):
        """Both union spellings are unions."""
        assert is_union(int | str)
        assert is_union(Union[int, str])
        assert not is_union(int)
        assert not is_union(list[int])

    def test_is_binary_optional(self):
        """Only T | None is a binary optional."""
        assert is_binary_optional(int | None)
        assert is_binary_optional(Optional[int])
        assert not is_binary_optional(int | str | None)
        assert not is_binary_optional(int | str)
        assert not is_binary_optional(int)

    def test_unwrap_optional(self):
        """T | None gives T, anything else is left untouched."""
        assert unwrap_optional(int | None) is int
        assert unwrap_optional(Optional[list[int]]) == list[int]
        assert unwrap_optional(int | str) == int | str
        assert unwrap_optional(str) is str


# =============================================================================
# Arrays
# =============================================================================


class TestArrayTypes:
    """Test array recognition and construction."""

    @pytest.mark.parametrize(
        "annotation", [list[int], list[str], tuple[int, ...], list[list[int]]]
    )
    def test_array_types(self, annotation):
        """Lists and variadic tuples are arrays."""
        assert is_array_type(annotation)

    @pytest.mark.parametrize(
        "annotation", [list, tuple, int, str, tuple[int, str], dict[str, int], set[int]]
    )
    def test_not_array_types(self, annotation):
        """Bare containers, fixed tuples and other generics are not arrays."""
        assert not is_array_type(annotation)

    def test_array_element_type(self):
        """The element type is the first argument."""
        assert array_element_type(list[str]) is str
        assert array_element_type(tuple[int, ...]) is int
        assert array_element_type(list[list[int]]) == list[int]

    def test_array_element_type_of_non_array_raises(self):
        """Asking the element type of a scalar is an error."""
        with pytest.raises(TypeError):
            array_element_type(int)

    def test_new_array(self):
        """The container follows the array origin."""
        assert new_array(list[int], [1, None]) == [1, None]
        assert new_array(tuple[int, ...], [1, None]) == (1, None)


# =============================================================================
# Fallback chain
# =============================================================================


class TestTypeAncestors:
    """Test the fallback chain of type descriptors."""

    def test_class_ancestors_follow_the_mro(self):
        """A class gives its MRO."""
        assert type_ancestors(bool) == (bool, int, object)
        assert type_ancestors(Byte) == (Byte, BoundedInt, int, object)

    def test_alias_ancestors(self):
        """An alias comes first, then the MRO of its origin."""
        assert type_ancestors(list[int]) == (list[int], list, object)

    def test_object_is_the_root(self):
        """object has no ancestor but itself."""
        assert type_ancestors(object) == (object,)

    def test_non_type_descriptor(self):
        """A descriptor that is neither a class nor an alias has no ancestor."""
        assert type_ancestors(int | str) == (int | str,)


class TestResolveAnnotationTypes:
    """Test forward reference resolution."""

    def test_resolves_strings(self):
        """String annotations of builtins are resolved."""
        assert resolve_annotation_types({"a": "int", "b": list[str]}) == {
            "a": int,
            "b": list[str],
        }

    def test_unknown_name_raises(self):
        """Unknown names cannot be resolved."""
        with pytest.raises(NameError):
            resolve_annotation_types({"a": "Undefined"})


# =============================================================================
# Kinds
# =============================================================================


class TestKinds:
    """Test the fixed width kinds."""

    @pytest.mark.parametrize(
        "kind, bits", [(Byte, 8), (Short, 16), (Integer, 32), (Long, 64)]
    )
    def test_bounds(self, kind, bits):
        """Bounds are the signed bounds of the width."""
        assert kind.MIN == -(2 ** (bits - 1))
        assert kind.MAX == 2 ** (bits - 1) - 1
        assert kind.in_range(kind.MAX)
        assert kind.in_range(kind.MIN)
        assert not kind.in_range(kind.MAX + 1)
        assert not kind.in_range(kind.MIN - 1)

    def test_kinds_behave_as_builtins(self):
        """Kinds are their builtin."""
        assert Byte(3) + 1 == 4
        assert isinstance(Long(1), int)
        assert isinstance(Float(1.5), float)
        assert Char("a") == "a"

    def test_repr(self):
        """The kind shows in the representation."""
        assert repr(Short(7)) == "Short(7)"
        assert repr(Float(1.5)) == "Float(1.5)"
        assert repr(Char("x")) == "Char('x')"
