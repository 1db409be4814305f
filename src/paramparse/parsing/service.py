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
Description: This module provides the parameter parser service. The service holds a parser
            per type descriptor and converts raw string parameters to typed values:
            - Parsers are registered or replaced with add_or_replace and looked up with
              get_parser. A type without parser is served by the parser of its closest
              ancestor.
            - Array types (list[T], tuple[T, ...]) without parser are split with the array
              splitter and every token is parsed to T.
            - parse_params parses a whole mapping of parameters against annotations.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable, ClassVar, get_origin, get_type_hints

from ..errors import ArraySplitterError, ParamBindingError, ParserRegistrationError
from ..meta.typing.utilities import (
    Annotation,
    array_element_type,
    is_array_type,
    new_array,
    resolve_annotation_types,
    type_ancestors,
    unwrap_optional,
)
from .base import HousingParamParser, ParamParser, ParseFunction
from .presets import ParserPreset
from .splitters import ArraySplitter, CallableArraySplitter, SpaceArraySplitter

logger = logging.getLogger(__name__)

_MISSING = object()


class ParamParserService:
    """
    A class to hold the parameter parsers and convert raw parameters to typed values. It
    allows customization: parsers can be added or replaced and the array splitter swapped.

    The service is not synchronized. Share an instance between threads only behind a lock.

    Examples:
        >>> service = ParamParserService()
        >>> service.parse(int, "42")
        42
        >>> service.parse(list[int], "1 x 3")
        [1, None, 3]
        >>> service.parse(int, "", 7)
        7

    Args:
        parsers (Iterable[ParamParser] | None): The parsers to start with. Defaults to the parsers
            of the FULL preset.
        splitter (ArraySplitter | Callable[[str], Sequence[str]] | None): The array splitter.
            Defaults to a SpaceArraySplitter.
    """

    __parsers: dict[Annotation, ParamParser]
    __cache: dict[Annotation, ParamParser | None]
    __splitter: ArraySplitter

    def __init__(
        self,
        parsers: Iterable[ParamParser] | None = None,
        splitter: ArraySplitter | Callable[[str], Any] | None = None,
    ) -> None:
        self.__parsers = {}
        self.__cache = {}
        self.__splitter = SpaceArraySplitter()
        if splitter is not None:
            self.set_array_splitter(splitter)
        for parser in ParserPreset.FULL.parsers() if parsers is None else parsers:
            self.add_or_replace(parser)

    @classmethod
    def from_preset(
        cls,
        preset: ParserPreset | str,
        splitter: ArraySplitter | Callable[[str], Any] | None = None,
    ) -> ParamParserService:
        """Create a service with the parsers of a preset.

        Args:
            preset (ParserPreset | str): The preset or its name ('full', 'basic').
            splitter: The array splitter, see ParamParserService.

        Returns:
            ParamParserService: The new service.
        """
        return cls(ParserPreset(preset).parsers(), splitter)

    # Array splitter

    def get_array_splitter(self) -> ArraySplitter:
        """The splitter used to cut array parameters into tokens."""
        return self.__splitter

    def set_array_splitter(self, splitter: ArraySplitter | Callable[[str], Any]) -> None:
        """Replace the array splitter. Affects every following array parsing.

        Args:
            splitter (ArraySplitter | Callable[[str], Sequence[str]]): The new splitter. A plain
                callable is wrapped in a CallableArraySplitter.

        Raises:
            ArraySplitterError: Raised if the splitter is neither an ArraySplitter nor callable.
        """
        if not isinstance(splitter, ArraySplitter):
            if not callable(splitter):
                raise ArraySplitterError(
                    f"Cannot use '{splitter!r}' of type '{type(splitter)}' as array splitter."
                    " Expected an ArraySplitter or a callable."
                )
            splitter = CallableArraySplitter(splitter)
        logger.debug("Array splitter set to %r.", splitter)
        self.__splitter = splitter

    array_splitter = property(get_array_splitter, set_array_splitter)

    # Registration

    def add_or_replace(self, parser: ParamParser) -> bool:
        """
        Register a parser for every type it matches. A parser already registered for one of
        these types is replaced.

        Args:
            parser (ParamParser): The parser to register.

        Raises:
            ParserRegistrationError: Raised if the parser is not a ParamParser.

        Returns:
            bool: False if the parser matches no type, in which case nothing is registered.
                True otherwise.
        """
        if not isinstance(parser, ParamParser):
            raise ParserRegistrationError(
                f"Cannot register '{parser!r}' of type '{type(parser)}'. Expected a ParamParser."
            )
        types = tuple(parser.match())
        if not types:
            logger.debug("Rejected %r: it matches no type.", parser)
            return False
        for match in types:
            previous = self.__parsers.get(match)
            if previous is not None and previous is not parser:
                logger.debug("Replacing %r with %r for %r.", previous, parser, match)
            self.__parsers[match] = parser
        self.__cache.clear()
        logger.debug("Registered %r for %r.", parser, types)
        return True

    register = add_or_replace

    def parser_for(self, *types: Annotation) -> Callable[[ParseFunction], ParseFunction]:
        """Register a plain parse function for the given types. Meant to be used as a decorator.

        The function takes the raw string and returns the value or None. ValueError and
        ArithmeticError raised by the function count as "no value".

        Examples:
            >>> @service.parser_for(Fraction)
            ... def parse_fraction(param: str) -> Fraction | None:
            ...     return Fraction(param.strip())

        Raises:
            ParserRegistrationError: Raised if no type is given.
        """
        if not types:
            raise ParserRegistrationError("parser_for requires at least one type.")

        def decorator(function: ParseFunction) -> ParseFunction:
            self.add_or_replace(HousingParamParser(types, function))
            return function

        return decorator

    # Lookup

    def get_parser(self, cl: Annotation) -> ParamParser | None:
        """Get the parser of a type. If the type has no parser, the parsers of its ancestors
        are tried from the closest one up to `object`.

        Args:
            cl (Annotation): The type descriptor.

        Returns:
            ParamParser | None: The parser, or None if neither the type nor its ancestors have
                one.
        """
        cached = self.__cache.get(cl, _MISSING)
        if cached is not _MISSING:
            return cached

        found = None
        for ancestor in type_ancestors(cl):
            found = self.__parsers.get(ancestor)
            if found is not None:
                if ancestor is not cl:
                    logger.debug("No parser for %r, using the one of %r.", cl, ancestor)
                break
        self.__cache[cl] = found
        return found

    def has_parser(self, cl: Annotation) -> bool:
        """Check if a parser is registered for exactly this type, ancestors are not consulted."""
        return cl in self.__parsers

    def registered_types(self) -> list[Annotation]:
        """Get all registered types for debugging/introspection."""
        return list(self.__parsers.keys())

    def __contains__(self, cl: Annotation) -> bool:
        return self.get_parser(cl) is not None

    # Parsing

    def parse(self, cl: Annotation, param: str | None, default: Any = None) -> Any:
        """Convert a raw parameter to a value of the given type.

        The parser of the type (see get_parser) is tried first. If it gives no value and the
        type is an array type, the parameter is split with the array splitter and each token is
        parsed to the element type. Tokens that give no value leave None at their position. The
        array is returned if at least one token was converted.

        Args:
            cl (Annotation): The type to convert to.
            param (str | None): The raw parameter.
            default (Any): Returned when no value could be produced.

        Returns:
            Any: The converted value, or default.
        """
        if param is None:
            return default

        parser = self.get_parser(cl)
        if parser is not None:
            value = parser.parse(param)
            if value is not None:
                return value

        if param and is_array_type(cl):
            value = self._parse_array(cl, self.__splitter.split(param))
            if value is not None:
                return value

        return default

    def _parse_array(self, cl: Annotation, tokens: Iterable[str]) -> Any:
        """Parse every token to the element type of an array type. None if nothing converted."""
        element_type = array_element_type(cl)
        elements = [self.parse(element_type, token) for token in tokens]
        converted = sum(element is not None for element in elements)
        logger.debug(
            "Parsed %d of %d tokens to %r for %r.", converted, len(elements), element_type, cl
        )
        if not converted:
            return None
        return new_array(cl, elements)

    def parse_params(
        self,
        target: type | Mapping[str, Annotation],
        params: Mapping[str, str | Iterable[str]],
        defaults: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Parse a mapping of raw parameters against annotations.

        Every annotated name gets a value: the parsed parameter or, when it is missing or cannot
        be parsed, its default. Defaults come from `defaults`, then from the class attributes of
        `target`, then None. Class attribute defaults are shallow copies. `T | None` annotations
        are parsed as `T`, ClassVar annotations are skipped.

        A parameter given as several strings, like the values of `urllib.parse.parse_qs`, is
        parsed element by element for an array type. For another type its last string is used.

        Examples:
            >>> class Query:
            ...     page: int = 1
            ...     tags: list[str] = []
            >>> service.parse_params(Query, {"page": ["3"], "tags": ["a", "b"]})
            {'page': 3, 'tags': ['a', 'b']}

        Args:
            target (type | Mapping[str, Annotation]): A class whose annotations are used, or the
                annotations themselves.
            params (Mapping[str, str | Iterable[str]]): The raw parameters.
            defaults (Mapping[str, Any] | None): Default values by name.

        Raises:
            ParamBindingError: Raised if the annotations cannot be resolved.

        Returns:
            dict[str, Any]: The values by name, in annotation order.
        """
        try:
            if isinstance(target, type):
                annotations = get_type_hints(target)
            else:
                annotations = resolve_annotation_types(dict(target))
        except (NameError, TypeError) as e:
            raise ParamBindingError(f"Could not resolve the annotations of '{target!r}'.") from e

        defaults = defaults or {}
        values: dict[str, Any] = {}
        for name, annotation in annotations.items():
            if annotation is ClassVar or get_origin(annotation) is ClassVar:
                continue
            if name in defaults:
                default = defaults[name]
            else:
                default = None
                if isinstance(target, type):
                    # class attributes are shared, each call gets its own copy
                    default = copy.copy(getattr(target, name, None))
            values[name] = self._parse_param(
                unwrap_optional(annotation), params.get(name), default
            )
        return values

    def _parse_param(self, cl: Annotation, raw: str | Iterable[str] | None, default: Any) -> Any:
        if raw is None or isinstance(raw, str):
            return self.parse(cl, raw, default)
        raw = list(raw)
        if not raw:
            return default
        if is_array_type(cl):
            value = self._parse_array(cl, raw)
            return default if value is None else value
        return self.parse(cl, raw[-1], default)

    def __repr__(self) -> str:
        return (
            f"ParamParserService({len(self.__parsers)} types,"
            f" splitter={self.__splitter!r})"
        )
