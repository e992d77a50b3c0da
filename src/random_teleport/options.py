"""Parsing of ``-option value...`` tokens onto a searcher."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Callable, Protocol

from random_teleport.exceptions import InvalidParameterError, UnknownOptionError

if TYPE_CHECKING:
    from random_teleport.searcher import RandomSearcher

Handler = Callable[["RandomSearcher", list[str]], bool]

_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")
_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


class OptionParser(Protocol):
    aliases: tuple[str, ...]

    def parse(self, searcher: RandomSearcher, args: list[str]) -> bool:
        """Apply ``args`` to ``searcher``; return ``False`` if they are invalid."""


class SimpleOptionParser:
    """Option parser delegating to a handler function."""

    def __init__(self, aliases: Sequence[str], handler: Handler) -> None:
        if not aliases:
            raise ValueError("An option parser needs at least one alias")
        self.aliases = tuple(alias.lower() for alias in aliases)
        self._handler = handler

    def parse(self, searcher: RandomSearcher, args: list[str]) -> bool:
        return self._handler(searcher, args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self.aliases)})"


class AdditionalOptionParser(SimpleOptionParser):
    """Stores its arguments in ``searcher.options`` under the first alias.

    A bare flag is stored as ``"true"``; validators read the value back.
    """

    def __init__(self, *aliases: str) -> None:
        super().__init__(aliases, self._store)

    def _store(self, searcher: RandomSearcher, args: list[str]) -> bool:
        searcher.options[self.aliases[0]] = " ".join(args) if args else "true"
        return True


class OptionParserRegistry:
    """Looks up option parsers by alias and applies token lists to searchers."""

    def __init__(self, parsers: Iterable[OptionParser] = ()) -> None:
        self._parsers: dict[str, OptionParser] = {}
        for parser in parsers:
            self.add(parser)

    def add(self, parser: OptionParser) -> None:
        for alias in parser.aliases:
            self._parsers[alias.lower()] = parser

    def get(self, alias: str) -> OptionParser | None:
        return self._parsers.get(alias.lower())

    def parsers(self) -> list[OptionParser]:
        return list(dict.fromkeys(self._parsers.values()))

    def parse(self, searcher: RandomSearcher, tokens: Sequence[str]) -> None:
        """Apply option tokens in order, e.g. ``["-minr", "100", "-biome", "plains", "desert"]``."""
        for alias, args in group_tokens(tokens):
            parser = self.get(alias)
            if parser is None:
                raise UnknownOptionError(f"Unknown option: -{alias}")
            if not parser.parse(searcher, args):
                raise InvalidParameterError(f"Invalid arguments for option -{alias}: {' '.join(args)!r}")


def group_tokens(tokens: Sequence[str]) -> list[tuple[str, list[str]]]:
    """Split tokens into ``(alias, args)`` groups; negative numbers count as values."""
    groups: list[tuple[str, list[str]]] = []
    for token in tokens:
        if token.startswith("-") and len(token) > 1 and not _NUMBER_RE.fullmatch(token):
            groups.append((token.lstrip("-").lower(), []))
        elif not groups:
            raise InvalidParameterError(f"Expected an option before {token!r}")
        else:
            groups[-1][1].append(token)
    return groups


def _int_option(attribute: str) -> Handler:
    def handler(searcher: RandomSearcher, args: list[str]) -> bool:
        if len(args) != 1:
            return False
        try:
            value = int(args[0])
        except ValueError:
            return False
        setattr(searcher, attribute, value)
        return True

    return handler


def _center_option(axis: str) -> Handler:
    def handler(searcher: RandomSearcher, args: list[str]) -> bool:
        if len(args) != 1:
            return False
        try:
            value = int(float(args[0]))
        except (ValueError, OverflowError):
            return False
        searcher.center = searcher.center.with_coords(**{axis: value})
        return True

    return handler


def _id_option(searcher: RandomSearcher, args: list[str]) -> bool:
    if not args:
        return False
    searcher.id = " ".join(args)
    return True


def _generated_only_option(searcher: RandomSearcher, args: list[str]) -> bool:
    if not args:
        searcher.generated_only = True
        return True
    if len(args) != 1 or args[0].lower() not in _TRUE | _FALSE:
        return False
    searcher.generated_only = args[0].lower() in _TRUE
    return True


def default_option_parsers() -> OptionParserRegistry:
    return OptionParserRegistry(
        [
            SimpleOptionParser(["id"], _id_option),
            SimpleOptionParser(["s", "seed"], _int_option("seed")),
            SimpleOptionParser(["x"], _center_option("x")),
            SimpleOptionParser(["z"], _center_option("z")),
            SimpleOptionParser(["minr", "min", "minradius"], _int_option("min_radius")),
            SimpleOptionParser(["maxr", "max", "maxradius"], _int_option("max_radius")),
            SimpleOptionParser(["tries", "maxchecks", "t"], _int_option("max_checks")),
            SimpleOptionParser(["c", "cooldown"], _int_option("cooldown")),
            SimpleOptionParser(["g", "generatedonly"], _generated_only_option),
            AdditionalOptionParser("biome", "b"),
            AdditionalOptionParser("force", "f"),
        ]
    )
