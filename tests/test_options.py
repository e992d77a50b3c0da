from __future__ import annotations

import pytest

from random_teleport.exceptions import InvalidParameterError, UnknownOptionError
from random_teleport.models import Location
from random_teleport.options import (
    AdditionalOptionParser,
    OptionParserRegistry,
    SimpleOptionParser,
    default_option_parsers,
    group_tokens,
)
from random_teleport.registry import SearcherRegistry
from random_teleport.searcher import RandomSearcher
from random_teleport.terrain import InMemoryTerrainResolver
from random_teleport.validators import ValidatorRegistry


def _searcher() -> RandomSearcher:
    return RandomSearcher(
        Location(x=0, y=64, z=0),
        0,
        1_000,
        resolver=InMemoryTerrainResolver(),
        registry=SearcherRegistry(),
        defaults=ValidatorRegistry(),
    )


def test_group_tokens_treats_negative_numbers_as_values() -> None:
    groups = group_tokens(["-x", "-120", "--Biome", "plains", "desert", "-f"])

    assert groups == [("x", ["-120"]), ("biome", ["plains", "desert"]), ("f", [])]


def test_group_tokens_requires_leading_option() -> None:
    with pytest.raises(InvalidParameterError):
        group_tokens(["plains", "-biome"])


def test_additional_option_parser_stores_under_first_alias() -> None:
    searcher = _searcher()
    parsers = OptionParserRegistry([AdditionalOptionParser("biome", "b"), AdditionalOptionParser("force", "f")])

    parsers.parse(searcher, ["-b", "plains", "desert", "-F"])

    assert searcher.options == {"biome": "plains desert", "force": "true"}


def test_default_parsers_apply_searcher_settings() -> None:
    searcher = _searcher()
    tokens = (
        "-minr 50 -maxr 500 -tries 20 -c 30 -g -s 9 -x -100 -z 40 -id spawn rtp -biome taiga"
    ).split()

    default_option_parsers().parse(searcher, tokens)

    assert (searcher.min_radius, searcher.max_radius) == (50, 500)
    assert searcher.max_checks == 20
    assert searcher.cooldown == 30
    assert searcher.generated_only is True
    assert searcher.seed == 9
    assert searcher.center == Location(x=-100, y=64, z=40)
    assert searcher.id == "spawn rtp"
    assert searcher.options == {"biome": "taiga"}


def test_generated_only_accepts_explicit_value() -> None:
    searcher = _searcher()
    searcher.generated_only = True

    default_option_parsers().parse(searcher, ["-generatedonly", "false"])

    assert searcher.generated_only is False


def test_unknown_option_raises() -> None:
    with pytest.raises(UnknownOptionError, match="-nope"):
        default_option_parsers().parse(_searcher(), ["-nope", "1"])


def test_invalid_arguments_raise_and_keep_value() -> None:
    searcher = _searcher()
    parsers = default_option_parsers()

    with pytest.raises(InvalidParameterError):
        parsers.parse(searcher, ["-tries", "lots"])
    with pytest.raises(InvalidParameterError):
        parsers.parse(searcher, ["-maxr", "0"])

    assert searcher.max_checks == 100
    assert searcher.max_radius == 1_000


def test_infinite_center_coordinates_raise_invalid_parameter() -> None:
    searcher = _searcher()
    parsers = default_option_parsers()

    with pytest.raises(InvalidParameterError):
        parsers.parse(searcher, ["-x", "inf"])
    with pytest.raises(InvalidParameterError):
        parsers.parse(searcher, ["-z", "-inf"])
    with pytest.raises(InvalidParameterError):
        parsers.parse(searcher, ["-x", "nan"])

    assert searcher.center == Location(x=0, y=64, z=0)


def test_simple_option_parser_handler_result() -> None:
    seen: list[list[str]] = []

    def handler(searcher, args) -> bool:
        seen.append(args)
        return bool(args)

    registry = OptionParserRegistry([SimpleOptionParser(["Mark", "m"], handler)])

    registry.parse(_searcher(), ["-m", "a"])
    with pytest.raises(InvalidParameterError):
        registry.parse(_searcher(), ["-mark"])

    assert seen == [["a"], []]
    assert len(registry.parsers()) == 1
