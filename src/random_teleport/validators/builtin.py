"""Built-in validators backed by a ``WorldView``."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from random_teleport.models import Location
from random_teleport.world import WorldView

if TYPE_CHECKING:
    from random_teleport.searcher import RandomSearcher

_LIST_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass(slots=True)
class BlockValidator:
    """Rejects columns whose surface is a blocked material (water, lava, ...)."""

    world: WorldView
    blocked: frozenset[str] = field(default_factory=lambda: frozenset({"water", "lava"}))
    name: str = "blocks"

    def __post_init__(self) -> None:
        self.blocked = frozenset(_normalize(block) for block in self.blocked)

    def validate(self, searcher: RandomSearcher, location: Location) -> bool:
        return _normalize(self.world.surface_block(location)) not in self.blocked


@dataclass(slots=True)
class WorldBorderValidator:
    world: WorldView
    name: str = "worldborder"

    def validate(self, searcher: RandomSearcher, location: Location) -> bool:
        return self.world.inside_border(location)


@dataclass(slots=True)
class ProtectionValidator:
    """Rejects locations inside protected regions."""

    world: WorldView
    name: str = "protection"

    def validate(self, searcher: RandomSearcher, location: Location) -> bool:
        return not self.world.is_protected(location)


@dataclass(slots=True)
class BiomeValidator:
    """Only accepts the biomes listed in the searcher's ``biome`` option.

    The option holds a comma or space separated list. Searches without the option
    accept every biome.
    """

    world: WorldView
    option: str = "biome"
    name: str = "biome"

    def validate(self, searcher: RandomSearcher, location: Location) -> bool:
        raw = searcher.options.get(self.option)
        if not raw or raw == "true":
            return True
        wanted = {_normalize(item) for item in _LIST_SPLIT_RE.split(raw) if item}
        return _normalize(self.world.biome_at(location)) in wanted


@dataclass(slots=True)
class TargetOccupancyValidator:
    """Rejects columns where one of the searcher's targets currently stands."""

    name: str = "occupancy"

    def validate(self, searcher: RandomSearcher, location: Location) -> bool:
        for target in searcher.targets:
            current = getattr(target, "location", None)
            if current is None:
                continue
            if current.world == location.world and current.x == location.x and current.z == location.z:
                return False
        return True


def builtin_validators(world: WorldView, *, blocked: Iterable[str] | None = None) -> list:
    """Return the standard validator set for ``world`` in evaluation order."""
    block_validator = BlockValidator(world) if blocked is None else BlockValidator(world, frozenset(blocked))
    return [
        WorldBorderValidator(world),
        block_validator,
        ProtectionValidator(world),
        BiomeValidator(world),
        TargetOccupancyValidator(),
    ]


def _normalize(name: str) -> str:
    name = name.strip().lower()
    return name.removeprefix("minecraft:")
