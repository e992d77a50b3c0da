"""Read-only world queries consulted by the built-in validators."""

from __future__ import annotations

import zlib
from typing import Protocol

from .models import Location


class WorldView(Protocol):
    def surface_block(self, location: Location) -> str:
        """Material name of the highest block at the location's column."""
        ...

    def biome_at(self, location: Location) -> str:
        ...

    def is_protected(self, location: Location) -> bool:
        ...

    def inside_border(self, location: Location) -> bool:
        ...


class StubWorld:
    """Flat, unprotected, unbounded grass world."""

    def surface_block(self, location: Location) -> str:
        return "grass_block"

    def biome_at(self, location: Location) -> str:
        return "plains"

    def is_protected(self, location: Location) -> bool:
        return False

    def inside_border(self, location: Location) -> bool:
        return True


class DemoWorld:
    """Deterministic demo world (not accurate to Minecraft generation).

    Every 64x64 area gets a biome picked from a checksum of its coordinates, oceans
    and rivers are covered in water and a square around the spawn is protected.
    """

    BIOMES = ("plains", "forest", "desert", "ocean", "taiga", "river", "savanna", "swamp")
    SURFACES = {
        "plains": "grass_block",
        "forest": "grass_block",
        "desert": "sand",
        "ocean": "water",
        "taiga": "podzol",
        "river": "water",
        "savanna": "grass_block",
        "swamp": "mud",
    }

    def __init__(
        self,
        *,
        seed: int = 0,
        border_radius: int = 29_999_984,
        spawn_protection: int = 16,
    ) -> None:
        self.seed = seed
        self.border_radius = border_radius
        self.spawn_protection = spawn_protection

    def biome_at(self, location: Location) -> str:
        key = f"{self.seed}:{location.x // 64}:{location.z // 64}".encode()
        return self.BIOMES[zlib.crc32(key) % len(self.BIOMES)]

    def surface_block(self, location: Location) -> str:
        biome = self.biome_at(location)
        if biome == "desert" and zlib.crc32(f"{location.x}:{location.z}".encode()) % 50 == 0:
            return "cactus"
        return self.SURFACES[biome]

    def is_protected(self, location: Location) -> bool:
        return abs(location.x) <= self.spawn_protection and abs(location.z) <= self.spawn_protection

    def inside_border(self, location: Location) -> bool:
        return abs(location.x) < self.border_radius and abs(location.z) < self.border_radius
