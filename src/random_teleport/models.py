from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

REGION_SIZE = 16


class SearchState(str, Enum):
    idle = "idle"
    running = "running"
    succeeded = "succeeded"
    failed = "failed"
    cancelled = "cancelled"


@dataclass(frozen=True, slots=True)
class Location:
    x: int
    y: int
    z: int
    world: str = "world"

    def add(self, dx: int = 0, dy: int = 0, dz: int = 0) -> Location:
        return replace(self, x=self.x + dx, y=self.y + dy, z=self.z + dz)

    def with_coords(self, *, x: int | None = None, y: int | None = None, z: int | None = None) -> Location:
        return replace(
            self,
            x=self.x if x is None else x,
            y=self.y if y is None else y,
            z=self.z if z is None else z,
        )

    def region_base(self) -> Location:
        """Return the corner of the 16x16 region containing this location, on y=0."""
        return replace(
            self,
            x=self.x // REGION_SIZE * REGION_SIZE,
            y=0,
            z=self.z // REGION_SIZE * REGION_SIZE,
        )

    @property
    def region(self) -> tuple[int, int]:
        return self.x // REGION_SIZE, self.z // REGION_SIZE

    def __str__(self) -> str:
        return f"{self.world}@{self.x},{self.y},{self.z}"
