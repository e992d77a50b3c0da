"""Asynchronous resolution of terrain regions before they are scanned."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from random_teleport.adapters import GameCommandAdapter, MinescriptCommand

from .models import Location


class TerrainResolver(Protocol):
    """Makes the region containing a location available for inspection."""

    async def resolve(self, location: Location, generated_only: bool) -> bool:
        """Return whether the region is usable.

        With ``generated_only`` the resolver must not generate missing regions and
        reports them as unusable instead. Infrastructure problems are raised.
        """


class InMemoryTerrainResolver:
    """Tracks generated regions in memory; used for local demos and tests."""

    def __init__(
        self,
        generated: set[tuple[int, int]] | None = None,
        *,
        latency_seconds: float = 0.0,
    ) -> None:
        self.generated: set[tuple[int, int]] = set(generated or ())
        self.latency_seconds = latency_seconds
        self.requests: list[Location] = []

    async def resolve(self, location: Location, generated_only: bool) -> bool:
        self.requests.append(location)
        await asyncio.sleep(self.latency_seconds)
        if location.region in self.generated:
            return True
        if generated_only:
            return False
        self.generated.add(location.region)
        return True


class CommandTerrainResolver:
    """Loads regions through vanilla commands sent over a game command adapter.

    Adapter calls are blocking, so they run in a worker thread. Loading uses a
    ``forceload add``/``forceload remove`` pair and only counts when the game
    confirms the force load. ``generated_only`` lookups use ``execute if loaded``,
    which never generates terrain but also only sees regions that are currently
    loaded: generated regions that are unloaded are reported as unusable.
    """

    LOADED_MARKER = "test passed"
    FORCELOAD_MARKER = "force loaded"

    def __init__(
        self,
        adapter: GameCommandAdapter,
        *,
        timeout_seconds: float = 5.0,
        logger: logging.Logger | None = None,
    ) -> None:
        self._adapter = adapter
        self._timeout_seconds = timeout_seconds
        self._logger = logger or logging.getLogger("random_teleport.terrain")

    async def resolve(self, location: Location, generated_only: bool) -> bool:
        if generated_only:
            output = await self._send(f"execute if loaded {location.x} 0 {location.z}")
            loaded = output is not None and self.LOADED_MARKER in output.lower()
            self._logger.debug("region_probe", extra={"region": location.region, "loaded": loaded})
            return loaded

        output = await self._send(f"forceload add {location.x} {location.z}")
        if output is None or self.FORCELOAD_MARKER not in output.lower():
            self._logger.warning("region_load_failed", extra={"region": location.region, "output": output})
            return False
        await self._send(f"forceload remove {location.x} {location.z}")
        self._logger.debug("region_loaded", extra={"region": location.region})
        return True

    async def _send(self, command: str) -> str | None:
        return await asyncio.wait_for(
            asyncio.to_thread(self._adapter.send, MinescriptCommand(command=command)),
            timeout=self._timeout_seconds,
        )
