"""Asynchronous search for a random location around a center point."""

from __future__ import annotations

import asyncio
import logging
import random
import sys
from collections.abc import Hashable
from uuid import uuid4

from random_teleport.exceptions import InvalidParameterError, NotFoundError, SearchAlreadyStartedError
from random_teleport.models import REGION_SIZE, Location, SearchState
from random_teleport.random_source import default_random
from random_teleport.registry import SearcherRegistry, running_searchers
from random_teleport.terrain import TerrainResolver
from random_teleport.validators import LocationValidator, ValidatorRegistry, default_validators

DEFAULT_MAX_CHECKS = 100

# x-major enumeration of the offsets inside one region
REGION_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dz) for dx in range(REGION_SIZE) for dz in range(REGION_SIZE)
)


class RandomSearcher:
    """Searches random regions around ``center`` until a location passes every validator.

    Parameters are validated on assignment. Once ``search()`` has been called they
    should be treated as read-only.
    """

    def __init__(
        self,
        center: Location,
        min_radius: int,
        max_radius: int,
        *validators: LocationValidator,
        resolver: TerrainResolver,
        registry: SearcherRegistry | None = None,
        defaults: ValidatorRegistry | None = None,
        initiator: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._resolver = resolver
        self._registry = running_searchers if registry is None else registry
        self._logger = logger or logging.getLogger("random_teleport.searcher")
        self._unique_id = uuid4().hex
        self._initiator = initiator
        self._random: random.Random = default_random()
        self._seed: int | None = None
        self._id: str | None = None
        self._targets: dict[Hashable, None] = {}
        self._min_radius = 0
        self._max_radius = sys.maxsize
        self._generated_only = False
        self._max_checks = DEFAULT_MAX_CHECKS
        self._cooldown = 0
        self._checks = 0
        self._future: asyncio.Future[Location] | None = None
        self._task: asyncio.Task[None] | None = None
        self.options: dict[str, str] = {}

        self.center = center
        self.min_radius = min_radius
        self.max_radius = max_radius
        base = default_validators() if defaults is None else defaults
        self.validators = base.merged(validators)

    @property
    def unique_id(self) -> str:
        """Identity of this searcher instance."""
        return self._unique_id

    @property
    def id(self) -> str:
        """Identity used for cooldowns; derived from the settings unless set explicitly."""
        if self._id is None:
            return repr(self)
        return self._id

    @id.setter
    def id(self, value: str | None) -> None:
        self._id = value

    @property
    def initiator(self) -> str | None:
        return self._initiator

    @property
    def seed(self) -> int | None:
        return self._seed

    @seed.setter
    def seed(self, value: int | None) -> None:
        if value is None:
            self._seed = None
            self._random = default_random()
            return
        self._seed = value
        if self._random is default_random():
            self._random = random.Random(value)
        else:
            self._random.seed(value)

    @property
    def random(self) -> random.Random:
        return self._random

    @random.setter
    def random(self, rng: random.Random) -> None:
        if rng is None:
            raise InvalidParameterError("Random source cannot be None!")
        self._random = rng

    @property
    def center(self) -> Location:
        return self._center

    @center.setter
    def center(self, value: Location) -> None:
        if value is None:
            raise InvalidParameterError("Center cannot be None!")
        self._center = value

    @property
    def min_radius(self) -> int:
        return self._min_radius

    @min_radius.setter
    def min_radius(self, value: int) -> None:
        if value < 0 or value >= self._max_radius:
            raise InvalidParameterError("Min radius has to be positive and less than the max radius!")
        self._min_radius = value

    @property
    def max_radius(self) -> int:
        return self._max_radius

    @max_radius.setter
    def max_radius(self, value: int) -> None:
        if value <= self._min_radius:
            raise InvalidParameterError("Max radius has to be greater than the min radius!")
        self._max_radius = value

    @property
    def generated_only(self) -> bool:
        """Only search regions that already exist instead of generating new ones."""
        return self._generated_only

    @generated_only.setter
    def generated_only(self, value: bool) -> None:
        self._generated_only = bool(value)

    @property
    def max_checks(self) -> int:
        return self._max_checks

    @max_checks.setter
    def max_checks(self, value: int) -> None:
        if value < 0:
            raise InvalidParameterError("Max checks can't be negative!")
        self._max_checks = value

    @property
    def cooldown(self) -> int:
        """Seconds before a search with the same id may run again. Not enforced here."""
        return self._cooldown

    @cooldown.setter
    def cooldown(self, value: int) -> None:
        if value < 0:
            raise InvalidParameterError("Cooldown can't be negative!")
        self._cooldown = value

    @property
    def checks(self) -> int:
        """Number of regions resolved so far."""
        return self._checks

    @property
    def targets(self) -> tuple[Hashable, ...]:
        return tuple(self._targets)

    def add_target(self, *targets: Hashable) -> None:
        for target in targets:
            self._targets.setdefault(target, None)

    def remove_target(self, target: Hashable) -> None:
        self._targets.pop(target, None)

    @property
    def future(self) -> asyncio.Future[Location] | None:
        """The running search future, or ``None`` before ``search()``."""
        return self._future

    @property
    def state(self) -> SearchState:
        future = self._future
        if future is None:
            return SearchState.idle
        if not future.done():
            return SearchState.running
        if future.cancelled():
            return SearchState.cancelled
        if future.exception() is not None:
            return SearchState.failed
        return SearchState.succeeded

    def search(self) -> asyncio.Future[Location]:
        """Start searching and return a future for the found location.

        Must be called from a running event loop, once per searcher. The future
        fails with ``NotFoundError`` when ``max_checks`` regions were resolved
        without a match, and with the resolver's own exception if resolving a
        region fails. Cancelling it stops the search before the next attempt.
        """
        if self._future is not None:
            raise SearchAlreadyStartedError(f"Searcher {self._unique_id} was already started")

        loop = asyncio.get_running_loop()
        self._registry.register(self)
        future: asyncio.Future[Location] = loop.create_future()
        self._future = future
        future.add_done_callback(self._on_done)
        self._task = loop.create_task(self._run(future), name=f"random-search-{self._unique_id}")
        self._logger.info(
            "search_started",
            extra={
                "unique_id": self._unique_id,
                "search_id": self.id,
                "center": str(self._center),
                "min_radius": self._min_radius,
                "max_radius": self._max_radius,
                "max_checks": self._max_checks,
            },
        )
        return future

    def cancel(self) -> bool:
        """Cancel the running search. Returns ``False`` if nothing was cancelled.

        Safe to call from any thread; off the search's event loop the cancellation
        is handed to that loop and happens on its next iteration.
        """
        future = self._future
        if future is None or future.done():
            return False
        loop = future.get_loop()
        try:
            current = asyncio.get_running_loop()
        except RuntimeError:
            current = None
        if current is loop:
            return future.cancel()
        loop.call_soon_threadsafe(future.cancel)
        return True

    def in_radius(self, location: Location) -> bool:
        """Whether the x or the z distance from the center lies in ``[min_radius, max_radius)``."""
        return self._in_range(location.x, self._center.x) or self._in_range(location.z, self._center.z)

    async def _run(self, future: asyncio.Future[Location]) -> None:
        while True:
            if self._checks >= self._max_checks:
                _fail(future, NotFoundError("location"))
                return
            if future.done():
                return

            region = self._random_region()
            try:
                usable = await self._resolver.resolve(region, self._generated_only)
            except asyncio.CancelledError:
                future.cancel()
                raise
            except Exception as exc:  # noqa: BLE001 - resolver failures end the search unchanged.
                _fail(future, exc)
                return

            self._checks += 1
            if future.done():
                self._logger.debug("search_attempt_discarded", extra={"unique_id": self._unique_id})
                return

            try:
                found = self._scan(region) if usable else None
            except Exception as exc:  # noqa: BLE001 - a broken validator fails the search.
                _fail(future, exc)
                return
            self._logger.debug(
                "search_attempt",
                extra={
                    "unique_id": self._unique_id,
                    "check": self._checks,
                    "region": region.region,
                    "usable": usable,
                    "found": found is not None,
                },
            )
            if found is not None:
                future.set_result(found)
                return

    def _random_region(self) -> Location:
        x = self._random_axis(self._center.x)
        z = self._random_axis(self._center.z)
        return self._center.with_coords(x=x, y=0, z=z).region_base()

    def _random_axis(self, center: int) -> int:
        # rejection sampling; 0 offsets are drawn twice as often as the others
        while True:
            sign = 1 if self._random.getrandbits(1) else -1
            coord = center + sign * self._random.randrange(self._max_radius)
            if self._in_range(coord, center):
                return coord

    def _scan(self, region: Location) -> Location | None:
        size = len(REGION_OFFSETS)
        start = self._random.randrange(size)
        for step in range(size):
            dx, dz = REGION_OFFSETS[(start + step) % size]
            candidate = region.add(dx=dx, dz=dz)
            if not self.in_radius(candidate):
                continue
            if self.validators.validate(self, candidate):
                return candidate
        return None

    def _in_range(self, coord: int, center: int) -> bool:
        diff = abs(center - coord)
        return self._min_radius <= diff < self._max_radius

    def _on_done(self, future: asyncio.Future[Location]) -> None:
        self._registry.unregister(self._unique_id)
        extra = {"unique_id": self._unique_id, "checks": self._checks}
        if future.cancelled():
            self._logger.info("search_cancelled", extra=extra)
            return
        exc = future.exception()
        if isinstance(exc, NotFoundError):
            self._logger.info("search_exhausted", extra=extra)
        elif exc is not None:
            self._logger.error("search_failed", extra={**extra, "error": f"{type(exc).__name__}: {exc}"})
        else:
            self._logger.info("search_succeeded", extra={**extra, "location": str(future.result())})

    def __repr__(self) -> str:
        options = ", ".join(f"{key}={value}" for key, value in sorted(self.options.items()))
        return (
            f"RandomSearcher(id={self._id!r}, seed={self._seed}, center={self._center}, "
            f"min_radius={self._min_radius}, max_radius={self._max_radius}, "
            f"generated_only={self._generated_only}, max_checks={self._max_checks}, "
            f"cooldown={self._cooldown}, options={{{options}}})"
        )


def _fail(future: asyncio.Future[Location], exc: BaseException) -> None:
    if not future.done():
        future.set_exception(exc)
