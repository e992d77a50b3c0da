"""CLI-side handler wrapping searcher construction and execution."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from random_teleport.config import Settings, settings as default_settings
from random_teleport.exceptions import SearchInProgressError
from random_teleport.models import Location
from random_teleport.options import OptionParserRegistry, default_option_parsers
from random_teleport.registry import SearcherRegistry, running_searchers
from random_teleport.searcher import RandomSearcher
from random_teleport.terrain import TerrainResolver
from random_teleport.validators import ValidatorRegistry


class SearchHandler:
    """Simple sync-friendly facade that builds searchers and waits for them."""

    def __init__(
        self,
        resolver: TerrainResolver,
        *,
        validators: ValidatorRegistry | None = None,
        option_parsers: OptionParserRegistry | None = None,
        registry: SearcherRegistry | None = None,
        settings: Settings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._resolver = resolver
        self._validators = validators
        self._option_parsers = option_parsers or default_option_parsers()
        self._registry = running_searchers if registry is None else registry
        self._settings = settings or default_settings
        self._logger = logger or logging.getLogger("random_teleport.cli")

    @property
    def registry(self) -> SearcherRegistry:
        return self._registry

    def build_searcher(
        self,
        *,
        x: int,
        z: int,
        world: str | None = None,
        min_radius: int | None = None,
        max_radius: int | None = None,
        tokens: Sequence[str] = (),
        initiator: str | None = None,
    ) -> RandomSearcher:
        """Create a searcher from the configured defaults, then apply option tokens."""
        cfg = self._settings
        searcher = RandomSearcher(
            Location(x=x, y=0, z=z, world=world or cfg.world_name),
            cfg.default_min_radius if min_radius is None else min_radius,
            cfg.default_max_radius if max_radius is None else max_radius,
            resolver=self._resolver,
            registry=self._registry,
            defaults=self._validators,
            initiator=initiator,
        )
        searcher.max_checks = cfg.default_max_checks
        searcher.cooldown = cfg.default_cooldown_seconds
        searcher.generated_only = cfg.generated_only
        self._option_parsers.parse(searcher, tokens)
        return searcher

    async def run(self, searcher: RandomSearcher) -> Location:
        """Run ``searcher`` and wait at most ``search_timeout_seconds`` for its result.

        Searches whose id is already running are refused unless the ``force``
        option is set. On timeout the search future is cancelled.
        """
        if searcher.options.get("force") != "true" and self._registry.is_running(searcher.id):
            raise SearchInProgressError(f"A search with id {searcher.id!r} is already running")

        future = searcher.search()
        try:
            return await asyncio.wait_for(future, timeout=self._settings.search_timeout_seconds)
        except asyncio.TimeoutError:
            self._logger.warning(
                "search_timeout",
                extra={"unique_id": searcher.unique_id, "timeout": self._settings.search_timeout_seconds},
            )
            raise

    def run_sync(self, searcher: RandomSearcher) -> Location:
        return asyncio.run(self.run(searcher))
