"""Process-wide tracking of in-flight searches."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from random_teleport.searcher import RandomSearcher


class SearcherRegistry:
    """Thread-safe mapping of ``unique_id`` to running searchers.

    Entries only live as long as the search they belong to. Searchers add
    themselves when ``search()`` starts and remove themselves from a completion
    callback, whatever the outcome.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._lock = threading.Lock()
        self._searchers: dict[str, RandomSearcher] = {}
        self._logger = logger or logging.getLogger("random_teleport.registry")

    def register(self, searcher: RandomSearcher) -> None:
        with self._lock:
            self._searchers[searcher.unique_id] = searcher
            size = len(self._searchers)
        self._logger.debug("searcher_registered", extra={"unique_id": searcher.unique_id, "running": size})

    def unregister(self, unique_id: str) -> RandomSearcher | None:
        with self._lock:
            searcher = self._searchers.pop(unique_id, None)
            size = len(self._searchers)
        if searcher is not None:
            self._logger.debug("searcher_unregistered", extra={"unique_id": unique_id, "running": size})
        return searcher

    def get(self, unique_id: str) -> RandomSearcher:
        """Return the running searcher for ``unique_id``."""
        with self._lock:
            if unique_id not in self._searchers:
                raise KeyError(f"Unknown searcher id: {unique_id}")
            return self._searchers[unique_id]

    def find_by_id(self, search_id: str) -> list[RandomSearcher]:
        """Return running searchers sharing the cooldown identity ``search_id``."""
        return [searcher for searcher in self if searcher.id == search_id]

    def is_running(self, search_id: str) -> bool:
        return bool(self.find_by_id(search_id))

    def cancel_initiated_by(self, initiator: str) -> int:
        """Cancel every search started by ``initiator``; return how many were cancelled."""
        cancelled = 0
        for searcher in self:
            if searcher.initiator == initiator and searcher.cancel():
                cancelled += 1
        if cancelled:
            self._logger.info("searches_cancelled", extra={"initiator": initiator, "count": cancelled})
        return cancelled

    def cancel_all(self) -> int:
        cancelled = sum(1 for searcher in self if searcher.cancel())
        if cancelled:
            self._logger.info("searches_cancelled", extra={"initiator": None, "count": cancelled})
        return cancelled

    def __contains__(self, unique_id: object) -> bool:
        with self._lock:
            return unique_id in self._searchers

    def __iter__(self) -> Iterator[RandomSearcher]:
        with self._lock:
            snapshot = list(self._searchers.values())
        return iter(snapshot)

    def __len__(self) -> int:
        with self._lock:
            return len(self._searchers)


running_searchers = SearcherRegistry()
