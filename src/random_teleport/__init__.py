"""Asynchronous random location search with pluggable validators."""

from .exceptions import (
    InvalidParameterError,
    NotFoundError,
    RandomTeleportError,
    SearchAlreadyStartedError,
    SearchInProgressError,
    UnknownOptionError,
)
from .models import Location, SearchState
from .registry import SearcherRegistry, running_searchers
from .searcher import RandomSearcher
from .terrain import CommandTerrainResolver, InMemoryTerrainResolver, TerrainResolver

__all__ = [
    "CommandTerrainResolver",
    "InMemoryTerrainResolver",
    "InvalidParameterError",
    "Location",
    "NotFoundError",
    "RandomSearcher",
    "RandomTeleportError",
    "SearchAlreadyStartedError",
    "SearchInProgressError",
    "SearchState",
    "SearcherRegistry",
    "TerrainResolver",
    "UnknownOptionError",
    "running_searchers",
]
