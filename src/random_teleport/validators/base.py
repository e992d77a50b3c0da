"""Boundary for location acceptance predicates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol

from random_teleport.models import Location

if TYPE_CHECKING:
    from random_teleport.searcher import RandomSearcher


class LocationValidator(Protocol):
    """Decides whether a candidate location is acceptable for a search.

    Validators are called up to 256 times per attempt, so they should be cheap,
    and they must only read the searcher's state.
    """

    name: str

    def validate(self, searcher: RandomSearcher, location: Location) -> bool:
        """Return ``True`` when ``location`` may be used."""


@dataclass(frozen=True, slots=True)
class FunctionValidator:
    """Adapts a plain callable to the validator protocol."""

    name: str
    predicate: Callable[[RandomSearcher, Location], bool]

    def validate(self, searcher: RandomSearcher, location: Location) -> bool:
        return bool(self.predicate(searcher, location))
