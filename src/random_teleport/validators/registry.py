"""Ordered, name-keyed collections of location validators."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from random_teleport.models import Location

from .base import LocationValidator

if TYPE_CHECKING:
    from random_teleport.searcher import RandomSearcher


class ValidatorRegistry:
    """Validators keyed by name, evaluated in registration order.

    Adding a validator under a name that is already present replaces the old
    entry in place, so overrides keep the position of the validator they replace.
    """

    def __init__(self, validators: Iterable[LocationValidator] = ()) -> None:
        self._validators: dict[str, LocationValidator] = {}
        for validator in validators:
            self.add(validator)

    def add(self, validator: LocationValidator) -> LocationValidator | None:
        """Register ``validator`` and return the entry it replaced, if any."""
        previous = self._validators.get(validator.name)
        self._validators[validator.name] = validator
        return previous

    def remove(self, name: str) -> LocationValidator | None:
        return self._validators.pop(name, None)

    def get(self, name: str) -> LocationValidator | None:
        return self._validators.get(name)

    def all(self) -> list[LocationValidator]:
        return list(self._validators.values())

    def names(self) -> list[str]:
        return list(self._validators)

    def copy(self) -> ValidatorRegistry:
        return ValidatorRegistry(self._validators.values())

    def merged(self, overrides: Iterable[LocationValidator]) -> ValidatorRegistry:
        """Return a copy of this registry with ``overrides`` layered on top."""
        merged = self.copy()
        for validator in overrides:
            merged.add(validator)
        return merged

    def validate(self, searcher: RandomSearcher, location: Location) -> bool:
        """Run the pipeline, stopping at the first validator that rejects."""
        for validator in self._validators.values():
            if not validator.validate(searcher, location):
                return False
        return True

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __iter__(self) -> Iterator[LocationValidator]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._validators)


_defaults_lock = threading.Lock()
_defaults: ValidatorRegistry | None = None


def default_validators() -> ValidatorRegistry:
    """Return the process-wide validators every new searcher starts from."""
    global _defaults
    with _defaults_lock:
        if _defaults is None:
            _defaults = ValidatorRegistry()
        return _defaults


def set_default_validators(registry: ValidatorRegistry | None) -> None:
    global _defaults
    with _defaults_lock:
        _defaults = registry
