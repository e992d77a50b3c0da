"""Exception types raised by the random location searcher."""


class RandomTeleportError(Exception):
    """Base error for everything raised by this package."""


class InvalidParameterError(RandomTeleportError, ValueError):
    """A searcher parameter was rejected at assignment time."""


class UnknownOptionError(InvalidParameterError):
    """An option token has no registered parser."""


class SearchAlreadyStartedError(RandomTeleportError):
    """``search()`` was invoked on a searcher that already started."""


class NotFoundError(RandomTeleportError):
    """No valid location was found within the attempt budget."""

    def __init__(self, what: str) -> None:
        super().__init__(f"Could not find a valid {what}")
        self.what = what


class SearchInProgressError(RandomTeleportError):
    """A search with the same cooldown id is already running."""
