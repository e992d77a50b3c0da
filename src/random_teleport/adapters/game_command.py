"""Boundary for game command transport integrations."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True)
class MinescriptCommand:
    """Canonical command payload directed to the game integration layer."""

    command: str


class GameCommandAdapter(Protocol):
    """Interface to send commands to a running Minecraft instance."""

    def send(self, payload: MinescriptCommand) -> str | None:
        """Dispatch a command payload and return its chat output, if any."""


class EchoGameCommandAdapter:
    """Fallback adapter used for local demos and tests; every region reads as loaded."""

    def __init__(self) -> None:
        self.sent: list[str] = []

    def send(self, payload: MinescriptCommand) -> str:
        self.sent.append(payload.command)
        if payload.command.startswith("execute if loaded"):
            return "Test passed"
        if payload.command.startswith("forceload add"):
            coords = payload.command.removeprefix("forceload add ")
            return f"Marked chunk at {coords} to be force loaded"
        return f"executed: {payload.command}"
