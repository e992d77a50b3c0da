"""Command adapter for a live game reached through the minescript mod."""

from __future__ import annotations

import importlib
from typing import Callable

from random_teleport.adapters.game_command import MinescriptCommand

Executor = Callable[[str], object]

EXECUTOR_NAMES = ("execute", "run", "command", "chat_command")


class MinescriptUnavailableError(RuntimeError):
    """Raised when minescript is not installed or exposes no command function."""


class MinescriptGameCommandAdapter:
    """Sends region commands to the game through minescript.

    ``executor`` bypasses the module lookup, which is how the CLI and tests plug
    in other transports.
    """

    def __init__(
        self,
        *,
        command_prefix: str = "/",
        module_name: str = "minescript",
        executor: Executor | None = None,
    ) -> None:
        self.command_prefix = command_prefix
        self.module_name = module_name
        self._executor = executor or self._load_executor(module_name)

    def send(self, payload: MinescriptCommand) -> str | None:
        command = payload.command.strip()
        if self.command_prefix and not command.startswith(self.command_prefix):
            command = self.command_prefix + command

        result = self._executor(command)
        if result is None:
            return ""
        return str(result)

    @staticmethod
    def _load_executor(module_name: str) -> Executor:
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise MinescriptUnavailableError(
                f"Unable to import {module_name}. Install it and make sure Minecraft and the mod are running."
            ) from exc

        candidates = (getattr(module, attr, None) for attr in EXECUTOR_NAMES)
        executor = next((fn for fn in candidates if callable(fn)), None)
        if executor is None:
            raise MinescriptUnavailableError(
                f"{module_name} has no command function (expected one of {', '.join(EXECUTOR_NAMES)})."
            )
        return executor
