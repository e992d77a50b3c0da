from __future__ import annotations

import sys
import types

import pytest

from random_teleport.adapters import MinescriptCommand, MinescriptGameCommandAdapter, MinescriptUnavailableError


class _FakeMinescriptModule(types.SimpleNamespace):
    def __init__(self):
        super().__init__()
        self.calls: list[str] = []

    def execute(self, command: str) -> str:
        self.calls.append(command)
        return "Test passed" if command.startswith("/execute") else None


def test_minescript_adapter_prefixes_commands(monkeypatch) -> None:
    fake = _FakeMinescriptModule()
    monkeypatch.setitem(sys.modules, "minescript", fake)

    adapter = MinescriptGameCommandAdapter(command_prefix="/")

    assert adapter.send(MinescriptCommand(command=" execute if loaded 0 0 0")) == "Test passed"
    assert adapter.send(MinescriptCommand(command="/forceload add 0 0")) == ""
    assert fake.calls == ["/execute if loaded 0 0 0", "/forceload add 0 0"]


def test_minescript_adapter_missing_module(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "minescript", None)

    with pytest.raises(MinescriptUnavailableError, match="Unable to import"):
        MinescriptGameCommandAdapter()


def test_minescript_adapter_module_without_command_api(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "minescript", types.SimpleNamespace(version="4.0"))

    with pytest.raises(MinescriptUnavailableError, match="no command function"):
        MinescriptGameCommandAdapter()


def test_minescript_adapter_accepts_custom_executor() -> None:
    sent: list[str] = []
    adapter = MinescriptGameCommandAdapter(command_prefix="", executor=lambda command: sent.append(command) or 42)

    assert adapter.send(MinescriptCommand(command="forceload query")) == "42"
    assert sent == ["forceload query"]
