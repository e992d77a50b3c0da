"""Process-wide random generator handle shared by unseeded searchers."""

from __future__ import annotations

import random
import threading

_lock = threading.Lock()
_default: random.Random | None = None


def default_random() -> random.Random:
    """Return the shared generator, creating it on first use."""
    global _default
    with _lock:
        if _default is None:
            _default = random.Random()
        return _default


def set_default_random(rng: random.Random | None) -> None:
    """Replace the shared generator. ``None`` makes the next lookup create a fresh one."""
    global _default
    with _lock:
        _default = rng
