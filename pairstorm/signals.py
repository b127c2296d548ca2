"""A small observer primitive used to wire components together."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Slot = Callable[..., Any]


class Signal:
    """A list of callables that are invoked, in connection order, on emit."""

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, slot: object) -> bool:
        return slot in self._slots

    def connect(self, slot: Slot) -> Slot:
        """Attach ``slot``; returns it so the method can serve as a decorator."""
        if not callable(slot):
            raise TypeError(f"slot must be callable, got {type(slot).__name__}")
        self._slots.append(slot)
        return slot

    def disconnect(self, slot: Slot) -> None:
        """Detach every connection of ``slot``; ValueError if it was never connected."""
        if slot not in self._slots:
            raise ValueError("slot is not connected to this signal")
        self._slots = [connected for connected in self._slots if connected != slot]

    def disconnect_all(self) -> None:
        """Detach every slot."""
        self._slots.clear()

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)