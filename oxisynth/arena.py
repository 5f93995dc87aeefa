"""Generational arena: slot storage addressed by index and generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Index:
    """Handle to a value stored in an :class:`Arena`."""

    id: int
    generation: int


@dataclass
class _Slot(Generic[T]):
    generation: int
    value: T


class Arena(Generic[T]):
    """Stores values in reusable slots; stale handles never see new values."""

    def __init__(self) -> None:
        self._slots: list[Optional[_Slot[T]]] = []
        self._generation = 0

    def insert(self, value: T) -> Index:
        """Store ``value`` in the first free slot and return its handle."""
        slot = _Slot(self._generation, value)
        for slot_id, existing in enumerate(self._slots):
            if existing is None:
                self._slots[slot_id] = slot
                return Index(slot_id, self._generation)
        self._slots.append(slot)
        return Index(len(self._slots) - 1, self._generation)

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot is not None)

    def _lookup(self, index: Index) -> Optional[_Slot[T]]:
        if not 0 <= index.id < len(self._slots):
            return None
        slot = self._slots[index.id]
        if slot is None or slot.generation != index.generation:
            return None
        return slot

    def get(self, index: Index) -> Optional[T]:
        """Return the value behind ``index``, or None if it is gone."""
        slot = self._lookup(index)
        return None if slot is None else slot.value

    def remove(self, index: Index) -> Optional[T]:
        """Remove and return the value behind ``index``, or None if it is gone."""
        slot = self._lookup(index)
        if slot is None:
            return None
        self._slots[index.id] = None
        self._generation += 1
        return slot.value