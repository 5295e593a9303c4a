"""Per-category event buffers.

Notification handlers append between ticks; the tick aggregator drains
each buffer exactly once per tick. Nothing survives a drain.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from devtrace.core.models import GraphicsObject, Projectile
from devtrace.tracing.models import AreaSoundEntry, SoundEntry

T = TypeVar("T")


class EventBuffer(Generic[T]):
    """Arrival-ordered buffer with drain-and-empty semantics."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def append(self, item: T) -> None:
        self._items.append(item)

    def drain(self, keep: Callable[[T], bool] | None = None) -> list[T]:
        """Return buffered items in arrival order and empty the buffer.

        Items rejected by ``keep`` are discarded, not held for a later drain.
        """
        items = self._items
        self._items = []
        if keep is None:
            return items
        return [item for item in items if keep(item)]

    def clear(self) -> None:
        self._items = []

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class EventBuffers:
    """One buffer per captured event category."""

    sounds: EventBuffer[SoundEntry] = field(default_factory=EventBuffer)
    area_sounds: EventBuffer[AreaSoundEntry] = field(default_factory=EventBuffer)
    ground_items: EventBuffer[dict[str, Any]] = field(default_factory=EventBuffer)
    projectiles: EventBuffer[Projectile] = field(default_factory=EventBuffer)
    graphics: EventBuffer[GraphicsObject] = field(default_factory=EventBuffer)

    def all(self) -> tuple[EventBuffer[Any], ...]:
        return (self.sounds, self.area_sounds, self.ground_items, self.projectiles, self.graphics)

    def clear(self) -> None:
        for buffer in self.all():
            buffer.clear()

    def clear_sounds(self) -> None:
        """Drop pending sounds and area sounds."""
        self.sounds.clear()
        self.area_sounds.clear()

    @property
    def empty(self) -> bool:
        return all(len(buffer) == 0 for buffer in self.all())
