"""Notifications delivered by the host on its single dispatch thread."""

from __future__ import annotations

from dataclasses import dataclass, field

from devtrace.core.models import (
    Actor,
    GameState,
    GraphicsObject,
    Projectile,
    TileItem,
)


@dataclass(frozen=True, slots=True)
class SoundEffectPlayed:
    sound_id: int
    delay: int


@dataclass(frozen=True, slots=True)
class AreaSoundEffectPlayed:
    sound_id: int
    delay: int
    range: int
    scene_x: int
    scene_y: int
    source: Actor | None = None


@dataclass(frozen=True, slots=True)
class GameStateChanged:
    game_state: GameState


@dataclass(frozen=True, slots=True)
class ItemSpawned:
    item: TileItem
    location: tuple[int, int, int] | None = None


@dataclass(frozen=True, slots=True)
class GameTick:
    """Everything the aggregator reads at a tick boundary.

    Attributes:
        tick: Server tick counter.
        game_state: Lifecycle state at capture time.
        local_actor: The operator's actor, None between world loads.
        game_cycle: Client cycle counter used by the projectile/graphic windows.
        projectiles: Live projectiles.
        graphics_objects: Live spawned graphics.
    """

    tick: int
    game_state: GameState
    local_actor: Actor | None
    game_cycle: int
    projectiles: tuple[Projectile, ...] = field(default_factory=tuple)
    graphics_objects: tuple[GraphicsObject, ...] = field(default_factory=tuple)
