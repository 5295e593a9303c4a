"""Host-side value types seen by the recorder.

These mirror the pieces of live client state the recorder reads: actors,
projectiles, spawned graphics and the coarse lifecycle state. The host
builds them; the recorder never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

NO_ANIMATION = -1
"""Sentinel the host uses for "no animation" and "no graphic"."""


class GameState(Enum):
    """Coarse client lifecycle state with the host's numeric code."""

    UNKNOWN = -1
    STARTING = 0
    LOGIN_SCREEN = 10
    LOGIN_SCREEN_AUTHENTICATOR = 11
    LOGGING_IN = 20
    LOADING = 25
    LOGGED_IN = 30
    CONNECTION_LOST = 40
    HOPPING = 45

    @property
    def state(self) -> int:
        return self.value


class ActorKind(Enum):
    PLAYER = "player"
    NPC = "npc"


@dataclass(frozen=True, slots=True)
class WorldPoint:
    x: int
    y: int
    plane: int

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "plane": self.plane}


@dataclass(frozen=True, slots=True)
class LocalPoint:
    """Scene-local coordinates."""

    x: int
    y: int


@dataclass(eq=False)
class Actor:
    """A player or NPC as currently seen by the client.

    Equality is identity: two actors are the same only if they are the same
    object, which is how the host compares interaction targets.

    Attributes:
        kind: Player or non-player.
        name: Display name.
        location: Current world position.
        animation: Active animation id, or NO_ANIMATION.
        graphic: Active graphic id, or NO_ANIMATION.
        npc_id: Definition id for NPCs, None for players.
        interacting: The actor this one is engaged with, if any.
    """

    kind: ActorKind
    name: str
    location: WorldPoint
    animation: int = NO_ANIMATION
    graphic: int = NO_ANIMATION
    npc_id: int | None = None
    interacting: Actor | None = field(default=None, repr=False)


@dataclass(frozen=True, slots=True)
class Projectile:
    id: int
    start_height: int
    end_height: int
    slope: int
    remaining_cycles: int
    start_x: int
    start_y: int
    start_cycle: int


@dataclass(frozen=True, slots=True)
class GraphicsObject:
    id: int
    level: int
    start_cycle: int
    location: LocalPoint


@dataclass(frozen=True, slots=True)
class TileItem:
    id: int
    quantity: int
    spawn_time: int
