"""Record types for captured ticks.

Each TickRecord serializes to a JSON object whose optional fields are
omitted when absent, so an empty tick serializes to just its tick number
and game state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from devtrace.core.models import NO_ANIMATION, Actor, ActorKind, GameState, WorldPoint


@dataclass(frozen=True, slots=True)
class SoundEntry:
    id: int
    delay: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "delay": self.delay}


@dataclass(frozen=True, slots=True)
class AreaSoundEntry:
    id: int
    delay: int
    range: int
    scene_x: int
    scene_y: int
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "delay": self.delay,
            "range": self.range,
            "sceneX": self.scene_x,
            "sceneY": self.scene_y,
        }
        if self.source is not None:
            result["source"] = self.source
        return result


@dataclass(frozen=True, slots=True)
class ProjectileEntry:
    id: int
    start_height: int
    end_height: int
    slope: int
    remaining_cycles: int
    start_x: int
    start_y: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "startHeight": self.start_height,
            "endHeight": self.end_height,
            "slope": self.slope,
            "remainingCycles": self.remaining_cycles,
            "startX": self.start_x,
            "startY": self.start_y,
        }


@dataclass(frozen=True, slots=True)
class GraphicEntry:
    id: int
    level: int
    start_cycle: int
    x: int
    y: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "level": self.level,
            "startCycle": self.start_cycle,
            "x": self.x,
            "y": self.y,
        }


@dataclass(frozen=True, slots=True)
class ActorSummary:
    """Tagged summary of a player or NPC.

    Players carry no numeric id. Animation and graphic are None when the
    actor shows the NO_ANIMATION sentinel.
    """

    kind: ActorKind
    name: str
    id: int | None = None
    animation: int | None = None
    graphic: int | None = None

    @classmethod
    def of(cls, actor: Actor) -> ActorSummary:
        return cls(
            kind=actor.kind,
            name=actor.name,
            id=actor.npc_id if actor.kind is ActorKind.NPC else None,
            animation=actor.animation if actor.animation != NO_ANIMATION else None,
            graphic=actor.graphic if actor.graphic != NO_ANIMATION else None,
        )

    @property
    def label(self) -> str:
        """Display form: ``name`` for players, ``name (id)`` for NPCs."""
        if self.kind is ActorKind.NPC:
            return f"{self.name} ({self.id})"
        return self.name

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"kind": self.kind.value, "name": self.name}
        if self.id is not None:
            result["id"] = self.id
        if self.animation is not None:
            result["animation"] = self.animation
        if self.graphic is not None:
            result["graphic"] = self.graphic
        return result


@dataclass(slots=True)
class TickRecord:
    """Everything observed during one tick.

    ``tick`` and ``game_state`` are always present. A record is worth
    keeping only when some other field carries data (see ``has_content``).

    Attributes:
        tick: Server tick counter at capture time.
        game_state: Lifecycle state at capture time.
        position: Local actor position, set only when it changed.
        animation_id: Local actor animation, None when idle.
        graphic_id: Local actor graphic, None when idle.
        interacting: Summary of the local actor's interaction target.
        sounds: Sounds played for the local actor this tick.
        area_sounds: Area sounds that passed the mutual-interaction filter.
        ground_items: Ground items seen this tick.
        projectiles: Projectiles launched within the capture window.
        graphics_spawned: Graphics scheduled to start after this tick.
    """

    tick: int
    game_state: GameState
    position: WorldPoint | None = None
    animation_id: int | None = None
    graphic_id: int | None = None
    interacting: ActorSummary | None = None
    sounds: list[SoundEntry] = field(default_factory=list)
    area_sounds: list[AreaSoundEntry] = field(default_factory=list)
    ground_items: list[dict[str, Any]] = field(default_factory=list)
    projectiles: list[ProjectileEntry] = field(default_factory=list)
    graphics_spawned: list[GraphicEntry] = field(default_factory=list)

    @property
    def has_content(self) -> bool:
        """True if any field beyond ``tick`` and ``game_state`` is set."""
        return len(self.to_dict()) > 2

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "tick": self.tick,
            "gameState": {"name": self.game_state.name, "state": self.game_state.state},
        }
        if self.position is not None:
            result["position"] = self.position.to_dict()
        if self.animation_id is not None:
            result["animationId"] = self.animation_id
        if self.graphic_id is not None:
            result["graphicId"] = self.graphic_id
        if self.interacting is not None:
            result["interacting"] = self.interacting.to_dict()
        if self.sounds:
            result["sounds"] = [s.to_dict() for s in self.sounds]
        if self.area_sounds:
            result["areaSounds"] = [s.to_dict() for s in self.area_sounds]
        if self.ground_items:
            result["groundItems"] = list(self.ground_items)
        if self.projectiles:
            result["projectiles"] = [p.to_dict() for p in self.projectiles]
        if self.graphics_spawned:
            result["graphicsSpawned"] = [g.to_dict() for g in self.graphics_spawned]
        return result
