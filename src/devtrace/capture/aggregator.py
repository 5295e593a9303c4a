"""Tick aggregator: merges one tick's state and buffered events into a record.

Usage:
    aggregator = TickAggregator(session, buffers)
    record = aggregator.aggregate(game_tick)

The aggregator runs every tick whether or not the session is recording,
because draining the buffers is what keeps events from leaking into later
ticks. Log lines are written as each field is observed; the record itself
is kept only if it carries something beyond tick and game state.
"""

from __future__ import annotations

import logging

from devtrace.capture.buffers import EventBuffers
from devtrace.core.events import GameTick
from devtrace.core.models import NO_ANIMATION, Actor, GraphicsObject, Projectile, WorldPoint
from devtrace.tracing.models import ActorSummary, GraphicEntry, ProjectileEntry, TickRecord
from devtrace.tracing.session import Session

logger = logging.getLogger(__name__)

DEFAULT_PROJECTILE_WINDOW = 15


class TickAggregator:
    """Builds one TickRecord per tick and appends it to the session.

    Args:
        session: Session receiving records and log lines.
        buffers: Buffers filled by notification handlers.
        projectile_window: A projectile counts as launched this tick when its
            start cycle lies in ``(cycle, cycle + projectile_window)``.
    """

    def __init__(
        self,
        session: Session,
        buffers: EventBuffers,
        projectile_window: int = DEFAULT_PROJECTILE_WINDOW,
    ) -> None:
        if projectile_window < 1:
            raise ValueError(f"projectile_window must be positive, got {projectile_window}")
        self._session = session
        self._buffers = buffers
        self._projectile_window = projectile_window
        self._last_position: WorldPoint | None = None

    def aggregate(self, tick: GameTick) -> TickRecord | None:
        """Aggregate one tick. Returns the record if it was kept, else None."""
        local = tick.local_actor
        if local is None:
            # No local actor between world loads: skip this tick, drop its events.
            logger.debug("Skipping tick %d: no local actor", tick.tick)
            self._buffers.clear()
            return None

        record = TickRecord(tick=tick.tick, game_state=tick.game_state)

        self._capture_local(local, record)
        if local.interacting is not None:
            self._capture_interacting(local.interacting, record)

        record.sounds = self._buffers.sounds.drain()
        record.area_sounds = self._buffers.area_sounds.drain()
        record.ground_items = self._buffers.ground_items.drain()

        for projectile in tick.projectiles:
            self._buffers.projectiles.append(projectile)
        for graphic in tick.graphics_objects:
            self._buffers.graphics.append(graphic)

        cycle = tick.game_cycle
        record.projectiles = [
            self._projectile_entry(p)
            for p in self._buffers.projectiles.drain(
                lambda p: cycle < p.start_cycle < cycle + self._projectile_window
            )
        ]
        record.graphics_spawned = [
            self._graphic_entry(g)
            for g in self._buffers.graphics.drain(lambda g: g.start_cycle > cycle)
        ]

        if record.has_content and self._session.append(record):
            return record
        return None

    def _capture_local(self, local: Actor, record: TickRecord) -> None:
        position = local.location
        if position != self._last_position:
            record.position = position
            self._session.log(f"POSITION {position.x}, {position.y}, {position.plane}")
        self._last_position = position

        details = []
        if local.animation != NO_ANIMATION:
            record.animation_id = local.animation
            details.append(f"animation: {local.animation}")
        if local.graphic != NO_ANIMATION:
            record.graphic_id = local.graphic
            details.append(f"gfx: {local.graphic}")
        if details:
            self._session.log(f"PLAYER '{local.name}'\t {', '.join(details)}")

    def _capture_interacting(self, target: Actor, record: TickRecord) -> None:
        summary = ActorSummary.of(target)
        record.interacting = summary

        details = []
        if summary.animation is not None:
            details.append(f"animation: {summary.animation}")
        if summary.graphic is not None:
            details.append(f"gfx: {summary.graphic}")
        if details:
            self._session.log(f"{summary.kind.name} '{summary.label}'\t{', '.join(details)}")

    def _projectile_entry(self, projectile: Projectile) -> ProjectileEntry:
        self._session.log(
            f"PROJECTILE {projectile.id}\tstartHeight: {projectile.start_height}, "
            f"endHeight: {projectile.end_height}, slope: {projectile.slope}, "
            f"duration: {projectile.remaining_cycles}, "
            f"x: {projectile.start_x}, y: {projectile.start_y}"
        )
        return ProjectileEntry(
            id=projectile.id,
            start_height=projectile.start_height,
            end_height=projectile.end_height,
            slope=projectile.slope,
            remaining_cycles=projectile.remaining_cycles,
            start_x=projectile.start_x,
            start_y=projectile.start_y,
        )

    def _graphic_entry(self, graphic: GraphicsObject) -> GraphicEntry:
        location = graphic.location
        self._session.log(
            f"GFX {graphic.id}\tlevel: {graphic.level}, start_cycle: {graphic.start_cycle}, "
            f"x: {location.x}, y: {location.y}"
        )
        return GraphicEntry(
            id=graphic.id,
            level=graphic.level,
            start_cycle=graphic.start_cycle,
            x=location.x,
            y=location.y,
        )
