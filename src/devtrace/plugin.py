"""DevToolsPlugin: owns the recording session and routes host notifications.

Usage:
    plugin = DevToolsPlugin(client, prompt=ask_for_filename)
    plugin.start_up()

    # Host dispatch loop, one thread
    plugin.post(SoundEffectPlayed(sound_id=10, delay=2))
    plugin.post(GameTick(...))

    # Panel buttons
    plugin.toggle_recording()
    plugin.save_tracked_data()
    plugin.toggle_drop_capture()

    plugin.shut_down()

All state is created in start_up() and dropped in shut_down(). The host
delivers notifications and button clicks on one thread, so nothing here
is locked.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable
from pathlib import Path
from typing import Any

from devtrace.capture.aggregator import TickAggregator
from devtrace.capture.buffers import EventBuffers
from devtrace.config.settings import DevToolsSettings
from devtrace.control.toggles import DropCaptureToggle, PersistControl, RecordingToggle
from devtrace.core.events import (
    AreaSoundEffectPlayed,
    GameStateChanged,
    GameTick,
    ItemSpawned,
    SoundEffectPlayed,
)
from devtrace.core.models import Actor, GameState
from devtrace.core.protocol import Client, FilenamePrompt
from devtrace.persistence.local import LocalArtifactStore, SavedArtifacts
from devtrace.persistence.protocol import ArtifactStore
from devtrace.tracing.models import ActorSummary, AreaSoundEntry, SoundEntry, TickRecord
from devtrace.tracing.session import DropSession, Session

logger = logging.getLogger(__name__)

LOADING_SEPARATOR = "---------| LOADING |----------"


def is_mutual_interaction(source: Actor | None, local: Actor | None) -> bool:
    """True if ``source`` is the local actor's target or targets the local actor."""
    if source is None or local is None:
        return False
    return local.interacting is source or source.interacting is local


class DevToolsPlugin:
    """Session recorder attached to a live client.

    Args:
        client: Read access to the live client.
        prompt: Asks the operator for a file name; None or "" cancels.
        settings: Recording configuration. Defaults to environment settings.
        store: Artifact store. Defaults to a LocalArtifactStore on ``settings``.
    """

    def __init__(
        self,
        client: Client,
        prompt: FilenamePrompt,
        settings: DevToolsSettings | None = None,
        store: ArtifactStore | None = None,
    ) -> None:
        self._client = client
        self._prompt = prompt
        self._settings = settings or DevToolsSettings()
        self._store = store or LocalArtifactStore(self._settings)

        self._session: Session | None = None
        self._drops: DropSession | None = None
        self._buffers: EventBuffers | None = None
        self._aggregator: TickAggregator | None = None
        self._recording: RecordingToggle | None = None
        self._persist: PersistControl | None = None
        self._drop_capture: DropCaptureToggle | None = None

        self._handlers: dict[type, Callable[[Any], Any]] = {
            SoundEffectPlayed: self.on_sound_effect_played,
            AreaSoundEffectPlayed: self.on_area_sound_effect_played,
            GameStateChanged: self.on_game_state_changed,
            ItemSpawned: self.on_item_spawned,
            GameTick: self.on_game_tick,
        }

    # --- Lifecycle ---

    def start_up(self) -> None:
        logging.getLogger("devtrace").setLevel(self._settings.log_level)

        self._session = Session()
        self._drops = DropSession()
        self._buffers = EventBuffers()
        self._aggregator = TickAggregator(
            self._session, self._buffers, projectile_window=self._settings.projectile_window
        )
        self._recording = RecordingToggle(self._session, self._buffers)
        self._persist = PersistControl(
            self._session, self._store, self._prompt, buffers=self._buffers
        )
        self._drop_capture = DropCaptureToggle(self._drops, self._store, self._prompt)
        logger.info("Developer tools started")

    def shut_down(self) -> None:
        self._session = None
        self._drops = None
        self._buffers = None
        self._aggregator = None
        self._recording = None
        self._persist = None
        self._drop_capture = None
        logger.info("Developer tools stopped")

    @property
    def running(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def drops(self) -> DropSession | None:
        return self._drops

    @property
    def buffers(self) -> EventBuffers | None:
        return self._buffers

    @property
    def committed(self) -> bool:
        return self._persist is not None and self._persist.committed

    @property
    def status_text(self) -> str:
        """Overlay label for the recording state."""
        if self._session is not None and self._session.active:
            return "Tracking"
        return "Not tracking"

    # --- Dispatch ---

    def post(self, event: object) -> Any:
        """Deliver one notification to its handler."""
        handler = self._handlers.get(type(event))
        if handler is None:
            warnings.warn(
                f"No handler for {type(event).__name__}; event ignored.",
                stacklevel=2,
            )
            return None
        return handler(event)

    # --- Notification handlers ---

    def on_sound_effect_played(self, event: SoundEffectPlayed) -> None:
        if self._session is None or self._buffers is None:
            return
        self._buffers.sounds.append(SoundEntry(id=event.sound_id, delay=event.delay))
        self._session.log(f"SOUND {event.sound_id}\t delay: {event.delay}")

    def on_area_sound_effect_played(self, event: AreaSoundEffectPlayed) -> None:
        if self._session is None or self._buffers is None:
            return
        details = (
            f"AREA_SOUND {event.sound_id}\t delay: {event.delay}, range: {event.range}, "
            f"sceneX: {event.scene_x}, sceneY: {event.scene_y}"
        )

        if event.source is not None and is_mutual_interaction(
            event.source, self._client.local_player
        ):
            source = ActorSummary.of(event.source).label
            self._buffers.area_sounds.append(
                AreaSoundEntry(
                    id=event.sound_id,
                    delay=event.delay,
                    range=event.range,
                    scene_x=event.scene_x,
                    scene_y=event.scene_y,
                    source=source,
                )
            )
            details += f", source: {source}"

        self._session.log(details)

    def on_game_state_changed(self, event: GameStateChanged) -> None:
        if self._session is None:
            return
        if event.game_state is GameState.LOADING:
            self._session.log(LOADING_SEPARATOR)

    def on_item_spawned(self, event: ItemSpawned) -> None:
        """Ground-item capture is disabled; spawned items are not recorded."""
        return None

    def on_game_tick(self, event: GameTick) -> TickRecord | None:
        if self._aggregator is None:
            return None
        return self._aggregator.aggregate(event)

    # --- Panel controls ---

    def toggle_recording(self) -> bool:
        if self._recording is None:
            raise RuntimeError("Plugin not started")
        return self._recording.toggle()

    def save_tracked_data(self) -> SavedArtifacts | None:
        if self._persist is None:
            raise RuntimeError("Plugin not started")
        return self._persist.invoke()

    def toggle_drop_capture(self) -> Path | None:
        if self._drop_capture is None:
            raise RuntimeError("Plugin not started")
        return self._drop_capture.toggle()
