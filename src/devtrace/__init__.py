"""devtrace: tick-synchronized session recorder for a live simulation client.

Usage:
    from devtrace import DevToolsPlugin, GameTick, SoundEffectPlayed

    plugin = DevToolsPlugin(client, prompt=lambda: input("File name: "))
    plugin.start_up()
    plugin.toggle_recording()

    plugin.post(SoundEffectPlayed(sound_id=10, delay=2))
    plugin.post(GameTick(tick=1, game_state=GameState.LOGGED_IN,
                         local_actor=client.local_player, game_cycle=1200))

    plugin.save_tracked_data()  # writes json_dumps/<name>.json and txt_dumps/<name>.txt
"""

__version__ = "0.1.0"

# Capture
from devtrace.capture import EventBuffer, EventBuffers, TickAggregator

# Configuration
from devtrace.config import DevToolsSettings

# Controls
from devtrace.control import DropCaptureToggle, PersistControl, RecordingToggle

# Host-facing types
from devtrace.core import (
    NO_ANIMATION,
    Actor,
    ActorKind,
    AreaSoundEffectPlayed,
    Client,
    FilenamePrompt,
    GameState,
    GameStateChanged,
    GameTick,
    GraphicsObject,
    ItemSpawned,
    LocalPoint,
    Projectile,
    SoundEffectPlayed,
    TileItem,
    WorldPoint,
)

# Persistence
from devtrace.persistence import (
    ArtifactStore,
    LocalArtifactStore,
    PersistenceError,
    SavedArtifacts,
)

# Plugin
from devtrace.plugin import DevToolsPlugin

# Records and sessions
from devtrace.tracing import (
    ActorSummary,
    AreaSoundEntry,
    DropSession,
    GraphicEntry,
    ProjectileEntry,
    Session,
    SoundEntry,
    TickRecord,
)

__all__ = [
    # Version
    "__version__",
    # Plugin
    "DevToolsPlugin",
    "DevToolsSettings",
    # Host types
    "NO_ANIMATION",
    "Actor",
    "ActorKind",
    "Client",
    "FilenamePrompt",
    "GameState",
    "GraphicsObject",
    "LocalPoint",
    "Projectile",
    "TileItem",
    "WorldPoint",
    # Events
    "AreaSoundEffectPlayed",
    "GameStateChanged",
    "GameTick",
    "ItemSpawned",
    "SoundEffectPlayed",
    # Capture
    "EventBuffer",
    "EventBuffers",
    "TickAggregator",
    # Records
    "ActorSummary",
    "AreaSoundEntry",
    "DropSession",
    "GraphicEntry",
    "ProjectileEntry",
    "Session",
    "SoundEntry",
    "TickRecord",
    # Controls
    "DropCaptureToggle",
    "PersistControl",
    "RecordingToggle",
    # Persistence
    "ArtifactStore",
    "LocalArtifactStore",
    "PersistenceError",
    "SavedArtifacts",
]
