"""Host-facing types: live state values, notifications and host protocols."""

from devtrace.core.events import (
    AreaSoundEffectPlayed,
    GameStateChanged,
    GameTick,
    ItemSpawned,
    SoundEffectPlayed,
)
from devtrace.core.models import (
    NO_ANIMATION,
    Actor,
    ActorKind,
    GameState,
    GraphicsObject,
    LocalPoint,
    Projectile,
    TileItem,
    WorldPoint,
)
from devtrace.core.protocol import Client, FilenamePrompt

__all__ = [
    # Models
    "NO_ANIMATION",
    "Actor",
    "ActorKind",
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
    # Protocols
    "Client",
    "FilenamePrompt",
]
