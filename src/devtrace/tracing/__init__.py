"""Tick records and the sessions that accumulate them.

Usage:
    from devtrace.tracing import Session, TickRecord

    session = Session(active=True)
    session.append(TickRecord(tick=42, game_state=GameState.LOGGED_IN))
"""

from devtrace.tracing.models import (
    ActorSummary,
    AreaSoundEntry,
    GraphicEntry,
    ProjectileEntry,
    SoundEntry,
    TickRecord,
)
from devtrace.tracing.session import DropSession, Session

__all__ = [
    "ActorSummary",
    "AreaSoundEntry",
    "DropSession",
    "GraphicEntry",
    "ProjectileEntry",
    "Session",
    "SoundEntry",
    "TickRecord",
]
