"""Durable storage for recorded sessions."""

from devtrace.persistence.local import (
    LocalArtifactStore,
    PersistenceError,
    SavedArtifacts,
    free_path,
)
from devtrace.persistence.protocol import ArtifactStore

__all__ = [
    "ArtifactStore",
    "LocalArtifactStore",
    "PersistenceError",
    "SavedArtifacts",
    "free_path",
]
