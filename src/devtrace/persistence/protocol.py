"""Artifact store protocol for swappable persistence backends.

Usage:
    store = LocalArtifactStore(settings)
    saved = store.save_session("session", records, lines)
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from devtrace.persistence.local import SavedArtifacts


@runtime_checkable
class ArtifactStore(Protocol):
    """Writes session snapshots to durable storage."""

    def save_session(
        self, base_name: str, records: Sequence[dict[str, Any]], lines: Sequence[str]
    ) -> SavedArtifacts:
        """Write a structured file and a text log without overwriting either.

        Raises:
            PersistenceError: If a directory or file cannot be written.
        """
        ...

    def save_drops(self, name: str, records: Sequence[dict[str, Any]]) -> Path:
        """Write drop-capture records, replacing any file of the same name.

        Raises:
            PersistenceError: If the file cannot be written.
        """
        ...
