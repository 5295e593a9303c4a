"""Operator controls for recording, saving and drop capture.

Usage:
    recording = RecordingToggle(session, buffers)
    save = PersistControl(session, store, prompt, buffers=buffers)

    recording.toggle()   # start recording (clears the session)
    save.invoke()        # prompt, write, clear
    save.invoke()        # no-op, re-arms the next save

PersistControl alternates between saving and doing nothing; see DESIGN.md.
"""

from __future__ import annotations

import logging
from pathlib import Path

from devtrace.capture.buffers import EventBuffers
from devtrace.core.protocol import FilenamePrompt
from devtrace.persistence.local import PersistenceError, SavedArtifacts
from devtrace.persistence.protocol import ArtifactStore
from devtrace.tracing.session import DropSession, Session

logger = logging.getLogger(__name__)


def _ask(prompt: FilenamePrompt) -> str | None:
    name = prompt()
    if not name:
        logger.info("Save cancelled: no file name given")
        return None
    if Path(name).name != name:
        logger.warning("Save cancelled: %r is not a plain file name", name)
        return None
    return name


class RecordingToggle:
    """Turns recording on and off.

    Every flip clears the session and any pending sounds, in both
    directions. Unsaved data is lost when recording is switched off.
    """

    def __init__(self, session: Session, buffers: EventBuffers | None = None) -> None:
        self._session = session
        self._buffers = buffers

    @property
    def active(self) -> bool:
        return self._session.active

    def toggle(self) -> bool:
        """Flip recording and clear the session. Returns the new state."""
        self._session.active = not self._session.active
        self._session.reset()
        if self._buffers is not None:
            self._buffers.clear_sounds()
        logger.info("Recording %s", "started" if self._session.active else "stopped")
        return self._session.active


class PersistControl:
    """Two-phase save control keyed by ``committed``.

    When not committed, an invocation prompts for a base name, writes the
    session, clears it and becomes committed. When committed, an
    invocation does nothing except clear ``committed``.
    """

    def __init__(
        self,
        session: Session,
        store: ArtifactStore,
        prompt: FilenamePrompt,
        buffers: EventBuffers | None = None,
    ) -> None:
        self._session = session
        self._buffers = buffers
        self._store = store
        self._prompt = prompt
        self.committed = False

    def invoke(self) -> SavedArtifacts | None:
        """Run one save-control click. Returns the written paths, if any."""
        if self.committed:
            self.committed = False
            return None

        name = _ask(self._prompt)
        if name is None:
            return None

        records, lines = self._session.snapshot()
        try:
            saved = self._store.save_session(name, records, lines)
        except PersistenceError:
            # Session and committed flag stay as they were so the save can be retried.
            logger.exception("Session save failed")
            return None

        self._session.reset()
        if self._buffers is not None:
            self._buffers.clear_sounds()
        self.committed = True
        return saved


class DropCaptureToggle:
    """Turns drop capture on and off, saving when switched off.

    The save goes to one fixed path per name and overwrites silently.
    """

    def __init__(self, drops: DropSession, store: ArtifactStore, prompt: FilenamePrompt) -> None:
        self._drops = drops
        self._store = store
        self._prompt = prompt

    @property
    def active(self) -> bool:
        return self._drops.active

    def toggle(self) -> Path | None:
        """Flip drop capture. Returns the written path when switching off."""
        self._drops.active = not self._drops.active
        if self._drops.active:
            return None

        name = _ask(self._prompt)
        if name is None:
            return None

        try:
            return self._store.save_drops(name, list(self._drops.records))
        except PersistenceError:
            logger.exception("Drop save failed")
            return None
