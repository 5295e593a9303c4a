"""Interfaces the recorder expects from its host."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from devtrace.core.models import Actor


@runtime_checkable
class Client(Protocol):
    """Read access to live client state outside of tick notifications.

    Area-sound notifications carry only their source actor, so the
    recorder asks the client for the local actor to apply the
    mutual-interaction filter.
    """

    @property
    def local_player(self) -> Actor | None:
        """The operator's actor, or None between world loads."""
        ...


FilenamePrompt = Callable[[], str | None]
"""Synchronous operator prompt. Returns the entered name, or None if cancelled."""
