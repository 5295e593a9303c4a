"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from devtrace import (
    Actor,
    ActorKind,
    DevToolsPlugin,
    DevToolsSettings,
    EventBuffers,
    GameState,
    GameTick,
    LocalArtifactStore,
    Session,
    WorldPoint,
)


class FakeClient:
    """Client stand-in exposing a settable local player."""

    def __init__(self, local_player: Actor | None = None) -> None:
        self.local_player = local_player


class QueuedPrompt:
    """Prompt that answers from a queue and counts how often it was asked."""

    def __init__(self, *answers: str | None) -> None:
        self.answers = list(answers)
        self.calls = 0

    def __call__(self) -> str | None:
        self.calls += 1
        return self.answers.pop(0) if self.answers else None


@pytest.fixture
def settings(tmp_path):
    """Settings pointing every dump directory into tmp_path."""
    return DevToolsSettings(
        json_dump_dir=tmp_path / "json_dumps",
        txt_dump_dir=tmp_path / "txt_dumps",
        drop_dump_dir=tmp_path / "json_dumps",
    )


@pytest.fixture
def store(settings):
    return LocalArtifactStore(settings)


@pytest.fixture
def session():
    """Fresh recording session, already active."""
    return Session(active=True)


@pytest.fixture
def buffers():
    return EventBuffers()


@pytest.fixture
def local_player():
    return Actor(kind=ActorKind.PLAYER, name="Zezima", location=WorldPoint(3222, 3218, 0))


@pytest.fixture
def goblin():
    return Actor(kind=ActorKind.NPC, name="Goblin", npc_id=3029, location=WorldPoint(3224, 3218, 0))


@pytest.fixture
def client(local_player):
    return FakeClient(local_player)


@pytest.fixture
def prompt():
    return QueuedPrompt()


@pytest.fixture
def plugin(client, prompt, settings, store):
    """Started plugin with recording off."""
    p = DevToolsPlugin(client, prompt, settings=settings, store=store)
    p.start_up()
    yield p
    p.shut_down()


@pytest.fixture
def make_tick(local_player):
    """Factory for GameTick notifications around the local player."""

    def _make(tick: int = 1, cycle: int = 1000, **kwargs) -> GameTick:
        kwargs.setdefault("game_state", GameState.LOGGED_IN)
        kwargs.setdefault("local_actor", local_player)
        return GameTick(tick=tick, game_cycle=cycle, **kwargs)

    return _make


@pytest.fixture
def make_prompt():
    """Factory for prompts answering from a fixed queue."""
    return QueuedPrompt
