"""Tests for LocalArtifactStore.

Why these tests exist:
- Session saves must never overwrite an earlier save
- The two session files pick their suffixes independently
- Drop saves deliberately overwrite
- I/O failures surface as PersistenceError
"""

import json
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from devtrace import ArtifactStore, DevToolsSettings, LocalArtifactStore, PersistenceError
from devtrace.persistence import free_path


def test_local_store_is_artifact_store(store) -> None:
    assert isinstance(store, ArtifactStore)


def test_save_creates_directories_and_files(store, settings) -> None:
    records = [{"tick": 1, "gameState": {"name": "LOGGED_IN", "state": 30}, "animationId": 808}]

    saved = store.save_session("session", records, ["SOUND 10\t delay: 2", "POSITION 1, 2, 0"])

    assert saved.json_path == settings.json_dump_dir / "session.json"
    assert saved.txt_path == settings.txt_dump_dir / "session.txt"
    assert json.loads(saved.json_path.read_text(encoding="utf-8")) == records
    assert saved.txt_path.read_text(encoding="utf-8") == "SOUND 10\t delay: 2\nPOSITION 1, 2, 0\n"


def test_json_is_pretty_and_unescaped(store) -> None:
    saved = store.save_session("names", [{"source": "Ĉapo <boss> & co"}], [])

    text = saved.json_path.read_text(encoding="utf-8")
    assert "Ĉapo <boss> & co" in text
    assert '\n  {\n    "source"' in text


def test_existing_json_gets_suffix(store, settings) -> None:
    """Only the colliding file is renamed."""
    settings.json_dump_dir.mkdir(parents=True)
    (settings.json_dump_dir / "session.json").write_text("[]")

    saved = store.save_session("session", [], [])

    assert saved.json_path.name == "session_1.json"
    assert saved.txt_path.name == "session.txt"


def test_suffixes_are_chosen_independently(store, settings) -> None:
    settings.json_dump_dir.mkdir(parents=True)
    settings.txt_dump_dir.mkdir(parents=True)
    for name in ("session.json", "session_1.json", "session_2.json"):
        (settings.json_dump_dir / name).write_text("[]")
    (settings.txt_dump_dir / "session.txt").write_text("")

    saved = store.save_session("session", [], [])

    assert saved.json_path.name == "session_3.json"
    assert saved.txt_path.name == "session_1.txt"


def test_repeated_saves_never_overwrite(store) -> None:
    first = store.save_session("run", [{"tick": 1}], ["a"])
    second = store.save_session("run", [{"tick": 2}], ["b"])

    assert first.json_path != second.json_path
    assert json.loads(first.json_path.read_text()) == [{"tick": 1}]
    assert first.txt_path.read_text() == "a\n"


@given(st.integers(min_value=0, max_value=6))
def test_free_path_skips_taken_names(tmp_path_factory, taken) -> None:
    directory = tmp_path_factory.mktemp("dumps")
    names = ["s.json"] + [f"s_{i}.json" for i in range(1, taken)]
    for name in names[:taken]:
        (directory / name).touch()

    path = free_path(directory, "s", ".json")

    assert not path.exists()
    assert path.name == ("s.json" if taken == 0 else f"s_{taken}.json")


def test_empty_base_name_rejected(store) -> None:
    with pytest.raises(ValueError):
        store.save_session("", [], [])


def test_unwritable_directory_raises_persistence_error(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = LocalArtifactStore(
        DevToolsSettings(json_dump_dir=blocker / "json", txt_dump_dir=tmp_path / "txt")
    )

    with pytest.raises(PersistenceError) as exc_info:
        store.save_session("session", [], [])

    assert exc_info.value.path == blocker / "json"


@pytest.mark.parametrize("name", ["../x", "a/b"])
def test_non_plain_names_rejected(store, settings, name) -> None:
    with pytest.raises(ValueError, match="plain file name"):
        store.save_session(name, [], [])
    with pytest.raises(ValueError, match="plain file name"):
        store.save_drops(name, [])
    assert not settings.json_dump_dir.exists()


def test_drop_save_overwrites(store, settings) -> None:
    first = store.save_drops("drops", [{"id": 995, "quantity": 10}])
    second = store.save_drops("drops", [])

    assert first == second == settings.drop_dump_dir / "drops.json"
    assert json.loads(Path(second).read_text()) == []
    assert not (settings.drop_dump_dir / "drops_1.json").exists()
