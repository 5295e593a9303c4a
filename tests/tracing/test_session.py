"""Tests for Session.

Why these tests exist:
- Records and log lines only grow while recording
- Both sequences must always be reset together
"""

from devtrace import GameState, Session, TickRecord


def test_inactive_session_ignores_writes() -> None:
    session = Session()

    session.log("SOUND 10\t delay: 2")
    kept = session.append(TickRecord(tick=1, game_state=GameState.LOGGED_IN))

    assert not kept
    assert session.records == []
    assert session.log_lines == []


def test_active_session_appends_in_order() -> None:
    session = Session(active=True)

    session.log("first")
    session.log("second")
    session.append(TickRecord(tick=1, game_state=GameState.LOGGED_IN, animation_id=1))

    assert session.log_lines == ["first", "second"]
    assert [r.tick for r in session.records] == [1]


def test_reset_clears_both() -> None:
    session = Session(active=True)
    session.log("line")
    session.append(TickRecord(tick=1, game_state=GameState.LOGGED_IN, animation_id=1))

    session.reset()

    assert session.records == []
    assert session.log_lines == []
    assert session.active


def test_snapshot_is_detached() -> None:
    """Snapshots stay intact when the session is reset afterwards."""
    session = Session(active=True)
    session.log("line")
    session.append(TickRecord(tick=3, game_state=GameState.LOGGED_IN, graphic_id=86))

    records, lines = session.snapshot()
    session.reset()

    assert records == [{"tick": 3, "gameState": {"name": "LOGGED_IN", "state": 30}, "graphicId": 86}]
    assert lines == ["line"]
