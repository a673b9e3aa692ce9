from __future__ import annotations

import pytest

from rush_hour_puzzle.game import LevelError, LevelLoadError, WinPhase

from conftest import H, V, car, player

CELL = 40.0


def test_load_level_emits_event_and_builds_state(game, listener):
    state = game.load_level([player(0, 2), car(3, 1, 2, V)])
    assert game.state is state
    assert state.generation == 1
    assert state.drag is None
    assert game.phase is WinPhase.NOT_WON
    assert listener.events == [("loaded", 2)]


def test_failed_load_keeps_previous_board(game, listener):
    first = game.load_level([player(0, 2)])
    game.slide("red", 2)
    with pytest.raises(LevelError):
        game.load_level([player(0, 2), car(1, 1, 2, V)])
    assert game.state is first
    assert game.board.get("red").x == 2
    assert listener.of("loaded") == [1]


def test_reload_discards_stale_drag_session(game, listener):
    old = game.load_level([player(0, 2), car(0, 0, 2, H)])
    game.pointer_down("h1", (0.0, 0.0))
    game.pointer_move((2 * CELL, 0.0), CELL)
    assert old.board.get("h1").x == 2

    new = game.load_level([player(0, 2), car(0, 0, 2, H)])
    assert old.drag is None
    assert not game.dragging

    assert game.pointer_move((4 * CELL, 0.0), CELL) is None
    assert not game.pointer_up()
    assert new.board.get("h1").x == 0
    assert old.board.get("h1").x == 2
    assert listener.of("moved") == [("h1", 2)]


def test_stale_session_cannot_touch_new_board(game):
    old = game.load_level([player(0, 2), car(0, 0, 2, H)])
    game.pointer_down("h1", (0.0, 0.0))
    new = game.load_level([player(0, 2), car(0, 0, 2, H)])
    # Driving the engine with the replaced state moves nothing anywhere
    assert game.engine.move(old, (3 * CELL, 0.0), CELL) is None
    assert new.board.get("h1").x == 0


def test_reload_cancels_pending_reveal(game, listener, scheduler):
    game.load_level([player(0, 2)])
    game.slide("red", 6)
    assert game.phase is WinPhase.WINNING

    game.load_level([player(0, 2)])
    assert game.phase is WinPhase.NOT_WON
    game.tick(5000)
    assert game.phase is WinPhase.NOT_WON
    assert listener.of("reveal") == []
    assert scheduler.pending() == 0


def test_new_level_can_be_won_after_previous_win(game, listener):
    game.load_level([player(0, 2)])
    game.slide("red", 6)
    game.tick(1000)
    assert game.phase is WinPhase.WON

    game.load_level([player(1, 2)])
    assert game.pointer_down("red", (0.0, 0.0))
    game.pointer_move((5 * CELL, 0.0), CELL)
    assert game.pointer_up()
    game.tick(3000)
    assert game.phase is WinPhase.WON
    assert listener.of("exit") == ["red", "red"]


def test_load_level_file(game, tmp_path):
    path = tmp_path / "level.json"
    path.write_text(
        '{"vehicles": [{"pos": [0, 2], "size": 2, "dir": "horizontal", "player": true},'
        ' {"pos": [3, 1], "size": 2, "dir": "vertical"}]}',
        encoding="utf-8",
    )
    state = game.load_level_file(path)
    assert [v.id for v in state.board.vehicles] == ["red", "v1"]


def test_load_level_file_failure_is_raised(game, tmp_path):
    game.load_level([player(0, 2)])
    before = game.state
    with pytest.raises(LevelLoadError):
        game.load_level_file(tmp_path / "missing.json")
    assert game.state is before


def test_get_state_before_and_after_load(game):
    assert game.get_state().shape == (6, 6)
    assert not game.get_state().any()
    game.load_level([player(0, 2)])
    assert int(game.get_state()[2, 0]) == 1
