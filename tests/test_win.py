from __future__ import annotations

from rush_hour_puzzle.game import Orientation, TickScheduler, Vehicle, WinPhase, WinSequencer

from conftest import RecordingListener, car, player, V

CELL = 40.0


def _red() -> Vehicle:
    return Vehicle("red", 6, 2, 2, Orientation.HORIZONTAL, is_player=True, can_use_exit_channel=True)


def test_sequencer_two_phase_timeline():
    scheduler = TickScheduler()
    listener = RecordingListener()
    win = WinSequencer(scheduler, listener, delay_ms=900)
    assert win.phase is WinPhase.NOT_WON and not win.won

    assert win.trigger(_red())
    assert win.phase is WinPhase.WINNING and win.won
    assert listener.events == [("exit", "red")]

    scheduler.run_due(899)
    assert win.phase is WinPhase.WINNING
    scheduler.run_due(900)
    assert win.phase is WinPhase.WON
    assert listener.events == [("exit", "red"), ("reveal", "red")]


def test_sequencer_trigger_is_idempotent():
    scheduler = TickScheduler()
    listener = RecordingListener()
    win = WinSequencer(scheduler, listener)
    assert win.trigger(_red())
    assert not win.trigger(_red())
    scheduler.advance(2000)
    assert not win.trigger(_red())
    assert listener.of("exit") == ["red"]
    assert listener.of("reveal") == ["red"]
    assert win.phase is WinPhase.WON


def test_sequencer_cancel_drops_reveal():
    scheduler = TickScheduler()
    listener = RecordingListener()
    win = WinSequencer(scheduler, listener)
    win.trigger(_red())
    win.cancel()
    scheduler.advance(2000)
    assert win.phase is WinPhase.WINNING
    assert listener.of("reveal") == []


def test_release_on_exit_wins(game, listener, scheduler):
    game.load_level([player(0, 2)])
    game.pointer_down("red", (0.0, 0.0))
    assert game.pointer_move((6 * CELL, 0.0), CELL) == 6
    assert game.phase is WinPhase.NOT_WON
    assert game.pointer_up()
    assert game.phase is WinPhase.WINNING
    assert listener.of("exit") == ["red"]

    game.tick(899)
    assert game.phase is WinPhase.WINNING
    game.tick(900)
    assert game.phase is WinPhase.WON
    assert listener.of("reveal") == ["red"]


def test_release_short_of_exit_does_not_win(game):
    game.load_level([player(0, 2)])
    game.pointer_down("red", (0.0, 0.0))
    game.pointer_move((5 * CELL, 0.0), CELL)
    assert not game.pointer_up()
    assert game.phase is WinPhase.NOT_WON


def test_drags_rejected_once_won(game, listener):
    game.load_level([player(0, 2), car(0, 0, 2, V)])
    game.slide("red", 6)
    assert game.won
    assert not game.pointer_down("v1", (0.0, 0.0))
    assert game.slide("v1", 3) is None
    assert game.board.get("v1").y == 0
    assert listener.of("exit") == ["red"]


def test_player_off_exit_row_never_wins(game):
    game.load_level([player(0, 3)])
    game.slide("red", 10)
    assert game.board.get("red").x == 4
    assert game.phase is WinPhase.NOT_WON
