from __future__ import annotations

from rush_hour_puzzle.game import TickScheduler


def test_callbacks_run_in_due_order():
    scheduler = TickScheduler(now_ms=100)
    ran = []
    scheduler.call_later(50, lambda: ran.append("b"))
    scheduler.call_later(10, lambda: ran.append("a"))
    scheduler.call_later(50, lambda: ran.append("c"))
    assert scheduler.run_due(140) == 1
    assert ran == ["a"]
    assert scheduler.run_due(200) == 2
    assert ran == ["a", "b", "c"]


def test_cancelled_calls_never_run():
    scheduler = TickScheduler()
    ran = []
    call = scheduler.call_later(10, lambda: ran.append("x"))
    assert scheduler.pending() == 1
    call.cancel()
    assert scheduler.pending() == 0
    assert scheduler.advance(100) == 0
    assert ran == []


def test_clock_never_goes_backwards():
    scheduler = TickScheduler(now_ms=500)
    scheduler.run_due(100)
    assert scheduler.now_ms == 500
