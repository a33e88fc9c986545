"""Unit tests for core/game.py — the session state machine."""

import random

import pytest

from core.game import Game, GameEvent
from core.session import SessionState
from settings import GRID_CELLS, INITIAL_TIME


# ---- Helpers ----

def started(seed: int = 1234) -> Game:
    game = Game(random.Random(seed))
    game.start()
    return game


def miss_index(game: Game) -> int:
    return (game.level.target_index + 1) % GRID_CELLS


def record_events(game: Game) -> list:
    events = []
    game.set_listener(lambda event, snap: events.append((event, snap)))
    return events


# ---- Idle ----

class TestIdle:
    def test_initial_snapshot(self):
        snap = Game(random.Random(0)).snapshot()
        assert snap.state is SessionState.IDLE
        assert snap.score == 0
        assert snap.time_remaining == INITIAL_TIME
        assert snap.grid == ()

    def test_commands_before_start_are_noops(self):
        game = Game(random.Random(0))
        before = game.snapshot()
        game.tick()
        game.click(0)
        assert game.update(3.0) == 0
        assert game.snapshot() == before


# ---- Scenarios ----

class TestScenarios:
    def test_start(self):
        snap = started().snapshot()
        assert snap.state is SessionState.ACTIVE
        assert snap.score == 0
        assert snap.time_remaining == 60
        assert snap.current_delta == 20.0
        assert len(snap.grid) == GRID_CELLS

    def test_correct_click(self):
        game = started()
        old = game.level
        game.click(old.target_index)
        snap = game.snapshot()
        assert snap.score == 1
        assert game.level is not old
        assert snap.current_delta == 16.5
        assert game.level.delta == 16.5
        assert snap.time_remaining == 60

    def test_wrong_click(self):
        game = started()
        level = game.level
        game.click(miss_index(game))
        snap = game.snapshot()
        assert snap.time_remaining == 57
        assert snap.score == 0
        assert snap.state is SessionState.ACTIVE
        assert game.level is level

    def test_timeout_by_ticks(self):
        game = started()
        game.session.time_remaining = 2
        game.tick()
        game.tick()
        snap = game.snapshot()
        assert snap.time_remaining == 0
        assert snap.state is SessionState.OVER
        assert not game.driver.running
        game.tick()
        assert game.snapshot() == snap

    def test_penalty_ends_session_immediately(self):
        game = started()
        game.session.time_remaining = 2
        game.click(miss_index(game))
        snap = game.snapshot()
        assert snap.time_remaining == 0
        assert snap.state is SessionState.OVER
        assert snap.grid == ()
        assert not game.driver.running

    def test_milestone(self):
        game = started()
        game.session.score = 9
        game.click(game.level.target_index)
        assert game.snapshot().score == 10
        assert game.snapshot().milestone
        game.click(game.level.target_index)
        assert game.snapshot().score == 11
        assert not game.snapshot().milestone


# ---- No-ops ----

class TestNoops:
    @pytest.mark.parametrize("index", [-1, GRID_CELLS, 100])
    def test_out_of_range_click(self, index):
        game = started()
        before = game.snapshot()
        game.click(index)
        assert game.snapshot() == before

    def test_commands_after_game_over(self):
        game = started()
        game.session.time_remaining = 1
        game.tick()
        before = game.snapshot()
        for i in range(GRID_CELLS):
            game.click(i)
        game.tick()
        assert game.update(10.0) == 0
        assert game.snapshot() == before

    def test_score_never_decreases_on_misses(self):
        game = started()
        game.click(game.level.target_index)
        for _ in range(5):
            game.click(miss_index(game))
        assert game.snapshot().score == 1
        assert game.snapshot().time_remaining == 45


# ---- Restart ----

class TestRestart:
    def test_start_after_game_over_creates_fresh_session(self):
        game = started()
        game.click(game.level.target_index)
        old = game.session
        game.session.time_remaining = 1
        game.tick()
        game.start()
        snap = game.snapshot()
        assert game.session is not old
        assert snap.state is SessionState.ACTIVE
        assert snap.score == 0
        assert snap.time_remaining == INITIAL_TIME
        assert snap.current_delta == 20.0

    def test_restart_while_active(self):
        game = started()
        game.click(miss_index(game))
        game.start()
        assert game.snapshot().time_remaining == INITIAL_TIME

    def test_restart_resets_partial_second(self):
        game = started()
        game.update(0.75)
        game.start()
        game.update(0.5)
        assert game.snapshot().time_remaining == INITIAL_TIME
        game.update(0.5)
        assert game.snapshot().time_remaining == INITIAL_TIME - 1


# ---- Tick driver integration ----

class TestUpdate:
    def test_one_tick_per_second(self):
        game = started()
        assert game.update(1.0) == 1
        assert game.update(0.5) == 0
        assert game.update(0.5) == 1
        assert game.snapshot().time_remaining == INITIAL_TIME - 2

    def test_ticks_stop_at_game_over(self):
        game = started()
        game.session.time_remaining = 1
        assert game.update(3.0) == 1
        snap = game.snapshot()
        assert snap.state is SessionState.OVER
        assert snap.time_remaining == 0


# ---- Listener ----

class TestListener:
    def test_event_sequence(self):
        game = Game(random.Random(7))
        events = record_events(game)
        game.start()
        game.click(game.level.target_index)
        game.click(miss_index(game))
        game.session.time_remaining = 1
        game.tick()
        assert [e for e, _ in events] == [
            GameEvent.STARTED,
            GameEvent.TARGET_FOUND,
            GameEvent.MISS,
            GameEvent.GAME_OVER,
        ]
        assert events[1][1].score == 1
        assert events[-1][1].state is SessionState.OVER

    def test_milestone_follows_target_found(self):
        game = started()
        events = record_events(game)
        game.session.score = 19
        game.click(game.level.target_index)
        assert [e for e, _ in events] == [GameEvent.TARGET_FOUND, GameEvent.MILESTONE]
        assert events[-1][1].milestone

    def test_miss_to_zero_emits_miss_then_game_over(self):
        game = started()
        events = record_events(game)
        game.session.time_remaining = 3
        game.click(miss_index(game))
        assert [e for e, _ in events] == [GameEvent.MISS, GameEvent.GAME_OVER]

    def test_detached_listener(self):
        game = started()
        events = record_events(game)
        game.set_listener(None)
        game.click(game.level.target_index)
        assert events == []
