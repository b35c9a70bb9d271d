from __future__ import annotations

from dataclasses import replace

import numpy as np
import pytest

from falling_blocks.controller import KEY_BINDINGS, GameController, TickScheduler
from falling_blocks.game import SHAPES, Command, GameConfig, ShapeType


def test_scheduler_fires_once_per_interval():
    s = TickScheduler(300)
    s.start(0)
    assert not s.poll(299)
    assert s.poll(300)
    assert not s.poll(301)
    assert s.poll(650)


def test_scheduler_arms_on_first_poll():
    s = TickScheduler(100)
    assert not s.poll(5000)
    assert s.poll(5100)


def test_scheduler_stop():
    s = TickScheduler(100)
    s.start(0)
    s.stop()
    assert not s.poll(1000)


def test_scheduler_rejects_bad_interval():
    with pytest.raises(ValueError):
        TickScheduler(0)


def test_key_bindings_cover_four_commands():
    assert sorted(KEY_BINDINGS.values()) == sorted(Command)


@pytest.fixture
def controller():
    c = GameController(GameConfig(random_seed=5))
    c.restart(0)
    c.session = replace(c.session, shape=SHAPES[ShapeType.O], x=4, y=0)
    return c


def test_arrow_keys_drive_the_piece(controller):
    assert controller.handle_key("left")
    assert controller.session.x == 3
    assert controller.handle_key("right")
    assert controller.session.x == 4
    assert controller.handle_key("down")
    assert controller.session.y == 1
    controller.handle_key("up")
    assert controller.session.shape.shape == (2, 2)


def test_other_keys_are_ignored(controller):
    before = controller.session
    assert not controller.handle_key("space")
    assert not controller.handle_key("a")
    assert controller.session is before


def test_rejected_move_reports_no_change(controller):
    controller.session = replace(controller.session, x=0)
    assert not controller.handle_key("left")


def test_tick_acts_on_current_session(controller):
    # Swap in a new piece between ticks, as a respawn would
    controller.session = replace(controller.session, shape=SHAPES[ShapeType.I], x=2, y=7)
    assert not controller.update(299)
    assert controller.update(300)
    assert (controller.session.x, controller.session.y) == (2, 8)
    assert controller.session.shape is SHAPES[ShapeType.I]


def test_game_over_suppresses_input_and_ticks(controller):
    grid = np.zeros((20, 10), dtype=np.int8)
    grid[2:, 1:] = 1
    controller.session = replace(controller.session, grid=grid)
    controller.dispatch(Command.DESCEND)
    assert controller.game_over
    assert not controller.scheduler.running

    frozen = controller.session
    assert not controller.handle_key("left")
    assert not controller.update(10_000)
    assert not controller.dispatch(Command.DESCEND)
    assert controller.session is frozen


def test_restart_after_game_over(controller):
    controller.session = replace(controller.session, game_over=True)
    controller.restart(1000)
    assert not controller.game_over
    assert controller.scheduler.running
    assert not controller.session.grid.any()


def test_view_includes_falling_piece(controller):
    view = controller.view()
    assert np.count_nonzero(view) == 4
    assert not controller.session.grid.any()
