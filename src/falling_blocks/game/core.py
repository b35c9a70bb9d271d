from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Callable, Dict, Optional

import numpy as np

from .config import GameConfig
from .grid import empty_grid
from .rules import clear_lines, is_valid_placement, merge, project
from .shapes import Shape, pick_random_shape, rotate

logger = logging.getLogger(__name__)


class Command(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    ROTATE = 2
    DESCEND = 3


@dataclass(frozen=True, eq=False)
class Session:
    """One game: landed cells, the falling piece and the terminal flag.

    Sessions are never modified; every command returns a new one. `cleared` is
    the number of rows removed by the transition that produced this session.
    """

    grid: np.ndarray
    shape: Shape
    x: int
    y: int
    spawn_x: int
    spawn_y: int = 0
    game_over: bool = False
    cleared: int = 0
    rng: Optional[random.Random] = None


def new_session(
    rows: int = 20,
    cols: int = 10,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    spawn_x: Optional[int] = None,
    spawn_y: int = 0,
) -> Session:
    """Start a game on an empty rows x cols grid with a random first piece."""
    config = GameConfig(rows=rows, cols=cols, spawn_x=spawn_x, spawn_y=spawn_y, random_seed=seed)
    return session_from_config(config, rng=rng)


def session_from_config(config: GameConfig, rng: Optional[random.Random] = None) -> Session:
    rng = rng or random.Random(config.random_seed)
    grid = empty_grid(config.rows, config.cols)
    shape = pick_random_shape(rng)
    session = Session(
        grid=grid,
        shape=shape,
        x=config.spawn_column,
        y=config.spawn_y,
        spawn_x=config.spawn_column,
        spawn_y=config.spawn_y,
        rng=rng,
    )
    # A board too narrow for the first piece ends the game immediately
    if not is_valid_placement(grid, shape, session.x, session.y):
        logger.info("first piece does not fit a %dx%d board; game over", config.rows, config.cols)
        return replace(session, game_over=True)
    return session


def _unchanged(session: Session) -> Session:
    return replace(session, cleared=0) if session.cleared else session


def _shift(session: Session, dx: int, dy: int) -> Optional[Session]:
    x, y = session.x + dx, session.y + dy
    if is_valid_placement(session.grid, session.shape, x, y):
        return replace(session, x=x, y=y, cleared=0)
    return None


def move_left(session: Session) -> Session:
    return _shift(session, -1, 0) or _unchanged(session)


def move_right(session: Session) -> Session:
    return _shift(session, 1, 0) or _unchanged(session)


def rotate_piece(session: Session) -> Session:
    rotated = rotate(session.shape)
    if is_valid_placement(session.grid, rotated, session.x, session.y):
        return replace(session, shape=rotated, cleared=0)
    return _unchanged(session)


def respawn(session: Session) -> Session:
    """Put a fresh catalog piece at the spawn position.

    If it does not fit, the session turns terminal and keeps its grid, shape
    and position exactly as they were.
    """
    if session.game_over:
        return session
    shape = pick_random_shape(session.rng)
    if not is_valid_placement(session.grid, shape, session.spawn_x, session.spawn_y):
        logger.info("spawn position blocked; game over")
        return replace(session, game_over=True)
    return replace(session, shape=shape, x=session.spawn_x, y=session.spawn_y)


def land(session: Session) -> Session:
    """Merge the falling piece, clear full rows and spawn the next piece."""
    merged = merge(session.grid, session.shape, session.x, session.y)
    grid, cleared = clear_lines(merged)
    logger.debug("piece landed at (%d, %d), %d row(s) cleared", session.x, session.y, cleared)
    return respawn(replace(session, grid=grid, cleared=cleared))


def descend(session: Session) -> Session:
    return _shift(session, 0, 1) or land(session)


_HANDLERS: Dict[Command, Callable[[Session], Session]] = {
    Command.MOVE_LEFT: move_left,
    Command.MOVE_RIGHT: move_right,
    Command.ROTATE: rotate_piece,
    Command.DESCEND: descend,
}


def apply_command(session: Session, command: Command) -> Session:
    """Apply one command and return the resulting session.

    Illegal moves and rotations leave the piece where it is. A terminal
    session ignores every command.
    """
    if session.game_over:
        return session
    return _HANDLERS[Command(command)](session)


def snapshot(session: Session) -> np.ndarray:
    """Drawable grid: landed cells plus the falling piece.

    A terminal session has no falling piece; its last piece is already part
    of the grid.
    """
    if session.game_over:
        return np.array(session.grid, copy=True)
    return project(session.grid, session.shape, session.x, session.y)


def is_game_over(session: Session) -> bool:
    return bool(session.game_over)
