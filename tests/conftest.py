from __future__ import annotations

from dataclasses import replace
from typing import Optional

import numpy as np
import pytest

from falling_blocks.game import Session, new_session
from falling_blocks.game.grid import freeze


def make_session(shape: np.ndarray, x: int, y: int, grid: Optional[np.ndarray] = None,
                 rows: int = 20, cols: int = 10, seed: int = 0) -> Session:
    session = new_session(rows, cols, seed=seed)
    if grid is not None:
        session = replace(session, grid=freeze(grid))
    return replace(session, shape=shape, x=x, y=y)


@pytest.fixture
def session_factory():
    return make_session
