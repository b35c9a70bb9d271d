from __future__ import annotations

import random
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Optional

import numpy as np


class ShapeType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


def _frozen(rows) -> Shape:
    shape = np.array(rows, dtype=np.int8)
    shape.flags.writeable = False
    return shape


SHAPES: Mapping[ShapeType, Shape] = MappingProxyType({
    ShapeType.I: _frozen([[1, 1, 1, 1]]),
    ShapeType.O: _frozen([[1, 1], [1, 1]]),
    ShapeType.T: _frozen([[0, 1, 0], [1, 1, 1]]),
    ShapeType.S: _frozen([[0, 1, 1], [1, 1, 0]]),
    ShapeType.Z: _frozen([[1, 1, 0], [0, 1, 1]]),
    ShapeType.J: _frozen([[1, 0, 0], [1, 1, 1]]),
    ShapeType.L: _frozen([[0, 0, 1], [1, 1, 1]]),
})


def pick_random_shape(rng: Optional[random.Random] = None) -> Shape:
    """Return one catalog shape, uniformly chosen, in its default orientation."""
    chooser = rng if rng is not None else random
    return SHAPES[chooser.choice(list(ShapeType))]


def rotate(shape: Shape) -> Shape:
    """Quarter turn: transpose, then reverse the row order.

    The footprint pivots around the top-left corner; callers keep the position
    fixed, so there is no re-centering or kick.
    """
    return _frozen(np.rot90(shape))
