"""Game module for Falling Blocks.

Exports the core engine and supporting pieces:
- ShapeType / SHAPES: the seven-piece catalog and its rotation
- empty_grid / with_cells_set: immutable grid helpers
- is_valid_placement / clear_lines / project: placement and line-clear rules
- Session / Command / apply_command: the game state machine
- GameConfig / load_config: board and timing configuration
"""

from .config import GameConfig, load_config
from .core import (
    Command,
    Session,
    apply_command,
    is_game_over,
    new_session,
    respawn,
    session_from_config,
    snapshot,
)
from .grid import cell_at, empty_grid, format_grid, with_cells_set
from .rules import clear_lines, is_valid_placement, merge, project
from .shapes import SHAPES, ShapeType, pick_random_shape, rotate

__all__ = [
    "GameConfig",
    "load_config",
    "Command",
    "Session",
    "apply_command",
    "is_game_over",
    "new_session",
    "respawn",
    "session_from_config",
    "snapshot",
    "cell_at",
    "empty_grid",
    "format_grid",
    "with_cells_set",
    "clear_lines",
    "is_valid_placement",
    "merge",
    "project",
    "SHAPES",
    "ShapeType",
    "pick_random_shape",
    "rotate",
]
