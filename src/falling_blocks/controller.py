from __future__ import annotations

import logging
import random
from typing import Dict, Mapping, Optional

import numpy as np

from falling_blocks.game import (
    Command,
    GameConfig,
    Session,
    apply_command,
    is_game_over,
    session_from_config,
    snapshot,
)

logger = logging.getLogger(__name__)


# pygame.key.name() spellings of the arrow keys
KEY_BINDINGS: Mapping[str, Command] = {
    "left": Command.MOVE_LEFT,
    "right": Command.MOVE_RIGHT,
    "up": Command.ROTATE,
    "down": Command.DESCEND,
}


class TickScheduler:
    """Fixed-interval gravity timer, polled with the current time in ms.

    It holds no reference to any session; whoever polls it decides what the
    tick applies to.
    """

    def __init__(self, interval_ms: int = 300) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = int(interval_ms)
        self._last: Optional[int] = None
        self.running = True

    def start(self, now_ms: int) -> None:
        self._last = int(now_ms)
        self.running = True

    def stop(self) -> None:
        self.running = False

    def poll(self, now_ms: int) -> bool:
        """True at most once per elapsed interval."""
        if not self.running:
            return False
        if self._last is None:
            self._last = int(now_ms)
            return False
        if now_ms - self._last >= self.interval_ms:
            self._last = int(now_ms)
            return True
        return False


class GameController:
    """Owns the current session and routes ticks and key presses into it."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        bindings: Optional[Mapping[str, Command]] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.random_seed)
        self.bindings: Dict[str, Command] = dict(bindings or KEY_BINDINGS)
        self.scheduler = TickScheduler(self.config.tick_ms)
        self.session: Session = session_from_config(self.config, rng=self.rng)

    @property
    def game_over(self) -> bool:
        return is_game_over(self.session)

    def restart(self, now_ms: int = 0) -> None:
        self.session = session_from_config(self.config, rng=self.rng)
        self.scheduler.start(now_ms)
        logger.info("new game on a %dx%d board", self.config.rows, self.config.cols)

    def dispatch(self, command: Command) -> bool:
        """Apply `command` to the current session; True if the session changed."""
        if self.game_over:
            return False
        before = self.session
        self.session = apply_command(before, command)
        if self.game_over:
            self.scheduler.stop()
            logger.info("game over")
        return self.session is not before

    def handle_key(self, key: str) -> bool:
        command = self.bindings.get(key)
        if command is None or self.game_over:
            return False
        return self.dispatch(command)

    def update(self, now_ms: int) -> bool:
        """Fire gravity if due; the tick always acts on the session held now."""
        if self.game_over:
            self.scheduler.stop()
            return False
        if self.scheduler.poll(now_ms):
            return self.dispatch(Command.DESCEND)
        return False

    def view(self) -> np.ndarray:
        return snapshot(self.session)
